from __future__ import annotations

import math

import pytest

from floodlux.core.errors import NoSuitableFixtureError
from floodlux.design.spacing import SpacingEstimate, estimate_fixture_spacing
from floodlux.models import Area, BeamAngle, Fixture, FixtureSpecs, MountingHeightRange, Point3D
from floodlux.optim.layout import (
    LayoutRequirements,
    fixture_grid_positions,
    optimize_layout,
    select_fixture,
)


def _fixture(fid: str, power: float, lumens: float, hmin: float = 15.0, hmax: float = 35.0) -> Fixture:
    return Fixture(
        id=fid,
        name=fid.upper(),
        position=Point3D(0.0, 0.0, 0.0),
        specifications=FixtureSpecs(
            power=power,
            lumens=lumens,
            beam_angle=BeamAngle(horizontal=60.0, vertical=40.0),
            mounting_height=MountingHeightRange(min=hmin, max=hmax),
        ),
    )


def test_no_fixture_for_mounting_height() -> None:
    low = _fixture("low", 500.0, 60000.0, hmin=4.0, hmax=12.0)
    with pytest.raises(NoSuitableFixtureError):
        optimize_layout(Area(x=0.0, y=0.0, width=50.0, height=30.0), {"mountingHeight": 20.0}, [low])


def test_selects_highest_efficacy_suitable_fixture() -> None:
    a = _fixture("a", 2000.0, 240000.0)  # 120 lm/W
    b = _fixture("b", 2000.0, 280000.0)  # 140 lm/W
    c = _fixture("c", 1000.0, 160000.0, hmin=4.0, hmax=12.0)  # 160 lm/W, too low
    assert select_fixture([a, b, c], 20.0).id == "b"
    # ties keep the first candidate
    b2 = _fixture("b2", 1000.0, 140000.0)
    assert select_fixture([b, b2], 20.0).id == "b"
    # range bounds are inclusive
    assert select_fixture([c], 12.0).id == "c"


def test_layout_count_and_grid() -> None:
    area = Area(x=0.0, y=0.0, width=100.0, height=50.0)
    lum = _fixture("hp", 2000.0, 280000.0)
    plan = optimize_layout(area, LayoutRequirements(average_illuminance=200.0, mounting_height=20.0), [lum])
    # 200 * 5000 / 0.7 / 280000 = 5.1
    assert plan.count == 6
    assert len(plan.placements) == 6
    # cols = ceil(sqrt(12)) = 4, rows = 2
    step_y = 50.0 / 3.0
    expected = [
        (20.0, step_y, 20.0),
        (40.0, step_y, 20.0),
        (60.0, step_y, 20.0),
        (80.0, step_y, 20.0),
        (20.0, 2.0 * step_y, 20.0),
        (40.0, 2.0 * step_y, 20.0),
    ]
    for got, want in zip(plan.placements, expected):
        assert all(abs(g - w) < 1e-9 for g, w in zip(got, want))
    assert plan.estimated_illuminance == 200.0
    assert plan.efficacy == 140.0
    assert plan.fixture.id == "hp"


def test_default_spacing_uses_beam_footprint() -> None:
    lum = _fixture("hp", 2000.0, 280000.0)
    plan = optimize_layout(Area(x=0.0, y=0.0, width=100.0, height=50.0), None, [lum])
    expected = 0.7 * 2.0 * 20.0 * math.tan(math.radians(30.0))
    assert abs(plan.spacing - expected) < 1e-9
    est = estimate_fixture_spacing(lum, 200.0, 20.0)
    assert abs(est.area - 280000.0 * 0.7 / 200.0) < 1e-9
    assert abs(est.light_circle_diameter - expected / 0.7) < 1e-9


def test_injected_spacing_function() -> None:
    calls = []

    def fixed(fixture: Fixture, target: float, height: float) -> SpacingEstimate:
        calls.append((fixture.id, target, height))
        return SpacingEstimate(spacing=12.5, area=0.0, light_circle_diameter=0.0)

    lum = _fixture("hp", 2000.0, 280000.0)
    plan = optimize_layout(
        Area(x=0.0, y=0.0, width=100.0, height=50.0),
        {"averageIlluminance": 300.0, "mountingHeight": 25.0},
        [lum],
        spacing_fn=fixed,
    )
    assert plan.spacing == 12.5
    assert calls == [("hp", 300.0, 25.0)]


def test_placed_fixtures_are_copies() -> None:
    lum = _fixture("hp", 2000.0, 280000.0)
    plan = optimize_layout(Area(x=10.0, y=5.0, width=40.0, height=40.0), None, [lum])
    placed = plan.fixtures()
    assert len(placed) == plan.count
    assert [f.id for f in placed][:2] == ["hp_1", "hp_2"]
    assert all(f.position.z == 20.0 for f in placed)
    assert lum.position == Point3D(0.0, 0.0, 0.0)


def test_grid_positions_fill_rows_and_stop_at_count() -> None:
    pts = fixture_grid_positions(Area(x=0.0, y=0.0, width=30.0, height=30.0), 3, 15.0)
    # cols = ceil(sqrt(3)) = 2, rows = 2, last row half full
    assert pts == [(10.0, 10.0, 15.0), (20.0, 10.0, 15.0), (10.0, 20.0, 15.0)]
    assert fixture_grid_positions(Area(x=0.0, y=0.0, width=1.0, height=1.0), 0, 10.0) == []


@pytest.mark.parametrize("beam", [150.0, 180.0, 240.0, 360.0])
def test_wide_beam_spacing_stays_finite(beam: float) -> None:
    lum = Fixture(
        id="wide",
        name="Wide Flood",
        position=Point3D(0.0, 0.0, 0.0),
        specifications=FixtureSpecs(
            power=1000.0,
            lumens=120000.0,
            beam_angle=BeamAngle(horizontal=beam, vertical=60.0),
            mounting_height=MountingHeightRange(min=10.0, max=30.0),
        ),
    )
    est = estimate_fixture_spacing(lum, 200.0, 20.0)
    expected = 0.7 * 2.0 * 20.0 * math.tan(math.radians(75.0))
    assert math.isfinite(est.spacing)
    assert abs(est.spacing - expected) < 1e-9
