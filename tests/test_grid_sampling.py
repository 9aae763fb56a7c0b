from __future__ import annotations

import pytest

from floodlux.calculation.grid import (
    CancellationToken,
    generate_grid_points,
    point_illuminance,
    sample,
)
from floodlux.calculation.photometric import direct_illuminance
from floodlux.core.errors import CalculationCancelled, InvalidAreaError
from floodlux.models import (
    Area,
    BeamAngle,
    Fixture,
    FixtureSpecs,
    MountingHeightRange,
    Orientation,
    Photometry,
    Point3D,
)


def _corner_flood() -> Fixture:
    return Fixture(
        id="corner",
        name="Corner Flood",
        position=Point3D(-2.0, -2.0, 12.0),
        specifications=FixtureSpecs(
            power=1000.0,
            lumens=140000.0,
            beam_angle=BeamAngle(horizontal=120.0, vertical=160.0),
            mounting_height=MountingHeightRange(min=10.0, max=30.0),
        ),
        orientation=Orientation(rotation=45.0, tilt=-40.0),
        photometry=Photometry(peak_intensity=92000.0),
    )


def test_grid_10x10_spacing_2_has_36_points() -> None:
    field = sample([], Area(x=0.0, y=0.0, width=10.0, height=10.0), 2.0)
    assert len(field) == 36
    assert field.nx == 6 and field.ny == 6
    xs = sorted({p.x for p in field.points})
    ys = sorted({p.y for p in field.points})
    assert xs == [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]
    assert ys == [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]


def test_grid_points_stay_inside_when_spacing_does_not_divide() -> None:
    area = Area(x=5.0, y=-3.0, width=10.0, height=7.0)
    pts = generate_grid_points(area, 3.0)
    xs = sorted({p.x for p in pts})
    ys = sorted({p.y for p in pts})
    assert xs == [5.0, 8.0, 11.0, 14.0]
    assert ys == [-3.0, 0.0, 3.0]
    assert all(area.contains(p.x, p.y) for p in pts)


def test_grid_keeps_far_edge_with_fractional_spacing() -> None:
    pts = generate_grid_points(Area(x=0.0, y=0.0, width=1.0, height=0.3), 0.1)
    xs = sorted({round(p.x, 9) for p in pts})
    ys = sorted({round(p.y, 9) for p in pts})
    assert len(xs) == 11 and xs[-1] == 1.0
    assert len(ys) == 4 and ys[-1] == 0.3


def test_points_are_x_major_at_area_elevation() -> None:
    field = sample([], Area(x=0.0, y=0.0, width=2.0, height=4.0, z=1.5), 2.0)
    coords = [(p.x, p.y) for p in field.points]
    assert coords == [(0.0, 0.0), (0.0, 2.0), (0.0, 4.0), (2.0, 0.0), (2.0, 2.0), (2.0, 4.0)]
    assert all(p.z == 1.5 for p in field.points)


@pytest.mark.parametrize("spacing", [0.0, -1.0])
def test_non_positive_spacing_rejected(spacing: float) -> None:
    with pytest.raises(InvalidAreaError):
        sample([], Area(x=0.0, y=0.0, width=10.0, height=10.0), spacing)


@pytest.mark.parametrize("width,height", [(0.0, 10.0), (10.0, -1.0)])
def test_non_positive_area_rejected(width: float, height: float) -> None:
    with pytest.raises(InvalidAreaError):
        Area(x=0.0, y=0.0, width=width, height=height)


def test_diffuse_term_is_tenth_of_reflectance() -> None:
    lum = _corner_flood()
    area = Area(x=0.0, y=0.0, width=10.0, height=10.0)
    field = sample([lum], area, 5.0)
    lit = [p for p in field.points if p.illuminance > 0.0]
    assert lit
    for p in field.points:
        direct = direct_illuminance([lum], p)
        assert abs(p.illuminance - direct * (1.0 + 0.2 * 0.1)) < 1e-9
        assert abs(p.illuminance - point_illuminance([lum], p)) < 1e-12

    no_bounce = sample([lum], area, 5.0, surface_reflectance=0.0)
    for a, b in zip(field.points, no_bounce.points):
        assert abs(a.illuminance - b.illuminance * 1.02) < 1e-9


def test_no_fixtures_gives_dark_field() -> None:
    field = sample([], Area(x=0.0, y=0.0, width=4.0, height=4.0), 1.0)
    assert all(p.illuminance == 0.0 for p in field.points)


def test_sample_does_not_mutate_inputs() -> None:
    lum = _corner_flood()
    fixtures = [lum]
    area = Area(x=0.0, y=0.0, width=10.0, height=10.0)
    sample(fixtures, area, 2.0)
    assert fixtures == [lum]
    assert lum.position == Point3D(-2.0, -2.0, 12.0)


def test_progress_reported_per_row() -> None:
    calls = []
    sample([], Area(x=0.0, y=0.0, width=10.0, height=4.0), 2.0, progress=lambda done, total: calls.append((done, total)))
    assert calls == [(i, 6) for i in range(1, 7)]


def test_cancellation_stops_sampling() -> None:
    token = CancellationToken()
    seen = []

    def on_row(done: int, total: int) -> None:
        seen.append(done)
        if done == 2:
            token.cancel()

    with pytest.raises(CalculationCancelled):
        sample([], Area(x=0.0, y=0.0, width=10.0, height=10.0), 1.0, cancel=token, progress=on_row)
    assert seen == [1, 2]
    assert token.cancelled


def test_field_as_grid_shape() -> None:
    field = sample([_corner_flood()], Area(x=0.0, y=0.0, width=10.0, height=4.0), 2.0)
    grid = field.as_grid()
    assert grid.shape == (3, 6)
    # row j, column i -> point (x_i, y_j)
    p = field.points[4 * 3 + 1]
    assert (p.x, p.y) == (8.0, 2.0)
    assert grid[1, 4] == p.illuminance
