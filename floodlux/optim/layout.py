from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from floodlux.core.errors import NoSuitableFixtureError
from floodlux.design.spacing import SpacingEstimate, estimate_fixture_spacing
from floodlux.models.fixture import Fixture
from floodlux.models.geometry import Area, Point3D


logger = logging.getLogger(__name__)

EFFICIENCY_FACTOR = 0.7
DEFAULT_TARGET_LUX = 200.0
DEFAULT_MOUNTING_HEIGHT = 20.0

Placement = Tuple[float, float, float]
SpacingFn = Callable[[Fixture, float, float], SpacingEstimate]


@dataclass(frozen=True)
class LayoutRequirements:
    average_illuminance: float = DEFAULT_TARGET_LUX
    mounting_height: float = DEFAULT_MOUNTING_HEIGHT
    uniformity_ratio: float = 0.4  # informational, the heuristic does not optimize for it


@dataclass(frozen=True)
class LayoutPlan:
    fixture: Fixture
    count: int
    placements: List[Placement] = field(default_factory=list)
    spacing: float = 0.0
    estimated_illuminance: float = 0.0
    efficacy: float = 0.0

    def fixtures(self) -> List[Fixture]:
        """Placed copies of the selected fixture, one per placement."""
        base = self.fixture.id or "fixture"
        out: List[Fixture] = []
        for n, (x, y, z) in enumerate(self.placements, start=1):
            out.append(replace(self.fixture, id=f"{base}_{n}", position=Point3D(x, y, z)))
        return out


def requirements_from_dict(data: Mapping[str, Any]) -> LayoutRequirements:
    return LayoutRequirements(
        average_illuminance=float(data.get("average_illuminance", data.get("averageIlluminance")) or DEFAULT_TARGET_LUX),
        mounting_height=float(data.get("mounting_height", data.get("mountingHeight")) or DEFAULT_MOUNTING_HEIGHT),
        uniformity_ratio=float(data.get("uniformity_ratio", data.get("uniformityRatio")) or 0.4),
    )


def fixture_grid_positions(area: Area, count: int, z: float) -> List[Placement]:
    """
    Evenly spaced interior positions for `count` fixtures.

    The grid has cols = ceil(sqrt(count x W/H)) and rows = ceil(count/cols);
    each axis is divided into (n + 1) equal margins. Filling is row by row
    and stops after `count` positions.
    """
    if count <= 0:
        return []
    cols = int(math.ceil(math.sqrt(count * area.width / area.height)))
    rows = int(math.ceil(count / cols))
    step_x = area.width / (cols + 1)
    step_y = area.height / (rows + 1)
    out: List[Placement] = []
    for row in range(rows):
        for col in range(cols):
            if len(out) >= count:
                break
            out.append((area.x + step_x * (col + 1), area.y + step_y * (row + 1), float(z)))
    return out


def select_fixture(candidates: Sequence[Fixture], mounting_height: float) -> Fixture:
    suitable = [f for f in candidates if f.specifications.mounting_height.contains(mounting_height)]
    if not suitable:
        raise NoSuitableFixtureError(
            f"No suitable fixtures found for mounting height {mounting_height:g} m"
        )
    # max() keeps the first of equal-efficacy candidates
    return max(suitable, key=lambda f: f.efficacy)


def optimize_layout(
    area: Area,
    requirements: Union[LayoutRequirements, Mapping[str, Any], None],
    candidates: Sequence[Fixture],
    spacing_fn: Optional[SpacingFn] = None,
) -> LayoutPlan:
    """
    Greedy layout: most efficacious suitable fixture on a regular grid.

    Args:
        area: Area to light
        requirements: Target average illuminance and mounting height
        candidates: Fixture types to choose from
        spacing_fn: Spacing estimator(fixture, target_lux, mounting_height);
            defaults to the beam-footprint estimate

    Raises:
        NoSuitableFixtureError: no candidate supports the mounting height
    """
    if requirements is None:
        req = LayoutRequirements()
    elif isinstance(requirements, LayoutRequirements):
        req = requirements
    else:
        req = requirements_from_dict(requirements)
    target = req.average_illuminance or DEFAULT_TARGET_LUX
    if target < 0.0:
        raise ValueError(f"Target illuminance must be >= 0, got {target}")

    selected = select_fixture(candidates, req.mounting_height)
    required_lumens = target * area.size / EFFICIENCY_FACTOR
    count = int(math.ceil(required_lumens / selected.lumens))

    estimate = (spacing_fn or estimate_fixture_spacing)(selected, target, req.mounting_height)
    placements = fixture_grid_positions(area, count, req.mounting_height)
    logger.info(
        "Layout: %d x %s (%.0f lm/W) for %.0f lux over %.0f m^2",
        count, selected.name, selected.efficacy, target, area.size,
    )
    return LayoutPlan(
        fixture=selected,
        count=count,
        placements=placements,
        spacing=estimate.spacing,
        estimated_illuminance=target,
        efficacy=selected.efficacy,
    )
