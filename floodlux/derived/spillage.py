"""
Light spill (trespass) at boundary points.

Only direct light is considered here: the diffuse term used for the field
models light bouncing off the lit surface itself, not light crossing the
site boundary.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

from shapely.geometry import LinearRing

from floodlux.calculation.photometric import direct_illuminance
from floodlux.models.fixture import Fixture
from floodlux.models.geometry import Area, Point3D, PointLike


DEFAULT_SPILL_THRESHOLD = 1.0


@dataclass(frozen=True)
class SpillagePoint:
    point: Point3D
    illuminance: float


@dataclass(frozen=True)
class SpillageResult:
    spillage_points: List[SpillagePoint] = field(default_factory=list)
    max_spillage: float = 0.0
    average_spillage: float = 0.0

    @property
    def has_spillage(self) -> bool:
        return bool(self.spillage_points)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spillage_points": [
                {"x": s.point.x, "y": s.point.y, "z": s.point.z, "illuminance": s.illuminance}
                for s in self.spillage_points
            ],
            "max_spillage": self.max_spillage,
            "average_spillage": self.average_spillage,
        }


def evaluate_spillage(
    fixtures: Sequence[Fixture],
    boundary_points: Iterable[PointLike],
    threshold: float = DEFAULT_SPILL_THRESHOLD,
) -> SpillageResult:
    fixtures = list(fixtures)
    hits: List[SpillagePoint] = []
    for p in boundary_points:
        e = direct_illuminance(fixtures, p)
        if e > threshold:
            hits.append(SpillagePoint(point=Point3D(p.x, p.y, p.z), illuminance=e))
    if not hits:
        return SpillageResult()
    values = [h.illuminance for h in hits]
    return SpillageResult(
        spillage_points=hits,
        max_spillage=max(values),
        average_spillage=sum(values) / len(values),
    )


def boundary_points(area: Area, step: float = 2.0, offset: float = 0.0) -> List[Point3D]:
    """
    Points along the area perimeter, every `step` meters.

    Args:
        area: Area whose boundary is walked (counter-clockwise from the origin corner)
        step: Distance between consecutive points along the perimeter
        offset: Push the boundary outward by this distance (meters)
    """
    if step <= 0.0:
        raise ValueError("Boundary step must be > 0")
    x0, y0, x1, y1 = area.bounds
    ring = LinearRing(
        [(x0 - offset, y0 - offset), (x1 + offset, y0 - offset), (x1 + offset, y1 + offset), (x0 - offset, y1 + offset)]
    )
    n = max(1, int(math.ceil(ring.length / step - 1e-9)))
    out: List[Point3D] = []
    for i in range(n):
        d = i * step
        if d >= ring.length:
            break
        p = ring.interpolate(d)
        out.append(Point3D(float(p.x), float(p.y), area.z))
    return out
