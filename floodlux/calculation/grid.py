"""
Grid sampling of the illuminance field over a rectangular area.

The grid is closed: both edges of the area are sampled when the extent is
a multiple of the spacing. Each point receives the direct contribution of
every fixture plus a coarse diffuse term (direct x reflectance x 0.1), a
legacy heuristic rather than an inter-reflection model.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Callable, List, Optional, Sequence

from floodlux.calculation.photometric import direct_illuminance
from floodlux.core.errors import CalculationCancelled, InvalidAreaError
from floodlux.models.fixture import Fixture
from floodlux.models.geometry import Area, IlluminanceField, Point3D, PointLike, SamplePoint


logger = logging.getLogger(__name__)

DEFAULT_SPACING = 2.0
DEFAULT_SURFACE_REFLECTANCE = 0.2
DIFFUSE_FACTOR = 0.1

# Tolerance for keeping the far edge when extent/spacing is integral.
_EDGE_EPS = 1e-9

ProgressCallback = Callable[[int, int], None]


class CancellationToken:
    """Cooperative cancellation flag, safe to set from another thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise CalculationCancelled("Calculation cancelled")


def validate_grid(area: Area, spacing: float) -> None:
    for label, value in (("width", area.width), ("height", area.height), ("spacing", spacing)):
        v = float(value)
        if not math.isfinite(v) or v <= 0.0:
            raise InvalidAreaError(f"Grid {label} must be > 0, got {value!r}")


def axis_coordinates(start: float, extent: float, spacing: float) -> List[float]:
    n = int(math.floor(extent / spacing + _EDGE_EPS))
    end = start + extent
    return [min(start + i * spacing, end) for i in range(n + 1)]


def generate_grid_points(area: Area, spacing: float) -> List[Point3D]:
    """All grid points, x-major (outer loop over x)."""
    validate_grid(area, spacing)
    xs = axis_coordinates(area.x, area.width, spacing)
    ys = axis_coordinates(area.y, area.height, spacing)
    return [Point3D(x, y, area.z) for x in xs for y in ys]


def point_illuminance(
    fixtures: Sequence[Fixture],
    point: PointLike,
    surface_reflectance: float = DEFAULT_SURFACE_REFLECTANCE,
) -> float:
    """Direct illuminance at a point plus the diffuse correction."""
    direct = direct_illuminance(fixtures, point)
    reflected = direct * surface_reflectance * DIFFUSE_FACTOR
    return max(0.0, direct + reflected)


def sample(
    fixtures: Sequence[Fixture],
    area: Area,
    spacing: float = DEFAULT_SPACING,
    *,
    surface_reflectance: float = DEFAULT_SURFACE_REFLECTANCE,
    cancel: Optional[CancellationToken] = None,
    progress: Optional[ProgressCallback] = None,
) -> IlluminanceField:
    """
    Sample the illuminance field of a set of fixtures over an area.

    Args:
        fixtures: Fixtures contributing light
        area: Rectangular calculation area
        spacing: Grid step on both axes (meters)
        surface_reflectance: Ground reflectance for the diffuse term
        cancel: Optional token, polled once per grid row
        progress: Optional callback(rows_done, rows_total)

    Returns:
        IlluminanceField with points in x-major order

    Raises:
        InvalidAreaError: width, height or spacing is not > 0
        CalculationCancelled: the token was set during sampling
    """
    validate_grid(area, spacing)
    xs = axis_coordinates(area.x, area.width, spacing)
    ys = axis_coordinates(area.y, area.height, spacing)
    fixtures = list(fixtures)
    logger.debug(
        "Sampling %dx%d grid (%d points) with %d fixtures",
        len(xs), len(ys), len(xs) * len(ys), len(fixtures),
    )

    points: List[SamplePoint] = []
    for row, x in enumerate(xs):
        if cancel is not None and cancel.cancelled:
            logger.info("Grid sampling cancelled after %d of %d rows", row, len(xs))
            cancel.raise_if_cancelled()
        for y in ys:
            p = Point3D(x, y, area.z)
            points.append(SamplePoint(x, y, area.z, point_illuminance(fixtures, p, surface_reflectance)))
        if progress is not None:
            progress(row + 1, len(xs))

    return IlluminanceField(points=tuple(points), area=area, spacing=float(spacing), nx=len(xs), ny=len(ys))
