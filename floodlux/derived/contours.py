from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from floodlux.models.geometry import IlluminanceField, SamplePoint


RGB = Tuple[int, int, int]

DEFAULT_LEVELS: Tuple[float, ...] = (1, 5, 10, 20, 50, 100, 200, 500)

# dark blue, blue, cyan, green, yellow, orange, red
COLOR_STOPS: Tuple[RGB, ...] = (
    (0, 0, 128),
    (0, 100, 255),
    (0, 255, 255),
    (0, 255, 0),
    (255, 255, 0),
    (255, 100, 0),
    (255, 0, 0),
)


@dataclass(frozen=True)
class Contour:
    level: float
    points: Tuple[SamplePoint, ...]
    color: RGB

    @property
    def hex_color(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.color)


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def interpolate_color(a: RGB, b: RGB, t: float) -> RGB:
    return tuple(_round_half_up(a[i] + t * (b[i] - a[i])) for i in range(3))  # type: ignore[return-value]


def contour_color(value: float, min_value: float, max_value: float) -> RGB:
    span = max_value - min_value
    if span == 0.0:
        return COLOR_STOPS[0]
    normalized = min(1.0, max(0.0, (value - min_value) / span))
    index = normalized * (len(COLOR_STOPS) - 1)
    lower = int(math.floor(index))
    upper = int(math.ceil(index))
    if lower == upper:
        return COLOR_STOPS[lower]
    return interpolate_color(COLOR_STOPS[lower], COLOR_STOPS[upper], index - lower)


def generate_contours(field: IlluminanceField, levels: Sequence[float] = DEFAULT_LEVELS) -> List[Contour]:
    """
    Isolux bands: for each level, every sample at or above it.

    Levels are processed in the order given; the color ramp spans from the
    first to the last level. Levels with no qualifying points are omitted.
    """
    levels = list(levels)
    if not levels:
        return []
    lo, hi = float(levels[0]), float(levels[-1])
    out: List[Contour] = []
    for level in levels:
        pts = tuple(p for p in field.points if p.illuminance >= level)
        if not pts:
            continue
        out.append(Contour(level=float(level), points=pts, color=contour_color(float(level), lo, hi)))
    return out
