"""
Simplified glare index for an observer on site.

This is a quick screening number, not UGR or the CIE 112 GR formula: each
fixture adds luminance x sin^2(view offset) / d^2 and the sum is put on a
10*log10 scale. Use it to compare layouts against each other, not to
certify them.
"""

from __future__ import annotations

import math
from typing import Sequence

from floodlux.models.fixture import Fixture
from floodlux.models.geometry import PointLike


# cd/m^2, used when the fixture has no housing dimensions
FALLBACK_LUMINANCE = 10000.0


def fixture_luminance(fixture: Fixture) -> float:
    dims = fixture.specifications.dimensions
    if dims is None or dims.width <= 0.0 or dims.height <= 0.0:
        return FALLBACK_LUMINANCE
    return fixture.lumens / (dims.width * dims.height / 1_000_000.0)


def estimate_glare_rating(
    fixtures: Sequence[Fixture],
    observer: PointLike,
    view_direction_deg: float = 0.0,
) -> float:
    view = math.radians(view_direction_deg)
    total = 0.0
    for f in fixtures:
        dx = f.position.x - observer.x
        dy = f.position.y - observer.y
        distance = math.hypot(dx, dy)
        if distance <= 0.0:
            continue
        offset = math.atan2(dy, dx) - view
        position_index = math.sin(offset) ** 2
        total += fixture_luminance(f) * position_index / (distance * distance)
    if total <= 0.0:
        return 0.0
    return round(max(0.0, 10.0 * math.log10(total)), 1)
