from __future__ import annotations

import math
from dataclasses import dataclass

from floodlux.models.fixture import Fixture


LIGHT_LOSS_FACTOR = 0.7
SPACING_TO_FOOTPRINT = 0.7
# tan() diverges at 90 deg; wider beams are treated as 150 deg
MAX_HALF_BEAM_DEG = 75.0


@dataclass(frozen=True)
class SpacingEstimate:
    spacing: float  # m between fixtures
    area: float  # m^2 one fixture can light to the target
    light_circle_diameter: float  # m, beam footprint at the mounting height


def estimate_fixture_spacing(fixture: Fixture, target_illuminance: float, mounting_height: float) -> SpacingEstimate:
    """
    Rule-of-thumb spacing from the beam footprint.

    The footprint diameter is 2 x h x tan(beam/2) using the horizontal beam
    angle; spacing is 70% of it. The half angle is capped at
    MAX_HALF_BEAM_DEG so very wide beams keep a finite footprint.
    """
    usable_lumens = fixture.lumens * LIGHT_LOSS_FACTOR
    area = usable_lumens / target_illuminance if target_illuminance > 0.0 else 0.0
    half_beam = math.radians(min(fixture.specifications.beam_angle.horizontal / 2.0, MAX_HALF_BEAM_DEG))
    diameter = 2.0 * float(mounting_height) * math.tan(half_beam)
    return SpacingEstimate(
        spacing=diameter * SPACING_TO_FOOTPRINT,
        area=area,
        light_circle_diameter=diameter,
    )
