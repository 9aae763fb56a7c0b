"""
Point illuminance from a single floodlight.

Each fixture is modelled as a point source aimed horizontally along its
rotation (0 deg = +X) and tilted by its tilt angle. Inside the beam the
luminous intensity follows a cos^2 falloff on both axes; outside the beam
there is no light at all (hard cutoff).

    E = I(h, v) x cos(v) / d^2

Where:
    E = illuminance at the point (lux)
    I = peak x cos^2(h_rel) x cos^2(v_rel) (candela)
    v = elevation angle from the point up to the fixture
    d = slant distance between fixture and point (meters)

The cos^2 distribution is a simplified beam model, not measured photometry.
"""

from __future__ import annotations

import math

from floodlux.models.fixture import Fixture
from floodlux.models.geometry import PointLike


def _wrap_angle(rad: float) -> float:
    """Wrap an angle to [-pi, pi)."""
    return (rad + math.pi) % (2.0 * math.pi) - math.pi


def distribution_factor(angle_rad: float, half_beam_rad: float) -> float:
    """cos^2 falloff inside the half beam angle, 0 outside."""
    if half_beam_rad <= 0.0 or abs(angle_rad) > half_beam_rad:
        return 0.0
    return math.cos(angle_rad) ** 2


def luminous_intensity(fixture: Fixture, horizontal_rad: float, vertical_rad: float) -> float:
    """
    Intensity (cd) toward a direction given relative to the fixture aim.

    Args:
        fixture: Fixture with beam and photometry data
        horizontal_rad: Horizontal angle from the aim axis
        vertical_rad: Vertical angle from the aim axis
    """
    beam = fixture.specifications.beam_angle
    h = distribution_factor(horizontal_rad, beam.half_horizontal_rad)
    v = distribution_factor(vertical_rad, beam.half_vertical_rad)
    return fixture.peak_intensity * h * v


def relative_angles(fixture: Fixture, point: PointLike) -> tuple[float, float, float, float]:
    """
    Angles from fixture to point.

    Returns:
        (slant_distance, vertical_angle, relative_horizontal, relative_vertical),
        angles in radians.
    """
    pos = fixture.position
    dx = point.x - pos.x
    dy = point.y - pos.y
    planar = math.hypot(dx, dy)
    height_diff = pos.z - point.z
    slant = math.hypot(planar, height_diff)

    bearing = math.atan2(dy, dx)
    vertical = math.atan2(height_diff, planar)

    rel_h = _wrap_angle(bearing - math.radians(fixture.orientation.rotation))
    rel_v = vertical + math.radians(fixture.orientation.tilt)
    return slant, vertical, rel_h, rel_v


def contribution_at(fixture: Fixture, point: PointLike) -> float:
    """
    Direct illuminance (lux) at a point from one fixture.

    Degenerate cases (zero distance, non-finite geometry) resolve to 0.
    """
    slant, vertical, rel_h, rel_v = relative_angles(fixture, point)
    if slant == 0.0 or not math.isfinite(slant):
        return 0.0

    beam = fixture.specifications.beam_angle
    if abs(rel_h) > beam.half_horizontal_rad or abs(rel_v) > beam.half_vertical_rad:
        return 0.0

    intensity = luminous_intensity(fixture, rel_h, rel_v)
    illuminance = intensity * math.cos(vertical) / (slant * slant)
    if not math.isfinite(illuminance):
        return 0.0
    return max(0.0, illuminance)


def direct_illuminance(fixtures, point: PointLike) -> float:
    """Sum of direct contributions from all fixtures at one point."""
    return sum(contribution_at(f, point) for f in fixtures)
