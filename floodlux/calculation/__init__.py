"""
Floodlux Calculation Module

Point-by-point illuminance from floodlights and grid sampling of the
resulting field over a calculation area.
"""

from floodlux.calculation.photometric import (
    contribution_at,
    direct_illuminance,
    distribution_factor,
    luminous_intensity,
)
from floodlux.calculation.grid import (
    DEFAULT_SPACING,
    DEFAULT_SURFACE_REFLECTANCE,
    DIFFUSE_FACTOR,
    CancellationToken,
    generate_grid_points,
    point_illuminance,
    sample,
)

__all__ = [
    # Photometry
    "contribution_at",
    "direct_illuminance",
    "distribution_factor",
    "luminous_intensity",
    # Grid
    "DEFAULT_SPACING",
    "DEFAULT_SURFACE_REFLECTANCE",
    "DIFFUSE_FACTOR",
    "CancellationToken",
    "generate_grid_points",
    "point_illuminance",
    "sample",
]
