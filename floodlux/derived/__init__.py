from floodlux.derived.contours import DEFAULT_LEVELS, Contour, contour_color, generate_contours
from floodlux.derived.energy import PowerEstimate, estimate_power
from floodlux.derived.glare import estimate_glare_rating
from floodlux.derived.spillage import (
    DEFAULT_SPILL_THRESHOLD,
    SpillagePoint,
    SpillageResult,
    boundary_points,
    evaluate_spillage,
)

__all__ = [
    "DEFAULT_LEVELS",
    "Contour",
    "contour_color",
    "generate_contours",
    "PowerEstimate",
    "estimate_power",
    "estimate_glare_rating",
    "DEFAULT_SPILL_THRESHOLD",
    "SpillagePoint",
    "SpillageResult",
    "boundary_points",
    "evaluate_spillage",
]
