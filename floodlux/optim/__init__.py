from floodlux.optim.layout import (
    EFFICIENCY_FACTOR,
    LayoutPlan,
    LayoutRequirements,
    fixture_grid_positions,
    optimize_layout,
    requirements_from_dict,
    select_fixture,
)

__all__ = [
    "EFFICIENCY_FACTOR",
    "LayoutPlan",
    "LayoutRequirements",
    "fixture_grid_positions",
    "optimize_layout",
    "requirements_from_dict",
    "select_fixture",
]
