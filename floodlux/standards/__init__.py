from floodlux.standards.catalog import (
    AVERAGE_ILLUMINANCE,
    COLOR_TEMPERATURE,
    CRI,
    GLARE_RATING,
    UNIFORMITY_RATIO,
    VERTICAL_ILLUMINANCE,
    Requirement,
    Standard,
    StandardsCatalog,
    catalog_from_dict,
    default_catalog,
    load_catalog,
)

__all__ = [
    "Requirement",
    "Standard",
    "StandardsCatalog",
    "catalog_from_dict",
    "default_catalog",
    "load_catalog",
    "AVERAGE_ILLUMINANCE",
    "UNIFORMITY_RATIO",
    "VERTICAL_ILLUMINANCE",
    "COLOR_TEMPERATURE",
    "CRI",
    "GLARE_RATING",
]
