from floodlux.models.geometry import (
    Area,
    IlluminanceField,
    Point3D,
    PointLike,
    SamplePoint,
    area_from_dict,
    point_from_value,
)
from floodlux.models.fixture import (
    BeamAngle,
    Dimensions,
    Fixture,
    FixtureSpecs,
    MountingHeightRange,
    Orientation,
    Photometry,
    fixture_from_dict,
)

__all__ = [
    "Point3D",
    "PointLike",
    "Area",
    "SamplePoint",
    "IlluminanceField",
    "area_from_dict",
    "point_from_value",
    "BeamAngle",
    "Dimensions",
    "Fixture",
    "FixtureSpecs",
    "MountingHeightRange",
    "Orientation",
    "Photometry",
    "fixture_from_dict",
]
