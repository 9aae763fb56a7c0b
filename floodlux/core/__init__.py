from floodlux.core.errors import (
    CalculationCancelled,
    FixtureValidationError,
    FloodluxError,
    InvalidAreaError,
    NoSuitableFixtureError,
    SceneFormatError,
    UnknownStandardError,
)

__all__ = [
    "FloodluxError",
    "InvalidAreaError",
    "UnknownStandardError",
    "NoSuitableFixtureError",
    "FixtureValidationError",
    "SceneFormatError",
    "CalculationCancelled",
]
