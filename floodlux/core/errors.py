from __future__ import annotations


class FloodluxError(Exception):
    pass


class InvalidAreaError(FloodluxError, ValueError):
    """Area width/height or grid spacing is not strictly positive."""


class UnknownStandardError(FloodluxError, KeyError):
    def __init__(self, standard_id: str):
        super().__init__(standard_id)
        self.standard_id = standard_id

    def __str__(self) -> str:
        return f"Unknown standard: {self.standard_id}"


class NoSuitableFixtureError(FloodluxError, ValueError):
    pass


class FixtureValidationError(FloodluxError, ValueError):
    pass


class SceneFormatError(FloodluxError, ValueError):
    pass


class CalculationCancelled(FloodluxError):
    pass
