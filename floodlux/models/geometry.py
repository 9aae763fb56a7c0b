from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Tuple, Union

import numpy as np

from floodlux.core.errors import InvalidAreaError, SceneFormatError


@dataclass(frozen=True)
class Point3D:
    """A point in site coordinates (meters)."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class Area:
    """
    Rectangular calculation area.

    Attributes:
        x, y: Origin corner (meters)
        width: Extent along +X (meters), must be > 0
        height: Extent along +Y (meters), must be > 0
        z: Elevation of the calculation plane (meters)
    """
    x: float
    y: float
    width: float
    height: float
    z: float = 0.0
    id: str = ""
    name: str = ""

    def __post_init__(self):
        for label, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(float(value)) or float(value) <= 0.0:
                raise InvalidAreaError(f"Area {label} must be > 0, got {value!r}")

    @property
    def size(self) -> float:
        return self.width * self.height

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def contains(self, x: float, y: float) -> bool:
        x0, y0, x1, y1 = self.bounds
        return x0 <= x <= x1 and y0 <= y <= y1


@dataclass(frozen=True)
class SamplePoint:
    x: float
    y: float
    z: float
    illuminance: float


PointLike = Union[Point3D, SamplePoint]


@dataclass(frozen=True)
class IlluminanceField:
    """Sampled illuminance over an area. Points are stored x-major."""
    points: Tuple[SamplePoint, ...]
    area: Area
    spacing: float
    nx: int = 0
    ny: int = 0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.points)

    def values(self) -> np.ndarray:
        return np.asarray([p.illuminance for p in self.points], dtype=float)

    def coordinates(self) -> np.ndarray:
        return np.asarray([(p.x, p.y, p.z) for p in self.points], dtype=float).reshape(-1, 3)

    def as_grid(self) -> np.ndarray:
        """Values reshaped to [ny, nx] for plotting."""
        if self.nx <= 0 or self.ny <= 0 or self.nx * self.ny != len(self.points):
            raise ValueError("Field does not describe a complete grid")
        # x-major storage: index = i * ny + j
        return self.values().reshape(self.nx, self.ny).T


def area_from_dict(data: Mapping[str, Any]) -> Area:
    try:
        return Area(
            x=float(data.get("x", 0.0) or 0.0),
            y=float(data.get("y", 0.0) or 0.0),
            width=float(data["width"]),
            height=float(data["height"]),
            z=float(data.get("z", 0.0) or 0.0),
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
        )
    except KeyError as exc:
        raise SceneFormatError(f"Area is missing required key: {exc.args[0]}") from exc
    except (TypeError, ValueError) as exc:
        if isinstance(exc, InvalidAreaError):
            raise
        raise SceneFormatError(f"Invalid area record: {exc}") from exc


def point_from_value(value: Any) -> Point3D:
    if isinstance(value, Point3D):
        return value
    if isinstance(value, Mapping):
        return Point3D(float(value["x"]), float(value["y"]), float(value.get("z", 0.0) or 0.0))
    seq = list(value)
    if len(seq) == 2:
        return Point3D(float(seq[0]), float(seq[1]), 0.0)
    if len(seq) == 3:
        return Point3D(float(seq[0]), float(seq[1]), float(seq[2]))
    raise SceneFormatError(f"Point must have 2 or 3 coordinates, got {len(seq)}")
