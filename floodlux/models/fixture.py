"""
Fixture records.

A fixture is validated once, when it is built, so the calculation code can
read its beam and photometry fields without re-checking them per point.
Mappings coming from the editor may use camelCase (``beamAngle``,
``mountingHeight``, ``peakIntensity``) or snake_case keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from floodlux.core.errors import FixtureValidationError
from floodlux.models.geometry import Point3D


@dataclass(frozen=True)
class BeamAngle:
    """Full beam angles in degrees, each in (0, 360]."""
    horizontal: float
    vertical: float

    def __post_init__(self):
        for label, value in (("horizontal", self.horizontal), ("vertical", self.vertical)):
            v = float(value)
            if not math.isfinite(v) or v <= 0.0 or v > 360.0:
                raise FixtureValidationError(f"Beam angle {label} must be in (0, 360], got {value!r}")

    @property
    def half_horizontal_rad(self) -> float:
        return math.radians(self.horizontal / 2.0)

    @property
    def half_vertical_rad(self) -> float:
        return math.radians(self.vertical / 2.0)


@dataclass(frozen=True)
class MountingHeightRange:
    min: float
    max: float
    recommended: Optional[float] = None

    def __post_init__(self):
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise FixtureValidationError("Mounting height range must be finite")
        if self.min < 0.0 or self.max < self.min:
            raise FixtureValidationError(f"Invalid mounting height range: {self.min}..{self.max}")

    def contains(self, height: float) -> bool:
        return self.min <= float(height) <= self.max


@dataclass(frozen=True)
class Dimensions:
    """Housing dimensions in millimetres."""
    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0


@dataclass(frozen=True)
class FixtureSpecs:
    power: float  # W
    lumens: float
    beam_angle: BeamAngle
    mounting_height: MountingHeightRange
    efficacy: float = 0.0  # lm/W, derived from lumens/power when 0
    color_temperature: Optional[float] = None  # K
    cri: Optional[float] = None
    dimensions: Optional[Dimensions] = None

    def __post_init__(self):
        for label, value in (("power", self.power), ("lumens", self.lumens)):
            v = float(value)
            if not math.isfinite(v) or v <= 0.0:
                raise FixtureValidationError(f"Invalid {label} specification: {value!r}")
        if not self.efficacy:
            object.__setattr__(self, "efficacy", float(self.lumens) / float(self.power))
        elif float(self.efficacy) < 0.0:
            raise FixtureValidationError(f"Invalid efficacy specification: {self.efficacy!r}")


@dataclass(frozen=True)
class Photometry:
    peak_intensity: Optional[float] = None  # cd
    cutoff_angle: Optional[float] = None
    field_angle: Optional[float] = None
    distribution: Optional[str] = None


@dataclass(frozen=True)
class Orientation:
    rotation: float = 0.0  # degrees about +Z, 0 = aimed along +X
    tilt: float = 0.0  # degrees


@dataclass(frozen=True)
class Fixture:
    id: str
    name: str
    position: Point3D
    specifications: FixtureSpecs
    orientation: Orientation = field(default_factory=Orientation)
    photometry: Photometry = field(default_factory=Photometry)
    category: str = ""

    @property
    def peak_intensity(self) -> float:
        peak = self.photometry.peak_intensity
        if peak is not None and peak > 0.0:
            return float(peak)
        return float(self.specifications.lumens) / math.pi

    @property
    def power(self) -> float:
        return float(self.specifications.power)

    @property
    def lumens(self) -> float:
        return float(self.specifications.lumens)

    @property
    def efficacy(self) -> float:
        return float(self.specifications.efficacy)


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _opt_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def fixture_from_dict(data: Mapping[str, Any]) -> Fixture:
    """Build a validated Fixture from an editor/catalog mapping."""
    specs = _pick(data, "specifications", "specs")
    if not data.get("name") or not isinstance(specs, Mapping):
        raise FixtureValidationError("Fixture requires 'name' and 'specifications'")
    beam = _pick(specs, "beam_angle", "beamAngle")
    mounting = _pick(specs, "mounting_height", "mountingHeight")
    if not isinstance(beam, Mapping):
        raise FixtureValidationError("Missing required specification: beamAngle")
    if not isinstance(mounting, Mapping):
        raise FixtureValidationError("Missing required specification: mountingHeight")
    pos = _pick(data, "position", default={}) or {}
    orient = _pick(data, "orientation", default={}) or {}
    phot = _pick(data, "photometry", default={}) or {}
    dims = _pick(specs, "dimensions")

    try:
        specifications = FixtureSpecs(
            power=float(_pick(specs, "power", default=0.0)),
            lumens=float(_pick(specs, "lumens", default=0.0)),
            efficacy=float(_pick(specs, "efficacy", default=0.0)),
            beam_angle=BeamAngle(
                horizontal=float(beam["horizontal"]),
                vertical=float(beam["vertical"]),
            ),
            mounting_height=MountingHeightRange(
                min=float(mounting["min"]),
                max=float(mounting["max"]),
                recommended=_opt_float(mounting.get("recommended")),
            ),
            color_temperature=_opt_float(_pick(specs, "color_temperature", "colorTemperature")),
            cri=_opt_float(_pick(specs, "cri")),
            dimensions=(
                Dimensions(
                    width=float(dims.get("width", 0.0) or 0.0),
                    height=float(dims.get("height", 0.0) or 0.0),
                    depth=float(dims.get("depth", 0.0) or 0.0),
                )
                if isinstance(dims, Mapping)
                else None
            ),
        )
        return Fixture(
            id=str(data.get("id", "")),
            name=str(data["name"]),
            position=Point3D(
                float(pos.get("x", 0.0) or 0.0),
                float(pos.get("y", 0.0) or 0.0),
                float(pos.get("z", 0.0) or 0.0),
            ),
            specifications=specifications,
            orientation=Orientation(
                rotation=float(orient.get("rotation", 0.0) or 0.0),
                tilt=float(orient.get("tilt", 0.0) or 0.0),
            ),
            photometry=Photometry(
                peak_intensity=_opt_float(_pick(phot, "peak_intensity", "peakIntensity")),
                cutoff_angle=_opt_float(_pick(phot, "cutoff_angle", "cutoffAngle")),
                field_angle=_opt_float(_pick(phot, "field_angle", "fieldAngle")),
                distribution=_pick(phot, "distribution"),
            ),
            category=str(data.get("category", "")),
        )
    except KeyError as exc:
        raise FixtureValidationError(f"Missing required field: {exc.args[0]}") from exc
    except (TypeError, ValueError) as exc:
        if isinstance(exc, FixtureValidationError):
            raise
        raise FixtureValidationError(f"Invalid fixture record: {exc}") from exc
