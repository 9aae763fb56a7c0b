from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import yaml

from floodlux.calculation.grid import DEFAULT_SPACING, DEFAULT_SURFACE_REFLECTANCE
from floodlux.core.errors import SceneFormatError
from floodlux.derived.contours import DEFAULT_LEVELS
from floodlux.derived.energy import DEFAULT_CO2_FACTOR, DEFAULT_ELECTRICITY_RATE, DEFAULT_OPERATING_HOURS
from floodlux.derived.spillage import DEFAULT_SPILL_THRESHOLD


@dataclass(frozen=True)
class CalculationSettings:
    grid_spacing: float = DEFAULT_SPACING
    surface_reflectance: float = DEFAULT_SURFACE_REFLECTANCE
    contour_levels: Tuple[float, ...] = DEFAULT_LEVELS
    spill_threshold: float = DEFAULT_SPILL_THRESHOLD
    boundary_step: float = 2.0
    operating_hours: float = DEFAULT_OPERATING_HOURS
    electricity_rate: float = DEFAULT_ELECTRICITY_RATE
    co2_factor: float = DEFAULT_CO2_FACTOR

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["contour_levels"] = list(self.contour_levels)
        return out


def settings_from_dict(data: Mapping[str, Any]) -> CalculationSettings:
    known = {f.name for f in fields(CalculationSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise SceneFormatError(f"Unknown settings: {', '.join(unknown)}")
    kwargs: Dict[str, Any] = {}
    try:
        for key, value in data.items():
            if key == "contour_levels":
                kwargs[key] = tuple(float(v) for v in value)
            else:
                kwargs[key] = float(value)
    except (TypeError, ValueError) as exc:
        raise SceneFormatError(f"Invalid settings value: {exc}") from exc
    settings = CalculationSettings(**kwargs)
    if settings.grid_spacing <= 0.0:
        raise SceneFormatError("grid_spacing must be > 0")
    if settings.boundary_step <= 0.0:
        raise SceneFormatError("boundary_step must be > 0")
    if not 0.0 <= settings.surface_reflectance <= 1.0:
        raise SceneFormatError("surface_reflectance must be within [0, 1]")
    levels = settings.contour_levels
    if any(v <= 0.0 for v in levels) or any(b <= a for a, b in zip(levels, levels[1:])):
        raise SceneFormatError("contour_levels must be positive and strictly increasing")
    return settings


def load_mapping(path: Path) -> Dict[str, Any]:
    """Read a JSON or YAML mapping from disk."""
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SceneFormatError(f"Could not parse {p}: {exc}") from exc
    if not isinstance(data, dict):
        raise SceneFormatError(f"Invalid file at {p}: expected mapping")
    return data


def load_settings(path: Path) -> CalculationSettings:
    return settings_from_dict(load_mapping(path))
