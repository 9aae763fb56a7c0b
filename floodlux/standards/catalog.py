"""Lighting standards catalog: standard id -> named threshold requirements."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from floodlux.core.errors import SceneFormatError, UnknownStandardError
from floodlux.settings import load_mapping


logger = logging.getLogger(__name__)

AVERAGE_ILLUMINANCE = "average_illuminance"
UNIFORMITY_RATIO = "uniformity_ratio"
VERTICAL_ILLUMINANCE = "vertical_illuminance"
COLOR_TEMPERATURE = "color_temperature"
CRI = "cri"
GLARE_RATING = "glare_rating"


@dataclass(frozen=True)
class Requirement:
    minimum: Optional[float] = None
    recommended: Optional[float] = None
    unit: str = ""
    maximum: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.minimum is not None:
            out["min"] = self.minimum
        if self.recommended is not None:
            out["recommended"] = self.recommended
        if self.maximum is not None:
            out["max"] = self.maximum
        if self.unit:
            out["unit"] = self.unit
        return out


@dataclass(frozen=True)
class Standard:
    id: str
    name: str
    requirements: Mapping[str, Requirement]
    # Reference field sizes (width, height) in meters, where the standard defines them.
    areas: Mapping[str, Tuple[float, float]] = field(default_factory=lambda: MappingProxyType({}))

    def requirement(self, key: str) -> Optional[Requirement]:
        return self.requirements.get(key)


@dataclass(frozen=True)
class StandardsCatalog:
    """Read-only mapping of standard ids to standards."""
    standards: Mapping[str, Standard]

    def __post_init__(self):
        if not isinstance(self.standards, MappingProxyType):
            object.__setattr__(self, "standards", MappingProxyType(dict(self.standards)))

    def __contains__(self, standard_id: object) -> bool:
        return standard_id in self.standards

    def __iter__(self) -> Iterator[Standard]:
        return iter(self.standards.values())

    def __len__(self) -> int:
        return len(self.standards)

    def ids(self) -> List[str]:
        return list(self.standards.keys())

    def find(self, standard_id: str) -> Optional[Standard]:
        return self.standards.get(standard_id)

    def get(self, standard_id: str) -> Standard:
        std = self.standards.get(standard_id)
        if std is None:
            raise UnknownStandardError(standard_id)
        return std


_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", str(key)).lower()


def _opt_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _requirement_from_dict(data: Mapping[str, Any]) -> Requirement:
    return Requirement(
        minimum=_opt_float(data.get("min", data.get("minimum"))),
        recommended=_opt_float(data.get("recommended")),
        unit=str(data.get("unit", "")),
        maximum=_opt_float(data.get("max", data.get("maximum"))),
    )


def standard_from_dict(data: Mapping[str, Any]) -> Standard:
    sid = str(data["id"]).strip()
    reqs = {_snake(k): _requirement_from_dict(v) for k, v in dict(data.get("requirements", {})).items()}
    areas = {
        _snake(k): (float(v["width"]), float(v["height"]))
        for k, v in dict(data.get("areas", {}) or {}).items()
    }
    return Standard(
        id=sid,
        name=str(data.get("name", sid)),
        requirements=MappingProxyType(reqs),
        areas=MappingProxyType(areas),
    )


def catalog_from_dict(data: Mapping[str, Any]) -> StandardsCatalog:
    entries = data.get("standards")
    if not isinstance(entries, list):
        raise SceneFormatError("Standards file must contain a 'standards' list")
    out: Dict[str, Standard] = {}
    try:
        for entry in entries:
            std = standard_from_dict(entry)
            if std.id in out:
                raise SceneFormatError(f"Duplicate standard id: {std.id}")
            out[std.id] = std
    except (KeyError, TypeError, ValueError) as exc:
        if isinstance(exc, SceneFormatError):
            raise
        raise SceneFormatError(f"Invalid standard record: {exc}") from exc
    return StandardsCatalog(standards=out)


def load_catalog(path: Path) -> StandardsCatalog:
    p = Path(path)
    catalog = catalog_from_dict(load_mapping(p))
    logger.debug("Loaded %d standards from %s", len(catalog), p)
    return catalog


def _data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


@lru_cache(maxsize=1)
def default_catalog() -> StandardsCatalog:
    return load_catalog(_data_dir() / "standards.json")
