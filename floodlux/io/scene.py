"""Scene files for the command line: fixtures, areas, boundary points, settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping

from floodlux.core.errors import SceneFormatError
from floodlux.models.fixture import Fixture, fixture_from_dict
from floodlux.models.geometry import Area, Point3D, area_from_dict, point_from_value
from floodlux.settings import CalculationSettings, load_mapping, settings_from_dict


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    fixtures: List[Fixture] = field(default_factory=list)
    areas: List[Area] = field(default_factory=list)
    boundary: List[Point3D] = field(default_factory=list)
    settings: CalculationSettings = field(default_factory=CalculationSettings)


def _list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise SceneFormatError(f"Scene '{key}' must be a list")
    return value


def scene_from_dict(data: Mapping[str, Any]) -> Scene:
    fixtures = [fixture_from_dict(f) for f in _list(data, "fixtures")]
    areas = [area_from_dict(a) for a in _list(data, "areas")]
    try:
        boundary = [point_from_value(p) for p in _list(data, "boundary")]
    except (KeyError, TypeError, ValueError) as exc:
        if isinstance(exc, SceneFormatError):
            raise
        raise SceneFormatError(f"Invalid boundary point: {exc}") from exc
    settings = settings_from_dict(data.get("settings") or {})
    return Scene(fixtures=fixtures, areas=areas, boundary=boundary, settings=settings)


def load_scene(path: Path) -> Scene:
    scene = scene_from_dict(load_mapping(path))
    logger.info(
        "Loaded scene %s: %d fixtures, %d areas, %d boundary points",
        Path(path).name, len(scene.fixtures), len(scene.areas), len(scene.boundary),
    )
    return scene
