from __future__ import annotations

from pathlib import Path

import pytest

from floodlux.core.errors import SceneFormatError
from floodlux.io.scene import load_scene, scene_from_dict
from floodlux.settings import CalculationSettings, load_settings, settings_from_dict


def test_defaults() -> None:
    cfg = CalculationSettings()
    assert cfg.grid_spacing == 2.0
    assert cfg.surface_reflectance == 0.2
    assert cfg.to_dict()["contour_levels"] == [1, 5, 10, 20, 50, 100, 200, 500]


def test_load_settings_yaml(tmp_path: Path) -> None:
    p = tmp_path / "settings.yaml"
    p.write_text("grid_spacing: 1.5\nsurface_reflectance: 0.1\ncontour_levels: [10, 100]\n", encoding="utf-8")
    cfg = load_settings(p)
    assert cfg.grid_spacing == 1.5
    assert cfg.surface_reflectance == 0.1
    assert cfg.contour_levels == (10.0, 100.0)
    assert cfg.spill_threshold == 1.0


@pytest.mark.parametrize(
    "data",
    [
        {"grid_spacng": 2.0},
        {"grid_spacing": 0.0},
        {"boundary_step": -1.0},
        {"surface_reflectance": 1.5},
        {"grid_spacing": "wide"},
        {"contour_levels": [1, 1, 5]},
        {"contour_levels": [10, 5]},
        {"contour_levels": [0, 5]},
    ],
)
def test_invalid_settings_rejected(data: dict) -> None:
    with pytest.raises(SceneFormatError):
        settings_from_dict(data)


def test_scene_from_dict() -> None:
    scene = scene_from_dict(
        {
            "fixtures": [
                {
                    "name": "Flood",
                    "specifications": {
                        "power": 800,
                        "lumens": 100000,
                        "beamAngle": {"horizontal": 40, "vertical": 30},
                        "mountingHeight": {"min": 10, "max": 25},
                    },
                }
            ],
            "areas": [{"width": 60, "height": 40}],
            "boundary": [[-2, -2], {"x": 62, "y": -2, "z": 1.5}],
            "settings": {"grid_spacing": 4},
        }
    )
    assert len(scene.fixtures) == 1
    assert scene.areas[0].size == 2400.0
    assert scene.boundary[1].z == 1.5
    assert scene.settings.grid_spacing == 4.0


def test_load_scene_rejects_bad_files(tmp_path: Path) -> None:
    p = tmp_path / "scene.yaml"
    p.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(SceneFormatError):
        load_scene(p)
    p.write_text("areas: {width: 10}\n", encoding="utf-8")
    with pytest.raises(SceneFormatError):
        load_scene(p)
