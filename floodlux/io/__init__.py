from floodlux.io.scene import Scene, load_scene, scene_from_dict

__all__ = ["Scene", "load_scene", "scene_from_dict"]
