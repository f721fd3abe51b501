"""
Scene collaborators: solids, scene enumeration and capsule sweeps.
"""

from .solids import ShapeKind, BoxShape, MeshShape, OtherShape, Solid
from .scene_source import SceneSource, StaticScene
from .sweep_service import SweepHit, SweepService
from .box_sweep_world import BoxSweepWorld
from .scene_loader import SceneDescription, load_scene, scene_from_dict

__all__ = [
    "ShapeKind",
    "BoxShape",
    "MeshShape",
    "OtherShape",
    "Solid",
    "SceneSource",
    "StaticScene",
    "SweepHit",
    "SweepService",
    "BoxSweepWorld",
    "SceneDescription",
    "load_scene",
    "scene_from_dict",
]
