"""
JSON scene descriptions.

Format::

    {
        "player": {"radius": 0.5, "height": 2, "slope_limit": 45, ...},
        "attached": ["start"],
        "solids": [
            {"name": "start", "shape": "box", "center": [0, 0, 0],
             "size": [4, 1, 1], "position": [0, -0.5, 0],
             "rotation": [0, 0, 0], "scale": [1, 1, 1], "layer": 0,
             "enabled": true},
            {"name": "rock", "shape": "mesh", "triangles": 120}
        ]
    }
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..errors import SceneFormatError
from ..geometry.transform import trs_matrix
from ..player import PlayerParameters
from .scene_source import StaticScene
from .solids import BoxShape, MeshShape, OtherShape, Solid

logger = logging.getLogger(__name__)


@dataclass
class SceneDescription:
    scene: StaticScene
    player: Optional[PlayerParameters] = None
    attached: List[str] = field(default_factory=list)


def _vector(data: Dict[str, Any], key: str, default) -> tuple:
    value = data.get(key, default)
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneFormatError(f"'{key}' must be a list of three numbers (got {value!r})")
    try:
        return tuple(float(v) for v in value)
    except (TypeError, ValueError) as e:
        raise SceneFormatError(f"'{key}' must be a list of three numbers (got {value!r})") from e


def solid_from_dict(data: Dict[str, Any], index: int = 0) -> Solid:
    """Build one solid from its JSON description."""
    if not isinstance(data, dict):
        raise SceneFormatError(f"solid #{index} must be an object")

    name = str(data.get("name", f"solid_{index}"))
    kind = data.get("shape", "box")
    if kind == "box":
        shape = BoxShape(
            center=_vector(data, "center", (0.0, 0.0, 0.0)),
            size=_vector(data, "size", (1.0, 1.0, 1.0)),
        )
    elif kind == "mesh":
        shape = MeshShape(triangle_count=int(data.get("triangles", 0)))
    else:
        shape = OtherShape(kind_name=str(kind))

    transform = trs_matrix(
        position=_vector(data, "position", (0.0, 0.0, 0.0)),
        rotation=_vector(data, "rotation", (0.0, 0.0, 0.0)),
        scale=_vector(data, "scale", (1.0, 1.0, 1.0)),
    )
    layer = int(data.get("layer", 0))
    if not 0 <= layer < 32:
        raise SceneFormatError(f"solid {name!r}: layer must be in [0, 31] (got {layer})")

    return Solid(
        name=name,
        shape=shape,
        transform=transform,
        layer=layer,
        enabled=bool(data.get("enabled", True)),
    )


def scene_from_dict(data: Dict[str, Any]) -> SceneDescription:
    if not isinstance(data, dict):
        raise SceneFormatError("scene must be a JSON object")
    solids_data = data.get("solids", [])
    if not isinstance(solids_data, list):
        raise SceneFormatError("'solids' must be a list")

    scene = StaticScene(solid_from_dict(entry, i) for i, entry in enumerate(solids_data))

    player = None
    if "player" in data:
        if not isinstance(data["player"], dict):
            raise SceneFormatError("'player' must be an object")
        try:
            player = PlayerParameters.from_dict(data["player"])
        except (TypeError, ValueError) as e:
            raise SceneFormatError(f"invalid player block: {e}") from e

    attached = [str(name) for name in data.get("attached", [])]
    logger.debug(f"Parsed scene with {len(scene)} solids, {len(attached)} attached")
    return SceneDescription(scene=scene, player=player, attached=attached)


def load_scene(path: Union[str, Path]) -> SceneDescription:
    """Read a scene description from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SceneFormatError(f"{path}: {e}") from e
    return scene_from_dict(data)
