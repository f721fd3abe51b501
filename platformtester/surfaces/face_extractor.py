"""
Slope classification of box faces.

Each box has six sides. Sides facing along the depth axis (z) are the
front/back of the 2.5-D scene and are never walkable. The remaining
sides are kept when their elevation angle is within the slope limit,
measured from either winding, and opposite sides of the same plane pair
are reduced to the upper one.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np

from ..constants.player_constants import (
    BOX_SIDE_DIRECTIONS,
    BOX_SIDE_EXTENT_AXES,
    OPPOSITE_SIDE_OFFSET,
)
from ..scene.solids import Solid
from .face import Face

logger = logging.getLogger(__name__)


class ExtractionStatus(Enum):
    OK = "ok"
    UNSUPPORTED_SHAPE = "unsupported_shape"


@dataclass
class ExtractionResult:
    status: ExtractionStatus
    faces: List[Face] = field(default_factory=list)
    message: str = ""

    @property
    def supported(self) -> bool:
        return self.status is ExtractionStatus.OK


def elevation_angle(dx: float, dy: float) -> float:
    """
    Elevation angle of the surface whose outward normal is (dx, dy).

    Returns:
        Angle in radians, normalized into (-pi, pi]
    """
    angle = math.atan2(dy, dx) - math.pi / 2.0
    if angle <= -math.pi:
        angle += 2.0 * math.pi
    return angle


def is_walkable_angle(angle: float, slope_limit: float) -> bool:
    """
    Check an elevation angle (radians) against the slope limit (radians).

    Angles within the limit of +-pi are accepted too, so a side reached
    from the opposite winding classifies the same as its partner.
    """
    if -slope_limit <= angle <= slope_limit:
        return True
    return angle >= math.pi - slope_limit or angle <= -math.pi + slope_limit


def _side_extent(solid: Solid, side: int, world_scale: np.ndarray) -> float:
    axis = BOX_SIDE_EXTENT_AXES[side]
    return float(abs(solid.shape.size[axis]) * world_scale[axis])


def extract_faces(solid: Solid, slope_limit: float, owner: Optional[object] = None) -> ExtractionResult:
    """
    Find the sides of a box solid a player could stand on.

    Args:
        solid: Solid to classify
        slope_limit: Steepest walkable slope in degrees
        owner: Handle stored on the faces, the solid itself by default

    Returns:
        ExtractionResult; UNSUPPORTED_SHAPE with no faces for non-box solids
    """
    if not solid.is_box:
        return ExtractionResult(
            status=ExtractionStatus.UNSUPPORTED_SHAPE,
            message=(
                f"{solid.shape_kind.value} solids are not supported by the walk checker, "
                f"skipping {solid.name!r}"
            ),
        )

    owner = solid if owner is None else owner
    limit = math.radians(slope_limit)
    world_scale = solid.world_scale()
    center = solid.box_to_world((0.0, 0.0, 0.0))

    faces: List[Face] = []
    side_points: List[Optional[np.ndarray]] = [None] * len(BOX_SIDE_DIRECTIONS)
    side_slots: List[Optional[int]] = [None] * len(BOX_SIDE_DIRECTIONS)

    for side, direction in enumerate(BOX_SIDE_DIRECTIONS):
        point = solid.box_to_world(tuple(0.5 * d for d in direction))
        side_points[side] = point
        to_point = point - center

        # Depth-facing sides are the front/back of the scene.
        depth = abs(to_point[2])
        in_plane = max(abs(to_point[0]), abs(to_point[1]))
        if in_plane < depth:
            continue

        angle = elevation_angle(to_point[0], to_point[1])
        if not is_walkable_angle(angle, limit):
            continue

        face = Face(
            owner=owner,
            anchor=(float(point[0]), float(point[1]), float(point[2])),
            tilt=math.degrees(angle),
            extent=_side_extent(solid, side, world_scale),
        )

        # Opposite sides test the same plane; keep the upper one.
        if side >= OPPOSITE_SIDE_OFFSET:
            partner = side - OPPOSITE_SIDE_OFFSET
            slot = side_slots[partner]
            if slot is not None:
                if point[1] > side_points[partner][1]:
                    faces[slot] = face
                    side_slots[side] = slot
                    side_slots[partner] = None
                continue

        side_slots[side] = len(faces)
        faces.append(face)

    logger.debug(f"{solid.name}: {len(faces)} candidate faces within {slope_limit} degrees")
    return ExtractionResult(status=ExtractionStatus.OK, faces=faces)
