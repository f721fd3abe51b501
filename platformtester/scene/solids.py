"""
Scene solid data model.

A solid is a collidable object in the scene. Its shape is a closed tagged
variant: boxes are fully described and analyzed, meshes and any other
shape kind are carried only so they can be reported as unsupported.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

import numpy as np

from ..geometry.sweep_math import convex_hull
from ..geometry.transform import IDENTITY, lossy_scale, transform_point


class ShapeKind(Enum):
    """Shape kinds a scene can report."""

    BOX = "box"
    MESH = "mesh"
    OTHER = "other"


@dataclass(frozen=True)
class BoxShape:
    """Axis-aligned box in the solid's local space."""

    center: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    size: Tuple[float, float, float] = (1.0, 1.0, 1.0)  # full edge lengths

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.BOX


@dataclass(frozen=True)
class MeshShape:
    triangle_count: int = 0

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.MESH


@dataclass(frozen=True)
class OtherShape:
    kind_name: str = "unknown"

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.OTHER


Shape = Union[BoxShape, MeshShape, OtherShape]


@dataclass(eq=False)
class Solid:
    """
    A collidable scene object.

    Solids compare and hash by identity; they are the owner handles that
    faces carry back to the scene.
    """

    name: str
    shape: Shape
    transform: np.ndarray = field(default_factory=lambda: IDENTITY.copy())
    layer: int = 0
    enabled: bool = True

    @property
    def shape_kind(self) -> ShapeKind:
        return self.shape.kind

    @property
    def is_box(self) -> bool:
        return isinstance(self.shape, BoxShape)

    def local_box_matrix(self) -> np.ndarray:
        """Matrix mapping the unit cube [-0.5, 0.5]^3 onto the box in local space."""
        if not self.is_box:
            raise TypeError(f"solid {self.name!r} is not a box ({self.shape_kind.value})")
        matrix = np.identity(4)
        matrix[:3, :3] = np.diag(np.asarray(self.shape.size, dtype=float))
        matrix[:3, 3] = np.asarray(self.shape.center, dtype=float)
        return matrix

    def box_to_world(self, unit_point) -> np.ndarray:
        """Map a point of the unit cube to world space."""
        local = transform_point(self.local_box_matrix(), unit_point)
        return transform_point(self.transform, local)

    def world_scale(self) -> np.ndarray:
        return lossy_scale(self.transform)

    def world_corners(self) -> np.ndarray:
        """The eight box corners in world space, shape (8, 3)."""
        corners = []
        for sx in (-0.5, 0.5):
            for sy in (-0.5, 0.5):
                for sz in (-0.5, 0.5):
                    corners.append(self.box_to_world((sx, sy, sz)))
        return np.array(corners)

    def outline_xy(self):
        """Convex outline of the box projected onto the x-y plane (counter-clockwise)."""
        corners = self.world_corners()
        return convex_hull([(float(c[0]), float(c[1])) for c in corners])

    def depth_range(self) -> Tuple[float, float]:
        corners = self.world_corners()
        return float(corners[:, 2].min()), float(corners[:, 2].max())

    def __repr__(self) -> str:
        return f"Solid({self.name!r}, {self.shape_kind.value}, layer={self.layer})"
