"""
Walkable face representation.

A face is a straight surface segment in the x-y plane of the 2.5-D scene,
centered on its anchor and tilted by a signed elevation angle. Only the
x and y of the anchor take part in the geometry; z is carried through.
"""

import math
from dataclasses import dataclass
from typing import Any, Tuple

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]

# Faces shorter than this are treated as zero length.
MIN_FACE_EXTENT = 1e-9


@dataclass(frozen=True)
class Face:
    """
    One walkable (or candidate) surface segment.

    Attributes:
        owner: Solid the face was derived from; used for identity only
        anchor: World-space midpoint of the face
        tilt: Signed elevation angle in degrees, 0 is flat, positive rises to the right
        extent: Length along the tilted direction, centered on the anchor
    """

    owner: Any
    anchor: Point3
    tilt: float
    extent: float

    def __post_init__(self):
        if self.extent < 0.0 or math.isnan(self.extent):
            raise ValueError(f"face extent must be non-negative (got {self.extent})")

    @property
    def is_degenerate(self) -> bool:
        return self.extent <= MIN_FACE_EXTENT

    def half_offset(self) -> Point2:
        """Vector from the anchor to the end of the face the tilt direction points at."""
        rad = math.radians(self.tilt)
        half = self.extent * 0.5
        return (half * math.cos(rad), half * math.sin(rad))

    def endpoints(self) -> Tuple[Point2, Point2]:
        ox, oy = self.half_offset()
        x, y = self.anchor[0], self.anchor[1]
        return (x - ox, y - oy), (x + ox, y + oy)

    def leftmost_point(self) -> Point2:
        a, b = self.endpoints()
        return a if a[0] <= b[0] else b

    def rightmost_point(self) -> Point2:
        a, b = self.endpoints()
        return b if a[0] <= b[0] else a

    def highest_point(self) -> Point2:
        """
        Highest point on the face.

        For a flat face every point is highest; the anchor's x is used.
        """
        a, b = self.endpoints()
        if math.isclose(a[1], b[1], rel_tol=0.0, abs_tol=1e-9):
            return (self.anchor[0], max(a[1], b[1]))
        return a if a[1] > b[1] else b

    def __repr__(self) -> str:
        owner = getattr(self.owner, "name", self.owner)
        x, y, z = self.anchor
        return (
            f"Face(owner={owner!r}, anchor=({x:.3f}, {y:.3f}, {z:.3f}), "
            f"tilt={self.tilt:.2f}, extent={self.extent:.3f})"
        )


def face_portion(face: Face, left_x: float, right_x: float) -> Face:
    """
    Cut the part of a face lying between two world-space x-coordinates.

    The new face keeps the owner and tilt of the source face. Its y values
    follow the source face's slope, so a tilted portion is longer than
    ``right_x - left_x``.

    Args:
        face: Face to take a portion of
        left_x: World-space x of the portion's left end
        right_x: World-space x of the portion's right end, greater than left_x

    Returns:
        The portion as a new face
    """
    if not right_x > left_x:
        raise ValueError(f"portion needs left < right (got {left_x}, {right_x})")

    slope = math.tan(math.radians(face.tilt))
    ax, ay, az = face.anchor
    left_y = ay + slope * (left_x - ax)
    right_y = ay + slope * (right_x - ax)

    extent = math.hypot(right_x - left_x, right_y - left_y)
    anchor = (left_x + (right_x - left_x) * 0.5, left_y + (right_y - left_y) * 0.5, az)
    return Face(owner=face.owner, anchor=anchor, tilt=face.tilt, extent=extent)
