"""
Local-to-world transforms for scene solids.

Transforms are plain 4x4 NumPy matrices in column-vector convention
(``world = M @ [x, y, z, 1]``). Rotations are Euler angles in degrees,
applied about z, then x, then y.
"""

import math
from typing import Sequence

import numpy as np

IDENTITY = np.identity(4)


def _rotation_matrix(rotation: Sequence[float]) -> np.ndarray:
    rx, ry, rz = (math.radians(a) for a in rotation)
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)

    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return rot_y @ rot_x @ rot_z


def trs_matrix(
    position: Sequence[float] = (0.0, 0.0, 0.0),
    rotation: Sequence[float] = (0.0, 0.0, 0.0),
    scale: Sequence[float] = (1.0, 1.0, 1.0),
) -> np.ndarray:
    """
    Build a translate-rotate-scale matrix.

    Args:
        position: World translation (x, y, z)
        rotation: Euler angles in degrees (x, y, z), applied z first
        scale: Per-axis scale (x, y, z)

    Returns:
        4x4 local-to-world matrix
    """
    matrix = np.identity(4)
    matrix[:3, :3] = _rotation_matrix(rotation) @ np.diag(np.asarray(scale, dtype=float))
    matrix[:3, 3] = np.asarray(position, dtype=float)
    return matrix


def transform_point(matrix: np.ndarray, point: Sequence[float]) -> np.ndarray:
    """Apply a 4x4 affine matrix to a 3D point."""
    homogeneous = np.append(np.asarray(point, dtype=float), 1.0)
    return (matrix @ homogeneous)[:3]


def lossy_scale(matrix: np.ndarray) -> np.ndarray:
    """
    Approximate world scale of a transform.

    The length of each basis column; exact for rotation + non-uniform scale,
    an approximation once shear is involved.
    """
    return np.linalg.norm(matrix[:3, :3], axis=0)
