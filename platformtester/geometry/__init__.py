"""
Geometry helpers: rigid/scaled transforms and closed-form sweep math.
"""

from .transform import (
    trs_matrix,
    transform_point,
    lossy_scale,
    IDENTITY,
)
from .sweep_math import (
    clamp,
    closest_point_on_segment,
    closest_points_between_segments,
    convex_hull,
    segment_distance,
    segments_intersect,
    point_in_polygon,
    ray_vs_stadium,
)

__all__ = [
    "trs_matrix",
    "transform_point",
    "lossy_scale",
    "IDENTITY",
    "clamp",
    "closest_point_on_segment",
    "closest_points_between_segments",
    "convex_hull",
    "segment_distance",
    "segments_intersect",
    "point_in_polygon",
    "ray_vs_stadium",
]
