"""
Closed-form 2D helpers for capsule sweeps in the x-y plane.

Points are (x, y) tuples. A capsule seen in the x-y plane is a stadium:
every point within ``radius`` of its core segment.
"""

import math
from typing import List, Optional, Sequence, Tuple

Point2 = Tuple[float, float]

_EPSILON = 1e-12


def clamp(n, a, b):
    """Force a number n into a range (a, b)"""
    return a if n < a else b if n > b else n


def closest_point_on_segment(px, py, ax, ay, bx, by) -> Point2:
    """Return the point of segment ab closest to p."""
    wx = bx - ax
    wy = by - ay
    seg_lensq = wx**2 + wy**2
    if seg_lensq <= _EPSILON:
        return (ax, ay)
    u = clamp(((px - ax) * wx + (py - ay) * wy) / seg_lensq, 0.0, 1.0)
    return (ax + u * wx, ay + u * wy)


def closest_points_between_segments(
    p1: Point2, q1: Point2, p2: Point2, q2: Point2
) -> Tuple[float, Point2, Point2]:
    """
    Closest pair of points between segments p1q1 and p2q2.

    Returns:
        (distance, point on first segment, point on second segment)
    """
    d1x, d1y = q1[0] - p1[0], q1[1] - p1[1]
    d2x, d2y = q2[0] - p2[0], q2[1] - p2[1]
    rx, ry = p1[0] - p2[0], p1[1] - p2[1]
    a = d1x * d1x + d1y * d1y
    e = d2x * d2x + d2y * d2y
    f = d2x * rx + d2y * ry

    if a <= _EPSILON and e <= _EPSILON:
        s = t = 0.0
    elif a <= _EPSILON:
        s = 0.0
        t = clamp(f / e, 0.0, 1.0)
    else:
        c = d1x * rx + d1y * ry
        if e <= _EPSILON:
            t = 0.0
            s = clamp(-c / a, 0.0, 1.0)
        else:
            b = d1x * d2x + d1y * d2y
            denom = a * e - b * b
            s = clamp((b * f - c * e) / denom, 0.0, 1.0) if denom > _EPSILON else 0.0
            t = (b * s + f) / e
            if t < 0.0:
                t = 0.0
                s = clamp(-c / a, 0.0, 1.0)
            elif t > 1.0:
                t = 1.0
                s = clamp((b - c) / a, 0.0, 1.0)

    c1 = (p1[0] + d1x * s, p1[1] + d1y * s)
    c2 = (p2[0] + d2x * t, p2[1] + d2y * t)
    return math.hypot(c1[0] - c2[0], c1[1] - c2[1]), c1, c2


def segment_distance(p1: Point2, q1: Point2, p2: Point2, q2: Point2) -> float:
    """Shortest distance between two segments, 0 when they cross."""
    if segments_intersect(p1, q1, p2, q2):
        return 0.0
    return closest_points_between_segments(p1, q1, p2, q2)[0]


def segments_intersect(p1: Point2, q1: Point2, p2: Point2, q2: Point2) -> bool:
    """Return true if the two segments properly cross each other."""
    det1 = (p2[0] - p1[0]) * (q1[1] - p1[1]) - (p2[1] - p1[1]) * (q1[0] - p1[0])
    det2 = (q2[0] - p1[0]) * (q1[1] - p1[1]) - (q2[1] - p1[1]) * (q1[0] - p1[0])
    det3 = (p1[0] - p2[0]) * (q2[1] - p2[1]) - (p1[1] - p2[1]) * (q2[0] - p2[0])
    det4 = (q1[0] - p2[0]) * (q2[1] - p2[1]) - (q1[1] - p2[1]) * (q2[0] - p2[0])
    return det1 * det2 < 0 and det3 * det4 < 0


def point_in_polygon(px, py, polygon: Sequence[Point2]) -> bool:
    """Even-odd test of a point against a closed polygon."""
    inside = False
    count = len(polygon)
    for i in range(count):
        ax, ay = polygon[i]
        bx, by = polygon[(i + 1) % count]
        if (ay > py) != (by > py):
            x_cross = ax + (py - ay) * (bx - ax) / (by - ay)
            if px < x_cross:
                inside = not inside
    return inside


def convex_hull(points: Sequence[Point2]) -> List[Point2]:
    """Counter-clockwise convex hull (monotone chain) without repeated end point."""
    unique = sorted(set(points))
    if len(unique) <= 2:
        return list(unique)

    def cross(o, a, b):
        return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

    lower: List[Point2] = []
    for p in unique:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: List[Point2] = []
    for p in reversed(unique):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[:-1]


def _ray_vs_disk(ox, oy, dx, dy, cx, cy, radius) -> Optional[float]:
    fx = ox - cx
    fy = oy - cy
    a = dx * dx + dy * dy
    if a <= _EPSILON:
        return 0.0 if fx * fx + fy * fy <= radius * radius else None
    b = fx * dx + fy * dy
    c = fx * fx + fy * fy - radius * radius
    if c <= 0.0:
        return 0.0
    radicand = b * b - a * c
    if b >= 0.0 or radicand < 0.0:
        return None
    return (-b - math.sqrt(radicand)) / a


def _ray_vs_slab_box(ox, oy, dx, dy, ax, ay, bx, by, radius) -> Optional[float]:
    wx = bx - ax
    wy = by - ay
    length = math.hypot(wx, wy)
    if length <= _EPSILON:
        return None
    ux, uy = wx / length, wy / length
    nx, ny = -uy, ux

    t_enter = 0.0
    t_exit = math.inf
    # Slabs: 0 <= (p - a).u <= length, -radius <= (p - a).n <= radius
    for axis_x, axis_y, low, high in ((ux, uy, 0.0, length), (nx, ny, -radius, radius)):
        origin = (ox - ax) * axis_x + (oy - ay) * axis_y
        speed = dx * axis_x + dy * axis_y
        if abs(speed) <= _EPSILON:
            if origin < low or origin > high:
                return None
            continue
        t0 = (low - origin) / speed
        t1 = (high - origin) / speed
        if t0 > t1:
            t0, t1 = t1, t0
        t_enter = max(t_enter, t0)
        t_exit = min(t_exit, t1)
        if t_enter > t_exit:
            return None
    return t_enter


def ray_vs_stadium(ox, oy, dx, dy, ax, ay, bx, by, radius) -> Optional[float]:
    """
    Return the first time a ray enters the stadium around segment ab.

    The ray is ``o + t * d`` for ``t >= 0``; the returned t is in units of d,
    0 when the origin already lies inside, None when the ray never enters.
    """
    if radius <= 0.0:
        return None
    best = None
    for t in (
        _ray_vs_disk(ox, oy, dx, dy, ax, ay, radius),
        _ray_vs_disk(ox, oy, dx, dy, bx, by, radius),
        _ray_vs_slab_box(ox, oy, dx, dy, ax, ay, bx, by, radius),
    ):
        if t is not None and (best is None or t < best):
            best = t
    return best
