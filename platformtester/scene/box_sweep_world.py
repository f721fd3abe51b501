"""
Reference capsule sweep service for scenes made of boxes.

Sweeps run in the x-y plane of the 2.5-D scene: each box is reduced to its
projected convex outline, the capsule to the stadium around its core
segment. Boxes whose depth range does not reach the capsule are ignored.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

from ..constants.player_constants import ALL_LAYERS, CONTACT_SKIN
from ..geometry.sweep_math import (
    closest_points_between_segments,
    point_in_polygon,
    ray_vs_stadium,
    segment_distance,
)
from .scene_source import SceneSource
from .solids import Solid
from .sweep_service import SweepHit, SweepService, Vector3

logger = logging.getLogger(__name__)

ORIGIN = (0.0, 0.0, 0.0)


class BoxSweepWorld(SweepService):
    """
    Sweep service over the box solids of a scene.

    Box outlines are cached per solid; call ``refresh()`` after moving or
    adding solids.
    """

    def __init__(self, scene: SceneSource, contact_skin: float = CONTACT_SKIN):
        self.scene = scene
        self.contact_skin = contact_skin
        self._excluded: Dict[int, Solid] = {}
        self._outlines: Dict[int, Tuple[Solid, list, Tuple[float, float]]] = {}

    def refresh(self) -> None:
        """Forget cached outlines so moved, added or removed solids are picked up."""
        self._outlines.clear()

    def is_participating(self, solid: Solid) -> bool:
        return id(solid) not in self._excluded

    def set_participating(self, solid: Solid, participating: bool) -> None:
        if participating:
            self._excluded.pop(id(solid), None)
        else:
            self._excluded[id(solid)] = solid

    def _outline(self, solid: Solid):
        cached = self._outlines.get(id(solid))
        # Entries hold the solid itself so a recycled id never matches.
        if cached is None or cached[0] is not solid:
            cached = (solid, solid.outline_xy(), solid.depth_range())
            self._outlines[id(solid)] = cached
        return cached[1], cached[2]

    def _candidates(self, layer_mask: int) -> Iterable[Solid]:
        for solid in self.scene.solids():
            if not solid.enabled or not solid.is_box:
                continue
            if ((1 << solid.layer) & layer_mask) == 0:
                continue
            if not self.is_participating(solid):
                continue
            yield solid

    def sweep(
        self,
        base: Vector3,
        top: Vector3,
        radius: float,
        direction: Vector3,
        max_distance: float,
        layer_mask: int = ALL_LAYERS,
    ) -> List[SweepHit]:
        """
        Sweep a vertical capsule through the scene.

        Args:
            base: Center of the capsule's lower cap
            top: Center of the capsule's upper cap
            radius: Capsule radius
            direction: Sweep direction; only its x-y part is used
            max_distance: Travel distance
            layer_mask: Bitmask of layers that obstruct the sweep

        Returns:
            One hit per obstructing solid, nearest first
        """
        length = math.hypot(direction[0], direction[1])
        if length <= 0.0 or max_distance < 0.0:
            return []
        dx = direction[0] / length
        dy = direction[1] / length
        core_a = (base[0], base[1])
        core_b = (top[0], top[1])
        depth = base[2]
        effective_radius = radius - self.contact_skin

        hits = []
        for solid in self._candidates(layer_mask):
            outline, (z_min, z_max) = self._outline(solid)
            if len(outline) < 3:
                continue
            if depth <= z_min - radius or depth >= z_max + radius:
                continue

            if self._overlaps(core_a, core_b, effective_radius, outline):
                hits.append(SweepHit(point=ORIGIN, distance=0.0, solid=solid))
                continue

            t = self._time_of_impact(core_a, core_b, effective_radius, dx, dy, outline)
            if t is None or t > max_distance:
                continue

            moved_a = (core_a[0] + dx * t, core_a[1] + dy * t)
            moved_b = (core_b[0] + dx * t, core_b[1] + dy * t)
            impact = self._impact_point(moved_a, moved_b, outline)
            hits.append(SweepHit(point=(impact[0], impact[1], depth), distance=t, solid=solid))

        hits.sort(key=lambda hit: hit.distance)
        return hits

    @staticmethod
    def _edges(outline):
        count = len(outline)
        for i in range(count):
            yield outline[i], outline[(i + 1) % count]

    def _overlaps(self, core_a, core_b, radius, outline) -> bool:
        if point_in_polygon(core_a[0], core_a[1], outline):
            return True
        if point_in_polygon(core_b[0], core_b[1], outline):
            return True
        for p, q in self._edges(outline):
            if segment_distance(core_a, core_b, p, q) < radius:
                return True
        return False

    def _time_of_impact(self, core_a, core_b, radius, dx, dy, outline) -> Optional[float]:
        best = None
        # Polygon corners running into the capsule.
        for vx, vy in outline:
            t = ray_vs_stadium(vx, vy, -dx, -dy, core_a[0], core_a[1], core_b[0], core_b[1], radius)
            if t is not None and (best is None or t < best):
                best = t
        # Capsule caps running into polygon edges.
        for cx, cy in (core_a, core_b):
            for p, q in self._edges(outline):
                t = ray_vs_stadium(cx, cy, dx, dy, p[0], p[1], q[0], q[1], radius)
                if t is not None and (best is None or t < best):
                    best = t
        return best

    def _impact_point(self, core_a, core_b, outline):
        best_distance = math.inf
        best_point = outline[0]
        for p, q in self._edges(outline):
            distance, _, on_edge = closest_points_between_segments(core_a, core_b, p, q)
            if distance < best_distance:
                best_distance = distance
                best_point = on_edge
        return best_point
