"""
Obstruction-aware clipping of walkable faces.

A face is swept from both ends with a player-sized capsule. Each
obstruction the player cannot fit under is hit once from the left and
once from the right; pairing those contacts gives the blocked spans,
and everything between them is emitted as a walkable sub-face.
"""

import logging
import math
from typing import List, Optional, Tuple

from ..constants.player_constants import ALL_LAYERS, DEGENERATE_CONTACT_TOLERANCE_SQ
from ..scene.sweep_service import SweepHit, SweepService
from .face import Face, face_portion

logger = logging.getLogger(__name__)


def is_degenerate_contact(hit: SweepHit) -> bool:
    """Whether a contact is the "started inside a solid" marker at the world origin."""
    x, y, z = hit.point
    return x * x + y * y + z * z < DEGENERATE_CONTACT_TOLERANCE_SQ


class FaceClipper:
    """
    Splits faces around obstructions the player capsule cannot pass under.

    The clipper holds the sweep service and the player capsule dimensions;
    ``clip()`` is called once per candidate face.
    """

    def __init__(
        self,
        sweeper: SweepService,
        radius: float,
        height: float,
        layer_mask: int = ALL_LAYERS,
        diagnostics=None,
    ):
        self.sweeper = sweeper
        self.radius = radius
        self.height = height
        self.layer_mask = layer_mask
        self.diagnostics = diagnostics

    def _warn(self, message: str) -> None:
        if self.diagnostics is not None:
            self.diagnostics.warning(message)
        else:
            logger.warning(message)

    def _sweep_both_ways(self, face: Face, left_base, right_base, direction, distance):
        up = self.height - 2.0 * self.radius
        left_top = (left_base[0], left_base[1] + up, left_base[2])
        right_top = (right_base[0], right_base[1] + up, right_base[2])
        backwards = (-direction[0], -direction[1], -direction[2])

        # The face's own solid would otherwise block both sweeps.
        owner = face.owner
        was_participating = self.sweeper.is_participating(owner)
        self.sweeper.set_participating(owner, False)
        try:
            left_hits = self.sweeper.sweep(
                left_base, left_top, self.radius, direction, distance, self.layer_mask
            )
            right_hits = self.sweeper.sweep(
                right_base, right_top, self.radius, backwards, distance, self.layer_mask
            )
        finally:
            self.sweeper.set_participating(owner, was_participating)

        return (
            sorted(left_hits, key=lambda hit: hit.distance),
            sorted(right_hits, key=lambda hit: hit.distance),
        )

    def clip(self, face: Face) -> List[Face]:
        """
        Clip one face against the obstructions above it.

        Args:
            face: Candidate face

        Returns:
            Walkable sub-faces, left to right; empty when nothing is walkable
        """
        if face.is_degenerate:
            return []

        ox, oy = face.half_offset()
        half_length = math.hypot(ox, oy)
        ax, ay, az = face.anchor
        direction = (ox / half_length, oy / half_length, 0.0)

        right_base = (ax + ox, ay + oy + self.radius, az)
        left_base = (ax - ox, ay - oy + self.radius, az)
        if direction[0] < 0.0:
            # Faces reached from the opposite winding point leftwards.
            left_base, right_base = right_base, left_base
            direction = (-direction[0], -direction[1], 0.0)

        left_hits, right_hits = self._sweep_both_ways(
            face, left_base, right_base, direction, 2.0 * half_length
        )
        left_x = left_base[0]
        right_x = right_base[0]

        left_embedded = bool(left_hits) and is_degenerate_contact(left_hits[0])
        right_embedded = bool(right_hits) and is_degenerate_contact(right_hits[0])

        if left_embedded and right_embedded:
            logger.debug(f"{face}: both ends start inside obstructions, dropping face")
            return []

        if right_embedded:
            if len(left_hits) == 0:
                return self._unclipped(face, "right end embedded but left sweep found nothing")
            right_x = left_hits[-1].point[0] - self.radius
            left_hits = left_hits[:-1]
            right_hits = right_hits[1:]
        elif left_embedded:
            if len(right_hits) == 0:
                return self._unclipped(face, "left end embedded but right sweep found nothing")
            left_x = right_hits[-1].point[0] + self.radius
            right_hits = right_hits[:-1]
            left_hits = left_hits[1:]

        if len(left_hits) != len(right_hits):
            return self._unclipped(
                face,
                f"sweep contact counts differ ({len(left_hits)} from the left, "
                f"{len(right_hits)} from the right)",
            )

        # Index i now names the same obstruction in both lists.
        right_hits = list(reversed(right_hits))
        return self._build_portions(face, left_x, right_x, left_hits, right_hits)

    def _build_portions(
        self,
        face: Face,
        left_x: float,
        right_x: float,
        left_hits: List[SweepHit],
        right_hits: List[SweepHit],
    ) -> List[Face]:
        portions = []
        for start, end in self._intervals(left_x, right_x, left_hits, right_hits):
            if end - start <= 0.0:
                continue
            portion = face_portion(face, start, end)
            if not portion.is_degenerate:
                portions.append(portion)
        logger.debug(f"{face}: {len(left_hits)} obstructions, {len(portions)} portions")
        return portions

    def _intervals(self, left_x, right_x, left_hits, right_hits) -> List[Tuple[float, float]]:
        count = len(left_hits)
        intervals = []
        for i in range(count + 1):
            start = left_x if i == 0 else right_hits[i - 1].point[0] + self.radius
            end = right_x if i == count else left_hits[i].point[0] - self.radius
            intervals.append((start, end))
        return intervals

    def _unclipped(self, face: Face, reason: str) -> List[Face]:
        self._warn(f"Could not reconcile sweeps for {face}: {reason}; keeping it unclipped")
        return [face]


def clip_face(
    face: Face,
    sweeper: SweepService,
    radius: float,
    height: float,
    layer_mask: int = ALL_LAYERS,
    diagnostics: Optional[object] = None,
) -> List[Face]:
    """Convenience wrapper clipping a single face."""
    return FaceClipper(sweeper, radius, height, layer_mask, diagnostics).clip(face)
