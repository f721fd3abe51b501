"""
Jump reachability between walkable faces.

A candidate face is excluded when it is higher than the top of any jump
from the takeoff face, or when its near corner lies above the jump
parabola launched from the takeoff face's nearest edge. Faces that
overlap the takeoff face's horizontal span (widened by the apex
distance) are kept as long as they are under the jump ceiling.

Known simplifications: obstacles along the arc are not considered, the
player's radius is ignored, and a sloped takeoff face always launches
from its edge rather than its highest point.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..errors import StaleFaceSetError
from ..player import PlayerParameters
from ..surfaces.face import Face
from ..surfaces.face_sets import AttachmentSet, ReachableSet
from .jump_model import JumpEnvelope

logger = logging.getLogger(__name__)


def is_reachable_from(candidate: Face, attached: Face, envelope: JumpEnvelope) -> bool:
    """
    Check whether a jump from one face can land on another.

    Args:
        candidate: Face to land on
        attached: Face to jump from
        envelope: Player jump model

    Returns:
        False if the candidate is provably out of reach, True otherwise
    """
    highest_jump_y = attached.highest_point()[1] + envelope.jump_height
    if candidate.anchor[1] > highest_jump_y:
        return False

    apex_distance = envelope.apex_distance
    attached_left = attached.leftmost_point()
    attached_right = attached.rightmost_point()
    candidate_left = candidate.leftmost_point()
    candidate_right = candidate.rightmost_point()

    if candidate_left[0] > attached_right[0] + apex_distance:
        apex_x = attached_right[0] + apex_distance
        apex_y = attached_right[1] + envelope.jump_height
        if envelope.is_above(apex_x, apex_y, candidate_left):
            return False
    elif candidate_right[0] < attached_left[0] - apex_distance:
        apex_x = attached_left[0] - apex_distance
        apex_y = attached_left[1] + envelope.jump_height
        if envelope.is_above(apex_x, apex_y, candidate_right):
            return False

    return True


def reachable_indices(
    attached_faces: Iterable[Face],
    walkable_faces: Sequence[Face],
    envelope: JumpEnvelope,
) -> List[int]:
    """
    Indices of the walkable faces reachable from at least one attached face.

    Returns:
        Sorted indices into ``walkable_faces``, each listed once
    """
    reachable = set()
    for attached in attached_faces:
        reachable.update(
            i
            for i, candidate in enumerate(walkable_faces)
            if i not in reachable and is_reachable_from(candidate, attached, envelope)
        )
    return sorted(reachable)


class ReachabilityAnalyzer:
    """
    Computes reachable sets against a surface catalog.

    The jump parameters come from the player the catalog was last built
    with unless explicit parameters are passed in.
    """

    def __init__(self, catalog, player: Optional[PlayerParameters] = None):
        self.catalog = catalog
        self.player = player

    def envelope(self) -> Optional[JumpEnvelope]:
        player = self.player or self.catalog.player
        if player is None:
            return None
        return JumpEnvelope.from_player(player)

    def analyze(self, attachment: AttachmentSet) -> ReachableSet:
        """
        Find every catalog face reachable from the attachment set.

        Raises:
            StaleFaceSetError: if the attachment set predates the catalog's generation
        """
        generation, walkable = self.catalog.snapshot()
        if generation != attachment.generation:
            raise StaleFaceSetError(attachment.generation, generation)
        attached_faces = [walkable[i] for i in attachment.indices]

        envelope = self.envelope()
        if envelope is None:
            logger.warning("No player parameters available for reachability analysis")
            return ReachableSet(generation=generation, indices=())

        indices = reachable_indices(attached_faces, walkable, envelope)
        logger.debug(
            f"{len(indices)} of {len(walkable)} faces reachable from "
            f"{len(attached_faces)} attached faces"
        )
        return ReachableSet(generation=generation, indices=tuple(indices))
