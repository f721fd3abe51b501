"""
Jump testing from a group of takeoff solids.

Rebuilds the surface catalog, selects the faces that belong to the
takeoff solids, and derives the faces reachable from them. Derived sets
are tied to the catalog generation they were computed from.
"""

import logging
from typing import Iterable, List, Optional

from ..config import AnalysisConfig
from ..player import PlayerParameters
from ..scene.scene_source import SceneSource
from ..scene.sweep_service import SweepService
from ..sinks import DiagnosticsSink, NullVisualization, VisualizationSink
from ..surfaces.face import Face
from ..surfaces.face_sets import AttachmentSet, ReachableSet
from ..surfaces.surface_catalog import SurfaceCatalog
from .reachability_analyzer import ReachabilityAnalyzer

logger = logging.getLogger(__name__)


class JumpTester:
    """Finds the walkable faces a player can jump to from a set of solids."""

    def __init__(
        self,
        catalog: SurfaceCatalog,
        scene: SceneSource,
        sweeper: SweepService,
        diagnostics: Optional[DiagnosticsSink] = None,
        visualization: Optional[VisualizationSink] = None,
        config: Optional[AnalysisConfig] = None,
    ):
        self.catalog = catalog
        self.scene = scene
        self.sweeper = sweeper
        self.diagnostics = diagnostics or catalog.diagnostics
        self.visualization = visualization or NullVisualization()
        self.config = config or AnalysisConfig()
        self.attachment: Optional[AttachmentSet] = None
        self.reachable: Optional[ReachableSet] = None

    def reset(self) -> None:
        """Forget the attachment and reachable sets."""
        self.attachment = None
        self.reachable = None
        self.visualization.publish_reachable([])

    def test_jumps(self, attached_owners: Iterable[object], player: Optional[PlayerParameters]) -> List[Face]:
        """
        Rebuild the catalog and compute the faces reachable from the given solids.

        Args:
            attached_owners: Solids the jumps start from
            player: Player parameters for the rebuild and the jump model

        Returns:
            Reachable faces; empty on configuration faults
        """
        owners = list(attached_owners)
        self.attachment = None
        self.reachable = None

        if not self.catalog.rebuild(self.scene, self.sweeper, player, self.config):
            return []

        if not owners:
            self.diagnostics.warning("The jump tester needs at least one attached solid to jump from!")
            return []

        attachment = self.catalog.attachment_set(owners)
        if attachment.is_empty:
            names = ", ".join(str(getattr(o, "name", o)) for o in owners)
            self.diagnostics.warning(f"None of the attached solids ({names}) have a walkable face")

        analyzer = ReachabilityAnalyzer(self.catalog, player)
        self.attachment = attachment
        self.reachable = analyzer.analyze(attachment)

        faces = self.catalog.resolve(self.reachable)
        logger.info(
            f"{len(faces)} reachable faces from {len(attachment)} attached faces "
            f"(generation {self.reachable.generation})"
        )
        self.visualization.publish_reachable(faces)
        return faces

    def attached_faces(self) -> List[Face]:
        return self._resolve_current(self.attachment)

    def reachable_faces(self) -> List[Face]:
        """The last reachable faces, or an empty list once the catalog has moved on."""
        return self._resolve_current(self.reachable)

    def _resolve_current(self, face_set) -> List[Face]:
        if face_set is None or not self.catalog.is_current(face_set):
            return []
        return self.catalog.resolve(face_set)
