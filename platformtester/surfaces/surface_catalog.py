"""
Catalog of walkable surfaces for the whole scene.

Rebuilding runs the face extractor on every enabled solid in the
collision layers, clips each candidate face against the rest of the
scene, and publishes the result in one step.
"""

import logging
import threading
import time
from typing import Iterable, List, Optional, Tuple

from ..config import AnalysisConfig
from ..errors import StaleFaceSetError
from ..player import PlayerParameters
from ..scene.scene_source import SceneSource
from ..scene.solids import Solid
from ..scene.sweep_service import SweepService
from ..sinks import DiagnosticsSink, LoggingDiagnostics, NullVisualization, VisualizationSink
from .face import Face
from .face_clipper import FaceClipper
from .face_extractor import extract_faces
from .face_sets import AttachmentSet, FaceSet

logger = logging.getLogger(__name__)


class SurfaceCatalog:
    """
    The current set of walkable faces and the player parameters used to build it.

    Readers always see either the previous or the new face list, never a
    partial rebuild. Every rebuild and clear bumps ``generation``.
    """

    def __init__(
        self,
        diagnostics: Optional[DiagnosticsSink] = None,
        visualization: Optional[VisualizationSink] = None,
    ):
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.visualization = visualization or NullVisualization()
        self._faces: Tuple[Face, ...] = ()
        self._player: Optional[PlayerParameters] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def player(self) -> Optional[PlayerParameters]:
        return self._player

    @property
    def faces(self) -> Tuple[Face, ...]:
        return self._faces

    def snapshot(self) -> Tuple[int, Tuple[Face, ...]]:
        """Return the generation and faces as one consistent pair."""
        with self._lock:
            return self._generation, self._faces

    def __len__(self) -> int:
        return len(self._faces)

    def __iter__(self):
        return iter(self._faces)

    def clear(self) -> None:
        """Remove every walkable face."""
        with self._lock:
            self._faces = ()
            self._generation += 1
        self.visualization.publish_walkable([])

    def rebuild(
        self,
        scene: SceneSource,
        sweeper: SweepService,
        player: Optional[PlayerParameters],
        config: Optional[AnalysisConfig] = None,
    ) -> bool:
        """
        Recompute the walkable faces of a scene.

        Args:
            scene: Source of the scene's solids
            sweeper: Capsule sweep service over the same scene
            player: Player capsule and slope limit; None is a configuration fault
            config: Analysis options (collision layers), defaults when None

        Returns:
            True if the catalog was rebuilt, False if it was left untouched
        """
        config = config or AnalysisConfig()
        if player is None:
            self.diagnostics.warning("No player set in the walk checker!")
            return False
        problems = player.validate()
        if problems:
            self.diagnostics.warning("Invalid player parameters: " + "; ".join(problems))
            return False

        start_time = time.time()
        with self._lock:
            sweeper.refresh()
            clipper = FaceClipper(
                sweeper,
                radius=player.radius,
                height=player.height,
                layer_mask=config.collision_layer_mask,
                diagnostics=self.diagnostics,
            )
            faces: List[Face] = []
            solid_count = 0
            for solid in scene.solids():
                if not solid.enabled or not config.includes_layer(solid.layer):
                    continue
                solid_count += 1
                faces.extend(self._process_solid(solid, clipper, player))

            self._faces = tuple(faces)
            self._player = player
            self._generation += 1
            generation = self._generation
            published = self._faces

        elapsed_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Surface catalog generation {generation}: {len(published)} walkable faces "
            f"from {solid_count} solids in {elapsed_ms:.1f}ms"
        )
        self.visualization.publish_walkable(published)
        return True

    def _process_solid(
        self, solid: Solid, clipper: FaceClipper, player: PlayerParameters
    ) -> List[Face]:
        faces = []
        try:
            result = extract_faces(solid, player.slope_limit)
            if not result.supported:
                self.diagnostics.warning(result.message)
                return []
            for candidate in result.faces:
                if candidate.is_degenerate:
                    continue
                faces.extend(face for face in clipper.clip(candidate) if not face.is_degenerate)
        except Exception as e:
            self.diagnostics.warning(f"Skipping solid {solid.name!r}: {type(e).__name__}: {e}")
            return []
        return faces

    # Derived face sets

    def is_current(self, face_set: FaceSet) -> bool:
        return face_set.generation == self._generation

    def resolve(self, face_set: FaceSet) -> List[Face]:
        """
        Look up the faces a set refers to.

        Raises:
            StaleFaceSetError: if the catalog was rebuilt since the set was made
        """
        with self._lock:
            if face_set.generation != self._generation:
                raise StaleFaceSetError(face_set.generation, self._generation)
            return [self._faces[i] for i in face_set.indices]

    def attachment_set(self, owners: Iterable[object]) -> AttachmentSet:
        """Select the faces belonging to any of the given owners (by identity)."""
        owner_ids = {id(owner) for owner in owners}
        with self._lock:
            indices = tuple(i for i, face in enumerate(self._faces) if id(face.owner) in owner_ids)
            return AttachmentSet(generation=self._generation, indices=indices)
