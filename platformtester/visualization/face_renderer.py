"""
Off-screen rendering of walkable and reachable faces.

The renderer is a visualization sink: it keeps the last published face
lists and draws them onto a pygame surface, fitted to the faces' bounds.
World y points up, so the image is flipped vertically.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pygame

from ..reachability.jump_model import JumpEnvelope
from ..sinks import VisualizationSink
from ..surfaces.face import Face

logger = logging.getLogger(__name__)


@dataclass
class FaceRenderConfig:
    """Configuration for face rendering."""

    size: Tuple[int, int] = (800, 600)
    margin: int = 40
    background_color: Tuple[int, int, int] = (24, 24, 32)
    walkable_color: Tuple[int, int, int] = (0, 200, 0)  # Green
    reachable_color: Tuple[int, int, int] = (255, 220, 0)  # Yellow
    attached_color: Tuple[int, int, int] = (80, 160, 255)  # Blue
    arc_color: Tuple[int, int, int] = (160, 160, 160)
    face_width: int = 4
    reachable_lift: int = 6  # pixels the reachable overlay sits above the walkable line
    arc_samples: int = 48


class FaceRenderer(VisualizationSink):
    """Draws faces and optional jump arcs onto a pygame surface."""

    def __init__(self, config: Optional[FaceRenderConfig] = None):
        self.config = config or FaceRenderConfig()
        self.walkable: List[Face] = []
        self.reachable: List[Face] = []
        self.attached: List[Face] = []
        self.envelope: Optional[JumpEnvelope] = None

    def publish_walkable(self, faces: Sequence[Face]) -> None:
        self.walkable = list(faces)

    def publish_reachable(self, faces: Sequence[Face]) -> None:
        self.reachable = list(faces)

    def set_jump_context(self, attached: Sequence[Face], envelope: Optional[JumpEnvelope]) -> None:
        """Remember the takeoff faces so their jump arcs can be drawn."""
        self.attached = list(attached)
        self.envelope = envelope

    def _arcs(self) -> List[List[Tuple[float, float]]]:
        if self.envelope is None:
            return []
        arcs = []
        for face in self.attached:
            arcs.append(self.envelope.arc_points(face.rightmost_point(), 1, samples=self.config.arc_samples))
            arcs.append(self.envelope.arc_points(face.leftmost_point(), -1, samples=self.config.arc_samples))
        return arcs

    def _world_bounds(self, arcs) -> Tuple[float, float, float, float]:
        xs: List[float] = []
        ys: List[float] = []
        for face in self.walkable + self.reachable:
            for x, y in face.endpoints():
                xs.append(x)
                ys.append(y)
        for arc in arcs:
            for x, y in arc:
                xs.append(x)
                ys.append(y)
        if not xs:
            return (-1.0, -1.0, 1.0, 1.0)
        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        if max_x - min_x < 1e-6:
            min_x, max_x = min_x - 1.0, max_x + 1.0
        if max_y - min_y < 1e-6:
            min_y, max_y = min_y - 1.0, max_y + 1.0
        return (min_x, min_y, max_x, max_y)

    def world_to_pixel_transform(self, arcs=None):
        """Return a function mapping world (x, y) to integer pixel coordinates."""
        width, height = self.config.size
        margin = self.config.margin
        min_x, min_y, max_x, max_y = self._world_bounds(arcs or [])
        scale = min(
            (width - 2 * margin) / (max_x - min_x),
            (height - 2 * margin) / (max_y - min_y),
        )

        def to_pixel(point):
            px = margin + (point[0] - min_x) * scale
            py = height - margin - (point[1] - min_y) * scale
            return (int(round(px)), int(round(py)))

        return to_pixel

    def render(self, surface: Optional[pygame.Surface] = None) -> pygame.Surface:
        """
        Draw the current faces.

        Args:
            surface: Surface to draw on; a new one of the configured size when None

        Returns:
            The surface that was drawn on
        """
        if surface is None:
            surface = pygame.Surface(self.config.size)
        surface.fill(self.config.background_color)

        arcs = self._arcs()
        to_pixel = self.world_to_pixel_transform(arcs)
        cfg = self.config

        for arc in arcs:
            pygame.draw.lines(surface, cfg.arc_color, False, [to_pixel(p) for p in arc], 1)

        for face in self.walkable:
            start, end = face.endpoints()
            pygame.draw.line(surface, cfg.walkable_color, to_pixel(start), to_pixel(end), cfg.face_width)

        for face in self.attached:
            start, end = face.endpoints()
            pygame.draw.line(surface, cfg.attached_color, to_pixel(start), to_pixel(end), cfg.face_width)

        for face in self.reachable:
            start, end = face.endpoints()
            sx, sy = to_pixel(start)
            ex, ey = to_pixel(end)
            lift = cfg.reachable_lift
            pygame.draw.line(surface, cfg.reachable_color, (sx, sy - lift), (ex, ey - lift), cfg.face_width)

        return surface

    def save(self, path: str) -> None:
        """Render and write the image to disk."""
        surface = self.render()
        pygame.image.save(surface, path)
        logger.info(
            f"Saved render of {len(self.walkable)} walkable / {len(self.reachable)} reachable faces to {path}"
        )
