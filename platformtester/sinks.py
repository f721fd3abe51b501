"""
Notification sinks for diagnostics and visualization.

Both sinks are one-way: the analysis core never reads anything back from
them, and a sink must never raise into the core.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

logger = logging.getLogger(__name__)


class DiagnosticsSink(ABC):
    """Receives human-readable warnings from the analysis core."""

    @abstractmethod
    def warning(self, message: str) -> None:
        pass


class LoggingDiagnostics(DiagnosticsSink):
    """
    Forwards diagnostics to the ``platformtester`` logger and keeps the
    most recent messages for display.
    """

    def __init__(self, max_messages: int = 100):
        self.max_messages = max(1, max_messages)
        self.messages: List[str] = []

    def warning(self, message: str) -> None:
        logger.warning(message)
        self.messages.append(message)
        if len(self.messages) > self.max_messages:
            self.messages = self.messages[-self.max_messages :]

    def clear(self) -> None:
        self.messages.clear()


class VisualizationSink(ABC):
    """Receives the current walkable and reachable faces for rendering."""

    @abstractmethod
    def publish_walkable(self, faces: Sequence) -> None:
        pass

    @abstractmethod
    def publish_reachable(self, faces: Sequence) -> None:
        pass


class NullVisualization(VisualizationSink):
    def publish_walkable(self, faces: Sequence) -> None:
        pass

    def publish_reachable(self, faces: Sequence) -> None:
        pass


class RecordingVisualization(VisualizationSink):
    """Keeps the last published face lists."""

    def __init__(self):
        self.walkable: List = []
        self.reachable: List = []
        self.publish_count = 0

    def publish_walkable(self, faces: Sequence) -> None:
        self.walkable = list(faces)
        self.publish_count += 1

    def publish_reachable(self, faces: Sequence) -> None:
        self.reachable = list(faces)
        self.publish_count += 1
