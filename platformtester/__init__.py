# This file makes this a Python package

from .config import AnalysisConfig
from .errors import PlatformTesterError, StaleFaceSetError, SceneFormatError
from .player import PlayerParameters
from .sinks import (
    DiagnosticsSink,
    LoggingDiagnostics,
    VisualizationSink,
    NullVisualization,
    RecordingVisualization,
)
from .surfaces import (
    Face,
    face_portion,
    extract_faces,
    ExtractionStatus,
    FaceClipper,
    SurfaceCatalog,
    AttachmentSet,
    ReachableSet,
)
from .reachability import JumpEnvelope, ReachabilityAnalyzer, JumpTester

__all__ = [
    # Configuration
    "AnalysisConfig",
    "PlayerParameters",
    # Errors
    "PlatformTesterError",
    "StaleFaceSetError",
    "SceneFormatError",
    # Sinks
    "DiagnosticsSink",
    "LoggingDiagnostics",
    "VisualizationSink",
    "NullVisualization",
    "RecordingVisualization",
    # Surfaces
    "Face",
    "face_portion",
    "extract_faces",
    "ExtractionStatus",
    "FaceClipper",
    "SurfaceCatalog",
    "AttachmentSet",
    "ReachableSet",
    # Reachability
    "JumpEnvelope",
    "ReachabilityAnalyzer",
    "JumpTester",
]
