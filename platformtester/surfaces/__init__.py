"""
Walkable surface extraction: slope classification, obstruction clipping
and the scene-wide surface catalog.
"""

from .face import Face, face_portion
from .face_extractor import (
    ExtractionResult,
    ExtractionStatus,
    elevation_angle,
    extract_faces,
    is_walkable_angle,
)
from .face_clipper import FaceClipper, clip_face, is_degenerate_contact
from .face_sets import AttachmentSet, FaceSet, ReachableSet
from .surface_catalog import SurfaceCatalog

__all__ = [
    "Face",
    "face_portion",
    "ExtractionResult",
    "ExtractionStatus",
    "elevation_angle",
    "extract_faces",
    "is_walkable_angle",
    "FaceClipper",
    "clip_face",
    "is_degenerate_contact",
    "AttachmentSet",
    "FaceSet",
    "ReachableSet",
    "SurfaceCatalog",
]
