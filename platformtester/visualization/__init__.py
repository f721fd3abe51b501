"""
Debug rendering of analysis results.
"""

from .face_renderer import FaceRenderConfig, FaceRenderer

__all__ = ["FaceRenderConfig", "FaceRenderer"]
