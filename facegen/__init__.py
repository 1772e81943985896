"""
facegen: deterministic SVG avatars from opaque identifiers.

The generator package is the pure core; the FastAPI service in
``facegen.main`` is a thin HTTP layer over it.
"""

from .generator import AvatarFeatures, AvatarGenerator, extract_features, render_image

__all__ = ["AvatarFeatures", "AvatarGenerator", "extract_features", "render_image"]
