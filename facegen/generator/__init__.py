"""
Deterministic avatar generator.

identifier → digest → feature set → SVG fragments → composed document.
Pure functions only: no I/O, no shared state.
"""

from .composer import AvatarGenerator, compose, generate_face_svg, render_image
from .features import (
    AccessoryType,
    AvatarFeatures,
    EyeType,
    HairType,
    MouthType,
    NoseType,
    extract_features,
)

__all__ = [
    "AccessoryType",
    "AvatarFeatures",
    "AvatarGenerator",
    "EyeType",
    "HairType",
    "MouthType",
    "NoseType",
    "compose",
    "extract_features",
    "generate_face_svg",
    "render_image",
]
