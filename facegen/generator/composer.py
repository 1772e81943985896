"""
SVG composition: layers catalog fragments into one standalone document.

Draw order, back to front:
  background → hair (back) → face → eyes → nose → mouth → accessory → hair (front)
"""

from __future__ import annotations

from typing import Union

from .catalog import ACCESSORIES, EYES, MOUTHS, NOSES, hair_layers
from .features import AvatarFeatures, digest, extract_features, features_from_digest

Size = Union[int, float]

DEFAULT_SIZE = 200
VIEWBOX = 200  # internal coordinate space; the viewBox maps it to the requested size
BACKGROUND = "#f0f0f0"

SVG_TEMPLATE = """<svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {box} {box}">
  <rect width="{box}" height="{box}" fill="{background}"/>
  {hair_back}
  <circle cx="100" cy="100" r="80" fill="{skin}"/>
  {eyes}
  {nose}
  {mouth}
  {accessory}
  {hair_front}
</svg>"""


def format_size(size: Size) -> str:
    """Render *size* for the width/height attributes (``400.0`` → ``400``)."""
    if isinstance(size, float) and size.is_integer():
        return str(int(size))
    return str(size)


def compose(features: AvatarFeatures, size: Size = DEFAULT_SIZE) -> str:
    """Build the SVG document for *features* at *size* x *size*."""
    hair = hair_layers(features.hair_type, features.hair_color)
    return SVG_TEMPLATE.format(
        size=format_size(size),
        box=VIEWBOX,
        background=BACKGROUND,
        hair_back=hair.back,
        skin=features.skin_color,
        eyes=EYES[features.eye_type],
        nose=NOSES[features.nose_type],
        mouth=MOUTHS[features.mouth_type],
        accessory=ACCESSORIES[features.accessory_type],
        hair_front=hair.front,
    )


def render_image(identifier: str, size: Size = DEFAULT_SIZE) -> str:
    """Render the avatar for *identifier*. Bounds on *size* are the caller's job."""
    return compose(extract_features(identifier), size)


class AvatarGenerator:
    """Features for one identifier, computed once, renderable at any size."""

    def __init__(self, identifier: str) -> None:
        self.digest = digest(identifier)
        self.features = features_from_digest(self.digest)

    def get_features(self) -> AvatarFeatures:
        return self.features

    def render(self, size: Size = DEFAULT_SIZE) -> str:
        return compose(self.features, size)


def generate_face_svg(identifier: str, size: Size = DEFAULT_SIZE) -> str:
    return AvatarGenerator(identifier).render(size)
