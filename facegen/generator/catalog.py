"""
Drawing fragments for every discrete feature value.

All geometry lives in a 200x200 coordinate space. Hair fragments are
templates with a ``{color}`` placeholder; everything else is static.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from .features import AccessoryType, EyeType, HairType, MouthType, NoseType


class HairLayers(NamedTuple):
    back: str   # drawn behind the face
    front: str  # drawn over the forehead


EYES: Mapping[EyeType, str] = MappingProxyType({
    EyeType.ROUND: (
        '<circle cx="70" cy="80" r="8" fill="black"/>\n'
        '  <circle cx="130" cy="80" r="8" fill="black"/>'
    ),
    EyeType.RECTANGULAR: (
        '<rect x="62" y="75" width="16" height="6" fill="black"/>\n'
        '  <rect x="122" y="75" width="16" height="6" fill="black"/>'
    ),
    EyeType.BLUE: (
        '<circle cx="70" cy="80" r="8" fill="#4A90E2"/>\n'
        '  <circle cx="70" cy="80" r="4" fill="black"/>\n'
        '  <circle cx="130" cy="80" r="8" fill="#4A90E2"/>\n'
        '  <circle cx="130" cy="80" r="4" fill="black"/>'
    ),
    EyeType.WINK: (
        '<circle cx="70" cy="80" r="8" fill="black"/>\n'
        '  <line x1="122" y1="80" x2="138" y2="80" stroke="black" stroke-width="4"/>'
    ),
})

MOUTHS: Mapping[MouthType, str] = MappingProxyType({
    MouthType.SMILE: (
        '<path d="M70 130 Q100 150, 130 130" stroke="black" stroke-width="4" fill="none"/>'
    ),
    MouthType.STRAIGHT: (
        '<line x1="70" y1="130" x2="130" y2="130" stroke="black" stroke-width="4"/>'
    ),
    MouthType.SAD: (
        '<path d="M70 140 Q100 120, 130 140" stroke="black" stroke-width="4" fill="none"/>'
    ),
    MouthType.GRIN: (
        '<path d="M70 130 Q100 150, 130 130" stroke="black" stroke-width="3" fill="white"/>\n'
        '  <path d="M70 130 Q100 150, 130 130" stroke="black" stroke-width="2" fill="none"/>\n'
        '  <line x1="85" y1="138" x2="85" y2="130" stroke="black" stroke-width="1.5"/>\n'
        '  <line x1="93" y1="140" x2="93" y2="130" stroke="black" stroke-width="1.5"/>\n'
        '  <line x1="100" y1="140" x2="100" y2="130" stroke="black" stroke-width="1.5"/>\n'
        '  <line x1="107" y1="140" x2="107" y2="130" stroke="black" stroke-width="1.5"/>\n'
        '  <line x1="115" y1="138" x2="115" y2="130" stroke="black" stroke-width="1.5"/>'
    ),
})

NOSES: Mapping[NoseType, str] = MappingProxyType({
    NoseType.DOT: '<circle cx="100" cy="105" r="3" fill="black"/>',
    NoseType.TRIANGLE: '<path d="M100 100 L95 110 L105 110 Z" fill="#8B4513"/>',
    NoseType.LINE: (
        '<line x1="100" y1="100" x2="100" y2="110" stroke="black" '
        'stroke-width="3" stroke-linecap="round"/>'
    ),
})

ACCESSORIES: Mapping[AccessoryType, str] = MappingProxyType({
    AccessoryType.NONE: "",
    AccessoryType.GLASSES: (
        '<circle cx="70" cy="80" r="15" fill="none" stroke="black" stroke-width="3"/>\n'
        '  <circle cx="130" cy="80" r="15" fill="none" stroke="black" stroke-width="3"/>\n'
        '  <line x1="85" y1="80" x2="115" y2="80" stroke="black" stroke-width="3"/>'
    ),
    AccessoryType.HAT: (
        '<rect x="50" y="15" width="100" height="10" fill="#FF6B6B"/>\n'
        '  <rect x="70" y="10" width="60" height="5" fill="#FF6B6B"/>'
    ),
    AccessoryType.EARRINGS: (
        '<circle cx="40" cy="95" r="5" fill="gold"/>\n'
        '  <circle cx="160" cy="95" r="5" fill="gold"/>'
    ),
})

HAIR: Mapping[HairType, HairLayers] = MappingProxyType({
    HairType.SHORT: HairLayers(
        back="",
        front=(
            '<path d="M55 36 Q55 45, 65 65 M70 30 Q70 40, 80 62 M85 24 Q95 40, 100 62 '
            'M100 22 Q110 30, 115 62 M115 24 Q130 40, 135 65 M135 28 Q155 45, 155 65" '
            'fill="none" stroke="{color}" stroke-width="10" stroke-linecap="round"/>'
        ),
    ),
    HairType.CURLY: HairLayers(
        back=(
            '<circle cx="60" cy="40" r="25" fill="{color}"/>\n'
            '  <circle cx="100" cy="30" r="30" fill="{color}"/>\n'
            '  <circle cx="140" cy="40" r="25" fill="{color}"/>'
        ),
        front="",
    ),
    HairType.SPIKY: HairLayers(
        back='<path d="M40 70 Q50 30, 100 25 Q150 30, 160 70" fill="{color}"/>',
        front=(
            '<path d="M55 65 L60 30 M75 65 L80 25 M95 65 L100 20 M115 65 L120 25 '
            'M135 65 L140 30" fill="none" stroke="{color}" stroke-width="6" '
            'stroke-linecap="round"/>'
        ),
    ),
    HairType.LONG: HairLayers(
        back=(
            '<ellipse cx="100" cy="60" rx="70" ry="50" fill="{color}"/>\n'
            '  <path d="M30 60 Q30 120, 40 160 L60 165 Q55 100, 60 60" fill="{color}"/>\n'
            '  <path d="M170 60 Q170 120, 160 160 L140 165 Q145 100, 140 60" fill="{color}"/>'
        ),
        front=(
            '<path d="M60 38 Q70 55, 75 60" fill="none" stroke="{color}" '
            'stroke-width="12" stroke-linecap="round"/>\n'
            '  <path d="M90 30 Q95 50, 100 60" fill="none" stroke="{color}" '
            'stroke-width="12" stroke-linecap="round"/>\n'
            '  <path d="M125 36 Q120 55, 115 60" fill="none" stroke="{color}" '
            'stroke-width="12" stroke-linecap="round"/>'
        ),
    ),
    HairType.BALD: HairLayers(back="", front=""),
})


def hair_layers(hair_type: HairType, color: str) -> HairLayers:
    layers = HAIR[hair_type]
    return HairLayers(
        back=layers.back.format(color=color),
        front=layers.front.format(color=color),
    )
