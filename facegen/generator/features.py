"""
Feature extraction: identifier → SHA-256 digest → seven feature channels.

Each channel reads a disjoint hex slice of the digest and scales it into a
bounded domain:

    value = floor(int(slice, 16) / 16**length * domain)

The same identifier always yields the same features; no other entropy is
used.
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any, Dict, NamedTuple, Tuple


class EyeType(IntEnum):
    ROUND = 0
    RECTANGULAR = 1
    BLUE = 2
    WINK = 3


class MouthType(IntEnum):
    SMILE = 0
    STRAIGHT = 1
    SAD = 2
    GRIN = 3


class NoseType(IntEnum):
    DOT = 0
    TRIANGLE = 1
    LINE = 2


class HairType(IntEnum):
    SHORT = 0
    CURLY = 1
    SPIKY = 2
    LONG = 3
    BALD = 4


class AccessoryType(IntEnum):
    NONE = 0
    GLASSES = 1
    HAT = 2
    EARRINGS = 3


HUE_DOMAIN = 360

SKIN_SATURATION, SKIN_LIGHTNESS = 50, 70
HAIR_SATURATION, HAIR_LIGHTNESS = 60, 50


class Channel(NamedTuple):
    name: str
    offset: int
    length: int
    domain: int


# (offset, length) pairs must not overlap.
CHANNELS: Tuple[Channel, ...] = (
    Channel("skin_hue", 0, 4, HUE_DOMAIN),
    Channel("eye_type", 4, 2, len(EyeType)),
    Channel("mouth_type", 6, 2, len(MouthType)),
    Channel("hair_hue", 8, 4, HUE_DOMAIN),
    Channel("nose_type", 12, 2, len(NoseType)),
    Channel("hair_type", 14, 2, len(HairType)),
    Channel("accessory_type", 16, 2, len(AccessoryType)),
)


def digest(identifier: str) -> str:
    """Return the 64-char hex SHA-256 digest of *identifier*."""
    return hashlib.sha256(_utf8(identifier)).hexdigest()


def _utf8(identifier: str) -> bytes:
    """UTF-8 bytes with lone surrogates as U+FFFD and paired surrogates joined."""
    try:
        return identifier.encode("utf-8")
    except UnicodeEncodeError:
        utf16 = identifier.encode("utf-16-le", errors="surrogatepass")
        return utf16.decode("utf-16-le", errors="replace").encode("utf-8")


def slice_channel(hex_digest: str, channel: Channel) -> int:
    """Scale one digest slice into ``[0, channel.domain)``."""
    chunk = hex_digest[channel.offset:channel.offset + channel.length]
    # Integer form of floor(v / 16**len * domain); exact for every v < 16**len.
    return int(chunk, 16) * channel.domain // (16 ** channel.length)


def hsl(hue: int, saturation: int, lightness: int) -> str:
    return f"hsl({hue}, {saturation}%, {lightness}%)"


@dataclass(frozen=True)
class AvatarFeatures:
    """Immutable set of visual features derived from one identifier."""

    skin_color: str
    eye_type: EyeType
    mouth_type: MouthType
    nose_type: NoseType
    hair_type: HairType
    hair_color: str
    accessory_type: AccessoryType

    def to_dict(self) -> Dict[str, Any]:
        return {k: (int(v) if isinstance(v, IntEnum) else v) for k, v in asdict(self).items()}


def features_from_digest(hex_digest: str) -> AvatarFeatures:
    values = {c.name: slice_channel(hex_digest, c) for c in CHANNELS}
    return AvatarFeatures(
        skin_color=hsl(values["skin_hue"], SKIN_SATURATION, SKIN_LIGHTNESS),
        eye_type=EyeType(values["eye_type"]),
        mouth_type=MouthType(values["mouth_type"]),
        nose_type=NoseType(values["nose_type"]),
        hair_type=HairType(values["hair_type"]),
        hair_color=hsl(values["hair_hue"], HAIR_SATURATION, HAIR_LIGHTNESS),
        accessory_type=AccessoryType(values["accessory_type"]),
    )


def extract_features(identifier: str) -> AvatarFeatures:
    """Derive the feature set for *identifier*. Never raises for a ``str``."""
    return features_from_digest(digest(identifier))
