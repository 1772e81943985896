"""
Tests for SVG composition.
"""

import xml.etree.ElementTree as ET

import pytest

from facegen.generator import (
    AvatarGenerator,
    compose,
    extract_features,
    generate_face_svg,
    render_image,
)
from facegen.generator.catalog import ACCESSORIES, EYES, HAIR, MOUTHS, NOSES, hair_layers
from facegen.generator.composer import format_size
from facegen.generator.features import (
    AccessoryType,
    AvatarFeatures,
    EyeType,
    HairType,
    MouthType,
    NoseType,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def make_features(**overrides) -> AvatarFeatures:
    values = dict(
        skin_color="hsl(10, 50%, 70%)",
        eye_type=EyeType.ROUND,
        mouth_type=MouthType.SMILE,
        nose_type=NoseType.DOT,
        hair_type=HairType.SPIKY,
        hair_color="hsl(200, 60%, 50%)",
        accessory_type=AccessoryType.GLASSES,
    )
    values.update(overrides)
    return AvatarFeatures(**values)


class TestCatalogs:
    """Test suite for the fragment catalogs."""

    def test_catalogs_cover_every_value(self):
        assert set(EYES) == set(EyeType)
        assert set(MOUTHS) == set(MouthType)
        assert set(NOSES) == set(NoseType)
        assert set(ACCESSORIES) == set(AccessoryType)
        assert set(HAIR) == set(HairType)

    def test_catalogs_are_read_only(self):
        with pytest.raises(TypeError):
            EYES[EyeType.ROUND] = ""  # type: ignore[index]

    def test_bald_has_no_hair(self):
        assert hair_layers(HairType.BALD, "red") == ("", "")

    def test_hair_layers_split(self):
        """Short is front-only, curly is back-only, spiky and long have both."""
        assert HAIR[HairType.SHORT].back == "" and HAIR[HairType.SHORT].front
        assert HAIR[HairType.CURLY].back and HAIR[HairType.CURLY].front == ""
        assert HAIR[HairType.SPIKY].back and HAIR[HairType.SPIKY].front
        assert HAIR[HairType.LONG].back and HAIR[HairType.LONG].front

    def test_hair_color_is_filled_in(self):
        layers = hair_layers(HairType.LONG, "hsl(1, 60%, 50%)")
        assert "{color}" not in layers.back + layers.front
        assert "hsl(1, 60%, 50%)" in layers.back
        assert "hsl(1, 60%, 50%)" in layers.front


class TestCompose:
    """Test suite for compose / render_image."""

    def test_layer_order(self):
        """Background, hair back, face, eyes, nose, mouth, accessory, hair front."""
        f = make_features()
        svg = compose(f, 200)
        hair = hair_layers(f.hair_type, f.hair_color)
        markers = [
            '<rect width="200" height="200" fill="#f0f0f0"/>',
            hair.back,
            f'<circle cx="100" cy="100" r="80" fill="{f.skin_color}"/>',
            EYES[f.eye_type],
            NOSES[f.nose_type],
            MOUTHS[f.mouth_type],
            ACCESSORIES[f.accessory_type],
            hair.front,
        ]
        positions = [svg.index(m) for m in markers]
        assert positions == sorted(positions)

    @pytest.mark.parametrize("size", [50, 200, 400, 1000])
    def test_size_is_written_verbatim(self, size):
        svg = render_image("scale", size)
        assert f'width="{size}"' in svg
        assert f'height="{size}"' in svg
        assert 'viewBox="0 0 200 200"' in svg

    def test_internal_geometry_independent_of_size(self):
        small = render_image("geometry", 50)
        large = render_image("geometry", 1000)
        assert small.split("\n", 1)[1] == large.split("\n", 1)[1]

    def test_format_size(self):
        assert format_size(400) == "400"
        assert format_size(400.0) == "400"
        assert format_size(250.5) == "250.5"

    def test_default_size(self):
        assert 'width="200"' in render_image("default")

    def test_deterministic_bytes(self):
        assert render_image("same", 300) == render_image("same", 300)

    def test_different_identifiers_render_differently(self):
        assert render_image("user1@example.com", 200) != render_image("user2@example.com", 200)

    def test_skin_color_appears_verbatim(self):
        for ident in ("a", "b", "test", "user1@example.com"):
            assert extract_features(ident).skin_color in render_image(ident, 120)

    @pytest.mark.parametrize("ident", ["", "test", "ÜñíçødéЖ漢字🙂", "ctl\x01\x02", "y" * 10_000])
    def test_standalone_svg_document(self, ident):
        svg = render_image(ident, 256)
        assert svg.count("<svg") == 1
        assert svg.count("</svg>") == 1
        root = ET.fromstring(svg)
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width") == "256"

    def test_every_combination_parses(self):
        """All catalog combinations compose into valid XML."""
        for eye in EyeType:
            for mouth in MouthType:
                for nose in NoseType:
                    for hair in HairType:
                        for acc in AccessoryType:
                            f = make_features(
                                eye_type=eye,
                                mouth_type=mouth,
                                nose_type=nose,
                                hair_type=hair,
                                accessory_type=acc,
                            )
                            ET.fromstring(compose(f, 64))


class TestAvatarGenerator:
    """Test suite for the AvatarGenerator wrapper."""

    def test_features_computed_once(self):
        gen = AvatarGenerator("test")
        assert gen.get_features() is gen.get_features()
        assert gen.get_features() == extract_features("test")

    def test_render_matches_functions(self):
        gen = AvatarGenerator("wrapper")
        assert gen.render(321) == render_image("wrapper", 321)
        assert generate_face_svg("wrapper", 321) == gen.render(321)

    def test_digest_exposed(self):
        assert AvatarGenerator("test").digest.startswith("9f86d081")

    def test_identifier_not_retained(self):
        assert not hasattr(AvatarGenerator("private@example.com"), "identifier")
