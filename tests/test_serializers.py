# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Tests for the JSON and design-token serializers."""

import json

import pytest

from monet import Brightness, ColorRole, ColorScheme, Contrast, Variant
from monet.runtime.serializers import PALETTE_TONES, SerializerFormat, to_json, to_tokens


@pytest.fixture
def scheme():
    return ColorScheme.from_seed("#5C6BC0")


class TestToJson:

    def test_all_roles(self, scheme):
        data = json.loads(to_json(scheme))
        assert len(data) == 49
        assert data == scheme.to_dict()

    def test_role_order(self, scheme):
        data = json.loads(to_json(scheme))
        assert list(data) == [role.value for role in ColorRole]

    def test_compact(self, scheme):
        output = to_json(scheme)
        assert "\n" not in output
        assert ", " not in output

    def test_pretty(self, scheme):
        output = to_json(scheme, format=SerializerFormat.JSON_PRETTY)
        assert "\n" in output
        assert json.loads(output) == json.loads(to_json(scheme))

    def test_camel_case_keys(self, scheme):
        data = json.loads(to_json(scheme, camel_case_keys=True))
        assert data["onPrimaryContainer"] == scheme.get_hex(ColorRole.ON_PRIMARY_CONTAINER)
        assert "on_primary" not in data

    def test_include_config(self, scheme):
        derived = scheme.derive(brightness=Brightness.DARK, contrast=Contrast.HIGH, secondary="#FF0000")
        data = json.loads(to_json(derived, include_config=True))
        assert set(data) == {"config", "colors"}
        assert ColorScheme.from_dict(data["config"]) == derived
        assert data["colors"] == derived.to_dict()


class TestToTokens:

    def test_schemes(self, scheme):
        tokens = to_tokens(scheme)
        assert set(tokens["schemes"]) == {
            "light", "light-medium-contrast", "light-high-contrast",
            "dark", "dark-medium-contrast", "dark-high-contrast",
        }
        for colors in tokens["schemes"].values():
            assert len(colors) == 49

    def test_light_matches_scheme(self, scheme):
        light = to_tokens(scheme)["schemes"]["light"]
        assert light["primary"] == scheme.get_hex(ColorRole.PRIMARY)
        assert light["onSurfaceVariant"] == scheme.get_hex(ColorRole.ON_SURFACE_VARIANT)

    def test_dark_input_gives_same_document(self, scheme):
        dark = scheme.derive(brightness=Brightness.DARK)
        assert to_tokens(dark) == to_tokens(scheme)

    def test_high_contrast_matches_derive(self, scheme):
        tokens = to_tokens(scheme)
        high = scheme.derive(brightness=Brightness.DARK, contrast=Contrast.HIGH)
        assert tokens["schemes"]["dark-high-contrast"]["primary"] == high.get_hex(ColorRole.PRIMARY)

    def test_without_contrast_variants(self, scheme):
        tokens = to_tokens(scheme, contrast_variants=False)
        assert set(tokens["schemes"]) == {"light", "dark"}

    def test_core_colors(self, scheme):
        tokens = to_tokens(scheme.derive(neutral_variant="#00FF00"))
        assert tokens["seed"] == "#5C6BC0"
        assert tokens["coreColors"] == {"primary": "#5C6BC0", "neutralVariant": "#00FF00"}

    def test_metadata(self, scheme):
        tokens = to_tokens(scheme.derive(variant=Variant.VIBRANT), description="brand")
        assert tokens["description"] == "brand"
        assert tokens["variant"] == "vibrant"
        assert tokens["specVersion"] == "2021"
        assert tokens["extendedColors"] == []

    def test_palettes(self, scheme):
        palettes = to_tokens(scheme)["palettes"]
        assert set(palettes) == {"primary", "secondary", "tertiary", "neutral", "neutral-variant", "error"}
        for palette in palettes.values():
            assert list(palette) == [str(tone) for tone in PALETTE_TONES]
            assert palette["0"] == "#000000"
            assert palette["100"] == "#FFFFFF"
        assert palettes["primary"]["40"] == scheme.get_hex(ColorRole.PRIMARY)

    def test_without_palettes(self, scheme):
        assert "palettes" not in to_tokens(scheme, include_palettes=False)

    def test_json_serializable(self, scheme):
        tokens = to_tokens(scheme)
        assert json.loads(json.dumps(tokens)) == tokens
