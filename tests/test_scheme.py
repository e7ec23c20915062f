# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Tests for the ColorScheme entry point."""

import re

import numpy as np
import pytest

from monet import Brightness, ColorRole, ColorScheme, Contrast, Hct, SpecVersion, TargetPlatform, Variant
from monet.scheme import to_argb
from monet.score import DEFAULT_FALLBACK


SEED = 0xFF5C6BC0
RED = 0xFFFF0000


def _solid_image(r, g, b, height=100, width=100):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


class TestFromSeed:

    def test_hex_and_int_are_equal(self):
        a = ColorScheme.from_seed("#5C6BC0")
        b = ColorScheme.from_seed(SEED)
        assert a == b
        assert hash(a) == hash(b)

    def test_rgb_int_gets_alpha(self):
        assert ColorScheme.from_seed(0x5C6BC0).primary == SEED

    def test_hct_seed(self):
        assert ColorScheme.from_seed(Hct.from_argb(SEED)).primary == SEED

    def test_defaults(self):
        scheme = ColorScheme.from_seed(SEED)
        assert scheme.brightness is Brightness.LIGHT
        assert scheme.contrast is Contrast.STANDARD
        assert scheme.variant is Variant.TONAL_SPOT
        assert scheme.platform is TargetPlatform.PHONE
        assert scheme.spec_version is SpecVersion.SPEC_2021

    def test_primary_tone(self):
        light = ColorScheme.from_seed(SEED)
        dark = ColorScheme.from_seed(SEED, brightness=Brightness.DARK)
        assert light.get_hct(ColorRole.PRIMARY).tone == pytest.approx(40.0, abs=0.5)
        assert dark.get_hct(ColorRole.PRIMARY).tone == pytest.approx(80.0, abs=0.5)
        assert dark.is_dark

    def test_float_contrast(self):
        scheme = ColorScheme.from_seed(SEED, contrast=0.5)
        assert scheme.contrast is Contrast.MEDIUM
        assert scheme.dynamic_scheme.contrast_level == 0.5

    def test_invalid_contrast_raises(self):
        with pytest.raises(ValueError, match="Contrast"):
            ColorScheme.from_seed(SEED, contrast=2.0)

    def test_spec_version_fallback(self):
        scheme = ColorScheme.from_seed(SEED, variant=Variant.FIDELITY, spec_version=SpecVersion.SPEC_2025)
        assert scheme.spec_version is SpecVersion.SPEC_2021

    def test_spec_2025_watch(self):
        scheme = ColorScheme.from_seed(
            SEED, spec_version=SpecVersion.SPEC_2025, platform=TargetPlatform.WATCH,
        )
        assert scheme.dynamic_scheme.platform is TargetPlatform.WATCH
        assert len(scheme.to_dict()) == 49


class TestSeedOverrides:

    def test_secondary_uses_primary_rule(self):
        scheme = ColorScheme.from_seed(SEED, secondary=RED)
        red = Hct.from_argb(RED)
        assert scheme.palettes.secondary.hue == pytest.approx(red.hue)
        assert scheme.palettes.secondary.chroma == 36.0

    def test_tertiary_uses_primary_rule(self):
        scheme = ColorScheme.from_seed(SEED, tertiary=RED)
        assert scheme.palettes.tertiary.hue == pytest.approx(Hct.from_argb(RED).hue)
        assert scheme.palettes.tertiary.chroma == 36.0

    def test_neutral_uses_own_rule(self):
        scheme = ColorScheme.from_seed(SEED, neutral=RED, neutral_variant=RED)
        red = Hct.from_argb(RED)
        assert scheme.palettes.neutral.hue == pytest.approx(red.hue)
        assert scheme.palettes.neutral.chroma == 6.0
        assert scheme.palettes.neutral_variant.chroma == 8.0

    def test_default_error_palette(self):
        scheme = ColorScheme.from_seed(SEED, spec_version=SpecVersion.SPEC_2025)
        assert scheme.palettes.error.hue == 25.0
        assert scheme.palettes.error.chroma == 84.0

    def test_error_seed_2021_uses_primary_rule(self):
        scheme = ColorScheme.from_seed(SEED, error=RED)
        assert scheme.palettes.error.hue == pytest.approx(Hct.from_argb(RED).hue)
        assert scheme.palettes.error.chroma == 36.0

    def test_primary_unaffected(self):
        plain = ColorScheme.from_seed(SEED)
        seeded = ColorScheme.from_seed(SEED, secondary=RED)
        assert plain.get_color(ColorRole.PRIMARY) == seeded.get_color(ColorRole.PRIMARY)
        assert plain.get_color(ColorRole.SECONDARY) != seeded.get_color(ColorRole.SECONDARY)

    def test_seeds_take_part_in_equality(self):
        assert ColorScheme.from_seed(SEED) != ColorScheme.from_seed(SEED, error=RED)


class TestColors:

    def test_to_dict(self):
        colors = ColorScheme.from_seed(SEED).to_dict()
        assert len(colors) == 49
        assert set(colors) == {role.value for role in ColorRole}
        for value in colors.values():
            assert re.fullmatch(r"#[0-9A-F]{6}", value)

    def test_get_color_by_id(self):
        scheme = ColorScheme.from_seed(SEED)
        assert scheme.get_color("on_primary") == scheme.get_color(ColorRole.ON_PRIMARY)
        assert scheme.get_hex(ColorRole.ON_PRIMARY) == scheme.to_dict()["on_primary"]

    def test_unknown_role_raises(self):
        with pytest.raises(KeyError):
            ColorScheme.from_seed(SEED).get_color("not_a_role")

    def test_light_on_primary_is_white(self):
        assert ColorScheme.from_seed(SEED).get_hex(ColorRole.ON_PRIMARY) == "#FFFFFF"


class TestDerive:

    def test_derive_brightness(self):
        scheme = ColorScheme.from_seed(SEED)
        dark = scheme.derive(brightness=Brightness.DARK)
        assert dark.is_dark
        assert not scheme.is_dark
        assert dark.primary == scheme.primary
        assert dark == ColorScheme.from_seed(SEED, brightness=Brightness.DARK)

    def test_derive_contrast_float(self):
        scheme = ColorScheme.from_seed(SEED).derive(contrast=1.0)
        assert scheme.contrast is Contrast.HIGH

    def test_derive_seed(self):
        scheme = ColorScheme.from_seed(SEED).derive(secondary="#FF0000")
        assert scheme.secondary == RED


class TestConfigRoundTrip:

    def test_round_trip(self):
        scheme = ColorScheme.from_seed(
            SEED,
            tertiary=RED,
            brightness=Brightness.DARK,
            contrast=0.25,
            variant=Variant.VIBRANT,
            platform=TargetPlatform.WATCH,
            spec_version=SpecVersion.SPEC_2025,
        )
        config = scheme.config()
        assert config["primary"] == "#5C6BC0"
        assert config["tertiary"] == "#FF0000"
        assert "secondary" not in config
        assert ColorScheme.from_dict(config) == scheme

    def test_defaults_fill_missing(self):
        scheme = ColorScheme.from_dict({"primary": "#5C6BC0"})
        assert scheme == ColorScheme.from_seed(SEED)

    def test_missing_primary_raises(self):
        with pytest.raises(KeyError):
            ColorScheme.from_dict({"variant": "vibrant"})

    def test_bad_option_raises(self):
        with pytest.raises(ValueError):
            ColorScheme.from_dict({"primary": "#5C6BC0", "variant": "sparkly"})


class TestFromImage:

    def test_red_image(self):
        scheme = ColorScheme.from_image(_solid_image(255, 0, 0))
        assert scheme.primary == RED

    def test_black_image_uses_fallback(self):
        scheme = ColorScheme.from_image(_solid_image(0, 0, 0))
        assert scheme.primary == DEFAULT_FALLBACK

    def test_custom_fallback(self):
        scheme = ColorScheme.from_image(_solid_image(255, 255, 255), fallback="#00FF00")
        assert scheme.primary == 0xFF00FF00

    def test_options_forwarded(self):
        scheme = ColorScheme.from_image(_solid_image(0, 0, 255), brightness=Brightness.DARK)
        assert scheme.is_dark
        assert scheme.primary == 0xFF0000FF

    def test_large_image_is_downscaled(self):
        img = np.zeros((600, 400, 3), dtype=np.uint8)
        img[:, :] = [0, 0, 255]
        img[:300, :] = [255, 0, 0]
        scheme = ColorScheme.from_image(img)
        assert scheme.primary in (RED, 0xFF0000FF)

    def test_file(self, tmp_path):
        Image = pytest.importorskip("PIL.Image")
        path = tmp_path / "red.png"
        Image.fromarray(_solid_image(255, 0, 0, 30, 40)).save(path)
        assert ColorScheme.from_image(path).primary == RED


class TestToArgb:

    def test_type_error(self):
        with pytest.raises(TypeError, match="Expected ARGB"):
            to_argb(1.5)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            to_argb(True)

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            to_argb(-1)

    def test_alpha_forced(self):
        assert to_argb(0x805C6BC0) == SEED
