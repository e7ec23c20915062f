# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Tests for the HCT color model (CAM16 forward conversion and gamut solver)."""

import itertools
import math

import pytest

from monet.hct import Cam16, Hct
from monet.hct.color_utils import (
    argb_from_hex,
    argb_from_rgb,
    clamp,
    difference_degrees,
    hex_from_argb,
    lstar_from_argb,
    round_half_up,
    sanitize_degrees,
)


class TestForwardConversion:

    def test_red(self):
        hct = Hct.from_argb(0xFFFF0000)
        assert hct.hue == pytest.approx(27.41, abs=0.1)
        assert hct.chroma == pytest.approx(113.36, abs=0.1)
        assert hct.tone == pytest.approx(53.24, abs=0.1)

    def test_green(self):
        hct = Hct.from_argb(0xFF00FF00)
        assert hct.hue == pytest.approx(142.14, abs=0.1)
        assert hct.chroma == pytest.approx(108.41, abs=0.1)
        assert hct.tone == pytest.approx(87.74, abs=0.1)

    def test_blue(self):
        hct = Hct.from_argb(0xFF0000FF)
        assert hct.hue == pytest.approx(282.79, abs=0.1)
        assert hct.chroma == pytest.approx(87.23, abs=0.1)
        assert hct.tone == pytest.approx(32.30, abs=0.1)

    def test_white_and_black_tones(self):
        assert Hct.from_argb(0xFFFFFFFF).tone == pytest.approx(100.0, abs=1e-6)
        assert Hct.from_argb(0xFF000000).tone == pytest.approx(0.0, abs=1e-6)

    def test_tone_is_lstar(self):
        argb = 0xFF5C6BC0
        assert Hct.from_argb(argb).tone == pytest.approx(lstar_from_argb(argb))

    def test_cam16_distance_to_self_is_zero(self):
        cam = Cam16.from_argb(0xFF5C6BC0)
        assert cam.distance(cam) == pytest.approx(0.0, abs=1e-9)


class TestRoundTrip:

    @pytest.mark.parametrize(
        "rgb",
        list(itertools.product((0, 51, 102, 153, 204, 255), repeat=3)),
    )
    def test_grid_round_trips(self, rgb):
        argb = argb_from_rgb(*rgb)
        hct = Hct.from_argb(argb)
        assert Hct.from_hct(hct.hue, hct.chroma, hct.tone).argb == argb

    @pytest.mark.parametrize("hex_str", ["#5C6BC0", "#4285F4", "#B3261E", "#FFD600", "#00695C"])
    def test_theme_colors_round_trip(self, hex_str):
        hct = Hct.from_hex(hex_str)
        assert Hct.from_hct(hct.hue, hct.chroma, hct.tone).to_hex() == hex_str


class TestGamutClamp:

    @pytest.mark.parametrize("hue", [0.0, 60.0, 120.0, 180.0, 240.0, 300.0])
    @pytest.mark.parametrize("tone", [20.0, 50.0, 80.0])
    def test_excess_chroma_is_clamped(self, hue, tone):
        hct = Hct.from_hct(hue, 200.0, tone)
        assert hct.chroma < 200.0
        assert hct.tone == pytest.approx(tone, abs=0.5)
        assert difference_degrees(hct.hue, hue) < 2.0

    def test_clamped_color_is_self_consistent(self):
        hct = Hct.from_hct(120.0, 200.0, 50.0)
        again = Hct.from_argb(hct.argb)
        assert again.hue == hct.hue
        assert again.chroma == hct.chroma

    def test_zero_chroma_is_gray(self):
        hct = Hct.from_hct(200.0, 0.0, 50.0)
        r = (hct.argb >> 16) & 0xFF
        g = (hct.argb >> 8) & 0xFF
        b = hct.argb & 0xFF
        assert r == g == b

    def test_extreme_tones(self):
        assert Hct.from_hct(30.0, 50.0, 0.0).argb == 0xFF000000
        assert Hct.from_hct(30.0, 50.0, 100.0).argb == 0xFFFFFFFF


class TestValidation:

    def test_negative_chroma_raises(self):
        with pytest.raises(ValueError, match="Chroma"):
            Hct.from_hct(100.0, -1.0, 50.0)

    def test_tone_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Tone"):
            Hct.from_hct(100.0, 10.0, 100.5)
        with pytest.raises(ValueError, match="Tone"):
            Hct.from_hct(100.0, 10.0, -0.5)

    def test_nan_raises(self):
        with pytest.raises(ValueError):
            Hct.from_hct(math.nan, 10.0, 50.0)

    def test_hue_wraps(self):
        assert Hct.from_hct(370.0, 30.0, 50.0).argb == Hct.from_hct(10.0, 30.0, 50.0).argb

    def test_immutable(self):
        hct = Hct.from_argb(0xFF5C6BC0)
        with pytest.raises(AttributeError):
            hct.tone = 10.0


class TestHueBands:

    def test_blue_band(self):
        assert Hct.is_blue(260.0)
        assert not Hct.is_blue(270.0)

    def test_yellow_band(self):
        assert Hct.is_yellow(110.0)
        assert not Hct.is_yellow(125.0)

    def test_cyan_band(self):
        assert Hct.is_cyan(180.0)
        assert not Hct.is_cyan(207.0)


class TestColorUtils:

    def test_hex_parsing(self):
        assert argb_from_hex("#5C6BC0") == 0xFF5C6BC0
        assert argb_from_hex("5c6bc0") == 0xFF5C6BC0
        assert argb_from_hex("#FFF") == 0xFFFFFFFF
        assert argb_from_hex("#805C6BC0") == 0x805C6BC0

    def test_invalid_hex_raises(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            argb_from_hex("#12345")
        with pytest.raises(ValueError, match="Invalid hex"):
            argb_from_hex("#GGGGGG")

    def test_hex_formatting_drops_alpha(self):
        assert hex_from_argb(0x805C6BC0) == "#5C6BC0"

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0

    def test_sanitize_degrees(self):
        assert sanitize_degrees(-30.0) == pytest.approx(330.0)
        assert sanitize_degrees(720.0) == pytest.approx(0.0)

    def test_difference_degrees(self):
        assert difference_degrees(350.0, 10.0) == pytest.approx(20.0)

    def test_clamp(self):
        assert clamp(0.0, 100.0, 120.0) == 100.0
        assert clamp(0.0, 100.0, -5.0) == 0.0
