# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Tests for seed scoring and the quantize → score pipeline."""

import numpy as np
import pytest

from monet.quantize import quantize
from monet.score import DEFAULT_FALLBACK, ScoreConfig, score


def _solid_image(r, g, b, height=100, width=100):
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


class TestScore:

    def test_empty_returns_fallback(self):
        assert score({}) == [DEFAULT_FALLBACK]

    def test_custom_fallback(self):
        assert score({}, fallback=0xFF00FF00) == [0xFF00FF00]

    def test_grays_return_fallback(self):
        colors = {0xFF000000: 100, 0xFFFFFFFF: 100, 0xFF808080: 100}
        assert score(colors) == [DEFAULT_FALLBACK]

    def test_unfiltered_keeps_grays(self):
        result = score({0xFF808080: 100}, filter_colors=False)
        assert result == [0xFF808080]

    def test_unfiltered_keeps_rare_colors(self):
        colors = {0xFFFF0000: 1, 0xFF0000FF: 1000}
        result = score(colors, desired=4, filter_colors=False)
        assert set(result) == {0xFFFF0000, 0xFF0000FF}

    def test_rare_color_filtered(self):
        # Red covers well under 1% of the hue circle's population
        colors = {0xFFFF0000: 1, 0xFF0000FF: 1000}
        assert score(colors, desired=4) == [0xFF0000FF]

    def test_prefers_chroma(self):
        colors = {0xFF0000FF: 70, 0xFF8C8CB4: 30}
        assert score(colors, desired=1) == [0xFF0000FF]

    def test_hue_separation(self):
        # Two nearly identical reds collapse to one pick
        colors = {0xFFFF0000: 50, 0xFFF00000: 50, 0xFF0000FF: 50}
        result = score(colors, desired=4)
        assert 0xFF0000FF in result
        assert len(result) == 2

    def test_desired_limits_result(self):
        colors = {0xFFFF0000: 10, 0xFF00FF00: 10, 0xFF0000FF: 10, 0xFFFFFF00: 10}
        assert len(score(colors, desired=2)) == 2

    def test_desired_validation(self):
        with pytest.raises(ValueError, match="desired"):
            score({0xFFFF0000: 1}, desired=0)

    def test_config_cutoff(self):
        # Raising the chroma cutoff above every candidate forces the fallback
        config = ScoreConfig(cutoff_chroma=200.0)
        assert score({0xFFFF0000: 10}, config=config) == [DEFAULT_FALLBACK]


class TestPipeline:

    @pytest.mark.parametrize("size", [(1, 1), (10, 20), (100, 100), (112, 3)])
    def test_red_image_scores_red(self, size):
        result = quantize(_solid_image(255, 0, 0, *size), 128)
        assert score(result, desired=1) == [0xFFFF0000]

    def test_green_image_scores_green(self):
        result = quantize(_solid_image(0, 255, 0), 128)
        assert score(result, desired=1) == [0xFF00FF00]

    def test_blue_image_scores_blue(self):
        result = quantize(_solid_image(0, 0, 255), 128)
        assert score(result, desired=1) == [0xFF0000FF]

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255)])
    def test_achromatic_image_falls_back(self, rgb):
        result = quantize(_solid_image(*rgb), 128)
        assert score(result, desired=1) == [DEFAULT_FALLBACK]

    def test_transparent_image_falls_back(self):
        img = np.zeros((8, 8, 4), dtype=np.uint8)
        assert score(quantize(img), desired=1) == [DEFAULT_FALLBACK]
