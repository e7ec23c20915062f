# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Tests for the Wu + k-means quantizer."""

import numpy as np
import pytest

from monet.quantize import (
    QuantizerConfig,
    QuantizerResult,
    QuantizerWsmeans,
    QuantizerWu,
    opaque_pixels,
    quantize,
)


RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF


def _solid_image(r, g, b, height=100, width=100):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _two_tone_image(rgb1, rgb2, height=100, width=200):
    """Create an image that is half one color, half another."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, :width // 2] = rgb1
    img[:, width // 2:] = rgb2
    return img


class TestUniformImage:

    @pytest.mark.parametrize("rgb", [(255, 0, 0), (0, 255, 0), (0, 0, 255), (0x12, 0x34, 0x56)])
    def test_single_bucket(self, rgb):
        result = quantize(_solid_image(*rgb))
        expected = 0xFF000000 | (rgb[0] << 16) | (rgb[1] << 8) | rgb[2]
        assert dict(result) == {expected: 100 * 100}

    @pytest.mark.parametrize("size", [(1, 1), (3, 7), (50, 20), (128, 128)])
    def test_any_size(self, size):
        result = quantize(_solid_image(255, 0, 0, *size))
        assert dict(result) == {RED: size[0] * size[1]}

    def test_total(self):
        result = quantize(_solid_image(10, 200, 30, 20, 30))
        assert result.total == 600


class TestMultipleColors:

    def test_two_colors(self):
        result = quantize(_two_tone_image([255, 0, 0], [0, 0, 255]))
        assert dict(result) == {RED: 100 * 100, BLUE: 100 * 100}

    def test_max_colors_one(self):
        result = quantize(_two_tone_image([255, 0, 0], [0, 0, 255]), max_colors=1)
        assert len(result) == 1
        assert result.total == 200 * 100

    def test_population_is_preserved(self):
        rng = np.random.default_rng(7)
        pixels = rng.integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
        result = quantize(pixels, max_colors=16)
        assert 1 <= len(result) <= 16
        assert result.total == 64 * 64

    def test_deterministic(self):
        rng = np.random.default_rng(11)
        pixels = rng.integers(0, 256, size=(40, 40, 3), dtype=np.uint8)
        assert dict(quantize(pixels, 8)) == dict(quantize(pixels, 8))


class TestPixelLayouts:

    def test_argb_sequence(self):
        result = quantize([RED] * 10 + [GREEN] * 5)
        assert dict(result) == {RED: 10, GREEN: 5}

    def test_rgb_rows(self):
        pixels = np.array([[255, 0, 0]] * 4, dtype=np.uint8)
        assert dict(quantize(pixels)) == {RED: 4}

    def test_transparent_pixels_dropped(self):
        img = np.zeros((10, 10, 4), dtype=np.uint8)
        img[..., 0] = 255
        img[:5, :, 3] = 255  # Top half opaque
        assert dict(quantize(img)) == {RED: 50}

    def test_all_transparent_is_empty(self):
        img = np.zeros((10, 10, 4), dtype=np.uint8)
        result = quantize(img)
        assert len(result) == 0
        assert result.total == 0

    def test_argb_without_alpha_dropped(self):
        argb = opaque_pixels(np.array([0x00FF0000, RED], dtype=np.int64))
        np.testing.assert_array_equal(argb, [RED])


class TestValidation:

    def test_empty_buffer_raises(self):
        with pytest.raises(ValueError, match="empty"):
            quantize(np.zeros((0, 3), dtype=np.uint8))

    def test_max_colors_raises(self):
        with pytest.raises(ValueError, match="max_colors"):
            quantize(_solid_image(1, 2, 3), max_colors=0)

    def test_float_buffer_raises(self):
        with pytest.raises(TypeError, match="integer"):
            quantize(np.zeros((4, 4, 3), dtype=np.float32))

    def test_bad_shape_raises(self):
        with pytest.raises(TypeError, match="shape"):
            quantize(np.zeros((4, 4, 5), dtype=np.uint8))

    def test_wide_channels_raise(self):
        with pytest.raises(TypeError, match="uint8"):
            quantize(np.zeros((4, 4, 3), dtype=np.int32))

    def test_config_validation(self):
        with pytest.raises(ValueError, match="max_iterations"):
            QuantizerConfig(max_iterations=0)
        with pytest.raises(ValueError, match="min_movement_distance"):
            QuantizerConfig(min_movement_distance=-1.0)


class TestStages:

    def test_wu_uniform(self):
        pixels = np.full(50, 0xFF123456, dtype=np.int64)
        assert QuantizerWu().quantize(pixels, 128) == [0xFF123456]

    def test_wu_respects_max_colors(self):
        rng = np.random.default_rng(3)
        rgb = rng.integers(0, 256, size=(500, 3))
        pixels = 0xFF000000 | (rgb[:, 0] << 16) | (rgb[:, 1] << 8) | rgb[:, 2]
        assert len(QuantizerWu().quantize(pixels, 10)) <= 10

    def test_wsmeans_random_start(self):
        pixels = np.array([RED] * 20 + [BLUE] * 10, dtype=np.int64)
        result = QuantizerWsmeans().quantize(pixels, [], 2)
        assert sum(result.values()) == 30

    def test_result_is_mapping(self):
        result = QuantizerResult({RED: 3})
        assert result[RED] == 3
        assert list(result) == [RED]
        assert result == {RED: 3}
