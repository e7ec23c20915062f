# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Tests for tone-based contrast math."""

import pytest

from monet.hct import contrast


class TestRatio:

    def test_black_on_white_is_maximum(self):
        assert contrast.ratio_of_tones(0.0, 100.0) == pytest.approx(21.0)

    def test_same_tone_is_one(self):
        assert contrast.ratio_of_tones(42.0, 42.0) == pytest.approx(1.0)

    def test_symmetric(self):
        assert contrast.ratio_of_tones(30.0, 80.0) == pytest.approx(contrast.ratio_of_tones(80.0, 30.0))


class TestLighter:

    def test_reaches_ratio(self):
        tone = contrast.lighter(40.0, 3.0)
        assert tone > 40.0
        assert contrast.ratio_of_tones(40.0, tone) >= 3.0

    def test_impossible_ratio(self):
        assert contrast.lighter(90.0, 10.0) == -1.0

    def test_out_of_range_input(self):
        assert contrast.lighter(110.0, 2.0) == -1.0
        assert contrast.lighter(-10.0, 2.0) == -1.0

    def test_unsafe_falls_back_to_white(self):
        assert contrast.lighter_unsafe(100.0, 2.0) == 100.0


class TestDarker:

    def test_reaches_ratio(self):
        tone = contrast.darker(60.0, 4.5)
        assert tone < 60.0
        assert contrast.ratio_of_tones(60.0, tone) >= 4.5

    def test_impossible_ratio(self):
        assert contrast.darker(10.0, 20.0) == -1.0

    def test_out_of_range_input(self):
        assert contrast.darker(110.0, 2.0) == -1.0
        assert contrast.darker(-10.0, 2.0) == -1.0

    def test_unsafe_falls_back_to_black(self):
        assert contrast.darker_unsafe(0.0, 2.0) == 0.0
