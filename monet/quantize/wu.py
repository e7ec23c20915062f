# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Wu's color quantizer.

Pixels are binned into a 32x32x32 RGB histogram (5 bits per channel,
indexed from 1 so that prefix sums have a zero border). Cumulative moment
tables let the population, channel sums and squared-magnitude sum of any
axis-aligned box be read in constant time, so the variance of every
candidate split plane is cheap. The box with the largest variance is cut
along the axis and position that best separates it, until enough boxes
exist or nothing can be split.

Reference: Xiaolin Wu, "Color quantization by dynamic programming and
principal analysis" (1992).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from monet.hct.color_utils import argb_from_rgb, rgb_from_argb_array, round_half_up

logger = logging.getLogger(__name__)


INDEX_BITS = 5
SIDE_LENGTH = (1 << INDEX_BITS) + 1  # 33
TOTAL_SIZE = SIDE_LENGTH ** 3

# Moment channels: population, red/green/blue sums, squared magnitude sum
_W, _R, _G, _B, _M2 = range(5)


@dataclass
class _Box:
    """Half-open box (lower exclusive, upper inclusive) in histogram indices."""
    lower: list[int]
    upper: list[int]

    @property
    def volume(self) -> int:
        return int(np.prod([hi - lo for lo, hi in zip(self.lower, self.upper)]))

    @classmethod
    def whole(cls) -> _Box:
        return cls(lower=[0, 0, 0], upper=[SIDE_LENGTH - 1] * 3)


class QuantizerWu:
    """
    Variance-minimizing box cutter over a 5-bit RGB histogram.

    Usage:
        centroids = QuantizerWu().quantize(argb_pixels, 128)
    """

    def __init__(self) -> None:
        self._moments: NDArray[np.float64] = np.zeros((SIDE_LENGTH,) * 3 + (5,))

    def quantize(self, pixels: NDArray[np.integer], max_colors: int) -> list[int]:
        """
        Cut the color space into at most ``max_colors`` boxes.

        Args:
            pixels: 1-D array of opaque ARGB ints
            max_colors: Maximum number of boxes

        Returns:
            ARGB centroid of every non-empty box, in cut order. May be
            shorter than ``max_colors`` when the input has fewer distinct
            bins.
        """
        self._build_moments(pixels)
        boxes = self._create_boxes(max_colors)
        colors = self._create_result(boxes)
        logger.debug("Wu produced %d boxes for %d requested colors", len(colors), max_colors)
        return colors

    # =========================================================================
    # Histogram
    # =========================================================================

    def _build_moments(self, pixels: NDArray[np.integer]) -> None:
        colors, counts = np.unique(np.asarray(pixels, dtype=np.int64), return_counts=True)
        rgb = rgb_from_argb_array(colors)
        bins = (rgb >> (8 - INDEX_BITS)) + 1
        index = (bins[:, 0] * SIDE_LENGTH + bins[:, 1]) * SIDE_LENGTH + bins[:, 2]

        counts = counts.astype(np.float64)
        rgb = rgb.astype(np.float64)
        weights = (
            counts,
            counts * rgb[:, 0],
            counts * rgb[:, 1],
            counts * rgb[:, 2],
            counts * np.sum(rgb * rgb, axis=1),
        )
        histogram = np.stack(
            [np.bincount(index, weights=w, minlength=TOTAL_SIZE) for w in weights],
            axis=-1,
        ).reshape((SIDE_LENGTH,) * 3 + (5,))

        # Inclusive prefix sums over the three color axes
        self._moments = histogram.cumsum(axis=0).cumsum(axis=1).cumsum(axis=2)

    # =========================================================================
    # Moment lookups
    # =========================================================================

    def _planes(self, box: _Box, axis: int, positions: NDArray[np.intp]) -> NDArray[np.float64]:
        """Cumulative moments of the box's cross-section at each position along ``axis``."""
        moments = np.moveaxis(self._moments, axis, 0)[positions]
        (lo1, hi1), (lo2, hi2) = (
            (box.lower[other], box.upper[other]) for other in range(3) if other != axis
        )
        return (
            moments[:, hi1, hi2]
            - moments[:, hi1, lo2]
            - moments[:, lo1, hi2]
            + moments[:, lo1, lo2]
        )

    def _volume(self, box: _Box) -> NDArray[np.float64]:
        planes = self._planes(box, 0, np.array([box.lower[0], box.upper[0]]))
        return planes[1] - planes[0]

    def _variance(self, box: _Box) -> float:
        moments = self._volume(box)
        if moments[_W] == 0.0:
            return 0.0
        hypotenuse = float(np.sum(moments[_R:_M2] ** 2))
        return float(moments[_M2]) - hypotenuse / float(moments[_W])

    # =========================================================================
    # Box cutting
    # =========================================================================

    def _maximize(self, box: _Box, axis: int, whole: NDArray[np.float64]) -> tuple[float, int]:
        """
        Best cut of ``box`` along ``axis``.

        Returns:
            (score, position); position is -1 when no cut leaves both
            halves populated.
        """
        first, last = box.lower[axis] + 1, box.upper[axis]
        if first >= last:
            return 0.0, -1
        positions = np.arange(first, last)
        planes = self._planes(box, axis, np.concatenate(([box.lower[axis]], positions)))
        lower_half = planes[1:] - planes[0]
        upper_half = whole - lower_half

        # Cuts leaving either half empty score zero
        valid = (lower_half[:, _W] != 0.0) & (upper_half[:, _W] != 0.0)
        score = np.zeros(len(positions))
        for half in (lower_half, upper_half):
            part = np.zeros(len(positions))
            np.divide(np.sum(half[:, _R:_M2] ** 2, axis=1), half[:, _W], out=part, where=valid)
            score += part

        best = int(np.argmax(score))
        if score[best] <= 0.0:
            return 0.0, -1
        return float(score[best]), int(positions[best])

    def _cut(self, one: _Box, two: _Box) -> bool:
        """Split ``one`` in place, moving its upper part into ``two``."""
        whole = self._volume(one)
        results = [self._maximize(one, axis, whole) for axis in range(3)]
        scores = [score for score, _ in results]

        if scores[0] >= scores[1] and scores[0] >= scores[2]:
            axis = 0
            if results[0][1] < 0:
                return False
        elif scores[1] >= scores[0] and scores[1] >= scores[2]:
            axis = 1
        else:
            axis = 2

        two.lower = list(one.lower)
        two.upper = list(one.upper)
        one.upper[axis] = results[axis][1]
        two.lower[axis] = one.upper[axis]
        return True

    def _create_boxes(self, max_colors: int) -> list[_Box]:
        boxes = [_Box.whole()]
        variances = [0.0]
        next_index = 0

        while len(boxes) < max_colors:
            candidate = _Box(lower=[0, 0, 0], upper=[0, 0, 0])
            if self._cut(boxes[next_index], candidate):
                boxes.append(candidate)
                variances.append(0.0)
                for i in (next_index, len(boxes) - 1):
                    variances[i] = self._variance(boxes[i]) if boxes[i].volume > 1 else 0.0
            else:
                variances[next_index] = 0.0

            next_index = int(np.argmax(variances))
            if variances[next_index] <= 0.0:
                break

        return boxes

    def _create_result(self, boxes: list[_Box]) -> list[int]:
        colors = []
        for box in boxes:
            moments = self._volume(box)
            weight = float(moments[_W])
            if weight <= 0.0:
                continue
            r, g, b = (round_half_up(float(moments[c]) / weight) for c in (_R, _G, _B))
            colors.append(argb_from_rgb(r, g, b))
        return colors
