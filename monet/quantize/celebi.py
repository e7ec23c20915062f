# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Image quantization: Wu box cutting refined by weighted k-means.

Wu gives a fast, deterministic partition of the color space; its box
centroids then seed k-means, which moves them to the weighted means of
the colors they actually attract.

Reference: M. Emre Celebi, "Improving the performance of k-means for
color quantization" (2011).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from monet.hct.color_utils import argb_array_from_rgb
from monet.quantize.wsmeans import QuantizerConfig, QuantizerWsmeans
from monet.quantize.wu import QuantizerWu

logger = logging.getLogger(__name__)


PixelInput = Union[Sequence[int], NDArray[np.integer]]


@dataclass(frozen=True, eq=False)
class QuantizerResult(Mapping[int, int]):
    """
    Read-only mapping of ARGB color → pixel count.

    Iteration follows the order in which clusters were produced.
    """
    color_to_count: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "color_to_count", MappingProxyType(dict(self.color_to_count)))

    def __getitem__(self, argb: int) -> int:
        return self.color_to_count[argb]

    def __iter__(self) -> Iterator[int]:
        return iter(self.color_to_count)

    def __len__(self) -> int:
        return len(self.color_to_count)

    @property
    def total(self) -> int:
        """Number of pixels represented."""
        return sum(self.color_to_count.values())


def opaque_pixels(pixels: PixelInput) -> NDArray[np.int64]:
    """
    Normalize a pixel buffer to a 1-D array of opaque ARGB ints.

    Accepted layouts:
        - flat sequence or 1-D array of packed ARGB ints
        - (N, 3) or (H, W, 3) array of 8-bit RGB
        - (N, 4) or (H, W, 4) array of 8-bit RGBA

    Pixels whose alpha is below 255 are dropped.

    Raises:
        ValueError: If the buffer is empty
        TypeError: If the layout or dtype is not one of the above
    """
    array = np.asarray(pixels)
    if array.size == 0:
        raise ValueError("Pixel buffer is empty")
    if not np.issubdtype(array.dtype, np.integer):
        raise TypeError(f"Expected an integer pixel buffer, got dtype {array.dtype}")

    if array.ndim == 1:
        argb = array.astype(np.int64) & 0xFFFFFFFF
        return argb[(argb >> 24) == 0xFF]

    if array.ndim not in (2, 3) or array.shape[-1] not in (3, 4):
        raise TypeError(
            f"Expected ARGB ints or an (N, 3|4) / (H, W, 3|4) array, got shape {array.shape}"
        )
    if array.dtype != np.uint8:
        raise TypeError(f"Expected uint8 channel values, got {array.dtype}")

    channels = array.reshape(-1, array.shape[-1])
    if channels.shape[1] == 4:
        channels = channels[channels[:, 3] == 255]
    return argb_array_from_rgb(channels[:, :3])


def quantize(
    pixels: PixelInput,
    max_colors: int = 128,
    config: Optional[QuantizerConfig] = None,
) -> QuantizerResult:
    """
    Reduce an image to at most ``max_colors`` representative colors.

    Args:
        pixels: Pixel buffer (see ``opaque_pixels`` for accepted layouts)
        max_colors: Upper bound on the number of output colors
        config: k-means tuning; defaults to ``QuantizerConfig()``

    Returns:
        QuantizerResult mapping each color to the number of pixels it
        represents. Fully transparent input yields an empty result.

    Raises:
        ValueError: If the buffer is empty or max_colors < 1
        TypeError: If the buffer layout is not supported
    """
    if max_colors < 1:
        raise ValueError(f"max_colors must be >= 1, got {max_colors}")
    argb = opaque_pixels(pixels)
    if len(argb) == 0:
        logger.debug("No opaque pixels to quantize")
        return QuantizerResult()

    seeds = QuantizerWu().quantize(argb, max_colors)
    colors = QuantizerWsmeans(config).quantize(argb, seeds, max_colors)
    logger.debug("Quantized %d pixels to %d colors", len(argb), len(colors))
    return QuantizerResult(colors)
