# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Image loading for seed extraction.

Images are read into (H, W, 3) or (H, W, 4) uint8 arrays and shrunk to at
most 112 pixels per side with nearest-neighbour sampling. Seed extraction
only needs the color distribution, so the small sample keeps quantization
fast without changing the result in practice.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray

from monet.quantize import quantize
from monet.score import DEFAULT_FALLBACK, score

logger = logging.getLogger(__name__)


# Longest side of the sample the quantizer sees
MAX_DIMENSION = 112

# Colors requested from the quantizer before scoring
EXTRACT_MAX_COLORS = 128

ImageInput = Union[str, Path, NDArray[np.uint8]]


def load_image(image: ImageInput) -> NDArray[np.uint8]:
    """
    Load an image from file or validate an array.

    Files are read with Pillow. An embedded ICC profile is converted to
    sRGB so the colors match what a color picker shows. Images with an
    alpha channel keep it, so transparent pixels can be skipped later.

    Args:
        image: Path to an image file, or an (H, W, 3) / (H, W, 4) uint8 array

    Returns:
        Pixel array of shape (H, W, 3) or (H, W, 4)

    Raises:
        ImportError: If a path is given and Pillow is not installed
        ValueError: If the array has the wrong shape or dtype, or no pixels
        TypeError: If image is neither a path nor an array
    """
    if isinstance(image, (str, Path)):
        pixels = _read_file(image)
    elif isinstance(image, np.ndarray):
        pixels = image
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"Expected (H, W, 3) or (H, W, 4) array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {pixels.dtype}")
    else:
        raise TypeError(f"Expected file path or numpy array, got {type(image)}")

    height, width = pixels.shape[:2]
    if height <= 0 or width <= 0:
        raise ValueError("Image dimensions must be greater than zero")
    return pixels


def _read_file(path: Union[str, Path]) -> NDArray[np.uint8]:
    try:
        from PIL import Image, ImageCms
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install monet[image]"
        ) from e

    img = Image.open(path)
    has_alpha = img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info
    img = img.convert("RGBA" if has_alpha else "RGB")

    if "icc_profile" in img.info:
        try:
            embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(img.info["icc_profile"]))
            srgb_profile = ImageCms.createProfile("sRGB")
            if has_alpha:
                alpha = img.getchannel("A")
                img = ImageCms.profileToProfile(img.convert("RGB"), embedded_profile, srgb_profile)
                img.putalpha(alpha)
            else:
                img = ImageCms.profileToProfile(img, embedded_profile, srgb_profile)
        except (OSError, ImageCms.PyCMSError) as e:
            # Unreadable profile: use the pixel values as stored
            logger.debug("Skipping ICC conversion for %s: %s", path, e)

    pixels = np.array(img, dtype=np.uint8)
    logger.debug("Loaded %s (%dx%d, %s)", path, pixels.shape[1], pixels.shape[0], img.mode)
    return pixels


def downscale(pixels: NDArray[np.uint8], max_dimension: int = MAX_DIMENSION) -> NDArray[np.uint8]:
    """
    Nearest-neighbour downscale so neither side exceeds ``max_dimension``.

    Each axis is clamped on its own, so very wide or tall images are
    squashed rather than letterboxed. Sample positions are truncated
    source coordinates.
    """
    height, width = pixels.shape[:2]
    if height <= max_dimension and width <= max_dimension:
        return pixels

    target_height = min(height, max_dimension)
    target_width = min(width, max_dimension)
    rows = (np.arange(target_height) * (height / target_height)).astype(np.intp)
    cols = (np.arange(target_width) * (width / target_width)).astype(np.intp)
    return pixels[rows[:, None], cols[None, :]]


def extract_seed(image: ImageInput, fallback: int = DEFAULT_FALLBACK) -> int:
    """
    The best theme seed color in an image.

    Args:
        image: Path to an image file, or a uint8 pixel array
        fallback: ARGB returned when the image has no suitable color

    Returns:
        Seed color as ARGB
    """
    pixels = downscale(load_image(image))
    result = quantize(pixels, EXTRACT_MAX_COLORS)
    return score(result, desired=1, fallback=fallback)[0]
