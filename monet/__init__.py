# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Monet -- Material Design 3 dynamic color for Python.

Derives a full light or dark color scheme from a seed color or from the
most suitable color of an image.

Quick start::

    from monet import ColorScheme, ColorRole, Brightness

    scheme = ColorScheme.from_seed("#5C6BC0", brightness=Brightness.DARK)
    scheme.get_hex(ColorRole.PRIMARY)
    scheme.to_dict()

    scheme = ColorScheme.from_image("wallpaper.jpg")   # needs Pillow
"""

from __future__ import annotations

__version__ = "1.0.0"

from monet.dynamiccolor import DynamicScheme
from monet.hct import Hct
from monet.image import extract_seed
from monet.palettes import TonalPalette
from monet.quantize import quantize
from monet.schema import (
    Brightness,
    ColorRole,
    Contrast,
    SpecVersion,
    TargetPlatform,
    Variant,
)
from monet.scheme import ColorScheme
from monet.score import score

__all__ = [
    # Core API
    "ColorScheme",
    "ColorRole",
    # Options
    "Brightness",
    "Contrast",
    "Variant",
    "TargetPlatform",
    "SpecVersion",
    # Engine
    "Hct",
    "TonalPalette",
    "DynamicScheme",
    "quantize",
    "score",
    "extract_seed",
    # Version
    "__version__",
]
