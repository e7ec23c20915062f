# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Perceptual color model.

HCT (hue, chroma, tone) on top of CAM16 and CIE L*, the exact forward
conversion from sRGB, the bounded gamut search for the inverse, and
tone-based contrast math.
"""

from monet.hct.cam16 import Cam16
from monet.hct.hct import Hct
from monet.hct.solver import solve_to_argb
from monet.hct.viewing_conditions import ViewingConditions
from monet.hct import color_utils, contrast

__all__ = [
    "Hct",
    "Cam16",
    "ViewingConditions",
    "solve_to_argb",
    # Modules
    "color_utils",
    "contrast",
]
