# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Dynamic color: resolving semantic roles to concrete colors.

Each spec version is a table of role records; a ``DynamicScheme`` resolves
roles against one table, honoring background contrast curves and tone
delta pairs.
"""

from monet.dynamiccolor.color_spec import PALETTE_KEY_COLORS, ColorSpec
from monet.dynamiccolor.contrast_curve import ContrastCurve
from monet.dynamiccolor.dynamic_color import (
    DynamicColor,
    enable_light_foreground,
    foreground_tone,
    tone_allows_light_foreground,
    tone_prefers_light_foreground,
)
from monet.dynamiccolor.dynamic_scheme import DynamicScheme, get_spec
from monet.dynamiccolor.spec_2021 import SPEC_2021
from monet.dynamiccolor.spec_2025 import SPEC_2025
from monet.dynamiccolor.tone_delta_pair import DeltaConstraint, ToneDeltaPair, TonePolarity

__all__ = [
    "DynamicScheme",
    "DynamicColor",
    # Constraints
    "ContrastCurve",
    "ToneDeltaPair",
    "TonePolarity",
    "DeltaConstraint",
    # Specs
    "ColorSpec",
    "SPEC_2021",
    "SPEC_2025",
    "PALETTE_KEY_COLORS",
    "get_spec",
    # Foreground helpers
    "foreground_tone",
    "tone_prefers_light_foreground",
    "tone_allows_light_foreground",
    "enable_light_foreground",
]
