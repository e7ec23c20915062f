# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Tonal palettes and the per-style rules that derive them from a seed.
"""

from monet.palettes.dislike import fix_if_disliked, is_disliked
from monet.palettes.temperature import TemperatureCache
from monet.palettes.tonal_palette import TonalPalette
from monet.palettes.variants import (
    PaletteRules,
    SchemePalettes,
    build_palettes,
    maybe_fallback_spec_version,
    rules_for,
)

__all__ = [
    "TonalPalette",
    "TemperatureCache",
    # Dislike analysis
    "is_disliked",
    "fix_if_disliked",
    # Style rules
    "PaletteRules",
    "SchemePalettes",
    "build_palettes",
    "rules_for",
    "maybe_fallback_spec_version",
]
