# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Palette styles as data.

Every style variant is a ``PaletteRules`` record: one builder per key
palette, each a pure function of (source color, is_dark, platform,
contrast level). The 2021 table covers every variant; the 2025 table
revises TONAL_SPOT, NEUTRAL, VIBRANT and EXPRESSIVE and falls back to 2021
for the rest.

Hue rotation tables are (breakpoints, rotations) pairs: a source hue in
[breakpoints[i], breakpoints[i + 1]) is rotated by rotations[i].
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from monet.hct import Hct
from monet.hct.color_utils import sanitize_degrees
from monet.palettes.dislike import fix_if_disliked
from monet.palettes.temperature import TemperatureCache
from monet.palettes.tonal_palette import TonalPalette
from monet.schema import SpecVersion, TargetPlatform, Variant

logger = logging.getLogger(__name__)


PaletteBuilder = Callable[[Hct, bool, TargetPlatform, float], TonalPalette]

# Error palette used when neither a seed nor the spec provides one
DEFAULT_ERROR_HUE = 25.0
DEFAULT_ERROR_CHROMA = 84.0


@dataclass(frozen=True)
class PaletteRules:
    """Builders for the key palettes of one style variant."""
    primary: PaletteBuilder
    secondary: PaletteBuilder
    tertiary: PaletteBuilder
    neutral: PaletteBuilder
    neutral_variant: PaletteBuilder
    error: Optional[PaletteBuilder] = None


@dataclass(frozen=True)
class SchemePalettes:
    """The six key palettes of a scheme."""
    primary: TonalPalette
    secondary: TonalPalette
    tertiary: TonalPalette
    neutral: TonalPalette
    neutral_variant: TonalPalette
    error: TonalPalette


# =============================================================================
# Hue tables
# =============================================================================


def piecewise_value(
    source_hue: float,
    breakpoints: Sequence[float],
    values: Sequence[float],
) -> float:
    """Value for the hue band containing ``source_hue``, or the hue itself if none does."""
    size = min(len(breakpoints) - 1, len(values))
    for i in range(size):
        if breakpoints[i] <= source_hue < breakpoints[i + 1]:
            return sanitize_degrees(values[i])
    return source_hue


def rotated_hue(
    source_hue: float,
    breakpoints: Sequence[float],
    rotations: Sequence[float],
) -> float:
    """``source_hue`` rotated by the amount its hue band specifies."""
    if min(len(breakpoints) - 1, len(rotations)) <= 0:
        return sanitize_degrees(source_hue)
    rotation = piecewise_value(source_hue, breakpoints, rotations)
    return sanitize_degrees(source_hue + rotation)


def _palette(hue: float, chroma: float) -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(sanitize_degrees(hue), chroma)


def _constant(chroma: float, rotation: float = 0.0) -> PaletteBuilder:
    """Builder for a fixed chroma at a fixed rotation from the source hue."""
    def build(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
        return _palette(source.hue + rotation, chroma)
    return build


def _table(breakpoints: Sequence[float], rotations: Sequence[float], chroma: float) -> PaletteBuilder:
    """Builder for a fixed chroma at a hue-dependent rotation."""
    def build(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
        return _palette(rotated_hue(source.hue, breakpoints, rotations), chroma)
    return build


# =============================================================================
# 2021 rules
# =============================================================================


def _source(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
    return _palette(source.hue, source.chroma)


def _fidelity_secondary(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
    return _palette(source.hue, max(source.chroma - 32.0, source.chroma * 0.5))


def _fidelity_tertiary(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
    return TonalPalette.from_hct(fix_if_disliked(TemperatureCache(source).complement))


def _content_tertiary(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
    return TonalPalette.from_hct(fix_if_disliked(TemperatureCache(source).analogous_colors(3, 6)[2]))


def _fidelity_neutral(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
    return _palette(source.hue, source.chroma / 8.0)


def _fidelity_neutral_variant(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
    return _palette(source.hue, source.chroma / 8.0 + 4.0)


_VIBRANT_HUES_2021 = (0, 41, 61, 101, 131, 181, 251, 301, 360)
_VIBRANT_SECONDARY_ROTATIONS_2021 = (18, 15, 10, 12, 15, 18, 15, 12, 12)
_VIBRANT_TERTIARY_ROTATIONS_2021 = (35, 30, 20, 25, 30, 35, 30, 25, 25)

_EXPRESSIVE_HUES_2021 = (0, 21, 51, 121, 151, 191, 271, 321, 360)
_EXPRESSIVE_SECONDARY_ROTATIONS_2021 = (45, 95, 45, 20, 45, 90, 45, 45, 45)
_EXPRESSIVE_TERTIARY_ROTATIONS_2021 = (120, 120, 20, 45, 20, 15, 20, 120, 120)

_FIDELITY_RULES = PaletteRules(
    primary=_source,
    secondary=_fidelity_secondary,
    tertiary=_fidelity_tertiary,
    neutral=_fidelity_neutral,
    neutral_variant=_fidelity_neutral_variant,
)

RULES_2021: dict[Variant, PaletteRules] = {
    Variant.TONAL_SPOT: PaletteRules(
        primary=_constant(36.0),
        secondary=_constant(16.0),
        tertiary=_constant(24.0, rotation=60.0),
        neutral=_constant(6.0),
        neutral_variant=_constant(8.0),
    ),
    Variant.FIDELITY: _FIDELITY_RULES,
    Variant.CONTENT: PaletteRules(
        primary=_FIDELITY_RULES.primary,
        secondary=_FIDELITY_RULES.secondary,
        tertiary=_content_tertiary,
        neutral=_FIDELITY_RULES.neutral,
        neutral_variant=_FIDELITY_RULES.neutral_variant,
    ),
    Variant.MONOCHROME: PaletteRules(
        primary=_constant(0.0),
        secondary=_constant(0.0),
        tertiary=_constant(0.0),
        neutral=_constant(0.0),
        neutral_variant=_constant(0.0),
    ),
    Variant.NEUTRAL: PaletteRules(
        primary=_constant(12.0),
        secondary=_constant(8.0),
        tertiary=_constant(16.0),
        neutral=_constant(2.0),
        neutral_variant=_constant(2.0),
    ),
    Variant.VIBRANT: PaletteRules(
        primary=_constant(200.0),
        secondary=_table(_VIBRANT_HUES_2021, _VIBRANT_SECONDARY_ROTATIONS_2021, 24.0),
        tertiary=_table(_VIBRANT_HUES_2021, _VIBRANT_TERTIARY_ROTATIONS_2021, 32.0),
        neutral=_constant(10.0),
        neutral_variant=_constant(12.0),
    ),
    Variant.EXPRESSIVE: PaletteRules(
        primary=_constant(40.0, rotation=240.0),
        secondary=_table(_EXPRESSIVE_HUES_2021, _EXPRESSIVE_SECONDARY_ROTATIONS_2021, 24.0),
        tertiary=_table(_EXPRESSIVE_HUES_2021, _EXPRESSIVE_TERTIARY_ROTATIONS_2021, 32.0),
        neutral=_constant(8.0, rotation=15.0),
        neutral_variant=_constant(12.0, rotation=15.0),
    ),
    Variant.RAINBOW: PaletteRules(
        primary=_constant(48.0),
        secondary=_constant(16.0),
        tertiary=_constant(24.0, rotation=60.0),
        neutral=_constant(0.0),
        neutral_variant=_constant(0.0),
    ),
    Variant.FRUIT_SALAD: PaletteRules(
        primary=_constant(48.0, rotation=-50.0),
        secondary=_constant(36.0, rotation=-50.0),
        tertiary=_constant(36.0),
        neutral=_constant(10.0),
        neutral_variant=_constant(16.0),
    ),
}


# =============================================================================
# 2025 rules
# =============================================================================

_PHONE = TargetPlatform.PHONE

_EXPRESSIVE_HUES_2025 = (0, 105, 140, 204, 253, 278, 300, 333, 360)
_EXPRESSIVE_SECONDARY_ROTATIONS_2025 = (-160, 155, -100, 96, -96, -156, -165, -160)
_EXPRESSIVE_TERTIARY_ROTATIONS_2025 = (-165, 160, -105, 101, -101, -160, -170, -165)
_EXPRESSIVE_NEUTRAL_HUES_2025 = (0, 71, 124, 253, 278, 300, 360)
_EXPRESSIVE_NEUTRAL_ROTATIONS_2025 = (10, 0, 10, 0, 10, 0)

_VIBRANT_HUES_2025 = (0, 38, 105, 140, 333, 360)
_VIBRANT_SECONDARY_ROTATIONS_2025 = (-14, 10, -14, 10, -14)
_VIBRANT_TERTIARY_HUES_2025 = (0, 38, 71, 105, 140, 161, 253, 333, 360)
_VIBRANT_TERTIARY_ROTATIONS_2025 = (-72, 35, 24, -24, 62, 50, 62, -72)

_NEUTRAL_TERTIARY_HUES_2025 = (0, 38, 105, 161, 204, 278, 333, 360)
_NEUTRAL_TERTIARY_ROTATIONS_2025 = (-32, 26, 10, -39, 24, -15, -32)

_TONAL_SPOT_TERTIARY_HUES_2025 = (0, 20, 71, 161, 333, 360)
_TONAL_SPOT_TERTIARY_ROTATIONS_2025 = (-40, 48, -32, 40, -32)

_ERROR_HUE_BREAKPOINTS_2025 = (0, 3, 13, 23, 33, 43, 153, 273, 360)
_ERROR_HUES_2025 = (12, 22, 32, 12, 22, 32, 22, 12)


def _error_hue_2025(source: Hct) -> float:
    return piecewise_value(source.hue, _ERROR_HUE_BREAKPOINTS_2025, _ERROR_HUES_2025)


def _expressive_neutral_hue(source: Hct) -> float:
    return rotated_hue(source.hue, _EXPRESSIVE_NEUTRAL_HUES_2025, _EXPRESSIVE_NEUTRAL_ROTATIONS_2025)


def _expressive_neutral_chroma(source: Hct, is_dark: bool, platform: TargetPlatform) -> float:
    neutral_hue = _expressive_neutral_hue(source)
    if platform is _PHONE:
        if is_dark:
            return 6.0 if Hct.is_yellow(neutral_hue) else 14.0
        return 18.0
    return 12.0


def _vibrant_neutral_hue(source: Hct) -> float:
    return rotated_hue(source.hue, _VIBRANT_HUES_2025, _VIBRANT_SECONDARY_ROTATIONS_2025)


def _vibrant_neutral_chroma(source: Hct, platform: TargetPlatform) -> float:
    neutral_hue = _vibrant_neutral_hue(source)
    if platform is _PHONE:
        return 28.0
    return 28.0 if Hct.is_blue(neutral_hue) else 20.0


def _error_2025(phone_chroma: float, watch_chroma: float) -> PaletteBuilder:
    def build(source: Hct, is_dark: bool, platform: TargetPlatform, contrast_level: float) -> TonalPalette:
        return _palette(_error_hue_2025(source), phone_chroma if platform is _PHONE else watch_chroma)
    return build


# --- TONAL_SPOT ---

def _tonal_spot_primary_2025(source, is_dark, platform, contrast_level):
    return _palette(source.hue, 26.0 if platform is _PHONE and is_dark else 32.0)


def _tonal_spot_tertiary_2025(source, is_dark, platform, contrast_level):
    hue = rotated_hue(source.hue, _TONAL_SPOT_TERTIARY_HUES_2025, _TONAL_SPOT_TERTIARY_ROTATIONS_2025)
    return _palette(hue, 28.0 if platform is _PHONE else 32.0)


def _tonal_spot_neutral_2025(source, is_dark, platform, contrast_level):
    return _palette(source.hue, 5.0 if platform is _PHONE else 10.0)


def _tonal_spot_neutral_variant_2025(source, is_dark, platform, contrast_level):
    return _palette(source.hue, (5.0 if platform is _PHONE else 10.0) * 1.7)


# --- NEUTRAL ---

def _neutral_primary_2025(source, is_dark, platform, contrast_level):
    if platform is _PHONE:
        chroma = 12.0 if Hct.is_blue(source.hue) else 8.0
    else:
        chroma = 16.0 if Hct.is_blue(source.hue) else 12.0
    return _palette(source.hue, chroma)


def _neutral_secondary_2025(source, is_dark, platform, contrast_level):
    if platform is _PHONE:
        chroma = 6.0 if Hct.is_blue(source.hue) else 4.0
    else:
        chroma = 10.0 if Hct.is_blue(source.hue) else 6.0
    return _palette(source.hue, chroma)


def _neutral_tertiary_2025(source, is_dark, platform, contrast_level):
    hue = rotated_hue(source.hue, _NEUTRAL_TERTIARY_HUES_2025, _NEUTRAL_TERTIARY_ROTATIONS_2025)
    return _palette(hue, 20.0 if platform is _PHONE else 36.0)


def _neutral_neutral_2025(source, is_dark, platform, contrast_level):
    return _palette(source.hue, 1.4 if platform is _PHONE else 6.0)


def _neutral_neutral_variant_2025(source, is_dark, platform, contrast_level):
    return _palette(source.hue, (1.4 if platform is _PHONE else 6.0) * 2.2)


# --- VIBRANT ---

def _vibrant_primary_2025(source, is_dark, platform, contrast_level):
    return _palette(source.hue, 74.0 if platform is _PHONE else 56.0)


def _vibrant_secondary_2025(source, is_dark, platform, contrast_level):
    hue = rotated_hue(source.hue, _VIBRANT_HUES_2025, _VIBRANT_SECONDARY_ROTATIONS_2025)
    return _palette(hue, 56.0 if platform is _PHONE else 36.0)


def _vibrant_tertiary_2025(source, is_dark, platform, contrast_level):
    hue = rotated_hue(source.hue, _VIBRANT_TERTIARY_HUES_2025, _VIBRANT_TERTIARY_ROTATIONS_2025)
    return _palette(hue, 56.0)


def _vibrant_neutral_2025(source, is_dark, platform, contrast_level):
    return _palette(_vibrant_neutral_hue(source), _vibrant_neutral_chroma(source, platform))


def _vibrant_neutral_variant_2025(source, is_dark, platform, contrast_level):
    return _palette(_vibrant_neutral_hue(source), _vibrant_neutral_chroma(source, platform) * 1.29)


# --- EXPRESSIVE ---

def _expressive_primary_2025(source, is_dark, platform, contrast_level):
    if platform is _PHONE:
        chroma = 36.0 if is_dark else 48.0
    else:
        chroma = 40.0
    return _palette(source.hue, chroma)


def _expressive_secondary_2025(source, is_dark, platform, contrast_level):
    hue = rotated_hue(source.hue, _EXPRESSIVE_HUES_2025, _EXPRESSIVE_SECONDARY_ROTATIONS_2025)
    if platform is _PHONE:
        chroma = 16.0 if is_dark else 24.0
    else:
        chroma = 24.0
    return _palette(hue, chroma)


def _expressive_tertiary_2025(source, is_dark, platform, contrast_level):
    hue = rotated_hue(source.hue, _EXPRESSIVE_HUES_2025, _EXPRESSIVE_TERTIARY_ROTATIONS_2025)
    return _palette(hue, 48.0)


def _expressive_neutral_2025(source, is_dark, platform, contrast_level):
    return _palette(_expressive_neutral_hue(source), _expressive_neutral_chroma(source, is_dark, platform))


def _expressive_neutral_variant_2025(source, is_dark, platform, contrast_level):
    neutral_hue = _expressive_neutral_hue(source)
    neutral_chroma = _expressive_neutral_chroma(source, is_dark, platform)
    return _palette(neutral_hue, neutral_chroma * (1.6 if Hct.is_yellow(neutral_hue) else 2.3))


RULES_2025: dict[Variant, PaletteRules] = {
    Variant.TONAL_SPOT: PaletteRules(
        primary=_tonal_spot_primary_2025,
        secondary=_constant(16.0),
        tertiary=_tonal_spot_tertiary_2025,
        neutral=_tonal_spot_neutral_2025,
        neutral_variant=_tonal_spot_neutral_variant_2025,
        error=_error_2025(60.0, 48.0),
    ),
    Variant.NEUTRAL: PaletteRules(
        primary=_neutral_primary_2025,
        secondary=_neutral_secondary_2025,
        tertiary=_neutral_tertiary_2025,
        neutral=_neutral_neutral_2025,
        neutral_variant=_neutral_neutral_variant_2025,
        error=_error_2025(50.0, 40.0),
    ),
    Variant.VIBRANT: PaletteRules(
        primary=_vibrant_primary_2025,
        secondary=_vibrant_secondary_2025,
        tertiary=_vibrant_tertiary_2025,
        neutral=_vibrant_neutral_2025,
        neutral_variant=_vibrant_neutral_variant_2025,
        error=_error_2025(80.0, 60.0),
    ),
    Variant.EXPRESSIVE: PaletteRules(
        primary=_expressive_primary_2025,
        secondary=_expressive_secondary_2025,
        tertiary=_expressive_tertiary_2025,
        neutral=_expressive_neutral_2025,
        neutral_variant=_expressive_neutral_variant_2025,
        error=_error_2025(64.0, 48.0),
    ),
}


# =============================================================================
# Public API
# =============================================================================


def maybe_fallback_spec_version(spec_version: SpecVersion, variant: Variant) -> SpecVersion:
    """The spec version actually used for a variant (2025 only covers four styles)."""
    if spec_version is SpecVersion.SPEC_2025 and variant not in RULES_2025:
        logger.debug("Variant %s has no 2025 rules; using the 2021 spec", variant.name)
        return SpecVersion.SPEC_2021
    return spec_version


def rules_for(variant: Variant, spec_version: SpecVersion = SpecVersion.SPEC_2021) -> PaletteRules:
    """Palette rules for a variant under a spec version."""
    if maybe_fallback_spec_version(spec_version, variant) is SpecVersion.SPEC_2025:
        return RULES_2025[variant]
    return RULES_2021[variant]


def default_error_palette() -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(DEFAULT_ERROR_HUE, DEFAULT_ERROR_CHROMA)


def build_palettes(
    source: Hct,
    variant: Variant = Variant.TONAL_SPOT,
    *,
    is_dark: bool = False,
    contrast_level: float = 0.0,
    platform: TargetPlatform = TargetPlatform.PHONE,
    spec_version: SpecVersion = SpecVersion.SPEC_2021,
) -> SchemePalettes:
    """
    Derive the key palettes of a scheme from its source color.

    Args:
        source: Seed color
        variant: Palette style
        is_dark: Whether the scheme is dark (2025 rules depend on it)
        contrast_level: Contrast level in [-1, 1]
        platform: Target platform (2025 rules depend on it)
        spec_version: Spec version; silently 2021 for styles without 2025 rules

    Returns:
        SchemePalettes. The error palette is the spec's own when it defines
        one, otherwise hue 25 / chroma 84.
    """
    rules = rules_for(variant, spec_version)
    args = (source, is_dark, platform, contrast_level)
    error = rules.error(*args) if rules.error is not None else default_error_palette()
    return SchemePalettes(
        primary=rules.primary(*args),
        secondary=rules.secondary(*args),
        tertiary=rules.tertiary(*args),
        neutral=rules.neutral(*args),
        neutral_variant=rules.neutral_variant(*args),
        error=error,
    )
