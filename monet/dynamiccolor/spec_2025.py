# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
The 2025 Material color spec.

Extends the 2021 role table. Accent tones are chosen where their palette
is most colorful (``t_max_c`` / ``t_min_c``), surfaces pick up chroma
through per-style multipliers, watches get their own tones, and the four
accents gain "dim" variants. Tone delta pairs carry an explicit
constraint instead of a nearer/farther heuristic.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Callable, Optional

from monet.dynamiccolor import spec_2021
from monet.dynamiccolor.color_spec import (
    ColorSpec,
    highest_surface,
    resolve_second_background,
)
from monet.dynamiccolor.contrast_curve import ContrastCurve
from monet.dynamiccolor.dynamic_color import DynamicColor, foreground_tone
from monet.dynamiccolor.spec_2021 import (
    MAX_DELTA_PASSES,
    constant,
    error_palette,
    neutral_palette,
    neutral_variant_palette,
    primary_palette,
    secondary_palette,
    tertiary_palette,
)
from monet.dynamiccolor.tone_delta_pair import DeltaConstraint, ToneDeltaPair, TonePolarity
from monet.hct import Hct, contrast
from monet.hct.color_utils import clamp
from monet.palettes.tonal_palette import TonalPalette
from monet.schema import SpecVersion, TargetPlatform, Variant

if TYPE_CHECKING:
    from monet.dynamiccolor.dynamic_scheme import DynamicScheme


# Float slack when checking a tone separation against its delta
DELTA_EPSILON = 1e-6

# Contrast level -> curve, keyed by the ratio wanted at standard contrast
_CONTRAST_CURVES = {
    1.5: ContrastCurve(1.5, 1.5, 3.0, 5.5),
    3.0: ContrastCurve(3.0, 3.0, 4.5, 7.0),
    4.5: ContrastCurve(4.5, 4.5, 7.0, 11.0),
    6.0: ContrastCurve(6.0, 6.0, 7.0, 11.0),
    7.0: ContrastCurve(7.0, 7.0, 11.0, 21.0),
    9.0: ContrastCurve(9.0, 9.0, 11.0, 21.0),
    11.0: ContrastCurve(11.0, 11.0, 21.0, 21.0),
    21.0: ContrastCurve(21.0, 21.0, 21.0, 21.0),
}


def get_contrast_curve(default_contrast: float) -> ContrastCurve:
    """Standard curve for a role that needs ``default_contrast`` at standard contrast."""
    known = _CONTRAST_CURVES.get(default_contrast)
    if known is not None:
        return known
    return ContrastCurve(default_contrast, default_contrast, 7.0, 21.0)


def find_best_tone_for_chroma(hue: float, chroma: float, tone: float, by_decreasing_tone: bool) -> float:
    """
    Walk from ``tone`` toward the other end until the palette reaches ``chroma``.

    Returns:
        The tone with the highest chroma seen, stopping early once the
        requested chroma is met.
    """
    answer = tone
    best = Hct.from_hct(hue, chroma, answer)
    while best.chroma < chroma:
        tone += -1.0 if by_decreasing_tone else 1.0
        if tone < 0.0 or tone > 100.0:
            break
        candidate = Hct.from_hct(hue, chroma, tone)
        if best.chroma < candidate.chroma:
            best = candidate
            answer = tone
    return answer


def t_max_c(palette: TonalPalette, lower: float = 0.0, upper: float = 100.0, chroma_multiplier: float = 1.0) -> float:
    """Lightest tone of maximum chroma, clamped to [lower, upper]."""
    answer = find_best_tone_for_chroma(palette.hue, palette.chroma * chroma_multiplier, 100.0, True)
    return clamp(lower, upper, answer)


def t_min_c(palette: TonalPalette, lower: float = 0.0, upper: float = 100.0) -> float:
    """Darkest tone of maximum chroma, clamped to [lower, upper]."""
    answer = find_best_tone_for_chroma(palette.hue, palette.chroma, 0.0, False)
    return clamp(lower, upper, answer)


# =============================================================================
# Table helpers
# =============================================================================


def _phone(s: DynamicScheme) -> bool:
    return s.platform is TargetPlatform.PHONE


def _neutral_is_yellow(s: DynamicScheme) -> bool:
    return Hct.is_yellow(s.neutral_palette.hue)


def _is_cyan(palette: TonalPalette) -> bool:
    return Hct.is_cyan(palette.hue)


def _tone_of_background(background: Callable[[DynamicScheme], Optional[str]]) -> Callable[[DynamicScheme], float]:
    """Start from the background's own tone; contrast resolution moves it from there."""
    def tone(s: DynamicScheme) -> float:
        role = background(s)
        return 50.0 if role is None else s.get_tone(role)
    return tone


def _curve(phone: float, watch: float) -> Callable[[DynamicScheme], ContrastCurve]:
    return lambda s: get_contrast_curve(phone if _phone(s) else watch)


def _container_curve(s: DynamicScheme) -> Optional[ContrastCurve]:
    """Containers only contrast with the surface when contrast is raised."""
    if _phone(s) and s.contrast_level > 0.0:
        return get_contrast_curve(1.5)
    return None


def _accent_background(s: DynamicScheme) -> str:
    return highest_surface(s) if _phone(s) else "surface_container_high"


def _phone_highest_surface(s: DynamicScheme) -> Optional[str]:
    return highest_surface(s) if _phone(s) else None


def _pair(
    role_a: str,
    role_b: str,
    delta: float,
    polarity: TonePolarity,
    constraint: DeltaConstraint,
    phone_only: Optional[bool] = None,
) -> Callable[[DynamicScheme], Optional[ToneDeltaPair]]:
    """Pair constraint, optionally limited to phones (True) or watches (False)."""
    tone_pair = ToneDeltaPair(role_a, role_b, delta, polarity, True, constraint)

    def get(s: DynamicScheme) -> Optional[ToneDeltaPair]:
        if phone_only is None or phone_only == _phone(s):
            return tone_pair
        return None
    return get


def _chroma_table(
    neutral: float,
    tonal_spot: float,
    expressive_yellow: float,
    expressive: float,
    vibrant: float,
    applies: Callable[[DynamicScheme], bool] = lambda s: True,
) -> Callable[[DynamicScheme], float]:
    """Per-style surface chroma multiplier (1.0 wherever ``applies`` is false)."""
    def multiplier(s: DynamicScheme) -> float:
        if not applies(s):
            return 1.0
        if s.variant is Variant.NEUTRAL:
            return neutral
        if s.variant is Variant.TONAL_SPOT:
            return tonal_spot
        if s.variant is Variant.EXPRESSIVE:
            return expressive_yellow if _neutral_is_yellow(s) else expressive
        if s.variant is Variant.VIBRANT:
            return vibrant
        return 1.0
    return multiplier


# =============================================================================
# Surfaces
# =============================================================================


def _light_surface_tone(yellow: float, vibrant: float, other: float) -> Callable[[DynamicScheme], float]:
    def tone(s: DynamicScheme) -> float:
        if _neutral_is_yellow(s):
            return yellow
        if s.variant is Variant.VIBRANT:
            return vibrant
        return other
    return tone


def _surface_tone(s: DynamicScheme) -> float:
    if not _phone(s):
        return 0.0
    return 4.0 if s.is_dark else _light_surface_tone(99.0, 97.0, 98.0)(s)


def _surface_dim_tone(s: DynamicScheme) -> float:
    return 4.0 if s.is_dark else _light_surface_tone(90.0, 85.0, 87.0)(s)


def _surface_bright_tone(s: DynamicScheme) -> float:
    return 18.0 if s.is_dark else _light_surface_tone(99.0, 97.0, 98.0)(s)


def _container_tone(
    dark: float,
    light: tuple[float, float, float],
    watch: Optional[float],
) -> Callable[[DynamicScheme], float]:
    """Surface container tone; ``light`` is (yellow, vibrant, other)."""
    light_tone = _light_surface_tone(*light)

    def tone(s: DynamicScheme) -> float:
        if watch is not None and not _phone(s):
            return watch
        return dark if s.is_dark else light_tone(s)
    return tone


def _surface(name: str, tone: Callable[[DynamicScheme], float], multiplier=None) -> DynamicColor:
    return DynamicColor(
        name=name,
        palette=neutral_palette,
        tone=tone,
        is_background=True,
        chroma_multiplier=multiplier,
    )


def _text_multiplier(s: DynamicScheme) -> float:
    """Chroma multiplier of text and outlines on surfaces."""
    if not _phone(s):
        return 1.0
    if s.variant is Variant.NEUTRAL:
        return 2.2
    if s.variant is Variant.TONAL_SPOT:
        return 1.7
    if s.variant is Variant.EXPRESSIVE:
        if _neutral_is_yellow(s):
            return 3.0 if s.is_dark else 2.3
        return 1.6
    return 1.0


def _on_surface_tone(s: DynamicScheme) -> float:
    if s.variant is Variant.VIBRANT:
        return t_max_c(s.neutral_palette, 0.0, 100.0, 1.1)
    return _tone_of_background(_accent_background)(s)


def _surface_colors() -> list[DynamicColor]:
    dim_and_bright = dict(neutral=2.5, tonal_spot=1.7, expressive_yellow=2.7, expressive=1.75, vibrant=1.36)
    surface = _surface("surface", _surface_tone)
    on_surface = DynamicColor(
        name="on_surface",
        palette=neutral_palette,
        tone=_on_surface_tone,
        chroma_multiplier=_text_multiplier,
        background=_accent_background,
        contrast_curve=lambda s: get_contrast_curve(11.0 if s.is_dark and _phone(s) else 9.0),
    )
    surface_container_highest = _surface(
        "surface_container_highest",
        _container_tone(15.0, (92.0, 88.0, 90.0), None),
        _chroma_table(2.2, 1.7, 2.3, 1.6, 1.29),
    )
    inverse_surface = DynamicColor(
        name="inverse_surface",
        palette=neutral_palette,
        tone=lambda s: 98.0 if s.is_dark else 4.0,
        is_background=True,
    )
    return [
        surface,
        dataclasses.replace(surface, name="background"),
        _surface(
            "surface_dim",
            _surface_dim_tone,
            _chroma_table(**dim_and_bright, applies=lambda s: not s.is_dark),
        ),
        _surface(
            "surface_bright",
            _surface_bright_tone,
            _chroma_table(**dim_and_bright, applies=lambda s: s.is_dark),
        ),
        _surface("surface_container_lowest", lambda s: 0.0 if s.is_dark else 100.0),
        _surface(
            "surface_container_low",
            _container_tone(6.0, (98.0, 95.0, 96.0), 15.0),
            _chroma_table(1.3, 1.25, 1.3, 1.15, 1.08, applies=_phone),
        ),
        _surface(
            "surface_container",
            _container_tone(9.0, (96.0, 92.0, 94.0), 20.0),
            _chroma_table(1.6, 1.4, 1.6, 1.3, 1.15, applies=_phone),
        ),
        _surface(
            "surface_container_high",
            _container_tone(12.0, (94.0, 90.0, 92.0), 25.0),
            _chroma_table(1.9, 1.5, 1.95, 1.45, 1.22, applies=_phone),
        ),
        surface_container_highest,
        dataclasses.replace(surface_container_highest, name="surface_variant"),
        on_surface,
        dataclasses.replace(
            on_surface,
            name="on_background",
            tone=lambda s: _on_surface_tone(s) if _phone(s) else 100.0,
        ),
        DynamicColor(
            name="on_surface_variant",
            palette=neutral_variant_palette,
            tone=_tone_of_background(_accent_background),
            chroma_multiplier=_text_multiplier,
            background=_accent_background,
            contrast_curve=lambda s: get_contrast_curve((6.0 if s.is_dark else 4.5) if _phone(s) else 7.0),
        ),
        inverse_surface,
        DynamicColor(
            name="inverse_on_surface",
            palette=neutral_palette,
            tone=_tone_of_background(constant("inverse_surface")),
            background=constant("inverse_surface"),
            contrast_curve=constant(get_contrast_curve(7.0)),
        ),
        DynamicColor(
            name="outline",
            palette=neutral_variant_palette,
            tone=_tone_of_background(_accent_background),
            chroma_multiplier=_text_multiplier,
            background=_accent_background,
            contrast_curve=_curve(3.0, 4.5),
        ),
        DynamicColor(
            name="outline_variant",
            palette=neutral_variant_palette,
            tone=_tone_of_background(_accent_background),
            chroma_multiplier=_text_multiplier,
            background=_accent_background,
            contrast_curve=_curve(1.5, 3.0),
        ),
    ]


# =============================================================================
# Accent tones
# =============================================================================


def _primary_tone(s: DynamicScheme) -> float:
    p = s.primary_palette
    if s.variant is Variant.NEUTRAL:
        if _phone(s):
            return 80.0 if s.is_dark else 40.0
        return 90.0
    if s.variant is Variant.TONAL_SPOT:
        if _phone(s):
            return 80.0 if s.is_dark else t_max_c(p)
        return t_max_c(p, 0.0, 90.0)
    if s.variant is Variant.EXPRESSIVE:
        if _phone(s):
            if Hct.is_yellow(p.hue):
                upper = 25.0
            elif _is_cyan(p):
                upper = 88.0
            else:
                upper = 98.0
            return t_max_c(p, 0.0, upper)
        return t_max_c(p)
    if _phone(s):
        return t_max_c(p, 0.0, 88.0 if _is_cyan(p) else 98.0)
    return t_max_c(p)


def _primary_dim_tone(s: DynamicScheme) -> float:
    p = s.primary_palette
    if s.variant is Variant.NEUTRAL:
        return 85.0
    if s.variant is Variant.TONAL_SPOT:
        return t_max_c(p, 0.0, 90.0)
    return t_max_c(p)


def _primary_container_tone(s: DynamicScheme) -> float:
    p = s.primary_palette
    if not _phone(s):
        return 30.0
    if s.variant is Variant.NEUTRAL:
        return 30.0 if s.is_dark else 90.0
    if s.variant is Variant.TONAL_SPOT:
        return t_min_c(p, 35.0, 93.0) if s.is_dark else t_max_c(p, 0.0, 90.0)
    if s.variant is Variant.EXPRESSIVE:
        if s.is_dark:
            return t_max_c(p, 30.0, 93.0)
        return t_max_c(p, 78.0, 88.0 if _is_cyan(p) else 90.0)
    if s.is_dark:
        return t_min_c(p, 66.0, 93.0)
    return t_max_c(p, 66.0, 88.0 if _is_cyan(p) else 93.0)


def _secondary_tone(s: DynamicScheme) -> float:
    p = s.secondary_palette
    if not _phone(s):
        return 90.0 if s.variant is Variant.NEUTRAL else t_max_c(p, 0.0, 90.0)
    if s.variant is Variant.NEUTRAL:
        return t_min_c(p, 0.0, 98.0) if s.is_dark else t_max_c(p)
    if s.variant is Variant.VIBRANT:
        return t_max_c(p, 0.0, 90.0 if s.is_dark else 98.0)
    return 80.0 if s.is_dark else t_max_c(p)


def _secondary_dim_tone(s: DynamicScheme) -> float:
    if s.variant is Variant.NEUTRAL:
        return 85.0
    return t_max_c(s.secondary_palette, 0.0, 90.0)


def _secondary_container_tone(s: DynamicScheme) -> float:
    p = s.secondary_palette
    if not _phone(s):
        return 30.0
    if s.variant is Variant.VIBRANT:
        return t_min_c(p, 30.0, 40.0) if s.is_dark else t_max_c(p, 84.0, 90.0)
    if s.variant is Variant.EXPRESSIVE:
        return 15.0 if s.is_dark else t_max_c(p, 90.0, 95.0)
    return 25.0 if s.is_dark else 90.0


def _tertiary_dim_tone(s: DynamicScheme) -> float:
    p = s.tertiary_palette
    if s.variant is Variant.TONAL_SPOT:
        return t_max_c(p, 0.0, 90.0)
    return t_max_c(p)


def _tertiary_tone(s: DynamicScheme) -> float:
    p = s.tertiary_palette
    if not _phone(s):
        return _tertiary_dim_tone(s)
    if s.variant in (Variant.EXPRESSIVE, Variant.VIBRANT):
        if _is_cyan(p):
            upper = 88.0
        else:
            upper = 98.0 if s.is_dark else 100.0
        return t_max_c(p, 0.0, upper)
    return t_max_c(p, 0.0, 98.0) if s.is_dark else t_max_c(p)


def _tertiary_container_tone(s: DynamicScheme) -> float:
    p = s.tertiary_palette
    if not _phone(s):
        return _tertiary_dim_tone(s)
    if s.variant is Variant.NEUTRAL:
        return t_max_c(p, 0.0, 93.0) if s.is_dark else t_max_c(p, 0.0, 96.0)
    if s.variant is Variant.TONAL_SPOT:
        return t_max_c(p, 0.0, 93.0 if s.is_dark else 100.0)
    if s.variant is Variant.EXPRESSIVE:
        if _is_cyan(p):
            upper = 88.0
        else:
            upper = 93.0 if s.is_dark else 100.0
        return t_max_c(p, 75.0, upper)
    return t_max_c(p, 0.0, 93.0) if s.is_dark else t_max_c(p, 72.0, 100.0)


def _error_tone(s: DynamicScheme) -> float:
    p = s.error_palette
    if _phone(s):
        return t_min_c(p, 0.0, 98.0) if s.is_dark else t_max_c(p)
    return t_min_c(p)


def _error_container_tone(s: DynamicScheme) -> float:
    p = s.error_palette
    if not _phone(s):
        return 30.0
    return t_min_c(p, 30.0, 93.0) if s.is_dark else t_max_c(p, 0.0, 90.0)


# =============================================================================
# Accent groups
# =============================================================================


def _accent_colors(
    name: str,
    palette: Callable[[DynamicScheme], TonalPalette],
    tone: Callable[[DynamicScheme], float],
    dim_tone: Callable[[DynamicScheme], float],
    container_tone: Callable[[DynamicScheme], float],
    on_container_curve: tuple[float, float] = (6.0, 7.0),
) -> list[DynamicColor]:
    """An accent, its dim variant, its container and the text drawn on them."""
    dim = f"{name}_dim"
    container = f"{name}_container"

    def on_accent_background(s: DynamicScheme) -> str:
        return name if _phone(s) else dim

    return [
        DynamicColor(
            name=name,
            palette=palette,
            tone=tone,
            is_background=True,
            background=_accent_background,
            contrast_curve=_curve(4.5, 7.0),
            tone_delta_pair=_pair(
                container, name, 5.0, TonePolarity.RELATIVE_LIGHTER, DeltaConstraint.FARTHER, phone_only=True,
            ),
        ),
        DynamicColor(
            name=dim,
            palette=palette,
            tone=dim_tone,
            is_background=True,
            background=constant("surface_container_high"),
            contrast_curve=constant(get_contrast_curve(4.5)),
            tone_delta_pair=_pair(dim, name, 5.0, TonePolarity.DARKER, DeltaConstraint.FARTHER),
        ),
        DynamicColor(
            name=f"on_{name}",
            palette=palette,
            tone=_tone_of_background(on_accent_background),
            background=on_accent_background,
            contrast_curve=_curve(6.0, 7.0),
        ),
        DynamicColor(
            name=container,
            palette=palette,
            tone=container_tone,
            is_background=True,
            background=_phone_highest_surface,
            contrast_curve=_container_curve,
            tone_delta_pair=_pair(
                container, dim, 10.0, TonePolarity.DARKER, DeltaConstraint.FARTHER, phone_only=False,
            ),
        ),
        DynamicColor(
            name=f"on_{container}",
            palette=palette,
            tone=_tone_of_background(constant(container)),
            background=constant(container),
            contrast_curve=_curve(*on_container_curve),
        ),
    ]


def _fixed_colors(name: str, palette: Callable[[DynamicScheme], TonalPalette]) -> list[DynamicColor]:
    """Fixed accents take the light-scheme container tone in every scheme."""
    fixed = f"{name}_fixed"
    fixed_dim = f"{name}_fixed_dim"
    container = f"{name}_container"

    def fixed_tone(s: DynamicScheme) -> float:
        return s.derive(is_dark=False, contrast_level=0.0).get_tone(container)

    return [
        DynamicColor(
            name=fixed,
            palette=palette,
            tone=fixed_tone,
            is_background=True,
            background=_phone_highest_surface,
            contrast_curve=_container_curve,
        ),
        DynamicColor(
            name=fixed_dim,
            palette=palette,
            tone=lambda s: s.get_tone(fixed),
            is_background=True,
            background=_phone_highest_surface,
            contrast_curve=_container_curve,
            tone_delta_pair=_pair(fixed_dim, fixed, 5.0, TonePolarity.DARKER, DeltaConstraint.EXACT),
        ),
        DynamicColor(
            name=f"on_{fixed}",
            palette=palette,
            tone=_tone_of_background(constant(fixed_dim)),
            background=constant(fixed_dim),
            contrast_curve=constant(get_contrast_curve(7.0)),
        ),
        DynamicColor(
            name=f"on_{fixed}_variant",
            palette=palette,
            tone=_tone_of_background(constant(fixed_dim)),
            background=constant(fixed_dim),
            contrast_curve=constant(get_contrast_curve(4.5)),
        ),
    ]


def build_colors() -> dict[str, DynamicColor]:
    """Role table of the 2025 spec: the 2021 table with 2025 overrides."""
    primary = _accent_colors("primary", primary_palette, _primary_tone, _primary_dim_tone, _primary_container_tone)
    overrides = [
        *_surface_colors(),
        *primary,
        dataclasses.replace(primary[0], name="surface_tint"),
        DynamicColor(
            name="inverse_primary",
            palette=primary_palette,
            tone=lambda s: t_max_c(s.primary_palette),
            background=constant("inverse_surface"),
            contrast_curve=_curve(6.0, 7.0),
        ),
        *_accent_colors(
            "secondary", secondary_palette, _secondary_tone, _secondary_dim_tone, _secondary_container_tone,
        ),
        *_accent_colors(
            "tertiary", tertiary_palette, _tertiary_tone, _tertiary_dim_tone, _tertiary_container_tone,
        ),
        *_accent_colors(
            "error", error_palette, _error_tone, lambda s: t_min_c(s.error_palette), _error_container_tone,
            on_container_curve=(4.5, 7.0),
        ),
        *_fixed_colors("primary", primary_palette),
        *_fixed_colors("secondary", secondary_palette),
        *_fixed_colors("tertiary", tertiary_palette),
    ]
    colors = dict(spec_2021.build_colors())
    colors.update((color.name, color) for color in overrides)
    return colors


# =============================================================================
# Tone resolution
# =============================================================================


def _avoid_awkward_tone(color: DynamicColor, tone: float) -> float:
    """Background roles skip the 50-64 band; fixed-dim roles are exempt."""
    if not color.is_background or color.name.endswith("_fixed_dim"):
        return tone
    if tone >= 57.0:
        return clamp(65.0, 100.0, tone)
    return clamp(0.0, 49.0, tone)


def _meet_contrast(s: DynamicScheme, color: DynamicColor, tone: float) -> tuple[float, Optional[float]]:
    """
    Move ``tone`` to a tone that contrasts with the role's background.

    Returns:
        (tone, desired ratio); the ratio is None when the role has no
        background or curve in this scheme.
    """
    background = color.background_of(s)
    contrast_curve = color.contrast_curve_of(s)
    if background is None or contrast_curve is None:
        return tone, None
    bg_tone = s.get_tone(background)
    desired_ratio = contrast_curve.get(s.contrast_level)
    if contrast.ratio_of_tones(bg_tone, tone) >= desired_ratio and s.contrast_level >= 0.0:
        return tone, desired_ratio
    return foreground_tone(bg_tone, desired_ratio), desired_ratio


def _delta_pair_tone(s: DynamicScheme, color: DynamicColor, tone_pair: ToneDeltaPair) -> float:
    polarity = tone_pair.polarity
    if (
        polarity is TonePolarity.DARKER
        or (polarity is TonePolarity.RELATIVE_LIGHTER and s.is_dark)
        or (polarity is TonePolarity.RELATIVE_DARKER and not s.is_dark)
    ):
        absolute_delta = -tone_pair.delta
    else:
        absolute_delta = tone_pair.delta

    am_role_a = color.name == tone_pair.role_a
    reference = tone_pair.role_b if am_role_a else tone_pair.role_a
    reference_tone = s.get_tone(reference)
    relative_delta = absolute_delta * (1.0 if am_role_a else -1.0)

    self_tone = _constrain(tone_pair.constraint, reference_tone, relative_delta, color.tone(s))
    self_tone, desired_ratio = _meet_contrast(s, color, self_tone)
    self_tone = _avoid_awkward_tone(color, self_tone)
    if tone_pair.constraint is DeltaConstraint.NEARER:
        return self_tone

    # Contrast or the awkward band may have pulled the role back toward its
    # partner. Re-apply the delta; contrast still wins when both cannot hold.
    for _ in range(MAX_DELTA_PASSES):
        if _keeps_delta(reference_tone, relative_delta, self_tone):
            break
        self_tone = _constrain(tone_pair.constraint, reference_tone, relative_delta, self_tone)
        escaped = _leave_awkward_band(color, self_tone, relative_delta)
        if desired_ratio is None or _has_contrast(s, color, escaped, desired_ratio):
            self_tone = escaped
        elif not _has_contrast(s, color, self_tone, desired_ratio):
            self_tone = _contrasting_tone_past(s, color, self_tone, relative_delta, desired_ratio)
    return self_tone


def _contrasting_tone_past(
    s: DynamicScheme,
    color: DynamicColor,
    target: float,
    relative_delta: float,
    desired_ratio: float,
) -> float:
    """
    Nearest tone at or past ``target`` (away from the partner) that meets
    ``desired_ratio`` against the role's background.

    Falls back to the plain foreground tone when no such tone exists.
    """
    bg_tone = s.get_tone(color.background_of(s))
    if relative_delta > 0:
        candidates = [target, contrast.lighter(bg_tone, desired_ratio), 100.0]
        valid = [t for t in candidates if target <= t <= 100.0]
        pick = min
    else:
        candidates = [target, contrast.darker(bg_tone, desired_ratio), 0.0]
        valid = [t for t in candidates if 0.0 <= t <= target]
        pick = max
    valid = [t for t in valid if contrast.ratio_of_tones(bg_tone, t) >= desired_ratio]
    if valid:
        return pick(valid)
    return foreground_tone(bg_tone, desired_ratio)


def _constrain(constraint: DeltaConstraint, reference_tone: float, relative_delta: float, tone: float) -> float:
    """Move ``tone`` so it honors ``constraint`` against the partner's tone."""
    target = reference_tone + relative_delta
    if constraint is DeltaConstraint.EXACT:
        return clamp(0.0, 100.0, target)
    if constraint is DeltaConstraint.NEARER:
        if relative_delta > 0:
            return clamp(0.0, 100.0, clamp(reference_tone, target, tone))
        return clamp(0.0, 100.0, clamp(target, reference_tone, tone))
    if relative_delta > 0:
        return clamp(0.0, 100.0, clamp(target, 100.0, tone))
    return clamp(0.0, 100.0, clamp(0.0, target, tone))


def _keeps_delta(reference_tone: float, relative_delta: float, tone: float) -> bool:
    """Whether ``tone`` is at least the delta away from the partner, on the right side."""
    if relative_delta > 0:
        return tone - reference_tone >= relative_delta - DELTA_EPSILON
    return reference_tone - tone >= -relative_delta - DELTA_EPSILON


def _has_contrast(s: DynamicScheme, color: DynamicColor, tone: float, desired_ratio: float) -> bool:
    bg_tone = s.get_tone(color.background_of(s))
    return contrast.ratio_of_tones(bg_tone, tone) >= desired_ratio


def _leave_awkward_band(color: DynamicColor, tone: float, relative_delta: float) -> float:
    """Like ``_avoid_awkward_tone``, but always leaves the band away from the partner."""
    if not color.is_background or color.name.endswith("_fixed_dim") or not 49.0 < tone < 65.0:
        return tone
    return 65.0 if relative_delta > 0 else 49.0


def get_tone(s: DynamicScheme, color: DynamicColor) -> float:
    """Final tone of ``color`` in ``s`` under the 2025 rules."""
    tone_pair = color.tone_delta_pair_of(s)
    if tone_pair is not None:
        return _delta_pair_tone(s, color, tone_pair)

    answer, desired_ratio = _meet_contrast(s, color, color.tone(s))
    if desired_ratio is None:
        return answer
    answer = _avoid_awkward_tone(color, answer)
    return resolve_second_background(s, color, answer, desired_ratio)


def get_hct(s: DynamicScheme, color: DynamicColor, tone: float) -> Hct:
    palette = color.palette(s)
    multiplier = color.chroma_multiplier(s) if color.chroma_multiplier is not None else 1.0
    return Hct.from_hct(palette.hue, palette.chroma * multiplier, tone)


SPEC_2025 = ColorSpec(
    version=SpecVersion.SPEC_2025,
    colors=build_colors(),
    resolve_tone=get_tone,
    resolve_hct=get_hct,
)
