# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
The 2021 Material color spec.

Tones are fixed per light/dark scheme (with monochrome and fidelity
exceptions) and then pushed apart just far enough to meet each role's
contrast curve against its background.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from monet.dynamiccolor.color_spec import (
    ColorSpec,
    highest_surface,
    resolve_second_background,
)
from monet.dynamiccolor.contrast_curve import ContrastCurve
from monet.dynamiccolor.dynamic_color import DynamicColor, foreground_tone
from monet.dynamiccolor.tone_delta_pair import ToneDeltaPair, TonePolarity
from monet.hct import Hct, contrast
from monet.hct.color_utils import clamp
from monet.palettes.dislike import fix_if_disliked
from monet.palettes.tonal_palette import TonalPalette
from monet.schema import SpecVersion, Variant

if TYPE_CHECKING:
    from monet.dynamiccolor.dynamic_scheme import DynamicScheme


# Passes over the delta constraint before giving up on it
MAX_DELTA_PASSES = 3


# =============================================================================
# Table helpers
# =============================================================================


def primary_palette(s: DynamicScheme) -> TonalPalette:
    return s.primary_palette


def secondary_palette(s: DynamicScheme) -> TonalPalette:
    return s.secondary_palette


def tertiary_palette(s: DynamicScheme) -> TonalPalette:
    return s.tertiary_palette


def neutral_palette(s: DynamicScheme) -> TonalPalette:
    return s.neutral_palette


def neutral_variant_palette(s: DynamicScheme) -> TonalPalette:
    return s.neutral_variant_palette


def error_palette(s: DynamicScheme) -> TonalPalette:
    return s.error_palette


def constant(value):
    """Scheme function that ignores the scheme."""
    return lambda s: value


def light_dark(light: float, dark: float) -> Callable[[DynamicScheme], float]:
    return lambda s: dark if s.is_dark else light


def curve(low: float, normal: float, medium: float, high: float):
    return constant(ContrastCurve(low, normal, medium, high))


def pair(role_a: str, role_b: str, delta: float, polarity: TonePolarity, stay_together: bool):
    return constant(ToneDeltaPair(role_a, role_b, delta, polarity, stay_together))


def key_color(name: str, palette: Callable[[DynamicScheme], TonalPalette]) -> DynamicColor:
    return DynamicColor.from_palette(name, palette, lambda s: palette(s).key_color.tone)


def _is_monochrome(s: DynamicScheme) -> bool:
    return s.variant is Variant.MONOCHROME


def _base_tone(s: DynamicScheme, role: str) -> float:
    return s.spec.color(role).tone(s)


def find_desired_chroma_by_tone(hue: float, chroma: float, tone: float, by_decreasing_tone: bool) -> float:
    """
    Walk from ``tone`` toward the tone where the palette reaches ``chroma``.

    Stops once chroma is within 0.4 of the target or starts falling again.
    """
    answer = tone
    closest = Hct.from_hct(hue, chroma, tone)
    if closest.chroma >= chroma:
        return answer

    chroma_peak = closest.chroma
    while closest.chroma < chroma:
        answer += -1.0 if by_decreasing_tone else 1.0
        if answer < 0.0 or answer > 100.0:
            return clamp(0.0, 100.0, answer)
        candidate = Hct.from_hct(hue, chroma, answer)
        if chroma_peak > candidate.chroma:
            break
        if abs(candidate.chroma - chroma) < 0.4:
            break
        if abs(candidate.chroma - chroma) < abs(closest.chroma - chroma):
            closest = candidate
        chroma_peak = max(chroma_peak, candidate.chroma)
    return answer


# =============================================================================
# Role tones with variant exceptions
# =============================================================================


def _primary_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 100.0 if s.is_dark else 0.0
    return 80.0 if s.is_dark else 40.0


def _on_primary_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 10.0 if s.is_dark else 90.0
    return 20.0 if s.is_dark else 100.0


def _primary_container_tone(s: DynamicScheme) -> float:
    if s.variant.is_fidelity:
        return s.source_color_hct.tone
    if _is_monochrome(s):
        return 85.0 if s.is_dark else 25.0
    return 30.0 if s.is_dark else 90.0


def _on_primary_container_tone(s: DynamicScheme) -> float:
    if s.variant.is_fidelity:
        return foreground_tone(_base_tone(s, "primary_container"), 4.5)
    if _is_monochrome(s):
        return 0.0 if s.is_dark else 100.0
    return 90.0 if s.is_dark else 30.0


def _on_secondary_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 10.0 if s.is_dark else 100.0
    return 20.0 if s.is_dark else 100.0


def _secondary_container_tone(s: DynamicScheme) -> float:
    initial_tone = 30.0 if s.is_dark else 90.0
    if _is_monochrome(s):
        return 30.0 if s.is_dark else 85.0
    if not s.variant.is_fidelity:
        return initial_tone
    palette = s.secondary_palette
    return find_desired_chroma_by_tone(palette.hue, palette.chroma, initial_tone, not s.is_dark)


def _on_secondary_container_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 90.0 if s.is_dark else 10.0
    if not s.variant.is_fidelity:
        return 90.0 if s.is_dark else 30.0
    return foreground_tone(_base_tone(s, "secondary_container"), 4.5)


def _tertiary_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 90.0 if s.is_dark else 25.0
    return 80.0 if s.is_dark else 40.0


def _on_tertiary_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 10.0 if s.is_dark else 90.0
    return 20.0 if s.is_dark else 100.0


def _tertiary_container_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 60.0 if s.is_dark else 49.0
    if not s.variant.is_fidelity:
        return 30.0 if s.is_dark else 90.0
    proposed = s.tertiary_palette.get_hct(s.source_color_hct.tone)
    return fix_if_disliked(proposed).tone


def _on_tertiary_container_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 0.0 if s.is_dark else 100.0
    if not s.variant.is_fidelity:
        return 90.0 if s.is_dark else 30.0
    return foreground_tone(_base_tone(s, "tertiary_container"), 4.5)


def _on_error_container_tone(s: DynamicScheme) -> float:
    if _is_monochrome(s):
        return 90.0 if s.is_dark else 10.0
    return 90.0 if s.is_dark else 30.0


def _monochrome_or(monochrome: float, otherwise: float) -> Callable[[DynamicScheme], float]:
    return lambda s: monochrome if _is_monochrome(s) else otherwise


# =============================================================================
# Role table
# =============================================================================


def _accent_group(
    name: str,
    palette: Callable[[DynamicScheme], TonalPalette],
    tone: Callable[[DynamicScheme], float],
    on_tone: Callable[[DynamicScheme], float],
    container_tone: Callable[[DynamicScheme], float],
    on_container_tone: Callable[[DynamicScheme], float],
) -> list[DynamicColor]:
    """An accent, its container and the text colors drawn on both."""
    container = f"{name}_container"
    container_pair = pair(container, name, 10.0, TonePolarity.NEARER, False)
    return [
        DynamicColor(
            name=name,
            palette=palette,
            tone=tone,
            is_background=True,
            background=highest_surface,
            contrast_curve=curve(3.0, 4.5, 7.0, 7.0),
            tone_delta_pair=container_pair,
        ),
        DynamicColor(
            name=f"on_{name}",
            palette=palette,
            tone=on_tone,
            background=constant(name),
            contrast_curve=curve(4.5, 7.0, 11.0, 21.0),
        ),
        DynamicColor(
            name=container,
            palette=palette,
            tone=container_tone,
            is_background=True,
            background=highest_surface,
            contrast_curve=curve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=container_pair,
        ),
        DynamicColor(
            name=f"on_{container}",
            palette=palette,
            tone=on_container_tone,
            background=constant(container),
            contrast_curve=curve(3.0, 4.5, 7.0, 11.0),
        ),
    ]


def _fixed_group(
    name: str,
    palette: Callable[[DynamicScheme], TonalPalette],
    fixed_tone: Callable[[DynamicScheme], float],
    fixed_dim_tone: Callable[[DynamicScheme], float],
    on_fixed_tone: Callable[[DynamicScheme], float],
    on_fixed_variant_tone: Callable[[DynamicScheme], float],
) -> list[DynamicColor]:
    """Fixed accents keep the same tone in light and dark schemes."""
    fixed = f"{name}_fixed"
    fixed_dim = f"{name}_fixed_dim"
    fixed_pair = pair(fixed, fixed_dim, 10.0, TonePolarity.LIGHTER, True)
    return [
        DynamicColor(
            name=fixed,
            palette=palette,
            tone=fixed_tone,
            is_background=True,
            background=highest_surface,
            contrast_curve=curve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=fixed_pair,
        ),
        DynamicColor(
            name=fixed_dim,
            palette=palette,
            tone=fixed_dim_tone,
            is_background=True,
            background=highest_surface,
            contrast_curve=curve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=fixed_pair,
        ),
        DynamicColor(
            name=f"on_{fixed}",
            palette=palette,
            tone=on_fixed_tone,
            background=constant(fixed_dim),
            second_background=constant(fixed),
            contrast_curve=curve(4.5, 7.0, 11.0, 21.0),
        ),
        DynamicColor(
            name=f"on_{fixed}_variant",
            palette=palette,
            tone=on_fixed_variant_tone,
            background=constant(fixed_dim),
            second_background=constant(fixed),
            contrast_curve=curve(3.0, 4.5, 7.0, 11.0),
        ),
    ]


def _surface(name: str, tone: Callable[[DynamicScheme], float]) -> DynamicColor:
    return DynamicColor(name=name, palette=neutral_palette, tone=tone, is_background=True)


def _curve_tone(light: Optional[ContrastCurve], dark: Optional[ContrastCurve], light_tone=0.0, dark_tone=0.0):
    """Tone read off a contrast curve, for surfaces that move with the contrast level."""
    def tone(s: DynamicScheme) -> float:
        chosen = dark if s.is_dark else light
        if chosen is None:
            return dark_tone if s.is_dark else light_tone
        return chosen.get(s.contrast_level)
    return tone


def build_colors() -> dict[str, DynamicColor]:
    """Role table of the 2021 spec."""
    colors = [
        # Palette key colors
        key_color("primary_palette_key_color", primary_palette),
        key_color("secondary_palette_key_color", secondary_palette),
        key_color("tertiary_palette_key_color", tertiary_palette),
        key_color("neutral_palette_key_color", neutral_palette),
        key_color("neutral_variant_palette_key_color", neutral_variant_palette),
        key_color("error_palette_key_color", error_palette),

        # Surfaces
        _surface("background", light_dark(98.0, 6.0)),
        DynamicColor(
            name="on_background",
            palette=neutral_palette,
            tone=light_dark(10.0, 90.0),
            background=constant("background"),
            contrast_curve=curve(3.0, 3.0, 4.5, 7.0),
        ),
        _surface("surface", light_dark(98.0, 6.0)),
        _surface("surface_dim", _curve_tone(ContrastCurve(87.0, 87.0, 80.0, 75.0), None, dark_tone=6.0)),
        _surface("surface_bright", _curve_tone(None, ContrastCurve(24.0, 24.0, 29.0, 34.0), light_tone=98.0)),
        _surface("surface_container_lowest", _curve_tone(None, ContrastCurve(4.0, 4.0, 2.0, 0.0), light_tone=100.0)),
        _surface("surface_container_low", _curve_tone(
            ContrastCurve(96.0, 96.0, 96.0, 95.0), ContrastCurve(10.0, 10.0, 11.0, 12.0))),
        _surface("surface_container", _curve_tone(
            ContrastCurve(94.0, 94.0, 92.0, 90.0), ContrastCurve(12.0, 12.0, 16.0, 20.0))),
        _surface("surface_container_high", _curve_tone(
            ContrastCurve(92.0, 92.0, 88.0, 85.0), ContrastCurve(17.0, 17.0, 21.0, 25.0))),
        _surface("surface_container_highest", _curve_tone(
            ContrastCurve(90.0, 90.0, 84.0, 80.0), ContrastCurve(22.0, 22.0, 26.0, 30.0))),
        DynamicColor(
            name="on_surface",
            palette=neutral_palette,
            tone=light_dark(10.0, 90.0),
            background=highest_surface,
            contrast_curve=curve(4.5, 7.0, 11.0, 21.0),
        ),
        DynamicColor(
            name="surface_variant",
            palette=neutral_variant_palette,
            tone=light_dark(90.0, 30.0),
            is_background=True,
        ),
        DynamicColor(
            name="on_surface_variant",
            palette=neutral_variant_palette,
            tone=light_dark(30.0, 80.0),
            background=highest_surface,
            contrast_curve=curve(3.0, 4.5, 7.0, 11.0),
        ),
        DynamicColor.from_palette("inverse_surface", neutral_palette, light_dark(20.0, 90.0)),
        DynamicColor(
            name="inverse_on_surface",
            palette=neutral_palette,
            tone=light_dark(95.0, 20.0),
            background=constant("inverse_surface"),
            contrast_curve=curve(4.5, 7.0, 11.0, 21.0),
        ),
        DynamicColor(
            name="outline",
            palette=neutral_variant_palette,
            tone=light_dark(50.0, 60.0),
            background=highest_surface,
            contrast_curve=curve(1.5, 3.0, 4.5, 7.0),
        ),
        DynamicColor(
            name="outline_variant",
            palette=neutral_variant_palette,
            tone=light_dark(80.0, 30.0),
            background=highest_surface,
            contrast_curve=curve(1.0, 1.0, 3.0, 4.5),
        ),
        DynamicColor.from_palette("shadow", neutral_palette, constant(0.0)),
        DynamicColor.from_palette("scrim", neutral_palette, constant(0.0)),
        DynamicColor(
            name="surface_tint",
            palette=primary_palette,
            tone=light_dark(40.0, 80.0),
            is_background=True,
        ),

        # Accents
        *_accent_group(
            "primary", primary_palette,
            _primary_tone, _on_primary_tone,
            _primary_container_tone, _on_primary_container_tone,
        ),
        DynamicColor(
            name="inverse_primary",
            palette=primary_palette,
            tone=light_dark(80.0, 40.0),
            background=constant("inverse_surface"),
            contrast_curve=curve(3.0, 4.5, 7.0, 7.0),
        ),
        *_accent_group(
            "secondary", secondary_palette,
            light_dark(40.0, 80.0), _on_secondary_tone,
            _secondary_container_tone, _on_secondary_container_tone,
        ),
        *_accent_group(
            "tertiary", tertiary_palette,
            _tertiary_tone, _on_tertiary_tone,
            _tertiary_container_tone, _on_tertiary_container_tone,
        ),
        *_accent_group(
            "error", error_palette,
            light_dark(40.0, 80.0), light_dark(100.0, 20.0),
            light_dark(90.0, 30.0), _on_error_container_tone,
        ),

        # Fixed accents
        *_fixed_group(
            "primary", primary_palette,
            _monochrome_or(40.0, 90.0), _monochrome_or(30.0, 80.0),
            _monochrome_or(100.0, 10.0), _monochrome_or(90.0, 30.0),
        ),
        *_fixed_group(
            "secondary", secondary_palette,
            _monochrome_or(80.0, 90.0), _monochrome_or(70.0, 80.0),
            constant(10.0), _monochrome_or(25.0, 30.0),
        ),
        *_fixed_group(
            "tertiary", tertiary_palette,
            _monochrome_or(40.0, 90.0), _monochrome_or(30.0, 80.0),
            _monochrome_or(100.0, 10.0), _monochrome_or(90.0, 30.0),
        ),
    ]
    return {color.name: color for color in colors}


# =============================================================================
# Tone resolution
# =============================================================================


def _delta_pair_tone(s: DynamicScheme, color: DynamicColor, tone_pair: ToneDeltaPair) -> float:
    """Resolve a role that shares a tone delta with a partner."""
    delta = tone_pair.delta
    polarity = tone_pair.polarity
    bg_tone = s.get_tone(color.background_of(s))

    a_is_nearer = (
        polarity is TonePolarity.NEARER
        or (polarity is TonePolarity.LIGHTER and not s.is_dark)
        or (polarity is TonePolarity.DARKER and s.is_dark)
    )
    nearer = s.spec.color(tone_pair.role_a if a_is_nearer else tone_pair.role_b)
    farther = s.spec.color(tone_pair.role_b if a_is_nearer else tone_pair.role_a)
    am_nearer = color.name == nearer.name
    expansion_dir = 1.0 if s.is_dark else -1.0

    n_contrast = nearer.contrast_curve_of(s).get(s.contrast_level)
    f_contrast = farther.contrast_curve_of(s).get(s.contrast_level)

    n_tone = nearer.tone(s)
    if contrast.ratio_of_tones(bg_tone, n_tone) < n_contrast:
        n_tone = foreground_tone(bg_tone, n_contrast)
    f_tone = farther.tone(s)
    if contrast.ratio_of_tones(bg_tone, f_tone) < f_contrast:
        f_tone = foreground_tone(bg_tone, f_contrast)

    if s.contrast_level < 0.0:
        n_tone = foreground_tone(bg_tone, n_contrast)
        f_tone = foreground_tone(bg_tone, f_contrast)

    for _ in range(MAX_DELTA_PASSES):
        if (f_tone - n_tone) * expansion_dir < delta:
            f_tone = clamp(0.0, 100.0, n_tone + delta * expansion_dir)
            if (f_tone - n_tone) * expansion_dir < delta:
                n_tone = clamp(0.0, 100.0, f_tone - delta * expansion_dir)

        # Keep both tones out of the 50-59 band, where neither light nor
        # dark text contrasts well
        if 50.0 <= n_tone < 60.0:
            n_tone, f_tone = _leave_awkward_band(n_tone, f_tone, delta, expansion_dir)
        elif 50.0 <= f_tone < 60.0:
            if tone_pair.stay_together:
                n_tone, f_tone = _leave_awkward_band(n_tone, f_tone, delta, expansion_dir)
            else:
                f_tone = 60.0 if expansion_dir > 0 else 49.0

        if (f_tone - n_tone) * expansion_dir >= delta:
            break

    return n_tone if am_nearer else f_tone


def _leave_awkward_band(n_tone: float, f_tone: float, delta: float, expansion_dir: float) -> tuple[float, float]:
    if expansion_dir > 0:
        n_tone = 60.0
        return n_tone, max(f_tone, n_tone + delta * expansion_dir)
    n_tone = 49.0
    return n_tone, min(f_tone, n_tone + delta * expansion_dir)


def get_tone(s: DynamicScheme, color: DynamicColor) -> float:
    """Final tone of ``color`` in ``s`` under the 2021 rules."""
    tone_pair = color.tone_delta_pair_of(s)
    if tone_pair is not None:
        return _delta_pair_tone(s, color, tone_pair)

    answer = color.tone(s)
    background = color.background_of(s)
    contrast_curve = color.contrast_curve_of(s)
    if background is None or contrast_curve is None:
        return answer

    bg_tone = s.get_tone(background)
    desired_ratio = contrast_curve.get(s.contrast_level)
    if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio or s.contrast_level < 0.0:
        answer = foreground_tone(bg_tone, desired_ratio)

    if color.is_background and 50.0 <= answer < 60.0:
        answer = 49.0 if contrast.ratio_of_tones(49.0, bg_tone) >= desired_ratio else 60.0

    return resolve_second_background(s, color, answer, desired_ratio)


def get_hct(s: DynamicScheme, color: DynamicColor, tone: float) -> Hct:
    return color.palette(s).get_hct(tone)


SPEC_2021 = ColorSpec(
    version=SpecVersion.SPEC_2021,
    colors=build_colors(),
    resolve_tone=get_tone,
    resolve_hct=get_hct,
)
