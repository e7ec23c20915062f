# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Dynamic color records.

A ``DynamicColor`` describes how one role is resolved: which palette it
draws from, its preferred tone, and which constraints (background
contrast, tone delta) shape the final tone. Every scheme-dependent field
is a function of the scheme that returns plain data, and roles refer to
each other by id only, so the role graph is a lookup table rather than a
web of objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from monet.dynamiccolor.contrast_curve import ContrastCurve
from monet.dynamiccolor.tone_delta_pair import ToneDeltaPair
from monet.hct import contrast
from monet.hct.color_utils import round_half_up
from monet.palettes.tonal_palette import TonalPalette

if TYPE_CHECKING:
    from monet.dynamiccolor.dynamic_scheme import DynamicScheme


SchemeFn = Callable[["DynamicScheme"], float]


@dataclass(frozen=True)
class DynamicColor:
    """
    Resolution record for one color role.

    Attributes:
        name: Role id, e.g. "on_primary_container"
        palette: Palette the role draws from
        tone: Preferred tone before any constraint is applied
        is_background: Whether other roles are drawn on top of this one
        chroma_multiplier: Scales the palette chroma (2025 only)
        background: Id of the role this one must contrast with
        second_background: Id of a second role this one must contrast with
        contrast_curve: Minimum contrast against the background(s)
        tone_delta_pair: Separation constraint with a partner role
        opacity: Alpha in [0, 1]; opaque when None
    """
    name: str
    palette: Callable[[DynamicScheme], TonalPalette]
    tone: SchemeFn
    is_background: bool = False
    chroma_multiplier: Optional[SchemeFn] = None
    background: Optional[Callable[[DynamicScheme], Optional[str]]] = None
    second_background: Optional[Callable[[DynamicScheme], Optional[str]]] = None
    contrast_curve: Optional[Callable[[DynamicScheme], Optional[ContrastCurve]]] = None
    tone_delta_pair: Optional[Callable[[DynamicScheme], Optional[ToneDeltaPair]]] = None
    opacity: Optional[SchemeFn] = None

    @classmethod
    def from_palette(
        cls,
        name: str,
        palette: Callable[[DynamicScheme], TonalPalette],
        tone: SchemeFn,
    ) -> DynamicColor:
        """A role with no contrast requirements."""
        return cls(name=name, palette=palette, tone=tone)

    def background_of(self, scheme: DynamicScheme) -> Optional[str]:
        return self.background(scheme) if self.background is not None else None

    def second_background_of(self, scheme: DynamicScheme) -> Optional[str]:
        return self.second_background(scheme) if self.second_background is not None else None

    def contrast_curve_of(self, scheme: DynamicScheme) -> Optional[ContrastCurve]:
        return self.contrast_curve(scheme) if self.contrast_curve is not None else None

    def tone_delta_pair_of(self, scheme: DynamicScheme) -> Optional[ToneDeltaPair]:
        return self.tone_delta_pair(scheme) if self.tone_delta_pair is not None else None


# =============================================================================
# Foreground tone helpers
# =============================================================================


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """
    Tone with at least ``ratio`` contrast against ``bg_tone``.

    Prefers the lighter side for mid-to-dark backgrounds; when neither side
    reaches the ratio, returns whichever side gets closer.
    """
    lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
    darker_tone = contrast.darker_unsafe(bg_tone, ratio)
    lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

    if tone_prefers_light_foreground(bg_tone):
        # Near-equal shortfall on both sides: light text reads better
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone

    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


def tone_prefers_light_foreground(tone: float) -> bool:
    """Whether text on this tone should be light (tone 60 and up takes dark text)."""
    return round_half_up(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    """Whether light text on this tone reaches 4.5:1."""
    return round_half_up(tone) <= 49


def enable_light_foreground(tone: float) -> float:
    """Darken a tone just enough to carry light text when it prefers light text."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone
