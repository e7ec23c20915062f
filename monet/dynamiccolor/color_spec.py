# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Color specifications.

A ``ColorSpec`` bundles a role table with the procedure that turns a role
record into a tone. The 2021 and 2025 Material specs are the two
instances; a scheme picks one when it is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from monet.dynamiccolor.dynamic_color import DynamicColor, tone_prefers_light_foreground
from monet.hct import Hct, contrast
from monet.schema import SpecVersion

if TYPE_CHECKING:
    from monet.dynamiccolor.dynamic_scheme import DynamicScheme


# Roles of the key colors of the six scheme palettes
PALETTE_KEY_COLORS = (
    "primary_palette_key_color",
    "secondary_palette_key_color",
    "tertiary_palette_key_color",
    "neutral_palette_key_color",
    "neutral_variant_palette_key_color",
    "error_palette_key_color",
)


@dataclass(frozen=True)
class ColorSpec:
    """
    One version of the Material color specification.

    Attributes:
        version: Which spec this is
        colors: Role id → resolution record
        resolve_tone: Final tone of a role in a scheme
        resolve_hct: Final color of a role, given its final tone
    """
    version: SpecVersion
    colors: Mapping[str, DynamicColor]
    resolve_tone: Callable[[DynamicScheme, DynamicColor], float]
    resolve_hct: Callable[[DynamicScheme, DynamicColor, float], Hct]

    def color(self, role: str) -> DynamicColor:
        """
        Resolution record of a role.

        Raises:
            KeyError: If the spec has no such role.
        """
        try:
            return self.colors[role]
        except KeyError:
            raise KeyError(f"Role {role!r} is not defined in the {self.version.value} spec") from None

    def __contains__(self, role: object) -> bool:
        return role in self.colors


def highest_surface(scheme: DynamicScheme) -> str:
    """The surface with the most extreme tone: bright in dark schemes, dim in light ones."""
    return "surface_bright" if scheme.is_dark else "surface_dim"


def resolve_second_background(
    scheme: DynamicScheme,
    color: DynamicColor,
    answer: float,
    desired_ratio: float,
) -> float:
    """
    Adjust a tone so it contrasts with both of a role's backgrounds.

    When the tone already clears both, it is returned as is. Otherwise
    the tone moves above the lighter background or below the darker one,
    preferring light when either background prefers light text.
    """
    second = color.second_background_of(scheme)
    if second is None:
        return answer

    bg_tone1 = scheme.get_tone(color.background_of(scheme))
    bg_tone2 = scheme.get_tone(second)
    upper = max(bg_tone1, bg_tone2)
    lower = min(bg_tone1, bg_tone2)
    if (
        contrast.ratio_of_tones(upper, answer) >= desired_ratio
        and contrast.ratio_of_tones(lower, answer) >= desired_ratio
    ):
        return answer

    light_option = contrast.lighter(upper, desired_ratio)
    dark_option = contrast.darker(lower, desired_ratio)
    available = [tone for tone in (light_option, dark_option) if tone != -1.0]

    if tone_prefers_light_foreground(bg_tone1) or tone_prefers_light_foreground(bg_tone2):
        return 100.0 if light_option < 0.0 else light_option
    if len(available) == 1:
        return available[0]
    return 0.0 if dark_option < 0.0 else dark_option
