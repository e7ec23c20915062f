# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Design-token export in the shape of a Material Theme Builder file.

One document holds the seed colors, light and dark schemes at three
contrast levels, and the tonal palettes they were resolved from. Role and
palette names are camelCase / kebab-case the way theme builder tooling
reads them.
"""

from __future__ import annotations

from typing import Any

from monet.hct.color_utils import hex_from_argb
from monet.runtime.serializers.base import camel_case
from monet.schema import Brightness, ColorRole, Contrast
from monet.scheme import ColorScheme


# Tones listed for each palette
PALETTE_TONES = (0, 5, 10, 15, 20, 25, 30, 35, 40, 50, 60, 70, 80, 90, 95, 98, 99, 100)

# Scheme key suffix → contrast level
_CONTRAST_VARIANTS = (
    ("", Contrast.STANDARD),
    ("-medium-contrast", Contrast.MEDIUM),
    ("-high-contrast", Contrast.HIGH),
)

_SEEDS = ("primary", "secondary", "tertiary", "neutral", "neutral_variant", "error")


def _scheme_tokens(scheme: ColorScheme) -> dict[str, str]:
    return {camel_case(role.value): scheme.get_hex(role) for role in ColorRole}


def to_tokens(
    scheme: ColorScheme,
    *,
    contrast_variants: bool = True,
    include_palettes: bool = True,
    description: str = "",
) -> dict[str, Any]:
    """
    Export a scheme family as design tokens.

    The given scheme's seeds, style, platform and spec version are kept;
    brightness and contrast are varied to produce every scheme in the
    document, so the result is the same for a light or a dark input.

    Args:
        scheme: Any scheme of the family
        contrast_variants: Also export medium and high contrast schemes
        include_palettes: Also export the tonal palettes
        description: Free text stored under ``description``

    Returns:
        dict with ``seed``, ``coreColors``, ``schemes`` (``light``,
        ``dark`` and their ``-medium-contrast`` / ``-high-contrast``
        versions) and ``palettes``.
    """
    core_colors = {
        camel_case(name): hex_from_argb(getattr(scheme, name))
        for name in _SEEDS
        if getattr(scheme, name) is not None
    }

    variants = _CONTRAST_VARIANTS if contrast_variants else _CONTRAST_VARIANTS[:1]
    schemes: dict[str, dict[str, str]] = {}
    for brightness in (Brightness.LIGHT, Brightness.DARK):
        for suffix, contrast in variants:
            derived = scheme.derive(brightness=brightness, contrast=contrast)
            schemes[brightness.value + suffix] = _scheme_tokens(derived)

    tokens: dict[str, Any] = {
        "description": description,
        "seed": hex_from_argb(scheme.primary),
        "variant": scheme.variant.value,
        "specVersion": scheme.spec_version.value,
        "coreColors": core_colors,
        "extendedColors": [],
        "schemes": schemes,
    }

    if include_palettes:
        base = scheme.derive(brightness=Brightness.LIGHT, contrast=Contrast.STANDARD).palettes
        palettes = {
            "primary": base.primary,
            "secondary": base.secondary,
            "tertiary": base.tertiary,
            "neutral": base.neutral,
            "neutral-variant": base.neutral_variant,
            "error": base.error,
        }
        tokens["palettes"] = {
            name: {str(tone): hex_from_argb(palette.tone(tone)) for tone in PALETTE_TONES}
            for name, palette in palettes.items()
        }

    return tokens
