# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
WCAG contrast ratios expressed in tone (L*).

Contrast ratio is (Y_lighter + 5) / (Y_darker + 5) with Y on 0-100. Since
tone is a function of Y alone, contrast between two colors depends only on
their tones, which lets the dynamic color engine reason purely in tone.
"""

from __future__ import annotations

from monet.hct.color_utils import lstar_from_y, y_from_lstar


RATIO_MIN = 1.0
RATIO_MAX = 21.0

# Accept ratios this close below the target as meeting it
CONTRAST_RATIO_EPSILON = 0.04

# Tone margin added to solved tones. Gamut mapping a color can nudge its
# L* by up to ~0.4, which would otherwise break an exactly-met ratio.
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_ys(y1: float, y2: float) -> float:
    lighter = max(y1, y2)
    darker = y1 if lighter == y2 else y2
    return (lighter + 5.0) / (darker + 5.0)


def ratio_of_tones(t1: float, t2: float) -> float:
    """Contrast ratio of two tones, 1.0 to 21.0."""
    return ratio_of_ys(y_from_lstar(t1), y_from_lstar(t2))


def lighter(tone: float, ratio: float) -> float:
    """
    Tone >= ``tone`` that reaches ``ratio`` against it.

    Returns:
        The tone, or -1.0 if the ratio cannot be reached.
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    if light_y < 0.0 or light_y > 100.0:
        return -1.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return -1.0
    return_value = lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return -1.0
    return return_value


def darker(tone: float, ratio: float) -> float:
    """
    Tone <= ``tone`` that reaches ``ratio`` against it.

    Returns:
        The tone, or -1.0 if the ratio cannot be reached.
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0
    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    if dark_y < 0.0 or dark_y > 100.0:
        return -1.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return -1.0
    return_value = lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return -1.0
    return return_value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like ``lighter`` but returns 100 (white) when the ratio is unreachable."""
    lighter_safe = lighter(tone, ratio)
    return 100.0 if lighter_safe < 0.0 else lighter_safe


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like ``darker`` but returns 0 (black) when the ratio is unreachable."""
    darker_safe = darker(tone, ratio)
    return max(0.0, darker_safe)
