# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Dislike analysis.

Dark yellow-greens ("bile" colors) are consistently rated as unpleasant
in color-preference studies. They are detected by a fixed hue/chroma/tone
band and lifted to a lighter tone, which reads as a pleasant olive/khaki.

Reference: Palmer & Schloss, "An ecological valence theory of human color preference" (2010).
"""

from __future__ import annotations

from monet.hct import Hct
from monet.hct.color_utils import round_half_up


# Tone disliked colors are moved to
FIXED_TONE = 70.0


def is_disliked(hct: Hct) -> bool:
    """True for dark, chromatic yellow-greens."""
    hue = round_half_up(hct.hue)
    hue_passes = 90.0 <= hue <= 111.0
    chroma_passes = round_half_up(hct.chroma) > 16.0
    tone_passes = round_half_up(hct.tone) < 65.0
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Return ``hct`` unchanged, or lifted to tone 70 if it is disliked."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, FIXED_TONE)
    return hct
