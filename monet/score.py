# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Ranking quantized colors as theme seeds.

A good seed is common in the image, or rather its hue neighbourhood is
(a hue "excites" the 30 degrees around it), and reasonably colorful.
Candidates are scored on both, then picked greedily while keeping their
hues apart.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

import numpy as np

from monet.hct import Hct
from monet.hct.color_utils import difference_degrees, round_half_up, sanitize_degrees_int

logger = logging.getLogger(__name__)


# Google Blue, used when an image has no usable color
DEFAULT_FALLBACK = 0xFF4285F4


@dataclass(frozen=True, slots=True)
class ScoreConfig:
    """
    Scoring constants.

    Attributes:
        target_chroma: Chroma at which the chroma term is zero
        weight_proportion: Weight of the hue-neighbourhood proportion
        weight_chroma_above: Weight per unit of chroma above the target
        weight_chroma_below: Weight per unit of chroma below the target
        cutoff_chroma: Candidates below this chroma are filtered out
        cutoff_excited_proportion: Candidates whose hue neighbourhood
            covers no more than this share of the image are filtered out
        max_hue_separation: Initial minimum hue distance between picks
        min_hue_separation: Smallest hue distance tried before giving up
    """
    target_chroma: float = 48.0
    weight_proportion: float = 0.7
    weight_chroma_above: float = 0.3
    weight_chroma_below: float = 0.1
    cutoff_chroma: float = 5.0
    cutoff_excited_proportion: float = 0.01
    max_hue_separation: int = 90
    min_hue_separation: int = 15


def score(
    colors_to_population: Mapping[int, int],
    desired: int = 4,
    fallback: int = DEFAULT_FALLBACK,
    filter_colors: bool = True,
    config: Optional[ScoreConfig] = None,
) -> list[int]:
    """
    Rank colors by their suitability as a theme seed.

    Args:
        colors_to_population: ARGB color → pixel count, e.g. a
            ``QuantizerResult``
        desired: Maximum number of colors to return
        fallback: Returned alone when no candidate survives filtering
        filter_colors: Drop grayish and rare candidates; with False every
            candidate is ranked
        config: Scoring constants; defaults to ``ScoreConfig()``

    Returns:
        Up to ``desired`` ARGB colors, best first. Never empty.
    """
    if desired < 1:
        raise ValueError(f"desired must be >= 1, got {desired}")
    config = config or ScoreConfig()

    population_sum = sum(colors_to_population.values())
    if population_sum <= 0:
        logger.debug("Nothing to score; using fallback %#010x", fallback)
        return [fallback]

    colors = [(Hct.from_argb(argb), population) for argb, population in colors_to_population.items()]

    hue_population = np.zeros(360)
    for hct, population in colors:
        hue_population[int(math.floor(hct.hue)) % 360] += population

    # Each hue contributes its share to the 30 degree window around it
    proportions = hue_population / population_sum
    excited = np.zeros(360)
    for offset in range(-14, 16):
        excited += np.roll(proportions, offset)

    scored: list[tuple[Hct, float]] = []
    for hct, _ in colors:
        proportion = float(excited[sanitize_degrees_int(round_half_up(hct.hue))])
        if filter_colors and (hct.chroma < config.cutoff_chroma or proportion <= config.cutoff_excited_proportion):
            continue
        proportion_score = proportion * 100.0 * config.weight_proportion
        chroma_weight = (
            config.weight_chroma_below if hct.chroma < config.target_chroma else config.weight_chroma_above
        )
        chroma_score = (hct.chroma - config.target_chroma) * chroma_weight
        scored.append((hct, proportion_score + chroma_score))

    scored.sort(key=lambda item: item[1], reverse=True)

    chosen: list[Hct] = []
    for separation in range(config.max_hue_separation, config.min_hue_separation - 1, -1):
        chosen = []
        for hct, _ in scored:
            if not any(difference_degrees(hct.hue, other.hue) < separation for other in chosen):
                chosen.append(hct)
            if len(chosen) >= desired:
                break
        if len(chosen) >= desired:
            break

    if not chosen:
        logger.debug("No color passed scoring filters; using fallback %#010x", fallback)
        return [fallback]
    return [hct.argb for hct in chosen]
