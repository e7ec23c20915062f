# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Scheme options: the closed sets a color scheme is parameterized by.

- Variant: the palette style (how hue and chroma are derived from the seed)
- Brightness: light or dark scheme
- Contrast: contrast level in [-1, 1]
- TargetPlatform: phone or watch (only the 2025 spec distinguishes them)
- SpecVersion: which Material color specification resolves the roles
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Variant(Enum):
    """
    Palette style used to derive the scheme's palettes from its seed.

    TONAL_SPOT is the Material default: pastel palettes with low chroma.
    """

    # Low chroma pastels; the default Material theme
    TONAL_SPOT = "tonal_spot"
    # Palettes match the seed, even very bright seeds
    FIDELITY = "fidelity"
    # Like FIDELITY, with an analogous rather than complementary tertiary
    CONTENT = "content"
    # Grayscale, no chroma
    MONOCHROME = "monochrome"
    # Close to grayscale, a hint of chroma
    NEUTRAL = "neutral"
    # Maximum chroma for the primary palette, more for the others
    VIBRANT = "vibrant"
    # Playful; the primary hue is rotated away from the seed
    EXPRESSIVE = "expressive"
    # Playful with a source-colored primary and grayscale neutrals
    RAINBOW = "rainbow"
    # Playful; primary and secondary are rotated away from the seed
    FRUIT_SALAD = "fruit_salad"

    @property
    def is_fidelity(self) -> bool:
        """True for the styles whose roles track the seed's own tone."""
        return self in (Variant.FIDELITY, Variant.CONTENT)


class Brightness(Enum):
    """Light or dark scheme."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def is_dark(self) -> bool:
        return self is Brightness.DARK


class TargetPlatform(Enum):
    """Device class the scheme is resolved for."""

    PHONE = "phone"
    WATCH = "watch"


class SpecVersion(Enum):
    """Material color specification version."""

    SPEC_2021 = "2021"
    SPEC_2025 = "2025"


@dataclass(frozen=True, slots=True)
class Contrast:
    """
    A contrast level.

    -1.0 is the lowest contrast, 0.0 the standard, 0.5 medium and 1.0 the
    highest. Any value in between is valid.

    Attributes:
        value: Contrast level in [-1.0, 1.0]
    """
    value: float

    LOW: ClassVar[Contrast]
    STANDARD: ClassVar[Contrast]
    MEDIUM: ClassVar[Contrast]
    HIGH: ClassVar[Contrast]
    DEFAULT: ClassVar[Contrast]

    def __post_init__(self) -> None:
        """Validate the contrast level."""
        if math.isnan(self.value) or not -1.0 <= self.value <= 1.0:
            raise ValueError(f"Contrast value must be between -1.0 and 1.0, got {self.value}")

    @classmethod
    def of(cls, value: float) -> Contrast:
        """
        Contrast for a level, reusing the named constants where they match.

        Raises:
            ValueError: If value is NaN or outside [-1.0, 1.0].
        """
        for named in (cls.LOW, cls.STANDARD, cls.MEDIUM, cls.HIGH):
            if value == named.value:
                return named
        return cls(float(value))


Contrast.LOW = Contrast(-1.0)
Contrast.STANDARD = Contrast(0.0)
Contrast.MEDIUM = Contrast(0.5)
Contrast.HIGH = Contrast(1.0)
Contrast.DEFAULT = Contrast.STANDARD
