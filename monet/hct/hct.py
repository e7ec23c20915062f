# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
HCT: Hue, Chroma, Tone.

A perceptually accurate color representation: hue and chroma come from
CAM16, tone is CIE L*. Tone alone predicts contrast ratio, which is what
makes HCT convenient for building accessible schemes.

HCT ranges:
- Hue: 0-360 degrees (≈27=red, ≈110=yellow, ≈142=green, ≈282=blue)
- Chroma: 0 = gray; the maximum depends on hue and tone (≈ 120-130 at most in sRGB)
- Tone: 0 = black, 100 = white
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from monet.hct.cam16 import Cam16
from monet.hct.color_utils import argb_from_hex, hex_from_argb, lstar_from_argb
from monet.hct.solver import solve_to_argb


@dataclass(frozen=True, slots=True)
class Hct:
    """
    An immutable HCT color.

    Hue, chroma and tone always describe ``argb`` exactly: when a requested
    triple is out of gamut, the stored values are those of the displayable
    color that was actually found, not the request.

    Attributes:
        hue: CAM16 hue in degrees [0, 360)
        chroma: CAM16 chroma (>= 0)
        tone: L* in [0, 100]
        argb: Packed opaque ARGB value
    """
    hue: float
    chroma: float
    tone: float
    argb: int

    @classmethod
    def from_argb(cls, argb: int) -> Hct:
        """Exact forward conversion from an ARGB color."""
        cam = Cam16.from_argb(argb)
        return cls(hue=cam.hue, chroma=cam.chroma, tone=lstar_from_argb(argb), argb=argb)

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> Hct:
        """
        Find the displayable color closest to a hue, chroma and tone.

        Args:
            hue: Hue in degrees; wrapped into [0, 360)
            chroma: Requested chroma; clamped to the gamut boundary
            tone: L* in [0, 100]

        Raises:
            ValueError: If chroma is negative or tone is outside [0, 100].
        """
        if math.isnan(hue) or math.isnan(chroma) or math.isnan(tone):
            raise ValueError(f"HCT components must be numbers, got ({hue}, {chroma}, {tone})")
        if chroma < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {chroma}")
        if not 0.0 <= tone <= 100.0:
            raise ValueError(f"Tone must be 0-100, got {tone}")
        return cls.from_argb(solve_to_argb(hue, chroma, tone))

    @classmethod
    def from_hex(cls, hex_str: str) -> Hct:
        """Parse a hex string like '#5C6BC0'."""
        return cls.from_argb(argb_from_hex(hex_str))

    def with_hue(self, hue: float) -> Hct:
        return Hct.from_hct(hue, self.chroma, self.tone)

    def with_chroma(self, chroma: float) -> Hct:
        return Hct.from_hct(self.hue, chroma, self.tone)

    def with_tone(self, tone: float) -> Hct:
        return Hct.from_hct(self.hue, self.chroma, tone)

    def to_hex(self) -> str:
        """Hex string like '#5C6BC0'."""
        return hex_from_argb(self.argb)

    # -------------------------------------------------------------------------
    # Hue bands
    # -------------------------------------------------------------------------

    @staticmethod
    def is_blue(hue: float) -> bool:
        return 250.0 <= hue < 270.0

    @staticmethod
    def is_yellow(hue: float) -> bool:
        return 105.0 <= hue < 125.0

    @staticmethod
    def is_cyan(hue: float) -> bool:
        return 170.0 <= hue < 207.0
