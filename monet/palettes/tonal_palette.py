# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Tonal palettes: one hue and chroma, every tone.

A palette is the set of colors reachable by varying tone while holding
hue and chroma fixed. Tones near black or white cannot carry much chroma,
so the actual chroma of ``tone(t)`` falls off toward the ends.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from monet.hct import Hct


# Chroma used to find the gamut boundary; above any displayable chroma
_MAX_CHROMA_VALUE = 200.0


@dataclass(eq=False)
class TonalPalette:
    """
    A hue/chroma pair with a memoised tone → color lookup.

    Two palettes built from the same hue and chroma compare equal and
    return identical colors for every tone. The cache is private to the
    instance and guarded by a lock, so a palette may be shared between
    threads.

    Attributes:
        hue: Palette hue in degrees
        chroma: Requested palette chroma
        key_color: A representative color of the palette
    """
    hue: float
    chroma: float
    key_color: Hct
    _cache: dict[int, int] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @classmethod
    def from_argb(cls, argb: int) -> TonalPalette:
        return cls.from_hct(Hct.from_argb(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> TonalPalette:
        """Palette with the hue and chroma of ``hct``, keyed on ``hct`` itself."""
        return cls(hue=hct.hue, chroma=hct.chroma, key_color=hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> TonalPalette:
        """Palette with the given hue and chroma; the key color is searched for."""
        if chroma < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {chroma}")
        return cls(hue=hue, chroma=chroma, key_color=_KeyColor(hue, chroma).create())

    def tone(self, tone: int) -> int:
        """ARGB of this palette at an integer tone (memoised)."""
        with self._lock:
            color = self._cache.get(tone)
        if color is None:
            if tone == 99 and Hct.is_yellow(self.hue):
                # Yellow T99 is the midpoint of T98 and T100
                color = _average_argb(self.tone(98), self.tone(100))
            else:
                color = Hct.from_hct(self.hue, self.chroma, tone).argb
            with self._lock:
                self._cache.setdefault(tone, color)
        return color

    def get_hct(self, tone: float) -> Hct:
        """HCT of this palette at any tone (not memoised)."""
        return Hct.from_hct(self.hue, self.chroma, tone)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TonalPalette):
            return NotImplemented
        return self.hue == other.hue and self.chroma == other.chroma

    def __hash__(self) -> int:
        return hash((self.hue, self.chroma))


def _average_argb(argb1: int, argb2: int) -> int:
    """Channel-wise mean of two opaque colors, halves rounded up."""
    channels = [
        (((argb1 >> shift) & 0xFF) + ((argb2 >> shift) & 0xFF) + 1) // 2
        for shift in (16, 8, 0)
    ]
    return 0xFF000000 | (channels[0] << 16) | (channels[1] << 8) | channels[2]


class _KeyColor:
    """
    Finds the tone at which a hue can best display the requested chroma.

    Binary search over integer tones, pivoting around T50 where the most
    chroma is available on average.
    """

    def __init__(self, hue: float, requested_chroma: float) -> None:
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache: dict[int, float] = {}

    def create(self) -> Hct:
        pivot_tone = 50
        tone_step_size = 1
        # Accept values slightly below the requested chroma
        epsilon = 0.01

        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self._max_chroma(mid_tone) < self._max_chroma(mid_tone + tone_step_size)
            sufficient_chroma = self._max_chroma(mid_tone) >= self.requested_chroma - epsilon

            if sufficient_chroma:
                # Both halves may hold the answer; keep the one nearer the pivot
                if abs(lower_tone - pivot_tone) < abs(upper_tone - pivot_tone):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)
                    lower_tone = mid_tone
            else:
                # Not enough chroma here; climb toward the chroma peak
                if is_ascending:
                    lower_tone = mid_tone + tone_step_size
                else:
                    upper_tone = mid_tone

        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)

    def _max_chroma(self, tone: int) -> float:
        chroma = self._chroma_cache.get(tone)
        if chroma is None:
            chroma = Hct.from_hct(self.hue, _MAX_CHROMA_VALUE, tone).chroma
            self._chroma_cache[tone] = chroma
        return chroma
