# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Color temperature: complements and analogous colors.

Hues are ordered by perceived warmth rather than by hue angle. The
complement of a color is the color at the "opposite" relative temperature
on the other side of the warmth ordering, and analogous colors are spaced
evenly in temperature rather than in degrees. Everything is computed on
the input's own chroma and tone, so results stay in the same tonal family.

Reference: Ou, Woodcock & Wright, "A study of colour emotion and colour
preference" (2004), for the raw temperature formula.
"""

from __future__ import annotations

import math
from typing import Optional

from monet.hct import Hct
from monet.hct.color_utils import (
    lab_from_argb,
    round_half_up,
    sanitize_degrees,
    sanitize_degrees_int,
)


class TemperatureCache:
    """
    Lazily computed temperature data for one input color.

    Building the 361-entry hue sweep is the expensive part, so it is done
    once per instance on first use.
    """

    def __init__(self, input_hct: Hct) -> None:
        self.input = input_hct
        self._complement: Optional[Hct] = None
        self._hcts_by_hue: Optional[list[Hct]] = None
        self._hcts_by_temp: Optional[list[Hct]] = None
        self._temps_by_hct: Optional[dict[Hct, float]] = None

    # -------------------------------------------------------------------------
    # Public
    # -------------------------------------------------------------------------

    @property
    def complement(self) -> Hct:
        """The color on the opposite side of the warmth ordering."""
        if self._complement is not None:
            return self._complement

        temps = self._temps()
        coldest = self._coldest()
        warmest = self._warmest()
        coldest_hue = coldest.hue
        coldest_temp = temps[coldest]
        warmest_hue = warmest.hue
        warmest_temp = temps[warmest]
        temp_range = warmest_temp - coldest_temp

        start_hue_is_coldest_to_warmest = _is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue
        direction_of_rotation = 1.0
        smallest_error = 1000.0
        by_hue = self._by_hue()
        answer = by_hue[round_half_up(self.input.hue)]
        if temp_range == 0.0:
            # Achromatic input: every hue is the same color
            self._complement = answer
            return answer

        complement_relative_temp = 1.0 - self.relative_temperature(self.input)
        # Walk the other half of the ordering for the closest inverse percentile
        hue_addend = 0.0
        while hue_addend <= 360.0:
            hue = sanitize_degrees(start_hue + direction_of_rotation * hue_addend)
            hue_addend += 1.0
            if not _is_between(hue, start_hue, end_hue):
                continue
            possible_answer = by_hue[round_half_up(hue)]
            relative_temp = (temps[possible_answer] - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer

        self._complement = answer
        return answer

    def analogous_colors(self, count: int = 5, divisions: int = 12) -> list[Hct]:
        """
        Colors spread evenly in temperature around the input.

        Args:
            count: Number of colors to return, input included (centered)
            divisions: Number of temperature steps around the full circle

        Returns:
            ``count`` colors, the input color in the middle.
        """
        start_hue = round_half_up(self.input.hue)
        by_hue = self._by_hue()
        start_hct = by_hue[start_hue]
        last_temp = self.relative_temperature(start_hct)

        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hue = sanitize_degrees_int(start_hue + i)
            temp = self.relative_temperature(by_hue[hue])
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            hct = by_hue[hue]
            temp = self.relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta_for_index = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
            index_addend = 1
            # Repeat a hue while it still satisfies the next step. Covers
            # inputs like white or black that have no distinct analogues.
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta_for_index = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
                index_addend += 1
            last_temp = temp
            hue_addend += 1

            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]

        ccw_count = (count - 1) // 2
        for i in range(1, ccw_count + 1):
            index = (0 - i) % len(all_colors)
            answers.insert(0, all_colors[index])

        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            index = i % len(all_colors)
            answers.append(all_colors[index])

        return answers

    def relative_temperature(self, hct: Hct) -> float:
        """Temperature of ``hct`` relative to this sweep, 0 (coldest) to 1 (warmest)."""
        temps = self._temps()
        coldest_temp = temps[self._coldest()]
        temp_range = temps[self._warmest()] - coldest_temp
        # No spread at all, e.g. at T100 where only white exists
        if temp_range == 0.0:
            return 0.5
        temp = temps.get(hct)
        if temp is None:
            temp = raw_temperature(hct)
        return (temp - coldest_temp) / temp_range

    # -------------------------------------------------------------------------
    # Lazy tables
    # -------------------------------------------------------------------------

    def _by_hue(self) -> list[Hct]:
        if self._hcts_by_hue is None:
            self._hcts_by_hue = [
                Hct.from_hct(float(hue), self.input.chroma, self.input.tone)
                for hue in range(361)
            ]
        return self._hcts_by_hue

    def _by_temp(self) -> list[Hct]:
        if self._hcts_by_temp is None:
            temps = self._temps()
            hcts = list(self._by_hue()) + [self.input]
            hcts.sort(key=lambda hct: temps[hct])
            self._hcts_by_temp = hcts
        return self._hcts_by_temp

    def _temps(self) -> dict[Hct, float]:
        if self._temps_by_hct is None:
            all_hcts = list(self._by_hue()) + [self.input]
            self._temps_by_hct = {hct: raw_temperature(hct) for hct in all_hcts}
        return self._temps_by_hct

    def _coldest(self) -> Hct:
        return self._by_temp()[0]

    def _warmest(self) -> Hct:
        return self._by_temp()[-1]


def raw_temperature(color: Hct) -> float:
    """
    Warmth of a color on an open scale.

    Roughly -0.5 for the coldest blues up to ~+1.5 for saturated oranges.
    """
    _, a, b = lab_from_argb(color.argb)
    hue = sanitize_degrees(math.degrees(math.atan2(b, a)))
    chroma = math.hypot(a, b)
    return -0.5 + 0.02 * math.pow(chroma, 1.07) * math.cos(math.radians(sanitize_degrees(hue - 50.0)))


def _is_between(angle: float, a: float, b: float) -> bool:
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b
