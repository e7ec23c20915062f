# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
CAM16 viewing conditions.

The appearance model predicts how a color looks in a given environment.
Everything here is derived once from a handful of physical inputs and is
never mutated; the process-wide default is the sRGB reference
environment (D65 white, mid-gray background, average surround).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional

import numpy as np

from monet.hct.color_utils import WHITE_POINT_D65, clamp, lerp, y_from_lstar


# XYZ to CAM16 "cone" RGB
XYZ_TO_CAM16RGB = np.array([
    [0.401288, 0.650173, -0.051461],
    [-0.250268, 1.204414, 0.045854],
    [-0.002079, 0.048952, 0.953127],
], dtype=np.float64)

CAM16RGB_TO_XYZ = np.linalg.inv(XYZ_TO_CAM16RGB)


@dataclass(frozen=True, slots=True)
class ViewingConditions:
    """
    Precomputed CAM16 environment parameters.

    Attributes:
        n: Background relative luminance Yb / Yw
        aw: Achromatic response of the white point
        nbb: Brightness induction factor (background)
        ncb: Chromatic induction factor (background)
        c: Exponential non-linearity from the surround
        nc: Chromatic induction factor from the surround
        rgb_d: Per-channel degree-of-adaptation discount factors
        fl: Luminance-level adaptation factor
        fl_root: fl ** 0.25
        z: Base exponential non-linearity
    """
    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    DEFAULT: ClassVar[ViewingConditions]

    @classmethod
    def make(
        cls,
        white_point: tuple[float, float, float] = WHITE_POINT_D65,
        adapting_luminance: Optional[float] = None,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> ViewingConditions:
        """
        Build viewing conditions from physical parameters.

        Args:
            white_point: XYZ of the reference white (Y = 100)
            adapting_luminance: Luminance of the adapting field in cd/m².
                Defaults to the sRGB reference (≈ 11.72, i.e. 200 lux gray world).
            background_lstar: L* of the background (clamped to >= 0.1)
            surround: 0 = dark, 1 = dim, 2 = average
            discounting_illuminant: Whether the eye fully adapts to the white
        """
        if adapting_luminance is None:
            adapting_luminance = 200.0 / math.pi * y_from_lstar(50.0) / 100.0
        background_lstar = max(0.1, background_lstar)

        rw, gw, bw = (float(v) for v in XYZ_TO_CAM16RGB @ np.asarray(white_point, dtype=np.float64))

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp(0.0, 1.0, d)
        nc = f

        rgb_d = (
            d * (100.0 / rw) + 1.0 - d,
            d * (100.0 / gw) + 1.0 - d,
            d * (100.0 / bw) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.pow(5.0 * adapting_luminance, 1.0 / 3.0)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)
        ncb = nbb

        factors = (
            math.pow(fl * rgb_d[0] * rw / 100.0, 0.42),
            math.pow(fl * rgb_d[1] * gw / 100.0, 0.42),
            math.pow(fl * rgb_d[2] * bw / 100.0, 0.42),
        )
        rgb_a = tuple(400.0 * f_ / (f_ + 27.13) for f_ in factors)
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=math.pow(fl, 0.25),
            z=z,
        )


ViewingConditions.DEFAULT = ViewingConditions.make()
