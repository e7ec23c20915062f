# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
CAM16 color appearance model.

Forward transform: ARGB → XYZ → CAM16 (J, C, h, ...). This is closed-form
and exact. The inverse from (J, C, h) is also closed-form; the hard inverse
used by HCT, where chroma and tone are chosen independently, lives in
``monet.hct.solver``.

Reference: Li et al., "Comprehensive color solutions: CAM16, CAT16, and CAM16-UCS" (2017).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from monet.hct.color_utils import (
    argb_from_xyz,
    blue_from_argb,
    green_from_argb,
    linearized,
    red_from_argb,
    signum,
)
from monet.hct.viewing_conditions import (
    CAM16RGB_TO_XYZ,
    XYZ_TO_CAM16RGB,
    ViewingConditions,
)


_XYZ_TO_CAM16RGB = tuple(tuple(row) for row in XYZ_TO_CAM16RGB.tolist())
_CAM16RGB_TO_XYZ = tuple(tuple(row) for row in CAM16RGB_TO_XYZ.tolist())


@dataclass(frozen=True, slots=True)
class Cam16:
    """
    A color in CAM16, plus its CAM16-UCS coordinates.

    Attributes:
        hue: Hue angle h in degrees [0, 360)
        chroma: Chroma C
        j: Lightness J
        q: Brightness Q
        m: Colorfulness M
        s: Saturation s
        jstar: CAM16-UCS J*
        astar: CAM16-UCS a*
        bstar: CAM16-UCS b*
    """
    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: Cam16) -> float:
        """Perceptual distance in CAM16-UCS (ΔE')."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * math.pow(d_e_prime, 0.63)

    # -------------------------------------------------------------------------
    # Forward
    # -------------------------------------------------------------------------

    @classmethod
    def from_argb(
        cls,
        argb: int,
        viewing_conditions: Optional[ViewingConditions] = None,
    ) -> Cam16:
        red_l = linearized(red_from_argb(argb))
        green_l = linearized(green_from_argb(argb))
        blue_l = linearized(blue_from_argb(argb))
        x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
        y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
        z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l
        return cls.from_xyz(x, y, z, viewing_conditions)

    @classmethod
    def from_xyz(
        cls,
        x: float,
        y: float,
        z: float,
        viewing_conditions: Optional[ViewingConditions] = None,
    ) -> Cam16:
        vc = viewing_conditions or ViewingConditions.DEFAULT
        m = _XYZ_TO_CAM16RGB

        r_c = m[0][0] * x + m[0][1] * y + m[0][2] * z
        g_c = m[1][0] * x + m[1][1] * y + m[1][2] * z
        b_c = m[2][0] * x + m[2][1] * y + m[2][2] * z

        # Chromatic adaptation
        r_d = vc.rgb_d[0] * r_c
        g_d = vc.rgb_d[1] * g_c
        b_d = vc.rgb_d[2] * b_c

        r_af = math.pow(vc.fl * abs(r_d) / 100.0, 0.42)
        g_af = math.pow(vc.fl * abs(g_d) / 100.0, 0.42)
        b_af = math.pow(vc.fl * abs(b_d) / 100.0, 0.42)
        r_a = signum(r_d) * 400.0 * r_af / (r_af + 27.13)
        g_a = signum(g_d) * 400.0 * g_af / (g_af + 27.13)
        b_a = signum(b_d) * 400.0 * b_af / (b_af + 27.13)

        # Opponent color dimensions
        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        atan_degrees = math.degrees(math.atan2(b, a))
        if atan_degrees < 0:
            hue = atan_degrees + 360.0
        elif atan_degrees >= 360.0:
            hue = atan_degrees - 360.0
        else:
            hue = atan_degrees
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * math.pow(ac / vc.aw, vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = math.pow(1.64 - math.pow(0.29, vc.n), 0.73) * math.pow(t, 0.9)
        c = alpha * math.sqrt(j / 100.0)
        m_ = c * vc.fl_root
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m_)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)

        return cls(
            hue=hue, chroma=c, j=j, q=q, m=m_, s=s,
            jstar=jstar, astar=astar, bstar=bstar,
        )

    # -------------------------------------------------------------------------
    # Inverse (given J, C, h)
    # -------------------------------------------------------------------------

    @classmethod
    def from_jch(
        cls,
        j: float,
        c: float,
        h: float,
        viewing_conditions: Optional[ViewingConditions] = None,
    ) -> Cam16:
        vc = viewing_conditions or ViewingConditions.DEFAULT
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m_ = c * vc.fl_root
        alpha = c / math.sqrt(j / 100.0) if j != 0 else 0.0
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m_)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(
            hue=h, chroma=c, j=j, q=q, m=m_, s=s,
            jstar=jstar, astar=astar, bstar=bstar,
        )

    def to_xyz(
        self,
        viewing_conditions: Optional[ViewingConditions] = None,
    ) -> tuple[float, float, float]:
        """XYZ of this color when viewed in the given conditions."""
        vc = viewing_conditions or ViewingConditions.DEFAULT
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = math.pow(alpha / math.pow(1.64 - math.pow(0.29, vc.n), 0.73), 1.0 / 0.9)
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * math.pow(self.j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_c_base = max(0.0, (27.13 * abs(r_a)) / (400.0 - abs(r_a)))
        r_c = signum(r_a) * (100.0 / vc.fl) * math.pow(r_c_base, 1.0 / 0.42)
        g_c_base = max(0.0, (27.13 * abs(g_a)) / (400.0 - abs(g_a)))
        g_c = signum(g_a) * (100.0 / vc.fl) * math.pow(g_c_base, 1.0 / 0.42)
        b_c_base = max(0.0, (27.13 * abs(b_a)) / (400.0 - abs(b_a)))
        b_c = signum(b_a) * (100.0 / vc.fl) * math.pow(b_c_base, 1.0 / 0.42)

        r_f = r_c / vc.rgb_d[0]
        g_f = g_c / vc.rgb_d[1]
        b_f = b_c / vc.rgb_d[2]

        m = _CAM16RGB_TO_XYZ
        x = m[0][0] * r_f + m[0][1] * g_f + m[0][2] * b_f
        y = m[1][0] * r_f + m[1][1] * g_f + m[1][2] * b_f
        z = m[2][0] * r_f + m[2][1] * g_f + m[2][2] * b_f
        return x, y, z

    def to_argb(self, viewing_conditions: Optional[ViewingConditions] = None) -> int:
        """ARGB of this color when viewed in the given conditions (clamped)."""
        return argb_from_xyz(*self.to_xyz(viewing_conditions))
