# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
HCT inverse: find the sRGB color with a given hue, chroma and tone.

CAM16 has no closed-form inverse once chroma and L* are picked
independently, and most (hue, chroma, tone) triples are outside the sRGB
gamut. The search runs in two stages:

1. Newton iteration on CAM16 lightness J (at most 5 rounds). Succeeds when
   the requested color is displayable.
2. Otherwise, the tone fixes a plane of constant Y through the RGB cube.
   The edges of that plane's intersection with the cube are bisected
   (at most 8 steps per axis, cut on the sRGB "critical planes" where an
   8-bit channel changes value) to find the most chromatic displayable
   color at the requested hue. Chroma is therefore clamped to the gamut
   boundary rather than rejected.

Both stages have fixed iteration caps, so the solver always terminates and
is fully deterministic.
"""

from __future__ import annotations

import math

import numpy as np

from monet.hct.color_utils import (
    SRGB_TO_XYZ,
    argb_from_linrgb,
    argb_from_lstar,
    matrix_multiply,
    sanitize_degrees,
    signum,
    y_from_lstar,
)
from monet.hct.viewing_conditions import XYZ_TO_CAM16RGB, ViewingConditions


# =============================================================================
# Precomputed matrices and planes
# =============================================================================

_VC = ViewingConditions.DEFAULT

# Linear RGB (0-100) straight to discounted, luminance-scaled cone responses
_SCALED_DISCOUNT = np.diag(np.asarray(_VC.rgb_d) * _VC.fl / 100.0) @ XYZ_TO_CAM16RGB @ SRGB_TO_XYZ
SCALED_DISCOUNT_FROM_LINRGB = tuple(tuple(row) for row in _SCALED_DISCOUNT.tolist())
LINRGB_FROM_SCALED_DISCOUNT = tuple(tuple(row) for row in np.linalg.inv(_SCALED_DISCOUNT).tolist())

Y_FROM_LINRGB = (0.2126, 0.7152, 0.0722)

# Linear values (0-100) halfway between consecutive 8-bit sRGB levels
CRITICAL_PLANES = tuple(
    100.0 * ((i + 0.5) / 255.0 / 12.92 if (i + 0.5) / 255.0 <= 0.040449936
             else math.pow(((i + 0.5) / 255.0 + 0.055) / 1.055, 2.4))
    for i in range(255)
)

_T_INNER_COEFF = 1.0 / math.pow(1.64 - math.pow(0.29, _VC.n), 0.73)

# Newton iteration cap and acceptance tolerance in Y
_MAX_NEWTON_ROUNDS = 5
_Y_TOLERANCE = 0.002
# Bisection cap per axis
_MAX_BISECTION_STEPS = 8

_NO_VERTEX = (-1.0, -1.0, -1.0)


# =============================================================================
# Helpers
# =============================================================================


def _sanitize_radians(angle: float) -> float:
    return (angle + math.pi * 8) % (math.pi * 2)


def _true_delinearized(rgb_component: float) -> float:
    """Delinearize without rounding, result on 0-255."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized = normalized * 12.92
    else:
        delinearized = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return delinearized * 255.0


def _chromatic_adaptation(component: float) -> float:
    af = math.pow(abs(component), 0.42)
    return signum(component) * 400.0 * af / (af + 27.13)


def _inverse_chromatic_adaptation(adapted: float) -> float:
    adapted_abs = abs(adapted)
    base = max(0.0, 27.13 * adapted_abs / (400.0 - adapted_abs))
    return signum(adapted) * math.pow(base, 1.0 / 0.42)


def _hue_of(linrgb: tuple[float, float, float]) -> float:
    """CAM16 hue (radians) of a linear RGB color."""
    scaled = matrix_multiply(linrgb, SCALED_DISCOUNT_FROM_LINRGB)
    r_a = _chromatic_adaptation(scaled[0])
    g_a = _chromatic_adaptation(scaled[1])
    b_a = _chromatic_adaptation(scaled[2])
    a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    delta_ab = _sanitize_radians(b - a)
    delta_ac = _sanitize_radians(c - a)
    return delta_ab < delta_ac


def _intercept(source: float, mid: float, target: float) -> float:
    return (mid - source) / (target - source)


def _lerp_point(source, t: float, target) -> tuple[float, float, float]:
    return (
        source[0] + (target[0] - source[0]) * t,
        source[1] + (target[1] - source[1]) * t,
        source[2] + (target[2] - source[2]) * t,
    )


def _set_coordinate(source, coordinate: float, target, axis: int):
    t = _intercept(source[axis], coordinate, target[axis])
    return _lerp_point(source, t, target)


def _is_bounded(x: float) -> bool:
    return 0.0 <= x <= 100.0


def _nth_vertex(y: float, n: int) -> tuple[float, float, float]:
    """
    The nth possible vertex of the polygon where the Y plane cuts the cube.

    Returns (-1, -1, -1) when that edge does not intersect the plane.
    """
    k_r, k_g, k_b = Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g, b = coord_a, coord_b
        r = (y - g * k_g - b * k_b) / k_r
        return (r, g, b) if _is_bounded(r) else _NO_VERTEX
    if n < 8:
        b, r = coord_a, coord_b
        g = (y - r * k_r - b * k_b) / k_g
        return (r, g, b) if _is_bounded(g) else _NO_VERTEX
    r, g = coord_a, coord_b
    b = (y - r * k_r - g * k_g) / k_b
    return (r, g, b) if _is_bounded(b) else _NO_VERTEX


def _bisect_to_segment(y: float, target_hue: float):
    """Find the polygon edge whose end points bracket the target hue."""
    left = _NO_VERTEX
    right = left
    left_hue = 0.0
    right_hue = 0.0
    initialized = False
    uncut = True
    for n in range(12):
        mid = _nth_vertex(y, n)
        if mid[0] < 0:
            continue
        mid_hue = _hue_of(mid)
        if not initialized:
            left = mid
            right = mid
            left_hue = mid_hue
            right_hue = mid_hue
            initialized = True
            continue
        if uncut or _are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                right_hue = mid_hue
            else:
                left = mid
                left_hue = mid_hue
    return left, right


def _midpoint(a, b) -> tuple[float, float, float]:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0, (a[2] + b[2]) / 2.0)


def _critical_plane_below(x: float) -> int:
    return int(math.floor(x - 0.5))


def _critical_plane_above(x: float) -> int:
    return int(math.ceil(x - 0.5))


def _bisect_to_limit(y: float, target_hue: float) -> tuple[float, float, float]:
    """Most chromatic in-gamut linear RGB with the given Y and hue."""
    left, right = _bisect_to_segment(y, target_hue)
    left_hue = _hue_of(left)
    for axis in range(3):
        if left[axis] == right[axis]:
            continue
        if left[axis] < right[axis]:
            l_plane = _critical_plane_below(_true_delinearized(left[axis]))
            r_plane = _critical_plane_above(_true_delinearized(right[axis]))
        else:
            l_plane = _critical_plane_above(_true_delinearized(left[axis]))
            r_plane = _critical_plane_below(_true_delinearized(right[axis]))
        for _ in range(_MAX_BISECTION_STEPS):
            if abs(r_plane - l_plane) <= 1:
                break
            m_plane = int(math.floor((l_plane + r_plane) / 2.0))
            mid = _set_coordinate(left, CRITICAL_PLANES[m_plane], right, axis)
            mid_hue = _hue_of(mid)
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                r_plane = m_plane
            else:
                left = mid
                left_hue = mid_hue
                l_plane = m_plane
    return _midpoint(left, right)


def _find_result_by_j(hue_radians: float, chroma: float, y: float) -> int:
    """
    Newton's method on J for an in-gamut solution.

    Returns 0 when the color is out of gamut.
    """
    j = math.sqrt(y) * 11.0
    vc = _VC
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)
    for iteration_round in range(_MAX_NEWTON_ROUNDS):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = math.pow(alpha * _T_INNER_COEFF, 1.0 / 0.9)
        ac = vc.aw * math.pow(j_normalized, 1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
        linrgb = matrix_multiply(
            (
                _inverse_chromatic_adaptation(r_a),
                _inverse_chromatic_adaptation(g_a),
                _inverse_chromatic_adaptation(b_a),
            ),
            LINRGB_FROM_SCALED_DISCOUNT,
        )
        if linrgb[0] < 0 or linrgb[1] < 0 or linrgb[2] < 0:
            return 0
        fnj = Y_FROM_LINRGB[0] * linrgb[0] + Y_FROM_LINRGB[1] * linrgb[1] + Y_FROM_LINRGB[2] * linrgb[2]
        if fnj <= 0:
            return 0
        if iteration_round == _MAX_NEWTON_ROUNDS - 1 or abs(fnj - y) < _Y_TOLERANCE:
            if linrgb[0] > 100.01 or linrgb[1] > 100.01 or linrgb[2] > 100.01:
                return 0
            return argb_from_linrgb(linrgb)
        # fn(j) grows roughly as j², so 2 * fn(j) / j approximates fn'(j)
        j = j - (fnj - y) * j / (2.0 * fnj)
    return 0


# =============================================================================
# Public API
# =============================================================================


def solve_to_argb(hue_degrees: float, chroma: float, lstar: float) -> int:
    """
    Find the ARGB color closest to the requested HCT triple.

    The returned color always has (up to 8-bit rounding) the requested tone
    and hue. If the requested chroma is not displayable, the most chromatic
    displayable color at that hue and tone is returned.

    Args:
        hue_degrees: Hue in degrees (any value, wrapped into [0, 360))
        chroma: Requested chroma (>= 0)
        lstar: Requested tone, L* in [0, 100]

    Returns:
        Opaque ARGB int.
    """
    if chroma < 0.0001 or lstar < 0.0001 or lstar > 99.9999:
        return argb_from_lstar(lstar)
    hue_degrees = sanitize_degrees(hue_degrees)
    hue_radians = math.radians(hue_degrees)
    y = y_from_lstar(lstar)
    exact_answer = _find_result_by_j(hue_radians, chroma, y)
    if exact_answer != 0:
        return exact_answer
    return argb_from_linrgb(_bisect_to_limit(y, hue_radians))
