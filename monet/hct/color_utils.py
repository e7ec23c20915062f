# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Color utilities: ARGB packing, sRGB transfer curves, XYZ, L*a*b* and L*.

Conversion chain: ARGB (8-bit sRGB) → Linear RGB (0-100) → XYZ (D65) → L*a*b*

Conventions:
- ARGB colors are packed 32-bit ints, 0xAARRGGBB.
- Linear RGB and XYZ components are on a 0-100 scale, matching the
  luminance scale used by the appearance model.
- L* (tone) is 0-100.

Scalar functions use plain floats; the batch helpers at the bottom take
NumPy arrays and are used by the quantizer.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Constants
# =============================================================================

SRGB_TO_XYZ = np.array([
    [0.41233895, 0.35762064, 0.18051042],
    [0.2126, 0.7152, 0.0722],
    [0.01932141, 0.11916382, 0.95034478],
], dtype=np.float64)

XYZ_TO_SRGB = np.array([
    [3.2413774792388685, -1.5376652402851851, -0.49885366846268053],
    [-0.9691452513005321, 1.8758853451067872, 0.04156585616912061],
    [0.05562093689691305, -0.20395524564742123, 1.0571799111220335],
], dtype=np.float64)

# D65 standard illuminant, Y normalised to 100
WHITE_POINT_D65 = (95.047, 100.0, 108.883)

# Row tuples of the matrices above for the scalar hot paths
_SRGB_TO_XYZ_ROWS = tuple(tuple(row) for row in SRGB_TO_XYZ.tolist())
_XYZ_TO_SRGB_ROWS = tuple(tuple(row) for row in XYZ_TO_SRGB.tolist())

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


# =============================================================================
# Math helpers
# =============================================================================


def signum(num: float) -> int:
    """Sign of a number: -1, 0 or 1."""
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation; amount 0 gives start, 1 gives stop."""
    return (1.0 - amount) * start + amount * stop


def clamp(low: float, high: float, value: float) -> float:
    """Clamp value into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def sanitize_degrees(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    degrees = degrees % 360.0
    if degrees < 0:
        degrees += 360.0
    return degrees


def sanitize_degrees_int(degrees: int) -> int:
    """Wrap an integer angle into [0, 360)."""
    return degrees % 360


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """Sign of the shortest rotation from one hue to another (1.0 or -1.0)."""
    increasing_difference = sanitize_degrees(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance between two hues in degrees, in [0, 180]."""
    return 180.0 - abs(abs(a - b) - 180.0)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, as screen math expects."""
    return int(math.floor(value + 0.5))


def matrix_multiply(row: tuple[float, float, float], matrix) -> tuple[float, float, float]:
    """Multiply a 3x3 matrix (rows) by a column vector."""
    a = row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2]
    b = row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2]
    c = row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2]
    return a, b, c


# =============================================================================
# ARGB packing
# =============================================================================


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque 8-bit channels into an ARGB int."""
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    return alpha_from_argb(argb) >= 255


def argb_from_hex(hex_str: str) -> int:
    """
    Parse '#RRGGBB', 'RRGGBB', '#RGB' or '#AARRGGBB' into an ARGB int.

    Raises:
        ValueError: If the string is not a hex color.
    """
    value = hex_str.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) == 6:
        value = "FF" + value
    if len(value) != 8:
        raise ValueError(f"Invalid hex color: {hex_str!r}")
    try:
        return int(value, 16)
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_str!r}") from None


def hex_from_argb(argb: int) -> str:
    """Format an ARGB int as '#RRGGBB' (alpha dropped)."""
    return f"#{red_from_argb(argb):02X}{green_from_argb(argb):02X}{blue_from_argb(argb):02X}"


# =============================================================================
# sRGB transfer curve (0-255 ↔ 0-100 linear)
# =============================================================================


def linearized(rgb_component: int) -> float:
    """Linearize an 8-bit sRGB component to 0-100."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
    """Delinearize a 0-100 linear component to a clamped 8-bit sRGB value."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized_value = normalized * 12.92
    else:
        delinearized_value = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return int(clamp(0, 255, round_half_up(delinearized_value * 255.0)))


def argb_from_linrgb(linrgb: tuple[float, float, float]) -> int:
    return argb_from_rgb(delinearized(linrgb[0]), delinearized(linrgb[1]), delinearized(linrgb[2]))


# =============================================================================
# XYZ and L*a*b*
# =============================================================================


def argb_from_xyz(x: float, y: float, z: float) -> int:
    linear = matrix_multiply((x, y, z), _XYZ_TO_SRGB_ROWS)
    return argb_from_linrgb(linear)


def xyz_from_argb(argb: int) -> tuple[float, float, float]:
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), _SRGB_TO_XYZ_ROWS)


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


def lab_from_argb(argb: int) -> tuple[float, float, float]:
    """Convert ARGB to CIE L*a*b* under D65."""
    x, y, z = xyz_from_argb(argb)
    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def argb_from_lab(l: float, a: float, b: float) -> int:
    """Convert CIE L*a*b* (D65) to ARGB, clamping out-of-gamut channels."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = _lab_invf(fx) * WHITE_POINT_D65[0]
    y = _lab_invf(fy) * WHITE_POINT_D65[1]
    z = _lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz(x, y, z)


# =============================================================================
# L* (tone) ↔ Y
# =============================================================================


def y_from_lstar(lstar: float) -> float:
    """Relative luminance Y (0-100) for a given L*."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """L* for a given relative luminance Y (0-100)."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


def lstar_from_argb(argb: int) -> float:
    """L* (tone) of an ARGB color."""
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def argb_from_lstar(lstar: float) -> int:
    """The gray with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


# =============================================================================
# Batch helpers (NumPy)
# =============================================================================


def argb_array_from_rgb(rgb: NDArray[np.integer]) -> NDArray[np.int64]:
    """
    Pack an (..., 3) array of 8-bit RGB into opaque ARGB ints.

    Args:
        rgb: Array of shape (..., 3) with values 0-255

    Returns:
        int64 array of shape (...)
    """
    rgb = np.asarray(rgb, dtype=np.int64)
    return (
        np.int64(0xFF000000)
        | (rgb[..., 0] << 16)
        | (rgb[..., 1] << 8)
        | rgb[..., 2]
    )


def rgb_from_argb_array(argb: NDArray[np.integer]) -> NDArray[np.int64]:
    """Unpack ARGB ints into an (..., 3) array of 8-bit RGB."""
    argb = np.asarray(argb, dtype=np.int64)
    return np.stack([(argb >> 16) & 255, (argb >> 8) & 255, argb & 255], axis=-1)
