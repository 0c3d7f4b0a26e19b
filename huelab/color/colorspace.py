# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    hex ↔ sRGB ↔ HSL
    sRGB → CMYK
    sRGB → Linear RGB → CIE XYZ (D65) → CIE LAB

References:
- sRGB transfer function and D65 matrix: IEC 61966-2-1
- CIE LAB: CIE 15:2004

All conversions are deterministic pure NumPy/Python; the LAB chain is the
numerical basis of every perceptual distance and must reproduce exactly
for identical inputs.

Malformed hex input yields ``None``. Components passed directly are
validated and raise ``OutOfRangeComponent``; they are never clamped.
"""

from __future__ import annotations

import math
import numbers
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from huelab.errors import InvalidColor, OutOfRangeComponent
from huelab.schema.color import (
    CMYK,
    HSL,
    LAB,
    RGB,
    Color,
    check_component,
    parse_hex,
)


# =============================================================================
# Validation
# =============================================================================


def _validate_rgb(r: float, g: float, b: float) -> None:
    check_component("r", r, 0, 255)
    check_component("g", g, 0, 255)
    check_component("b", b, 0, 255)


# =============================================================================
# hex ↔ sRGB
# =============================================================================


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """
    Parse a hex color string.

    Accepts exactly six hex digits with an optional leading '#', in any case.

    Args:
        hex_color: String like "#3498db" or "3498DB"

    Returns:
        RGB with integer channels, or None when the input is malformed
    """
    parsed = parse_hex(hex_color)
    if parsed is None:
        return None
    return RGB(*parsed)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Encode integer channels as a canonical uppercase hex string.

    Returns:
        Hex string like "#3498DB"
    """
    _validate_rgb(r, g, b)
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"


def normalize_hex(hex_color: str) -> Optional[str]:
    """Canonical '#RRGGBB' form of a hex string, or None if malformed."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert sRGB channels [0,255] to HSL.

    Achromatic input (max == min) has s = 0 and h = 0.

    Returns:
        HSL with h in [0, 360), s and l in [0, 100]
    """
    _validate_rgb(r, g, b)
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0

    c_max = max(rn, gn, bn)
    c_min = min(rn, gn, bn)
    l = (c_max + c_min) / 2.0

    if c_max == c_min:
        return HSL(h=0.0, s=0.0, l=min(100.0, l * 100.0))

    d = c_max - c_min
    s = d / (2.0 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)

    if c_max == rn:
        h = (gn - bn) / d + (6.0 if gn < bn else 0.0)
    elif c_max == gn:
        h = (bn - rn) / d + 2.0
    else:
        h = (rn - gn) / d + 4.0

    hue = (h * 60.0) % 360.0
    return HSL(h=hue, s=min(100.0, s * 100.0), l=min(100.0, l * 100.0))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to integer sRGB channels.

    Hue wraps into [0, 360); saturation and lightness must be within 0-100.
    """
    if isinstance(h, bool) or not isinstance(h, numbers.Real) or not math.isfinite(h):
        raise OutOfRangeComponent("h", h, float("-inf"), float("inf"))
    check_component("s", s, 0, 100)
    check_component("l", l, 0, 100)

    hue = h % 360.0
    sat = s / 100.0
    light = l / 100.0

    chroma = (1.0 - abs(2.0 * light - 1.0)) * sat
    x = chroma * (1.0 - abs((hue / 60.0) % 2.0 - 1.0))
    m = light - chroma / 2.0

    sector = int(hue // 60.0)
    r1, g1, b1 = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[min(sector, 5)]

    channels = np.round((np.array([r1, g1, b1], dtype=np.float64) + m) * 255.0)
    r, g, b = (int(v) for v in np.clip(channels, 0, 255))
    return RGB(r, g, b)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to a canonical hex string."""
    rgb = hsl_to_rgb(h, s, l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


# =============================================================================
# sRGB → CMYK
# =============================================================================


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """
    Convert sRGB channels to CMYK percentages.

    k = 1 - max(r,g,b)/255; c, m, y are taken relative to (1 - k).
    Pure black (k == 1) has c = m = y = 0.
    """
    _validate_rgb(r, g, b)
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0

    k = 1.0 - max(rn, gn, bn)
    if k == 1.0:
        return CMYK(c=0.0, m=0.0, y=0.0, k=100.0)

    def _channel(v: float) -> float:
        # Rounding noise can land a hair outside [0, 1]
        return min(1.0, max(0.0, (1.0 - v - k) / (1.0 - k))) * 100.0

    return CMYK(c=_channel(rn), m=_channel(gn), y=_channel(bn), k=k * 100.0)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )
    return linear


# =============================================================================
# Linear RGB → XYZ → LAB
# =============================================================================

# Linear sRGB to CIE XYZ, D65 reference white
_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# D65 reference white (Xn, Yn, Zn)
_D65_WHITE = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)

# CIE constants: epsilon = 216/24389 rounded, kappa/116 = 7.787
_LAB_EPSILON = 0.008856
_LAB_SLOPE = 7.787
_LAB_OFFSET = 16.0 / 116.0


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (D65).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y = 1 for white)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE LAB relative to the D65 white.

    Uses the cube root above the 0.008856 threshold and the linear
    segment (7.787·t + 16/116) below it.

    Args:
        xyz: Array of shape (..., 3)

    Returns:
        Array of shape (..., 3) with (L, a, b)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    t = xyz / _D65_WHITE
    f = np.where(
        t > _LAB_EPSILON,
        np.cbrt(t),
        _LAB_SLOPE * t + _LAB_OFFSET,
    )
    fx = f[..., 0]
    fy = f[..., 1]
    fz = f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def srgb_uint8_to_lab(pixels: NDArray) -> NDArray[np.float64]:
    """
    Convert sRGB channels [0,255] to LAB.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with LAB values
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def rgb_to_lab(r: float, g: float, b: float) -> LAB:
    """
    Convert sRGB channels [0,255] to CIE LAB (D65).

    Full chain: sRGB → Linear RGB → XYZ → LAB
    """
    _validate_rgb(r, g, b)
    L, a, b_ = srgb_uint8_to_lab(np.array([r, g, b], dtype=np.float64))
    return LAB(L=float(L), a=float(a), b=float(b_))


# =============================================================================
# Color Construction
# =============================================================================


def color_from_rgb(r: int, g: int, b: int) -> Color:
    """
    Build a Color with every representation from integer channels.

    Raises:
        OutOfRangeComponent: If a channel is not an integer in [0, 255]
    """
    RGB(r, g, b)
    r, g, b = int(r), int(g), int(b)
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=RGB(r, g, b),
        hsl=rgb_to_hsl(r, g, b),
        cmyk=rgb_to_cmyk(r, g, b),
        lab=rgb_to_lab(r, g, b),
    )


def color_from_hex(hex_color: str) -> Optional[Color]:
    """
    Build a Color from a hex string.

    Returns:
        Color, or None when the input is malformed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return color_from_rgb(rgb.r, rgb.g, rgb.b)


def color_from_hsl(h: float, s: float, l: float) -> Color:
    """Build a Color from HSL (hue wraps, s/l validated)."""
    rgb = hsl_to_rgb(h, s, l)
    return color_from_rgb(rgb.r, rgb.g, rgb.b)


def coerce_color(value: Union[Color, str]) -> Color:
    """
    Accept a Color or a hex string where a color is required.

    Raises:
        InvalidColor: If ``value`` is neither a Color nor a well-formed hex string
    """
    if isinstance(value, Color):
        return value
    color = color_from_hex(value) if isinstance(value, str) else None
    if color is None:
        raise InvalidColor(value)
    return color
