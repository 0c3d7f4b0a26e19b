# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
WCAG relative luminance and contrast ratio.

Contrast = (L_lighter + 0.05) / (L_darker + 0.05). The 0.05 flare term on
both sides keeps the ratio finite for pure black, so black on white is
exactly 21:1.
"""

from __future__ import annotations

import numpy as np

from huelab.schema.color import RGB, Color
from huelab.schema.accessibility import ContrastResult, WCAGLevel
from huelab.color.colorspace import srgb_to_linear


# Rec. 709 luminance weights
_WEIGHT_R = 0.2126
_WEIGHT_G = 0.7152
_WEIGHT_B = 0.0722

WCAG_FLARE = 0.05

AAA_RATIO = 7.0
AA_RATIO = 4.5
A_RATIO = 3.0


def relative_luminance_rgb(rgb: RGB) -> float:
    """Relative luminance (0-1) of an sRGB triple."""
    srgb = np.array(rgb.as_tuple(), dtype=np.float64) / 255.0
    r, g, b = srgb_to_linear(srgb)
    # Summed in channel order; white comes out at exactly 1.0
    return float(_WEIGHT_R * r + _WEIGHT_G * g + _WEIGHT_B * b)


def relative_luminance(color: Color) -> float:
    """Relative luminance (0-1) of a color."""
    return relative_luminance_rgb(color.rgb)


def contrast_ratio_from_luminance(lum1: float, lum2: float) -> float:
    """Contrast ratio from two relative luminances (order does not matter)."""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + WCAG_FLARE) / (darker + WCAG_FLARE)


def contrast_ratio(a: Color, b: Color) -> float:
    """
    WCAG contrast ratio between two colors.

    Returns:
        Ratio in [1, 21]
    """
    return contrast_ratio_from_luminance(relative_luminance(a), relative_luminance(b))


def contrast_level(ratio: float) -> WCAGLevel:
    """Grade a contrast ratio: AAA >= 7, AA >= 4.5, A >= 3, else FAIL."""
    if ratio >= AAA_RATIO:
        return WCAGLevel.AAA
    if ratio >= AA_RATIO:
        return WCAGLevel.AA
    if ratio >= A_RATIO:
        return WCAGLevel.A
    return WCAGLevel.FAIL


def analyze_contrast(foreground: Color, background: Color) -> ContrastResult:
    """Contrast ratio with its grade and normal/large-text pass flags."""
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=ratio,
        level=contrast_level(ratio),
        passes_normal=ratio >= AA_RATIO,
        passes_large=ratio >= A_RATIO,
    )
