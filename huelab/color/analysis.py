# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Single-color summary: temperature, luminance and contrast against white and black."""

from __future__ import annotations

from typing import Optional

from huelab.color.cache import ColorCache, make_key
from huelab.color.colorspace import color_from_hex, normalize_hex
from huelab.color.contrast import (
    AA_RATIO,
    AAA_RATIO,
    contrast_ratio_from_luminance,
    relative_luminance,
)
from huelab.schema.accessibility import ColorAnalysis
from huelab.schema.color import Color


def color_temperature(color: Color) -> int:
    """
    Rough correlated color temperature in Kelvin.

    Heuristic, not colorimetry: 6500 K shifted by the red/blue balance,
    clamped to [2000, 10000].
    """
    r = color.r / 255.0
    b = color.b / 255.0
    ratio = (r - b) / (r + b + 0.001)
    return max(2000, min(10000, round(6500 + ratio * 2000)))


def _analyze(color: Color) -> ColorAnalysis:
    luminance = relative_luminance(color)
    contrast_white = contrast_ratio_from_luminance(luminance, 1.0)
    contrast_black = contrast_ratio_from_luminance(luminance, 0.0)
    best = max(contrast_white, contrast_black)
    return ColorAnalysis(
        color=color,
        temperature=color_temperature(color),
        luminance=luminance,
        contrast_white=contrast_white,
        contrast_black=contrast_black,
        wcag_aa=best >= AA_RATIO,
        wcag_aaa=best >= AAA_RATIO,
    )


def analyze_color(hex_color: str, cache: Optional[ColorCache] = None) -> Optional[ColorAnalysis]:
    """
    Analyse one color given as hex.

    Returns:
        ColorAnalysis, or None when the hex is malformed
    """
    canonical = normalize_hex(hex_color)
    if canonical is None:
        return None
    if cache is None:
        return _analyze(color_from_hex(canonical))
    return cache.memoize(
        "analyses",
        make_key("analysis", canonical),
        lambda: _analyze(color_from_hex(canonical)),
    )
