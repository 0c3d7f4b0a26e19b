# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Color conversion, distance, contrast and caching.

Conversions are pure functions of their inputs; ``ColorCache`` memoizes
them without changing any result.
"""

from huelab.color.colorspace import (
    coerce_color,
    color_from_hex,
    color_from_hsl,
    color_from_rgb,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    srgb_to_linear,
    srgb_uint8_to_lab,
)
from huelab.color.cache import (
    CacheConfig,
    ColorCache,
    LruCache,
    make_key,
)
from huelab.color.distance import (
    MAX_RGB_DISTANCE,
    DistanceMetric,
    delta_e76,
    delta_e76_batch,
    distance,
    redmean,
    redmean_batch,
)
from huelab.color.contrast import (
    analyze_contrast,
    contrast_level,
    contrast_ratio,
    relative_luminance,
)
from huelab.color.palette import Harmony, generate_palette
from huelab.color.analysis import analyze_color, color_temperature

__all__ = [
    # Conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "rgb_to_cmyk",
    "rgb_to_lab",
    "srgb_to_linear",
    "srgb_uint8_to_lab",
    "color_from_hex",
    "color_from_rgb",
    "color_from_hsl",
    "coerce_color",
    # Caching
    "CacheConfig",
    "ColorCache",
    "LruCache",
    "make_key",
    # Distance
    "DistanceMetric",
    "MAX_RGB_DISTANCE",
    "redmean",
    "delta_e76",
    "distance",
    "redmean_batch",
    "delta_e76_batch",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "contrast_level",
    "analyze_contrast",
    # Palettes and analysis
    "Harmony",
    "generate_palette",
    "analyze_color",
    "color_temperature",
]
