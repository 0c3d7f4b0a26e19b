# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Harmony palette generation.

A palette is a tuple of canonical hex strings sharing one saturation and
lightness, with hues placed around the wheel by a harmony rule. The base
hue is always the first entry except for analogous palettes, which are
ordered around the base.

Fixed-size harmonies ignore ``count``; golden, fibonacci and monochromatic
palettes honor it. Generation is deterministic.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from huelab.color.cache import ColorCache, make_key
from huelab.color.colorspace import hsl_to_hex


GOLDEN_ANGLE = 137.508
FIBONACCI = (1, 1, 2, 3, 5, 8, 13, 21, 34, 55)
FIBONACCI_STEP = 15.0


class Harmony(Enum):
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SQUARE = "square"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"
    PENTADIC = "pentadic"
    HEXADIC = "hexadic"
    HEPTADIC = "heptadic"
    OCTADIC = "octadic"
    GOLDEN = "golden"
    FIBONACCI = "fibonacci"
    MONOCHROMATIC = "monochromatic"


# Hue offsets for fixed-size harmonies
_OFFSETS: dict[Harmony, tuple[float, ...]] = {
    Harmony.COMPLEMENTARY: (0.0, 180.0),
    Harmony.TRIADIC: (0.0, 120.0, 240.0),
    Harmony.TETRADIC: (0.0, 90.0, 180.0, 270.0),
    Harmony.SQUARE: (0.0, 90.0, 180.0, 270.0),
    Harmony.ANALOGOUS: (-30.0, 0.0, 30.0),
    Harmony.SPLIT_COMPLEMENTARY: (0.0, 150.0, 210.0),
    Harmony.PENTADIC: tuple(i * 72.0 for i in range(5)),
    Harmony.HEXADIC: tuple(i * 60.0 for i in range(6)),
    Harmony.HEPTADIC: tuple(i * 51.43 for i in range(7)),
    Harmony.OCTADIC: tuple(i * 45.0 for i in range(8)),
}

_DEFAULT_COUNTS = {
    Harmony.GOLDEN: 5,
    Harmony.FIBONACCI: 8,
    Harmony.MONOCHROMATIC: 5,
}


def _hue_offsets(harmony: Harmony, count: int) -> tuple[float, ...]:
    if harmony in _OFFSETS:
        return _OFFSETS[harmony]
    if harmony is Harmony.GOLDEN:
        return tuple(GOLDEN_ANGLE * i for i in range(count))
    if harmony is Harmony.FIBONACCI:
        return tuple(FIBONACCI[i] * FIBONACCI_STEP for i in range(min(count, len(FIBONACCI))))
    return (0.0,) * count


def _monochromatic_lightness(count: int) -> list[float]:
    step = 80.0 / (count - 1) if count > 1 else 0.0
    return [max(10.0, min(90.0, 20.0 + step * i)) for i in range(count)]


def _build_palette(
    base_hue: float,
    harmony: Harmony,
    saturation: float,
    lightness: float,
    count: int,
) -> tuple[str, ...]:
    if harmony is Harmony.MONOCHROMATIC:
        return tuple(
            hsl_to_hex(base_hue, saturation, l) for l in _monochromatic_lightness(count)
        )
    return tuple(
        hsl_to_hex((base_hue + offset) % 360.0, saturation, lightness)
        for offset in _hue_offsets(harmony, count)
    )


def generate_palette(
    base_hue: float,
    harmony: Union[Harmony, str],
    saturation: float = 70.0,
    lightness: float = 50.0,
    count: Optional[int] = None,
    cache: Optional[ColorCache] = None,
) -> tuple[str, ...]:
    """
    Generate a harmony palette around a base hue.

    Args:
        base_hue: Base hue in degrees; wraps into [0, 360)
        harmony: Harmony rule or its string value
        saturation: Saturation for every entry (0-100)
        lightness: Lightness for every entry (0-100); ignored by monochromatic
        count: Entry count for golden (default 5), fibonacci (default 8,
            at most 10) and monochromatic (default 5)
        cache: Optional cache; results go in the "palettes" family

    Returns:
        Tuple of canonical hex strings

    Raises:
        ValueError: Unknown harmony or count < 1
        OutOfRangeComponent: Saturation/lightness outside 0-100
    """
    harmony = Harmony(harmony)
    if count is None:
        count = _DEFAULT_COUNTS.get(harmony, 0)
    elif harmony in _DEFAULT_COUNTS and count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    if cache is None:
        return _build_palette(base_hue, harmony, saturation, lightness, count)

    key = make_key("palette", base_hue, harmony, saturation, lightness, count)
    return cache.memoize(
        "palettes",
        key,
        lambda: _build_palette(base_hue, harmony, saturation, lightness, count),
    )
