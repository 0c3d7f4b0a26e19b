# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Color value types.

A ``Color`` carries one physical color in every representation the engine
works with. All representations are derived from the same sRGB triple at
construction time and the value is never mutated afterwards.

Component ranges:
- RGB: integers 0-255
- HSL: h in [0, 360), s and l in [0, 100]
- CMYK: c, m, y, k in [0, 100]
- LAB (D65): L in [0, 100], a/b roughly [-128, 127]
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import Optional

from huelab.errors import InvalidColor, OutOfRangeComponent


# =============================================================================
# Validation Helpers
# =============================================================================

HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


def check_component(name: str, value: float, low: float, high: float) -> None:
    """Raise OutOfRangeComponent unless ``low <= value <= high``.

    NaN fails the comparison and is rejected as well.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise OutOfRangeComponent(name, value, low, high)
    if not low <= value <= high:
        raise OutOfRangeComponent(name, value, low, high)


# =============================================================================
# Representation Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """An sRGB triple with integer channels in [0, 255]."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise OutOfRangeComponent(name, value, 0, 255)
            check_component(name, value, 0, 255)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSL:
    """Hue in degrees [0, 360), saturation and lightness in percent."""
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.h < 360.0:
            raise OutOfRangeComponent("h", self.h, 0, 360)
        check_component("s", self.s, 0, 100)
        check_component("l", self.l, 0, 100)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True, slots=True)
class CMYK:
    """Subtractive components in percent."""
    c: float
    m: float
    y: float
    k: float

    def __post_init__(self) -> None:
        for name in ("c", "m", "y", "k"):
            check_component(name, getattr(self, name), 0, 100)

    def to_dict(self) -> dict:
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}


@dataclass(frozen=True, slots=True)
class LAB:
    """
    CIE L*a*b* under the D65 white point.

    Not range-checked: a and b have no hard bounds, and L can exceed 100
    by floating point noise for pure white.
    """
    L: float
    a: float
    b: float

    def to_dict(self) -> dict:
        return {"L": self.L, "a": self.a, "b": self.b}


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An immutable color with all derived representations.

    Build instances through the constructors (``from_hex``, ``from_rgb``,
    ``from_hsl``) or ``huelab.color.colorspace.color_from_hex``; they
    compute every representation from one sRGB triple so the fields always
    agree within rounding.

    Attributes:
        hex: Canonical uppercase hex string like "#3498DB"
        rgb: Integer sRGB channels
        hsl: Hue/saturation/lightness
        cmyk: Subtractive components
        lab: CIE LAB (D65)
    """
    hex: str
    rgb: RGB
    hsl: HSL
    cmyk: CMYK
    lab: LAB

    def __post_init__(self) -> None:
        m = HEX_RE.fullmatch(self.hex)
        if m is None or not self.hex.startswith("#") or self.hex != self.hex.upper():
            raise ValueError(f"Color hex must be canonical '#RRGGBB', got {self.hex!r}")
        digits = m.group(1)
        parsed = (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        if parsed != self.rgb.as_tuple():
            raise ValueError(f"Color hex {self.hex} does not match rgb {self.rgb.as_tuple()}")

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """Build a Color from a hex string, raising InvalidColor if malformed."""
        from huelab.color.colorspace import color_from_hex
        color = color_from_hex(hex_color)
        if color is None:
            raise InvalidColor(hex_color)
        return color

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Build a Color from integer channels (OutOfRangeComponent if invalid)."""
        from huelab.color.colorspace import color_from_rgb
        return color_from_rgb(r, g, b)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        """Build a Color from HSL (hue wraps, s/l must be 0-100)."""
        from huelab.color.colorspace import hsl_to_rgb, color_from_rgb
        rgb = hsl_to_rgb(h, s, l)
        return color_from_rgb(rgb.r, rgb.g, rgb.b)

    @property
    def r(self) -> int:
        return self.rgb.r

    @property
    def g(self) -> int:
        return self.rgb.g

    @property
    def b(self) -> int:
        return self.rgb.b

    def to_dict(self) -> dict:
        """Serialize every representation to a plain dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "cmyk": self.cmyk.to_dict(),
            "lab": self.lab.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from a dictionary. Only ``hex`` is read; the rest is derived."""
        return cls.from_hex(data["hex"])


def parse_hex(hex_color: object) -> Optional[tuple[int, int, int]]:
    """Parse ``#RRGGBB`` / ``RRGGBB`` (any case) into a channel tuple, or None."""
    if not isinstance(hex_color, str):
        return None
    m = HEX_RE.fullmatch(hex_color)
    if m is None:
        return None
    digits = m.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
