# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Error types raised by the color engine.

Malformed hex strings are not errors at the conversion layer: the
low-level converters return ``None`` so callers can branch cheaply.
Everything here is a hard failure.
"""

from __future__ import annotations


class HuelabError(Exception):
    """Base class for all engine errors."""


class OutOfRangeComponent(HuelabError, ValueError):
    """A color component passed directly is outside its valid bounds.

    Components are never clamped silently.
    """

    def __init__(self, name: str, value: object, low: float, high: float) -> None:
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{name} must be in [{low}, {high}], got {value!r}")


class InvalidColor(HuelabError, ValueError):
    """A color input could not be interpreted where a color is required."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid color: {value!r}")


class EmptyCatalog(HuelabError, ValueError):
    """Matching was attempted against a paint brand with no paints."""

    def __init__(self, brand_id: str) -> None:
        self.brand_id = brand_id
        super().__init__(f"Paint brand '{brand_id}' has no paints to match against")
