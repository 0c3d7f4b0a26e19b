# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Huelab -- color science and paint recipe engine.

Converts between color representations, measures perceptual distance,
matches colors against paint catalogs, synthesizes mixing recipes and
scores foreground/background pairs for accessibility.

Quick start::

    from huelab import ColorEngine

    engine = ColorEngine()
    color = engine.convert("#3498db")
    engine.generate_recipe(color).ingredients
    engine.analyze_accessibility("#000000", "#ffffff").wcag_level
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from huelab.engine import ColorEngine
from huelab.errors import EmptyCatalog, HuelabError, InvalidColor, OutOfRangeComponent
from huelab.color import (
    CacheConfig,
    ColorCache,
    DistanceMetric,
    Harmony,
    color_from_hex,
    distance,
)
from huelab.mixing import CRAFT_SMART_ACRYLICS, RecipeConfig, closest_match, generate_recipe
from huelab.vision import ScoringConfig, analyze_accessibility, simulate
from huelab.schema import (
    AccessibilityContext,
    AccessibilityResult,
    Color,
    DeficiencyKind,
    PaintBrand,
    PaintColor,
    PaintRecipe,
    WCAGLevel,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "ColorEngine",
    "color_from_hex",
    "distance",
    "closest_match",
    "generate_recipe",
    "simulate",
    "analyze_accessibility",
    # Configuration
    "CacheConfig",
    "ColorCache",
    "RecipeConfig",
    "ScoringConfig",
    # Types (commonly needed)
    "Color",
    "PaintColor",
    "PaintBrand",
    "PaintRecipe",
    "DeficiencyKind",
    "DistanceMetric",
    "Harmony",
    "WCAGLevel",
    "AccessibilityContext",
    "AccessibilityResult",
    "CRAFT_SMART_ACRYLICS",
    # Errors
    "HuelabError",
    "InvalidColor",
    "OutOfRangeComponent",
    "EmptyCatalog",
    # Version
    "__version__",
]
