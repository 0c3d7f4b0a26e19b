# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors, paints, recipes and accessibility results.

All types in this module are immutable (frozen dataclasses).
"""

from huelab.schema.color import (
    CMYK,
    HSL,
    LAB,
    RGB,
    Color,
)
from huelab.schema.paint import (
    Difficulty,
    Opacity,
    PaintBrand,
    PaintColor,
    PaintIngredient,
    PaintRecipe,
    PaintRequirement,
    Permanence,
    ProjectEstimate,
)
from huelab.schema.accessibility import (
    AccessibilityContext,
    AccessibilityResult,
    ColorAnalysis,
    Complexity,
    ContrastResult,
    DeficiencyKind,
    DeficiencyResult,
    ImprovementSuggestions,
    Importance,
    PairReport,
    PaletteReport,
    TextSize,
    Usage,
    WCAGLevel,
)

__all__ = [
    # Color representations
    "Color",
    "RGB",
    "HSL",
    "CMYK",
    "LAB",
    # Paint catalog and recipes
    "Opacity",
    "Permanence",
    "Difficulty",
    "PaintColor",
    "PaintBrand",
    "PaintIngredient",
    "PaintRecipe",
    "PaintRequirement",
    "ProjectEstimate",
    # Accessibility
    "DeficiencyKind",
    "WCAGLevel",
    "TextSize",
    "Usage",
    "Importance",
    "Complexity",
    "AccessibilityContext",
    "ContrastResult",
    "DeficiencyResult",
    "AccessibilityResult",
    "ColorAnalysis",
    "ImprovementSuggestions",
    "PairReport",
    "PaletteReport",
]
