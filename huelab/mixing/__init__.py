# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Paint matching and recipe synthesis.

Catalog search runs under the redmean metric; recipes start from the
closest paint and add at most one luminance and one hue correction.
"""

from huelab.mixing.catalog import (
    CRAFT_SMART_ACRYLICS,
    PAINT_BRANDS,
    closest_match,
    closest_match_with_distance,
    find_paint_by_name,
    get_brand,
)
from huelab.mixing.recipe import (
    RecipeConfig,
    amount_label,
    base_ratio,
    generate_recipe,
    match_accuracy,
    recipe_difficulty,
)
from huelab.mixing.project import (
    common_recipes,
    estimate_project_cost,
)

__all__ = [
    # Catalog
    "CRAFT_SMART_ACRYLICS",
    "PAINT_BRANDS",
    "get_brand",
    "find_paint_by_name",
    "closest_match",
    "closest_match_with_distance",
    # Recipes
    "RecipeConfig",
    "generate_recipe",
    "match_accuracy",
    "amount_label",
    "base_ratio",
    "recipe_difficulty",
    # Projects
    "common_recipes",
    "estimate_project_cost",
]
