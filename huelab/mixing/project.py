# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Curated reference recipes and paint shopping estimates for a project."""

from __future__ import annotations

import math
from typing import Iterable

from huelab.mixing.catalog import CRAFT_SMART_ACRYLICS
from huelab.mixing.recipe import amount_label
from huelab.schema.color import Color
from huelab.schema.paint import (
    Difficulty,
    PaintIngredient,
    PaintRecipe,
    PaintRequirement,
    ProjectEstimate,
)


# Tubes of paint consumed per square foot of surface
TUBES_PER_SQUARE_FOOT = 0.1

LARGE_TUBE_THRESHOLD = 50.0
PAINT_SET_THRESHOLD = 10


def _ingredients(*pairs: tuple[str, float]) -> tuple[PaintIngredient, ...]:
    return tuple(
        PaintIngredient(CRAFT_SMART_ACRYLICS.get(paint_id), ratio, amount_label(ratio))
        for paint_id, ratio in pairs
    )


def common_recipes() -> dict[str, PaintRecipe]:
    """Hand-tuned recipes for frequently requested colors, keyed by slug."""
    return {
        "skin-tone-light": PaintRecipe(
            target_color=Color.from_hex("#FDBCB4"),
            target_name="Light Skin Tone",
            ingredients=_ingredients(
                ("titanium-white", 60.0),
                ("cadmium-red", 20.0),
                ("cadmium-yellow", 15.0),
                ("burnt-sienna", 5.0),
            ),
            total_cost=2.50,
            mixing_instructions=(
                "Start with white as your base",
                "Add red gradually until you get a pink tone",
                "Add yellow to warm the mixture",
                "Add tiny amount of burnt sienna for depth",
            ),
            tips=(
                "Skin tones vary greatly - this is just a starting point",
                "Observe real skin in different lighting conditions",
                "Add more yellow for warmer tones, more red for cooler tones",
            ),
            difficulty=Difficulty.INTERMEDIATE,
            accuracy=85.0,
        ),
        "ocean-blue": PaintRecipe(
            target_color=Color.from_hex("#006994"),
            target_name="Ocean Blue",
            ingredients=_ingredients(
                ("ultramarine-blue", 70.0),
                ("phthalo-blue", 20.0),
                ("titanium-white", 10.0),
            ),
            total_cost=2.25,
            mixing_instructions=(
                "Start with ultramarine blue as your base",
                "Add phthalo blue for depth and intensity",
                "Add white sparingly to adjust lightness",
            ),
            tips=(
                "Phthalo blue is very strong - use sparingly",
                "For tropical waters, add more white and a tiny bit of green",
                "For deeper ocean, add a tiny amount of black instead of white",
            ),
            difficulty=Difficulty.BEGINNER,
            accuracy=92.0,
        ),
    }


def estimate_project_cost(recipes: Iterable[PaintRecipe], surface_area: float) -> ProjectEstimate:
    """
    Estimate the paint to buy for painting ``surface_area`` square feet with each recipe.

    Consumption per ingredient is 0.1 tubes per square foot times its
    ratio. Paints shared across recipes are pooled, then rounded up to
    whole tubes for costing.

    Args:
        recipes: Recipes used in the project
        surface_area: Area in square feet covered by each recipe, >= 0

    Returns:
        ProjectEstimate with per-paint requirements in first-use order
    """
    if surface_area < 0:
        raise ValueError(f"Surface area must be >= 0, got {surface_area}")

    base_consumption = surface_area * TUBES_PER_SQUARE_FOOT
    tubes: dict[str, float] = {}
    paints = {}

    for recipe in recipes:
        for ingredient in recipe.ingredients:
            paint = ingredient.paint
            paints.setdefault(paint.id, paint)
            tubes[paint.id] = tubes.get(paint.id, 0.0) + base_consumption * (ingredient.ratio / 100.0)

    requirements = tuple(
        PaintRequirement(
            paint=paints[paint_id],
            tubes=amount,
            cost=math.ceil(amount) * paints[paint_id].price,
        )
        for paint_id, amount in tubes.items()
    )
    total_cost = round(sum(r.cost for r in requirements), 2)

    recommendations = []
    if total_cost > LARGE_TUBE_THRESHOLD:
        recommendations.append("Consider buying larger tubes for better value")
    if len(requirements) > PAINT_SET_THRESHOLD:
        recommendations.append("You might want to consider a paint set")
    recommendations.append("Always buy 10-20% more paint than calculated")

    return ProjectEstimate(
        total_cost=total_cost,
        requirements=requirements,
        recommendations=tuple(recommendations),
    )
