# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Paint recipe synthesis.

Pipeline:
    1. Base selection: closest catalog paint (redmean), accuracy from distance
    2. Seed ratio for the base from accuracy and luminance agreement
    3. Luminance correction: white OR black, never both
    4. Hue correction: warm (red/yellow) or cool (blue) adjuster
    5. Normalization: corrections keep their ratios, the base takes the remainder
    6. Cost, amount labels, difficulty, instructions and tips

Synthesis is deterministic: the same target and catalog always yield the
same recipe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from huelab.color.colorspace import coerce_color
from huelab.color.contrast import relative_luminance, relative_luminance_rgb
from huelab.color.distance import MAX_RGB_DISTANCE
from huelab.mixing.catalog import closest_match_with_distance, find_paint_by_name
from huelab.schema.color import Color
from huelab.schema.paint import (
    Difficulty,
    PaintBrand,
    PaintColor,
    PaintIngredient,
    PaintRecipe,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class RecipeConfig:
    """
    Tunable constants for recipe synthesis.

    Ratios are percentages of the mixture; luminance values are WCAG
    relative luminance (0-1).

    Attributes:
        seed_ratio: Base ratio at zero accuracy
        accuracy_slope: Base ratio gained per accuracy point
        min_base_ratio / max_base_ratio: Clamp for the seed ratio
        similar_luminance: Below this luminance gap the seed gets a bonus
        similar_bonus: Bonus for a similar luminance
        distant_luminance: Above this luminance gap the seed gets a penalty
        distant_penalty: Penalty for a distant luminance
        luminance_threshold: Gap needed before white/black is added
        white_gain / white_cap: White ratio per unit of luminance gap, and its cap
        black_gain / black_cap: Black ratio per unit of luminance gap, and its cap
        hue_threshold: Warm/cool indicator gap needed before a hue adjuster is added
        hue_gain / hue_cap: Adjuster ratio per unit of indicator gap, and its cap
        batch_usage: Fraction of a mixed batch a typical project consumes
    """
    seed_ratio: float = 60.0
    accuracy_slope: float = 0.3
    min_base_ratio: float = 50.0
    max_base_ratio: float = 90.0
    similar_luminance: float = 0.1
    similar_bonus: float = 5.0
    distant_luminance: float = 0.3
    distant_penalty: float = 10.0
    luminance_threshold: float = 0.1
    white_gain: float = 50.0
    white_cap: float = 25.0
    black_gain: float = 30.0
    black_cap: float = 15.0
    hue_threshold: float = 0.1
    hue_gain: float = 20.0
    hue_cap: float = 15.0
    batch_usage: float = 0.4

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_base_ratio <= self.max_base_ratio <= 100.0:
            raise ValueError(
                f"Base ratio bounds must satisfy 0 <= min <= max <= 100, "
                f"got {self.min_base_ratio}/{self.max_base_ratio}"
            )
        if not 0.0 < self.batch_usage <= 1.0:
            raise ValueError(f"batch_usage must be in (0, 1], got {self.batch_usage}")
        for name in (
            "seed_ratio", "accuracy_slope", "similar_luminance", "similar_bonus",
            "distant_luminance", "distant_penalty", "luminance_threshold",
            "white_gain", "white_cap", "black_gain", "black_cap",
            "hue_threshold", "hue_gain", "hue_cap",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")


DEFAULT_CONFIG = RecipeConfig()


GENERAL_TIPS = (
    "Always mix more paint than you think you need",
    "Keep notes of your ratios for future reference",
    "Clean your brush between colors to avoid muddying",
)


class _Correction(NamedTuple):
    paint: PaintColor
    ratio: float
    instruction: str
    tip: Optional[str]


# =============================================================================
# Scalar Helpers
# =============================================================================


def match_accuracy(distance: float) -> float:
    """
    Accuracy (0-100, one decimal) of a match at the given redmean distance.

    Linear in distance, normalized by the largest unweighted RGB distance.
    """
    accuracy = max(0.0, min(100.0, 100.0 - (distance / MAX_RGB_DISTANCE) * 100.0))
    return round(accuracy, 1)


def amount_label(ratio: float) -> str:
    """Human-readable amount for a ratio in percent."""
    if ratio >= 50:
        return f"{int(ratio / 25 + 0.5)} parts"
    if ratio >= 20:
        return "1 part"
    if ratio >= 10:
        return "medium amount"
    if ratio >= 5:
        return "small amount"
    return "tiny amount"


def base_ratio(
    accuracy: float,
    base_luminance: float,
    target_luminance: float,
    config: RecipeConfig = DEFAULT_CONFIG,
) -> float:
    """Seed ratio for the base paint, before corrections."""
    ratio = config.seed_ratio + accuracy * config.accuracy_slope

    gap = abs(base_luminance - target_luminance)
    if gap > config.distant_luminance:
        ratio -= config.distant_penalty
    elif gap < config.similar_luminance:
        ratio += config.similar_bonus

    return max(config.min_base_ratio, min(config.max_base_ratio, ratio))


def warmth(color: Color) -> float:
    """Simplified warm/cool indicator: (r - b) / 255."""
    return (color.r - color.b) / 255.0


def recipe_difficulty(ratios: list[float]) -> Difficulty:
    """Difficulty from ingredient count, escalated by any very small share."""
    if len(ratios) > 3 or any(r < 5 for r in ratios):
        return Difficulty.ADVANCED
    if len(ratios) == 3:
        return Difficulty.INTERMEDIATE
    return Difficulty.BEGINNER


def ingredient_cost(paint: PaintColor, ratio: float, config: RecipeConfig = DEFAULT_CONFIG) -> float:
    """Cost of the paint a project consumes for one ingredient."""
    return paint.price * (ratio / 100.0) * config.batch_usage


# =============================================================================
# Corrections
# =============================================================================


def _luminance_correction(
    brand: PaintBrand,
    base: PaintColor,
    base_luminance: float,
    target_luminance: float,
    config: RecipeConfig,
) -> Optional[_Correction]:
    gap = target_luminance - base_luminance

    if gap > config.luminance_threshold:
        white = find_paint_by_name(brand, "White", exclude={base.id})
        if white is None:
            logger.debug("No white available to lighten %s in %s", base.id, brand.id)
            return None
        return _Correction(
            paint=white,
            ratio=min(config.white_cap, gap * config.white_gain),
            instruction="Add white gradually to lighten the base color",
            tip="White can make colors appear cooler - add a tiny amount of warm color if needed",
        )

    if gap < -config.luminance_threshold:
        black = find_paint_by_name(brand, "Black", exclude={base.id})
        if black is None:
            logger.debug("No black available to darken %s in %s", base.id, brand.id)
            return None
        return _Correction(
            paint=black,
            ratio=min(config.black_cap, -gap * config.black_gain),
            instruction="Add black very sparingly to darken",
            tip="Black can deaden colors - consider using a dark complementary color instead",
        )

    return None


def _hue_correction(
    brand: PaintBrand,
    base: PaintColor,
    target: Color,
    used: set[str],
    config: RecipeConfig,
) -> Optional[_Correction]:
    gap = warmth(target) - (base.rgb.r - base.rgb.b) / 255.0
    if abs(gap) < config.hue_threshold:
        return None

    skip = used | {base.id}
    if gap > 0:
        adjuster = find_paint_by_name(brand, "Red", "Yellow", exclude=skip)
    else:
        adjuster = find_paint_by_name(brand, "Blue", exclude=skip)

    if adjuster is None:
        logger.debug(
            "No %s adjuster available for %s in %s",
            "warm" if gap > 0 else "cool", base.id, brand.id,
        )
        return None

    return _Correction(
        paint=adjuster,
        ratio=min(config.hue_cap, abs(gap) * config.hue_gain),
        instruction=f"Add {adjuster.name.lower()} to adjust hue",
        tip=None,
    )


def _normalize(seed: float, corrections: list[float]) -> tuple[float, list[float]]:
    """
    Take corrections out of the mixture and give the base the remainder.

    Corrections keep their capped ratios. When together they exceed the
    seed they are scaled down to fit inside it. Ratios are rounded to one
    decimal and the base absorbs the rounding residual, so the mixture
    sums to 100.
    """
    taken = sum(corrections)
    if taken > seed:
        scale = seed / taken if taken > 0 else 0.0
        corrections = [c * scale for c in corrections]

    rounded = [round(c, 1) for c in corrections]
    base_final = round(100.0 - sum(rounded), 1)
    return max(0.0, base_final), rounded


# =============================================================================
# Synthesis
# =============================================================================


def generate_recipe(
    target: Union[Color, str],
    brand: PaintBrand,
    config: RecipeConfig = DEFAULT_CONFIG,
) -> PaintRecipe:
    """
    Synthesize a mixing recipe for ``target`` from the paints in ``brand``.

    Args:
        target: Target color, or a hex string
        brand: Catalog to mix from
        config: Synthesis constants

    Returns:
        PaintRecipe with base-first ingredients whose ratios sum to 100

    Raises:
        InvalidColor: If ``target`` is a malformed hex string
        EmptyCatalog: If ``brand`` has no paints
    """
    target = coerce_color(target)

    base, dist = closest_match_with_distance(target, brand)
    accuracy = match_accuracy(dist)

    base_luminance = relative_luminance_rgb(base.rgb)
    target_luminance = relative_luminance(target)
    seed = base_ratio(accuracy, base_luminance, target_luminance, config)

    logger.debug(
        "Recipe for %s: base %s, accuracy %.1f, seed ratio %.1f",
        target.hex, base.id, accuracy, seed,
    )

    corrections: list[_Correction] = []
    lum = _luminance_correction(brand, base, base_luminance, target_luminance, config)
    if lum is not None:
        corrections.append(lum)
    hue = _hue_correction(brand, base, target, {c.paint.id for c in corrections}, config)
    if hue is not None:
        corrections.append(hue)

    base_final, correction_ratios = _normalize(seed, [c.ratio for c in corrections])

    ingredients = [PaintIngredient(base, base_final, amount_label(base_final))]
    for correction, ratio in zip(corrections, correction_ratios):
        ingredients.append(PaintIngredient(correction.paint, ratio, amount_label(ratio)))

    total_cost = round(sum(ingredient_cost(i.paint, i.ratio, config) for i in ingredients), 2)

    instructions = [f"Start with {base.name.lower()} as your base color"]
    instructions.extend(c.instruction for c in corrections)
    instructions.append("Mix thoroughly between each addition")
    instructions.append("Test the color on a small area before applying")

    tips = [c.tip for c in corrections if c.tip]
    tips.extend(GENERAL_TIPS)

    return PaintRecipe(
        target_color=target,
        target_name=f"Custom Color {target.hex}",
        ingredients=tuple(ingredients),
        total_cost=total_cost,
        mixing_instructions=tuple(instructions),
        tips=tuple(tips),
        difficulty=recipe_difficulty([i.ratio for i in ingredients]),
        accuracy=accuracy,
        seed_ratio=seed,
    )

