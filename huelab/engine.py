# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Engine facade.

``ColorEngine`` composes the pure modules with one explicitly owned
``ColorCache``. Create as many engines as needed; they share no state.

Example::

    from huelab import ColorEngine

    engine = ColorEngine()
    recipe = engine.generate_recipe("#FDBCB4")
    result = engine.analyze_accessibility("#000000", "#FFFFFF")
    engine.cache_stats()   # {"conversions": 3, "palettes": 0, "analyses": 0}
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from huelab.color.analysis import analyze_color
from huelab.color.cache import CacheConfig, ColorCache, make_key
from huelab.color.colorspace import color_from_hex, normalize_hex
from huelab.color.distance import DistanceMetric, distance
from huelab.color.palette import Harmony, generate_palette
from huelab.errors import InvalidColor
from huelab.mixing.catalog import CRAFT_SMART_ACRYLICS, closest_match
from huelab.mixing.project import estimate_project_cost
from huelab.mixing.recipe import DEFAULT_CONFIG, RecipeConfig, generate_recipe
from huelab.schema.accessibility import (
    AccessibilityContext,
    AccessibilityResult,
    ColorAnalysis,
    DeficiencyKind,
    ImprovementSuggestions,
    PaletteReport,
    WCAGLevel,
)
from huelab.schema.color import Color
from huelab.schema.paint import PaintBrand, PaintColor, PaintRecipe, ProjectEstimate
from huelab.vision.accessibility import (
    DEFAULT_SCORING,
    ScoringConfig,
    analyze_accessibility,
    high_contrast_variant,
    palette_report,
    suggest_improvements,
)
from huelab.vision.simulate import simulate


logger = logging.getLogger(__name__)

ColorLike = Union[Color, str]


class ColorEngine:
    """
    Color science and paint recipe engine with its own caches.

    Args:
        cache: Cache to use; a new one is built from ``cache_config`` if omitted
        cache_config: Capacities for a new cache (ignored when ``cache`` is given)
        brand: Default catalog for matching and recipes
        recipe_config: Recipe synthesis constants
        scoring_config: Accessibility score weights
    """

    def __init__(
        self,
        cache: Optional[ColorCache] = None,
        cache_config: Optional[CacheConfig] = None,
        brand: PaintBrand = CRAFT_SMART_ACRYLICS,
        recipe_config: RecipeConfig = DEFAULT_CONFIG,
        scoring_config: ScoringConfig = DEFAULT_SCORING,
    ):
        self.cache = cache if cache is not None else ColorCache(cache_config)
        self.brand = brand
        self.recipe_config = recipe_config
        self.scoring_config = scoring_config

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert(self, hex_color: str) -> Color:
        """
        Convert a hex string to a Color, memoized in the "conversions" family.

        Raises:
            InvalidColor: If the hex string is malformed
        """
        canonical = normalize_hex(hex_color)
        if canonical is None:
            raise InvalidColor(hex_color)
        return self.cache.memoize(
            "conversions",
            make_key("hex2color", canonical),
            lambda: color_from_hex(canonical),
        )

    def try_convert(self, hex_color: str) -> Optional[Color]:
        """Like ``convert`` but returns None for malformed input."""
        try:
            return self.convert(hex_color)
        except InvalidColor:
            return None

    def _color(self, value: ColorLike) -> Color:
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            raise InvalidColor(value)
        return self.convert(value)

    def _brand(self, brand: Optional[PaintBrand]) -> PaintBrand:
        return brand if brand is not None else self.brand

    # -------------------------------------------------------------------------
    # Distance and matching
    # -------------------------------------------------------------------------

    def distance(
        self,
        a: ColorLike,
        b: ColorLike,
        metric: Union[DistanceMetric, str],
    ) -> float:
        return distance(self._color(a), self._color(b), metric)

    def closest_match(self, target: ColorLike, brand: Optional[PaintBrand] = None) -> PaintColor:
        return closest_match(self._color(target), self._brand(brand))

    def generate_recipe(self, target: ColorLike, brand: Optional[PaintBrand] = None) -> PaintRecipe:
        """Synthesize a recipe; the target is validated before any catalog scan."""
        return generate_recipe(self._color(target), self._brand(brand), self.recipe_config)

    def estimate_project_cost(
        self,
        recipes: Iterable[PaintRecipe],
        surface_area: float,
    ) -> ProjectEstimate:
        return estimate_project_cost(recipes, surface_area)

    # -------------------------------------------------------------------------
    # Vision and accessibility
    # -------------------------------------------------------------------------

    def simulate(self, color: ColorLike, kind: Union[DeficiencyKind, str]) -> Color:
        return simulate(self._color(color), DeficiencyKind(kind))

    def analyze_accessibility(
        self,
        foreground: ColorLike,
        background: ColorLike,
        context: Optional[AccessibilityContext] = None,
    ) -> AccessibilityResult:
        """Grade a pair. Results are never cached."""
        return analyze_accessibility(
            self._color(foreground),
            self._color(background),
            context,
            self.scoring_config,
        )

    def suggest_improvements(
        self,
        foreground: ColorLike,
        background: ColorLike,
        target_level: WCAGLevel = WCAGLevel.AA,
    ) -> ImprovementSuggestions:
        return suggest_improvements(
            self._color(foreground),
            self._color(background),
            target_level,
            self.scoring_config,
        )

    def high_contrast_variant(self, foreground: ColorLike, background: ColorLike) -> Color:
        return high_contrast_variant(self._color(foreground), self._color(background))

    def palette_report(
        self,
        colors: Iterable[ColorLike],
        context: Optional[AccessibilityContext] = None,
    ) -> PaletteReport:
        return palette_report(
            [self._color(c) for c in colors],
            context,
            self.scoring_config,
        )

    # -------------------------------------------------------------------------
    # Palettes and analysis
    # -------------------------------------------------------------------------

    def generate_palette(
        self,
        base_hue: float,
        harmony: Union[Harmony, str],
        saturation: float = 70.0,
        lightness: float = 50.0,
        count: Optional[int] = None,
    ) -> tuple[str, ...]:
        return generate_palette(base_hue, harmony, saturation, lightness, count, cache=self.cache)

    def analyze_color(self, hex_color: str) -> Optional[ColorAnalysis]:
        return analyze_color(hex_color, cache=self.cache)

    # -------------------------------------------------------------------------
    # Cache management
    # -------------------------------------------------------------------------

    def clear_caches(self) -> None:
        self.cache.clear()
        logger.debug("Engine caches cleared")

    def cache_stats(self) -> dict[str, int]:
        """Entry count per cache family."""
        return self.cache.stats()
