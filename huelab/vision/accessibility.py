# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Accessibility scoring for foreground/background color pairs.

The overall score is a weighted sum:
    contrast        40  (full at >= 7:1, partial at >= 4.5:1, minimal otherwise)
    color blindness 30  (fraction of deficiency kinds still at >= 4.5:1)
    cognitive       20  (readability heuristic from saturation/lightness gaps)
    motor/visual    10  (assumed compliant; no layout input is available)

Cognitive readability is a heuristic, not a perceptual model. Results are
recomputed on every call.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Union

import numpy as np

from huelab.color.colorspace import coerce_color, color_from_rgb, hsl_to_hex
from huelab.color.contrast import (
    AA_RATIO,
    AAA_RATIO,
    A_RATIO,
    analyze_contrast,
    contrast_level,
    contrast_ratio,
    relative_luminance,
)
from huelab.schema.accessibility import (
    AccessibilityContext,
    AccessibilityResult,
    Complexity,
    DeficiencyKind,
    DeficiencyResult,
    ImprovementSuggestions,
    PairReport,
    PaletteReport,
    WCAGLevel,
)
from huelab.schema.color import Color
from huelab.vision.simulate import simulate


logger = logging.getLogger(__name__)

ColorLike = Union[Color, str]

__all__ = [
    "ScoringConfig",
    "relative_luminance",
    "contrast_ratio",
    "contrast_level",
    "analyze_contrast",
    "analyze_deficiencies",
    "cognitive_readability",
    "complexity_for",
    "overall_score",
    "score_level",
    "analyze_accessibility",
    "suggest_improvements",
    "high_contrast_variant",
    "palette_report",
]


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """
    Weights and thresholds for the overall accessibility score.

    Attributes:
        contrast_weight: Points for the contrast component
        colorblind_weight: Points scaled by the deficiency pass rate
        cognitive_weight: Points scaled by readability / 100
        motor_visual_weight: Points granted for motor/visual compliance
        contrast_full / contrast_partial / contrast_minimal: Contrast credit
            at >= 7:1, >= 4.5:1 and below
        aaa_score / aa_score / a_score: Score cutoffs for each grade
        pass_score: Minimum score for ``passed``
        simulated_ratio: Contrast a simulated pair needs to stay accessible
    """
    contrast_weight: float = 40.0
    colorblind_weight: float = 30.0
    cognitive_weight: float = 20.0
    motor_visual_weight: float = 10.0
    contrast_full: float = 40.0
    contrast_partial: float = 30.0
    contrast_minimal: float = 10.0
    aaa_score: float = 90.0
    aa_score: float = 70.0
    a_score: float = 50.0
    pass_score: float = 70.0
    simulated_ratio: float = AA_RATIO

    @property
    def max_score(self) -> float:
        return (
            self.contrast_weight
            + self.colorblind_weight
            + self.cognitive_weight
            + self.motor_visual_weight
        )


DEFAULT_SCORING = ScoringConfig()


# Target contrast per requested grade; FAIL falls back to AA
_TARGET_RATIOS = {
    WCAGLevel.AAA: AAA_RATIO,
    WCAGLevel.AA: AA_RATIO,
    WCAGLevel.A: A_RATIO,
    WCAGLevel.FAIL: AA_RATIO,
}


# =============================================================================
# Sub-analyses
# =============================================================================


def analyze_deficiencies(
    foreground: Color,
    background: Color,
    config: ScoringConfig = DEFAULT_SCORING,
) -> dict[DeficiencyKind, DeficiencyResult]:
    """Re-check contrast with both colors simulated under every deficiency kind."""
    results = {}
    for kind in DeficiencyKind:
        ratio = contrast_ratio(simulate(foreground, kind), simulate(background, kind))
        accessible = ratio >= config.simulated_ratio
        results[kind] = DeficiencyResult(
            accessible=accessible,
            simulated_ratio=ratio,
            issues=() if accessible else ("Insufficient contrast for this color blindness type",),
            suggestions=() if accessible else ("Increase contrast ratio", "Use patterns or textures"),
        )
    return results


def cognitive_readability(foreground: Color, background: Color) -> float:
    """Mean of the saturation and lightness gaps, capped at 100."""
    saturation_gap = abs(foreground.hsl.s - background.hsl.s)
    lightness_gap = abs(foreground.hsl.l - background.hsl.l)
    return min(100.0, (saturation_gap + lightness_gap) / 2.0)


def complexity_for(readability: float) -> Complexity:
    if readability > 70:
        return Complexity.LOW
    if readability > 40:
        return Complexity.MEDIUM
    return Complexity.HIGH


def _contrast_credit(ratio: float, config: ScoringConfig) -> float:
    if ratio >= AAA_RATIO:
        credit = config.contrast_full
    elif ratio >= AA_RATIO:
        credit = config.contrast_partial
    else:
        credit = config.contrast_minimal
    return credit * config.contrast_weight / config.contrast_full


def overall_score(
    ratio: float,
    pass_rate: float,
    readability: float,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Weighted aggregate normalized to 0-100, rounded half up to a whole number."""
    score = (
        _contrast_credit(ratio, config)
        + pass_rate * config.colorblind_weight
        + readability / 100.0 * config.cognitive_weight
        + config.motor_visual_weight
    )
    normalized = score / config.max_score * 100.0
    return float(max(0, min(100, math.floor(normalized + 0.5))))


def score_level(score: float, config: ScoringConfig = DEFAULT_SCORING) -> WCAGLevel:
    """Grade an aggregate score."""
    if score >= config.aaa_score:
        return WCAGLevel.AAA
    if score >= config.aa_score:
        return WCAGLevel.AA
    if score >= config.a_score:
        return WCAGLevel.A
    return WCAGLevel.FAIL


# =============================================================================
# Full Analysis
# =============================================================================


def analyze_accessibility(
    foreground: ColorLike,
    background: ColorLike,
    context: Optional[AccessibilityContext] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> AccessibilityResult:
    """
    Grade a foreground/background pair.

    Args:
        foreground: Text or graphic color (Color or hex)
        background: Surface color (Color or hex)
        context: Usage context; decides the required contrast
        config: Score weights and thresholds

    Returns:
        AccessibilityResult

    Raises:
        InvalidColor: If either color is a malformed hex string
    """
    foreground = coerce_color(foreground)
    background = coerce_color(background)
    context = context or AccessibilityContext()

    ratio = contrast_ratio(foreground, background)
    per_deficiency = analyze_deficiencies(foreground, background, config)
    pass_rate = sum(1 for r in per_deficiency.values() if r.accessible) / len(per_deficiency)
    readability = cognitive_readability(foreground, background)
    complexity = complexity_for(readability)

    score = overall_score(ratio, pass_rate, readability, config)

    recommendations = []
    if ratio < context.required_ratio:
        recommendations.append(
            f"Increase contrast ratio from {ratio:.2f}:1 to at least {context.required_ratio}:1"
        )
    if pass_rate < 1.0:
        recommendations.extend((
            "Add patterns or textures to distinguish colors",
            "Use shape and position in addition to color",
        ))
    if complexity is Complexity.HIGH:
        recommendations.extend((
            "Simplify color scheme",
            "Reduce visual noise",
            "Use consistent color patterns",
        ))

    logger.debug(
        "Accessibility %s on %s: ratio %.2f, pass rate %.2f, readability %.1f, score %.0f",
        foreground.hex, background.hex, ratio, pass_rate, readability, score,
    )

    return AccessibilityResult(
        contrast_ratio=ratio,
        contrast_level=contrast_level(ratio),
        wcag_level=score_level(score, config),
        per_deficiency=per_deficiency,
        cognitive_readability=readability,
        cognitive_complexity=complexity,
        overall_score=score,
        passed=score >= config.pass_score,
        contrast_passes=ratio >= context.required_ratio,
        recommendations=tuple(recommendations),
    )


# =============================================================================
# Improvements
# =============================================================================


def _shift_lightness(color: Color, points: float) -> str:
    lightness = max(0.0, min(100.0, color.hsl.l + points))
    return hsl_to_hex(color.hsl.h, color.hsl.s, lightness)


def suggest_improvements(
    foreground: ColorLike,
    background: ColorLike,
    target_level: WCAGLevel = WCAGLevel.AA,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ImprovementSuggestions:
    """
    Suggest lightness-shifted colors for a pair below its target contrast.

    The lighter color of the pair is pushed lighter and the darker one
    darker, by 20 and 40 lightness points. Pairs already at the target
    get no color suggestions.
    """
    foreground = coerce_color(foreground)
    background = coerce_color(background)
    target_ratio = _TARGET_RATIOS[WCAGLevel(target_level)]
    ratio = contrast_ratio(foreground, background)

    fg_suggestions: tuple[str, ...] = ()
    bg_suggestions: tuple[str, ...] = ()
    recommendations = []

    if ratio < target_ratio:
        sign = 1.0 if relative_luminance(foreground) > relative_luminance(background) else -1.0
        fg_suggestions = tuple(_shift_lightness(foreground, sign * p) for p in (20.0, 40.0))
        bg_suggestions = tuple(_shift_lightness(background, -sign * p) for p in (20.0, 40.0))
        recommendations.extend((
            f"Increase contrast ratio from {ratio:.2f}:1 to at least {target_ratio}:1",
            "Consider using high contrast mode for better accessibility",
            "Test with actual users who have visual impairments",
        ))

    per_deficiency = analyze_deficiencies(foreground, background, config)
    if not all(r.accessible for r in per_deficiency.values()):
        recommendations.extend((
            "Add patterns or textures to distinguish colors",
            "Use shape and position in addition to color",
            "Provide alternative text descriptions",
        ))

    return ImprovementSuggestions(
        foreground=fg_suggestions,
        background=bg_suggestions,
        recommendations=tuple(recommendations),
    )


def high_contrast_variant(foreground: ColorLike, background: ColorLike) -> Color:
    """
    Push the foreground away from the background.

    Channels are scaled by 0.3 on light backgrounds (luminance > 0.5) and
    by 2.5 on dark ones, then rounded and clamped to [0, 255].
    """
    foreground = coerce_color(foreground)
    background = coerce_color(background)
    factor = 0.3 if relative_luminance(background) > 0.5 else 2.5
    channels = np.array(foreground.rgb.as_tuple(), dtype=np.float64) * factor
    r, g, b = (int(v) for v in np.clip(np.floor(channels + 0.5), 0, 255))
    return color_from_rgb(r, g, b)


# =============================================================================
# Palette Report
# =============================================================================


def palette_report(
    colors: Iterable[ColorLike],
    context: Optional[AccessibilityContext] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> PaletteReport:
    """Analyse every ordered pair of distinct entries in a palette."""
    palette = tuple(coerce_color(c) for c in colors)

    pairs = []
    for i, fg in enumerate(palette):
        for j, bg in enumerate(palette):
            if i != j:
                pairs.append(PairReport(fg, bg, analyze_accessibility(fg, bg, context, config)))

    passed_aa = sum(1 for p in pairs if p.result.wcag_level in (WCAGLevel.AA, WCAGLevel.AAA))
    passed_aaa = sum(1 for p in pairs if p.result.wcag_level is WCAGLevel.AAA)
    average = sum(p.result.overall_score for p in pairs) / len(pairs) if pairs else 0.0

    return PaletteReport(
        colors=palette,
        pairs=tuple(pairs),
        passed_aa=passed_aa,
        passed_aaa=passed_aaa,
        average_score=average,
    )
