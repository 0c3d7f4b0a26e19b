# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Color-vision deficiency simulation and accessibility scoring."""

from huelab.vision.simulate import (
    DEFICIENCY_MATRICES,
    simulate,
    simulate_all,
    simulate_rgb_array,
)
from huelab.vision.accessibility import (
    ScoringConfig,
    analyze_accessibility,
    analyze_contrast,
    analyze_deficiencies,
    contrast_level,
    contrast_ratio,
    high_contrast_variant,
    palette_report,
    relative_luminance,
    suggest_improvements,
)

__all__ = [
    # Simulation
    "DEFICIENCY_MATRICES",
    "simulate",
    "simulate_all",
    "simulate_rgb_array",
    # Scoring
    "ScoringConfig",
    "relative_luminance",
    "contrast_ratio",
    "contrast_level",
    "analyze_contrast",
    "analyze_deficiencies",
    "analyze_accessibility",
    "suggest_improvements",
    "high_contrast_variant",
    "palette_report",
]
