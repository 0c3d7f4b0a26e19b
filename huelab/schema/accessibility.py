# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Accessibility and vision-simulation types.

All results are derived values: they are recomputed on every call and
never cached across calls with a different context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from huelab.schema.color import Color


class DeficiencyKind(Enum):
    """
    Color-vision deficiency categories with a simulation matrix.

    Anomalies are reduced sensitivity in one cone type, -opias are absent
    sensitivity; achromatopsia collapses to luminance-weighted gray.
    """
    PROTANOMALY = "protanomaly"      # reduced red
    PROTANOPIA = "protanopia"        # no red
    DEUTERANOMALY = "deuteranomaly"  # reduced green
    DEUTERANOPIA = "deuteranopia"    # no green
    TRITANOMALY = "tritanomaly"      # reduced blue
    TRITANOPIA = "tritanopia"        # no blue
    ACHROMATOPSIA = "achromatopsia"  # no color
    ACHROMATOMALY = "achromatomaly"  # partial color
    BLUE_CONE = "blue_cone"          # blue cone monochromacy


class WCAGLevel(Enum):
    """WCAG conformance grade."""
    AAA = "AAA"
    AA = "AA"
    A = "A"
    FAIL = "FAIL"


class TextSize(Enum):
    NORMAL = "normal"
    LARGE = "large"


class Usage(Enum):
    TEXT = "text"
    UI = "ui"
    GRAPHIC = "graphic"


class Importance(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Complexity(Enum):
    """Cognitive load of a color pairing."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class AccessibilityContext:
    """Where and how a foreground/background pair is used."""
    text_size: TextSize = TextSize.NORMAL
    usage: Usage = Usage.TEXT
    importance: Importance = Importance.MEDIUM

    @property
    def required_ratio(self) -> float:
        """Minimum contrast for this context: 3:1 for large text and graphics, else 4.5:1."""
        if self.text_size is TextSize.LARGE or self.usage is Usage.GRAPHIC:
            return 3.0
        return 4.5

    @classmethod
    def from_dict(cls, data: dict) -> AccessibilityContext:
        return cls(
            text_size=TextSize(data.get("text_size", TextSize.NORMAL.value)),
            usage=Usage(data.get("usage", Usage.TEXT.value)),
            importance=Importance(data.get("importance", Importance.MEDIUM.value)),
        )


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """WCAG contrast between two colors."""
    ratio: float
    level: WCAGLevel
    passes_normal: bool
    passes_large: bool

    def __post_init__(self) -> None:
        if self.ratio < 1.0:
            raise ValueError(f"Contrast ratio must be >= 1, got {self.ratio}")

    def to_dict(self) -> dict:
        return {
            "ratio": self.ratio,
            "level": self.level.value,
            "passes_normal": self.passes_normal,
            "passes_large": self.passes_large,
        }


@dataclass(frozen=True, slots=True)
class DeficiencyResult:
    """Outcome of re-checking contrast under one simulated deficiency."""
    accessible: bool
    simulated_ratio: float
    issues: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "accessible": self.accessible,
            "simulated_ratio": self.simulated_ratio,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True, slots=True)
class AccessibilityResult:
    """
    Graded accessibility of a foreground/background pair.

    Attributes:
        contrast_ratio: WCAG contrast ratio, >= 1
        contrast_level: Grade of the raw contrast ratio
        wcag_level: Grade of the aggregate score
        per_deficiency: Result for every DeficiencyKind
        cognitive_readability: Heuristic readability, 0-100
        cognitive_complexity: Bucketed readability
        overall_score: Weighted aggregate, 0-100
        passed: True when overall_score >= 70
        contrast_passes: Contrast meets the context's requirement
        recommendations: Advice collected from every sub-analysis
    """
    contrast_ratio: float
    contrast_level: WCAGLevel
    wcag_level: WCAGLevel
    per_deficiency: dict[DeficiencyKind, DeficiencyResult]
    cognitive_readability: float
    cognitive_complexity: Complexity
    overall_score: float
    passed: bool
    contrast_passes: bool
    recommendations: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.contrast_ratio < 1.0:
            raise ValueError(f"Contrast ratio must be >= 1, got {self.contrast_ratio}")
        if not 0.0 <= self.overall_score <= 100.0:
            raise ValueError(f"Overall score must be 0-100, got {self.overall_score}")
        if not 0.0 <= self.cognitive_readability <= 100.0:
            raise ValueError(
                f"Cognitive readability must be 0-100, got {self.cognitive_readability}"
            )

    @property
    def colorblind_pass_rate(self) -> float:
        """Fraction of deficiency categories under which the pair stays accessible."""
        if not self.per_deficiency:
            return 0.0
        passed = sum(1 for r in self.per_deficiency.values() if r.accessible)
        return passed / len(self.per_deficiency)

    def to_dict(self) -> dict:
        return {
            "contrast_ratio": self.contrast_ratio,
            "contrast_level": self.contrast_level.value,
            "wcag_level": self.wcag_level.value,
            "per_deficiency": {
                kind.value: result.to_dict() for kind, result in self.per_deficiency.items()
            },
            "cognitive_readability": self.cognitive_readability,
            "cognitive_complexity": self.cognitive_complexity.value,
            "overall_score": self.overall_score,
            "passed": self.passed,
            "contrast_passes": self.contrast_passes,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class ColorAnalysis:
    """
    Summary of one color: temperature, luminance and contrast against white and black.

    Attributes:
        color: The analysed color
        temperature: Approximate correlated temperature in Kelvin (2000-10000)
        luminance: WCAG relative luminance (0-1)
        contrast_white: Contrast ratio against #FFFFFF
        contrast_black: Contrast ratio against #000000
        wcag_aa: Best of the two contrasts reaches 4.5:1
        wcag_aaa: Best of the two contrasts reaches 7:1
    """
    color: Color
    temperature: int
    luminance: float
    contrast_white: float
    contrast_black: float
    wcag_aa: bool
    wcag_aaa: bool

    def to_dict(self) -> dict:
        return {
            "color": self.color.to_dict(),
            "temperature": self.temperature,
            "luminance": self.luminance,
            "contrast": {
                "white": self.contrast_white,
                "black": self.contrast_black,
                "wcag_aa": self.wcag_aa,
                "wcag_aaa": self.wcag_aaa,
            },
        }


@dataclass(frozen=True, slots=True)
class ImprovementSuggestions:
    """Lightness-shifted alternatives for a pair that misses its contrast target."""
    foreground: tuple[str, ...] = ()
    background: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "foreground": list(self.foreground),
            "background": list(self.background),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class PairReport:
    """One ordered foreground/background pair from a palette."""
    foreground: Color
    background: Color
    result: AccessibilityResult

    @property
    def name(self) -> str:
        return f"{self.foreground.hex} on {self.background.hex}"

    def to_dict(self) -> dict:
        return {"name": self.name, **self.result.to_dict()}


@dataclass(frozen=True, slots=True)
class PaletteReport:
    """
    Accessibility of every ordered pair of distinct palette entries.

    Attributes:
        colors: The palette in input order
        pairs: One report per ordered pair (i, j) with i != j
        passed_aa: Pairs whose aggregate grade is AA or better
        passed_aaa: Pairs whose aggregate grade is AAA
        average_score: Mean overall score, 0 for fewer than two colors
    """
    colors: tuple[Color, ...]
    pairs: tuple[PairReport, ...]
    passed_aa: int
    passed_aaa: int
    average_score: float

    @property
    def total(self) -> int:
        return len(self.pairs)

    def to_dict(self) -> dict:
        return {
            "colors": [c.hex for c in self.colors],
            "pairs": [p.to_dict() for p in self.pairs],
            "summary": {
                "total": self.total,
                "passed_aa": self.passed_aa,
                "passed_aaa": self.passed_aaa,
                "average_score": self.average_score,
            },
        }
