# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Paint catalog and recipe types.

Catalog entries and recipes are immutable. A recipe is produced once per
synthesis call; annotations belong to the caller, not to the recipe.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from huelab.schema.color import RGB, Color, parse_hex


# =============================================================================
# Paint Properties
# =============================================================================


class Opacity(Enum):
    """How much a paint hides what is underneath."""
    TRANSPARENT = "transparent"
    SEMI_OPAQUE = "semi-opaque"
    OPAQUE = "opaque"


class Permanence(Enum):
    """Lightfastness rating."""
    FUGITIVE = "fugitive"
    MODERATELY_PERMANENT = "moderately-permanent"
    PERMANENT = "permanent"


class Difficulty(Enum):
    """How hard a recipe is to mix by hand."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# Sum of ingredient ratios must land within this distance of 100
RATIO_SUM_TOLERANCE = 0.5


# =============================================================================
# Catalog Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaintColor:
    """
    A single paint in a brand's catalog.

    Attributes:
        id: Stable identifier (e.g., "titanium-white")
        name: Display name; correction lookups match on it ("White", "Blue", ...)
        hex: Hex color of the paint as it comes from the tube
        rgb: Integer channels matching ``hex``
        price: Price per tube/bottle, >= 0
        opacity: Hiding power
        permanence: Lightfastness
        series: Price tier, positive integer
        brand: Optional brand display name
    """
    id: str
    name: str
    hex: str
    rgb: RGB
    price: float
    opacity: Opacity = Opacity.OPAQUE
    permanence: Permanence = Permanence.PERMANENT
    series: int = 1
    brand: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Paint id cannot be empty")
        parsed = parse_hex(self.hex)
        if parsed is None:
            raise ValueError(f"Paint '{self.id}' has malformed hex {self.hex!r}")
        if parsed != self.rgb.as_tuple():
            raise ValueError(
                f"Paint '{self.id}' hex {self.hex} does not match rgb {self.rgb.as_tuple()}"
            )
        if self.price < 0:
            raise ValueError(f"Price must be >= 0, got {self.price}")
        if isinstance(self.series, bool) or not isinstance(self.series, int) or self.series < 1:
            raise ValueError(f"Series must be a positive integer, got {self.series!r}")

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        hex: str,
        price: float,
        opacity: Opacity = Opacity.OPAQUE,
        permanence: Permanence = Permanence.PERMANENT,
        series: int = 1,
        brand: Optional[str] = None,
    ) -> PaintColor:
        """Build a paint deriving ``rgb`` from ``hex``."""
        parsed = parse_hex(hex)
        if parsed is None:
            raise ValueError(f"Paint '{id}' has malformed hex {hex!r}")
        return cls(
            id=id,
            name=name,
            hex=hex,
            rgb=RGB(*parsed),
            price=price,
            opacity=opacity,
            permanence=permanence,
            series=series,
            brand=brand,
        )

    @property
    def color(self) -> Color:
        """The paint's color with every derived representation."""
        return Color.from_rgb(self.rgb.r, self.rgb.g, self.rgb.b)

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "name": self.name,
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "price": self.price,
            "opacity": self.opacity.value,
            "permanence": self.permanence.value,
            "series": self.series,
        }
        if self.brand is not None:
            d["brand"] = self.brand
        return d

    @classmethod
    def from_dict(cls, data: dict) -> PaintColor:
        """Deserialize from dictionary. ``rgb`` is derived from ``hex`` when absent."""
        if "rgb" in data:
            rgb = RGB.from_dict(data["rgb"])
        else:
            parsed = parse_hex(data["hex"])
            if parsed is None:
                raise ValueError(f"Paint '{data.get('id')}' has malformed hex {data['hex']!r}")
            rgb = RGB(*parsed)
        return cls(
            id=data["id"],
            name=data["name"],
            hex=data["hex"],
            rgb=rgb,
            price=data.get("price", 0.0),
            opacity=Opacity(data.get("opacity", Opacity.OPAQUE.value)),
            permanence=Permanence(data.get("permanence", Permanence.PERMANENT.value)),
            series=data.get("series", 1),
            brand=data.get("brand"),
        )


@dataclass(frozen=True, slots=True)
class PaintBrand:
    """
    An ordered, read-only collection of paints used as a matching search space.

    An empty brand can be constructed (placeholder brands exist in the
    registry) but matching against it raises ``EmptyCatalog``.

    Attributes:
        id: Stable identifier
        name: Display name
        paints: Catalog entries in catalog order; order decides match ties
    """
    id: str
    name: str
    paints: tuple[PaintColor, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Brand id cannot be empty")
        ids = [p.id for p in self.paints]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Brand '{self.id}' has duplicate paint ids")

    def __len__(self) -> int:
        return len(self.paints)

    def __iter__(self):
        return iter(self.paints)

    @property
    def is_empty(self) -> bool:
        return not self.paints

    def get(self, paint_id: str) -> PaintColor:
        """Get a paint by id."""
        for paint in self.paints:
            if paint.id == paint_id:
                return paint
        raise KeyError(f"No paint with id '{paint_id}' in brand '{self.id}'")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "paints": [p.to_dict() for p in self.paints],
        }

    @classmethod
    def from_dict(cls, data: dict) -> PaintBrand:
        # Catalog files may name the list "colors"; accept both.
        entries = data.get("paints", data.get("colors", []))
        return cls(
            id=data["id"],
            name=data["name"],
            paints=tuple(PaintColor.from_dict(p) for p in entries),
        )

    @classmethod
    def from_json(cls, json_str: str) -> PaintBrand:
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# Recipe Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaintIngredient:
    """
    One paint in a recipe.

    Attributes:
        paint: The catalog entry
        ratio: Share of the mixture in percent (0-100)
        amount: Human-readable amount label ("3 parts", "small amount", ...)
    """
    paint: PaintColor
    ratio: float
    amount: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.ratio <= 100.0:
            raise ValueError(f"Ratio must be 0-100, got {self.ratio}")

    def to_dict(self) -> dict:
        return {"paint": self.paint.to_dict(), "ratio": self.ratio, "amount": self.amount}


@dataclass(frozen=True, slots=True)
class PaintRecipe:
    """
    A mixing recipe for a target color.

    Ingredients are ordered base-first and their ratios sum to 100.

    Attributes:
        target_color: The color being mixed
        target_name: Display name for the target
        ingredients: Ordered ingredients, base paint first
        total_cost: Estimated cost of the paint consumed, >= 0
        mixing_instructions: Ordered steps
        tips: Practical advice
        difficulty: beginner / intermediate / advanced
        accuracy: How close the base paint is to the target (0-100)
        seed_ratio: Base share chosen before corrections were taken out of
            it and the mixture was normalized (None for curated recipes)
    """
    target_color: Color
    target_name: str
    ingredients: tuple[PaintIngredient, ...]
    total_cost: float
    mixing_instructions: tuple[str, ...]
    tips: tuple[str, ...]
    difficulty: Difficulty
    accuracy: float
    seed_ratio: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.ingredients:
            raise ValueError("Recipe must have at least one ingredient")
        total = sum(i.ratio for i in self.ingredients)
        if abs(total - 100.0) > RATIO_SUM_TOLERANCE:
            raise ValueError(f"Ingredient ratios must sum to 100, got {total:.2f}")
        if self.total_cost < 0:
            raise ValueError(f"Total cost must be >= 0, got {self.total_cost}")
        if not 0.0 <= self.accuracy <= 100.0:
            raise ValueError(f"Accuracy must be 0-100, got {self.accuracy}")

    @property
    def base(self) -> PaintIngredient:
        """The base ingredient (closest catalog match)."""
        return self.ingredients[0]

    def to_dict(self) -> dict:
        d = {
            "target_color": self.target_color.hex,
            "target_name": self.target_name,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "total_cost": self.total_cost,
            "mixing_instructions": list(self.mixing_instructions),
            "tips": list(self.tips),
            "difficulty": self.difficulty.value,
            "accuracy": self.accuracy,
        }
        if self.seed_ratio is not None:
            d["seed_ratio"] = self.seed_ratio
        return d


# =============================================================================
# Project Estimate
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaintRequirement:
    """Paint needed for a project: fractional tubes consumed and the cost of whole tubes."""
    paint: PaintColor
    tubes: float
    cost: float

    def to_dict(self) -> dict:
        return {"paint_id": self.paint.id, "tubes": self.tubes, "cost": self.cost}


@dataclass(frozen=True, slots=True)
class ProjectEstimate:
    """Paint shopping estimate for a set of recipes over a surface area."""
    total_cost: float
    requirements: tuple[PaintRequirement, ...]
    recommendations: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict:
        return {
            "total_cost": self.total_cost,
            "requirements": [r.to_dict() for r in self.requirements],
            "recommendations": list(self.recommendations),
        }
