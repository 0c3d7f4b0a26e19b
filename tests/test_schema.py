# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization."""

import json

import numpy as np
import pytest

from huelab.errors import InvalidColor, OutOfRangeComponent
from huelab.schema import (
    CMYK,
    HSL,
    RGB,
    AccessibilityContext,
    AccessibilityResult,
    Color,
    Complexity,
    ContrastResult,
    DeficiencyKind,
    DeficiencyResult,
    Difficulty,
    Opacity,
    PaintBrand,
    PaintColor,
    PaintIngredient,
    PaintRecipe,
    Permanence,
    TextSize,
    Usage,
    WCAGLevel,
)


def _paint(id="white", name="Titanium White", hex="#FFFFFF", price=1.99):
    return PaintColor.create(id, name, hex, price)


class TestRGB:
    """RGB components are validated to 0-255."""

    def test_valid(self):
        rgb = RGB(1, 2, 3)
        assert rgb.as_tuple() == (1, 2, 3)

    def test_accepts_numpy_ints(self):
        rgb = RGB(np.int64(10), np.uint8(20), 30)
        assert rgb.as_tuple() == (10, 20, 30)

    @pytest.mark.parametrize("bad", [(-1, 0, 0), (0, 256, 0), (0, 0, 1.0), (True, 0, 0)])
    def test_invalid(self, bad):
        with pytest.raises(OutOfRangeComponent):
            RGB(*bad)

    def test_dict_roundtrip(self):
        rgb = RGB(52, 152, 219)
        assert RGB.from_dict(rgb.to_dict()) == rgb

    def test_frozen(self):
        rgb = RGB(1, 2, 3)
        with pytest.raises(AttributeError):
            rgb.r = 4


class TestHSLAndCMYK:
    """HSL and CMYK components are validated to their ranges."""

    def test_hue_must_be_below_360(self):
        with pytest.raises(OutOfRangeComponent):
            HSL(360.0, 50.0, 50.0)

    def test_nan_rejected(self):
        with pytest.raises(OutOfRangeComponent):
            HSL(0.0, float("nan"), 50.0)

    def test_cmyk_range(self):
        with pytest.raises(OutOfRangeComponent, match="k must be"):
            CMYK(0.0, 0.0, 0.0, 101.0)


class TestColor:
    """Color values compare, hash and serialize by content."""

    def test_from_hex_canonicalizes(self):
        c = Color.from_hex("3498db")
        assert c.hex == "#3498DB"
        assert (c.r, c.g, c.b) == (52, 152, 219)

    def test_from_hex_invalid(self):
        with pytest.raises(InvalidColor):
            Color.from_hex("#nothex")

    def test_from_rgb_and_hsl_agree(self):
        a = Color.from_rgb(255, 0, 0)
        b = Color.from_hsl(0, 100, 50)
        assert a == b

    def test_hex_must_match_rgb(self):
        c = Color.from_hex("#000000")
        with pytest.raises(ValueError, match="does not match"):
            Color(hex="#FFFFFF", rgb=c.rgb, hsl=c.hsl, cmyk=c.cmyk, lab=c.lab)

    def test_hex_must_be_canonical(self):
        c = Color.from_hex("#abcdef")
        with pytest.raises(ValueError, match="canonical"):
            Color(hex="#abcdef", rgb=c.rgb, hsl=c.hsl, cmyk=c.cmyk, lab=c.lab)

    def test_dict_roundtrip(self):
        c = Color.from_hex("#3498DB")
        d = c.to_dict()
        assert d["rgb"] == {"r": 52, "g": 152, "b": 219}
        assert Color.from_dict(d) == c

    def test_frozen(self):
        c = Color.from_hex("#3498DB")
        with pytest.raises(AttributeError):
            c.hex = "#000000"


class TestPaintColor:
    """Paint entries validate price, series and hex."""

    def test_create_derives_rgb(self):
        p = _paint(hex="#E30613")
        assert p.rgb == RGB(227, 6, 19)

    def test_hex_must_match_rgb(self):
        with pytest.raises(ValueError, match="does not match"):
            PaintColor(id="x", name="X", hex="#FFFFFF", rgb=RGB(0, 0, 0), price=1.0)

    def test_negative_price(self):
        with pytest.raises(ValueError, match="Price"):
            _paint(price=-1.0)

    def test_series_positive(self):
        with pytest.raises(ValueError, match="Series"):
            PaintColor.create("x", "X", "#000000", 1.0, series=0)

    def test_empty_id(self):
        with pytest.raises(ValueError, match="id"):
            _paint(id="")

    def test_dict_roundtrip(self):
        p = PaintColor.create(
            "alizarin-crimson", "Alizarin Crimson", "#DC143C", 2.99,
            opacity=Opacity.TRANSPARENT,
            permanence=Permanence.MODERATELY_PERMANENT,
            series=2,
        )
        d = p.to_dict()
        assert d["opacity"] == "transparent"
        assert d["permanence"] == "moderately-permanent"
        assert PaintColor.from_dict(d) == p

    def test_from_dict_without_rgb(self):
        p = PaintColor.from_dict({"id": "red", "name": "Red", "hex": "#FF0000", "price": 1.0})
        assert p.rgb == RGB(255, 0, 0)
        assert p.opacity is Opacity.OPAQUE

    def test_color_property(self):
        assert _paint(hex="#000000").color.hex == "#000000"


class TestPaintBrand:
    """Brands hold paints with unique ids."""

    def test_iteration_order(self):
        a, b = _paint("a", "A", "#000000"), _paint("b", "B", "#FFFFFF")
        brand = PaintBrand(id="test", name="Test", paints=(a, b))
        assert list(brand) == [a, b]
        assert len(brand) == 2
        assert brand.get("b") is b

    def test_get_missing(self):
        brand = PaintBrand(id="test", name="Test")
        with pytest.raises(KeyError):
            brand.get("nope")

    def test_empty_allowed(self):
        assert PaintBrand(id="empty", name="Empty").is_empty

    def test_duplicate_ids(self):
        with pytest.raises(ValueError, match="duplicate"):
            PaintBrand(id="t", name="T", paints=(_paint("a"), _paint("a")))

    def test_from_json_colors_key(self):
        data = {
            "id": "mini",
            "name": "Mini",
            "colors": [
                {"id": "white", "name": "White", "hex": "#FFFFFF", "price": 1.0},
                {"id": "black", "name": "Black", "hex": "#000000", "price": 1.5, "series": 2},
            ],
        }
        brand = PaintBrand.from_json(json.dumps(data))
        assert [p.id for p in brand] == ["white", "black"]
        assert brand.get("black").series == 2

    def test_dict_roundtrip(self):
        brand = PaintBrand(id="t", name="T", paints=(_paint("a", "A", "#123456"),))
        assert PaintBrand.from_dict(brand.to_dict()) == brand


class TestPaintRecipe:
    """Recipes validate their ingredients and serialize."""

    def _recipe(self, ratios, **kwargs):
        paints = [_paint(f"p{i}", f"P{i}", "#000000") for i in range(len(ratios))]
        defaults = dict(
            target_color=Color.from_hex("#000000"),
            target_name="Black",
            ingredients=tuple(PaintIngredient(p, r, "x") for p, r in zip(paints, ratios)),
            total_cost=1.0,
            mixing_instructions=(),
            tips=(),
            difficulty=Difficulty.BEGINNER,
            accuracy=100.0,
        )
        defaults.update(kwargs)
        return PaintRecipe(**defaults)

    def test_valid(self):
        recipe = self._recipe([70.0, 30.0])
        assert recipe.base.ratio == 70.0

    def test_ratio_sum_tolerance(self):
        self._recipe([70.0, 30.4])
        with pytest.raises(ValueError, match="sum to 100"):
            self._recipe([70.0, 31.0])

    def test_empty_ingredients(self):
        with pytest.raises(ValueError, match="at least one"):
            self._recipe([])

    def test_negative_cost(self):
        with pytest.raises(ValueError, match="cost"):
            self._recipe([100.0], total_cost=-0.01)

    def test_accuracy_range(self):
        with pytest.raises(ValueError, match="Accuracy"):
            self._recipe([100.0], accuracy=100.5)

    def test_ingredient_ratio_range(self):
        with pytest.raises(ValueError, match="Ratio"):
            PaintIngredient(_paint(), 101.0, "x")

    def test_to_dict(self):
        d = self._recipe([100.0], seed_ratio=90.0).to_dict()
        assert d["target_color"] == "#000000"
        assert d["difficulty"] == "beginner"
        assert d["seed_ratio"] == 90.0


class TestAccessibilityTypes:
    """Accessibility enums and result records."""

    def test_required_ratio(self):
        assert AccessibilityContext().required_ratio == 4.5
        assert AccessibilityContext(text_size=TextSize.LARGE).required_ratio == 3.0
        assert AccessibilityContext(usage=Usage.GRAPHIC).required_ratio == 3.0
        assert AccessibilityContext(usage=Usage.UI).required_ratio == 4.5

    def test_context_from_dict(self):
        ctx = AccessibilityContext.from_dict({"text_size": "large", "usage": "ui"})
        assert ctx.text_size is TextSize.LARGE
        assert ctx.usage is Usage.UI

    def test_contrast_result_floor(self):
        with pytest.raises(ValueError):
            ContrastResult(ratio=0.5, level=WCAGLevel.FAIL, passes_normal=False, passes_large=False)

    def test_result_validation_and_pass_rate(self):
        per = {
            kind: DeficiencyResult(accessible=i % 3 != 0, simulated_ratio=5.0)
            for i, kind in enumerate(DeficiencyKind)
        }
        result = AccessibilityResult(
            contrast_ratio=5.0,
            contrast_level=WCAGLevel.AA,
            wcag_level=WCAGLevel.AA,
            per_deficiency=per,
            cognitive_readability=50.0,
            cognitive_complexity=Complexity.MEDIUM,
            overall_score=75.0,
            passed=True,
            contrast_passes=True,
        )
        assert result.colorblind_pass_rate == pytest.approx(6 / 9)
        d = result.to_dict()
        assert set(d["per_deficiency"]) == {k.value for k in DeficiencyKind}

        with pytest.raises(ValueError, match="Overall score"):
            AccessibilityResult(
                contrast_ratio=5.0,
                contrast_level=WCAGLevel.AA,
                wcag_level=WCAGLevel.AA,
                per_deficiency=per,
                cognitive_readability=50.0,
                cognitive_complexity=Complexity.MEDIUM,
                overall_score=101.0,
                passed=True,
                contrast_passes=True,
            )
