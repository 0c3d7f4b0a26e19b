# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Tests for built-in catalogs and closest-match search."""

import numpy as np
import pytest

from huelab.color.colorspace import color_from_hex, color_from_rgb
from huelab.color.distance import redmean
from huelab.errors import EmptyCatalog
from huelab.mixing.catalog import (
    CRAFT_SMART_ACRYLICS,
    PAINT_BRANDS,
    closest_match,
    closest_match_with_distance,
    find_paint_by_name,
    get_brand,
)
from huelab.schema.paint import Opacity, PaintBrand, PaintColor, Permanence


def _reference_closest(target, brand):
    """Independent linear scan: strict '<' keeps the first minimum."""
    best, best_distance = None, float("inf")
    for paint in brand.paints:
        d = redmean(target, paint.color)
        if d < best_distance:
            best, best_distance = paint, d
    return best


class TestBuiltinCatalog:
    """Built-in brands and their paint entries."""

    def test_craft_smart_contents(self):
        ids = [p.id for p in CRAFT_SMART_ACRYLICS]
        assert ids == [
            "titanium-white", "mars-black", "cadmium-red", "ultramarine-blue",
            "cadmium-yellow", "burnt-sienna", "raw-umber", "phthalo-blue",
            "alizarin-crimson", "sap-green",
        ]

    def test_paint_attributes(self):
        crimson = CRAFT_SMART_ACRYLICS.get("alizarin-crimson")
        assert crimson.hex == "#DC143C"
        assert crimson.price == 2.99
        assert crimson.opacity is Opacity.TRANSPARENT
        assert crimson.permanence is Permanence.MODERATELY_PERMANENT
        assert crimson.series == 2

    def test_registry(self):
        assert set(PAINT_BRANDS) == {"michaels-craft-smart", "winsor-newton", "golden", "liquitex"}
        assert get_brand("michaels-craft-smart") is CRAFT_SMART_ACRYLICS
        assert get_brand("golden").is_empty

    def test_unknown_brand(self):
        with pytest.raises(KeyError, match="Unknown paint brand"):
            get_brand("acme")


class TestFindPaintByName:
    """Name-fragment lookup follows catalog order."""

    def test_first_in_catalog_order(self):
        assert find_paint_by_name(CRAFT_SMART_ACRYLICS, "Red", "Yellow").id == "cadmium-red"
        assert find_paint_by_name(CRAFT_SMART_ACRYLICS, "Yellow").id == "cadmium-yellow"
        assert find_paint_by_name(CRAFT_SMART_ACRYLICS, "Blue").id == "ultramarine-blue"

    def test_case_sensitive_fragment(self):
        assert find_paint_by_name(CRAFT_SMART_ACRYLICS, "white") is None
        assert find_paint_by_name(CRAFT_SMART_ACRYLICS, "White").id == "titanium-white"

    def test_missing(self):
        assert find_paint_by_name(CRAFT_SMART_ACRYLICS, "Purple") is None

    def test_exclude_takes_next_match(self):
        paint = find_paint_by_name(CRAFT_SMART_ACRYLICS, "Red", "Yellow", exclude={"cadmium-red"})
        assert paint.id == "cadmium-yellow"
        assert find_paint_by_name(CRAFT_SMART_ACRYLICS, "White", exclude=["titanium-white"]) is None


class TestClosestMatch:
    """Closest paint under the redmean metric, ties in catalog order."""

    def test_exact_entry(self):
        paint, d = closest_match_with_distance(color_from_hex("#E30613"), CRAFT_SMART_ACRYLICS)
        assert paint.id == "cadmium-red"
        assert d == 0.0

    def test_every_catalog_paint_matches_itself(self):
        for paint in CRAFT_SMART_ACRYLICS:
            assert closest_match(paint.color, CRAFT_SMART_ACRYLICS) is paint

    def test_matches_brute_force(self):
        rng = np.random.RandomState(42)
        for px in rng.randint(0, 256, size=(200, 3)):
            target = color_from_rgb(*px)
            assert closest_match(target, CRAFT_SMART_ACRYLICS) is _reference_closest(
                target, CRAFT_SMART_ACRYLICS
            )

    def test_distance_matches_scalar(self):
        target = color_from_hex("#3498DB")
        paint, d = closest_match_with_distance(target, CRAFT_SMART_ACRYLICS)
        assert d == redmean(target, paint.color)

    def test_tie_goes_to_first(self):
        first = PaintColor.create("first", "First", "#808080", 1.0)
        second = PaintColor.create("second", "Second", "#808080", 1.0)
        brand = PaintBrand(id="ties", name="Ties", paints=(first, second))
        assert closest_match(color_from_hex("#7F7F7F"), brand) is first

        reversed_brand = PaintBrand(id="ties", name="Ties", paints=(second, first))
        assert closest_match(color_from_hex("#7F7F7F"), reversed_brand) is second

    def test_single_entry(self):
        only = PaintColor.create("only", "Only", "#123456", 1.0)
        brand = PaintBrand(id="one", name="One", paints=(only,))
        assert closest_match(color_from_hex("#FFFFFF"), brand) is only

    def test_empty_catalog(self):
        with pytest.raises(EmptyCatalog, match="golden"):
            closest_match(color_from_hex("#FFFFFF"), PAINT_BRANDS["golden"])
