# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Built-in paint catalogs and closest-match search.

Matching is an exhaustive scan under the redmean metric. Ties go to the
paint that appears first in catalog order.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from huelab.color.distance import redmean_batch
from huelab.errors import EmptyCatalog
from huelab.schema.color import Color
from huelab.schema.paint import Opacity, PaintBrand, PaintColor, Permanence


logger = logging.getLogger(__name__)


# =============================================================================
# Built-in Catalogs
# =============================================================================

_CRAFT_SMART = "Craft Smart"

CRAFT_SMART_ACRYLICS = PaintBrand(
    id="michaels-craft-smart",
    name="Craft Smart Acrylic Paint",
    paints=(
        PaintColor.create("titanium-white", "Titanium White", "#FFFFFF", 1.99,
                          brand=_CRAFT_SMART),
        PaintColor.create("mars-black", "Mars Black", "#000000", 1.99,
                          brand=_CRAFT_SMART),
        PaintColor.create("cadmium-red", "Cadmium Red Medium", "#E30613", 3.99,
                          series=3, brand=_CRAFT_SMART),
        PaintColor.create("ultramarine-blue", "Ultramarine Blue", "#0033AA", 2.49,
                          opacity=Opacity.SEMI_OPAQUE, series=2, brand=_CRAFT_SMART),
        PaintColor.create("cadmium-yellow", "Cadmium Yellow Medium", "#FFED00", 3.99,
                          opacity=Opacity.SEMI_OPAQUE, series=3, brand=_CRAFT_SMART),
        PaintColor.create("burnt-sienna", "Burnt Sienna", "#8B4513", 2.49,
                          opacity=Opacity.TRANSPARENT, series=2, brand=_CRAFT_SMART),
        PaintColor.create("raw-umber", "Raw Umber", "#734A12", 2.49,
                          opacity=Opacity.TRANSPARENT, series=2, brand=_CRAFT_SMART),
        PaintColor.create("phthalo-blue", "Phthalo Blue", "#003F7F", 2.99,
                          opacity=Opacity.TRANSPARENT, series=2, brand=_CRAFT_SMART),
        PaintColor.create("alizarin-crimson", "Alizarin Crimson", "#DC143C", 2.99,
                          opacity=Opacity.TRANSPARENT,
                          permanence=Permanence.MODERATELY_PERMANENT,
                          series=2, brand=_CRAFT_SMART),
        PaintColor.create("sap-green", "Sap Green", "#507D2A", 2.49,
                          opacity=Opacity.TRANSPARENT, series=2, brand=_CRAFT_SMART),
    ),
)

# Brands without catalog data yet are registered empty; matching raises EmptyCatalog.
PAINT_BRANDS: dict[str, PaintBrand] = {
    brand.id: brand
    for brand in (
        CRAFT_SMART_ACRYLICS,
        PaintBrand(id="winsor-newton", name="Winsor & Newton"),
        PaintBrand(id="golden", name="Golden"),
        PaintBrand(id="liquitex", name="Liquitex"),
    )
}


def get_brand(brand_id: str) -> PaintBrand:
    """Look up a registered brand by id."""
    try:
        return PAINT_BRANDS[brand_id]
    except KeyError:
        raise KeyError(f"Unknown paint brand '{brand_id}'") from None


# =============================================================================
# Lookup
# =============================================================================


def find_paint_by_name(
    brand: PaintBrand,
    *fragments: str,
    exclude: Iterable[str] = (),
) -> Optional[PaintColor]:
    """
    First paint, in catalog order, whose name contains any of ``fragments``.

    Paints whose id is in ``exclude`` are skipped, so the next match is
    returned instead.
    """
    excluded = set(exclude)
    for paint in brand.paints:
        if paint.id in excluded:
            continue
        if any(fragment in paint.name for fragment in fragments):
            return paint
    return None


# =============================================================================
# Closest Match
# =============================================================================


def _catalog_rgb(brand: PaintBrand) -> np.ndarray:
    return np.array([p.rgb.as_tuple() for p in brand.paints], dtype=np.float64)


def closest_match_with_distance(target: Color, brand: PaintBrand) -> tuple[PaintColor, float]:
    """
    Paint minimizing the redmean distance to ``target``, with that distance.

    Raises:
        EmptyCatalog: If the brand has no paints
    """
    if brand.is_empty:
        raise EmptyCatalog(brand.id)

    distances = redmean_batch(np.array(target.rgb.as_tuple(), dtype=np.float64), _catalog_rgb(brand))
    # argmin returns the first minimum, so catalog order breaks ties
    index = int(np.argmin(distances))
    paint = brand.paints[index]
    logger.debug("Closest match for %s in %s: %s (%.3f)", target.hex, brand.id, paint.id, distances[index])
    return paint, float(distances[index])


def closest_match(target: Color, brand: PaintBrand) -> PaintColor:
    """
    Paint in ``brand`` closest to ``target`` under the redmean metric.

    Raises:
        EmptyCatalog: If the brand has no paints
    """
    paint, _ = closest_match_with_distance(target, brand)
    return paint
