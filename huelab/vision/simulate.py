# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Color-vision deficiency simulation.

Each deficiency is a fixed 3×3 linear transform applied to normalized
sRGB. Output is rescaled to [0, 255], rounded and clamped, since rows
that do not sum to exactly 1 can overshoot.
"""

from __future__ import annotations

from types import MappingProxyType

import numpy as np
from numpy.typing import NDArray

from huelab.color.colorspace import color_from_rgb
from huelab.schema.accessibility import DeficiencyKind
from huelab.schema.color import Color


def _matrix(rows) -> NDArray[np.float64]:
    m = np.array(rows, dtype=np.float64)
    m.setflags(write=False)
    return m


# Luminance-weighted gray row used by full achromatic collapse
_GRAY_ROW = [0.299, 0.587, 0.114]

# Blue cone monochromacy sees only short-wavelength luminance
_BLUE_CONE_ROW = [0.01775, 0.10945, 0.87262]

DEFICIENCY_MATRICES = MappingProxyType({
    DeficiencyKind.PROTANOMALY: _matrix([
        [0.817, 0.183, 0.000],
        [0.333, 0.667, 0.000],
        [0.000, 0.125, 0.875],
    ]),
    DeficiencyKind.PROTANOPIA: _matrix([
        [0.567, 0.433, 0.000],
        [0.558, 0.442, 0.000],
        [0.000, 0.242, 0.758],
    ]),
    DeficiencyKind.DEUTERANOMALY: _matrix([
        [0.800, 0.200, 0.000],
        [0.258, 0.742, 0.000],
        [0.000, 0.142, 0.858],
    ]),
    DeficiencyKind.DEUTERANOPIA: _matrix([
        [0.625, 0.375, 0.000],
        [0.700, 0.300, 0.000],
        [0.000, 0.300, 0.700],
    ]),
    DeficiencyKind.TRITANOMALY: _matrix([
        [0.967, 0.033, 0.000],
        [0.000, 0.733, 0.267],
        [0.000, 0.183, 0.817],
    ]),
    DeficiencyKind.TRITANOPIA: _matrix([
        [0.950, 0.050, 0.000],
        [0.000, 0.433, 0.567],
        [0.000, 0.475, 0.525],
    ]),
    DeficiencyKind.ACHROMATOPSIA: _matrix([_GRAY_ROW, _GRAY_ROW, _GRAY_ROW]),
    DeficiencyKind.ACHROMATOMALY: _matrix([
        [0.618, 0.320, 0.062],
        [0.163, 0.775, 0.062],
        [0.163, 0.320, 0.516],
    ]),
    DeficiencyKind.BLUE_CONE: _matrix([_BLUE_CONE_ROW, _BLUE_CONE_ROW, _BLUE_CONE_ROW]),
})


def simulate_rgb_array(pixels: NDArray, kind: DeficiencyKind) -> NDArray[np.uint8]:
    """
    Simulate a deficiency on an array of sRGB values.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]
        kind: Deficiency to simulate

    Returns:
        Array of the same shape, dtype uint8
    """
    matrix = DEFICIENCY_MATRICES[DeficiencyKind(kind)]
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    out = np.einsum('...j,ij->...i', srgb, matrix) * 255.0
    return np.clip(np.round(out), 0, 255).astype(np.uint8)


def simulate(color: Color, kind: DeficiencyKind) -> Color:
    """
    How ``color`` appears under the given deficiency.

    Deterministic; achromatopsia always yields r == g == b.
    """
    r, g, b = simulate_rgb_array(np.array(color.rgb.as_tuple()), kind)
    return color_from_rgb(int(r), int(g), int(b))


def simulate_all(color: Color) -> dict[DeficiencyKind, Color]:
    """Simulate ``color`` under every deficiency, in DeficiencyKind order."""
    pixels = np.array(color.rgb.as_tuple())
    result = {}
    for kind in DeficiencyKind:
        r, g, b = simulate_rgb_array(pixels, kind)
        result[kind] = color_from_rgb(int(r), int(g), int(b))
    return result
