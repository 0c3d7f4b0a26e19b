# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Tests for color-vision deficiency simulation."""

import numpy as np
import pytest

from huelab.color.colorspace import color_from_hex, color_from_rgb
from huelab.schema.accessibility import DeficiencyKind
from huelab.vision.simulate import (
    DEFICIENCY_MATRICES,
    simulate,
    simulate_all,
    simulate_rgb_array,
)


def _random_colors(n, seed=42):
    rng = np.random.RandomState(seed)
    return [color_from_rgb(*px) for px in rng.randint(0, 256, size=(n, 3))]


class TestMatrices:
    """Deficiency matrices are complete and read-only."""

    def test_every_kind_has_a_matrix(self):
        assert set(DEFICIENCY_MATRICES) == set(DeficiencyKind)
        for matrix in DEFICIENCY_MATRICES.values():
            assert matrix.shape == (3, 3)

    def test_matrices_read_only(self):
        matrix = DEFICIENCY_MATRICES[DeficiencyKind.PROTANOPIA]
        with pytest.raises(ValueError):
            matrix[0, 0] = 1.0

    def test_registry_read_only(self):
        with pytest.raises(TypeError):
            DEFICIENCY_MATRICES[DeficiencyKind.PROTANOPIA] = np.eye(3)

    def test_coefficients(self):
        np.testing.assert_array_equal(
            DEFICIENCY_MATRICES[DeficiencyKind.DEUTERANOPIA],
            [[0.625, 0.375, 0.0], [0.7, 0.3, 0.0], [0.0, 0.3, 0.7]],
        )


class TestSimulate:
    """Scalar deficiency simulation of single colors."""

    def test_achromatopsia_is_gray(self):
        for color in _random_colors(50):
            out = simulate(color, DeficiencyKind.ACHROMATOPSIA)
            assert out.r == out.g == out.b

    def test_achromatopsia_red(self):
        assert simulate(color_from_hex("#FF0000"), DeficiencyKind.ACHROMATOPSIA).hex == "#4C4C4C"

    def test_protanopia_red(self):
        out = simulate(color_from_hex("#FF0000"), DeficiencyKind.PROTANOPIA)
        assert out.rgb.as_tuple() == (145, 142, 0)

    @pytest.mark.parametrize("kind", list(DeficiencyKind))
    def test_black_and_white_fixed(self, kind):
        assert simulate(color_from_hex("#000000"), kind).hex == "#000000"
        assert simulate(color_from_hex("#FFFFFF"), kind).hex == "#FFFFFF"

    def test_deterministic(self):
        for color in _random_colors(20):
            for kind in DeficiencyKind:
                assert simulate(color, kind) == simulate(color, kind)

    def test_kind_by_value(self):
        color = color_from_hex("#3498DB")
        assert simulate(color, "tritanopia") == simulate(color, DeficiencyKind.TRITANOPIA)

    def test_simulate_all(self):
        color = color_from_hex("#3498DB")
        result = simulate_all(color)
        assert list(result) == list(DeficiencyKind)
        for kind, simulated in result.items():
            assert simulated == simulate(color, kind)


class TestSimulateArray:
    """Batch simulation over pixel arrays matches the scalar path."""

    def test_shape_and_dtype(self):
        rng = np.random.RandomState(42)
        pixels = rng.randint(0, 256, size=(4, 5, 3))
        out = simulate_rgb_array(pixels, DeficiencyKind.DEUTERANOMALY)
        assert out.shape == (4, 5, 3)
        assert out.dtype == np.uint8

    def test_matches_scalar(self):
        colors = _random_colors(30)
        pixels = np.array([c.rgb.as_tuple() for c in colors])
        out = simulate_rgb_array(pixels, DeficiencyKind.TRITANOMALY)
        for color, row in zip(colors, out):
            assert tuple(int(v) for v in row) == simulate(color, DeficiencyKind.TRITANOMALY).rgb.as_tuple()

    def test_output_clamped(self):
        out = simulate_rgb_array(np.array([300.0, 300.0, 300.0]), DeficiencyKind.PROTANOPIA)
        np.testing.assert_array_equal(out, [255, 255, 255])
        out = simulate_rgb_array(np.array([-40.0, -40.0, -40.0]), DeficiencyKind.PROTANOPIA)
        np.testing.assert_array_equal(out, [0, 0, 0])
