# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Tests for perceptual distance metrics."""

import math

import numpy as np
import pytest

from huelab.color.colorspace import color_from_hex, color_from_rgb
from huelab.color.distance import (
    MAX_RGB_DISTANCE,
    DistanceMetric,
    delta_e76,
    delta_e76_batch,
    distance,
    redmean,
    redmean_batch,
)


def _random_colors(rng, n):
    return [color_from_rgb(*px) for px in rng.randint(0, 256, size=(n, 3))]


class TestRedmean:
    """Redmean distance in scalar and batch form."""

    def test_identical_is_zero(self):
        c = color_from_hex("#3498DB")
        assert redmean(c, c) == 0.0

    def test_known_value(self):
        # Black to white: rMean = 127.5, every delta 255
        black, white = color_from_hex("#000000"), color_from_hex("#FFFFFF")
        weight_r = 2 + 127.5 / 256
        weight_b = 2 + (255 - 127.5) / 256
        expected = math.sqrt((weight_r + 4 + weight_b) * 255 * 255)
        assert redmean(black, white) == pytest.approx(expected)

    def test_green_weighted_most(self):
        base = color_from_rgb(100, 100, 100)
        assert redmean(base, color_from_rgb(100, 110, 100)) > redmean(base, color_from_rgb(110, 100, 100))
        assert redmean(base, color_from_rgb(100, 110, 100)) > redmean(base, color_from_rgb(100, 100, 110))

    def test_batch_matches_scalar(self):
        rng = np.random.RandomState(42)
        target = color_from_rgb(*rng.randint(0, 256, size=3))
        candidates = _random_colors(rng, 50)
        batch = redmean_batch(
            np.array(target.rgb.as_tuple()),
            np.array([c.rgb.as_tuple() for c in candidates]),
        )
        for c, d in zip(candidates, batch):
            assert float(d) == redmean(target, c)


class TestDeltaE76:
    """CIE76 ΔE in scalar and batch form."""

    def test_identical_is_zero(self):
        c = color_from_hex("#E30613")
        assert delta_e76(c, c) == 0.0

    def test_black_white(self):
        d = delta_e76(color_from_hex("#000000"), color_from_hex("#FFFFFF"))
        assert d == pytest.approx(100.0, abs=1e-3)

    def test_batch(self):
        rng = np.random.RandomState(42)
        a = _random_colors(rng, 20)
        b = _random_colors(rng, 20)
        labs_a = np.array([[c.lab.L, c.lab.a, c.lab.b] for c in a])
        labs_b = np.array([[c.lab.L, c.lab.a, c.lab.b] for c in b])
        batch = delta_e76_batch(labs_a, labs_b)
        expected = [delta_e76(x, y) for x, y in zip(a, b)]
        np.testing.assert_allclose(batch, expected, rtol=1e-12)


class TestDistanceContract:
    """Every metric is zero on identity, symmetric and non-negative."""

    @pytest.mark.parametrize("metric", list(DistanceMetric))
    def test_self_distance_zero(self, metric):
        rng = np.random.RandomState(42)
        for c in _random_colors(rng, 50):
            assert distance(c, c, metric) == 0.0

    @pytest.mark.parametrize("metric", list(DistanceMetric))
    def test_symmetric_random_pairs(self, metric):
        rng = np.random.RandomState(42)
        a = _random_colors(rng, 100)
        b = _random_colors(rng, 100)
        for x, y in zip(a, b):
            d = distance(x, y, metric)
            assert d >= 0.0
            assert d == pytest.approx(distance(y, x, metric), abs=1e-12)

    def test_metric_by_name(self):
        a, b = color_from_hex("#112233"), color_from_hex("#445566")
        assert distance(a, b, "redmean") == redmean(a, b)
        assert distance(a, b, "delta_e76") == delta_e76(a, b)

    def test_metrics_differ(self):
        a, b = color_from_hex("#112233"), color_from_hex("#445566")
        assert distance(a, b, DistanceMetric.REDMEAN) != distance(a, b, DistanceMetric.DELTA_E76)

    def test_unknown_metric(self):
        c = color_from_hex("#000000")
        with pytest.raises(ValueError):
            distance(c, c, "ciede2000")

    def test_metric_required(self):
        a, b = color_from_hex("#112233"), color_from_hex("#445566")
        with pytest.raises(TypeError):
            distance(a, b)

    def test_max_distance_constant(self):
        assert MAX_RGB_DISTANCE == pytest.approx(441.6729559)
