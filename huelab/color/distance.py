# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Perceptual color distance.

Two interchangeable metrics; callers always pick one explicitly:

- Redmean: weighted Euclidean distance directly on sRGB channels, with
  red/blue weights driven by the mean red level. Cheap, used for catalog
  matching.
- ΔE CIE76: Euclidean distance in CIE LAB. Used for palette-level
  accuracy scoring.

Both are symmetric, non-negative and zero for identical colors.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

import numpy as np
from numpy.typing import NDArray

from huelab.schema.color import RGB, Color


# Largest unweighted RGB distance, used to normalize match accuracy
MAX_RGB_DISTANCE = math.sqrt(3 * 255 * 255)


class DistanceMetric(Enum):
    """Which distance formula to use."""
    REDMEAN = "redmean"
    DELTA_E76 = "delta_e76"


# =============================================================================
# Redmean (weighted RGB)
# =============================================================================


def redmean_rgb(rgb1: RGB, rgb2: RGB) -> float:
    """
    Weighted "redmean" distance between two RGB triples.

    weightR = 2 + rMean/256, weightG = 4, weightB = 2 + (255 - rMean)/256
    """
    r_mean = (rgb1.r + rgb2.r) / 2
    delta_r = rgb1.r - rgb2.r
    delta_g = rgb1.g - rgb2.g
    delta_b = rgb1.b - rgb2.b

    weight_r = 2 + r_mean / 256
    weight_g = 4
    weight_b = 2 + (255 - r_mean) / 256

    return math.sqrt(
        weight_r * delta_r * delta_r
        + weight_g * delta_g * delta_g
        + weight_b * delta_b * delta_b
    )


def redmean(a: Color, b: Color) -> float:
    """Redmean distance between two colors."""
    return redmean_rgb(a.rgb, b.rgb)


def redmean_batch(
    target: NDArray,
    candidates: NDArray,
) -> NDArray[np.float64]:
    """
    Vectorized redmean distance from one RGB triple to many.

    Evaluates the same expression, in the same order, as ``redmean_rgb``
    so scalar and batch results agree exactly.

    Args:
        target: Array of shape (3,) with sRGB values [0, 255]
        candidates: Array of shape (N, 3) with sRGB values [0, 255]

    Returns:
        Array of shape (N,) with distances
    """
    target = np.asarray(target, dtype=np.float64)
    candidates = np.asarray(candidates, dtype=np.float64).reshape(-1, 3)

    r_mean = (target[0] + candidates[:, 0]) / 2
    delta = target - candidates

    weight_r = 2 + r_mean / 256
    weight_g = 4
    weight_b = 2 + (255 - r_mean) / 256

    return np.sqrt(
        weight_r * delta[:, 0] * delta[:, 0]
        + weight_g * delta[:, 1] * delta[:, 1]
        + weight_b * delta[:, 2] * delta[:, 2]
    )


# =============================================================================
# ΔE CIE76
# =============================================================================


def delta_e76(a: Color, b: Color) -> float:
    """
    ΔE CIE76 between two colors: sqrt(ΔL² + Δa² + Δb²).

    Reference thresholds:
    - ΔE < 1: imperceptible
    - ΔE < 2: perceptible on close inspection
    - ΔE < 5: acceptable match
    """
    delta_l = a.lab.L - b.lab.L
    delta_a = a.lab.a - b.lab.a
    delta_b = a.lab.b - b.lab.b
    return math.sqrt(delta_l * delta_l + delta_a * delta_a + delta_b * delta_b)


def delta_e76_batch(
    labs1: NDArray[np.float64],
    labs2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized ΔE76 for arrays of LAB colors.

    Args:
        labs1: Array of shape (N, 3) with LAB values
        labs2: Array of shape (N, 3) with LAB values (or (3,) to broadcast)

    Returns:
        Array of shape (N,) with ΔE values
    """
    delta = np.asarray(labs1, dtype=np.float64) - np.asarray(labs2, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))


# =============================================================================
# Dispatch
# =============================================================================


def distance(
    a: Color,
    b: Color,
    metric: Union[DistanceMetric, str],
) -> float:
    """
    Distance between two colors under an explicitly chosen metric.

    Args:
        a, b: Colors to compare
        metric: DistanceMetric or its string value ("redmean", "delta_e76")

    Returns:
        Non-negative distance

    Raises:
        ValueError: If the metric is unknown
    """
    metric = DistanceMetric(metric)
    if metric is DistanceMetric.REDMEAN:
        return redmean(a, b)
    return delta_e76(a, b)
