# sgd_polyfit/training/engines/error_metric.py
from __future__ import annotations

import math
from typing import Sequence

from sgd_polyfit.training.engines.hypothesis import evaluate_row, hypothesis
from sgd_polyfit.training.types import Point
from sgd_polyfit.utils.errors import InvalidConfiguration


def e_theta(points: Sequence[Point], thetas: Sequence[float]) -> float:
    """
    E(theta) = 0.5 * sum (h(x, theta) - y)^2
    """
    total = 0.0
    for p in points:
        residual = hypothesis(p.x, thetas) - p.y
        total += residual * residual
    return total * 0.5


def rms(points: Sequence[Point], thetas: Sequence[float]) -> float:
    """
    RMS(theta) = sqrt(2 * E(theta) / |P|)
    """
    if len(points) == 0:
        raise InvalidConfiguration("RMS error of an empty dataset is undefined")
    return math.sqrt((2.0 * e_theta(points, thetas)) / len(points))


# ----------------------------------------------------------------------
# Row variants: same arithmetic, powers precomputed once per point
# ----------------------------------------------------------------------
def e_theta_rows(
    rows: Sequence[Sequence[float]],
    ys: Sequence[float],
    thetas: Sequence[float],
) -> float:
    total = 0.0
    for row, y in zip(rows, ys):
        residual = evaluate_row(row, thetas) - y
        total += residual * residual
    return total * 0.5


def rms_rows(
    rows: Sequence[Sequence[float]],
    ys: Sequence[float],
    thetas: Sequence[float],
) -> float:
    if len(ys) == 0:
        raise InvalidConfiguration("RMS error of an empty dataset is undefined")
    return math.sqrt((2.0 * e_theta_rows(rows, ys, thetas)) / len(ys))
