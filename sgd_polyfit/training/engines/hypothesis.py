# sgd_polyfit/training/engines/hypothesis.py
"""
Polynomial hypothesis h(x, theta) = sum_j theta[j] * x^j.

Powers are exact (math.pow), never built by repeated multiplication,
and the sum runs left to right from j = 0.
"""
from __future__ import annotations

import math
from typing import List, Sequence


def power_row(x: float, degree: int) -> List[float]:
    """
    [x^0, x^1, ..., x^degree]
    """
    return [math.pow(x, j) for j in range(degree + 1)]


def evaluate_row(row: Sequence[float], thetas: Sequence[float]) -> float:
    """
    h(x, theta) from a precomputed power row of x.
    """
    total = 0.0
    for theta, xj in zip(thetas, row):
        total += theta * xj
    return total


def hypothesis(x: float, thetas: Sequence[float]) -> float:
    return evaluate_row(power_row(x, len(thetas) - 1), thetas)


def function_string(thetas: Sequence[float]) -> str:
    """
    "y = 0.123456 * x ^ 0 + -1.000000 * x ^ 1 + ..."
    """
    parts = [f"{theta:f} * x ^ {j}" for j, theta in enumerate(thetas)]
    return "y = " + " + ".join(parts)
