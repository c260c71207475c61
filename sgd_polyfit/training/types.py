# sgd_polyfit/training/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class Point:
    x: float
    y: float


# ordered; the order is the SGD update order
Points = Tuple[Point, ...]


def split_xy(points: Sequence[Point]) -> Tuple[List[float], List[float]]:
    """
    Points -> (xs, ys)
    """
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return xs, ys


def points_payload(points: Sequence[Point]) -> Dict[str, List[float]]:
    xs, ys = split_xy(points)
    return {"x_points": xs, "y_points": ys}
