# sgd_polyfit/training/engines/point_generator_engine.py
from __future__ import annotations

import math

from sgd_polyfit.training.types import Point, Points
from sgd_polyfit.utils.errors import InvalidConfiguration
from sgd_polyfit.utils.random_source import RandomSource


class PointGeneratorEngine:
    """
    Synthetic training data: x_i = i / n on [0, 1),
    y_i = sin(2*pi*x_i) + noise, noise ~ U[noise_low, noise_high].

    Exactly one random draw per point, in point order.
    """

    def __init__(
        self,
        rng: RandomSource,
        *,
        noise_low: float = -0.3,
        noise_high: float = 0.3,
    ):
        self.rng = rng
        self.noise_low = noise_low
        self.noise_high = noise_high

    @classmethod
    def from_config(cls, cfg, rng: RandomSource) -> "PointGeneratorEngine":
        return cls(rng, noise_low=cfg.noise_low, noise_high=cfg.noise_high)

    def generate(self, num: int) -> Points:
        if num < 0:
            raise InvalidConfiguration(f"num must be >= 0, got {num}")

        points = []
        for inx in range(num):
            noise = self.rng.uniform(self.noise_low, self.noise_high)

            x = inx / num
            y = math.sin(2 * math.pi * x) + noise

            points.append(Point(x=x, y=y))

        return tuple(points)
