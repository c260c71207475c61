# sgd_polyfit/training/engines/curve_sampler_engine.py
from __future__ import annotations

from typing import Sequence

from sgd_polyfit.training.engines.hypothesis import hypothesis
from sgd_polyfit.training.types import Point, Points
from sgd_polyfit.utils.errors import InvalidConfiguration


class CurveSamplerEngine:
    """
    (x, h(x)) on the uniform grid x_i = i / steps, i in [0, steps).

    Pure; used to plot the fitted curve against the training data.
    """

    def sample(self, thetas: Sequence[float], steps: int) -> Points:
        if steps < 0:
            raise InvalidConfiguration(f"steps must be >= 0, got {steps}")

        return tuple(
            Point(x=inx / steps, y=hypothesis(inx / steps, thetas))
            for inx in range(steps)
        )
