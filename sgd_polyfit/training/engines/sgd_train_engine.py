# sgd_polyfit/training/engines/sgd_train_engine.py
from __future__ import annotations

import math
import numbers
from typing import List, Optional, Sequence

from sgd_polyfit.config.training_config import DEFAULT_ITERATIONS, run_name
from sgd_polyfit.observability.progress import ProgressReporter
from sgd_polyfit.training.engines.error_metric import rms_rows
from sgd_polyfit.training.engines.hypothesis import (
    evaluate_row,
    function_string,
    power_row,
)
from sgd_polyfit.training.engines.model_train_engine import ModelTrainEngine
from sgd_polyfit.training.engines.train_result import TrainResult
from sgd_polyfit.training.types import Point
from sgd_polyfit.utils.errors import InvalidConfiguration
from sgd_polyfit.utils.logger import logs
from sgd_polyfit.utils.random_source import RandomSource


class SGDTrainEngine(ModelTrainEngine):
    """
    Polynomial SGD Train Engine（FINAL）

    Update rule, per pass, per point (dataset order), per j (0..D):

        theta[j] += learn_rate * (y - h(x, theta)) * x^j

    h() reads the coefficients as they are at that moment, so for one
    point theta[j] already sees the updates of theta[0..j-1]. This is not
    a simultaneous gradient step; the sequencing is part of the result and
    must not be vectorised.

    After every full pass the RMS error over the whole dataset is appended
    to the error trace. Exactly `iterations` passes, no early stop.
    Divergence (inf / nan) is logged, never masked.
    """

    def __init__(
        self,
        rng: RandomSource,
        *,
        iterations: int = DEFAULT_ITERATIONS,
        init_low: float = -0.5,
        init_high: float = 0.5,
        progress: Optional[ProgressReporter] = None,
    ):
        self.rng = rng
        self.iterations = iterations
        self.init_low = init_low
        self.init_high = init_high
        self.progress = progress if progress is not None else ProgressReporter(enabled=False)

    @classmethod
    def from_config(
        cls,
        cfg,
        rng: RandomSource,
        progress: Optional[ProgressReporter] = None,
    ) -> "SGDTrainEngine":
        return cls(
            rng,
            iterations=cfg.iterations,
            init_low=cfg.init_low,
            init_high=cfg.init_high,
            progress=progress,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def train(
        self,
        *,
        points: Sequence[Point],
        learn_rate: float,
        polynomial_degree: int,
    ) -> TrainResult:
        self._validate(points, learn_rate, polynomial_degree)

        name = run_name(polynomial_degree, learn_rate)
        thetas = self.init_thetas(polynomial_degree)

        # x never changes during training: one power row per point
        rows = [power_row(p.x, polynomial_degree) for p in points]
        ys = [p.y for p in points]

        every = self.progress.every(self.iterations)
        self.progress.start(f"SGD {name}", self.iterations, "passes")

        error: List[float] = []
        diverged = False
        for idx in range(self.iterations):
            self._sgd_pass(rows, ys, thetas, learn_rate)

            erms = rms_rows(rows, ys, thetas)
            error.append(erms)

            if not diverged and not math.isfinite(erms):
                diverged = True
                logs.warning(
                    f"[SGDTrainEngine] {name} RMS became {erms} at pass {idx}; "
                    f"learn_rate / degree too large for this data"
                )

            if (idx + 1) % every == 0:
                self.progress.update(
                    f"SGD {name} rms={erms:.6f}", idx + 1, self.iterations, "passes"
                )

        self.progress.done(f"SGD {name}")

        return TrainResult(
            name=name,
            thetas=tuple(thetas),
            function_str=function_string(thetas),
            iterations=self.iterations,
            polynomial_degree=polynomial_degree,
            learn_rate=learn_rate,
            error=tuple(error),
        )

    def init_thetas(self, polynomial_degree: int) -> List[float]:
        """
        theta[j] ~ U[init_low, init_high], drawn for j = 0..D in order.
        """
        return [
            self.rng.uniform(self.init_low, self.init_high)
            for _ in range(polynomial_degree + 1)
        ]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _sgd_pass(
        rows: Sequence[Sequence[float]],
        ys: Sequence[float],
        thetas: List[float],
        learn_rate: float,
    ) -> None:
        for row, y in zip(rows, ys):
            for j in range(len(thetas)):
                thetas[j] += learn_rate * (y - evaluate_row(row, thetas)) * row[j]

    def _validate(
        self,
        points: Sequence[Point],
        learn_rate: float,
        polynomial_degree: int,
    ) -> None:
        if len(points) == 0:
            raise InvalidConfiguration("training dataset is empty")

        if isinstance(polynomial_degree, bool) or not isinstance(polynomial_degree, numbers.Integral):
            raise InvalidConfiguration(
                f"polynomial_degree must be an int, got {polynomial_degree!r}"
            )
        if polynomial_degree < 0:
            raise InvalidConfiguration(
                f"polynomial_degree must be >= 0, got {polynomial_degree}"
            )

        if not (learn_rate > 0) or not math.isfinite(learn_rate):
            raise InvalidConfiguration(
                f"learn_rate must be a finite value > 0, got {learn_rate}"
            )

        if self.iterations < 0:
            raise InvalidConfiguration(
                f"iterations must be >= 0, got {self.iterations}"
            )
