from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from sgd_polyfit.training.engines.train_result import TrainResult
from sgd_polyfit.training.types import Point


class ModelTrainEngine(ABC):
    """
    Abstract ModelTrainEngine (FINAL)

    One call to train() == one complete training run on a finite dataset.
    """

    @abstractmethod
    def train(
        self,
        *,
        points: Sequence[Point],
        learn_rate: float,
        polynomial_degree: int,
    ) -> TrainResult:
        """
        Returns the fitted coefficients and the per-pass error trace
        """
        raise NotImplementedError
