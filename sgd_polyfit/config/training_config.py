# sgd_polyfit/config/training_config.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, PositiveFloat, model_validator

DEFAULT_ITERATIONS = 5000


def run_name(polynomial_degree: int, learn_rate: float) -> str:
    """
    "D=<degree> a=<learn rate>", the rate in its shortest round-trip form
    (0.1234561 stays 0.1234561, 1.0 prints as 1).
    """
    rate = repr(float(learn_rate))
    if rate.endswith(".0"):
        rate = rate[:-2]
    return f"D={polynomial_degree} a={rate}"


class RunConfig(BaseModel):
    """
    One (learning rate, degree) configuration -> one training run.
    """

    learn_rate: PositiveFloat
    polynomial_degree: int = Field(ge=0)

    @property
    def name(self) -> str:
        return run_name(self.polynomial_degree, self.learn_rate)


class TrainingConfig(BaseModel):
    """
    TrainingConfig（FINAL）

    - iterations: full passes over the dataset, no early stop
    - init_low / init_high: bounds of the random initial coefficients
    - runs: trained in order, all on the same dataset
    """

    iterations: int = Field(default=DEFAULT_ITERATIONS, ge=0)

    init_low: float = -0.5
    init_high: float = 0.5

    runs: List[RunConfig] = Field(
        default_factory=lambda: [RunConfig(learn_rate=0.1, polynomial_degree=5)],
        min_length=1,
    )

    @model_validator(mode="after")
    def _check_init_bounds(self) -> "TrainingConfig":
        if self.init_low > self.init_high:
            raise ValueError(
                f"init_low={self.init_low} > init_high={self.init_high}"
            )
        return self

    @classmethod
    def sweep(
        cls,
        learn_rates: List[float],
        degrees: List[int],
        **kwargs,
    ) -> "TrainingConfig":
        """
        Cartesian product learn_rates x degrees, learn rate outermost.
        """
        runs = [
            RunConfig(learn_rate=a, polynomial_degree=d)
            for a in learn_rates
            for d in degrees
        ]
        return cls(runs=runs, **kwargs)
