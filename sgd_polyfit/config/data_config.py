#!filepath: sgd_polyfit/config/data_config.py
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class DataConfig(BaseModel):
    """
    Synthetic dataset: y = sin(2*pi*x) + U[noise_low, noise_high]
    """

    num_points: int = Field(default=100, ge=1)
    noise_low: float = -0.3
    noise_high: float = 0.3

    # None -> fresh entropy on every run
    seed: Optional[int] = 28051998

    @model_validator(mode="after")
    def _check_noise_bounds(self) -> "DataConfig":
        if self.noise_low > self.noise_high:
            raise ValueError(
                f"noise_low={self.noise_low} > noise_high={self.noise_high}"
            )
        return self
