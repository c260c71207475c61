#!filepath: sgd_polyfit/config/export_config.py
from typing import Optional

from pydantic import BaseModel, Field


class ExportConfig(BaseModel):
    notebook_dir: str = "exercise.01.notebook"
    points_file: str = "sin-points-with-noise.json"
    results_file: str = "stochastic-gradient-descent.results.json"

    # None -> sample the fitted curve with as many points as the dataset
    curve_points: Optional[int] = Field(default=None, ge=1)

    plot: bool = False
