#!filepath: sgd_polyfit/utils/random_source.py
from __future__ import annotations

from typing import Optional

import numpy as np


class RandomSource:
    """
    Explicit uniform random source.

    One instance is owned by a pipeline run and handed to every engine
    that draws numbers, so a fixed seed reproduces the whole run.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        """
        One float from [low, high).
        """
        return float(self._rng.uniform(low, high))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
