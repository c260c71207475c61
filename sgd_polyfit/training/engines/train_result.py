from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult（FINAL / FROZEN）

    Semantics:
    - In-memory outcome of exactly one SGD run
    - No I/O semantics
    - len(thetas) == polynomial_degree + 1
    - len(error) == iterations
    """
    name: str
    thetas: Tuple[float, ...]
    function_str: str
    iterations: int
    polynomial_degree: int
    learn_rate: float
    error: Tuple[float, ...]

    @property
    def final_error(self) -> float | None:
        return self.error[-1] if self.error else None


@dataclass(frozen=True)
class SGDExport:
    """
    Export record of one run: TrainResult + sampled curve.

    Field order is the JSON key order.
    """
    name: str
    thetas: Tuple[float, ...]
    function_str: str
    iterations: int
    polynomial_degree: int
    learn_rate: float
    x_points: Tuple[float, ...]
    y_points: Tuple[float, ...]
    error: Tuple[float, ...]

    @classmethod
    def from_result(cls, result: TrainResult, curve) -> "SGDExport":
        return cls(
            name=result.name,
            thetas=result.thetas,
            function_str=result.function_str,
            iterations=result.iterations,
            polynomial_degree=result.polynomial_degree,
            learn_rate=result.learn_rate,
            x_points=tuple(p.x for p in curve),
            y_points=tuple(p.y for p in curve),
            error=result.error,
        )

    def to_dict(self) -> Dict[str, Any]:
        # asdict keeps field order; tuples -> lists for JSON
        return {
            k: list(v) if isinstance(v, tuple) else v
            for k, v in asdict(self).items()
        }
