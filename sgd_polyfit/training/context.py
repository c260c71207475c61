# sgd_polyfit/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from sgd_polyfit.training.engines.train_result import SGDExport, TrainResult
from sgd_polyfit.training.types import Points
from sgd_polyfit.utils.random_source import RandomSource


@dataclass
class TrainingContext:
    """
    TrainingContext（FINAL）

    Semantics:
    - One context == one pipeline run
    - run_id is immutable and mandatory
    - results[i] / curves[i] / exports[i] belong to cfg.training.runs[i]
    """

    # -------------------------
    # Identity
    # -------------------------
    run_id: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: Any
    inst: Any
    rng: RandomSource
    export_dir: Path

    # -------------------------
    # Rolling state
    # -------------------------
    points: Optional[Points] = None
    results: List[TrainResult] = field(default_factory=list)
    curves: List[Points] = field(default_factory=list)
    exports: List[SGDExport] = field(default_factory=list)

    artifacts: Dict[str, Path] = field(default_factory=dict)
    metrics: Dict[str, Any] = field(default_factory=dict)
