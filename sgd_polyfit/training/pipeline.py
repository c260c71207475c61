# sgd_polyfit/training/pipeline.py
from __future__ import annotations

from pathlib import Path
from typing import List

from sgd_polyfit.utils.logger import logs
from sgd_polyfit.utils.random_source import RandomSource
from sgd_polyfit.config.app_config import AppConfig
from sgd_polyfit.observability.instrumentation import Instrumentation
from sgd_polyfit.pipeline.step import PipelineStep
from sgd_polyfit.training.context import TrainingContext


class TrainingPipeline:
    """
    TrainingPipeline（FINAL）

    Semantics:
    - Pipeline owns the run lifecycle and the random source
    - Steps execute semantics, in order
    - Pipeline never times steps; steps record their own leaf timers
    """

    def __init__(
            self,
            *,
            steps: List[PipelineStep],
            cfg: AppConfig,
            inst: Instrumentation,
    ):
        self.steps = steps
        self.cfg = cfg
        self.inst = inst

    def run(self, run_id: str) -> TrainingContext:
        logs.info(f"[TrainingPipeline] START run_id={run_id}")

        # one seeded source per run: reruns are bit-identical
        ctx = TrainingContext(
            run_id=run_id,
            cfg=self.cfg,
            inst=self.inst,
            rng=RandomSource(self.cfg.data.seed),
            export_dir=Path(self.cfg.export.notebook_dir),
        )

        for step in self.steps:
            ctx = step.run(ctx)

        self.inst.generate_timeline_report(run_id)

        logs.info(
            f"[TrainingPipeline] DONE runs={len(ctx.results)} "
            f"metrics={self.inst.metrics.snapshot()}"
        )
        return ctx
