# sgd_polyfit/training/steps/model_train_step.py
from __future__ import annotations

from sgd_polyfit.utils.logger import logs
from sgd_polyfit.pipeline.step import PipelineStep
from sgd_polyfit.training.context import TrainingContext
from sgd_polyfit.training.engines.sgd_train_engine import SGDTrainEngine


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep（FINAL）

    Contract:
    - consumes ctx.points
    - trains once per cfg.training.runs entry, in order
    - produces ctx.results (same order as the runs)
    """

    stage = "model_train"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.points is None:
            raise RuntimeError("No dataset to train on; run DatasetBuildStep first")

        cfg = ctx.cfg.training
        engine = SGDTrainEngine.from_config(cfg, ctx.rng, progress=self.inst.progress)

        with self.timed():
            self._train_runs(ctx, engine, cfg.runs)

        return ctx

    def _train_runs(self, ctx: TrainingContext, engine: SGDTrainEngine, runs) -> None:
        for run in runs:
            with self.inst.timer(f"{self.step_name}[{run.name}]"):
                result = engine.train(
                    points=ctx.points,
                    learn_rate=run.learn_rate,
                    polynomial_degree=run.polynomial_degree,
                )

            ctx.results.append(result)

            key = f"rms_final@{result.name}"
            ctx.metrics[key] = result.final_error
            self.inst.metrics.record(key, result.final_error)

            logs.info(f"[ModelTrainStep] {result.name} -> {result.function_str}")
