from __future__ import annotations

from sgd_polyfit.utils.logger import logs
from sgd_polyfit.pipeline.step import PipelineStep
from sgd_polyfit.training.context import TrainingContext
from sgd_polyfit.training.engines.point_generator_engine import PointGeneratorEngine


class DatasetBuildStep(PipelineStep):
    """
    DatasetBuildStep（FINAL）

    Contract:
    - consumes ctx.cfg.data, ctx.rng
    - produces ctx.points (immutable for the rest of the run)
    - first consumer of the random source
    """

    stage = "dataset_build"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        cfg = ctx.cfg.data

        with self.inst.timer(self.step_name):
            engine = PointGeneratorEngine.from_config(cfg, ctx.rng)
            ctx.points = engine.generate(cfg.num_points)

        logs.info(
            f"[DatasetBuildStep] points={len(ctx.points)} "
            f"noise=[{cfg.noise_low}, {cfg.noise_high}] seed={cfg.seed}"
        )
        return ctx
