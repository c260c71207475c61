from __future__ import annotations

from sgd_polyfit.pipeline.step import PipelineStep
from sgd_polyfit.training.context import TrainingContext
from sgd_polyfit.training.engines.curve_sampler_engine import CurveSamplerEngine
from sgd_polyfit.training.engines.train_result import SGDExport


class CurveSampleStep(PipelineStep):
    """
    Sample every fitted curve on [0, 1) and build the export records.

    Contract:
    - consumes ctx.results
    - produces ctx.curves, ctx.exports
    - steps = cfg.export.curve_points, or the dataset size when unset
    """

    stage = "curve_sample"

    def __init__(self, inst=None, engine: CurveSamplerEngine | None = None):
        super().__init__(inst)
        self.engine = engine if engine is not None else CurveSamplerEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        steps = ctx.cfg.export.curve_points
        if steps is None:
            steps = len(ctx.points or ())

        with self.inst.timer(self.step_name):
            for result in ctx.results:
                curve = self.engine.sample(result.thetas, steps)
                ctx.curves.append(curve)
                ctx.exports.append(SGDExport.from_result(result, curve))

        return ctx
