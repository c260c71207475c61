from __future__ import annotations

from sgd_polyfit.utils.logger import logs
from sgd_polyfit.pipeline.step import PipelineStep
from sgd_polyfit.training.context import TrainingContext
from sgd_polyfit.training.engines.curve_report_engine import CurveReportEngine


class CurveReportStep(PipelineStep):
    """
    CurveReportStep（FINAL）

    Responsibility:
    - Render fit + error PNGs for every run into <export_dir>/reports

    Contract:
    - consumes ctx.points, ctx.exports
    - does NOT mutate results
    """

    stage = "curve_report"

    def __init__(self, inst=None, engine: CurveReportEngine | None = None):
        super().__init__(inst)
        self.engine = engine if engine is not None else CurveReportEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if not ctx.exports:
            logs.warning("[CurveReportStep] no exports found, skip report")
            return ctx

        out_dir = ctx.export_dir / "reports"

        with self.inst.timer(self.step_name):
            for export in ctx.exports:
                fit_path = self.engine.plot_fit(ctx.points, export, out_dir)
                err_path = self.engine.plot_error(export, out_dir)

                ctx.artifacts[f"fit@{export.name}"] = fit_path
                ctx.artifacts[f"error@{export.name}"] = err_path

                logs.info(f"[CurveReportStep] saved {fit_path}")
                logs.info(f"[CurveReportStep] saved {err_path}")

        return ctx
