# sgd_polyfit/training/steps/artifact_persist_step.py
from __future__ import annotations

from sgd_polyfit.utils.logger import logs
from sgd_polyfit.utils.filesystem import FileSystem
from sgd_polyfit.pipeline.step import PipelineStep
from sgd_polyfit.training.context import TrainingContext
from sgd_polyfit.training.engines.export_engine import ExportEngine


class ArtifactPersistStep(PipelineStep):
    """
    ArtifactPersistStep（FINAL / FROZEN）

    Semantics:
    - Persist the generated points and every run export as JSON
    - Output is meant for an external plotting notebook
    - Registers the written paths in ctx.artifacts
    """

    stage = "training_finalize"

    def __init__(self, inst=None, engine: ExportEngine | None = None):
        super().__init__(inst)
        self.engine = engine if engine is not None else ExportEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.points is None:
            raise RuntimeError("No points to persist")

        cfg = ctx.cfg.export
        export_dir = FileSystem.ensure_dir(ctx.export_dir)

        if FileSystem.file_exists(export_dir / cfg.results_file):
            logs.info(f"[ArtifactPersistStep] overwrite {export_dir / cfg.results_file}")

        with self.inst.timer(self.step_name):
            points_path = self.engine.write_points(
                ctx.points, export_dir / cfg.points_file
            )
            results_path = self.engine.write_results(
                ctx.exports, export_dir / cfg.results_file
            )

        ctx.artifacts["points"] = points_path
        ctx.artifacts["results"] = results_path

        logs.info(f"[ArtifactPersistStep] saved {points_path}")
        logs.info(f"[ArtifactPersistStep] saved {results_path} runs={len(ctx.exports)}")

        return ctx
