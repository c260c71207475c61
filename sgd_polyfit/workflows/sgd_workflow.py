#!filepath: sgd_polyfit/workflows/sgd_workflow.py
from __future__ import annotations

from datetime import datetime

from sgd_polyfit.utils.logger import logs
from sgd_polyfit.config.app_config import AppConfig
from sgd_polyfit.observability.instrumentation import Instrumentation
from sgd_polyfit.training.context import TrainingContext
from sgd_polyfit.training.pipeline import TrainingPipeline
from sgd_polyfit.training.steps import (
    ArtifactPersistStep,
    CurveReportStep,
    CurveSampleStep,
    DatasetBuildStep,
    ModelTrainStep,
)


def build_training_pipeline(
        cfg: AppConfig,
        inst: Instrumentation | None = None,
) -> TrainingPipeline:
    """
    points -> train (per run) -> sample curves -> JSON export [-> PNG report]
    """
    inst = inst if inst is not None else Instrumentation()

    steps = [
        DatasetBuildStep(inst),
        ModelTrainStep(inst),
        CurveSampleStep(inst),
        ArtifactPersistStep(inst),
    ]
    if cfg.export.plot:
        steps.append(CurveReportStep(inst))

    return TrainingPipeline(steps=steps, cfg=cfg, inst=inst)


def new_run_id() -> str:
    return datetime.now().strftime("sgd_%Y%m%d_%H%M%S")


@logs.catch("SGD training run failed")
def run_sgd(cfg: AppConfig, run_id: str | None = None) -> TrainingContext:
    pipeline = build_training_pipeline(cfg)
    return pipeline.run(run_id or new_run_id())
