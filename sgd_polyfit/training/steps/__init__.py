from .dataset_build_step import DatasetBuildStep
from .model_train_step import ModelTrainStep
from .curve_sample_step import CurveSampleStep
from .artifact_persist_step import ArtifactPersistStep
from .curve_report_step import CurveReportStep

__all__ = [
    "DatasetBuildStep",
    "ModelTrainStep",
    "CurveSampleStep",
    "ArtifactPersistStep",
    "CurveReportStep",
]
