from .app_config import AppConfig
from .data_config import DataConfig
from .export_config import ExportConfig
from .log_config import LogConfig
from .training_config import DEFAULT_ITERATIONS, RunConfig, TrainingConfig

__all__ = [
    "AppConfig",
    "DataConfig",
    "ExportConfig",
    "LogConfig",
    "RunConfig",
    "TrainingConfig",
    "DEFAULT_ITERATIONS",
]
