#!filepath: sgd_polyfit/config/app_config.py
import os

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .data_config import DataConfig
from .training_config import TrainingConfig
from .export_config import ExportConfig
from sgd_polyfit.utils.logger import logs


def package_root() -> str:
    """
    sgd_polyfit/config/app_config.py -> sgd_polyfit
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def default_config_path() -> str:
    return os.path.join(package_root(), "config", "base.yml")


# env var -> (section, key)
_ENV_OVERRIDES = {
    "SGD_POLYFIT_SEED": ("data", "seed"),
    "SGD_POLYFIT_NOTEBOOK_DIR": ("export", "notebook_dir"),
    "SGD_POLYFIT_LOG_LEVEL": ("log", "level"),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default: sgd_polyfit/config/base.yml
        - .env is read from the working directory
        - SGD_POLYFIT_* variables override file values
        """

        # 1) .env first so overrides below can see it
        load_dotenv(find_dotenv(usecwd=True))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env overrides
        for env_name, (section, key) in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None or value == "":
                continue
            raw.setdefault(section, {})[key] = value
            logs.debug(f"[AppConfig] {section}.{key} <- ${env_name}")

        return cls(**raw)
