#!filepath: sgd_polyfit/__init__.py

from .utils.logger import Logging, logs
from .utils.filesystem import FileSystem
from .utils.random_source import RandomSource
from .utils.errors import InvalidConfiguration
from .config.app_config import AppConfig

__version__ = "0.1.0"

# alias
fs = FileSystem

__all__ = [
    "logs", "Logging",
    "fs",
    "RandomSource",
    "InvalidConfiguration",
    "AppConfig",
    "__version__",
]
