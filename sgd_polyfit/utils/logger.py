#!filepath: sgd_polyfit/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    Project logger facade over loguru
    ---------------------------------------
    - stderr sink always on
    - optional file sink, rotated by date
    - retention period for old files
    - function-level logging decorator
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        """
        Reset every loguru sink and install ours.
        """

        logger.remove()

        logger.add(sink=sys.stderr, level=self.level, format=_FORMAT)

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=_FORMAT,
                backtrace=True,
                diagnose=True,
            )

    def configure(self, cfg) -> "Logging":
        """
        Re-initialise sinks from a LogConfig.
        """
        self.log_dir = cfg.dir if cfg.to_file else None
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level
        self._configure()
        logger.debug(f"[Logging] configured level={self.level} dir={self.log_dir}")
        return self

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorator ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    self.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    self.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# global logs; the CLI re-configures it from LogConfig
logs = Logging()
