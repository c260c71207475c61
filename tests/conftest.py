# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from loguru import logger

from sgd_polyfit.training.engines.point_generator_engine import PointGeneratorEngine
from sgd_polyfit.utils.random_source import RandomSource

SEED = 28051998


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("SGD_POLYFIT_SEED", "SGD_POLYFIT_NOTEBOOK_DIR", "SGD_POLYFIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(SEED)


@pytest.fixture
def sin_points():
    """
    100 points of sin(2*pi*x) + U[-0.3, 0.3], fixed seed.
    """
    return PointGeneratorEngine(RandomSource(SEED)).generate(100)


@pytest.fixture
def make_config_file(tmp_path: Path):
    """
    Factory fixture writing a small YAML config under tmp_path.

    Usage:
        path = make_config_file()
        path = make_config_file(training={"iterations": 3})
    """

    def _make(**sections) -> Path:
        data = {
            "log": {"level": "DEBUG", "to_file": False},
            "data": {"num_points": 20, "seed": SEED},
            "training": {
                "iterations": 30,
                "runs": [
                    {"learn_rate": 0.1, "polynomial_degree": 3},
                    {"learn_rate": 0.05, "polynomial_degree": 1},
                ],
            },
            "export": {"notebook_dir": str(tmp_path / "notebook")},
        }
        for name, values in sections.items():
            data.setdefault(name, {}).update(values)

        path = tmp_path / "config.yml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _make
