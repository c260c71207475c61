# tests/training/conftest.py
from __future__ import annotations

import pytest

from sgd_polyfit.config.app_config import AppConfig


@pytest.fixture
def app_config(make_config_file) -> AppConfig:
    """
    Small AppConfig: 20 points, 30 passes, two runs, export under tmp_path.
    """
    return AppConfig.load(path=str(make_config_file()))
