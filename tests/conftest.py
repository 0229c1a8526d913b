"""
Pytest configuration for the SQL Storage Estimator.

Provides fixtures for:
- Isolated settings (no ambient ESTIMATOR_* / LOG_* environment leaking in)
- Common column layouts
"""

from __future__ import annotations

import logging
import os
from typing import Generator, List

import pytest

from storage_estimator.config import Settings, get_settings
from storage_estimator.domain import ColumnSpec, ColumnType


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """
    Strip estimator environment variables and run from an empty directory so a
    developer's `.env` cannot change defaults under test.
    """
    for key in list(os.environ):
        if key.startswith("ESTIMATOR_") or key in {"LOG_LEVEL", "LOG_JSON", "APP_ENV"}:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    root = logging.getLogger()
    level = root.level
    yield
    get_settings.cache_clear()
    # drop handlers installed by configure_logging; pytest manages its own
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    return Settings()


@pytest.fixture
def varchar_50() -> ColumnSpec:
    return ColumnSpec(type=ColumnType.VARCHAR, length=50)


@pytest.fixture
def mixed_columns() -> List[ColumnSpec]:
    """uuid(16) + datetime(8) + int(4) + text(100 + 2) + boolean(1) = 131 bytes."""
    return [
        ColumnSpec(type=ColumnType.UUID),
        ColumnSpec(type=ColumnType.DATETIME),
        ColumnSpec(type=ColumnType.INT),
        ColumnSpec(type=ColumnType.TEXT, length=100),
        ColumnSpec(type=ColumnType.BOOLEAN),
    ]
