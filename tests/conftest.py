from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.read_csv'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Settings are cached; drop the cache so per-test env changes take effect
    for key in ("CELL_ERROR_POLICY", "CSV_QUOTING", "RECORD_ID_PREFIX", "DEFAULT_LANGUAGE", "REQUIRED_COLUMN"):
        monkeypatch.delenv(key, raising=False)
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
