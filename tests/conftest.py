"""Root conftest: shared test configuration."""

import os

import pytest

from tazkiyatech_utils.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Every test starts from library defaults.

    Drops TAZKIYATECH_* variables from the environment, runs from an empty
    directory so no .env file is read, and clears the lru_cached settings.
    """
    for key in list(os.environ):
        if key.upper().startswith("TAZKIYATECH_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
