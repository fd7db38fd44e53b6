"""Pytest configuration and fixtures for githook-shimmer tests."""

import os

import pytest

from githook_shimmer import config as shimmer_config


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the user's LLM_GITHOOK_* variables and config file out of tests."""
    for key in list(os.environ):
        if key.startswith(shimmer_config.ENV_PREFIX) or key in ("COLORTERM", "TERM"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv(shimmer_config.CONFIG_FILE_ENV, str(tmp_path / "missing.cfg"))
    monkeypatch.setattr(shimmer_config, "CONFIG_FILE", str(tmp_path / "default.cfg"))
    yield
