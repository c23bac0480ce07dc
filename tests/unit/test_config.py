"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from hexpath.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("HEXPATH_MAX_ITERATIONS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.data_dir == Path("maps")
    assert settings.max_iterations == 10_000
    assert settings.shuffle_seed is None


def test_environment_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("HEXPATH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HEXPATH_MAX_ITERATIONS", "50")
    monkeypatch.setenv("HEXPATH_SHUFFLE_SEED", "replay")
    settings = Settings(_env_file=None)
    assert settings.data_dir == tmp_path
    assert settings.max_iterations == 50
    assert settings.shuffle_seed == "replay"


def test_rejects_non_positive_cap():
    with pytest.raises(ValidationError):
        Settings(max_iterations=0, _env_file=None)


def test_get_settings_creates_data_dir(monkeypatch, tmp_path):
    target = tmp_path / "store"
    monkeypatch.setenv("HEXPATH_DATA_DIR", str(target))
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.data_dir == target
        assert target.is_dir()
        assert get_settings() is settings
    finally:
        get_settings.cache_clear()
