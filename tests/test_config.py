"""Tests for runtime settings."""
from __future__ import annotations

from pathlib import Path

import pytest

from bridge_platform.config import CONFIG_DIRNAME, CONFIG_FILENAME, Settings, get_settings


def test_settings_read_prefixed_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BRIDGE_SAVE_PATH", str(tmp_path))
    monkeypatch.setenv("BRIDGE_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.save_path == tmp_path
    assert settings.log_level == "DEBUG"
    assert settings.config_dir == tmp_path / CONFIG_DIRNAME
    assert settings.config_path == tmp_path / CONFIG_DIRNAME / CONFIG_FILENAME


def test_settings_accept_unprefixed_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("BRIDGE_SAVE_PATH", raising=False)
    monkeypatch.setenv("SAVE_PATH", str(tmp_path))

    assert get_settings().save_path == tmp_path


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BRIDGE_SAVE_PATH", "SAVE_PATH", "BRIDGE_LOG_LEVEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.save_path == Path("tshock")
    assert settings.log_level == "INFO"


def test_blank_save_path_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRIDGE_SAVE_PATH", "   ")

    with pytest.raises(ValueError):
        Settings(_env_file=None)
