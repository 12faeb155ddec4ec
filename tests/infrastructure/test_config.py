"""Tests for environment-driven settings."""

from pathlib import Path

from marketplace.infrastructure.config import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("MARKET_DATA_DIR", "MARKET_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.environment == "development"
    assert settings.log_level == "DEBUG"
    assert settings.data_dir == Path.cwd() / "data"
    assert not settings.is_production


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MARKET_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MARKET_ENV", "Production")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings.from_env()
    assert settings.data_dir == Path(tmp_path)
    assert settings.is_production
    assert settings.log_level == "INFO"


def test_explicit_log_level_wins(monkeypatch):
    monkeypatch.setenv("MARKET_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert Settings.from_env().log_level == "ERROR"
