"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

import pytest

from app.config import Settings
from app.infrastructure.logging import log_config


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_storage_backend_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "json")
    monkeypatch.setenv("JSON_STORE_DIR", "/tmp/billing-store")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "json"
    assert settings.json_store_dir == "/tmp/billing-store"


def test_unknown_storage_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "redis")
    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_setup_logging_applies_group_levels(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_SQL", "ERROR")
    monkeypatch.setenv("LOG_LEVEL_BILLING", "DEBUG")
    monkeypatch.setattr(log_config, "get_settings", lambda: Settings(_env_file=None))

    log_config.setup_logging()

    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("app.application.services").level == logging.DEBUG


def test_unknown_level_name_falls_back_to_info():
    assert log_config._parse_level("chatty") == logging.INFO
    assert log_config._parse_level("warning") == logging.WARNING
