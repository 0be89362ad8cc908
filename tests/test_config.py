"""Tests for settings, logging setup and storage wiring."""

import logging

import structlog

from src.api import dependencies
from src.core.config import Settings
from src.core.logging import configure_logging
from src.storage import HashedStorage, LinkedStorage


def test_settings_defaults(monkeypatch):
    """Test defaults when nothing is set in the environment."""
    for var in ("STORAGE_BACKEND", "STORAGE_INITIAL_ID", "APP_PORT", "LOG_FILE"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)
    assert settings.storage_backend == "hashed"
    assert settings.storage_initial_id == 1
    assert settings.app_port == 8080
    assert settings.log_file is None
    assert settings.is_development is True


def test_settings_from_environment(monkeypatch):
    """Test environment variables override defaults."""
    monkeypatch.setenv("STORAGE_BACKEND", "linked")
    monkeypatch.setenv("STORAGE_INITIAL_ID", "100")
    monkeypatch.setenv("APP_ENV", "production")

    settings = Settings(_env_file=None)
    assert settings.storage_backend == "linked"
    assert settings.storage_initial_id == 100
    assert settings.is_production is True


def test_get_storage_uses_settings(monkeypatch):
    """Test the storage singleton follows the configured backend."""
    monkeypatch.setattr(dependencies, "_storage", None)
    monkeypatch.setattr(
        dependencies,
        "settings",
        Settings(_env_file=None, storage_backend="linked", storage_initial_id=7),
    )

    storage = dependencies.get_storage()
    assert isinstance(storage, LinkedStorage)
    assert storage.add("first") == 7
    assert dependencies.get_storage() is storage


def test_get_storage_default_backend(monkeypatch):
    monkeypatch.setattr(dependencies, "_storage", None)
    monkeypatch.setattr(dependencies, "settings", Settings(_env_file=None, storage_backend="hashed"))

    assert isinstance(dependencies.get_storage(), HashedStorage)


def test_log_file_receives_lines(tmp_path):
    """Test log lines are appended to the configured file."""
    log_file = tmp_path / "log.txt"
    configure_logging(Settings(_env_file=None, log_file=str(log_file), log_format="json"))
    try:
        structlog.get_logger("notes-test").info("Note created", note_id=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Note created" in content
        assert '"note_id": 3' in content
    finally:
        configure_logging(Settings(_env_file=None))

    assert "notes-log-file" not in [h.get_name() for h in logging.getLogger().handlers]
