"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from classroom_admin.config import Settings
from classroom_admin.infrastructure.logging.log_config import _parse_level


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_apper_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("APPER_PROJECT_ID", "proj-123")
    monkeypatch.setenv("APPER_PUBLIC_KEY", "pk-abc")
    monkeypatch.setenv("APPER_TIMEOUT_SECONDS", "5")

    settings = Settings()

    assert settings.apper_project_id == "proj-123"
    assert settings.apper_public_key == "pk-abc"
    assert settings.apper_timeout_seconds == 5.0


def test_parse_level_defaults_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("nonsense") == logging.INFO
