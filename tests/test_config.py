"""Tests for settings loaded from the environment."""
from pathlib import Path

from envboot.core import config


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("ENV_FILE", "/srv/app/.env")
    monkeypatch.setenv("DB_PORT", "5432")
    monkeypatch.setenv("DB_CONNECTION", "  ")

    try:
        settings = config.reload_settings()
        assert settings.env_file == Path("/srv/app/.env")
        assert settings.db_port == 5432
        assert settings.db_connection == "mysql"
    finally:
        monkeypatch.delenv("ENV_FILE")
        monkeypatch.delenv("DB_PORT")
        monkeypatch.delenv("DB_CONNECTION")
        config.reload_settings()


def test_settings_defaults(monkeypatch):
    for name in ("ENV_FILE", "ENV_EXAMPLE_FILE", "DATABASE_URL", "DB_CONNECTION", "DB_PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = config.reload_settings()
    assert settings.env_file == Path(".env")
    assert settings.env_example_file == Path(".env.example")
    assert settings.database_url == "sqlite:///./database/database.sqlite"
    assert settings.db_connection == "mysql"
    assert settings.db_port == 3306
