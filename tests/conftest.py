"""Shared pytest fixtures."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from envboot.core.config import reload_settings


TEMPLATE = "APP_NAME=Installer\nAPP_ENV=local\nAPP_KEY=\nAPP_DEBUG=true\n\n# Database\nDB_CONNECTION=sqlite\n"


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo handler changes made by ``setup_logging`` during CLI runs."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield
    finally:
        root.handlers = handlers
        root.setLevel(level)


@pytest.fixture()
def test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the settings at a temporary project directory with an env template."""

    template = tmp_path / ".env.example"
    template.write_text(TEMPLATE)
    (tmp_path / "database").mkdir()

    monkeypatch.setenv("ENV_FILE", str(tmp_path / ".env"))
    monkeypatch.setenv("ENV_EXAMPLE_FILE", str(template))
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'database' / 'database.sqlite'}")
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    reload_settings()
    return tmp_path


@pytest.fixture()
def env_template() -> str:
    """Contents written to ``.env.example`` by :func:`test_environment`."""

    return TEMPLATE
