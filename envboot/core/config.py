from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    """Runtime configuration values loaded from the environment."""

    env_file: Path = Field(default=Path(".env"))
    env_example_file: Path = Field(default=Path(".env.example"))
    database_url: str = Field(default="sqlite:///./database/database.sqlite")
    db_connection: str = Field(default="mysql")
    db_port: int = Field(default=3306, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    class Config:
        frozen = True


def _get_env(name: str) -> Optional[str]:
    """Read an environment variable stripping whitespace and empty values."""

    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _build_settings() -> Settings:
    """Construct settings object from environment variables."""

    return Settings(
        env_file=Path(os.getenv("ENV_FILE", ".env")),
        env_example_file=Path(os.getenv("ENV_EXAMPLE_FILE", ".env.example")),
        database_url=os.getenv(
            "DATABASE_URL", "sqlite:///./database/database.sqlite"
        ),
        db_connection=_get_env("DB_CONNECTION") or "mysql",
        db_port=int(os.getenv("DB_PORT", "3306")),
        log_level=_get_env("LOG_LEVEL") or "INFO",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    load_dotenv(override=False)
    return _build_settings()


def reload_settings() -> Settings:
    """Clear the settings cache and rebuild the configuration."""

    get_settings.cache_clear()  # type: ignore[attr-defined]
    return get_settings()


__all__ = ["Settings", "get_settings", "reload_settings"]
