"""Validate database credentials and store them in the env file."""
from __future__ import annotations

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError

from envboot.core.env_file import EnvFile
from envboot.schemas.database import DatabaseCredentials, InstallResponse


logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = (
    "Error: Could not connect to the database! Please, make sure the details are correct."
)
ENV_ERROR_MESSAGE = "Error: Could not write the database settings to the env file."


def build_url(credentials: DatabaseCredentials) -> URL:
    """Return the SQLAlchemy URL described by ``credentials``."""

    if credentials.connection.split("+", 1)[0] == "sqlite":
        return URL.create(credentials.connection, database=credentials.database)
    return URL.create(
        credentials.connection,
        username=credentials.username,
        password=credentials.password or None,
        host=credentials.hostname,
        port=credentials.port,
        database=credentials.database,
    )


def check_connection(credentials: DatabaseCredentials) -> bool:
    """Open and close a connection, reporting whether it succeeded."""

    url = build_url(credentials)
    try:
        engine = create_engine(url)
    except (SQLAlchemyError, ImportError):
        logger.exception("Unable to create an engine for %s", url)
        return False

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except (SQLAlchemyError, ImportError):
        logger.exception("Database connection check failed for %s", url)
        return False
    finally:
        engine.dispose()
    return True


def database_env_values(credentials: DatabaseCredentials) -> dict[str, str]:
    return {
        "DB_CONNECTION": credentials.connection,
        "DB_HOST": credentials.hostname,
        "DB_PORT": str(credentials.port),
        "DB_DATABASE": credentials.database,
        "DB_USERNAME": credentials.username,
        "DB_PASSWORD": credentials.password,
    }


def save_database_settings(env_file: EnvFile, credentials: DatabaseCredentials) -> bool:
    """Upsert the ``DB_*`` entries for ``credentials`` into ``env_file``."""

    try:
        return env_file.update(database_env_values(credentials))
    except (OSError, UnicodeError):
        logger.exception("Unable to write database settings to %s", env_file.path)
        return False


def configure_database(env_file: EnvFile, credentials: DatabaseCredentials) -> InstallResponse:
    """Check the connection, then persist the credentials on success."""

    if not check_connection(credentials):
        return InstallResponse(success=False, error=True, message=CONNECTION_ERROR_MESSAGE)

    if not save_database_settings(env_file, credentials):
        return InstallResponse(success=False, error=True, message=ENV_ERROR_MESSAGE)

    logger.info("Database settings stored in %s", env_file.path)
    return InstallResponse(
        success=True,
        error=False,
        message="Database settings saved.",
        data={"connection": credentials.connection, "database": credentials.database},
    )


__all__ = [
    "build_url",
    "check_connection",
    "configure_database",
    "database_env_values",
    "save_database_settings",
]
