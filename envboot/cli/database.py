"""Validate database credentials and write them to the env file."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from envboot.core.config import get_settings
from envboot.core.env_file import EnvFile
from envboot.schemas.database import DatabaseCredentials
from envboot.setup.database import configure_database

from .utils import fail


def configure(
    hostname: str = typer.Option(..., help="Database server host"),
    database: str = typer.Option(..., help="Database name"),
    username: str = typer.Option(..., help="Database user"),
    password: Optional[str] = typer.Option(
        None, help="Database password (prompted when omitted)", show_default=False
    ),
    port: Optional[int] = typer.Option(None, help="Port (defaults to DB_PORT)"),
    connection: Optional[str] = typer.Option(
        None, help="SQLAlchemy driver name (defaults to DB_CONNECTION)"
    ),
    env_file: Optional[Path] = typer.Option(
        None, dir_okay=False, help="Env file to update (defaults to ENV_FILE)"
    ),
) -> None:
    """Check the database connection and store its settings."""

    settings = get_settings()
    if password is None:
        password = typer.prompt("Password", hide_input=True, default="", show_default=False)

    values = {
        "hostname": hostname,
        "database": database,
        "username": username,
        "password": password,
        "port": port,
        "connection": connection,
    }
    try:
        credentials = DatabaseCredentials(
            **{name: value for name, value in values.items() if value is not None}
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    response = configure_database(EnvFile(env_file or settings.env_file), credentials)
    if not response.success:
        fail(response.message or "Database configuration failed.")
    typer.echo(response.message)


if __name__ == "__main__":
    typer.run(configure)
