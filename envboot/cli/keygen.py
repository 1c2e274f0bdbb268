"""Generate and persist the application key."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from envboot.core.config import get_settings
from envboot.core.env_file import EnvFile
from envboot.core.security import KeyGenerationError, generate_key

from .utils import fail, update_env_file


def generate(
    env_file: Optional[Path] = typer.Option(
        None,
        dir_okay=False,
        help="Env file to update with the generated key (defaults to ENV_FILE)",
    ),
    show: bool = typer.Option(
        False, "--show", help="Display the key instead of writing it"
    ),
) -> None:
    """Generate a new APP_KEY and store it inside the env file."""

    try:
        key = generate_key()
    except KeyGenerationError as exc:
        fail(str(exc))

    if show:
        typer.echo(key)
        return

    target = EnvFile(env_file or get_settings().env_file)
    if not update_env_file(target, {"APP_KEY": key}):
        fail(f"Unable to set the application key: {target.path} does not exist.")
    typer.echo(f"Application key set successfully in {target.path}.")


if __name__ == "__main__":
    typer.run(generate)
