"""Set one or more entries of the env file."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from envboot.core.config import get_settings
from envboot.core.env_file import EnvFile

from .utils import fail, parse_assignment, update_env_file


def set_values(
    assignments: List[str] = typer.Argument(..., help="Entries in KEY=VALUE form"),
    env_file: Optional[Path] = typer.Option(
        None, dir_okay=False, help="Env file to update (defaults to ENV_FILE)"
    ),
) -> None:
    """Create or update entries in the env file, keeping every other line."""

    updates: dict[str, str] = {}
    for raw in assignments:
        key, value = parse_assignment(raw)
        updates[key] = value

    target = EnvFile(env_file or get_settings().env_file)
    if not update_env_file(target, updates):
        fail(f"Unable to update {target.path}: the file does not exist.")
    typer.echo(f"Updated {', '.join(updates)} in {target.path}.")


if __name__ == "__main__":
    typer.run(set_values)
