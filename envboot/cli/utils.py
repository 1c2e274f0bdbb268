"""Utility helpers for CLI commands."""
from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from envboot.core.env_file import EnvFile


def parse_assignment(raw: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` on its first ``=``."""

    key, separator, value = raw.partition("=")
    key = key.strip()
    if not separator or not key:
        raise typer.BadParameter(f"Expected KEY=VALUE, got {raw!r}")
    return key, value


def fail(message: str, *, code: int = 1) -> NoReturn:
    """Print ``message`` on stderr and stop with a non-zero exit code."""

    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=code)


def update_env_file(target: EnvFile, updates: Mapping[str, str]) -> bool:
    """Upsert ``updates`` into ``target``, failing on unreadable files."""

    try:
        return target.update(updates)
    except (OSError, UnicodeError) as exc:
        fail(f"Unable to update {target.path}: {exc}")
