"""Create the SQLite database file, the env file and the application key."""
from __future__ import annotations

import typer

from envboot.core.config import get_settings
from envboot.setup.bootstrap import BootstrapError, run_bootstrap

from .utils import fail


def run() -> None:
    """Create an sqlite database file and the env file."""

    try:
        run_bootstrap(get_settings(), notify=typer.echo)
    except BootstrapError as exc:
        fail(str(exc))


if __name__ == "__main__":
    typer.run(run)
