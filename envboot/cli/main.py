"""Entry point grouping the installer commands."""
from __future__ import annotations

import typer

from envboot.core.logging import setup_logging

from . import database, env_set, init, keygen


app = typer.Typer(help="Prepare the application environment.", no_args_is_help=True)


@app.callback()
def main() -> None:
    """Configure logging before running a command."""

    setup_logging()


app.command("init")(init.run)
app.command("key-generate")(keygen.generate)
app.command("env-set")(env_set.set_values)
app.command("database")(database.configure)


if __name__ == "__main__":
    app()
