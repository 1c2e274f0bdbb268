"""First-run bootstrap: database placeholder, env file and application key."""
from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from envboot.core.config import Settings, get_settings
from envboot.core.env_file import EnvFile
from envboot.core.logging import bootstrap_step
from envboot.core.security import KeyGenerationError, generate_key


logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class BootstrapError(RuntimeError):
    """Base class for failures that abort the bootstrap."""


class StorageInitError(BootstrapError):
    """Raised when the placeholder database file cannot be created."""


class TemplateCopyError(BootstrapError):
    """Raised when the env template cannot be copied to the live env file."""


class EnvUpdateError(BootstrapError):
    """Raised when the application key cannot be generated or written."""


@dataclass(frozen=True)
class BootstrapResult:
    database_path: Path
    env_path: Path
    app_key: str


def database_file_path(database_url: str) -> Path:
    """Return the file behind a ``sqlite:///`` SQLAlchemy URL."""

    try:
        url = make_url(database_url)
    except ArgumentError as exc:
        raise StorageInitError(f"Invalid database URL: {database_url!r}") from exc
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        raise StorageInitError(
            f"{database_url!r} does not point to a SQLite database file."
        )
    return Path(url.database)


def create_database_file(path: Path) -> Path:
    """Create (or truncate) an empty file at ``path``.

    Parent directories are not created.
    """

    try:
        with open(path, "wb"):
            pass
    except OSError as exc:
        raise StorageInitError(f"Unable to create database file {path}: {exc}") from exc
    logger.info("Created database file %s", path)
    return path


def copy_env_template(source: Path, destination: Path) -> Path:
    """Copy the env template byte-for-byte over ``destination``."""

    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise TemplateCopyError(
            f"Unable to copy {source} to {destination}: {exc}"
        ) from exc
    logger.info("Copied %s to %s", source, destination)
    return destination


def run_bootstrap(
    settings: Optional[Settings] = None,
    *,
    notify: Optional[Notifier] = None,
) -> BootstrapResult:
    """Run the bootstrap steps in order, stopping at the first failure."""

    settings = settings or get_settings()
    report: Notifier = notify or (lambda message: None)

    with bootstrap_step("database"):
        database_path = create_database_file(database_file_path(settings.database_url))
    report("Successfully created database file!")

    with bootstrap_step("env"):
        env_path = copy_env_template(settings.env_example_file, settings.env_file)
    report("Successfully generated .env file!")

    with bootstrap_step("key"):
        try:
            app_key = generate_key()
        except KeyGenerationError as exc:
            raise EnvUpdateError(f"Unable to generate the application key: {exc}") from exc
        try:
            updated = EnvFile(env_path).update({"APP_KEY": app_key})
        except (OSError, UnicodeError) as exc:
            raise EnvUpdateError(f"Unable to write APP_KEY to {env_path}: {exc}") from exc
        if not updated:
            raise EnvUpdateError(f"Unable to write APP_KEY to {env_path}")
        logger.info("Application key written to %s", env_path)
    report("Successfully set application key")

    return BootstrapResult(database_path=database_path, env_path=env_path, app_key=app_key)


__all__ = [
    "BootstrapError",
    "BootstrapResult",
    "EnvUpdateError",
    "StorageInitError",
    "TemplateCopyError",
    "copy_env_template",
    "create_database_file",
    "database_file_path",
    "run_bootstrap",
]
