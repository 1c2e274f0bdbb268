"""Logging utilities tagging records with the current bootstrap step."""
from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from envboot.core.config import get_settings


_step_ctx_var: ContextVar[str | None] = ContextVar("bootstrap_step", default=None)


def get_current_step() -> str | None:
    """Return the bootstrap step running in the current context."""

    return _step_ctx_var.get()


@contextmanager
def bootstrap_step(name: str) -> Iterator[None]:
    """Mark log records emitted inside the block with ``name``."""

    token = _step_ctx_var.set(name)
    try:
        yield
    finally:
        _step_ctx_var.reset(token)


class StepFilter(logging.Filter):
    """Inject the bootstrap step in each log record."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.step = get_current_step() or "-"
        return True


def setup_logging() -> None:
    """Configure logging handlers and formatters."""

    settings = get_settings()
    logger = logging.getLogger()
    logger.setLevel(settings.log_level)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(step)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(StepFilter())

    logger.handlers = [handler]


__all__ = ["StepFilter", "bootstrap_step", "get_current_step", "setup_logging"]
