"""Tests for :mod:`envboot.core.logging`."""
from __future__ import annotations

import logging

from envboot.core.logging import StepFilter, bootstrap_step, get_current_step, setup_logging


def _record() -> logging.LogRecord:
    return logging.LogRecord("installer", logging.INFO, __file__, 1, "message", None, None)


def test_step_filter_tags_records() -> None:
    step_filter = StepFilter()

    outside = _record()
    step_filter.filter(outside)
    assert outside.step == "-"

    with bootstrap_step("env"):
        assert get_current_step() == "env"
        inside = _record()
        step_filter.filter(inside)
    assert inside.step == "env"
    assert get_current_step() is None


def test_setup_logging_installs_single_handler() -> None:
    setup_logging()
    setup_logging()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert any(isinstance(item, StepFilter) for item in handlers[0].filters)
