from __future__ import annotations

import logging

from gridkit.runtime.errors import (
    RECOVERABLE_RUNTIME_ERRORS,
    GestureError,
    InvalidGestureSequenceError,
    log_recoverable,
)


def test_sequence_error_carries_item_and_phase() -> None:
    error = InvalidGestureSequenceError("a", "move", "drag move received before drag start")
    assert isinstance(error, GestureError)
    assert error.item_id == "a"
    assert error.phase == "move"
    assert str(error) == "drag move received before drag start (item='a', phase=move)"


def test_recoverable_errors_cover_lookup_failures() -> None:
    assert issubclass(KeyError, RECOVERABLE_RUNTIME_ERRORS)
    assert issubclass(GestureError, RECOVERABLE_RUNTIME_ERRORS)


def test_log_recoverable_attaches_traceback(caplog) -> None:
    logger = logging.getLogger("gridkit.test.errors")
    with caplog.at_level(logging.DEBUG, logger="gridkit.test.errors"):
        try:
            raise KeyError("slot")
        except KeyError:
            log_recoverable(logger, "lookup failed", level=logging.WARNING)
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.exc_info is not None
    assert record.getMessage() == "lookup failed"
