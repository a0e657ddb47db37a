"""Gesture error types and shared exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias


class GestureError(RuntimeError):
    """Base error for gesture protocol failures."""


class InvalidGestureSequenceError(GestureError):
    """Gesture event delivered out of start -> move* -> stop order."""

    def __init__(self, item_id: str, phase: str, message: str) -> None:
        super().__init__(f"{message} (item={item_id!r}, phase={phase})")
        self.item_id = item_id
        self.phase = phase


# Errors a host callback may raise without ending the interactive session.
RecoverableRuntimeErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_RUNTIME_ERRORS: RecoverableRuntimeErrors = (
    RuntimeError,
    ValueError,
    TypeError,
    AttributeError,
    LookupError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)


__all__ = [
    "GestureError",
    "InvalidGestureSequenceError",
    "RECOVERABLE_RUNTIME_ERRORS",
    "RecoverableRuntimeErrors",
    "log_recoverable",
]
