"""Gridkit logging setup driven by runtime config."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from gridkit.api.logging import JsonFormatter, LoggingConfig
from gridkit.runtime.config import RuntimeConfig, get_runtime_config

_QUEUE_LISTENER: QueueListener | None = None
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoggingConfig) -> None:
    """Install root handlers for ``config``.

    A file sink is served by a ``QueueListener``; console-only setups log
    synchronously.
    """
    shutdown_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return
    _start_listener(root, handlers)


def configure_from_runtime_config(config: RuntimeConfig | None = None) -> LoggingConfig:
    """Apply the ``logging`` section of the active (or given) runtime config."""
    resolved = (config if config is not None else get_runtime_config()).logging
    configure_logging(resolved)
    return resolved


def setup_logging(config: RuntimeConfig | None = None) -> None:
    """Configure logging from ``GRIDKIT_LOG_*`` settings if no handlers are present."""
    if logging.getLogger().handlers:
        return
    configure_from_runtime_config(config)


def shutdown_logging() -> None:
    """Flush and stop the file-streaming listener if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    for handler in _QUEUE_LISTENER.handlers:
        handler.close()
    _QUEUE_LISTENER = None


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        sink.setFormatter(_formatter_for(config.file_format))
        handlers.append(sink)
    return handlers


def _start_listener(root: logging.Logger, handlers: list[logging.Handler]) -> None:
    global _QUEUE_LISTENER

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)


__all__ = [
    "configure_from_runtime_config",
    "configure_logging",
    "setup_logging",
    "shutdown_logging",
]
