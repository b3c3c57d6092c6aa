"""Async file logging handlers using QueueHandler + QueueListener."""

from __future__ import annotations

import logging
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from queue import Queue


def create_async_handler(
    log_path: str,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    formatter: logging.Formatter | None = None,
    level: int | None = None,
) -> tuple[QueueHandler, QueueListener]:
    """Create an async rotating file handler.

    Returns (queue_handler, listener). Caller must call listener.start()
    and listener.stop() at shutdown.
    """
    queue: Queue = Queue(-1)
    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8",
    )
    if level is not None:
        file_handler.setLevel(level)
    file_handler.setFormatter(formatter or logging.Formatter("%(message)s"))
    listener = QueueListener(queue, file_handler, respect_handler_level=True)
    return QueueHandler(queue), listener


def create_error_handler(
    log_path: str,
    formatter: logging.Formatter | None = None,
    **kwargs,
) -> tuple[QueueHandler, QueueListener]:
    """Async file handler that only keeps ERROR and above."""
    return create_async_handler(
        log_path, formatter=formatter, level=logging.ERROR, **kwargs,
    )
