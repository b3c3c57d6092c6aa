"""Logging setup: configure root logger with console + async file handlers."""

from __future__ import annotations

import atexit
import logging
from pathlib import Path

from smartlog.logging.constants import resolve_level
from smartlog.logging.formatters import SmartFormatter, PlainFormatter, JsonFormatter
from smartlog.logging.handlers import create_async_handler, create_error_handler
from smartlog.logging.sink import FallbackHandler

_listeners: list = []
_atexit_registered = False


def setup_logging(
    level: str | None = None,
    log_dir: str | None = None,
) -> None:
    """Configure root logger with console + async file handlers.

    Level and directory resolution: explicit arg > settings (SMARTLOG_* env).
    """
    global _atexit_registered
    from smartlog.config import settings

    resolved = level or settings.log_level
    log_dir = log_dir or settings.log_dir
    root = logging.getLogger()
    root.setLevel(resolve_level(resolved))

    # Remove existing handlers to avoid duplicates on re-init
    root.handlers.clear()
    _shutdown_listeners()
    _remove_fallback_handlers()

    # 1. Console handler (colored)
    console = logging.StreamHandler()
    console.setFormatter(SmartFormatter())
    root.addHandler(console)

    # 2. File handlers (async)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_handler, file_listener = create_async_handler(
        str(log_path / "smartlog.log"),
        formatter=PlainFormatter(),
    )
    _attach(root, file_handler, file_listener)

    error_handler, error_listener = create_error_handler(
        str(log_path / "smartlog_error.log"),
        formatter=PlainFormatter(),
    )
    _attach(root, error_handler, error_listener)

    # 3. Optional JSONL handler
    if settings.log_json:
        json_handler, json_listener = create_async_handler(
            str(log_path / "smartlog.jsonl"),
            formatter=JsonFormatter(),
        )
        _attach(root, json_handler, json_listener)

    if not _atexit_registered:
        atexit.register(_shutdown_listeners)
        _atexit_registered = True


def _attach(root: logging.Logger, handler: logging.Handler, listener) -> None:
    root.addHandler(handler)
    listener.start()
    _listeners.append(listener)


def _remove_fallback_handlers() -> None:
    for logger in [logging.getLogger(), *logging.Logger.manager.loggerDict.values()]:
        if not isinstance(logger, logging.Logger):
            continue
        for handler in list(logger.handlers):
            if isinstance(handler, FallbackHandler):
                logger.removeHandler(handler)


def _shutdown_listeners() -> None:
    for listener in _listeners:
        listener.stop()
    _listeners.clear()
