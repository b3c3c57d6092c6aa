"""Log sink: the write target every forwarded call ends up in."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol

from smartlog.logging.constants import VERBOSE
from smartlog.logging.formatters import SmartFormatter
from smartlog.logging.structured_logger import StructuredLogger, get_logger


class Severity(Enum):
    VERBOSE = VERBOSE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @property
    def level(self) -> int:
        return self.value


class LogSink(Protocol):
    def write(
        self,
        severity: Severity,
        tag: str,
        message: str,
        error: Any = None,
    ) -> None: ...


class FallbackHandler(logging.StreamHandler):
    """Console handler a sink installs when nothing else would print.

    setup_logging() removes it again so records are not printed twice.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(SmartFormatter())


class LoggingSink:
    """Writes to a stdlib logger, carrying the tag as structured data.

    Exceptions are attached as ``exc_info`` so handlers render the
    traceback; any other error object is logged as ``error=<repr>``.

    The mode decides what is written, so a logger without its own level
    is opened down to VERBOSE instead of inheriting the root's WARNING.
    If no handler would receive the records, a console FallbackHandler
    is attached.
    """

    def __init__(self, logger: StructuredLogger | None = None) -> None:
        self._logger = logger or get_logger("smartlog")
        stdlib_logger = logging.getLogger(self._logger.name)
        if stdlib_logger.level == logging.NOTSET:
            stdlib_logger.setLevel(VERBOSE)
        if not stdlib_logger.hasHandlers():
            stdlib_logger.addHandler(FallbackHandler())

    def write(
        self,
        severity: Severity,
        tag: str,
        message: str,
        error: Any = None,
    ) -> None:
        kwargs: dict[str, Any] = {"_tag": tag}
        if isinstance(error, BaseException):
            kwargs["exc_info"] = (type(error), error, error.__traceback__)
        elif error is not None:
            kwargs["error"] = repr(error)
        self._logger._log(severity.level, message, (), kwargs)
