"""StructuredLogger wrapper over stdlib loggers."""

from __future__ import annotations

import logging

from smartlog.logging.constants import VERBOSE


class StructuredLogger:
    """Stdlib logger wrapper; **kwargs become the record's ``extra_data``.

    Sinks call ``_log`` directly with a numeric level. The named methods
    cover the levels the package itself logs at.
    """

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: str, args: tuple, kwargs: dict) -> None:
        if not self._logger.isEnabledFor(level):
            return
        exc_info = kwargs.pop("exc_info", None)
        record = self._logger.makeRecord(
            self._logger.name, level, "", 0, msg, args,
            exc_info=exc_info, extra={"extra_data": kwargs},
        )
        self._logger.handle(record)

    def verbose(self, msg: str, *args, **kwargs) -> None:
        self._log(VERBOSE, msg, args, kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, args, kwargs)


_loggers: dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Get or create a StructuredLogger for the given module name."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(logging.getLogger(name))
    return _loggers[name]
