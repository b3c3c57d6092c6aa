"""smartlog logging backend.

Public API:
    get_logger      — Get a StructuredLogger for a module
    setup_logging   — Configure root logger (call once at startup)
    LoggingSink     — Default sink writing through stdlib logging
    Severity        — Sink severities (VERBOSE..ERROR)
    StructuredLogger, SmartFormatter, PlainFormatter, JsonFormatter
"""

from smartlog.logging.constants import VERBOSE
from smartlog.logging.structured_logger import StructuredLogger, get_logger
from smartlog.logging.formatters import SmartFormatter, PlainFormatter, JsonFormatter
from smartlog.logging.sink import LoggingSink, LogSink, Severity
from smartlog.logging.setup import setup_logging

__all__ = [
    "VERBOSE",
    "get_logger",
    "setup_logging",
    "LoggingSink",
    "LogSink",
    "Severity",
    "StructuredLogger",
    "SmartFormatter",
    "PlainFormatter",
    "JsonFormatter",
]
