"""smartlog: mode-driven logging facade with entry/exit tracing and timing.

Public API:
    debug, info, verbose, warn, error  — Severity calls (mode + tag filtered)
    entry, exit, exit_and_return       — Entry/exit markers for the caller
    class_execution_total              — Cumulative ms measured for a class
    traced                             — Decorator for auto entry/exit
    SmartLog, ModeController, TimingTracker, LogMode, CallSite
"""

from smartlog.callsite import CallSite
from smartlog.controller import ModeController
from smartlog.decorator import traced
from smartlog.errors import SelfThrownError
from smartlog.facade import (
    SmartLog,
    class_execution_total,
    debug,
    entry,
    error,
    exit,
    exit_and_return,
    get_smartlog,
    info,
    log_class_totals,
    set_smartlog,
    verbose,
    warn,
)
from smartlog.logging import LoggingSink, Severity, setup_logging
from smartlog.modes import LogMode
from smartlog.timing import TimingTracker

__all__ = [
    "debug",
    "info",
    "verbose",
    "warn",
    "error",
    "entry",
    "exit",
    "exit_and_return",
    "class_execution_total",
    "log_class_totals",
    "get_smartlog",
    "set_smartlog",
    "setup_logging",
    "traced",
    "SmartLog",
    "ModeController",
    "TimingTracker",
    "LogMode",
    "Severity",
    "CallSite",
    "LoggingSink",
    "SelfThrownError",
]
