"""SmartLog facade: tag filtering, the entry/exit switch, and free functions.

A ``SmartLog`` bundles a ModeController with the static switches that sit
in front of it. The module keeps one default instance, built lazily from
``smartlog.config.settings``; the free functions (``debug``, ``entry``, ...)
delegate to it. Tests and embedders can build isolated instances instead.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable
from typing import Any, Iterable, TypeVar

from smartlog.callsite import CallSite, caller_site
from smartlog.controller import ModeController
from smartlog.logging.sink import LogSink, Severity
from smartlog.logging.structured_logger import get_logger
from smartlog.modes import LogMode

logger = get_logger(__name__)

T = TypeVar("T")


class SmartLog:
    """Process-wide logging facade in front of a ModeController."""

    def __init__(
        self,
        controller: ModeController | None = None,
        *,
        entry_exit_enabled: bool = True,
        selective_debugging: bool = False,
        tags_to_debug: Iterable[str] = (),
    ):
        self.controller = controller or ModeController()
        self.entry_exit_enabled = entry_exit_enabled
        self.selective_debugging = selective_debugging
        self.tags_to_debug = frozenset(tags_to_debug)

    @classmethod
    def from_settings(cls, settings=None, sink: LogSink | None = None) -> SmartLog:
        if settings is None:
            from smartlog.config import settings
        return cls(
            ModeController(settings.mode, sink=sink),
            entry_exit_enabled=settings.entry_exit_enabled,
            selective_debugging=settings.selective_debugging,
            tags_to_debug=settings.tags_to_debug,
        )

    @property
    def mode(self) -> LogMode:
        return self.controller.mode

    def accepts(self, tag: str) -> bool:
        """True if severity calls with this tag pass the tag filter."""
        return not self.selective_debugging or tag in self.tags_to_debug

    # -- severity calls ---------------------------------------------------

    def log(self, severity: Severity, tag: str, message: str, error: Any = None) -> None:
        if self.accepts(tag):
            self.controller.log(severity, tag, message, error)

    def verbose(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.VERBOSE, tag, message, error)

    def debug(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.DEBUG, tag, message, error)

    def info(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.INFO, tag, message, error)

    def warn(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.WARN, tag, message, error)

    def error(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.ERROR, tag, message, error)

    v, d, i, w, e = verbose, debug, info, warn, error

    # -- entry/exit tracing -----------------------------------------------

    def entry(
        self, id: str | None = None, *,
        site: CallSite | None = None, token: Hashable = None,
    ) -> None:
        """Mark entry into the caller (or ``site``).

        ``token`` only affects the timing key, so overlapping calls of
        one function can be timed separately.
        """
        if self.entry_exit_enabled:
            self.controller.entry(site or caller_site(1), id, token=token)

    def exit(
        self, id: str | None = None, *,
        site: CallSite | None = None, token: Hashable = None,
    ) -> None:
        if self.entry_exit_enabled:
            self.controller.exit(site or caller_site(1), id, token=token)

    def exit_and_return(
        self, value: T, id: str | None = None, *, site: CallSite | None = None,
    ) -> T:
        if self.entry_exit_enabled:
            self.controller.exit(site or caller_site(1), id)
        return value

    # -- measurements -----------------------------------------------------

    def class_execution_total(self, class_name: str) -> int:
        return self.controller.class_total(class_name)

    def log_class_totals(self) -> None:
        self.controller.log_class_totals()


# ---------------------------------------------------------------------------
# Default instance
# ---------------------------------------------------------------------------

_default: SmartLog | None = None
_default_lock = threading.Lock()


def get_smartlog() -> SmartLog:
    """Return the process-wide SmartLog, building it from settings on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = SmartLog.from_settings()
                logger.debug(
                    "smartlog ready", mode=_default.mode.value,
                    entry_exit=_default.entry_exit_enabled,
                    selective=_default.selective_debugging,
                )
    return _default


def set_smartlog(instance: SmartLog | None) -> SmartLog | None:
    """Install a SmartLog as the default; None rebuilds from settings on next use.

    Returns the previously installed instance.
    """
    global _default
    with _default_lock:
        previous, _default = _default, instance
    return previous


# ---------------------------------------------------------------------------
# Free functions
# ---------------------------------------------------------------------------

def verbose(tag: str, message: str, error: Any = None) -> None:
    get_smartlog().verbose(tag, message, error)


def debug(tag: str, message: str, error: Any = None) -> None:
    get_smartlog().debug(tag, message, error)


def info(tag: str, message: str, error: Any = None) -> None:
    get_smartlog().info(tag, message, error)


def warn(tag: str, message: str, error: Any = None) -> None:
    get_smartlog().warn(tag, message, error)


def error(tag: str, message: str, error: Any = None) -> None:
    get_smartlog().error(tag, message, error)


def entry(id: str | None = None, *, site: CallSite | None = None) -> None:
    smartlog = get_smartlog()
    if smartlog.entry_exit_enabled:
        smartlog.entry(id, site=site or caller_site(1))


def exit(id: str | None = None, *, site: CallSite | None = None) -> None:
    smartlog = get_smartlog()
    if smartlog.entry_exit_enabled:
        smartlog.exit(id, site=site or caller_site(1))


def exit_and_return(value: T, id: str | None = None, *, site: CallSite | None = None) -> T:
    smartlog = get_smartlog()
    if smartlog.entry_exit_enabled:
        smartlog.exit(id, site=site or caller_site(1))
    return value


def class_execution_total(class_name: str) -> int:
    return get_smartlog().class_execution_total(class_name)


def log_class_totals() -> None:
    get_smartlog().log_class_totals()
