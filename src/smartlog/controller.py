"""Mode-conditioned dispatch of severity and entry/exit calls."""

from __future__ import annotations

import time
from collections.abc import Hashable
from typing import Any, Callable, TypeVar

from smartlog.callsite import CallSite
from smartlog.errors import SelfThrownError
from smartlog.logging.constants import TAG_ENTRY, TAG_EXIT, TAG_PERFORMANCE_ANALYSIS
from smartlog.logging.sink import LoggingSink, LogSink, Severity
from smartlog.modes import LogMode
from smartlog.timing import CallKey, TimingTracker

T = TypeVar("T")

_QUIET = (Severity.VERBOSE, Severity.DEBUG, Severity.INFO)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def _call_key(site: CallSite, id: str | None, token: Hashable) -> CallKey:
    return (site.class_name, site.method_name, id, token)


def _trace_message(site: CallSite, id: str | None) -> str:
    return f"{id} - {site}" if id is not None else str(site)


class ModeController:
    """Owns the active LogMode and the timing state measured under it."""

    def __init__(
        self,
        mode: LogMode = LogMode.DEBUG_UNTOUCHED,
        sink: LogSink | None = None,
        tracker: TimingTracker | None = None,
        clock: Callable[[], int] = monotonic_ms,
    ):
        self._mode = mode
        self._sink = sink or LoggingSink()
        self._tracker = tracker or TimingTracker()
        self._clock = clock

    @property
    def mode(self) -> LogMode:
        return self._mode

    @mode.setter
    def mode(self, mode: LogMode) -> None:
        self._mode = mode

    @property
    def tracker(self) -> TimingTracker:
        return self._tracker

    # -- severity calls ---------------------------------------------------

    def log(self, severity: Severity, tag: str, message: str, error: Any = None) -> None:
        match self._mode:
            case LogMode.RELEASE | LogMode.PERFORMANCE_ANALYSIS:
                return
            case LogMode.DEBUG_PASSIVE:
                if severity in _QUIET:
                    return
                self._sink.write(severity, tag, message, error)
            case LogMode.DEBUG_UNTOUCHED:
                self._sink.write(severity, tag, message, error)
            case LogMode.DEBUG_AGGRESSIVE:
                if severity in _QUIET:
                    self._sink.write(severity, tag, message, error)
                    return
                if isinstance(error, BaseException):
                    raise SelfThrownError(tag, message, error) from error
                raise SelfThrownError(tag, message, error)

    def verbose(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.VERBOSE, tag, message, error)

    def debug(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.DEBUG, tag, message, error)

    def info(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.INFO, tag, message, error)

    def warning(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.WARN, tag, message, error)

    def error(self, tag: str, message: str, error: Any = None) -> None:
        self.log(Severity.ERROR, tag, message, error)

    # -- entry/exit tracing -----------------------------------------------

    def entry(self, site: CallSite, id: str | None = None, *, token: Hashable = None) -> None:
        match self._mode:
            case LogMode.PERFORMANCE_ANALYSIS:
                self._tracker.record_entry(_call_key(site, id, token), self._clock())
            case LogMode.RELEASE | LogMode.DEBUG_PASSIVE:
                return
            case LogMode.DEBUG_UNTOUCHED | LogMode.DEBUG_AGGRESSIVE:
                self._sink.write(Severity.VERBOSE, TAG_ENTRY, _trace_message(site, id))

    def exit(self, site: CallSite, id: str | None = None, *, token: Hashable = None) -> None:
        match self._mode:
            case LogMode.PERFORMANCE_ANALYSIS:
                self._measure_exit(site, id, token)
            case LogMode.RELEASE | LogMode.DEBUG_PASSIVE:
                return
            case LogMode.DEBUG_UNTOUCHED | LogMode.DEBUG_AGGRESSIVE:
                self._sink.write(Severity.VERBOSE, TAG_EXIT, _trace_message(site, id))

    def exit_and_return(self, site: CallSite, value: T, id: str | None = None) -> T:
        self.exit(site, id)
        return value

    def _measure_exit(self, site: CallSite, id: str | None, token: Hashable) -> None:
        started = self._tracker.consume_entry(_call_key(site, id, token))
        if started is None:
            self._sink.write(
                Severity.ERROR, TAG_PERFORMANCE_ANALYSIS,
                f"entry() not called before exit() in method:{site.method_name}",
            )
            return
        elapsed = self._clock() - started
        self._sink.write(
            Severity.INFO, TAG_PERFORMANCE_ANALYSIS,
            f"methodName:{site.method_name}|Executed in:{elapsed} ms",
        )
        self._tracker.add_to_class_total(site.class_name, elapsed)

    # -- measurements -----------------------------------------------------

    def class_total(self, class_name: str) -> int:
        return self._tracker.get_class_total(class_name)

    def log_class_totals(self) -> None:
        """Report every class total to the sink (PERFORMANCE_ANALYSIS only)."""
        if self._mode is not LogMode.PERFORMANCE_ANALYSIS:
            return
        for class_name, total in sorted(self._tracker.class_totals().items()):
            self._sink.write(
                Severity.INFO, TAG_PERFORMANCE_ANALYSIS,
                f"className:{class_name}|Total:{total} ms",
            )
