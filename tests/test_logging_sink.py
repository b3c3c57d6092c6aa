"""Tests for LoggingSink, the default sink."""

import logging

import pytest

from smartlog.facade import SmartLog
from smartlog.logging.constants import VERBOSE
from smartlog.logging.sink import FallbackHandler, LoggingSink, Severity
from smartlog.logging.structured_logger import StructuredLogger


class TestSeverity:
    def test_levels(self):
        assert Severity.VERBOSE.level == VERBOSE
        assert Severity.DEBUG.level == logging.DEBUG
        assert Severity.INFO.level == logging.INFO
        assert Severity.WARN.level == logging.WARNING
        assert Severity.ERROR.level == logging.ERROR


class TestLoggingSink:
    def test_writes_with_tag(self, caplog):
        with caplog.at_level(logging.INFO, logger="smartlog"):
            LoggingSink().write(Severity.INFO, "Net", "connected")
        record = caplog.records[-1]
        assert record.name == "smartlog"
        assert record.getMessage() == "connected"
        assert record.extra_data["_tag"] == "Net"

    def test_verbose_reaches_handlers(self, caplog):
        with caplog.at_level(VERBOSE, logger="smartlog"):
            LoggingSink().write(Severity.VERBOSE, "ENTRY", "Foo.bar:1")
        assert caplog.records[-1].levelname == "VERBOSE"

    def test_exception_becomes_exc_info(self, caplog):
        err = ValueError("boom")
        with caplog.at_level(logging.ERROR, logger="smartlog"):
            LoggingSink().write(Severity.ERROR, "Db", "failed", err)
        assert caplog.records[-1].exc_info[1] is err

    def test_other_error_becomes_kv(self, caplog):
        with caplog.at_level(logging.WARNING, logger="smartlog"):
            LoggingSink().write(Severity.WARN, "Db", "odd", "oops")
        assert caplog.records[-1].extra_data["error"] == "'oops'"

    def test_below_level_is_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="smartlog"):
            LoggingSink().write(Severity.DEBUG, "T", "quiet")
        assert not [r for r in caplog.records if r.getMessage() == "quiet"]


@pytest.fixture
def warning_root():
    """Root at WARNING with a level-0 recording handler, as in an unconfigured host."""
    root = logging.getLogger()
    smartlog_logger = logging.getLogger("smartlog")
    saved = root.level, smartlog_logger.level
    records = []
    handler = logging.Handler()
    handler.emit = lambda r: records.append(r)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    smartlog_logger.setLevel(logging.NOTSET)
    yield records
    root.removeHandler(handler)
    root.setLevel(saved[0])
    smartlog_logger.setLevel(saved[1])


class TestDefaultConfiguration:
    def test_mode_decides_what_reaches_root_handlers(self, warning_root):
        log = SmartLog()
        log.debug("Net", "connected")
        log.entry()
        log.warn("Net", "slow")
        messages = [r.getMessage() for r in warning_root]
        assert messages[0] == "connected"
        assert messages[1].startswith(f"{__name__}.TestDefaultConfiguration.")
        assert messages[2] == "slow"

    def test_unset_logger_opened_to_verbose(self, warning_root):
        LoggingSink()
        assert logging.getLogger("smartlog").level == VERBOSE

    def test_explicit_logger_level_kept(self):
        inner = logging.getLogger("test.sink.explicit")
        inner.setLevel(logging.ERROR)
        LoggingSink(StructuredLogger(inner))
        assert inner.level == logging.ERROR

    def test_fallback_handler_when_nothing_would_print(self):
        bare = logging.getLogger("test.sink.bare")
        bare.propagate = False
        try:
            LoggingSink(StructuredLogger(bare))
            LoggingSink(StructuredLogger(bare))
            fallbacks = [h for h in bare.handlers if isinstance(h, FallbackHandler)]
            assert len(fallbacks) == 1
            assert bare.level == VERBOSE
        finally:
            bare.handlers.clear()
            bare.propagate = True
