"""Tests for StructuredLogger."""

import logging

from smartlog.logging.constants import VERBOSE
from smartlog.logging.structured_logger import StructuredLogger, get_logger


def _capture(name):
    inner = logging.getLogger(name)
    records = []
    handler = logging.Handler()
    handler.emit = lambda r: records.append(r)
    inner.addHandler(handler)
    inner.setLevel(VERBOSE)
    return inner, handler, records


class TestStructuredLogger:
    def test_info_logs_message(self, caplog):
        with caplog.at_level(logging.INFO, logger="test.structured"):
            StructuredLogger(logging.getLogger("test.structured")).info("hello")
        assert "hello" in caplog.text

    def test_kwargs_stored_as_extra_data(self):
        inner, handler, records = _capture("test.extra")
        StructuredLogger(inner).info("msg", port=8000, env="prod")
        inner.removeHandler(handler)

        assert len(records) == 1
        assert records[0].extra_data == {"port": 8000, "env": "prod"}

    def test_verbose_level(self):
        inner, handler, records = _capture("test.verbose")
        StructuredLogger(inner).verbose("trace")
        inner.removeHandler(handler)

        assert records[0].levelno == VERBOSE
        assert records[0].levelname == "VERBOSE"

    def test_disabled_level_skips_record(self):
        inner, handler, records = _capture("test.disabled")
        inner.setLevel(logging.WARNING)
        StructuredLogger(inner).info("dropped")
        inner.removeHandler(handler)

        assert records == []

    def test_exc_info_kwarg_attached_to_record(self):
        inner, handler, records = _capture("test.exc")
        err = ValueError("boom")
        StructuredLogger(inner)._log(
            logging.ERROR, "failed", (), {"exc_info": (ValueError, err, None), "op": "save"},
        )
        inner.removeHandler(handler)

        assert records[0].exc_info[1] is err
        assert records[0].extra_data == {"op": "save"}

    def test_name(self):
        assert StructuredLogger(logging.getLogger("test.named")).name == "test.named"


class TestGetLogger:
    def test_returns_structured_logger(self):
        assert isinstance(get_logger("test.factory"), StructuredLogger)

    def test_same_name_returns_same_instance(self):
        assert get_logger("test.same") is get_logger("test.same")
