"""Log formatters: colored console, plain file, JSON lines."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from smartlog.logging.constants import (
    DEFAULT_TAG_COLOR, DIM, LEVEL_COLORS, RESET, TAG_COLORS,
)


def _prepare_record(record: logging.LogRecord) -> tuple[str, list[str]]:
    """Extract the sink tag from the record and build the k=v parts.

    Sink writes carry their tag as ``_tag`` in ``extra_data``; plain
    records fall back to the last dotted segment of the logger name.
    """
    extra_data: dict = dict(getattr(record, "extra_data", {}))
    tag = extra_data.pop("_tag", None) or record.name.rsplit(".", 1)[-1]
    kv_parts = [f"{k}={v}" for k, v in extra_data.items()]
    return tag, kv_parts


def _with_exception(formatter: logging.Formatter, record: logging.LogRecord, line: str) -> str:
    if record.exc_info and not record.exc_text:
        record.exc_text = formatter.formatException(record.exc_info)
    if record.exc_text:
        line += "\n" + record.exc_text
    return line


class SmartFormatter(logging.Formatter):
    """Console formatter: ``HH:MM:SS.mmm  LEVEL [TAG] msg | k=v``"""

    def format(self, record: logging.LogRecord) -> str:
        ts = self.formatTime(record, "%H:%M:%S")
        ms = int(record.created * 1000) % 1000
        timestamp = f"{ts}.{ms:03d}"

        tag, kv_parts = _prepare_record(record)
        color = TAG_COLORS.get(tag, DEFAULT_TAG_COLOR)
        level_color = LEVEL_COLORS.get(record.levelname, "")

        kv_str = f" {DIM}| {' '.join(kv_parts)}{RESET}" if kv_parts else ""
        msg = record.getMessage()

        line = (
            f"{DIM}{timestamp}{RESET}  "
            f"{level_color}{record.levelname:<7}{RESET} "
            f"[{color}{tag}{RESET}] "
            f"{msg}{kv_str}"
        )
        return _with_exception(self, record, line)


class PlainFormatter(logging.Formatter):
    """File formatter: no ANSI codes, full date, k=v pairs."""

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone()
        timestamp = dt.strftime("%Y-%m-%d %H:%M:%S.") + f"{int(record.created * 1000) % 1000:03d}"

        tag, kv_parts = _prepare_record(record)
        kv_str = f" | {' '.join(kv_parts)}" if kv_parts else ""
        msg = record.getMessage()

        line = f"{timestamp} {record.levelname:<8} [{tag}] {msg}{kv_str}"
        return _with_exception(self, record, line)


class JsonFormatter(logging.Formatter):
    """JSONL formatter: one object per record, extra data merged at top level."""

    def format(self, record: logging.LogRecord) -> str:
        tag, _ = _prepare_record(record)
        data: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "tag": tag,
            "msg": record.getMessage(),
        }
        for key, value in getattr(record, "extra_data", {}).items():
            if key != "_tag":
                data[key] = value
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)
