"""Entry timestamps and cumulative per-class execution time."""

from __future__ import annotations

import threading
from collections.abc import Hashable

# (class_name, method_name, id, token); token tells overlapping calls apart
CallKey = tuple[str, str, str | None, Hashable]


class TimingTracker:
    """Pending entry timestamps and per-class totals, in milliseconds.

    A key present in the pending map means an entry was recorded and no
    exit has consumed it yet. Class totals only ever grow.

    All access goes through one lock, so concurrent callers never corrupt
    the maps. Keys are not per-thread: two threads entering the same key
    overwrite each other's start time.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: dict[CallKey, int] = {}
        self._class_totals: dict[str, int] = {}

    def record_entry(self, key: CallKey, timestamp: int) -> None:
        with self._lock:
            self._pending[key] = timestamp

    def consume_entry(self, key: CallKey) -> int | None:
        """Remove and return the start timestamp for key, or None."""
        with self._lock:
            return self._pending.pop(key, None)

    def add_to_class_total(self, class_name: str, delta: int) -> int:
        with self._lock:
            total = self._class_totals.get(class_name, 0) + delta
            self._class_totals[class_name] = total
            return total

    def get_class_total(self, class_name: str) -> int:
        with self._lock:
            return self._class_totals.get(class_name, 0)

    def is_pending(self, key: CallKey) -> bool:
        with self._lock:
            return key in self._pending

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def class_totals(self) -> dict[str, int]:
        with self._lock:
            return dict(self._class_totals)
