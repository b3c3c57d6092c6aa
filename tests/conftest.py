import pytest

from smartlog.controller import ModeController
from smartlog.facade import SmartLog, set_smartlog
from smartlog.modes import LogMode


class RecordingSink:
    """Sink double that keeps every write as (severity, tag, message, error)."""

    def __init__(self):
        self.writes = []

    def write(self, severity, tag, message, error=None):
        self.writes.append((severity, tag, message, error))


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_smartlog(sink, clock):
    """Factory for isolated SmartLog instances wired to the sink and clock."""
    def factory(mode=LogMode.DEBUG_UNTOUCHED, **kwargs):
        return SmartLog(ModeController(mode, sink=sink, clock=clock), **kwargs)
    return factory


@pytest.fixture(autouse=True)
def _isolate_default_smartlog():
    previous = set_smartlog(None)
    yield
    set_smartlog(previous)
