"""Caller identity for entry/exit tracing."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import CodeType, FrameType
from typing import Callable


@dataclass(frozen=True)
class CallSite:
    """Where a traced call happened.

    ``class_name`` is fully qualified (``module.Owner``); module-level
    functions use the module name as their owner.
    """

    class_name: str
    method_name: str
    line_number: int = 0

    def __str__(self) -> str:
        return f"{self.class_name}.{self.method_name}:{self.line_number}"


UNKNOWN_SITE = CallSite("<unknown>", "<unknown>", 0)


def _owner(module: str, qualname: str) -> str:
    # 'outer.<locals>.Foo.bar' -> 'Foo'; 'bar' -> ''
    local = qualname.rsplit(".<locals>.", 1)[-1]
    owner = local.rpartition(".")[0]
    return f"{module}.{owner}" if owner else module


def _from_code(module: str, code: CodeType, line_number: int) -> CallSite:
    return CallSite(
        class_name=_owner(module, code.co_qualname),
        method_name=code.co_name,
        line_number=line_number,
    )


def site_of_frame(frame: FrameType) -> CallSite:
    module = frame.f_globals.get("__name__", "<unknown>")
    return _from_code(module, frame.f_code, frame.f_lineno)


def caller_site(depth: int = 1) -> CallSite:
    """Call site ``depth`` frames above the function calling this one.

    ``caller_site(1)`` inside ``entry()`` names whoever called ``entry()``.
    Falls back to UNKNOWN_SITE when the stack is not that deep or frame
    inspection is unavailable.
    """
    try:
        frame = sys._getframe(depth + 1)
    except (ValueError, AttributeError):
        return UNKNOWN_SITE
    return site_of_frame(frame)


def site_of_function(func: Callable) -> CallSite:
    """Call site describing a function definition (first line)."""
    code = getattr(func, "__code__", None)
    if code is None:
        return UNKNOWN_SITE
    module = getattr(func, "__module__", None) or "<unknown>"
    return _from_code(module, code, code.co_firstlineno)
