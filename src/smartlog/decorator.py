"""@traced decorator: entry/exit markers around a whole function."""

from __future__ import annotations

import functools
import inspect

from smartlog.callsite import site_of_function
from smartlog.facade import SmartLog, get_smartlog


def traced(id: str | None = None, *, smartlog: SmartLog | None = None):
    """Bracket every call of the decorated function with entry/exit.

    Works on plain functions, generators, coroutines and async generators.
    The call site is the function's own definition, so stack inspection
    is not needed. Each call is timed under its own key, so overlapping
    calls (concurrent coroutines, interleaved generators) do not clobber
    each other. Exit is recorded even when the function raises; for
    generators it is recorded when iteration ends or the generator is
    closed.

    Args:
        id: Optional label prefixed to the trace message and part of the
            timing key.
        smartlog: Facade to report to. Defaults to the process-wide one,
            resolved on each call.
    """
    def decorator(fn):
        site = site_of_function(fn)

        def target() -> SmartLog:
            return smartlog or get_smartlog()

        if inspect.isasyncgenfunction(fn):
            @functools.wraps(fn)
            async def async_gen_wrapper(*args, **kwargs):
                log, token = target(), object()
                log.entry(id, site=site, token=token)
                try:
                    async for item in fn(*args, **kwargs):
                        yield item
                finally:
                    log.exit(id, site=site, token=token)
            return async_gen_wrapper

        if inspect.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                log, token = target(), object()
                log.entry(id, site=site, token=token)
                try:
                    return await fn(*args, **kwargs)
                finally:
                    log.exit(id, site=site, token=token)
            return async_wrapper

        if inspect.isgeneratorfunction(fn):
            @functools.wraps(fn)
            def gen_wrapper(*args, **kwargs):
                log, token = target(), object()
                log.entry(id, site=site, token=token)
                try:
                    return (yield from fn(*args, **kwargs))
                finally:
                    log.exit(id, site=site, token=token)
            return gen_wrapper

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            log, token = target(), object()
            log.entry(id, site=site, token=token)
            try:
                return fn(*args, **kwargs)
            finally:
                log.exit(id, site=site, token=token)
        return sync_wrapper
    return decorator
