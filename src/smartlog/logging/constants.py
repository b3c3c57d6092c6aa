"""Logging constants: levels, fixed tags, colors."""

from __future__ import annotations

import logging

# ---------------------------------------------------------------------------
# Levels
# ---------------------------------------------------------------------------

VERBOSE = 5
logging.addLevelName(VERBOSE, "VERBOSE")


def resolve_level(name: str, default: int = logging.INFO) -> int:
    """Map a level name ('verbose', 'DEBUG', ...) to its numeric value."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


# ---------------------------------------------------------------------------
# Fixed tags
# ---------------------------------------------------------------------------

TAG_ENTRY = "ENTRY"
TAG_EXIT = "EXIT"
TAG_PERFORMANCE_ANALYSIS = "PerformanceAnalysis"

# ---------------------------------------------------------------------------
# ANSI colors
# ---------------------------------------------------------------------------

RESET = "\033[0m"
DIM = "\033[2m"

LEVEL_COLORS: dict[str, str] = {
    "VERBOSE":  "\033[90m",
    "DEBUG":    "\033[37m",
    "INFO":     "\033[97m",
    "WARNING":  "\033[93m",
    "ERROR":    "\033[91m",
    "CRITICAL": "\033[91;1m",
}

TAG_COLORS: dict[str, str] = {
    TAG_ENTRY:                "\033[96m",
    TAG_EXIT:                 "\033[94m",
    TAG_PERFORMANCE_ANALYSIS: "\033[95m",
}

DEFAULT_TAG_COLOR = "\033[37m"
