from enum import Enum


class LogMode(Enum):
    """Process-wide behaviour of severity and tracing calls.

    RELEASE:
        Everything is dropped.
    DEBUG_PASSIVE:
        Only warnings and errors reach the sink.
    DEBUG_UNTOUCHED:
        Everything reaches the sink, including entry/exit traces.
    DEBUG_AGGRESSIVE:
        Like DEBUG_UNTOUCHED, but warnings and errors raise SelfThrownError.
    PERFORMANCE_ANALYSIS:
        Severity calls are dropped; entry/exit pairs are timed.
    """

    RELEASE = "RELEASE"
    DEBUG_PASSIVE = "DEBUG_PASSIVE"
    DEBUG_UNTOUCHED = "DEBUG_UNTOUCHED"
    DEBUG_AGGRESSIVE = "DEBUG_AGGRESSIVE"
    PERFORMANCE_ANALYSIS = "PERFORMANCE_ANALYSIS"
