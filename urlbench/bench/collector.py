"""Single-invocation timing."""

import time
from collections.abc import Callable

Operation = Callable[[], object]
"""A unit of work: callable with no arguments, returning anything or raising."""

_NS_PER_SECOND = 1_000_000_000


def measure(operation: Operation) -> float:
    """Invoke ``operation`` once and return its wall-clock duration in seconds.

    Uses the monotonic nanosecond performance counter. Exceptions raised by
    the operation propagate unchanged and no duration is produced.
    """
    start = time.perf_counter_ns()
    operation()
    elapsed = time.perf_counter_ns() - start
    return elapsed / _NS_PER_SECOND
