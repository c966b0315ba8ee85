"""Wall-clock measurement helpers."""

import time
from typing import Any, Callable, Tuple


class Timer:
    """Context manager measuring elapsed wall-clock seconds.

    Example:
        >>> with Timer() as t:
        ...     do_work()
        >>> t.seconds
    """

    def __init__(self):
        self._start = None
        self.seconds = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info):
        self.seconds = time.perf_counter() - self._start
        return False


def measure_time(func: Callable[..., Any], *args, **kwargs) -> Tuple[Any, float]:
    """Call ``func`` and return its result with the elapsed seconds."""
    with Timer() as timer:
        result = func(*args, **kwargs)
    return result, timer.seconds
