"""Memoization for pure single-argument functions.

Example:
    >>> @memoize
    ... def item_norm(item_id):
    ...     return expensive_lookup(item_id)

    >>> @memoize(maxsize=10_000, thread_safe=True)
    ... def user_profile(user_id):
    ...     ...
"""

import functools
import logging
import threading
from collections import namedtuple
from typing import Any, Callable, Generic, MutableMapping, Optional, TypeVar

from cachetools import LRUCache

logger = logging.getLogger(__name__)

A = TypeVar("A")
R = TypeVar("R")

CacheInfo = namedtuple("CacheInfo", ["hits", "misses", "maxsize", "currsize"])


class _NullLock:
    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class MemoizingCache(Generic[A, R]):
    """Callable wrapper remembering the results of a pure unary function.

    The first call with a given argument invokes the wrapped function and
    stores the result; later calls with an equal argument return the stored
    value. Exceptions raised by the function propagate unchanged and nothing
    is stored for that argument, so the next call retries.

    With ``maxsize=None`` the store is a plain dict and grows for as long as
    the wrapper lives. A positive ``maxsize`` switches to a least-recently-used
    store (``cachetools.LRUCache``); evicted arguments are recomputed.

    The wrapper is not thread safe unless ``thread_safe=True``, in which case a
    re-entrant lock is held across the lookup and the computation.

    Args:
        func: Pure function of one hashable argument.
        maxsize: Optional capacity of the store.
        thread_safe: Guard the store with a lock.
    """

    def __init__(
        self,
        func: Callable[[A], R],
        maxsize: Optional[int] = None,
        thread_safe: bool = False,
    ):
        if not callable(func):
            raise TypeError(f"Expected a callable, got {type(func).__name__}")
        if maxsize is not None and maxsize <= 0:
            raise ValueError(f"maxsize must be > 0 when set. Got: {maxsize}")

        self._func = func
        self.maxsize = maxsize
        self.thread_safe = thread_safe
        self._store: MutableMapping[A, R] = (
            {} if maxsize is None else LRUCache(maxsize=maxsize)
        )
        self._lock = threading.RLock() if thread_safe else _NullLock()
        self._hits = 0
        self._misses = 0
        functools.update_wrapper(self, func, updated=())

    def __call__(self, arg: A) -> R:
        # Raises TypeError for unhashable arguments before func is touched
        hash(arg)

        with self._lock:
            try:
                value = self._store[arg]
            except KeyError:
                pass
            else:
                self._hits += 1
                return value

            self._misses += 1
            value = self._func(arg)
            self._store[arg] = value
            return value

    def __contains__(self, arg: Any) -> bool:
        with self._lock:
            return arg in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return (
            f"MemoizingCache({getattr(self._func, '__qualname__', self._func)!r}, "
            f"maxsize={self.maxsize}, thread_safe={self.thread_safe})"
        )

    def cache_info(self) -> CacheInfo:
        """Return hit/miss counters and the current store size."""
        with self._lock:
            return CacheInfo(self._hits, self._misses, self.maxsize, len(self._store))

    def clear(self) -> None:
        """Drop every stored result and reset the counters."""
        with self._lock:
            logger.debug(
                "Clearing memo cache for %s (%d entries)",
                getattr(self._func, "__qualname__", self._func),
                len(self._store),
            )
            self._store.clear()
            self._hits = 0
            self._misses = 0


def memoize(
    func: Optional[Callable[[A], R]] = None,
    *,
    maxsize: Optional[int] = None,
    thread_safe: bool = False,
):
    """Memoize a pure single-argument function.

    Usable bare (``@memoize``) or with options
    (``@memoize(maxsize=128, thread_safe=True)``).

    Args:
        func: The function to memoize.
        maxsize: Optional LRU capacity. ``None`` keeps every result.
        thread_safe: Guard the store with a lock.

    Returns:
        A ``MemoizingCache`` wrapping ``func``, or a decorator producing one.
    """
    if func is None:
        return lambda f: MemoizingCache(f, maxsize=maxsize, thread_safe=thread_safe)
    return MemoizingCache(func, maxsize=maxsize, thread_safe=thread_safe)
