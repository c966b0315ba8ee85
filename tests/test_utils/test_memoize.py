"""Tests for the memoizing cache."""

import threading
import time

import pytest

from cfkit.utils.memoize import CacheInfo, MemoizingCache, memoize


class CountingSquare:
    def __init__(self):
        self.calls = []

    def __call__(self, x):
        self.calls.append(x)
        return x * x


class TestMemoizingCache:
    """Tests for the unbounded cache."""

    def test_returns_same_values_as_function(self):
        func = CountingSquare()
        cached = MemoizingCache(func)

        assert [cached(x) for x in [3, 4, 3, -2, 4]] == [9, 16, 9, 4, 16]

    def test_calls_function_once_per_distinct_argument(self):
        func = CountingSquare()
        cached = MemoizingCache(func)

        for x in [1, 2, 1, 1, 2, 3]:
            cached(x)

        assert func.calls == [1, 2, 3]

    def test_equal_arguments_share_an_entry(self):
        calls = []

        def total(values):
            calls.append(values)
            return sum(values)

        cached = MemoizingCache(total)

        assert cached((1, 2, 3)) == 6
        assert cached(tuple([1, 2, 3])) == 6
        assert len(calls) == 1

    def test_none_result_is_cached(self):
        calls = []

        def nothing(x):
            calls.append(x)
            return None

        cached = MemoizingCache(nothing)
        assert cached("a") is None
        assert cached("a") is None
        assert calls == ["a"]

    def test_failure_propagates_and_is_not_cached(self):
        attempts = []

        def flaky(x):
            attempts.append(x)
            if len(attempts) == 1:
                raise RuntimeError("boom")
            return x + 1

        cached = MemoizingCache(flaky)

        with pytest.raises(RuntimeError, match="boom"):
            cached(5)
        assert 5 not in cached

        assert cached(5) == 6
        assert attempts == [5, 5]

    def test_unhashable_argument_raises_before_call(self):
        func = CountingSquare()
        cached = MemoizingCache(func)

        with pytest.raises(TypeError):
            cached([1, 2])
        assert func.calls == []

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError, match="Expected a callable"):
            MemoizingCache(42)

    def test_rejects_non_positive_maxsize(self):
        with pytest.raises(ValueError, match="maxsize must be > 0"):
            MemoizingCache(CountingSquare(), maxsize=0)

    def test_cache_info_counts_hits_and_misses(self):
        cached = MemoizingCache(CountingSquare())
        for x in [1, 1, 2, 1]:
            cached(x)

        assert cached.cache_info() == CacheInfo(hits=2, misses=2, maxsize=None, currsize=2)

    def test_clear_forces_recomputation(self):
        func = CountingSquare()
        cached = MemoizingCache(func)
        cached(7)
        cached.clear()

        assert len(cached) == 0
        assert cached(7) == 49
        assert func.calls == [7, 7]
        assert cached.cache_info().misses == 1

    def test_keeps_wrapped_metadata(self):
        def square(x):
            """Square a number."""
            return x * x

        cached = MemoizingCache(square)
        assert cached.__name__ == "square"
        assert cached.__doc__ == "Square a number."
        assert cached.__wrapped__ is square


class TestBoundedCache:
    """Tests for the LRU-bounded cache."""

    def test_evicts_least_recently_used(self):
        func = CountingSquare()
        cached = MemoizingCache(func, maxsize=2)

        cached(1)
        cached(2)
        cached(1)  # 2 is now the least recently used
        cached(3)

        assert 1 in cached
        assert 2 not in cached
        assert 3 in cached
        assert len(cached) == 2

        cached(2)
        assert func.calls == [1, 2, 3, 2]

    def test_cache_info_reports_maxsize(self):
        cached = MemoizingCache(CountingSquare(), maxsize=8)
        cached(1)
        assert cached.cache_info() == CacheInfo(hits=0, misses=1, maxsize=8, currsize=1)


class TestThreadSafeCache:
    """Tests for the locked cache."""

    def test_concurrent_callers_compute_once(self):
        calls = []

        def slow(x):
            calls.append(x)
            time.sleep(0.01)
            return x * 2

        cached = MemoizingCache(slow, thread_safe=True)
        results = []

        def worker():
            results.append(cached(21))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [42] * 8
        assert calls == [21]

    def test_recursive_function_does_not_deadlock(self):
        @memoize(thread_safe=True)
        def fib(n):
            return n if n < 2 else fib(n - 1) + fib(n - 2)

        assert fib(30) == 832040
        assert fib.cache_info().misses == 31


class TestMemoizeDecorator:
    """Tests for the decorator forms."""

    def test_bare_decorator(self):
        calls = []

        @memoize
        def double(x):
            calls.append(x)
            return 2 * x

        assert isinstance(double, MemoizingCache)
        assert double(4) == 8
        assert double(4) == 8
        assert calls == [4]

    def test_decorator_with_options(self):
        @memoize(maxsize=1, thread_safe=True)
        def identity(x):
            return x

        assert isinstance(identity, MemoizingCache)
        assert identity.maxsize == 1
        assert identity.thread_safe is True

    def test_separate_wrappers_do_not_share_entries(self):
        func = CountingSquare()
        first = memoize(func)
        second = memoize(func)

        first(3)
        second(3)
        assert func.calls == [3, 3]
