"""Small reusable helpers: memoization, shuffling, random generators and timing."""

from .memoize import CacheInfo, MemoizingCache, memoize
from .rng import get_random, next_below, reset_random, set_random
from .shuffle import shuffle
from .timing import Timer, measure_time

__all__ = [
    "CacheInfo",
    "MemoizingCache",
    "memoize",
    "get_random",
    "set_random",
    "reset_random",
    "next_below",
    "shuffle",
    "Timer",
    "measure_time",
]
