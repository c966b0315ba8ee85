"""Analytical primitives for collaborative filtering: memoization, shuffling
and sparse dataset statistics."""

from .stats import display_attribute_stats, display_data_stats, display_feedback_stats
from .utils import MemoizingCache, memoize, shuffle

__version__ = "0.1.0"

__all__ = [
    "MemoizingCache",
    "memoize",
    "shuffle",
    "display_data_stats",
    "display_feedback_stats",
    "display_attribute_stats",
]
