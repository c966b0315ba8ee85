"""Configuration for dataset statistics reports."""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

from cfkit.utils.constants import (
    DEFAULT_ITEM_COL,
    DEFAULT_RATING_COL,
    DEFAULT_TIMESTAMP_COL,
    DEFAULT_USER_COL,
)
from cfkit.utils.memoize import MemoizingCache

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class StatsConfig:
    """Configuration for reading datasets and printing their statistics.

    Attributes:
        sparsity_decimals: Maximum decimals of the reported sparsity
        display_overlap: Report test users/items unseen in training
        log_level: Logging level name used by the command line entry point
        col_user: User id column name
        col_item: Item id column name
        col_rating: Rating column name
        col_timestamp: Timestamp column name
        memo_maxsize: Optional LRU capacity of caches built by ``memoize``
        memo_thread_safe: Whether caches built by ``memoize`` are locked
    """

    sparsity_decimals: int = 5
    display_overlap: bool = False
    log_level: str = "INFO"
    col_user: str = DEFAULT_USER_COL
    col_item: str = DEFAULT_ITEM_COL
    col_rating: str = DEFAULT_RATING_COL
    col_timestamp: str = DEFAULT_TIMESTAMP_COL
    memo_maxsize: Optional[int] = None
    memo_thread_safe: bool = False

    @classmethod
    def from_env(cls) -> "StatsConfig":
        """Load configuration from environment variables.

        Environment variables:
            CFKIT_SPARSITY_DECIMALS: Maximum decimals of the sparsity
            CFKIT_DISPLAY_OVERLAP: Whether to report the train/test overlap
            CFKIT_LOG_LEVEL: Logging level name
            CFKIT_COL_USER: User id column name
            CFKIT_COL_ITEM: Item id column name
            CFKIT_COL_RATING: Rating column name
            CFKIT_COL_TIMESTAMP: Timestamp column name
            CFKIT_MEMO_MAXSIZE: LRU capacity of memo caches (empty for unbounded)
            CFKIT_MEMO_THREAD_SAFE: Whether memo caches are locked

        Returns:
            StatsConfig instance
        """
        memo_maxsize_raw = os.getenv("CFKIT_MEMO_MAXSIZE", "").strip()
        memo_maxsize = int(memo_maxsize_raw) if memo_maxsize_raw else None

        return cls(
            sparsity_decimals=int(os.getenv("CFKIT_SPARSITY_DECIMALS", "5")),
            display_overlap=_parse_bool(os.getenv("CFKIT_DISPLAY_OVERLAP", "false")),
            log_level=os.getenv("CFKIT_LOG_LEVEL", "INFO").strip().upper(),
            col_user=os.getenv("CFKIT_COL_USER", DEFAULT_USER_COL),
            col_item=os.getenv("CFKIT_COL_ITEM", DEFAULT_ITEM_COL),
            col_rating=os.getenv("CFKIT_COL_RATING", DEFAULT_RATING_COL),
            col_timestamp=os.getenv("CFKIT_COL_TIMESTAMP", DEFAULT_TIMESTAMP_COL),
            memo_maxsize=memo_maxsize,
            memo_thread_safe=_parse_bool(os.getenv("CFKIT_MEMO_THREAD_SAFE", "false")),
        )

    def memoize(self, func: Callable) -> MemoizingCache:
        """Wrap ``func`` in a memo cache using the configured size and locking."""
        return MemoizingCache(
            func, maxsize=self.memo_maxsize, thread_safe=self.memo_thread_safe
        )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def validate(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not (0 <= self.sparsity_decimals <= 15):
            raise ValueError(
                f"Sparsity decimals must be in [0, 15]. Got: {self.sparsity_decimals}"
            )

        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. Must be one of {list(_LOG_LEVELS)}"
            )

        for name in ("col_user", "col_item", "col_rating", "col_timestamp"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} cannot be blank")

        if len({self.col_user, self.col_item}) != 2:
            raise ValueError("User and item columns must differ")

        if self.memo_maxsize is not None and self.memo_maxsize <= 0:
            raise ValueError(
                f"CFKIT_MEMO_MAXSIZE must be > 0 when set. Got: {self.memo_maxsize}"
            )
