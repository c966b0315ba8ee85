"""Polars-backed rating collections.

Three flavours share one implementation:

- ``Ratings``: explicit (user, item, rating) triples.
- ``TimedRatings``: ratings carrying a timestamp column; reports its period.
- ``PosOnlyFeedback``: positive-only (user, item) events, no rating column.

Only summary counts and id sets are derived from the frame; the user x item
matrix is never materialized.
"""

import logging
from typing import Any, FrozenSet, Hashable, Iterable, Optional

import polars as pl

from cfkit.utils.constants import (
    DEFAULT_ITEM_COL,
    DEFAULT_RATING_COL,
    DEFAULT_TIMESTAMP_COL,
    DEFAULT_USER_COL,
)

logger = logging.getLogger(__name__)


def _require_columns(df: pl.DataFrame, columns: Iterable[Optional[str]]) -> None:
    missing = [col for col in columns if col is not None and col not in df.columns]
    if missing:
        raise ValueError(
            f"Missing required columns: {missing}. Available columns: {df.columns}"
        )


def _distinct_ids(df: pl.DataFrame, col: str) -> FrozenSet[Hashable]:
    return frozenset(df.get_column(col).drop_nulls().unique().to_list())


class Ratings:
    """Explicit ratings held in a polars DataFrame.

    Repeated (user, item) rows count once in ``interaction_count``.

    Args:
        df: Frame with user, item and rating columns.
        col_user: User id column name.
        col_item: Item id column name.
        col_rating: Rating column name.
    """

    noun = "ratings"
    is_timed = False

    def __init__(
        self,
        df: pl.DataFrame,
        col_user: str = DEFAULT_USER_COL,
        col_item: str = DEFAULT_ITEM_COL,
        col_rating: Optional[str] = DEFAULT_RATING_COL,
    ):
        if df is None:
            raise ValueError("A DataFrame is required")
        _require_columns(df, [col_user, col_item, col_rating])

        self.col_user = col_user
        self.col_item = col_item
        self.col_rating = col_rating
        self.data = df

        self._users = _distinct_ids(df, col_user)
        self._items = _distinct_ids(df, col_item)
        # pairs with a null id are not matrix entries
        self._count = df.select([col_user, col_item]).drop_nulls().unique().height

        logger.debug(
            "Built %s: %d users, %d items, %d entries",
            type(self).__name__,
            len(self._users),
            len(self._items),
            self._count,
        )

    def user_count(self) -> int:
        return len(self._users)

    def item_count(self) -> int:
        return len(self._items)

    def interaction_count(self) -> int:
        return self._count

    def user_ids(self) -> FrozenSet[Hashable]:
        return self._users

    def item_ids(self) -> FrozenSet[Hashable]:
        return self._items

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(users={self.user_count()}, "
            f"items={self.item_count()}, {self.noun}={self.interaction_count()})"
        )


class TimedRatings(Ratings):
    """Ratings with a timestamp column.

    Args:
        df: Frame with user, item, rating and timestamp columns.
        col_timestamp: Timestamp column name. Any orderable polars dtype works
            (integers, datetimes, dates).
    """

    is_timed = True

    def __init__(
        self,
        df: pl.DataFrame,
        col_user: str = DEFAULT_USER_COL,
        col_item: str = DEFAULT_ITEM_COL,
        col_rating: Optional[str] = DEFAULT_RATING_COL,
        col_timestamp: str = DEFAULT_TIMESTAMP_COL,
    ):
        if df is not None:
            _require_columns(df, [col_timestamp])
        super().__init__(df, col_user=col_user, col_item=col_item, col_rating=col_rating)
        self.col_timestamp = col_timestamp

        timestamps = df.get_column(col_timestamp)
        self._earliest = timestamps.min()
        self._latest = timestamps.max()

    def earliest_time(self) -> Any:
        return self._earliest

    def latest_time(self) -> Any:
        return self._latest


class PosOnlyFeedback(Ratings):
    """Positive-only feedback: (user, item) events without rating values."""

    noun = "events"

    def __init__(
        self,
        df: pl.DataFrame,
        col_user: str = DEFAULT_USER_COL,
        col_item: str = DEFAULT_ITEM_COL,
    ):
        super().__init__(df, col_user=col_user, col_item=col_item, col_rating=None)
