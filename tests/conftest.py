"""Shared fixtures and stub collections.

The stubs implement the read-only interfaces directly from plain sets and
counts so statistics can be checked without building any DataFrame.
"""

import pytest


class StubRatings:
    is_timed = False

    def __init__(self, users, items, count):
        self._users = set(users)
        self._items = set(items)
        self._count = count

    def user_count(self):
        return len(self._users)

    def item_count(self):
        return len(self._items)

    def interaction_count(self):
        return self._count

    def user_ids(self):
        return self._users

    def item_ids(self):
        return self._items


class StubTimedRatings(StubRatings):
    is_timed = True

    def __init__(self, users, items, count, earliest, latest):
        super().__init__(users, items, count)
        self._earliest = earliest
        self._latest = latest

    def earliest_time(self):
        return self._earliest

    def latest_time(self):
        return self._latest


class StubAttributes:
    def __init__(self, columns, rows, entries, non_empty_rows, non_empty_columns=()):
        self._columns = columns
        self._rows = rows
        self._entries = entries
        self._non_empty_rows = set(non_empty_rows)
        self._non_empty_columns = set(non_empty_columns)

    def column_count(self):
        return self._columns

    def row_count(self):
        return self._rows

    def entry_count(self):
        return self._entries

    def non_empty_row_ids(self):
        return self._non_empty_rows

    def non_empty_column_ids(self):
        return self._non_empty_columns


@pytest.fixture
def train():
    """4 users x 5 items with 10 ratings: sparsity 50%."""
    return StubRatings(users=[1, 2, 3, 4], items=[10, 11, 12, 13, 14], count=10)


@pytest.fixture
def holdout():
    """2 users x 2 items, one user and one item unseen in training."""
    return StubRatings(users=[4, 5], items=[14, 15], count=3)
