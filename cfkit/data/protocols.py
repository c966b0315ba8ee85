"""Read-only interfaces consumed by the statistics reporter.

Any object with these methods can be reported on; the concrete classes in
``cfkit.data.ratings`` and ``cfkit.data.attributes`` are one implementation.
"""

from typing import Any, Hashable, Protocol, Set, runtime_checkable


@runtime_checkable
class RatingCollection(Protocol):
    """Sparse (user, item) -> rating matrix seen through its summary counts.

    ``is_timed`` is fixed when the collection is built; when true the object
    also satisfies ``TimedRatingCollection``.
    """

    is_timed: bool

    def user_count(self) -> int: ...

    def item_count(self) -> int: ...

    def interaction_count(self) -> int: ...

    def user_ids(self) -> Set[Hashable]: ...

    def item_ids(self) -> Set[Hashable]: ...


@runtime_checkable
class TimedRatingCollection(RatingCollection, Protocol):
    """Rating collection that also knows the time span of its events."""

    def earliest_time(self) -> Any: ...

    def latest_time(self) -> Any: ...


@runtime_checkable
class AttributeMatrix(Protocol):
    """Sparse boolean (entity, attribute) matrix."""

    def column_count(self) -> int: ...

    def row_count(self) -> int: ...

    def entry_count(self) -> int: ...

    def non_empty_row_ids(self) -> Set[int]: ...

    def non_empty_column_ids(self) -> Set[int]: ...
