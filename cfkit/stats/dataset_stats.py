"""
Descriptive statistics for sparse rating datasets.

This module reports, for a training and an optional test collection:
- users, items, entries and sparsity of the implicit user x item matrix
- the rating period of time-stamped collections
- users and items of the test data unseen in the training data (overlap)
- coverage of optional user and item attribute matrices

Everything is derived from summary counts and id sets; the user x item
matrix is never built.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from cfkit.data.protocols import AttributeMatrix, RatingCollection
from cfkit.utils.timing import measure_time

logger = logging.getLogger(__name__)

# Sparsity reported for a matrix with zero users or zero items
EMPTY_MATRIX_SPARSITY = 0.0

DEFAULT_SPARSITY_DECIMALS = 5

TRAINING_LABEL = "training data: "
TEST_LABEL = "test data:     "

Writer = Callable[[str], None]


@dataclass(frozen=True)
class DensityStats:
    """Size and sparsity of one user x item matrix."""

    num_users: int
    num_items: int
    num_entries: int
    matrix_size: int
    empty_size: int
    sparsity: float


@dataclass(frozen=True)
class OverlapStats:
    """Users and items of the test data that the training data lacks."""

    new_users: int
    new_items: int
    seconds: float


@dataclass(frozen=True)
class AttributeCoverage:
    """Counts describing one attribute matrix."""

    num_attributes: int
    num_entities: int
    num_assignments: int
    num_covered_entities: int


def compute_density(num_users: int, num_items: int, num_entries: int) -> DensityStats:
    """Compute matrix size, empty cells and sparsity percentage.

    Python integers do not overflow, so ``num_users * num_items`` is exact even
    for catalogs far beyond 32-bit range.

    Args:
        num_users: Distinct users.
        num_items: Distinct items.
        num_entries: Recorded (user, item) entries.

    Returns:
        DensityStats. When the matrix is empty (no users or no items) the
        sparsity is ``EMPTY_MATRIX_SPARSITY``.

    Raises:
        ValueError: If any count is negative.
    """
    for name, value in (
        ("num_users", num_users),
        ("num_items", num_items),
        ("num_entries", num_entries),
    ):
        if value < 0:
            raise ValueError(f"{name} must be >= 0. Got: {value}")

    matrix_size = int(num_users) * int(num_items)
    empty_size = matrix_size - int(num_entries)

    if matrix_size == 0:
        sparsity = EMPTY_MATRIX_SPARSITY
    else:
        sparsity = 100.0 * empty_size / matrix_size

    return DensityStats(
        num_users=int(num_users),
        num_items=int(num_items),
        num_entries=int(num_entries),
        matrix_size=matrix_size,
        empty_size=empty_size,
        sparsity=sparsity,
    )


def density_of(ratings: RatingCollection) -> DensityStats:
    """Density statistics of a rating collection."""
    return compute_density(
        ratings.user_count(), ratings.item_count(), ratings.interaction_count()
    )


def _count_new(train: RatingCollection, test: RatingCollection):
    new_users = len(set(test.user_ids()).difference(train.user_ids()))
    new_items = len(set(test.item_ids()).difference(train.item_ids()))
    return new_users, new_items


def compute_overlap(train: RatingCollection, test: RatingCollection) -> OverlapStats:
    """Count test users and items absent from the training data.

    The wall-clock time of the two set differences is measured as well.
    """
    (new_users, new_items), seconds = measure_time(_count_new, train, test)
    return OverlapStats(new_users=new_users, new_items=new_items, seconds=seconds)


def compute_attribute_coverage(attributes: AttributeMatrix) -> AttributeCoverage:
    """Attributes, entities, assignments and entities with any assignment."""
    return AttributeCoverage(
        num_attributes=attributes.column_count(),
        num_entities=attributes.row_count(),
        num_assignments=attributes.entry_count(),
        num_covered_entities=len(attributes.non_empty_row_ids()),
    )


def format_sparsity(value: float, decimals: int = DEFAULT_SPARSITY_DECIMALS) -> str:
    """Format with at most ``decimals`` digits, dropping trailing zeros."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _section_line(label: str, stats: DensityStats, noun: str, decimals: int) -> str:
    return (
        f"{label}{stats.num_users} users, {stats.num_items} items, "
        f"{stats.num_entries} {noun}, sparsity {format_sparsity(stats.sparsity, decimals)}"
    )


def _noun(ratings: RatingCollection) -> str:
    return getattr(ratings, "noun", "ratings")


def _period_line(ratings: RatingCollection) -> Optional[str]:
    if not getattr(ratings, "is_timed", False):
        return None
    return f"rating period: {ratings.earliest_time()} to {ratings.latest_time()}"


def _overlap_line(overlap: OverlapStats) -> str:
    return (
        f"{overlap.new_users} new users, {overlap.new_items} new items "
        f"({overlap.seconds:.3f} seconds)"
    )


def _attribute_line(kind: str, coverage: AttributeCoverage) -> str:
    entities = f"{kind}s"
    return (
        f"{coverage.num_attributes} {kind} attributes for {coverage.num_entities} {entities}, "
        f"{coverage.num_assignments} assignments, "
        f"{coverage.num_covered_entities} {entities} with attribute assignments"
    )


class _Report:
    """Collects lines and forwards each one to the writer as it is produced."""

    def __init__(self, write: Optional[Writer]):
        self._write = write if write is not None else logger.info
        self.lines: List[str] = []

    def emit(self, line: Optional[str]) -> None:
        if line is None:
            return
        self.lines.append(line)
        self._write(line)


def _emit_attribute_stats(
    report: _Report,
    user_attributes: Optional[AttributeMatrix],
    item_attributes: Optional[AttributeMatrix],
) -> None:
    if user_attributes is not None:
        report.emit(_attribute_line("user", compute_attribute_coverage(user_attributes)))
    if item_attributes is not None:
        report.emit(_attribute_line("item", compute_attribute_coverage(item_attributes)))


def display_data_stats(
    train: RatingCollection,
    test: Optional[RatingCollection] = None,
    user_attributes: Optional[AttributeMatrix] = None,
    item_attributes: Optional[AttributeMatrix] = None,
    display_overlap: bool = False,
    write: Optional[Writer] = None,
    sparsity_decimals: int = DEFAULT_SPARSITY_DECIMALS,
) -> List[str]:
    """Report statistics of a rating prediction dataset.

    Entries are counted with each collection's ``noun`` (``ratings`` unless
    the collection says otherwise).

    Args:
        train: Training ratings.
        test: Optional test ratings. Its section is skipped when missing.
        user_attributes: Optional user attribute matrix.
        item_attributes: Optional item attribute matrix.
        display_overlap: Report test users/items unseen in training. Needs ``test``.
        write: Destination of each line. Defaults to ``logger.info``.
        sparsity_decimals: Maximum number of decimals of the sparsity.

    Returns:
        List[str]: The emitted lines, in order.

    Raises:
        ValueError: If ``train`` is missing.
    """
    if train is None:
        raise ValueError("Training data is required")

    report = _Report(write)

    report.emit(_section_line(TRAINING_LABEL, density_of(train), _noun(train), sparsity_decimals))
    report.emit(_period_line(train))

    if test is not None:
        report.emit(_section_line(TEST_LABEL, density_of(test), _noun(test), sparsity_decimals))
        report.emit(_period_line(test))

    if display_overlap and test is not None:
        report.emit(_overlap_line(compute_overlap(train, test)))

    _emit_attribute_stats(report, user_attributes, item_attributes)
    return report.lines


def display_feedback_stats(
    train: RatingCollection,
    test: Optional[RatingCollection] = None,
    user_attributes: Optional[AttributeMatrix] = None,
    item_attributes: Optional[AttributeMatrix] = None,
    write: Optional[Writer] = None,
    sparsity_decimals: int = DEFAULT_SPARSITY_DECIMALS,
) -> List[str]:
    """Report statistics of a positive-only (item recommendation) dataset.

    Same sections as ``display_data_stats`` with entries counted as events,
    and without rating period or overlap.
    """
    if train is None:
        raise ValueError("Training data is required")

    report = _Report(write)

    report.emit(_section_line(TRAINING_LABEL, density_of(train), "events", sparsity_decimals))
    if test is not None:
        report.emit(_section_line(TEST_LABEL, density_of(test), "events", sparsity_decimals))

    _emit_attribute_stats(report, user_attributes, item_attributes)
    return report.lines


def display_attribute_stats(
    user_attributes: Optional[AttributeMatrix],
    item_attributes: Optional[AttributeMatrix],
    write: Optional[Writer] = None,
) -> List[str]:
    """Report coverage of user and item attributes; absent matrices are skipped."""
    report = _Report(write)
    _emit_attribute_stats(report, user_attributes, item_attributes)
    return report.lines
