"""Sparse boolean (entity, attribute) matrix backed by scipy."""

import logging
from typing import Iterable, Optional, Set, Tuple

import numpy as np
import polars as pl
from scipy import sparse

from cfkit.utils.constants import DEFAULT_ATTRIBUTE_COL, DEFAULT_ENTITY_COL

logger = logging.getLogger(__name__)


class SparseBooleanMatrix:
    """Boolean matrix of attribute assignments.

    Rows are entities (users or items), columns are attributes. Duplicate
    assignments collapse into a single true entry.

    Args:
        rows: Entity index of every assignment.
        columns: Attribute index of every assignment.
        shape: Optional ``(n_rows, n_columns)``. When omitted the matrix is
            just large enough to hold the largest indices.

    Raises:
        ValueError: On mismatched lengths, negative indices or indices that
            do not fit into ``shape``.
    """

    def __init__(
        self,
        rows: Iterable[int],
        columns: Iterable[int],
        shape: Optional[Tuple[int, int]] = None,
    ):
        row_idx = np.asarray(list(rows), dtype=np.int64)
        col_idx = np.asarray(list(columns), dtype=np.int64)

        if row_idx.shape != col_idx.shape:
            raise ValueError(
                f"Length of rows ({row_idx.size}) must match columns ({col_idx.size})"
            )
        if row_idx.size and (row_idx.min() < 0 or col_idx.min() < 0):
            raise ValueError("Row and column indices must be >= 0")

        inferred = (
            int(row_idx.max()) + 1 if row_idx.size else 0,
            int(col_idx.max()) + 1 if col_idx.size else 0,
        )
        if shape is None:
            shape = inferred
        elif shape[0] < inferred[0] or shape[1] < inferred[1]:
            raise ValueError(
                f"Shape {tuple(shape)} is too small for indices up to {inferred}"
            )

        matrix = sparse.coo_matrix(
            (np.ones(row_idx.size, dtype=np.int32), (row_idx, col_idx)),
            shape=shape,
        ).tocsr()
        # tocsr() sums repeated pairs; clamp them back to a single true entry
        self._matrix = matrix.astype(bool)

    @classmethod
    def from_dataframe(
        cls,
        df: pl.DataFrame,
        col_entity: str = DEFAULT_ENTITY_COL,
        col_attribute: str = DEFAULT_ATTRIBUTE_COL,
        shape: Optional[Tuple[int, int]] = None,
    ) -> "SparseBooleanMatrix":
        """Build from a frame of integer (entity, attribute) pairs."""
        missing = [col for col in (col_entity, col_attribute) if col not in df.columns]
        if missing:
            raise ValueError(
                f"Missing required columns: {missing}. Available columns: {df.columns}"
            )
        return cls(
            df.get_column(col_entity).to_numpy(),
            df.get_column(col_attribute).to_numpy(),
            shape=shape,
        )

    @property
    def matrix(self) -> sparse.csr_matrix:
        return self._matrix

    def column_count(self) -> int:
        return self._matrix.shape[1]

    def row_count(self) -> int:
        return self._matrix.shape[0]

    def entry_count(self) -> int:
        return int(self._matrix.nnz)

    def non_empty_row_ids(self) -> Set[int]:
        return {int(i) for i in np.flatnonzero(np.diff(self._matrix.indptr))}

    def non_empty_column_ids(self) -> Set[int]:
        return {int(j) for j in np.unique(self._matrix.indices)}

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        row, column = key
        return bool(self._matrix[row, column])

    def __repr__(self) -> str:
        return (
            f"SparseBooleanMatrix(shape={self._matrix.shape}, "
            f"entries={self.entry_count()})"
        )
