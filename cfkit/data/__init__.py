"""Rating collections and attribute matrices.

Quick start:
    import polars as pl
    from cfkit.data import Ratings, SparseBooleanMatrix

    train = Ratings(pl.read_parquet("train.parquet"), col_user="user_id", col_item="book_id")
    genres = SparseBooleanMatrix(rows=[0, 0, 1], columns=[2, 5, 2])
"""

from .attributes import SparseBooleanMatrix
from .protocols import AttributeMatrix, RatingCollection, TimedRatingCollection
from .ratings import PosOnlyFeedback, Ratings, TimedRatings

__all__ = [
    # Interfaces
    "AttributeMatrix",
    "RatingCollection",
    "TimedRatingCollection",
    # Implementations
    "Ratings",
    "TimedRatings",
    "PosOnlyFeedback",
    "SparseBooleanMatrix",
]
