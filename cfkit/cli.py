#!/usr/bin/env python
"""
Dataset statistics command line tool.

Usage:
    cfkit-stats --train data/train.parquet [--test data/test.parquet] [--overlap]
    cfkit-stats --train data/events.csv --feedback --item-attributes data/genres.csv

Reads CSV or Parquet files with polars and prints one line per section:
training data, test data, train/test overlap and attribute coverage.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import polars as pl
from dotenv import load_dotenv
from polars.exceptions import PolarsError

from cfkit.config import StatsConfig
from cfkit.data import PosOnlyFeedback, Ratings, SparseBooleanMatrix, TimedRatings
from cfkit.stats import display_data_stats, display_feedback_stats
from cfkit.utils.constants import DEFAULT_ATTRIBUTE_COL, DEFAULT_ENTITY_COL

logger = logging.getLogger(__name__)


def read_file(path: str | Path) -> pl.DataFrame:
    """Read CSV or Parquet file."""
    path = Path(path)
    ext = path.suffix.lower()

    if ext == ".csv":
        return pl.read_csv(path)
    if ext == ".parquet":
        return pl.read_parquet(path)

    raise ValueError(f"Unsupported file format: {ext}")


def load_ratings(path: str, config: StatsConfig, feedback: bool = False) -> Ratings:
    """Load a rating file, picking the collection type from its columns."""
    df = read_file(path)
    logger.debug(f"Loaded {df.height} rows from {path} with schema: {df.schema}")

    if feedback:
        return PosOnlyFeedback(df, col_user=config.col_user, col_item=config.col_item)
    if config.col_timestamp in df.columns:
        return TimedRatings(
            df,
            col_user=config.col_user,
            col_item=config.col_item,
            col_rating=config.col_rating,
            col_timestamp=config.col_timestamp,
        )
    return Ratings(
        df,
        col_user=config.col_user,
        col_item=config.col_item,
        col_rating=config.col_rating,
    )


def load_attributes(
    path: Optional[str],
    col_entity: str = DEFAULT_ENTITY_COL,
    col_attribute: str = DEFAULT_ATTRIBUTE_COL,
) -> Optional[SparseBooleanMatrix]:
    """Load an (entity, attribute) pair file, or return None without a path."""
    if path is None:
        return None
    return SparseBooleanMatrix.from_dataframe(
        read_file(path), col_entity=col_entity, col_attribute=col_attribute
    )


def build_parser(config: StatsConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print statistics of a recommender dataset")
    parser.add_argument("--train", type=str, required=True, help="Training data file")
    parser.add_argument("--test", type=str, default=None, help="Test data file")
    parser.add_argument(
        "--user-attributes", type=str, default=None, help="User attribute pairs file"
    )
    parser.add_argument(
        "--item-attributes", type=str, default=None, help="Item attribute pairs file"
    )
    parser.add_argument(
        "--overlap",
        action="store_true",
        default=config.display_overlap,
        help="Report test users/items missing from the training data",
    )
    parser.add_argument(
        "--feedback",
        action="store_true",
        help="Treat the data as positive-only feedback (no rating column)",
    )
    parser.add_argument("--col-user", type=str, default=config.col_user)
    parser.add_argument("--col-item", type=str, default=config.col_item)
    parser.add_argument("--col-rating", type=str, default=config.col_rating)
    parser.add_argument("--col-timestamp", type=str, default=config.col_timestamp)
    parser.add_argument("--col-entity", type=str, default=DEFAULT_ENTITY_COL)
    parser.add_argument("--col-attribute", type=str, default=DEFAULT_ATTRIBUTE_COL)
    parser.add_argument(
        "--sparsity-decimals", type=int, default=config.sparsity_decimals
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    config = StatsConfig.from_env()
    args = build_parser(config).parse_args(argv)

    config.col_user = args.col_user
    config.col_item = args.col_item
    config.col_rating = args.col_rating
    config.col_timestamp = args.col_timestamp
    config.sparsity_decimals = args.sparsity_decimals
    config.display_overlap = args.overlap
    config.validate()

    # Configure logging
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        train = load_ratings(args.train, config, feedback=args.feedback)
        test = load_ratings(args.test, config, feedback=args.feedback) if args.test else None
        user_attributes = load_attributes(args.user_attributes, args.col_entity, args.col_attribute)
        item_attributes = load_attributes(args.item_attributes, args.col_entity, args.col_attribute)
    except (OSError, ValueError, PolarsError) as e:
        logger.error(f"Failed to load data: {e}")
        return 1

    if args.feedback:
        lines = display_feedback_stats(
            train,
            test,
            user_attributes,
            item_attributes,
            write=print,
            sparsity_decimals=config.sparsity_decimals,
        )
    else:
        lines = display_data_stats(
            train,
            test,
            user_attributes,
            item_attributes,
            display_overlap=config.display_overlap,
            write=print,
            sparsity_decimals=config.sparsity_decimals,
        )

    logger.debug(f"Printed {len(lines)} statistics lines")
    return 0


if __name__ == "__main__":
    sys.exit(main())
