"""
Dataset statistics for recommender data.

Quick start:
    from cfkit.stats import display_data_stats

    lines = display_data_stats(train, test, display_overlap=True)
"""

from .dataset_stats import (
    EMPTY_MATRIX_SPARSITY,
    AttributeCoverage,
    DensityStats,
    OverlapStats,
    compute_attribute_coverage,
    compute_density,
    compute_overlap,
    density_of,
    display_attribute_stats,
    display_data_stats,
    display_feedback_stats,
    format_sparsity,
)

__all__ = [
    # Result types
    "DensityStats",
    "OverlapStats",
    "AttributeCoverage",
    "EMPTY_MATRIX_SPARSITY",
    # Computations
    "compute_density",
    "density_of",
    "compute_overlap",
    "compute_attribute_coverage",
    "format_sparsity",
    # Reports
    "display_data_stats",
    "display_feedback_stats",
    "display_attribute_stats",
]
