"""Quicksort/insertion-sort selection and threshold tuning driven by an operation-count cost model."""

__version__ = "0.1.0"
__all__ = ["stats", "helpers", "sorter", "cli"]