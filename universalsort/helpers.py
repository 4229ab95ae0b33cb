"""Small helpers shared by the sorting algorithms."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

from universalsort.stats import Statistics


def median(a: Any, b: Any, c: Any) -> Any:
    """Median of three values; raises ValueError if they cannot be ordered."""
    if a <= b <= c:
        return b
    if a <= c <= b:
        return c
    if b <= a <= c:
        return a
    if b <= c <= a:
        return c
    if c <= a <= b:
        return a
    if c <= b <= a:
        return b
    raise ValueError("invalid input to median()")


def swap(values: MutableSequence, i: int, j: int, stats: Statistics) -> None:
    """Exchange two elements, counting the exchange as three moves."""
    values[i], values[j] = values[j], values[i]
    stats.add_moves(3)


def index_of_min(values: Sequence) -> int:
    """Index of the first occurrence of the smallest element."""
    if not values:
        raise ValueError("index_of_min() of an empty sequence")
    best = 0
    for index, value in enumerate(values):
        if value < values[best]:
            best = index
    return best