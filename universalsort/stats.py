"""Operation counters for sorting runs and the cost model built on them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise


@dataclass
class Statistics:
    """Counts of calls, element moves and comparisons made by a sort."""

    calls: int = 0
    moves: int = 0
    cmps: int = 0
    cost: float = 0.0

    def add_calls(self, n: int = 1) -> None:
        self.calls += n

    def add_moves(self, n: int = 1) -> None:
        self.moves += n

    def add_cmps(self, n: int = 1) -> None:
        self.cmps += n

    def compute_cost(self, a: float, b: float, c: float) -> float:
        """Weight comparisons by a, moves by b and calls by c; store and return the cost."""
        self.cost = a * self.cmps + b * self.moves + c * self.calls
        return self.cost

    def __add__(self, other: Statistics) -> Statistics:
        if not isinstance(other, Statistics):
            return NotImplemented
        return Statistics(
            calls=self.calls + other.calls,
            moves=self.moves + other.moves,
            cmps=self.cmps + other.cmps,
            cost=self.cost + other.cost,
        )


def count_breaks(values: Sequence) -> int:
    """Number of positions where an element is smaller than the one before it."""
    return sum(1 for prev, cur in pairwise(values) if cur < prev)