"""Adaptive sorter that tunes the quicksort/insertion-sort switch-over points."""

from __future__ import annotations

import struct
import sys
from collections.abc import MutableSequence, Sequence
from typing import TextIO

from universalsort.helpers import index_of_min, median, swap
from universalsort.stats import Statistics

INTERVALS = 6

_MULTIPLIER = 0x5DEECE66D
_INCREMENT = 0xB
_MASK = (1 << 48) - 1


class Rand48:
    """The 48-bit linear congruential generator behind srand48/drand48."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        self._state = ((seed & 0xFFFFFFFF) << 16) | 0x330E

    def random(self) -> float:
        """Next value in [0, 1)."""
        self._state = (_MULTIPLIER * self._state + _INCREMENT) & _MASK
        return self._state / (1 << 48)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class UniversalSorter:
    """Chooses between quicksort and insertion sort and tunes their thresholds."""

    def __init__(self, break_count: int = 0, seed: int = 0) -> None:
        self.break_count = break_count
        self.seed = seed

    def sort(
        self,
        values: MutableSequence,
        min_partition_size: int,
        break_threshold: int,
        stats_qs: Statistics,
        stats_in: Statistics,
    ) -> None:
        end = len(values) - 1
        if self.break_count < break_threshold or len(values) <= min_partition_size:
            self.insertion_sort(values, 0, end, stats_in)
        else:
            self.quick_sort(values, 0, end, stats_qs, min_partition_size)

    def shuffle(self, values: MutableSequence, num_shuffle: int, seed: int) -> None:
        """Apply num_shuffle random swaps of distinct positions, seeded by seed."""
        size = len(values)
        if num_shuffle > 0 and size < 2:
            raise ValueError("need at least two elements to shuffle")
        rng = Rand48(seed)
        for _ in range(num_shuffle):
            p1 = p2 = 0
            while p1 == p2:
                p1 = int(rng.random() * size)
                p2 = int(rng.random() * size)
            values[p1], values[p2] = values[p2], values[p1]

    def partition_threshold(
        self,
        values: Sequence,
        cost_threshold: float,
        a: float,
        b: float,
        c: float,
        out: TextIO | None = None,
    ) -> int:
        """Search for the minimum partition size giving the lowest sorting cost."""
        out = sys.stdout if out is None else out
        threshold = int(cost_threshold)
        size = len(values)
        low, high = 2, size
        step = _cdiv(high - low, 5)
        if step <= 0:
            raise ValueError("too few elements to search a partition threshold")
        id_min, id_max = 0, INTERVALS - 1
        count = INTERVALS
        diff = threshold + 1
        limit = 0
        iteration = 0

        while diff > threshold and count >= 5:
            print(f"iter {iteration}", file=out)
            costs: list[float] = []
            for t in range(low, high + 1, step):
                trial = list(values)
                stats_qs, stats_in = Statistics(), Statistics()
                self.sort(trial, t, self.break_count, stats_qs, stats_in)
                total = stats_qs + stats_in
                costs.append(total.compute_cost(a, b, c))
                print(
                    f"mps {t} cost {total.cost:.9f} cmp {total.cmps} "
                    f"move {total.moves} calls {total.calls}",
                    file=out,
                )
            count = len(costs)
            best = index_of_min(costs)
            limit = low + best * step
            low, high, step, id_min, id_max = self.new_range(best, low, high, step, count)
            diff = abs(costs[id_min] - costs[id_max])
            print(
                f"numMPS {count} limParticao {limit} mpsdiff {_as_float32(diff):.6f}\n",
                file=out,
            )
            iteration += 1

        return limit

    def break_threshold(
        self,
        values: Sequence,
        cost_threshold: float,
        a: float,
        b: float,
        c: float,
        partition_threshold: int,
        out: TextIO | None = None,
    ) -> int:
        """Search for the number of breaks where both algorithms cost about the same."""
        out = sys.stdout if out is None else out
        threshold = int(cost_threshold)
        size = len(values)
        low, high = 1, size // 2
        step = _cdiv(high - low, 5)
        if step <= 0:
            raise ValueError("too few elements to search a break threshold")
        id_min = id_max = 0
        count = INTERVALS
        diff = threshold + 1
        limit = 0
        iteration = 0

        while diff > threshold and count >= 5:
            print(f"iter {iteration}", file=out)
            costs: list[float] = []
            costs_in: list[float] = []
            for t in range(low, high + 1, step):
                trial = list(values)
                stats_qs, stats_in, scratch = Statistics(), Statistics(), Statistics()

                self.insertion_sort(trial, 0, size - 1, scratch)
                self.shuffle(trial, t, self.seed)
                self.quick_sort(trial, 0, size - 1, stats_qs, partition_threshold)
                cost_qs = stats_qs.compute_cost(a, b, c)
                print(
                    f"qs lq {t} cost {stats_qs.cost:.9f} cmp {stats_qs.cmps} "
                    f"move {stats_qs.moves} calls {stats_qs.calls}",
                    file=out,
                )

                self.shuffle(trial, t, self.seed)
                self.insertion_sort(trial, 0, size - 1, stats_in)
                cost_in = stats_in.compute_cost(a, b, c)
                costs_in.append(cost_in)
                costs.append(abs(cost_in - cost_qs))
                print(
                    f"in lq {t} cost {stats_in.cost:.9f} cmp {stats_in.cmps} "
                    f"move {stats_in.moves} calls {stats_in.calls}",
                    file=out,
                )
            count = len(costs)
            best = index_of_min(costs)
            limit = low + best * step
            low, high, step, id_min, id_max = self.new_range(best, low, high, step, count)
            diff = abs(costs_in[id_min] - costs_in[id_max])
            print(
                f"numlq {count} limQuebras {limit} lqdiff {_as_float32(diff):.6f}\n",
                file=out,
            )
            iteration += 1

        return limit

    def new_range(
        self, best_index: int, low: int, high: int, step: int, count: int
    ) -> tuple[int, int, int, int, int]:
        """Narrow the search around best_index.

        Returns (low, high, step, id_min, id_max) for the next round.
        """
        if best_index == 0:
            new_min, new_max = 0, 2
        elif best_index == count - 1:
            new_min, new_max = count - 3, count - 1
        else:
            new_min, new_max = best_index - 1, best_index + 1
        new_low = low + new_min * step
        new_high = low + new_max * step
        new_step = _cdiv(new_high - new_low, 5) or 1
        return new_low, new_high, new_step, new_min, new_max

    def quick_sort(
        self,
        values: MutableSequence,
        start: int,
        end: int,
        stats: Statistics,
        min_partition_size: int,
    ) -> None:
        stats.add_calls()
        i, j = self.partition3(values, start, end, stats)
        if j > start:
            if j - start < min_partition_size:
                self.insertion_sort(values, start, j, stats)
            else:
                self.quick_sort(values, start, j, stats, min_partition_size)
        if i < end:
            if end - i < min_partition_size:
                self.insertion_sort(values, i, end, stats)
            else:
                self.quick_sort(values, i, end, stats, min_partition_size)

    def partition3(
        self, values: MutableSequence, start: int, end: int, stats: Statistics
    ) -> tuple[int, int]:
        """Partition around a median-of-three pivot; returns the (i, j) split points."""
        pivot = median(values[start], values[(start + end) // 2], values[end])
        i, j = start, end
        stats.add_calls()
        while True:
            while pivot > values[i]:
                stats.add_cmps()
                i += 1
            stats.add_cmps()
            while pivot < values[j]:
                stats.add_cmps()
                j -= 1
            stats.add_cmps()
            if i <= j:
                swap(values, i, j, stats)
                i += 1
                j -= 1
            if i > j:
                return i, j

    def insertion_sort(
        self, values: MutableSequence, start: int, end: int, stats: Statistics
    ) -> None:
        stats.add_calls()
        for i in range(start + 1, end + 1):
            key = values[i]
            stats.add_moves()
            j = i - 1
            while j >= 0 and key < values[j]:
                stats.add_cmps()
                values[j + 1] = values[j]
                stats.add_moves()
                j -= 1
            stats.add_cmps()
            values[j + 1] = key
            stats.add_moves()