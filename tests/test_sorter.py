import io
import random
import re

import pytest

from universalsort.sorter import Rand48, UniversalSorter
from universalsort.stats import Statistics, count_breaks


def _sample(n, seed=3):
    return random.Random(seed).sample(range(1000), n)


def test_rand48_values_in_unit_interval():
    rng = Rand48(42)
    draws = [rng.random() for _ in range(200)]
    assert all(0.0 <= x < 1.0 for x in draws)
    assert len(set(draws)) > 190


def test_rand48_is_reproducible_and_reseedable():
    first = Rand48(7)
    seq = [first.random() for _ in range(5)]
    second = Rand48(7)
    assert [second.random() for _ in range(5)] == seq
    first.seed(7)
    assert [first.random() for _ in range(5)] == seq


def test_rand48_seeds_differ():
    assert Rand48(1).random() != Rand48(2).random()


def test_insertion_sort_sorts_and_counts_one_call():
    values = _sample(30)
    stats = Statistics()
    UniversalSorter().insertion_sort(values, 0, len(values) - 1, stats)
    assert values == sorted(values)
    assert stats.calls == 1


def test_insertion_sort_on_sorted_input():
    values = list(range(10))
    stats = Statistics()
    UniversalSorter().insertion_sort(values, 0, len(values) - 1, stats)
    assert values == list(range(10))
    assert stats.cmps == len(values) - 1
    assert stats.moves == 2 * (len(values) - 1)


@pytest.mark.parametrize("min_size", [1, 3, 10])
def test_quick_sort_sorts(min_size):
    values = _sample(60, seed=min_size)
    stats = Statistics()
    UniversalSorter().quick_sort(values, 0, len(values) - 1, stats, min_size)
    assert values == sorted(values)
    assert stats.calls >= 2


def test_quick_sort_with_duplicates():
    values = [random.Random(9).randint(0, 5) for _ in range(50)]
    expected = sorted(values)
    UniversalSorter().quick_sort(values, 0, len(values) - 1, Statistics(), 2)
    assert values == expected


def test_partition3_splits_around_pivot():
    values = _sample(25)
    original = sorted(values)
    stats = Statistics()
    i, j = UniversalSorter().partition3(values, 0, len(values) - 1, stats)
    assert i > j
    assert max(values[: j + 1]) <= min(values[i:])
    assert sorted(values) == original
    assert stats.calls == 1


def test_sort_uses_insertion_below_break_threshold():
    values = _sample(40)
    qs, ins = Statistics(), Statistics()
    UniversalSorter(break_count=5).sort(values, 4, 10, qs, ins)
    assert values == sorted(values)
    assert ins.calls == 1
    assert qs.calls == 0


def test_sort_uses_quicksort_above_break_threshold():
    values = _sample(40)
    qs, ins = Statistics(), Statistics()
    UniversalSorter(break_count=20).sort(values, 4, 10, qs, ins)
    assert values == sorted(values)
    assert ins == Statistics()
    assert qs.calls > 0


def test_shuffle_is_deterministic_permutation():
    sorter = UniversalSorter()
    a = list(range(20))
    b = list(range(20))
    sorter.shuffle(a, 5, 11)
    sorter.shuffle(b, 5, 11)
    assert a == b
    assert sorted(a) == list(range(20))
    assert a != list(range(20))


def test_shuffle_zero_times_is_noop():
    values = list(range(8))
    UniversalSorter().shuffle(values, 0, 1)
    assert values == list(range(8))


def test_shuffle_too_small_raises():
    with pytest.raises(ValueError):
        UniversalSorter().shuffle([1], 3, 1)


def test_new_range_pinned_example():
    assert UniversalSorter().new_range(0, 2, 52, 10, 6) == (2, 22, 4, 0, 2)


def test_new_range_edges_and_middle():
    sorter = UniversalSorter()
    assert sorter.new_range(5, 0, 50, 10, 6)[3:] == (3, 5)
    assert sorter.new_range(2, 0, 50, 10, 6)[3:] == (1, 3)


def test_new_range_step_never_zero():
    assert UniversalSorter().new_range(1, 0, 3, 1, 4)[2] == 1


def test_partition_threshold_reports_and_returns_in_range():
    values = _sample(40)
    original = list(values)
    sorter = UniversalSorter(count_breaks(values), 5)
    out = io.StringIO()
    limit = sorter.partition_threshold(values, 10, 1.0, 1.0, 1.0, out)
    assert values == original
    assert 2 <= limit <= len(values)
    lines = out.getvalue().splitlines()
    assert lines[0] == "iter 0"
    mps = [line for line in lines if line.startswith("mps ")]
    assert mps
    assert all(re.fullmatch(r"mps \d+ cost \d+\.\d{9} cmp \d+ move \d+ calls \d+", m) for m in mps)
    summary = [line for line in lines if line.startswith("numMPS")]
    assert f"limParticao {limit} " in summary[-1]
    assert re.search(r"mpsdiff \d+\.\d{6}$", summary[-1])


def test_partition_threshold_too_small_raises():
    with pytest.raises(ValueError):
        UniversalSorter().partition_threshold([3, 1, 2], 1, 1.0, 1.0, 1.0, io.StringIO())


def test_break_threshold_reports_and_returns_in_range():
    values = _sample(40)
    sorter = UniversalSorter(count_breaks(values), 5)
    out = io.StringIO()
    limit = sorter.break_threshold(values, 10, 1.0, 1.0, 1.0, 5, out)
    assert 1 <= limit <= len(values) // 2
    text = out.getvalue()
    assert text.startswith("iter 0\n")
    assert re.search(r"^qs lq 1 cost \d+\.\d{9} cmp \d+ move \d+ calls \d+$", text, re.M)
    assert re.search(r"^in lq 1 cost \d+\.\d{9} cmp \d+ move \d+ calls \d+$", text, re.M)
    summary = [line for line in text.splitlines() if line.startswith("numlq")]
    assert f"limQuebras {limit} " in summary[-1]


def test_break_threshold_too_small_raises():
    with pytest.raises(ValueError):
        UniversalSorter().break_threshold(list(range(8)), 1, 1.0, 1.0, 1.0, 2, io.StringIO())