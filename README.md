# universalsort

A "universal" sorter that chooses between quicksort and insertion sort.
Each sort counts the comparisons, moves and calls it makes. A linear cost
model turns those counts into a cost. The package searches for two
thresholds:

* the **partition threshold**: the minimum partition size. Below it,
  quicksort hands a partition over to insertion sort.
* the **break threshold**: the number of "breaks" below which insertion sort
  is the cheaper choice. A break is a position where an element is smaller
  than the one before it.

## Installation

```
pip install .
```

## Command line

```
universalsort INPUT_FILE
```

The input file is a whitespace-separated list in this order:

```
seed cost_threshold a b c size
key1 key2 ... key_size
```

The keys are integers. The cost of a run is
`a * comparisons + b * moves + c * calls`.

The command first prints the size, the seed and the number of breaks. It then
prints every iteration of the partition-threshold search (`mps` lines) and of
the break-threshold search (`qs lq` / `in lq` lines). Each iteration ends with
the threshold chosen and the cost difference across the narrowed range.

The command exits with status 1 in these cases:

* no file is given;
* the file cannot be opened;
* the header is incomplete;
* there are fewer keys than `size`;
* there are too few keys to run a search.

In the last three cases it also prints a message starting with `error:` to
standard error.

## Library use

```python
from universalsort.stats import Statistics, count_breaks
from universalsort.sorter import UniversalSorter

values = [5, 3, 8, 1, 9, 2]
sorter = UniversalSorter(break_count=count_breaks(values), seed=1)

qs, ins = Statistics(), Statistics()
sorter.sort(values, 3, 2, qs, ins)
print(values)                                   # [1, 2, 3, 5, 8, 9]
print((qs + ins).compute_cost(1.0, 1.0, 1.0))
```

The main pieces are these:

* `Statistics` keeps the `calls`, `moves` and `cmps` counters and the last
  `cost` worked out by `compute_cost(a, b, c)`. Two `Statistics` can be added
  together with `+`.
* `count_breaks(values)` counts the breaks in a sequence.
* `UniversalSorter` has the following methods:
  * `sort` runs insertion sort when there are fewer breaks than the break
    threshold, or when the sequence is no longer than the minimum partition
    size. Otherwise it runs quicksort.
  * `quick_sort`, `partition3` and `insertion_sort` sort a sequence in place
    between two inclusive indices and record their operations in a
    `Statistics`.
  * `shuffle(values, num_shuffle, seed)` makes `num_shuffle` seeded swaps of
    distinct positions.
  * `partition_threshold` and `break_threshold` run the same threshold
    searches as the command. They write their report to any text stream you
    pass as `out`, or to standard output if you pass none. Both raise
    `ValueError` when the sequence is too short to search.
* `universalsort.helpers` provides `median`, `swap` (which counts as three
  moves) and `index_of_min`.
* `universalsort.cli` provides `parse_input(text)`, which returns an
  `InputData`, and `run(data, out)`, which prints the report and returns the
  two thresholds.

`universalsort.sorter` also provides `Rand48`, the 48-bit linear congruential
generator used by `srand48`/`drand48`. Shuffles made with a given seed can
therefore be reproduced.