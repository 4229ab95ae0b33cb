"""Command line entry: read a problem file and tune the sorter thresholds."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from universalsort.sorter import UniversalSorter
from universalsort.stats import count_breaks


@dataclass
class InputData:
    """Parameters and keys read from an input file."""

    seed: int
    cost_threshold: float
    a: float
    b: float
    c: float
    size: int
    values: list[int] = field(default_factory=list)


def parse_input(text: str) -> InputData:
    """Parse seed, cost threshold, a, b, c, size and then size integer keys."""
    tokens = text.split()
    if len(tokens) < 6:
        raise ValueError("missing header fields")
    seed = int(tokens[0])
    cost_threshold, a, b, c = (float(t) for t in tokens[1:5])
    size = int(tokens[5])
    if size < 0:
        raise ValueError("size must not be negative")
    values: list[int] = []
    for token in tokens[6:]:
        if len(values) >= size:
            break
        try:
            values.append(int(token))
        except ValueError:
            break
    if len(values) < size:
        raise ValueError(f"expected {size} keys, found {len(values)}")
    return InputData(seed, cost_threshold, a, b, c, size, values)


def run(data: InputData, out: TextIO | None = None) -> tuple[int, int]:
    """Print the tuning report; return (partition threshold, break threshold)."""
    out = sys.stdout if out is None else out
    breaks = count_breaks(data.values)
    sorter = UniversalSorter(breaks, data.seed)
    print(f"size {data.size} seed {data.seed} breaks {breaks}", file=out)
    print(file=out)
    partition = sorter.partition_threshold(
        data.values, data.cost_threshold, data.a, data.b, data.c, out
    )
    breaks_limit = sorter.break_threshold(
        data.values, data.cost_threshold, data.a, data.b, data.c, partition, out
    )
    return partition, breaks_limit


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return 1
    try:
        data = parse_input(text)
        run(data)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())