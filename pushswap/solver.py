"""Find a sequence of operations that sorts the numbers given on the command line."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from pushswap.insertion_sort import insertion_sort
from pushswap.parsing import InputError, parse_numbers, rank_values
from pushswap.small_sort import sort_small
from pushswap.stacks import Operation, Stacks

SMALL_LIMIT = 6
LARGE_LIMIT = 750
_MODES = (0, 1, 2, 3)


def _record(
    values: Sequence[int], ranks: Sequence[int], sorter: Callable[[Stacks], None]
) -> list[Operation]:
    """Run ``sorter`` on fresh stacks and return the operations it performed."""
    performed: list[Operation] = []
    stacks = Stacks(values, ranks, lambda _stacks, operation: performed.append(operation))
    sorter(stacks)
    return performed


def _pick_mode(counts: Sequence[int]) -> int:
    """Choose the insertion mode whose run is to be kept.

    The third test weighs mode 1 against mode 3 rather than mode 2, which
    decides the choice in some ties and near ties.
    """
    c0, c1, c2, c3 = counts
    if c0 <= c1 and c0 <= c2 and c0 <= c3:
        return 0
    if c1 <= c0 and c1 <= c2 and c1 <= c3:
        return 1
    if c2 <= c0 and c2 <= c1 and c1 <= c3:
        return 2
    return 3


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort ``values`` in ascending order.

    An input that is already sorted, or holds at most one number, needs no
    operation. Raises :class:`InputError` when ``values`` has duplicates.
    """
    if len(set(values)) != len(values):
        raise InputError("duplicate numbers in arguments")
    if len(values) <= 1:
        return []
    ranks = rank_values(values)
    if all(lower < upper for lower, upper in zip(ranks, ranks[1:])):
        return []
    size = len(values)
    if size < SMALL_LIMIT:
        return _record(values, ranks, sort_small)
    if size >= LARGE_LIMIT:
        return _record(values, ranks, lambda stacks: insertion_sort(stacks, 1))
    runs = [
        _record(values, ranks, lambda stacks, mode=mode: insertion_sort(stacks, mode))
        for mode in _MODES
    ]
    return runs[_pick_mode([len(run) for run in runs])]


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the numbers in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if len(values) <= 1:
        return 0
    sys.stdout.write("".join(f"{operation}\n" for operation in solve(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())