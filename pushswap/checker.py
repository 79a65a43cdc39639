"""Read operations from standard input and tell whether they sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_numbers, rank_values
from pushswap.stacks import Operation, Stacks


def parse_instructions(text: str) -> list[Operation]:
    """Split ``text`` into operations, each on its own line ending in a newline.

    Raises :class:`InputError` on an unknown instruction, an empty line or a
    last instruction without its newline.
    """
    if not text:
        return []
    if not text.endswith("\n"):
        raise InputError("instruction not terminated by a newline")
    operations: list[Operation] = []
    for line in text[:-1].split("\n"):
        try:
            operations.append(Operation(line))
        except ValueError:
            raise InputError(f"unknown instruction {line!r}") from None
    return operations


def run_checker(values: Sequence[int], text: str) -> str:
    """Apply the instructions in ``text`` to ``values``; return ``"OK"`` or ``"KO"``.

    Raises :class:`InputError` when the instructions are malformed.
    """
    operations = parse_instructions(text)
    stacks = Stacks(values, rank_values(values))
    for operation in operations:
        stacks.apply(operation)
    return "OK" if stacks.is_sorted() else "KO"


def main(argv: Sequence[str] | None = None) -> int:
    """Check the instructions on standard input against the numbers in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_numbers(args)
        if len(values) <= 1:
            return 0
        verdict = run_checker(values, sys.stdin.read())
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(f"{verdict}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())