"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operation(str, Enum):
    """An instruction of the puzzle, valued by its textual name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Element:
    """One number on a stack.

    ``rank`` is the number's position in ascending order. ``dist_a``,
    ``dist_b``, ``cost`` and ``placed`` are working fields of the sorting
    algorithms.
    """

    value: int
    rank: int
    dist_a: int = 0
    dist_b: int = 0
    cost: int = 0
    placed: bool = False


OperationListener = Callable[["Stacks", Operation], None]


def _swap_top(stack: list[Element]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[Element]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[Element]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def _move_top(source: list[Element], target: list[Element]) -> None:
    if source:
        target.insert(0, source.pop(0))


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each list is the top.

    Every operation, including one that changes nothing, is reported to
    ``on_operation`` (called with the stacks and the operation) when given.
    """

    def __init__(
        self,
        values: Sequence[int],
        ranks: Sequence[int],
        on_operation: Optional[OperationListener] = None,
    ) -> None:
        if len(values) != len(ranks):
            raise ValueError("values and ranks must have the same length")
        self.a: list[Element] = [
            Element(value, rank) for value, rank in zip(values, ranks)
        ]
        self.b: list[Element] = []
        self.size = len(self.a)
        self.on_operation = on_operation

    def __repr__(self) -> str:
        a = [element.rank for element in self.a]
        b = [element.rank for element in self.b]
        return f"Stacks(a={a}, b={b})"

    def _report(self, operation: Operation) -> None:
        if self.on_operation is not None:
            self.on_operation(self, operation)

    def apply(self, operation: Operation | str) -> None:
        """Perform ``operation`` given as an :class:`Operation` or its name."""
        operation = Operation(operation)
        getattr(self, operation.value)()

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap_top(self.a)
        self._report(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap_top(self.b)
        self._report(Operation.SB)

    def ss(self) -> None:
        """Do ``sa`` and ``sb`` at once."""
        _swap_top(self.b)
        _swap_top(self.a)
        self._report(Operation.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _move_top(self.b, self.a)
        self._report(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _move_top(self.a, self.b)
        self._report(Operation.PB)

    def ra(self) -> None:
        """Shift ``a`` up by one: the top becomes the bottom."""
        _rotate(self.a)
        self._report(Operation.RA)

    def rb(self) -> None:
        """Shift ``b`` up by one: the top becomes the bottom."""
        _rotate(self.b)
        self._report(Operation.RB)

    def rr(self) -> None:
        """Do ``ra`` and ``rb`` at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._report(Operation.RR)

    def rra(self) -> None:
        """Shift ``a`` down by one: the bottom becomes the top."""
        _reverse_rotate(self.a)
        self._report(Operation.RRA)

    def rrb(self) -> None:
        """Shift ``b`` down by one: the bottom becomes the top."""
        _reverse_rotate(self.b)
        self._report(Operation.RRB)

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb`` at once."""
        _reverse_rotate(self.b)
        _reverse_rotate(self.a)
        self._report(Operation.RRR)

    def is_sorted(self) -> bool:
        """Tell whether ``b`` is empty and ``a`` is in ascending rank order."""
        if self.b:
            return False
        return all(
            lower.rank <= upper.rank for lower, upper in zip(self.a, self.a[1:])
        )