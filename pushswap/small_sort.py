"""Fixed move sequences for inputs of at most five numbers, using stack b as little as possible."""

from __future__ import annotations

from pushswap.stacks import Operation, Stacks

_THREE = {
    (0, 2, 1): (Operation.SA, Operation.RA),
    (1, 0, 2): (Operation.SA,),
    (1, 2, 0): (Operation.RRA,),
    (2, 0, 1): (Operation.RA,),
    (2, 1, 0): (Operation.SA, Operation.RRA),
}

# Orders of ranks 2, 3 and 4 left on ``a`` when ranks 0 and 1 sit on ``b``.
_FIVE_B_IN_ORDER = {
    (2, 4, 3): (Operation.SA, Operation.RA),
    (3, 2, 4): (Operation.SA,),
    (3, 4, 2): (Operation.RRA,),
    (4, 2, 3): (Operation.RA,),
    (4, 3, 2): (Operation.SA, Operation.RRA),
}

# The same orders when ``b`` must be swapped as well.
_FIVE_B_REVERSED = {
    (2, 4, 3): (Operation.SS, Operation.RA),
    (3, 2, 4): (Operation.SS,),
    (3, 4, 2): (Operation.RRR,),
    (4, 2, 3): (Operation.RR,),
    (4, 3, 2): (Operation.SS, Operation.RRA),
}


def _top_ranks(stacks: Stacks) -> tuple[int, ...]:
    return tuple(element.rank for element in stacks.a[:3])


def _apply_all(stacks: Stacks, operations: tuple[Operation, ...]) -> None:
    for operation in operations:
        stacks.apply(operation)


def _sort_three(stacks: Stacks) -> None:
    _apply_all(stacks, _THREE.get(_top_ranks(stacks), ()))


def _sort_four(stacks: Stacks) -> None:
    while len(stacks.b) <= 1:
        if stacks.a[0].rank <= 1:
            stacks.pb()
        else:
            stacks.ra()
    b_reversed = stacks.b[0].rank < stacks.b[1].rank
    a_reversed = stacks.a[0].rank > stacks.a[1].rank
    if b_reversed and a_reversed:
        stacks.ss()
    elif a_reversed:
        stacks.sa()
    elif b_reversed:
        stacks.sb()
    stacks.pa()
    stacks.pa()


def _sort_five(stacks: Stacks) -> None:
    while len(stacks.b) <= 1:
        if stacks.a[0].rank <= 1:
            stacks.pb()
        elif stacks.a[-1].rank <= 1:
            stacks.rra()
        else:
            stacks.ra()
    top = _top_ranks(stacks)
    if stacks.b[0].rank < stacks.b[1].rank:
        _apply_all(stacks, _FIVE_B_REVERSED.get(top, (Operation.SB,)))
    else:
        _apply_all(stacks, _FIVE_B_IN_ORDER.get(top, ()))
    while stacks.b:
        stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Sort stacks holding up to five numbers with a short fixed sequence."""
    if stacks.size <= 2:
        if stacks.a and stacks.a[0].rank == 1:
            stacks.sa()
    elif stacks.size == 4:
        _sort_four(stacks)
    elif stacks.size == 5:
        _sort_five(stacks)
    else:
        _sort_three(stacks)