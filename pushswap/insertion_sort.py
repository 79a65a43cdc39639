"""Cost-driven insertion of every element of ``a`` into an ordered ``b``.

``b`` is kept cyclically in descending rank order. On each step the element
of ``a`` that needs the fewest rotations to reach the top of ``a`` while its
slot in ``b`` reaches the top of ``b`` is moved across. When done, ``b`` is
merged back into ``a``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from pushswap.stacks import Element, Stacks

_SKIPPED_COST = 0xFFFFFF


def _signed_positions(length: int) -> Iterator[int]:
    """Yield the signed rotation count for each position of a stack.

    The upper half is reached with forward rotations (positive counts), the
    lower half with reverse rotations (negative counts).
    """
    half = length // 2 + length % 2
    distance = 0
    while True:
        yield distance
        distance += 1
        if distance == half:
            if length % 2:
                distance -= 1
            distance = -distance


def signed_distance(elements: Sequence[Element], length: int, rank: int) -> int:
    """Return the signed rotations that bring ``rank`` to the top.

    Positive means forward rotations, negative reverse rotations. Raises
    :class:`ValueError` when no element has that rank.
    """
    for element, distance in zip(elements, _signed_positions(length)):
        if element.rank == rank:
            return distance
    raise ValueError(f"rank {rank} is not on the stack")


def _smallest(elements: Sequence[Element]) -> int:
    return min((element.rank for element in elements), default=0xFFFFFFFF)


def _biggest(elements: Sequence[Element]) -> int:
    return max((element.rank for element in elements), default=0)


def _push_towards(stacks: Stacks, distance: int, floor: int) -> int:
    """Rotate ``a`` by ``distance`` and push the element that lands on top.

    On the way, ascending elements above ``floor`` are pushed too, and an
    element fitting between the two tops of ``b`` is slipped in there.
    Returns the new floor.
    """
    while distance != 0:
        a, b = stacks.a, stacks.b
        if distance > 0:
            distance -= 1
            if a[0].rank > floor and a[1].rank > a[0].rank:
                floor = a[0].rank
                stacks.pb()
            elif len(b) >= 2 and b[0].rank > a[0].rank > b[1].rank:
                stacks.pb()
                stacks.sb()
            else:
                stacks.ra()
        elif a[0].rank > floor and a[-1].rank > a[0].rank:
            floor = a[0].rank
            stacks.pb()
        else:
            distance += 1
            stacks.rra()
    stacks.pb()
    return floor


def push_min_max(stacks: Stacks) -> None:
    """Move the smallest and the biggest element onto ``b``, nearest first."""
    last = stacks.size - 1
    to_max = signed_distance(stacks.a, len(stacks.a), last)
    to_min = signed_distance(stacks.a, len(stacks.a), 0)
    distance = to_max if abs(to_max) <= abs(to_min) else to_min
    floor = _push_towards(stacks, distance, 0)
    other = last if stacks.b[0].rank == 0 else 0
    distance = signed_distance(stacks.a, len(stacks.a), other)
    stacks.rb()
    _push_towards(stacks, distance, floor)
    if stacks.b[0].rank == 0:
        stacks.rrb()
        stacks.sb()
        stacks.rb()


def _insertion_distance(stacks: Stacks, element: Element) -> int:
    b = stacks.b
    positions = _signed_positions(len(b))
    next(positions)
    distance = 0
    for (upper, lower), distance in zip(zip(b, b[1:]), positions):
        if upper.rank > element.rank > lower.rank:
            break
    return distance


def _price(stacks: Stacks, element: Element, best: Element) -> None:
    if abs(element.dist_a) > best.cost:
        element.dist_b = 0
        element.cost = _SKIPPED_COST
        return
    if stacks.b[-1].rank > element.rank > stacks.b[0].rank:
        element.dist_b = 0
        element.cost = abs(element.dist_a)
        return
    element.dist_b = _insertion_distance(stacks, element)
    if element.dist_a > 0 and element.dist_b > 0:
        element.cost = max(abs(element.dist_a), abs(element.dist_b))
    else:
        element.cost = abs(element.dist_a) + abs(element.dist_b)


def _cheapest(stacks: Stacks) -> Element:
    """Price every element of ``a`` and return the cheapest unplaced one."""
    for element, distance in zip(stacks.a, _signed_positions(len(stacks.a))):
        element.dist_a = distance
    best = stacks.a[0]
    for element in stacks.a:
        _price(stacks, element, best)
        if best.placed:
            best.cost = _SKIPPED_COST
        if best.cost > element.cost and not element.placed:
            best = element
    return best


def _move_cheapest(stacks: Stacks) -> None:
    target = _cheapest(stacks)
    while target.dist_a:
        if target.dist_a > 0 and target.dist_b > 0:
            target.dist_a -= 1
            target.dist_b -= 1
            stacks.rr()
        elif target.dist_a > 0:
            target.dist_a -= 1
            stacks.ra()
        elif target.dist_b < 0:
            target.dist_a += 1
            target.dist_b += 1
            stacks.rrr()
        else:
            target.dist_a += 1
            stacks.rra()
    while target.dist_b:
        if target.dist_b > 0:
            target.dist_b -= 1
            stacks.rb()
        else:
            target.dist_b += 1
            stacks.rrb()
    if not stacks.a[0].placed:
        stacks.b[0].placed = True
        stacks.pb()


def _split_due(stacks: Stacks, mode: int, target: Element | None) -> bool:
    size = stacks.size
    pushed = len(stacks.b)
    if mode == 0:
        return target is not None and pushed > size // 2 and target.cost > size // 20
    if mode == 1:
        return pushed > size // 2
    if mode == 2:
        return pushed >= size // 2 - size // 20
    if mode == 3:
        return pushed >= size // 2 - size // 10
    return False


def _return_to_a(stacks: Stacks) -> None:
    """Send ``b`` back to ``a`` as placed elements, keeping min and max."""
    last = stacks.size - 1
    while len(stacks.b) != 2:
        stacks.b[0].placed = True
        while stacks.b[0].rank in (0, last):
            stacks.rb()
        stacks.pa()


def _align(stacks: Stacks) -> None:
    """Bring the smallest of ``a`` to its top, rotating ``b`` along when useful."""
    if not stacks.a:
        return

    def b_distance() -> int:
        return signed_distance(stacks.b, len(stacks.b), _biggest(stacks.b))

    while (a_distance := signed_distance(
        stacks.a, len(stacks.a), _smallest(stacks.a)
    )) != 0:
        if a_distance > 0 and b_distance() > 0:
            stacks.rr()
        elif a_distance < 0 and b_distance() < 0:
            stacks.rrr()
        elif a_distance > 0:
            stacks.ra()
        else:
            stacks.rra()


def _merge_back(stacks: Stacks) -> None:
    while (distance := signed_distance(
        stacks.b, len(stacks.b), _biggest(stacks.b)
    )) != 0:
        if distance > 0:
            stacks.rb()
        else:
            stacks.rrb()
    expected = stacks.size - 1
    while stacks.b:
        while stacks.b and stacks.b[0].rank == expected:
            expected -= 1
            stacks.pa()
        if stacks.a and stacks.a[-1].rank == expected:
            expected -= 1
            stacks.rra()


def insertion_sort(stacks: Stacks, mode: int) -> None:
    """Sort the stacks; ``mode`` 0 to 3 picks when part of ``b`` is sent back."""
    split_pending = True
    push_min_max(stacks)
    while any(not element.placed for element in stacks.a):
        target = _cheapest(stacks) if mode == 0 else None
        if split_pending and _split_due(stacks, mode, target):
            split_pending = False
            _return_to_a(stacks)
        _move_cheapest(stacks)
    _align(stacks)
    _merge_back(stacks)