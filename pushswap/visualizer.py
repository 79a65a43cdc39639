"""Coloured terminal rendering of the two stacks after each operation."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

from pushswap.stacks import Element, Operation, Stacks

TERMINAL_WIDTH = 190
_LABEL_SHADE = 100000
_START_COLUMN = 10
_GREEN_MARK = "\033[32mv\033[0m"
_CONTINUATION = "|      |"


def _to_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - (1 << 32) if number >= (1 << 31) else number


def _green_level(rank: int, per_color: int) -> int:
    """Return the green channel for ``rank``, wrapped like a 32-bit integer."""
    if per_color >= 1:
        shade = rank * per_color
    else:
        shade = rank // -per_color
    return _to_int32(255 - shade)


def colored_cell(value: int, width: int, rank: int, per_color: int) -> str:
    """Return one coloured cell holding ``value``, closed by a ``|``.

    The number is padded with spaces to ``width - 1`` characters; its green
    shade fades with ``rank``, ``per_color`` steps per rank when positive or
    one step per ``-per_color`` ranks otherwise.
    """
    text = str(value)
    padding = " " * max(0, width - len(text) - 1)
    green = _green_level(rank, per_color)
    return f"\033[38;2;32;{green};32m{text}{padding}\033[0m|"


def number_width(stacks: Stacks) -> int:
    """Return the widest printed number on either stack, 0 when both are empty."""
    return max(
        (len(str(element.value)) for element in chain(stacks.a, stacks.b)),
        default=0,
    )


def _per_color(size: int) -> int:
    if size <= 0:
        raise ValueError("there are no numbers to display")
    per_color = 223 // size
    return per_color if per_color else -(size // 223)


def _marker(symbol: str, cell_width: int) -> str:
    return (symbol + " " * max(0, cell_width - 2))[: max(0, cell_width - 1)]


def _header(command: str, cell_width: int) -> str:
    parts = ["/ ", command]
    if len(command) == 2:
        parts.append(" ")
    parts.append("  |")
    column = _START_COLUMN
    if command[:2] == "pb":
        column += cell_width
        parts += [_GREEN_MARK + " " * max(0, cell_width - 1), "."]
    if command[:2] == "pa":
        column += cell_width
        parts += [_marker("^", cell_width), "."]
    if command[:1] == "s" and command[1:2] != "b":
        column += cell_width * 2
        parts += [_marker("v", cell_width), ".", _marker("v", cell_width), "."]
    while column < TERMINAL_WIDTH:
        parts.append(" " * (cell_width - 1))
        column += cell_width
        parts.append("\\" if column >= TERMINAL_WIDTH else ".")
    parts.append("\n")
    return "".join(parts)


def _stack_rows(
    elements: Iterable[Element],
    length: int,
    label: str,
    cell_width: int,
    per_color: int,
) -> str:
    parts = ["|", colored_cell(length, 5, _LABEL_SHADE, _LABEL_SHADE), f"{label}|"]
    remaining = iter(elements)
    pending = next(remaining, None)
    column = _START_COLUMN
    while pending is not None or column == _START_COLUMN:
        while column < TERMINAL_WIDTH:
            if pending is not None:
                parts.append(
                    colored_cell(pending.value, cell_width, pending.rank, per_color)
                )
                pending = next(remaining, None)
            else:
                parts.append(" " * (cell_width - 1))
                parts.append("\\" if column == TERMINAL_WIDTH - 1 else "|")
            column += cell_width
        parts.append("\n")
        if pending is not None:
            parts.append(_CONTINUATION)
        column = _START_COLUMN + 1
    return "".join(parts)


def _footer(command: str, cell_width: int, operations_count: int) -> str:
    parts = ["\\ ", colored_cell(operations_count, 6, _LABEL_SHADE, _LABEL_SHADE)]
    column = _START_COLUMN
    if command[:2] == "pb":
        column += cell_width
        parts += [_marker("v", cell_width), "'"]
    if command[:2] == "pa":
        column += cell_width
        parts += [_marker("^", cell_width), "'"]
    if command[:1] == "s" and command[1:2] != "a":
        column += cell_width * 2
        parts += [_marker("^", cell_width), "'", _marker("^", cell_width), "'"]
    while column < TERMINAL_WIDTH:
        parts.append(" " * (cell_width - 1))
        column += cell_width
        parts.append("/" if column >= TERMINAL_WIDTH else "'")
    parts.append("\n")
    return "".join(parts)


def render_frame(stacks: Stacks, command: Operation | str, operations_count: int) -> str:
    """Render both stacks after ``command``, with the running operation count.

    The frame starts with a blank line, then a header naming the command,
    the rows of ``a`` and of ``b``, and a footer with the count. Raises
    :class:`ValueError` when the stacks were built from no numbers.
    """
    name = str(command).rstrip("\n")
    cell_width = number_width(stacks) + 1
    per_color = _per_color(stacks.size)
    return "".join(
        (
            "\n",
            _header(name, cell_width),
            _stack_rows(stacks.a, len(stacks.a), "A", cell_width, per_color),
            _stack_rows(stacks.b, len(stacks.b), "B", cell_width, per_color),
            _footer(name, cell_width, operations_count),
        )
    )