"""Command-line argument parsing, validation and ranking of the input numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648

_INT_MAX_TEXT = "2147483647"
_INT_MIN_TEXT = "-2147483648"


class InputError(ValueError):
    """Raised when the program arguments are not a list of distinct integers."""


def _leading_digits(text: str) -> str:
    """Return the run of ASCII digits at the start of ``text``."""
    end = 0
    for char in text:
        if not ("0" <= char <= "9"):
            break
        end += 1
    return text[:end]


def clamp_atoi(text: str) -> int:
    """Convert the numeric prefix of ``text`` to an int clamped to 32 bits.

    An optional single ``+`` or ``-`` sign is accepted. Parsing stops at the
    first non-digit; an empty digit run yields 0. Values outside the signed
    32-bit range saturate to ``INT_MAX`` or ``INT_MIN``.
    """
    negative = text.startswith("-")
    body = text[1:] if text.startswith(("-", "+")) else text
    digits = _leading_digits(body)
    magnitude = int(digits) if digits else 0
    if magnitude > INT_MAX:
        return INT_MIN if negative else INT_MAX
    return -magnitude if negative else magnitude


def is_valid_integer(text: str) -> bool:
    """Tell whether ``text`` is accepted as a 32-bit integer argument.

    The limits themselves must be written exactly as ``2147483647`` and
    ``-2147483648``; anything else that would saturate is rejected.
    """
    value = clamp_atoi(text)
    if value == INT_MAX and not text.startswith(_INT_MAX_TEXT):
        return False
    if value == INT_MIN and not text.startswith(_INT_MIN_TEXT):
        return False
    negative = text.startswith("-")
    body = text[1:] if text.startswith(("-", "+")) else text
    length = len(_leading_digits(body[:9]))
    if length == 9:
        last_allowed = "8" if negative else "7"
        following = body[9:10]
        if following and "0" <= following <= last_allowed:
            length += 1
    return length == len(body)


def split_arguments(args: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split them into number tokens.

    Only digits, ``-`` and spaces may appear. A token starts with a digit or
    with a ``-`` directly followed by a digit, and runs over every following
    digit or ``-``. Raises :class:`InputError` on anything else.
    """
    line = " ".join(args)
    tokens: list[str] = []
    position = 0
    while position < len(line):
        char = line[position]
        starts_number = "0" <= char <= "9" or (
            char == "-" and "0" <= line[position + 1 : position + 2] <= "9"
            and line[position + 1 : position + 2] != ""
        )
        if starts_number:
            start = position
            while position < len(line) and (
                line[position] == "-" or "0" <= line[position] <= "9"
            ):
                position += 1
            tokens.append(line[start:position])
        elif char == " ":
            position += 1
        else:
            raise InputError(f"unexpected character {char!r} in arguments")
    return tokens


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Parse program arguments into a list of distinct integers.

    Raises :class:`InputError` for malformed tokens, out-of-range values or
    duplicates.
    """
    tokens = split_arguments(args)
    values: list[int] = []
    for token in tokens:
        if not is_valid_integer(token):
            raise InputError(f"not a valid integer: {token!r}")
        values.append(clamp_atoi(token))
    if len(set(values)) != len(values):
        raise InputError("duplicate numbers in arguments")
    return values


def rank_values(values: Sequence[int]) -> list[int]:
    """Return, for every value, its position in ascending order.

    Each step selects the smallest value strictly above the previous one and
    strictly below ``INT_MAX``; when none is left, position 0 takes the rank.
    """
    ranks = [0] * len(values)
    floor = INT_MIN
    for rank in range(len(values)):
        eligible = [
            (value, position)
            for position, value in enumerate(values)
            if floor < value < INT_MAX
        ]
        position = min(eligible)[1] if eligible else 0
        ranks[position] = rank
        floor = values[position]
    return ranks