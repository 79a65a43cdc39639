import pytest

from pushswap.parsing import (
    InputError,
    clamp_atoi,
    is_valid_integer,
    parse_numbers,
    rank_values,
    split_arguments,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+42", 42),
        ("0007", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("2147483648", 2147483647),
        ("-2147483649", -2147483648),
        ("99999999999999", 2147483647),
        ("", 0),
        ("-", 0),
    ],
)
def test_clamp_atoi(text, expected):
    assert clamp_atoi(text) == expected


def test_clamp_atoi_stops_at_non_digit():
    assert clamp_atoi("12-3") == 12


@pytest.mark.parametrize(
    "text",
    ["0", "1", "-1", "+5", "123456789", "2147483647", "-2147483648", "-0", ""],
)
def test_valid_integers(text):
    assert is_valid_integer(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "2147483648",
        "-2147483649",
        "3000000000",
        "9999999999",
        "+2147483647",
        "02147483647",
        "1-2",
        "12a",
        "21474836470",
    ],
)
def test_invalid_integers(text):
    assert is_valid_integer(text) is False


def test_split_arguments_joins_and_splits():
    assert split_arguments(["1 2", "3"]) == ["1", "2", "3"]


def test_split_arguments_extra_spaces():
    assert split_arguments(["  -4   5 "]) == ["-4", "5"]


def test_split_arguments_keeps_dash_inside_token():
    assert split_arguments(["1-2 3"]) == ["1-2", "3"]


def test_split_arguments_empty():
    assert split_arguments([]) == []


@pytest.mark.parametrize("args", [["a"], ["1", "+2"], ["- 1"], ["--5"], ["1\t2"]])
def test_split_arguments_rejects_bad_characters(args):
    with pytest.raises(InputError):
        split_arguments(args)


def test_parse_numbers_values():
    assert parse_numbers(["3", "-1 2"]) == [3, -1, 2]


def test_parse_numbers_single_value():
    assert parse_numbers(["5"]) == [5]


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["0", "-0"], ["1-2", "3"], ["2147483648", "1"], ["x"]],
)
def test_parse_numbers_errors(args):
    with pytest.raises(InputError):
        parse_numbers(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_numbers(["7", "7"])


@pytest.mark.parametrize(
    "values",
    [[3, 1, 2], [10, -5, 0, 7, 100], [-2147483647, 5, -3], [1, 2, 3, 4]],
)
def test_rank_values_is_order_permutation(values):
    ranks = rank_values(values)
    assert sorted(ranks) == list(range(len(values)))
    for left in range(len(values)):
        for right in range(len(values)):
            if values[left] < values[right]:
                assert ranks[left] < ranks[right]


def test_rank_values_sorted_input_is_identity():
    values = [-3, 0, 8, 20]
    assert rank_values(values) == list(range(len(values)))


def test_rank_values_empty():
    assert rank_values([]) == []