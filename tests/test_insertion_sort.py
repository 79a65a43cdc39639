import random

import pytest

from pushswap.insertion_sort import insertion_sort, push_min_max, signed_distance
from pushswap.stacks import Stacks

_LIMIT = 500_000


def _recorded(ranks):
    operations = []

    def listen(_stacks, operation):
        operations.append(operation)
        if len(operations) > _LIMIT:
            raise RuntimeError("operation limit exceeded")

    return Stacks(ranks, ranks, listen), operations


def _permutation(size, seed):
    ranks = random.Random(seed).sample(range(size), size)
    if ranks == sorted(ranks):
        ranks.reverse()
    return ranks


@pytest.mark.parametrize("length", range(1, 10))
def test_signed_distance_brings_rank_to_top(length):
    ranks = _permutation(length, length)
    for rank in range(length):
        stacks = Stacks(ranks, ranks)
        distance = signed_distance(stacks.a, length, rank)
        assert abs(distance) <= length // 2
        for _ in range(abs(distance)):
            if distance > 0:
                stacks.ra()
            else:
                stacks.rra()
        assert stacks.a[0].rank == rank


def test_signed_distance_of_top_is_zero():
    stacks = Stacks([3, 1, 2, 0], [3, 1, 2, 0])
    assert signed_distance(stacks.a, 4, 3) == 0


def test_signed_distance_missing_rank_raises():
    stacks = Stacks([0, 1, 2], [0, 1, 2])
    with pytest.raises(ValueError):
        signed_distance(stacks.a, 3, 7)


@pytest.mark.parametrize("size,seed", [(6, 1), (10, 2), (25, 3), (100, 4)])
def test_push_min_max_moves_extremes_to_b(size, seed):
    ranks = _permutation(size, seed)
    stacks, _ = _recorded(ranks)
    push_min_max(stacks)
    b_ranks = {e.rank for e in stacks.b}
    assert {0, size - 1} <= b_ranks
    all_ranks = sorted(e.rank for e in stacks.a + stacks.b)
    assert all_ranks == list(range(size))


@pytest.mark.parametrize("mode", [0, 1, 2, 3])
@pytest.mark.parametrize("size,seed", [(6, 11), (7, 12), (12, 13), (30, 14), (100, 15)])
def test_insertion_sort_sorts(mode, size, seed):
    ranks = _permutation(size, seed)
    stacks, _ = _recorded(ranks)
    insertion_sort(stacks, mode)
    assert stacks.is_sorted()
    assert [e.rank for e in stacks.a] == list(range(size))


@pytest.mark.parametrize("mode", [0, 1, 2, 3])
def test_insertion_sort_reversed_input(mode):
    ranks = list(range(20))[::-1]
    stacks, _ = _recorded(ranks)
    insertion_sort(stacks, mode)
    assert [e.rank for e in stacks.a] == list(range(20))
    assert stacks.b == []


@pytest.mark.parametrize("mode", [0, 1, 2, 3])
def test_recorded_operations_replay_to_sorted(mode):
    ranks = _permutation(40, 99)
    stacks, operations = _recorded(ranks)
    insertion_sort(stacks, mode)
    replay = Stacks(ranks, ranks)
    for operation in operations:
        replay.apply(operation)
    assert replay.is_sorted()
    assert len(operations) > 0


def test_values_follow_their_ranks():
    values = [50, -3, 7, 1000, 12, 0, -40, 8]
    ranks = [6, 1, 3, 7, 5, 2, 0, 4]
    stacks = Stacks(values, ranks)
    insertion_sort(stacks, 1)
    assert [e.value for e in stacks.a] == sorted(values)