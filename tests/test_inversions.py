import math
import random

import pytest

from algodrills.inversions import count_inversions


def test_known_case_counts_and_sorts():
    values = [2, 1, 3, 1, 2]
    assert count_inversions(values) == 4
    assert values == [1, 1, 2, 2, 3]


def test_already_sorted_with_duplicates():
    values = [1, 1, 1, 2, 2]
    assert count_inversions(values) == 0
    assert values == [1, 1, 1, 2, 2]


def test_empty_list():
    values: list[int] = []
    assert count_inversions(values) == 0
    assert values == []


def test_single_element():
    values = [7]
    assert count_inversions(values) == 0
    assert values == [7]


@pytest.mark.parametrize("size", [2, 5, 17, 100])
def test_reversed_distinct_values_are_all_inverted(size):
    values = list(range(size, 0, -1))
    assert count_inversions(values) == math.comb(size, 2)
    assert values == list(range(1, size + 1))


def test_all_equal_values_have_no_inversions():
    values = [4] * 20
    assert count_inversions(values) == 0


def test_random_input_ends_sorted_and_count_is_bounded():
    rng = random.Random(1234)
    values = [rng.randint(-50, 50) for _ in range(300)]
    original = list(values)
    count = count_inversions(values)
    assert values == sorted(original)
    assert 0 <= count <= math.comb(len(original), 2)


def test_count_is_symmetric_under_reversal_for_distinct_values():
    rng = random.Random(99)
    values = rng.sample(range(1000), 60)
    forward = count_inversions(list(values))
    backward = count_inversions(list(reversed(values)))
    assert forward + backward == math.comb(len(values), 2)