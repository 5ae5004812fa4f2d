import math

import pytest

from algodrills.hashmaps import (
    check_magazine,
    count_triplets,
    frequency_queries,
    sherlock_and_anagrams,
    two_strings,
)


def test_check_magazine_subset_of_words():
    magazine = "give me one grand today night".split()
    assert check_magazine(magazine, "give one grand today".split()) is True


def test_check_magazine_whole_magazine():
    magazine = "two times three is not four".split()
    assert check_magazine(magazine, list(magazine)) is True


def test_check_magazine_word_used_twice():
    assert check_magazine(["a"], ["a", "a"]) is False


def test_check_magazine_is_case_sensitive():
    assert check_magazine(["Give"], ["give"]) is False


def test_check_magazine_empty_note():
    assert check_magazine([], []) is True


def test_two_strings_shared_character():
    assert two_strings("hello", "world") is True


def test_two_strings_disjoint():
    assert two_strings("hi", "world") is False


@pytest.mark.parametrize("first, second", [("abc", "xyc"), ("abc", "def")])
def test_two_strings_is_symmetric(first, second):
    assert two_strings(first, second) == two_strings(second, first)


def test_count_triplets_single_progression():
    assert count_triplets([1, 2, 4], 2) == 1


def test_count_triplets_needs_increasing_indices():
    assert count_triplets([4, 2, 1], 2) == 0


def test_count_triplets_ratio_one_counts_combinations():
    values = [1] * 6
    assert count_triplets(values, 1) == math.comb(6, 3)


def test_count_triplets_empty():
    assert count_triplets([], 3) == 0


def test_frequency_queries_single_insert():
    assert frequency_queries([(1, 5), (3, 1)]) == [1]


def test_frequency_queries_repeated_insert_moves_frequency():
    assert frequency_queries([(1, 5), (1, 5), (3, 1), (3, 2)]) == [0, 1]


def test_frequency_queries_delete_removes_frequency():
    assert frequency_queries([(1, 5), (2, 5), (3, 1)]) == [0]


def test_frequency_queries_delete_of_absent_value_is_ignored():
    assert frequency_queries([(2, 5), (1, 7), (3, 1)]) == [1]


def test_frequency_queries_unknown_action_ignored():
    assert frequency_queries([(4, 1), (3, 1)]) == [0]


def test_sherlock_and_anagrams_worked_example():
    assert sherlock_and_anagrams("abba") == 4


def test_sherlock_and_anagrams_repeated_letter():
    assert sherlock_and_anagrams("kkkk") == 10


def test_sherlock_and_anagrams_distinct_letters():
    assert sherlock_and_anagrams("abcd") == 0


@pytest.mark.parametrize("text", ["abba", "ifailuhkqq", "cdcd"])
def test_sherlock_and_anagrams_reversal_invariant(text):
    assert sherlock_and_anagrams(text) == sherlock_and_anagrams(text[::-1])