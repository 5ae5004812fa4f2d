from algodrills.binary_search import binary_search

VALUES = [1, 5, 8, 12, 13]


def test_finds_every_present_value():
    for value in VALUES:
        assert binary_search(VALUES, value) == VALUES.index(value) + 1


def test_missing_values_give_minus_one():
    for value in (0, 2, 11, 14, 100):
        assert binary_search(VALUES, value) == -1


def test_empty_sequence():
    assert binary_search([], 3) == -1


def test_duplicates_report_first_occurrence():
    values = [2, 4, 4, 4, 9]
    assert binary_search(values, 4) == values.index(4) + 1