import pytest

from algodrills.priority_queue import MaxHeap, process_commands


def test_pops_in_descending_order():
    values = [5, 1, 9, 3, 9, 0, -4, 7]
    heap = MaxHeap()
    for value in values:
        heap.push(value)
    assert len(heap) == len(values)
    assert [heap.pop() for _ in values] == sorted(values, reverse=True)
    assert len(heap) == 0


def test_initial_values_are_heapified():
    values = [3, 8, 2]
    heap = MaxHeap(values)
    assert heap.pop() == max(values)


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().pop()


def test_sample_commands():
    commands = [
        "Insert 200",
        "Insert 10",
        "ExtractMax",
        "Insert 5",
        "Insert 500",
        "ExtractMax",
    ]
    assert process_commands(commands) == [200, 500]


def test_extract_from_empty_queue_is_ignored():
    assert process_commands(["ExtractMax", "Insert 4", "ExtractMax", "ExtractMax"]) == [4]


def test_insert_without_value_raises():
    with pytest.raises(ValueError):
        process_commands(["Insert"])