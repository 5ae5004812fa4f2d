"""Counting inversions with merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def count_inversions(values: MutableSequence[int]) -> int:
    """Sort ``values`` in place and return how many inversions it held.

    An inversion is a pair of positions ``i < j`` with ``values[i] > values[j]``.
    """
    ordered, inversions = _sort_and_count(list(values))
    values[:] = ordered
    return inversions


def _sort_and_count(values: Sequence[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return list(values), 0

    middle = len(values) // 2
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    merged, split_count = _merge(left, right)
    return merged, left_count + right_count + split_count


def _merge(left: list[int], right: list[int]) -> tuple[list[int], int]:
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions