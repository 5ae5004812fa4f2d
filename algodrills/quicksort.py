"""Quicksort that counts comparisons made under a chosen pivot rule."""

from __future__ import annotations

from collections.abc import MutableSequence
from enum import Enum


class PivotRule(Enum):
    """How the pivot of each partition is chosen."""

    FIRST = "first"
    LAST = "last"
    MEDIAN_OF_THREE = "median_of_three"


def count_comparisons(values: MutableSequence[int], pivot_rule: PivotRule) -> int:
    """Sort ``values`` in place and return the number of comparisons made.

    Each partition of a subarray of length ``m`` counts ``m - 1`` comparisons.
    """
    comparisons = 0
    pending = [(0, len(values) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        _choose_pivot(values, left, right, pivot_rule)
        pivot_index = _partition(values, left, right)
        comparisons += right - left
        pending.append((left, pivot_index - 1))
        pending.append((pivot_index + 1, right))
    return comparisons


def _choose_pivot(
    values: MutableSequence[int], left: int, right: int, rule: PivotRule
) -> None:
    if rule is PivotRule.FIRST:
        return
    if rule is PivotRule.LAST:
        values[left], values[right] = values[right], values[left]
        return
    middle = (left + right) // 2
    pivot_index = _index_of_max(
        values,
        _index_of_min(values, left, right),
        _index_of_min(values, _index_of_max(values, left, right), middle),
    )
    values[left], values[pivot_index] = values[pivot_index], values[left]


def _partition(values: MutableSequence[int], left: int, right: int) -> int:
    pivot = values[left]
    boundary = left
    for j in range(left + 1, right + 1):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary], values[left] = values[left], values[boundary]
    return boundary


def _index_of_max(values: MutableSequence[int], first: int, second: int) -> int:
    return first if values[first] > values[second] else second


def _index_of_min(values: MutableSequence[int], first: int, second: int) -> int:
    return first if values[first] < values[second] else second