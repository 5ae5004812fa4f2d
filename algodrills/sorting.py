"""Counting sort, bubble sort and other sorting-based exercises."""

from __future__ import annotations

from collections.abc import Sequence

MAX_EXPENDITURE = 201


def counting_sort(values: Sequence[int], max_value: int) -> list[int]:
    """Return ``values`` sorted, all of which must lie in ``[0, max_value)``."""
    counts = [0] * max_value
    for value in values:
        if not 0 <= value < max_value:
            raise ValueError(f"value {value} is outside [0, {max_value})")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def bubble_sort_swaps(values: Sequence[int]) -> tuple[list[int], int]:
    """Bubble-sort a copy of ``values``; return it with the number of swaps."""
    result = list(values)
    size = len(result)
    swaps = 0
    for _ in range(size):
        for j in range(size - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swaps += 1
    return result, swaps


def maximum_toys(prices: Sequence[int], budget: int) -> int:
    """Return how many toys can be bought, cheapest first, within ``budget``."""
    bought = 0
    for price in sorted(prices):
        if budget < price:
            break
        budget -= price
        bought += 1
    return bought


def activity_notifications(expenditures: Sequence[int], days: int) -> int:
    """Count days whose spending is at least twice the trailing median.

    Expenditures must lie in ``[0, 200]``.
    """
    if days > len(expenditures):
        raise ValueError("trailing window is longer than the expenditure list")
    for value in expenditures:
        if not 0 <= value < MAX_EXPENDITURE:
            raise ValueError(f"expenditure {value} is outside [0, {MAX_EXPENDITURE})")

    histogram = [0] * MAX_EXPENDITURE
    for value in expenditures[:days]:
        histogram[value] += 1

    notifications = 0
    for index in range(days, len(expenditures)):
        if expenditures[index] >= _double_median(histogram, days):
            notifications += 1
        histogram[expenditures[index - days]] -= 1
        histogram[expenditures[index]] += 1
    return notifications


def _double_median(histogram: list[int], days: int) -> int:
    cursor = 0
    lower = -1
    half = days // 2
    for value, count in enumerate(histogram):
        cursor += count
        if days % 2 == 1:
            if cursor >= half + 1:
                return 2 * value
            continue
        if cursor == half:
            lower = value
        if cursor > half:
            return lower + value if lower != -1 else 2 * value
    return 0