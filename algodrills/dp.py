"""Dynamic-programming exercises: subset sums, abbreviations, candies."""

from __future__ import annotations

from collections.abc import Sequence


def max_subset_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a subset with no two adjacent elements.

    Needs at least two values; a subset may consist of a single element.
    """
    if len(values) < 2:
        raise ValueError("at least two values are required")
    previous, last = values[0], max(values[0], values[1])
    for value in values[2:]:
        previous, last = last, max(previous + value, last, previous, value)
    return last


def abbreviation(a: str, b: str) -> bool:
    """Return whether ``a`` becomes ``b`` by upper-casing some lower-case
    letters and deleting all remaining lower-case letters."""
    if a == b:
        return True

    previous = [True]
    for char in a:
        previous.append(previous[-1] and char.islower())

    for target in b:
        current = [False]
        for j, char in enumerate(a, start=1):
            if char.islower():
                current.append(
                    (previous[j - 1] and target == char.upper()) or current[j - 1]
                )
            else:
                current.append(previous[j - 1] and target == char)
        previous = current
    return previous[-1]


def candies(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children in a row.

    Each child gets at least one, and a child rated higher than a neighbour
    gets more than that neighbour.
    """
    if not ratings:
        raise ValueError("at least one rating is required")
    given = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            given[i] += given[i - 1]
    for i in range(len(ratings) - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            given[i] = max(given[i], given[i + 1] + 1)
    return sum(given)