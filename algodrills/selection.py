"""Greedy selection exercises: differences, luck, flowers, fairness, shuffles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def minimum_absolute_difference(values: Sequence[int]) -> int:
    """Return the smallest absolute difference between any two of ``values``."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    ordered = sorted(values)
    return min(high - low for low, high in zip(ordered, ordered[1:]))


def luck_balance(k: int, contests: Sequence[Sequence[int]]) -> int:
    """Return the most luck kept while losing at most ``k`` important contests.

    Each contest is ``(luck, importance)``; an importance of 0 means unimportant.
    Losing a contest gains its luck, winning it costs that luck.
    """
    ordered = sorted(contests, key=lambda contest: (contest[1], contest[0]), reverse=True)
    balance = 0
    for index, (luck, importance) in enumerate(ordered):
        if index < k or importance == 0:
            balance += luck
        else:
            balance -= luck
    return balance


def minimum_flower_cost(k: int, prices: Sequence[int]) -> int:
    """Return the least total cost for ``k`` friends to buy every flower once.

    A friend's n-th purchase costs ``n`` times the flower's price.
    """
    if k < 1:
        raise ValueError("at least one buyer is required")
    ordered = sorted(prices, reverse=True)
    return sum((index // k + 1) * price for index, price in enumerate(ordered))


def max_min(k: int, values: Sequence[int]) -> int:
    """Return the least unfairness ``max - min`` over any ``k`` of ``values``."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must lie between 1 and {len(values)}")
    ordered = sorted(values)
    return min(
        ordered[start + k - 1] - ordered[start] for start in range(len(ordered) - k + 1)
    )


def reverse_shuffle_merge(text: str) -> str:
    """Return the smallest string A such that ``text`` merges reverse(A) with a shuffle of A."""
    unused = Counter(text)
    required = {char: count // 2 for char, count in unused.items()}
    used: Counter[str] = Counter()
    result: list[str] = []

    for position, char in enumerate(reversed(text)):
        if position == 0 or used[char] < required[char]:
            while (
                result
                and char < result[-1]
                and used[result[-1]] - 1 + unused[result[-1]] >= required[result[-1]]
            ):
                used[result.pop()] -= 1
            result.append(char)
            used[char] += 1
        unused[char] -= 1

    return "".join(result)