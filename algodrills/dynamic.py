"""Dynamic-programming exercises on sequences, strings and weights."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence


def longest_dividing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest subsequence in which each term divides the next."""
    if not values:
        raise ValueError("values must not be empty")
    lengths: list[int] = []
    for i, current in enumerate(values):
        best = 1
        for j in range(i):
            earlier = values[j]
            if earlier <= current and current % earlier == 0:
                best = max(best, lengths[j] + 1)
        lengths.append(best)
    return max(lengths)


def longest_non_increasing_subsequence(values: Sequence[int]) -> list[int]:
    """Return one-based indices of a longest non-increasing subsequence."""
    negated_tails: list[int] = []
    tail_positions: list[int] = []
    previous: list[int] = []
    for index, value in enumerate(values):
        slot = bisect_right(negated_tails, -value)
        if slot == len(negated_tails):
            negated_tails.append(-value)
            tail_positions.append(index)
        else:
            negated_tails[slot] = -value
            tail_positions[slot] = index
        previous.append(tail_positions[slot - 1] if slot > 0 else -1)

    indices: list[int] = []
    position = tail_positions[-1] if tail_positions else -1
    while position != -1:
        indices.append(position + 1)
        position = previous[position]
    indices.reverse()
    return indices


def edit_distance(first: str, second: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(second) + 1))
    for i, first_char in enumerate(first, start=1):
        current = [i]
        for j, second_char in enumerate(second, start=1):
            if first_char == second_char:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]


def knapsack_max_weight(weights: Sequence[int], capacity: int) -> int:
    """Return the largest total of distinct ``weights`` that fits in ``capacity``."""
    if capacity < 0 or any(weight < 0 for weight in weights):
        raise ValueError("weights and capacity must be non-negative")
    total = sum(weights)
    if total <= capacity:
        return total

    best = [0] * (capacity + 1)
    for weight in weights:
        for limit in range(capacity, weight - 1, -1):
            best[limit] = max(best[limit], best[limit - weight] + weight)
    return best[capacity]


def stairs_max_sum(stairs: Sequence[int]) -> int:
    """Return the best sum reaching the top step, climbing one or two steps at a time."""
    previous = last = 0
    for step in stairs:
        previous, last = last, max(previous, last) + step
    return last


def primitive_calculator(n: int) -> list[int]:
    """Return the shortest chain from 1 to ``n`` using +1, *2 and *3.

    Steps back from ``n`` prefer -1, then /2, then /3. ``n`` of 0 gives an empty chain.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return []

    operations = [0] * (n + 1)
    for i in range(2, n + 1):
        best = operations[i - 1] + 1
        if i % 2 == 0:
            best = min(best, operations[i // 2] + 1)
        if i % 3 == 0:
            best = min(best, operations[i // 3] + 1)
        operations[i] = best

    chain = [n]
    current = n
    while current > 1:
        target = operations[current] - 1
        if operations[current - 1] == target:
            current -= 1
        elif current % 2 == 0 and operations[current // 2] == target:
            current //= 2
        else:
            current //= 3
        chain.append(current)
    chain.reverse()
    return chain