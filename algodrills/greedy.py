"""Greedy exercises on segments and a fractional knapsack."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from fractions import Fraction


class _Border(IntEnum):
    """Event kinds on the number line; the order breaks ties between events."""

    LEFT = 0
    POINT = 1
    RIGHT = 2


def set_cover_points(segments: Sequence[tuple[int, int]]) -> list[int]:
    """Return a minimum set of points so that every segment holds one of them.

    Segments are ``(left, right)`` pairs with both ends included. The points
    are right ends of segments, in increasing order.
    """
    events: list[tuple[int, bool, int]] = []
    for index, (left, right) in enumerate(segments):
        events.append((left, True, index))
        events.append((right, False, index))
    events.sort(key=lambda event: (event[0], not event[1]))

    covered: set[int] = set()
    open_segments: list[int] = []
    points: list[int] = []
    for value, is_left, index in events:
        if is_left:
            open_segments.append(index)
        elif index not in covered:
            points.append(value)
            covered.update(open_segments)
            open_segments.clear()
    return points


def fractional_knapsack(items: Sequence[tuple[int, int]], capacity: int) -> float:
    """Return the best total cost of ``(cost, weight)`` items within ``capacity``.

    Items may be taken in part; the most valuable per unit of weight go first.
    """
    for cost, weight in items:
        if weight <= 0:
            raise ValueError(f"item ({cost}, {weight}) must have a positive weight")

    ordered = sorted(items, key=lambda item: Fraction(item[0], item[1]), reverse=True)
    total = 0.0
    for cost, weight in ordered:
        if capacity > weight:
            total += cost
            capacity -= weight
        else:
            total += capacity * cost / weight
            break
    return total


def count_covering_segments(
    segments: Sequence[tuple[int, int]], points: Sequence[int]
) -> list[int]:
    """Return, for each point, how many segments contain it (ends included)."""
    events: list[tuple[int, _Border, int]] = []
    for index, (left, right) in enumerate(segments):
        events.append((left, _Border.LEFT, index))
        events.append((right, _Border.RIGHT, index))
    for index, value in enumerate(points):
        events.append((value, _Border.POINT, index))
    events.sort(key=lambda event: (event[0], event[1]))

    counts = [0] * len(points)
    active = 0
    for _, border, index in events:
        if border is _Border.LEFT:
            active += 1
        elif border is _Border.RIGHT:
            active -= 1
        else:
            counts[index] = active
    return counts