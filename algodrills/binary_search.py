"""Binary search returning one-based positions."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Return the one-based position of ``target`` in sorted ``values``, or -1.

    With duplicates, the first occurrence is reported.
    """
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index + 1
    return -1