"""Warm-up exercises: matching socks, valleys on a hike, cloud jumping."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def sock_merchant(socks: Iterable[int]) -> int:
    """Return how many pairs of matching colours can be made from ``socks``."""
    return sum(count // 2 for count in Counter(socks).values())


def counting_valleys(path: str) -> int:
    """Return how many valleys a hike walks through.

    Each ``'U'`` is a step up and any other step goes down. A valley ends
    with a step up that returns to sea level.
    """
    valleys = 0
    level = 0
    for step in path:
        if step == "U":
            level += 1
            if level == 0:
                valleys += 1
        else:
            level -= 1
    return valleys


def jumping_on_clouds(clouds: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last cloud.

    A jump covers one or two clouds; only clouds marked ``0`` may be landed
    on. Two-cloud jumps are taken whenever the landing cloud is safe.
    """
    jumps = 0
    position = 0
    last = len(clouds) - 1
    while position < last:
        jumps += 1
        if position + 2 <= last and clouds[position + 2] == 0:
            position += 2
        else:
            position += 1
    return jumps