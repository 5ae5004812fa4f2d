"""A max-heap priority queue driven by text commands."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class MaxHeap:
    """A heap that pops its largest value first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._heap = [-value for value in values]
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        heapq.heappush(self._heap, -value)

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._heap:
            raise IndexError("pop from an empty heap")
        return -heapq.heappop(self._heap)


def process_commands(commands: Iterable[str]) -> list[int]:
    """Run ``Insert x`` and ``ExtractMax`` commands; return the extracted values.

    ``ExtractMax`` on an empty queue and unknown commands are ignored.
    """
    heap = MaxHeap()
    extracted: list[int] = []
    for command in commands:
        fields = command.split()
        if not fields:
            raise ValueError("empty command")
        name, *arguments = fields
        if name == "Insert":
            if len(arguments) != 1:
                raise ValueError(f"Insert takes one value: {command!r}")
            heap.push(int(arguments[0]))
        elif name == "ExtractMax" and heap:
            extracted.append(heap.pop())
    return extracted