"""Search exercises: flavours, tree swaps, pairs, triplets, schedules and candies."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_LARGEST_PASSES = 2**63 - 1


def what_flavors(costs: Sequence[int], money: int) -> tuple[int, int] | None:
    """Return one-based positions of two flavours whose costs add up to ``money``.

    When several pairs fit, the one completed last is reported. ``None`` means
    no pair fits.
    """
    seen: dict[int, int] = {}
    found: tuple[int, int] | None = None
    for position, cost in enumerate(costs, start=1):
        partner = seen.get(money - cost)
        if partner is not None:
            found = (partner, position)
        else:
            seen[cost] = position
    return found


@dataclass
class _Node:
    data: int
    level: int
    left: _Node | None = None
    right: _Node | None = None


def _build_tree(indexes: Iterable[Sequence[int]]) -> tuple[_Node, list[_Node]]:
    root = _Node(1, 1)
    nodes = [root]
    queue = deque([root])
    for left, right in indexes:
        if not queue:
            raise ValueError("more child entries than nodes in the tree")
        current = queue.popleft()
        if left != -1:
            current.left = _Node(left, current.level + 1)
            queue.append(current.left)
            nodes.append(current.left)
        if right != -1:
            current.right = _Node(right, current.level + 1)
            queue.append(current.right)
            nodes.append(current.right)
    return root, nodes


def _inorder(root: _Node) -> list[int]:
    result: list[int] = []
    stack: list[_Node] = []
    node: _Node | None = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def swap_nodes(
    indexes: Iterable[Sequence[int]], queries: Iterable[int]
) -> list[list[int]]:
    """Swap children at every depth that is a multiple of each query.

    ``indexes`` lists the ``(left, right)`` children of nodes in breadth-first
    order, ``-1`` meaning no child; the root is node 1 at depth 1. After each
    query the in-order traversal is recorded.
    """
    root, nodes = _build_tree(indexes)
    traversals: list[list[int]] = []
    for k in queries:
        if k < 1:
            raise ValueError("swap depth must be positive")
        for node in nodes:
            if node.level % k == 0:
                node.left, node.right = node.right, node.left
        traversals.append(_inorder(root))
    return traversals


def pairs(k: int, values: Iterable[int]) -> int:
    """Return how many distinct values ``x`` have ``x + k`` among ``values`` too."""
    distinct = set(values)
    return sum(1 for value in distinct if value + k in distinct)


def triplets(a: Iterable[int], b: Iterable[int], c: Iterable[int]) -> int:
    """Count distinct triplets ``(p, q, r)`` from ``a``, ``b``, ``c`` with ``p <= q >= r``."""
    first = sorted(set(a))
    third = sorted(set(c))
    return sum(
        bisect_right(first, q) * bisect_right(third, q) for q in set(b)
    )


def _items_made(machines: Sequence[int], days: int) -> int:
    return sum(days // machine for machine in machines)


def minimum_time(machines: Sequence[int], goal: int) -> int:
    """Return the fewest days for ``machines`` to make ``goal`` items together.

    Each machine makes one item every ``machines[i]`` days.
    """
    if not machines:
        raise ValueError("at least one machine is required")
    if any(machine < 1 for machine in machines):
        raise ValueError("machine periods must be positive")
    ordered = sorted(machines)
    count = len(ordered)
    lower = goal * ordered[0] // count
    upper = goal * ordered[-1] // count
    while lower < upper:
        days = (lower + upper) // 2
        if _items_made(ordered, days) >= goal:
            upper = days
        else:
            lower = days + 1
    return lower


def maximum_subarray_mod(values: Sequence[int], modulus: int) -> int:
    """Return the largest sum of a contiguous subarray, taken modulo ``modulus``."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    prefixes: list[tuple[int, int]] = []
    current = 0
    best = 0
    for index, value in enumerate(values):
        current = (value % modulus + current) % modulus
        prefixes.append((current, index))
        best = max(best, current)

    if best == modulus - 1:
        return best

    ordered = sorted(prefixes, key=lambda prefix: prefix[0])
    for (low_sum, low_index), (high_sum, high_index) in zip(ordered, ordered[1:]):
        if high_index < low_index:
            diff = high_sum - low_sum
            if diff != 0 and modulus - diff > best:
                best = modulus - diff
                if best == modulus - 1:
                    break
    return best


def _enough(machines: int, workers: int, price: int, target: int, passes: int) -> bool:
    candies = machines * workers
    passes -= 1
    while True:
        rate = machines * workers
        rounds = (target - candies + rate - 1) // rate
        if rounds <= passes:
            return True
        if candies < price:
            rounds = (price - candies + rate - 1) // rate
            passes -= rounds
            if passes < 1:
                return False
            candies += rounds * rate
        candies -= price
        if machines > workers:
            workers += 1
        else:
            machines += 1


def minimum_passes(machines: int, workers: int, price: int, target: int) -> int:
    """Return the fewest passes needed to make ``target`` candies.

    Each pass makes ``machines * workers`` candies; candies may be spent at
    ``price`` each on another machine or worker.
    """
    if machines < 1 or workers < 1 or price < 1:
        raise ValueError("machines, workers and price must be positive")
    if machines * workers >= target:
        return 1
    left, right = 1, _LARGEST_PASSES
    while left < right:
        passes = left + (right - left) // 2
        if _enough(machines, workers, price, target, passes):
            right = passes
        else:
            left = passes + 1
    return left