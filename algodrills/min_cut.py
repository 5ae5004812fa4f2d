"""Karger's randomised contraction algorithm for the minimum cut of a graph."""

from __future__ import annotations

import random
from collections.abc import Iterable

MAX_ITERATIONS = 1024


class Graph:
    """An undirected multigraph stored as adjacency lists."""

    def __init__(self) -> None:
        self._nodes: dict[int, list[int]] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def add_edge(self, origin: int, destination: int) -> None:
        """Append ``destination`` to the adjacency list of ``origin``."""
        self._nodes.setdefault(origin, []).append(destination)

    def remove_node(self, node: int) -> None:
        """Drop ``node`` and its adjacency list, if present."""
        self._nodes.pop(node, None)

    def remove_edge(self, origin: int, destination: int) -> None:
        """Remove one occurrence of ``destination`` from ``origin``'s list."""
        edges = self._nodes.get(origin)
        if edges and destination in edges:
            edges.remove(destination)

    def neighbours(self, node: int) -> tuple[int, ...]:
        """Return the adjacency list of ``node``, empty if it is unknown."""
        return tuple(self._nodes.get(node, ()))

    def copy(self) -> Graph:
        """Return an independent copy of the graph."""
        duplicate = Graph()
        duplicate._nodes = {node: list(edges) for node, edges in self._nodes.items()}
        return duplicate

    def contract(self, rng: random.Random) -> int:
        """Contract random edges until two nodes remain; return the cut size.

        The graph is consumed by the contraction.
        """
        for _ in range(len(self) - 2):
            absorber, absorbed = self._random_edge(rng)
            absorbed_edges = list(self._nodes.get(absorbed, ()))

            for node in absorbed_edges:
                if node != absorber:
                    self.add_edge(absorber, node)

            for node in absorbed_edges:
                self.remove_edge(node, absorbed)
                if node != absorber:
                    self.add_edge(node, absorber)

            self.remove_node(absorbed)

        return next((len(edges) for edges in self._nodes.values()), 0)

    def _random_edge(self, rng: random.Random) -> tuple[int, int]:
        nodes = list(self._nodes)
        origin = nodes[rng.randrange(len(nodes))]
        edges = self._nodes[origin]
        if not edges:
            raise ValueError(f"node {origin} has no edges to contract")
        return origin, edges[rng.randrange(len(edges))]


def parse_adjacency(lines: Iterable[str]) -> Graph:
    """Build a graph from lines of the form ``node neighbour neighbour ...``."""
    graph = Graph()
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        origin = int(fields[0])
        for field in fields[1:]:
            graph.add_edge(origin, int(field))
    return graph


def default_iterations(graph: Graph) -> int:
    """Return ``n(n-1)/2`` contraction runs, capped at 1024."""
    n = len(graph)
    return min(n * (n - 1) // 2, MAX_ITERATIONS)


def minimum_cut(
    graph: Graph, iterations: int, rng: random.Random | None = None
) -> int:
    """Return the smallest cut found over ``iterations`` independent runs."""
    if iterations < 1:
        raise ValueError("at least one iteration is required")
    rng = rng if rng is not None else random.Random()
    return min(graph.copy().contract(rng) for _ in range(iterations))