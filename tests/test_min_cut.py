import random

import pytest

from algodrills.min_cut import (
    Graph,
    default_iterations,
    minimum_cut,
    parse_adjacency,
)


def _undirected(edges):
    graph = Graph()
    for origin, destination in edges:
        graph.add_edge(origin, destination)
        graph.add_edge(destination, origin)
    return graph


def test_parse_adjacency_reads_neighbours():
    graph = parse_adjacency(["1 2 3", "", "2 1", "3 1"])
    assert len(graph) == len({1, 2, 3})
    assert graph.neighbours(1) == (2, 3)
    assert graph.neighbours(2) == (1,)


def test_parse_adjacency_rejects_garbage():
    with pytest.raises(ValueError):
        parse_adjacency(["1 x"])


def test_remove_edge_removes_one_occurrence():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(1, 2)
    graph.remove_edge(1, 2)
    assert graph.neighbours(1) == (2,)


def test_copy_is_independent():
    graph = _undirected([(1, 2), (2, 3)])
    duplicate = graph.copy()
    duplicate.remove_node(2)
    duplicate.add_edge(1, 3)
    assert len(graph) == len(duplicate) + 1
    assert graph.neighbours(1) == (2,)


def test_contracting_a_tree_always_cuts_one_edge():
    for seed in range(20):
        graph = _undirected([(1, 2), (2, 3), (3, 4), (2, 5)])
        assert graph.contract(random.Random(seed)) == 1


def test_dumbbell_minimum_cut():
    graph = _undirected(
        [(1, 2), (2, 3), (1, 3), (4, 5), (5, 6), (4, 6), (3, 4)]
    )
    assert minimum_cut(graph, 300, random.Random(7)) == 1


def test_complete_graph_minimum_cut_and_input_untouched():
    graph = _undirected([(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)])
    before = {node: graph.neighbours(node) for node in range(1, 5)}
    assert minimum_cut(graph, 100, random.Random(3)) == 3
    assert {node: graph.neighbours(node) for node in range(1, 5)} == before


def test_default_iterations_is_capped():
    graph = _undirected([(node, node + 1) for node in range(50)])
    assert default_iterations(graph) == 1024


def test_minimum_cut_needs_iterations():
    graph = _undirected([(1, 2), (2, 3)])
    with pytest.raises(ValueError):
        minimum_cut(graph, 0, random.Random(1))


def test_contract_rejects_isolated_nodes():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(2, 1)
    graph.add_edge(3, 1)
    graph.remove_edge(1, 2)
    graph.remove_edge(2, 1)
    graph.remove_edge(3, 1)
    with pytest.raises(ValueError):
        graph.contract(random.Random(0))