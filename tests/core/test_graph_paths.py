"""Tests for single-source shortest paths."""

import math

import pytest

from graphtopo.core.graph import DirectedGraph, UndirectedGraph
from graphtopo.core.graph_paths import DijkstraFinder, NegativeWeightError
from graphtopo.core.models import Edge, SimpleNode


@pytest.fixture
def weighted_graph():
    """Fixture providing a small weighted directed graph."""
    graph = DirectedGraph()
    nodes = {i: SimpleNode(i) for i in range(1, 6)}
    for u, v, cost in [(1, 2, 7.0), (1, 3, 2.0), (3, 2, 3.0), (2, 4, 1.0), (3, 4, 8.0)]:
        graph.set_edge(Edge(from_node=nodes[u], to_node=nodes[v]), cost=cost)
    graph.add_node(nodes[5])
    return graph


def test_shortest_paths(weighted_graph):
    """Test weights and paths follow the cheapest route."""
    paths = DijkstraFinder(weighted_graph).find_from(weighted_graph.get_node(1))

    path, weight = paths.path_to(weighted_graph.get_node(4))
    assert [n.id for n in path] == [1, 3, 2, 4]
    assert weight == 6.0
    assert paths.weight_to(weighted_graph.get_node(2)) == 5.0
    assert path[0] is weighted_graph.get_node(1)


def test_unreachable_node(weighted_graph):
    """Test unreachable nodes report inf."""
    paths = DijkstraFinder(weighted_graph).find_from(weighted_graph.get_node(1))
    path, weight = paths.path_to(weighted_graph.get_node(5))
    assert path == []
    assert math.isinf(weight)
    assert math.isinf(paths.weight_to(SimpleNode(99)))


def test_source_to_itself(weighted_graph):
    """Test the path from the source to itself."""
    source = weighted_graph.get_node(1)
    path, weight = DijkstraFinder(weighted_graph).find_from(source).path_to(source)
    assert path == [source]
    assert weight == 0.0


def test_source_not_in_graph(weighted_graph):
    """Test a missing source yields an empty result."""
    paths = DijkstraFinder(weighted_graph).find_from(SimpleNode(42))
    assert paths.nodes == []
    assert math.isinf(paths.weight_to(weighted_graph.get_node(1)))


def test_negative_weight():
    """Test negative edge weights are rejected."""
    graph = DirectedGraph()
    a, b = SimpleNode(1), SimpleNode(2)
    graph.set_edge(Edge(from_node=a, to_node=b), cost=-1.0)
    with pytest.raises(NegativeWeightError):
        DijkstraFinder(graph).find_from(a)


def test_undirected_hop_counts(make_undirected):
    """Test default costs count hops in an undirected graph."""
    graph = make_undirected([(1, 2), (2, 3), (3, 4), (1, 4)])
    paths = DijkstraFinder(graph).find_from(graph.get_node(1))
    assert paths.weight_to(graph.get_node(3)) == 2.0
    assert isinstance(graph, UndirectedGraph)
