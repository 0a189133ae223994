"""Shared test fixtures."""

from typing import Callable, Iterable, Tuple

import pytest

from graphtopo.core.graph import DirectedGraph, UndirectedGraph
from graphtopo.core.models import Edge, SimpleNode


def _build(graph, nodes: Iterable[int], edges: Iterable[Tuple[int, int]]):
    for i in nodes:
        if graph.get_node(i) is None:
            graph.add_node(SimpleNode(i))
    for u, v in edges:
        from_node = graph.get_node(u) or SimpleNode(u)
        to_node = graph.get_node(v) or SimpleNode(v)
        graph.set_edge(Edge(from_node=from_node, to_node=to_node))
    return graph


@pytest.fixture
def make_directed() -> Callable[..., DirectedGraph]:
    """Fixture building a DirectedGraph from node ids and (from, to) id pairs."""

    def factory(edges: Iterable[Tuple[int, int]] = (), nodes: Iterable[int] = ()):
        return _build(DirectedGraph(), nodes, edges)

    return factory


@pytest.fixture
def make_undirected() -> Callable[..., UndirectedGraph]:
    """Fixture building an UndirectedGraph from node ids and id pairs."""

    def factory(edges: Iterable[Tuple[int, int]] = (), nodes: Iterable[int] = ()):
        return _build(UndirectedGraph(), nodes, edges)

    return factory


@pytest.fixture
def growing_memory(monkeypatch) -> Callable[[], int]:
    """Fixture making every resident memory sample 64MB larger than the last."""
    samples = []

    def fake_usage() -> int:
        samples.append(len(samples) * 64 * 1024 * 1024)
        return samples[-1]

    monkeypatch.setattr("graphtopo.core.utils.get_memory_usage", fake_usage)
    return lambda: len(samples)
