"""
Core functionality tests.

These tests drive the algorithms through a caller-owned graph type that only
implements the capability protocols, with its own node model.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

import pytest

import graphtopo
from graphtopo.core import Directed, Undirected
from graphtopo.core.models import Edge


@dataclass(frozen=True)
class Service:
    """Caller node model with an id and a name."""

    id: int
    name: str


@dataclass
class ServiceGraph:
    """Minimal caller graph keeping adjacency as id sets."""

    directed: bool = True
    nodes: Dict[int, Service] = field(default_factory=dict)
    succ: Dict[int, Set[int]] = field(default_factory=dict)
    pred: Dict[int, Set[int]] = field(default_factory=dict)

    def link(self, u: Service, v: Service) -> None:
        for n in (u, v):
            self.nodes.setdefault(n.id, n)
            self.succ.setdefault(n.id, set())
            self.pred.setdefault(n.id, set())
        self.succ[u.id].add(v.id)
        self.pred[v.id].add(u.id)
        if not self.directed:
            self.succ[v.id].add(u.id)
            self.pred[u.id].add(v.id)

    def has_node(self, node) -> bool:
        return node.id in self.nodes

    def get_nodes(self) -> List[Service]:
        return list(self.nodes.values())

    def get_neighbors(self, node) -> List[Service]:
        return [self.nodes[i] for i in self.succ.get(node.id, ())]

    def has_edge(self, x, y) -> bool:
        return y.id in self.succ.get(x.id, ()) or x.id in self.succ.get(y.id, ())

    def get_edge(self, u, v) -> Optional[Edge]:
        if v.id in self.succ.get(u.id, ()):
            return Edge(from_node=u, to_node=v)
        return None


class DirectedServiceGraph(ServiceGraph):
    def has_edge_from_to(self, u, v) -> bool:
        return v.id in self.succ.get(u.id, ())

    def get_predecessors(self, node) -> List[Service]:
        return [self.nodes[i] for i in self.pred.get(node.id, ())]


class UndirectedServiceGraph(ServiceGraph):
    def __init__(self):
        super().__init__(directed=False)

    def get_edge_between(self, x, y) -> Optional[Edge]:
        return self.get_edge(x, y)


@pytest.fixture
def services() -> Dict[str, Service]:
    """Fixture providing caller nodes."""
    names = ["gateway", "auth", "users", "db", "cache"]
    return {name: Service(id=i - 2, name=name) for i, name in enumerate(names)}


def test_caller_graph_satisfies_protocols():
    """Test the caller graphs are recognised by capability."""
    assert isinstance(DirectedServiceGraph(), Directed)
    assert isinstance(UndirectedServiceGraph(), Undirected)


def test_sort_caller_graph(services):
    """Test sorting returns the caller's own node objects."""
    graph = DirectedServiceGraph()
    s = services
    graph.link(s["gateway"], s["auth"])
    graph.link(s["auth"], s["users"])
    graph.link(s["users"], s["db"])
    graph.link(s["users"], s["cache"])

    ordered, err = graphtopo.TopologicalSorter().sort(graph)
    assert err is None
    assert ordered[0] is s["gateway"]
    names = [n.name for n in ordered]
    assert names.index("users") < names.index("db")
    assert names.index("users") < names.index("cache")


def test_cycle_in_caller_graph(services):
    """Test cyclic services are reported sorted by id."""
    graph = DirectedServiceGraph()
    s = services
    graph.link(s["auth"], s["users"])
    graph.link(s["users"], s["db"])
    graph.link(s["db"], s["auth"])

    ordered, err = graphtopo.TopologicalSorter().sort(graph)
    assert ordered == [None]
    assert err.components == [[s["auth"], s["users"], s["db"]]]


def test_cliques_and_cores_caller_graph(services):
    """Test undirected analyses on a caller graph."""
    graph = UndirectedServiceGraph()
    s = services
    graph.link(s["auth"], s["users"])
    graph.link(s["users"], s["db"])
    graph.link(s["db"], s["auth"])
    graph.link(s["db"], s["cache"])

    cliques = graphtopo.CliqueFinder().find_maximal_cliques(graph)
    assert sorted(sorted(n.name for n in c) for c in cliques) == [
        ["auth", "db", "users"],
        ["cache", "db"],
    ]

    order, cores = graphtopo.DegeneracyOrdering.vertex_ordering(graph)
    assert order[0] is s["cache"]
    assert {n.name for n in cores[2]} == {"auth", "users", "db"}
