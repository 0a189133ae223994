"""
Core type definitions and protocols.

This module defines the capability protocols that a caller's graph must
implement to be analysed. Algorithms are written against the minimal ``Graph``
protocol and use the ``Directed``, ``Undirected`` and ``Weighter`` extensions
when a graph provides them.
"""

import math
from typing import Any, Callable, Iterable, Optional, Protocol, runtime_checkable

from .models import Edge, Node


@runtime_checkable
class Graph(Protocol):
    """Protocol defining required graph operations."""

    def has_node(self, node: Node) -> bool:
        """Check whether the node exists within the graph."""
        ...

    def get_nodes(self) -> Iterable[Node]:
        """Get all nodes in the graph, in no particular order."""
        ...

    def get_neighbors(self, node: Node) -> Iterable[Node]:
        """Get all nodes directly reachable from the given node."""
        ...

    def has_edge(self, x: Node, y: Node) -> bool:
        """Check if an edge exists between nodes, ignoring direction."""
        ...

    def get_edge(self, u: Node, v: Node) -> Optional[Edge]:
        """Get the edge from u to v if it exists."""
        ...


@runtime_checkable
class Directed(Graph, Protocol):
    """Protocol for directed graphs."""

    def has_edge_from_to(self, u: Node, v: Node) -> bool:
        """Check if an edge exists from u to v."""
        ...

    def get_predecessors(self, node: Node) -> Iterable[Node]:
        """Get all nodes that directly reach the given node."""
        ...


@runtime_checkable
class Undirected(Graph, Protocol):
    """Protocol for undirected graphs."""

    def get_edge_between(self, x: Node, y: Node) -> Optional[Edge]:
        """Get the edge between x and y if it exists."""
        ...


@runtime_checkable
class Weighter(Protocol):
    """Protocol for graphs that report edge weights."""

    def weight(self, edge: Edge) -> float:
        """Get the weight of the given edge."""
        ...


@runtime_checkable
class Mutable(Protocol):
    """Protocol for graphs that can be arbitrarily altered."""

    def new_node_id(self) -> int:
        """Return an id not currently used by any node."""
        ...

    def add_node(self, node: Node) -> None:
        """Add a node, raising if its id is already present."""
        ...

    def remove_node(self, node: Node) -> None:
        """Remove a node and its edges; no-op if absent."""
        ...

    def set_edge(self, edge: Edge, cost: float = 1.0) -> None:
        """Add an edge, adding missing end points."""
        ...

    def remove_edge(self, edge: Edge) -> None:
        """Remove an edge, leaving its end points; no-op if absent."""
        ...


# Type alias for weight functions
WeightFunc = Callable[[Optional[Edge]], float]


def uniform_cost(edge: Optional[Any]) -> float:
    """Weight function giving a cost of 1 for an edge and inf for a missing one."""
    if edge is None:
        return math.inf
    return 1.0


def weight_func_for(graph: Any) -> WeightFunc:
    """Return the graph's own weight function, or ``uniform_cost``."""
    if isinstance(graph, Weighter):
        weight = graph.weight

        def _weight(edge: Optional[Edge]) -> float:
            if edge is None:
                return math.inf
            return weight(edge)

        return _weight
    return uniform_cost
