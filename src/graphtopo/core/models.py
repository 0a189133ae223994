"""
Node and edge models for the graph topology engine.

The algorithms never construct nodes themselves; whatever node objects a graph
hands out are the exact objects returned in results. ``SimpleNode`` and ``Edge``
are small value types for callers that have no node model of their own.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """A graph node identified by a graph-unique, stable integer id."""

    @property
    def id(self) -> int: ...


@dataclass(frozen=True)
class SimpleNode:
    """
    Minimal node implementation carrying only an integer id.

    Attributes:
        id (int): Graph-unique node identifier (may be negative)
    """

    id: int

    def __post_init__(self):
        """Validate node id."""
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("id must be an integer")

    def __repr__(self) -> str:
        return f"SimpleNode({self.id})"


@dataclass(frozen=True)
class Edge:
    """
    Directed edge between two nodes.

    In undirected graphs the pair is semantically unordered; ``from_node`` is
    simply the end the edge was looked up from.

    Attributes:
        from_node (Node): Source node
        to_node (Node): Target node
    """

    from_node: Any
    to_node: Any


@dataclass(frozen=True)
class WeightedEdge:
    """
    An edge paired with its cost as stored by the concrete graphs.

    Attributes:
        edge (Edge): The caller supplied edge
        cost (float): Edge cost
    """

    edge: Any
    cost: float = 1.0

    @property
    def from_node(self) -> Any:
        return self.edge.from_node

    @property
    def to_node(self) -> Any:
        return self.edge.to_node
