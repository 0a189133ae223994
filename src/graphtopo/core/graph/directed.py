"""
Directed graph with successor and predecessor adjacency maps.

This module provides ``DirectedGraph``, a general purpose mutable directed graph
that implements the ``Directed``, ``Weighter`` and ``Mutable`` protocols. Edges
are stored twice, once keyed from their source and once from their target, so
both successor and predecessor lookups are constant time per neighbour.

In most cases a graph specific to the caller's problem domain is preferable;
this implementation exists so the analysis algorithms can be used and tested
without one.
"""

import math
from typing import Any, Dict, Iterator, List, Optional

from ..exceptions import NodeIDCollisionError, NodeNotFoundError
from ..models import Edge, WeightedEdge
from .base import IDAllocator


class DirectedGraph:
    """
    Mutable directed graph using adjacency maps.

    Self-loops are permitted; at most one edge is kept per ordered node pair.

    Attributes:
        _successors (Dict[int, Dict[int, WeightedEdge]]): Outgoing edges per node id
        _predecessors (Dict[int, Dict[int, WeightedEdge]]): Incoming edges per node id
        _nodes (Dict[int, Any]): Node values keyed by id
        _ids (IDAllocator): Highest id seen, for new_node_id
    """

    def __init__(self) -> None:
        self._successors: Dict[int, Dict[int, WeightedEdge]] = {}
        self._predecessors: Dict[int, Dict[int, WeightedEdge]] = {}
        self._nodes: Dict[int, Any] = {}
        self._ids = IDAllocator()

    def new_node_id(self) -> int:
        """Return an id not currently used by any node."""
        return self._ids.new_id()

    def add_node(self, node: Any) -> None:
        """
        Add a node to the graph.

        Raises:
            NodeIDCollisionError: If a node with the same id exists
        """
        if node.id in self._nodes:
            raise NodeIDCollisionError(f"node ID collision: {node.id}")
        self._nodes[node.id] = node
        self._successors[node.id] = {}
        self._predecessors[node.id] = {}
        self._ids.used(node.id)

    def set_edge(self, edge: Edge, cost: float = 1.0) -> None:
        """
        Add an edge from ``edge.from_node`` to ``edge.to_node``.

        Missing end points are added. An existing edge between the same ordered
        pair is replaced.
        """
        from_node, to_node = edge.from_node, edge.to_node
        if not self.has_node(from_node):
            self.add_node(from_node)
        if not self.has_node(to_node):
            self.add_node(to_node)

        stored = WeightedEdge(edge=edge, cost=cost)
        self._successors[from_node.id][to_node.id] = stored
        self._predecessors[to_node.id][from_node.id] = stored

    def remove_node(self, node: Any) -> None:
        """Remove a node and every edge attached to it."""
        nid = node.id
        if nid not in self._nodes:
            return
        del self._nodes[nid]

        for succ in self._successors.pop(nid):
            self._predecessors[succ].pop(nid, None)
        for pred in self._predecessors.pop(nid):
            if pred in self._successors:
                self._successors[pred].pop(nid, None)

    def remove_edge(self, edge: Edge) -> None:
        """Remove an edge, leaving its end points in place."""
        fid, tid = edge.from_node.id, edge.to_node.id
        if fid not in self._nodes or tid not in self._nodes:
            return
        self._successors[fid].pop(tid, None)
        self._predecessors[tid].pop(fid, None)

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._successors = {}
        self._predecessors = {}
        self._nodes = {}
        self._ids = IDAllocator()

    def get_node(self, node_id: int) -> Optional[Any]:
        """Get the node with the given id, or None."""
        return self._nodes.get(node_id)

    def get_node_safe(self, node_id: int) -> Any:
        """Get the node with the given id, raising an error if it doesn't exist."""
        node = self._nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"Node '{node_id}' not found in the graph")
        return node

    def has_node(self, node: Any) -> bool:
        return node.id in self._nodes

    def get_nodes(self) -> List[Any]:
        return list(self._nodes.values())

    def get_neighbors(self, node: Any) -> List[Any]:
        """Get the successors of a node."""
        succ = self._successors.get(node.id)
        if succ is None:
            return []
        return [self._nodes[i] for i in succ]

    def get_predecessors(self, node: Any) -> List[Any]:
        pred = self._predecessors.get(node.id)
        if pred is None:
            return []
        return [self._nodes[i] for i in pred]

    def has_edge(self, x: Any, y: Any) -> bool:
        """Check for an edge between x and y in either direction."""
        xid, yid = x.id, y.id
        if xid not in self._nodes or yid not in self._nodes:
            return False
        return yid in self._successors[xid] or xid in self._successors[yid]

    def has_edge_from_to(self, u: Any, v: Any) -> bool:
        if u.id not in self._nodes or v.id not in self._nodes:
            return False
        return v.id in self._successors[u.id]

    def get_edge(self, u: Any, v: Any) -> Optional[Edge]:
        """Get the edge from u to v if it exists."""
        if u.id not in self._nodes or v.id not in self._nodes:
            return None
        stored = self._successors[u.id].get(v.id)
        if stored is None:
            return None
        return stored.edge

    def degree(self, node: Any) -> int:
        """Number of incoming plus outgoing edges of a node."""
        if node.id not in self._nodes:
            return 0
        return len(self._successors[node.id]) + len(self._predecessors[node.id])

    def weight(self, edge: Edge) -> float:
        """Get the cost of an edge, inf when it is not in the graph."""
        stored = self._successors.get(edge.from_node.id, {}).get(edge.to_node.id)
        if stored is None:
            return math.inf
        return stored.cost

    def get_edges(self) -> Iterator[Edge]:
        """Iterate over all edges in the graph."""
        for succ in self._successors.values():
            for stored in succ.values():
                yield stored.edge

    def get_edge_count(self) -> int:
        return sum(len(succ) for succ in self._successors.values())

    def __len__(self) -> int:
        return len(self._nodes)
