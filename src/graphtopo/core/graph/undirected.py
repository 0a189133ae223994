"""
Undirected graph with a symmetric neighbour map.

``UndirectedGraph`` implements the ``Undirected``, ``Weighter`` and ``Mutable``
protocols. Each edge is stored under both of its end points, so the edge
returned by ``get_edge_between`` is the object the caller supplied regardless
of which end it is looked up from.
"""

import math
from typing import Any, Dict, Iterator, List, Optional

from ..exceptions import NodeIDCollisionError, NodeNotFoundError, SelfEdgeError
from ..models import Edge, WeightedEdge
from .base import IDAllocator


class UndirectedGraph:
    """
    Mutable undirected graph using adjacency maps.

    Self edges are rejected; at most one edge is kept per unordered node pair.

    Attributes:
        _neighbors (Dict[int, Dict[int, WeightedEdge]]): Edges per node id
        _nodes (Dict[int, Any]): Node values keyed by id
        _ids (IDAllocator): Highest id seen, for new_node_id
    """

    def __init__(self) -> None:
        self._neighbors: Dict[int, Dict[int, WeightedEdge]] = {}
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
        self._neighbors[node.id] = {}
        self._ids.used(node.id)

    def set_edge(self, edge: Edge, cost: float = 1.0) -> None:
        """
        Add an edge between ``edge.from_node`` and ``edge.to_node``.

        Raises:
            SelfEdgeError: If both end points have the same id
        """
        from_node, to_node = edge.from_node, edge.to_node
        if from_node.id == to_node.id:
            raise SelfEdgeError(f"adding self edge on node {from_node.id}")
        if not self.has_node(from_node):
            self.add_node(from_node)
        if not self.has_node(to_node):
            self.add_node(to_node)

        stored = WeightedEdge(edge=edge, cost=cost)
        self._neighbors[from_node.id][to_node.id] = stored
        self._neighbors[to_node.id][from_node.id] = stored

    def remove_node(self, node: Any) -> None:
        """Remove a node and every edge attached to it."""
        nid = node.id
        if nid not in self._nodes:
            return
        del self._nodes[nid]
        for neighbor in self._neighbors.pop(nid):
            self._neighbors[neighbor].pop(nid, None)

    def remove_edge(self, edge: Edge) -> None:
        """Remove an edge, leaving its end points in place."""
        fid, tid = edge.from_node.id, edge.to_node.id
        if fid not in self._nodes or tid not in self._nodes:
            return
        self._neighbors[fid].pop(tid, None)
        self._neighbors[tid].pop(fid, None)

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._neighbors = {}
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
        """Get all nodes adjacent to a node."""
        adj = self._neighbors.get(node.id)
        if adj is None:
            return []
        return [self._nodes[i] for i in adj]

    def has_edge(self, x: Any, y: Any) -> bool:
        if x.id not in self._nodes or y.id not in self._nodes:
            return False
        return y.id in self._neighbors[x.id]

    def get_edge(self, u: Any, v: Any) -> Optional[Edge]:
        """Get the edge between u and v if it exists."""
        return self.get_edge_between(u, v)

    def get_edge_between(self, x: Any, y: Any) -> Optional[Edge]:
        if x.id not in self._nodes or y.id not in self._nodes:
            return None
        stored = self._neighbors[x.id].get(y.id)
        if stored is None:
            return None
        return stored.edge

    def degree(self, node: Any) -> int:
        """Number of edges attached to a node."""
        if node.id not in self._nodes:
            return 0
        return len(self._neighbors[node.id])

    def weight(self, edge: Edge) -> float:
        """Get the cost of an edge, inf when it is not in the graph."""
        stored = self._neighbors.get(edge.from_node.id, {}).get(edge.to_node.id)
        if stored is None:
            return math.inf
        return stored.cost

    def get_edges(self) -> Iterator[Edge]:
        """Iterate over all edges, yielding each unordered pair once."""
        seen = set()
        for nid, adj in self._neighbors.items():
            for other, stored in adj.items():
                if (other, nid) in seen:
                    continue
                seen.add((nid, other))
                yield stored.edge

    def get_edge_count(self) -> int:
        return sum(len(adj) for adj in self._neighbors.values()) // 2

    def __len__(self) -> int:
        return len(self._nodes)
