"""
Data models for shortest path results.

``ShortestPaths`` is the shortest-path tree produced by a single-source search.
Nodes of the analysed graph are mapped to dense indices so distances and tree
links can be kept in flat lists.

Example:
    >>> paths = DijkstraFinder(graph).find_from(source)
    >>> nodes, weight = paths.path_to(target)
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class ShortestPaths:
    """
    Shortest-path tree rooted at a single source node.

    Attributes:
        source: The node the paths start from
        nodes: Nodes of the analysed graph
        index_of: Mapping from node id to index into ``nodes``
        dist: Distance from the source per node index
        prev: Index of the preceding node on the shortest path, -1 for none
    """

    source: Any
    nodes: List[Any] = field(default_factory=list)
    index_of: Dict[int, int] = field(default_factory=dict)
    dist: List[float] = field(default_factory=list)
    prev: List[int] = field(default_factory=list)

    @classmethod
    def rooted_at(cls, source: Any, nodes: List[Any]) -> "ShortestPaths":
        """Create an empty tree over ``nodes`` with distance 0 at the source."""
        index_of = {n.id: i for i, n in enumerate(nodes)}
        # keep the graph's own node value for the source
        source = nodes[index_of[source.id]]
        paths = cls(
            source=source,
            nodes=nodes,
            index_of=index_of,
            dist=[math.inf] * len(nodes),
            prev=[-1] * len(nodes),
        )
        paths.dist[index_of[source.id]] = 0.0
        return paths

    def set(self, to: int, weight: float, mid: int) -> None:
        self.dist[to] = weight
        self.prev[to] = mid

    def weight_to(self, node: Any) -> float:
        """Get the weight of the minimum path to ``node``, inf if unreachable."""
        to = self.index_of.get(node.id)
        if to is None:
            return math.inf
        return self.dist[to]

    def path_to(self, node: Any) -> Tuple[List[Any], float]:
        """
        Get a shortest path to ``node`` and its weight.

        Returns:
            The nodes from the source to ``node`` inclusive and the path weight,
            or an empty list and inf when ``node`` is unreachable.
        """
        to: Optional[int] = self.index_of.get(node.id)
        if to is None or math.isinf(self.dist[to]):
            return [], math.inf

        weight = self.dist[to]
        source = self.index_of[self.source.id]
        path = [self.nodes[to]]
        while to != source:
            to = self.prev[to]
            path.append(self.nodes[to])
        path.reverse()
        return path, weight
