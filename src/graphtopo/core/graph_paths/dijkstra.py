"""
Single-source shortest paths with Dijkstra's algorithm.
"""

import logging
from heapq import heappop, heappush
from itertools import count
from typing import Any, List, Tuple

from ..exceptions import GraphOperationError
from ..types import Graph, weight_func_for
from .models import ShortestPaths

logger = logging.getLogger(__name__)


class NegativeWeightError(GraphOperationError):
    """Raised when a negative edge weight is reachable from the source."""

    pass


class DijkstraFinder:
    """
    Shortest-path tree search over non-negative edge weights.

    Weights come from the graph itself when it implements the ``Weighter``
    protocol; otherwise every edge costs 1.
    """

    def __init__(self, graph: Graph):
        """Initialize finder with graph."""
        self.graph = graph

    def find_from(self, source: Any) -> ShortestPaths:
        """
        Compute shortest paths from ``source`` to every node of the graph.

        A source that is not in the graph yields an empty result. The time
        complexity is O(|E| + |V| log |V|).

        Raises:
            NegativeWeightError: If a reachable edge has a negative weight
        """
        if not self.graph.has_node(source):
            return ShortestPaths(source=source)

        weight = weight_func_for(self.graph)
        paths = ShortestPaths.rooted_at(source, list(self.graph.get_nodes()))

        # no decrease-key; stale entries are skipped on pop
        tie = count()
        queue: List[Tuple[float, int, Any]] = [(0.0, next(tie), paths.source)]
        while queue:
            dist, _, mid = heappop(queue)
            k = paths.index_of[mid.id]
            if dist > paths.dist[k]:
                continue
            for v in self.graph.get_neighbors(mid):
                j = paths.index_of[v.id]
                w = weight(self.graph.get_edge(mid, v))
                if w < 0:
                    raise NegativeWeightError(
                        f"negative edge weight {w} from {mid.id} to {v.id}"
                    )
                joint = paths.dist[k] + w
                if joint < paths.dist[j]:
                    heappush(queue, (joint, next(tie), v))
                    paths.set(j, joint, k)

        logger.debug("Shortest paths computed from node %s", source.id)
        return paths
