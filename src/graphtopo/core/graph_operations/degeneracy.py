"""Degeneracy ordering and k-core decomposition of undirected graphs.

The ordering repeatedly removes a node of minimum remaining degree. Nodes are
kept in buckets indexed by their current remaining degree, and the running
maximum of the bucket index at each removal is the removed node's core number.
Ties between nodes of equal degree are broken arbitrarily.
"""

import logging
from typing import Any, Dict, List, Tuple

from ..types import Undirected

logger = logging.getLogger(__name__)


class DegeneracyOrdering:
    """Degeneracy (k-core) analysis for undirected graphs."""

    @staticmethod
    def _adjacency(graph: Undirected, nodes: List[Any]) -> Dict[int, List[Any]]:
        adjacency: Dict[int, List[Any]] = {}
        for n in nodes:
            # dict keeps the first occurrence of each neighbour id
            unique = {w.id: w for w in graph.get_neighbors(n) if w.id != n.id}
            adjacency[n.id] = list(unique.values())
        return adjacency

    @staticmethod
    def _peel(graph: Undirected) -> Tuple[List[Any], List[int]]:
        """Return nodes in removal order with the core number of each."""
        nodes = list(graph.get_nodes())
        neighbours = DegeneracyOrdering._adjacency(graph, nodes)

        # Remaining degree of every node not yet removed
        remaining: Dict[int, int] = {n.id: len(neighbours[n.id]) for n in nodes}
        max_degree = max(remaining.values(), default=0)

        # buckets[i] holds the nodes not yet removed with remaining degree i
        buckets: List[Dict[int, Any]] = [{} for _ in range(max_degree + 1)]
        for n in nodes:
            buckets[remaining[n.id]][n.id] = n

        removed: List[Any] = []
        cores: List[int] = []
        k = 0
        low = 0
        for _ in range(len(nodes)):
            i = low
            while not buckets[i]:
                i += 1
            k = max(k, i)

            _, v = buckets[i].popitem()
            removed.append(v)
            cores.append(k)
            del remaining[v.id]

            for w in neighbours[v.id]:
                dw = remaining.get(w.id)
                if not dw:
                    continue
                del buckets[dw][w.id]
                buckets[dw - 1][w.id] = w
                remaining[w.id] = dw - 1

            # Removing v lowers neighbour degrees by at most one
            low = max(i - 1, 0)

        return removed, cores

    @staticmethod
    def vertex_ordering(graph: Undirected) -> Tuple[List[Any], List[List[Any]]]:
        """Compute the degeneracy ordering and the k-cores of the graph.

        Args:
            graph (Undirected): The graph instance to analyze.

        Returns:
            Tuple of (order, cores). ``order`` lists every node from lowest to
            highest degeneracy, i.e. in removal order, so each node has at most
            ``d`` neighbours after it where ``d`` is the graph's degeneracy.
            ``cores[i]`` lists the nodes whose core number is ``i``; core numbers
            that no node has give empty lists.

        Note:
            - Self-adjacency is ignored when counting degrees
            - The graph's degeneracy is ``len(cores) - 1`` for a non-empty graph
        """
        order, core_of = DegeneracyOrdering._peel(graph)
        if not order:
            return [], []

        cores: List[List[Any]] = [[] for _ in range(core_of[-1] + 1)]
        for node, k in zip(order, core_of):
            cores[k].append(node)

        logger.debug(
            "Degeneracy ordering of %s nodes, degeneracy %s", len(order), len(cores) - 1
        )
        return order, cores

    @staticmethod
    def core_numbers(graph: Undirected) -> Dict[int, int]:
        """Map every node id to its core number."""
        order, core_of = DegeneracyOrdering._peel(graph)
        return {node.id: k for node, k in zip(order, core_of)}
