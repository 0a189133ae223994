"""Dominator and post-dominator sets for control-flow style graphs.

Node A dominates node B when every path from the start node to B passes
through A. Node A post-dominates B when every path from B to the end node
passes through A. Both are computed as the greatest fixed point of

    dom(n) = {n} ∪ ⋂ dom(p) over the predecessors p of n

starting from "every node" for all nodes except the root. The sets are not
pruned to strict or immediate dominators.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List

from ..node_set import NodeSet, equal
from ..types import Directed, Graph

logger = logging.getLogger(__name__)


class DominatorAnalysis:
    """Iterative dominator analysis over the graph protocols."""

    @staticmethod
    def dominators(start: Any, graph: Graph) -> Dict[int, NodeSet]:
        """Compute the dominator set of every node.

        Args:
            start: The entry node.
            graph (Graph): The graph to analyze. Predecessors are taken from
                ``get_predecessors`` for directed graphs and from
                ``get_neighbors`` otherwise.

        Returns:
            Dict[int, NodeSet]: Dominators keyed by node id.

        Note:
            - A node other than ``start`` that has no predecessors keeps the set
              of all nodes
            - Nodes unreachable from ``start`` can therefore have dominator sets
              that are not meaningful
        """
        if isinstance(graph, Directed):
            predecessors = graph.get_predecessors
        else:
            predecessors = graph.get_neighbors
        return DominatorAnalysis._fixed_point(start, graph, predecessors)

    @staticmethod
    def post_dominators(end: Any, graph: Graph) -> Dict[int, NodeSet]:
        """Compute the post-dominator set of every node.

        Args:
            end: The exit node.
            graph (Graph): The graph to analyze. Successors are taken from
                ``get_neighbors``.

        Returns:
            Dict[int, NodeSet]: Post-dominators keyed by node id.
        """
        return DominatorAnalysis._fixed_point(end, graph, graph.get_neighbors)

    @staticmethod
    def _fixed_point(
        root: Any, graph: Graph, flow_from: Callable[[Any], Iterable[Any]]
    ) -> Dict[int, NodeSet]:
        nodes: List[Any] = list(graph.get_nodes())
        all_nodes = NodeSet(nodes)

        dom: Dict[int, NodeSet] = {}
        for node in nodes:
            if node.id == root.id:
                dom[node.id] = NodeSet([node])
            else:
                dom[node.id] = NodeSet().copy_from(all_nodes)

        rounds = 0
        changed = True
        while changed:
            changed = False
            rounds += 1
            for node in nodes:
                if node.id == root.id:
                    continue
                flows = list(flow_from(node))
                if not flows:
                    continue

                tmp = NodeSet().copy_from(dom[flows[0].id])
                for other in flows[1:]:
                    tmp.intersect(tmp, dom[other.id])
                tmp.add(node)

                if not equal(tmp, dom[node.id]):
                    dom[node.id] = tmp
                    changed = True

        logger.debug("Dominator sets of %s nodes settled after %s rounds", len(nodes), rounds)
        return dom
