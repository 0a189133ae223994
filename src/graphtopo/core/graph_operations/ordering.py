"""Topological ordering of directed graphs."""

import logging
from typing import Any, List, Optional, Tuple

from ..config import TopologyConfig
from ..exceptions import DEFAULT_MAX_REPORTED_NODES, CyclicOrderingError
from ..types import Directed
from .components import ComponentAnalysis

logger = logging.getLogger(__name__)


class TopologicalSorter:
    """
    Orders the nodes of a directed graph so that every edge points forward.

    Sorting is built on strongly connected components: each single-node
    component takes a real position in the order, while every cyclic component
    is reported in a ``CyclicOrderingError`` and leaves a ``None`` placeholder at
    its topological position.
    """

    def __init__(self, max_reported_nodes: int = DEFAULT_MAX_REPORTED_NODES):
        """Initialize sorter with the literal node cap for error messages."""
        self.max_reported_nodes = max_reported_nodes

    @classmethod
    def from_config(cls, config: TopologyConfig) -> "TopologicalSorter":
        return cls(max_reported_nodes=config.max_cycle_nodes_reported)

    def sort(
        self, graph: Directed
    ) -> Tuple[List[Optional[Any]], Optional[CyclicOrderingError]]:
        """
        Topologically sort the graph so that each edge points from 'from' to 'to'.

        Args:
            graph (Directed): The graph to sort.

        Returns:
            Tuple of the sorted nodes and an error. The error is None for an
            acyclic graph. Otherwise it lists every cyclic component with its
            members sorted by id, in the order their ``None`` placeholders
            appear in the sorted nodes. The best-effort order is returned in
            both cases.

        Note:
            A self-loop on its own forms a single-node component and does not
            prevent an ordering.
        """
        sccs = ComponentAnalysis.find_strongly_connected_components(graph)
        ordered: List[Optional[Any]] = []
        cyclic: List[List[Any]] = []
        for scc in sccs:
            if len(scc) != 1:
                cyclic.append(sorted(scc, key=lambda n: n.id))
                ordered.append(None)
                continue
            ordered.append(scc[0])

        # Components come out of the SCC finder in reverse topological order
        ordered.reverse()
        if not cyclic:
            return ordered, None

        cyclic.reverse()
        logger.debug("Graph has %s cyclic components", len(cyclic))
        return ordered, CyclicOrderingError(cyclic, max_nodes=self.max_reported_nodes)

    def sort_or_raise(self, graph: Directed) -> List[Any]:
        """
        Topologically sort the graph, raising on cycles.

        Raises:
            CyclicOrderingError: If the graph has a cyclic component
        """
        ordered, err = self.sort(graph)
        if err is not None:
            raise err
        return ordered
