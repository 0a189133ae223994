"""Component analysis for directed and undirected graphs.

This module provides functionality for analysing the connectivity structure of a
graph supplied through the ``graphtopo.core.types`` protocols. It includes
methods for:
- Finding strongly connected components (subgraphs where nodes are mutually
                                        reachable following edge direction)
- Finding connected components of undirected graphs
- Checking whether a node sequence is a path in a graph

All traversals use explicit stacks, so the depth of the graph is not limited by
the interpreter's recursion limit.
"""

import logging
from typing import Any, Dict, Iterator, List, Set, Tuple

from ..node_set import NodeSet
from ..types import Directed, Graph, Undirected

logger = logging.getLogger(__name__)


class ComponentAnalysis:
    """Connected component analysis for graphs.

    The analysis methods are implemented as static methods to provide
    utility-style functionality that can be used with any graph implementing the
    required protocol without maintaining state between calls.
    """

    @staticmethod
    def find_strongly_connected_components(graph: Directed) -> List[List[Any]]:
        """Find all strongly connected components in the directed graph.

        A strongly connected component (SCC) is a maximal set of nodes where
        every node is reachable from every other node following the direction of
        edges. This method uses Tarjan's algorithm driven by an explicit stack of
        (node, successor iterator) frames in place of recursion.

        Args:
            graph (Directed): The graph instance to analyze.

        Returns:
            List[List[Any]]: One list of nodes per strongly connected component.

        Example:
            >>> # 1 -> 2 -> 1, 2 -> 3
            >>> ComponentAnalysis.find_strongly_connected_components(g)
            [[3], [2, 1]]

        Note:
            - Components are returned in reverse topological order of the
              condensation graph
            - Each node appears in exactly one component
            - A node with only a self-loop forms its own single-node component
        """
        index = 0
        indices: Dict[int, int] = {}
        lowlinks: Dict[int, int] = {}
        stack: List[Any] = []
        on_stack: Set[int] = set()
        components: List[List[Any]] = []
        work: List[Tuple[Any, Iterator[Any]]] = []

        def visit(node: Any) -> None:
            nonlocal index
            # Set the depth index for node to the smallest unused index.
            index += 1
            indices[node.id] = index
            lowlinks[node.id] = index
            stack.append(node)
            on_stack.add(node.id)
            work.append((node, iter(graph.get_neighbors(node))))

        for root in graph.get_nodes():
            if root.id in indices:
                continue
            visit(root)

            while work:
                node, successors = work[-1]
                nid = node.id
                descended = False
                for successor in successors:
                    sid = successor.id
                    if sid not in indices:
                        # Successor has not yet been visited; descend into it
                        visit(successor)
                        descended = True
                        break
                    if sid in on_stack:
                        # Successor is on the stack and hence in the current SCC
                        lowlinks[nid] = min(lowlinks[nid], indices[sid])
                if descended:
                    continue

                work.pop()
                if work:
                    parent_id = work[-1][0].id
                    lowlinks[parent_id] = min(lowlinks[parent_id], lowlinks[nid])

                # If node is a root node, pop the stack and collect the SCC
                if lowlinks[nid] == indices[nid]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member.id)
                        component.append(member)
                        if member.id == nid:
                            break
                    components.append(component)

        logger.debug(
            "Found %s strongly connected components over %s nodes",
            len(components),
            len(indices),
        )
        return components

    @staticmethod
    def find_connected_components(graph: Undirected) -> List[List[Any]]:
        """Find all connected components of the undirected graph.

        Args:
            graph (Undirected): The graph instance to analyze.

        Returns:
            List[List[Any]]: One list of nodes per component, in no particular order.
        """
        components: List[List[Any]] = []
        visited = NodeSet()

        for start_node in graph.get_nodes():
            if start_node in visited:
                continue

            component = []
            stack = [start_node]
            visited.add(start_node)

            while stack:
                current_node = stack.pop()
                component.append(current_node)
                for neighbor in graph.get_neighbors(current_node):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)

            components.append(component)

        return components

    @staticmethod
    def is_path_in(graph: Graph, path: List[Any]) -> bool:
        """Check whether ``path`` is a path in the graph.

        Consecutive nodes must be joined by an edge from the earlier to the later
        node in a directed graph, or by any edge otherwise.

        Note:
            - An empty path is always a path
            - A single-node path is a path when the node exists in the graph
        """
        if not path:
            return True
        if len(path) == 1:
            return graph.has_node(path[0])

        if isinstance(graph, Directed):
            can_reach = graph.has_edge_from_to
        else:
            can_reach = graph.has_edge

        return all(can_reach(u, v) for u, v in zip(path, path[1:]))
