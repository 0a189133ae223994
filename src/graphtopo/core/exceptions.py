"""
Custom exceptions for the graph topology engine.

This module defines the hierarchy of exceptions raised by the structural analysis
algorithms and the concrete graph implementations. Two of them describe outcomes
of the algorithms themselves:

* CyclicOrderingError - an expected, recoverable condition reported by the
  topological sorter when the input contains cycles.
* InvariantViolation - a defect in an algorithm's own bookkeeping. It is never
  caught inside the engine and callers should treat it as an assertion failure.

The remaining exceptions cover misuse of the concrete graph types and invalid
configuration.
"""

from typing import Any, List, Sequence

DEFAULT_MAX_REPORTED_NODES = 10


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is the base for errors raised while operating on a graph
    structure, either by an analysis algorithm or by a concrete graph type.

    Examples:
        * Cyclic input to a topological sort
        * Broken algorithm invariants
        * Invalid edge insertions
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class CyclicOrderingError(GraphOperationError):
    """
    Reported when a directed graph has no topological ordering.

    Each entry of ``components`` is one cyclic strongly connected component with
    its members sorted by node id. Components are listed in the order of their
    placeholders in the attempted sort.

    The message lists the components literally while the total number of nodes
    is at most ``max_nodes`` and falls back to a count-only summary above that,
    so pathological graphs cannot produce unbounded messages.
    """

    def __init__(
        self,
        components: Sequence[Sequence[Any]],
        max_nodes: int = DEFAULT_MAX_REPORTED_NODES,
    ):
        self.components: List[List[Any]] = [list(c) for c in components]
        self.max_nodes = max_nodes
        super().__init__(self._summary())

    @property
    def node_count(self) -> int:
        """Total number of nodes across all cyclic components."""
        return sum(len(c) for c in self.components)

    def _summary(self) -> str:
        n = self.node_count
        if n > self.max_nodes:
            return (
                f"no topological ordering: {n} nodes in "
                f"{len(self.components)} cyclic components"
            )
        listed = [[getattr(node, "id", node) for node in c] for c in self.components]
        return f"no topological ordering: cyclic components: {listed}"

    def __str__(self) -> str:
        return self._summary()


class InvariantViolation(GraphOperationError):
    """
    Raised when an internal algorithm precondition does not hold.

    This indicates a defect in the algorithm rather than bad input, for example
    choosing a Bron-Kerbosch pivot from an empty candidate set. The operation is
    aborted and no partial result is returned.
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node lookup by non-existent ID
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found in a concrete graph.
    """


class NodeIDCollisionError(GraphOperationError):
    """
    Raised when a node is added with an id that is already in use.
    """


class SelfEdgeError(GraphOperationError):
    """
    Raised when a self edge is added to an undirected graph.
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown pivot strategy names
        * Negative reporting limits
        * Unexpected configuration keys
    """


class MemoryLimitExceeded(MemoryError):
    """
    Raised when an algorithm crosses its configured memory ceiling.
    """
