"""Maximal clique enumeration for undirected graphs.

This module implements the Bron-Kerbosch algorithm with pivoting, using the
degeneracy ordering of the graph as the outer iteration order. Each recursive
step holds three disjoint node sets:

- R: the clique built so far
- P: candidates that may still extend R
- X: nodes already excluded because every clique they extend was produced by
     an earlier branch

When P and X are both empty, R is maximal and is emitted. Otherwise a pivot u
is chosen from P ∪ X and only the members of P that are not adjacent to u are
branched on. The recursion is driven by an explicit stack of frames.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from ..config import TopologyConfig
from ..enums import PivotStrategy
from ..exceptions import InvariantViolation
from ..node_set import NodeSet
from ..types import Undirected
from ..utils import MemoryManager
from .degeneracy import DegeneracyOrdering

logger = logging.getLogger(__name__)


class _Frame:
    """One pending Bron-Kerbosch call."""

    __slots__ = ("r", "p", "x", "candidates")

    def __init__(self, r: List[Any], p: NodeSet, x: NodeSet, candidates: Iterator[Any]):
        self.r = r
        self.p = p
        self.x = x
        self.candidates = candidates


class CliqueFinder:
    """
    Enumerates every maximal clique of an undirected graph exactly once.

    Attributes:
        pivot_strategy (PivotStrategy): How the pivot is chosen at each step
        max_memory_mb (Optional[float]): Memory ceiling for a single enumeration

    Example:
        >>> finder = CliqueFinder(pivot_strategy=PivotStrategy.TRIVIAL)
        >>> cliques = finder.find_maximal_cliques(graph)
    """

    def __init__(
        self,
        pivot_strategy: PivotStrategy = PivotStrategy.TOMITA_TANAKA_TAKAHASHI,
        max_memory_mb: Optional[float] = None,
    ):
        self.pivot_strategy = pivot_strategy
        self.max_memory_mb = max_memory_mb

    @classmethod
    def from_config(cls, config: TopologyConfig) -> "CliqueFinder":
        return cls(pivot_strategy=config.pivot_strategy, max_memory_mb=config.max_memory_mb)

    def find_maximal_cliques(self, graph: Undirected) -> List[List[Any]]:
        """
        Find all maximal cliques of the graph.

        Args:
            graph (Undirected): The graph instance to analyze.

        Returns:
            List[List[Any]]: One list of nodes per maximal clique, in no
            particular order. Isolated nodes form single-node cliques.

        Raises:
            InvariantViolation: If a pivot is requested from an empty P ∪ X
            MemoryLimitExceeded: If ``max_memory_mb`` is set and exceeded
        """
        memory = MemoryManager(self.max_memory_mb)
        neighbours: Dict[int, NodeSet] = {}

        def neighbour_set(v: Any) -> NodeSet:
            nv = neighbours.get(v.id)
            if nv is None:
                nv = NodeSet(w for w in graph.get_neighbors(v) if w.id != v.id)
                neighbours[v.id] = nv
            return nv

        cliques: List[List[Any]] = []
        order, _ = DegeneracyOrdering.vertex_ordering(graph)
        p = NodeSet(order)
        x = NodeSet()
        for v in order:
            nv = neighbour_set(v)
            self._enumerate(
                [v],
                NodeSet().intersect(p, nv),
                NodeSet().intersect(x, nv),
                neighbour_set,
                cliques,
                memory,
            )
            p.remove(v)
            x.add(v)

        logger.debug(
            "Found %s maximal cliques using %s pivoting",
            len(cliques),
            self.pivot_strategy.value,
        )
        return cliques

    def _enumerate(
        self,
        r: List[Any],
        p: NodeSet,
        x: NodeSet,
        neighbour_set,
        cliques: List[List[Any]],
        memory: MemoryManager,
    ) -> None:
        stack: List[_Frame] = []
        self._push(stack, r, p, x, neighbour_set, cliques)

        while stack:
            memory.check_memory()
            frame = stack[-1]
            v = next(frame.candidates, None)
            if v is None:
                stack.pop()
                continue

            nv = neighbour_set(v)
            child_p = NodeSet().intersect(frame.p, nv)
            child_x = NodeSet().intersect(frame.x, nv)
            # The child holds its own copies, so v can move from P to X now
            frame.p.remove(v)
            frame.x.add(v)
            self._push(stack, frame.r + [v], child_p, child_x, neighbour_set, cliques)

    def _push(
        self,
        stack: List[_Frame],
        r: List[Any],
        p: NodeSet,
        x: NodeSet,
        neighbour_set,
        cliques: List[List[Any]],
    ) -> None:
        if not p and not x:
            cliques.append(r)
            return

        nu = self._choose_pivot(p, x, neighbour_set)
        candidates = [v for v in p if not nu.has(v)]
        stack.append(_Frame(r, p, x, iter(candidates)))

    def _choose_pivot(self, p: NodeSet, x: NodeSet, neighbour_set) -> NodeSet:
        """Return the neighbour set of the chosen pivot."""
        if self.pivot_strategy is PivotStrategy.TRIVIAL:
            pivot = p.first()
            if pivot is None:
                pivot = x.first()
            if pivot is None:
                raise InvariantViolation("pivot requested from an empty candidate set")
            return neighbour_set(pivot)

        best = -1
        best_neighbours: Optional[NodeSet] = None
        for s in (p, x):
            for u in s:
                nu = neighbour_set(u)
                if len(nu) <= best:
                    continue
                c = len(NodeSet().intersect(p, nu))
                if c > best:
                    best = c
                    best_neighbours = nu
        if best_neighbours is None:
            raise InvariantViolation("pivot requested from an empty candidate set")
        return best_neighbours
