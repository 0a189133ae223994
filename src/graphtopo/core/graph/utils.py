"""Copying between graph implementations."""

import logging
from typing import Any

from ..models import Edge
from ..types import Graph, Mutable, weight_func_for

logger = logging.getLogger(__name__)


def _copy_into(dst: Mutable, src: Graph) -> None:
    weight = weight_func_for(src)
    nodes = list(src.get_nodes())
    for n in nodes:
        dst.add_node(n)
    for u in nodes:
        for v in src.get_neighbors(u):
            edge = src.get_edge(u, v)
            cost = weight(edge)
            if edge.from_node.id != u.id:
                # undirected sources may hand back the edge as stored from v
                edge = Edge(from_node=u, to_node=v)
            dst.set_edge(edge, cost)
    logger.debug("Copied %s nodes into %s", len(nodes), type(dst).__name__)


def copy_undirected(dst: Any, src: Graph) -> None:
    """
    Copy nodes and edges of ``src`` into the undirected graph ``dst``.

    The destination is not cleared first, and a node id present in both graphs
    raises ``NodeIDCollisionError``. If ``src`` does not report weights, every
    edge is copied with a cost of 1.

    If ``src`` is directed and holds edges in both directions between two
    nodes with different weights, the resulting weight is undefined.
    """
    _copy_into(dst, src)


def copy_directed(dst: Any, src: Graph) -> None:
    """
    Copy nodes and edges of ``src`` into the directed graph ``dst``.

    The destination is not cleared first, and a node id present in both graphs
    raises ``NodeIDCollisionError``. An undirected source yields both
    directions of every edge in the destination.
    """
    _copy_into(dst, src)
