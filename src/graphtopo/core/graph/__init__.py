"""Concrete graph implementations."""

from .directed import DirectedGraph
from .undirected import UndirectedGraph
from .utils import copy_directed, copy_undirected

__all__ = [
    "DirectedGraph",
    "UndirectedGraph",
    "copy_directed",
    "copy_undirected",
]
