"""
graphtopo - Graph Topology and Structural Analysis

This package computes global structural properties of abstract directed and
undirected graphs. It includes:

- Strongly connected components and topological ordering
- Degeneracy (k-core) ordering
- Maximal clique enumeration
- Dominator and post-dominator sets
- Concrete directed and undirected graph implementations

Algorithms only rely on node identity and the graph protocols defined in
``graphtopo.core.types``, so any caller-owned graph structure can be analysed.
"""

__version__ = "0.1.0"
__author__ = "graphtopo Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("graphtopo requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import DirectedGraph, UndirectedGraph
from .core.graph_operations import (
    CliqueFinder,
    ComponentAnalysis,
    DegeneracyOrdering,
    DominatorAnalysis,
    PivotStrategy,
    TopologicalSorter,
)
from .core.models import Edge, SimpleNode

__all__ = [
    "CliqueFinder",
    "ComponentAnalysis",
    "DegeneracyOrdering",
    "DirectedGraph",
    "DominatorAnalysis",
    "Edge",
    "PivotStrategy",
    "SimpleNode",
    "TopologicalSorter",
    "UndirectedGraph",
]
