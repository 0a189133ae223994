"""Core graph functionality."""

from .config import TopologyConfig
from .enums import PivotStrategy
from .exceptions import (
    ConfigurationError,
    CyclicOrderingError,
    GraphOperationError,
    InvariantViolation,
    MemoryLimitExceeded,
    NodeIDCollisionError,
    NodeNotFoundError,
    SelfEdgeError,
)
from .models import Edge, Node, SimpleNode, WeightedEdge
from .node_set import NodeSet, equal, same
from .types import Directed, Graph, Mutable, Undirected, Weighter, uniform_cost, weight_func_for
from .graph import DirectedGraph, UndirectedGraph, copy_directed, copy_undirected
from .graph_operations.cliques import CliqueFinder
from .graph_operations.components import ComponentAnalysis
from .graph_operations.degeneracy import DegeneracyOrdering
from .graph_operations.dominators import DominatorAnalysis
from .graph_operations.ordering import TopologicalSorter
from .graph_paths import DijkstraFinder, NegativeWeightError, ShortestPaths

__all__ = [
    "CliqueFinder",
    "ComponentAnalysis",
    "ConfigurationError",
    "CyclicOrderingError",
    "DegeneracyOrdering",
    "DijkstraFinder",
    "DominatorAnalysis",
    "Directed",
    "DirectedGraph",
    "Edge",
    "Graph",
    "GraphOperationError",
    "InvariantViolation",
    "MemoryLimitExceeded",
    "Mutable",
    "NegativeWeightError",
    "Node",
    "NodeIDCollisionError",
    "NodeNotFoundError",
    "NodeSet",
    "PivotStrategy",
    "SelfEdgeError",
    "ShortestPaths",
    "SimpleNode",
    "TopologicalSorter",
    "TopologyConfig",
    "Undirected",
    "UndirectedGraph",
    "Weighter",
    "WeightedEdge",
    "copy_directed",
    "copy_undirected",
    "equal",
    "same",
    "uniform_cost",
    "weight_func_for",
]
