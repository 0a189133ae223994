"""Structural analysis algorithms."""

from ..enums import PivotStrategy
from .cliques import CliqueFinder
from .components import ComponentAnalysis
from .degeneracy import DegeneracyOrdering
from .dominators import DominatorAnalysis
from .ordering import TopologicalSorter

__all__ = [
    "CliqueFinder",
    "ComponentAnalysis",
    "DegeneracyOrdering",
    "DominatorAnalysis",
    "PivotStrategy",
    "TopologicalSorter",
]
