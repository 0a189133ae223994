"""Shortest path finding."""

from .dijkstra import DijkstraFinder, NegativeWeightError
from .models import ShortestPaths

__all__ = ["DijkstraFinder", "NegativeWeightError", "ShortestPaths"]
