"""Enumerations shared by the analysis algorithms."""

from enum import Enum


class PivotStrategy(Enum):
    """
    Pivot selection strategies for Bron-Kerbosch clique enumeration.

    TRIVIAL picks any candidate, which is cheap per step but prunes little.
    TOMITA_TANAKA_TAKAHASHI picks the node of P ∪ X with the most neighbours in
    P, which minimises branching at the cost of a scan over P ∪ X per step.
    """

    TRIVIAL = "trivial"
    TOMITA_TANAKA_TAKAHASHI = "tomita_tanaka_takahashi"
