"""Shared helpers for the concrete graph implementations."""

from dataclasses import dataclass


@dataclass
class IDAllocator:
    """
    Hands out node ids above the highest id seen so far.

    Removing a node does not lower ``max_id``, so an id handed out once is never
    handed out again by the same graph.

    Attributes:
        max_id (int): Highest id seen so far
    """

    max_id: int = 0

    def new_id(self) -> int:
        """Return an id greater than every id seen so far."""
        return self.max_id + 1

    def used(self, node_id: int) -> None:
        if node_id > self.max_id:
            self.max_id = node_id
