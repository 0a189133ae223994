"""
Identity-keyed node sets.

A ``NodeSet`` maps node ids to the node values themselves, so set algebra over
ids still returns the caller's node objects. The in-place operations store their
result in the receiver and must stay correct when the receiver shares its
backing store with one or both operands, e.g. ``p.intersect(p, neighbours)`` or
``s.union(s, s)``. ``same`` compares backing stores by identity, never by
content, and every operation checks it before mutating.
"""

from typing import Any, Dict, Iterable, Iterator, Optional


class NodeSet:
    """A set of nodes keyed by their integer ids."""

    __slots__ = ("_store",)

    def __init__(self, nodes: Optional[Iterable[Any]] = None):
        self._store: Dict[int, Any] = {}
        if nodes is not None:
            for n in nodes:
                self._store[n.id] = n

    def add(self, node: Any) -> None:
        """Insert a node, replacing any node with the same id."""
        self._store[node.id] = node

    def remove(self, node: Any) -> None:
        """Delete a node; no-op if absent."""
        self._store.pop(node.id, None)

    def has(self, node: Any) -> bool:
        """Report whether a node with the same id is in the set."""
        return node.id in self._store

    def __contains__(self, node: Any) -> bool:
        return self.has(node)

    def __len__(self) -> int:
        return len(self._store)

    def __bool__(self) -> bool:
        return bool(self._store)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._store.values()))

    def __repr__(self) -> str:
        return f"NodeSet({sorted(self._store)})"

    def ids(self) -> Iterator[int]:
        """Iterate over the ids held in the set."""
        return iter(list(self._store))

    def first(self) -> Optional[Any]:
        """Return an arbitrary node from the set, or None when empty."""
        for n in self._store.values():
            return n
        return None

    def clear(self) -> "NodeSet":
        """Empty the set in place, keeping its backing store, and return it."""
        if self._store:
            self._store.clear()
        return self

    def copy_from(self, src: "NodeSet") -> "NodeSet":
        """Make this set equal to ``src`` and return it."""
        if same(self, src):
            return self
        self._store.clear()
        self._store.update(src._store)
        return self

    def copy(self) -> "NodeSet":
        """Return a new set with its own backing store."""
        return NodeSet().copy_from(self)

    def union(self, s1: "NodeSet", s2: "NodeSet") -> "NodeSet":
        """
        Store the union of ``s1`` and ``s2`` in this set and return it.

        {a,b,c} UNION {b,c,d} = {a,b,c,d}
        """
        if same(s1, s2):
            return self.copy_from(s1)

        if not same(s1, self) and not same(s2, self):
            self.clear()

        if not same(self, s1):
            self._store.update(s1._store)
        if not same(self, s2):
            self._store.update(s2._store)
        return self

    def intersect(self, s1: "NodeSet", s2: "NodeSet") -> "NodeSet":
        """
        Store the intersection of ``s1`` and ``s2`` in this set and return it.

        {a,b,c} INTERSECT {b,c,d} = {b,c}

        The intersection of a set with itself is a copy of that set.
        """
        if same(s1, s2):
            return self.copy_from(s1)

        if same(s1, self):
            other = s2
        elif same(s2, self):
            other = s1
        else:
            self.clear()
            if len(s1) > len(s2):
                s1, s2 = s2, s1
            for e, n in s1._store.items():
                if e in s2._store:
                    self._store[e] = n
            return self

        for e in [e for e in self._store if e not in other._store]:
            del self._store[e]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeSet):
            return NotImplemented
        return equal(self, other)

    __hash__ = None  # type: ignore[assignment]


def same(s1: NodeSet, s2: NodeSet) -> bool:
    """Report whether two sets share the same backing store."""
    return s1._store is s2._store


def equal(s1: NodeSet, s2: NodeSet) -> bool:
    """Report whether two sets hold the same node ids."""
    if same(s1, s2):
        return True
    if len(s1) != len(s2):
        return False
    return all(e in s2._store for e in s1._store)
