"""Directed and undirected edges.

Vertices need no class of their own: any hashable value can be a vertex.
Most graph operations take two vertex arguments instead of an edge, edge
objects are only built when a caller asks for them (see ``Graph.edges``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True, eq=False)
class DirectedEdge[T]:
    """A directed pair ``(source -> target)``.

    Two directed edges ``(u, v)`` and ``(x, y)`` are equal iff ``u == x`` and ``v == y``.

    Example:
        >>> str(DirectedEdge(1, 2))
        '(1-2)'
        >>> DirectedEdge(1, 2)[1]
        2

    """

    source: T
    target: T

    @classmethod
    def of(cls, pair: tuple[T, T] | list[T]) -> DirectedEdge[T]:
        """Create an edge from a two element sequence."""
        return cls(pair[0], pair[1])

    def reverse(self) -> DirectedEdge[T]:
        """Return ``(v, u)`` for the edge ``(u, v)``, keeping the edge class."""
        return type(self)(self.target, self.source)

    def to_tuple(self) -> tuple[T, T]:
        """Return ``(source, target)``."""
        return (self.source, self.target)

    def __getitem__(self, index: int) -> T:
        # edge[0] is the source, every other index is the target
        return self.source if index == 0 else self.target

    def __iter__(self) -> Iterator[T]:
        yield self.source
        yield self.target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return self.source == other.source and self.target == other.target

    def __hash__(self) -> int:
        # Commutative so that equal undirected edges share a bucket.
        return hash(frozenset((self.source, self.target)))

    def __lt__(self, other: DirectedEdge[Any]) -> bool:
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return self.to_tuple() < other.to_tuple()

    def __le__(self, other: DirectedEdge[Any]) -> bool:
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return self.to_tuple() <= other.to_tuple()

    def __gt__(self, other: DirectedEdge[Any]) -> bool:
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return self.to_tuple() > other.to_tuple()

    def __ge__(self, other: DirectedEdge[Any]) -> bool:
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return self.to_tuple() >= other.to_tuple()

    def __str__(self) -> str:
        return f"({self.source}-{self.target})"

    def __repr__(self) -> str:
        return str(self)


@dataclass(frozen=True, slots=True, eq=False)
class UndirectedEdge[T](DirectedEdge[T]):
    """An undirected pair used by undirected graphs.

    Example:
        >>> UndirectedEdge(1, 2) == UndirectedEdge(2, 1)
        True
        >>> str(UndirectedEdge(1, 2))
        '(1=2)'

    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return (self.source == other.source and self.target == other.target) or (
            self.source == other.target and self.target == other.source
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.source, self.target)))

    def __str__(self) -> str:
        return f"({self.source}={self.target})"

    def __repr__(self) -> str:
        return str(self)
