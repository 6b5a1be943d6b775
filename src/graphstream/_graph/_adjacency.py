"""Adjacency list graphs.

An adjacency graph is a two-dimensional structure: a dict mapping every
vertex to the collection of its adjacent vertices. The collection type is a
``set`` by default, which gives simple-graph semantics (no parallel edges).
Any other container factory can be passed instead, e.g. ``list`` for a
multigraph that keeps insertion order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Hashable, Iterable, MutableSet
from typing import TYPE_CHECKING, Any

from graphstream._errors import NoVertexError

from ._mutable import MutableGraph

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from ._base import Graph

logger = logging.getLogger(__name__)

type EdgelistClass = Callable[..., Collection[Any]]


def _insert(adjacency: Any, v: object) -> None:
    if isinstance(adjacency, MutableSet):
        adjacency.add(v)
    else:
        adjacency.append(v)


def _delete(adjacency: Any, v: object) -> None:
    # Removes every occurrence for list-like containers.
    if isinstance(adjacency, MutableSet):
        adjacency.discard(v)
    else:
        adjacency[:] = [u for u in adjacency if u != v]


class DirectedAdjacencyGraph[T: Hashable](MutableGraph[T]):
    """A directed graph stored as adjacency lists.

    Vertices are enumerated in insertion order.

    Example:
        >>> g = DirectedAdjacencyGraph.from_pairs(1, 2, 2, 3, 2, 4, 4, 5)
        >>> str(g)
        '(1-2)(2-3)(2-4)(4-5)'

    """

    def __init__(self, edgelist_class: EdgelistClass = set, *other_graphs: Graph[T]) -> None:
        """Create an empty graph, then add the vertices and edges of ``other_graphs``.

        Args:
            edgelist_class: Factory for the adjacency collection of each vertex.
                Called with no argument for an empty collection and with an
                iterable to convert an existing one.
            other_graphs: Graphs whose vertices and edges are copied into the new graph.

        """
        self._edgelist_class = edgelist_class
        self._vertices_dict: dict[T, Any] = {}
        for graph in other_graphs:
            for v in graph.each_vertex():
                self.add_vertex(v)
            for u, v in graph.each_edge():
                self.add_edge(u, v)

    @classmethod
    def from_edges(cls, edges: Iterable[Sequence[T]], edgelist_class: EdgelistClass = set) -> DirectedAdjacencyGraph[T]:
        """Build a graph from ``(source, target)`` pairs or edge objects.

        Example:
            >>> DirectedAdjacencyGraph.from_edges([("a", "b"), ("b", "c")]).vertices()
            ['a', 'b', 'c']

        """
        graph = cls(edgelist_class)
        for edge in edges:
            graph.add_edge(edge[0], edge[1])
        return graph

    @classmethod
    def from_pairs(cls, *vertices: T) -> DirectedAdjacencyGraph[T]:
        """Build a graph from a flat argument list where each two consecutive vertices form an edge.

        Raises:
            ValueError: If an odd number of vertices is given.

        """
        if len(vertices) % 2:
            msg = f"Expected an even number of vertices, got {len(vertices)}"
            raise ValueError(msg)
        return cls.from_edges(zip(vertices[::2], vertices[1::2], strict=True))

    def each_vertex(self) -> Iterator[T]:
        return iter(self._vertices_dict)

    def each_adjacent(self, v: T) -> Iterator[T]:
        try:
            adjacency = self._vertices_dict[v]
        except KeyError:
            raise NoVertexError(v) from None
        return iter(adjacency)

    @property
    def directed(self) -> bool:
        return True

    def has_vertex(self, v: T) -> bool:
        """O(1): vertices are the keys of a dict."""
        return v in self._vertices_dict

    def has_edge(self, u: T, v: T) -> bool:
        """O(1) with ``set`` adjacency collections, O(out_degree(u)) otherwise."""
        return u in self._vertices_dict and v in self._vertices_dict[u]

    @property
    def num_vertices(self) -> int:
        return len(self._vertices_dict)

    def add_vertex(self, v: T) -> None:
        if v not in self._vertices_dict:
            self._vertices_dict[v] = self._edgelist_class()

    def add_edge(self, u: T, v: T) -> None:
        self.add_vertex(u)
        self.add_vertex(v)
        self._basic_add_edge(u, v)

    def remove_vertex(self, v: T) -> None:
        if v not in self._vertices_dict:
            raise NoVertexError(v)
        del self._vertices_dict[v]
        for adjacency in self._vertices_dict.values():
            _delete(adjacency, v)

    def remove_edge(self, u: T, v: T) -> None:
        if u in self._vertices_dict:
            _delete(self._vertices_dict[u], v)

    def set_edgelist_class(self, edgelist_class: EdgelistClass) -> None:
        """Convert the adjacency collection of every vertex to ``edgelist_class``."""
        self._edgelist_class = edgelist_class
        for v, adjacency in self._vertices_dict.items():
            self._vertices_dict[v] = edgelist_class(adjacency)
        logger.debug("Converted adjacency collections of %d vertices", len(self._vertices_dict))

    def copy(self) -> DirectedAdjacencyGraph[T]:
        """Return a copy whose adjacency collections are independent of this graph."""
        result = type(self)(self._edgelist_class)
        result._vertices_dict = {v: self._edgelist_class(adjacency) for v, adjacency in self._vertices_dict.items()}  # noqa: SLF001
        return result

    def __copy__(self) -> DirectedAdjacencyGraph[T]:
        return self.copy()

    def _basic_add_edge(self, u: T, v: T) -> None:
        _insert(self._vertices_dict[u], v)


class AdjacencyGraph[T: Hashable](DirectedAdjacencyGraph[T]):
    """An undirected graph stored as adjacency lists.

    Adding or removing ``(u, v)`` also adds or removes ``(v, u)``.
    """

    @property
    def directed(self) -> bool:
        return False

    def remove_edge(self, u: T, v: T) -> None:
        super().remove_edge(u, v)
        if v in self._vertices_dict:
            _delete(self._vertices_dict[v], u)

    def _basic_add_edge(self, u: T, v: T) -> None:
        super()._basic_add_edge(u, v)
        _insert(self._vertices_dict[v], u)
