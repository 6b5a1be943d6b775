"""The read side of the graph concept.

A concrete graph class only has to supply two iterators:

- ``each_vertex()`` defines the set of vertices,
- ``each_adjacent(v)`` defines the out-neighbors of ``v``.

Everything else (edges, degrees, counts, equality, conversions) is derived
from these two and must not be overridden except for efficiency.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphstream._edge import DirectedEdge, UndirectedEdge
from graphstream._errors import NoEdgeError, NotUndirectedError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._adjacency import AdjacencyGraph, DirectedAdjacencyGraph
    from ._topsort import TopsortIterator

logger = logging.getLogger(__name__)


class Graph[T: Hashable]:
    """Abstract graph over vertices of type T.

    A graph is an iterable of its vertices.
    """

    def each_vertex(self) -> Iterator[T]:
        """Iterate over all vertices of the graph."""
        raise NotImplementedError

    def each_adjacent(self, v: T) -> Iterator[T]:
        """Iterate over the out-neighbors of ``v``.

        Raises:
            NoVertexError: If ``v`` is not a vertex of the graph.

        """
        raise NotImplementedError

    def each_edge(self) -> Iterator[tuple[T, T]]:
        """Iterate over all edges as ``(u, v)`` pairs.

        Each edge is yielded once. For undirected graphs this keeps a set of
        visited edges so that ``(v, u)`` is skipped after ``(u, v)``.
        """
        if self.directed:
            for u in self.each_vertex():
                for v in self.each_adjacent(u):
                    yield u, v
        else:
            yield from self._each_undirected_edge()

    def _each_undirected_edge(self) -> Iterator[tuple[T, T]]:
        visited: set[UndirectedEdge[T]] = set()
        for u in self.each_vertex():
            for v in self.each_adjacent(u):
                edge = UndirectedEdge(u, v)
                if edge not in visited:
                    visited.add(edge)
                    yield u, v

    @property
    def directed(self) -> bool:
        """Whether the graph is directed. False unless a subclass says otherwise."""
        return False

    def has_vertex(self, v: T) -> bool:
        """Check if ``v`` is a vertex. O(num_vertices) unless overridden."""
        return any(u == v for u in self.each_vertex())

    def has_edge(self, u: T, v: T) -> bool:
        """Check if ``(u, v)`` is an edge. O(out_degree(u)) unless overridden."""
        return self.has_vertex(u) and any(w == v for w in self.each_adjacent(u))

    def is_empty(self) -> bool:
        """Check if the graph has no vertices."""
        return self.num_vertices == 0

    def vertices(self) -> list[T]:
        """Return all vertices as a list."""
        return list(self.each_vertex())

    @property
    def edge_class(self) -> type[DirectedEdge]:
        """The edge class matching ``directed``."""
        return DirectedEdge if self.directed else UndirectedEdge

    def edges(self) -> list[DirectedEdge[T]]:
        """Return all edges as edge objects of ``edge_class``."""
        edge_class = self.edge_class
        return [edge_class(u, v) for u, v in self.each_edge()]

    def edge(self, u: T, v: T) -> DirectedEdge[T]:
        """Return the edge object for ``(u, v)``.

        Raises:
            NoEdgeError: If ``(u, v)`` is not an edge of the graph.

        """
        if not self.has_edge(u, v):
            raise NoEdgeError(u, v)
        return self.edge_class(u, v)

    def adjacent_vertices(self, v: T) -> list[T]:
        """Return the out-neighbors of ``v`` as a list."""
        return list(self.each_adjacent(v))

    def out_degree(self, v: T) -> int:
        """Number of out-edges (directed) or incident edges (undirected) of ``v``."""
        return sum(1 for _ in self.each_adjacent(v))

    @property
    def num_vertices(self) -> int:
        """Number of vertices."""
        return sum(1 for _ in self.each_vertex())

    @property
    def num_edges(self) -> int:
        """Number of edges, each undirected edge counted once."""
        return sum(1 for _ in self.each_edge())

    def connected_components(self) -> list[list[T]]:
        """Return the connected components of an undirected graph.

        Components are listed in the order their first vertex is enumerated.

        Raises:
            NotUndirectedError: If the graph is directed.

        """
        if self.directed:
            msg = "connected_components is only defined for undirected graphs"
            raise NotUndirectedError(msg)

        visited: set[T] = set()
        components: list[list[T]] = []
        for root in self.each_vertex():
            if root in visited:
                continue
            visited.add(root)
            component = [root]
            stack = [root]
            while stack:
                current = stack.pop()
                for v in self.each_adjacent(current):
                    if v not in visited:
                        visited.add(v)
                        component.append(v)
                        stack.append(v)
            components.append(component)
        return components

    def to_adjacency(self) -> DirectedAdjacencyGraph[T]:
        """Materialize the graph as a DirectedAdjacencyGraph or an AdjacencyGraph."""
        from ._adjacency import AdjacencyGraph, DirectedAdjacencyGraph  # noqa: PLC0415

        result: DirectedAdjacencyGraph[T] = DirectedAdjacencyGraph() if self.directed else AdjacencyGraph()
        for v in self.each_vertex():
            result.add_vertex(v)
        for u, v in self.each_edge():
            result.add_edge(u, v)
        logger.debug("Converted %s to %s", type(self).__name__, type(result).__name__)
        return result

    def reverse(self) -> Graph[T]:
        """Return a new directed graph with every edge flipped.

        An undirected graph is returned as is.
        """
        if not self.directed:
            return self
        from ._adjacency import DirectedAdjacencyGraph  # noqa: PLC0415

        result: DirectedAdjacencyGraph[T] = DirectedAdjacencyGraph()
        for v in self.each_vertex():
            result.add_vertex(v)
        for u, v in self.each_edge():
            result.add_edge(v, u)
        return result

    def to_undirected(self) -> Graph[T]:
        """Return an undirected copy of the graph.

        An undirected graph is returned as is.
        """
        if not self.directed:
            return self
        from ._adjacency import AdjacencyGraph  # noqa: PLC0415

        result: AdjacencyGraph[T] = AdjacencyGraph(set, self)
        return result

    def topsort_iterator(self) -> TopsortIterator[T]:
        """Return a topological sort iterator over the graph."""
        from ._topsort import TopsortIterator  # noqa: PLC0415

        return TopsortIterator(self)

    def is_acyclic(self) -> bool:
        """Check if the graph contains no cycle.

        Only meaningful for directed graphs: an undirected graph with at least
        one edge is never acyclic in this sense.
        """
        return self.topsort_iterator().length() == self.num_vertices

    def __iter__(self) -> Iterator[T]:
        return self.each_vertex()

    def __len__(self) -> int:
        return self.num_vertices

    def __contains__(self, v: object) -> bool:
        return self.has_vertex(v)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        """Two graphs are equal iff they agree on ``directed``, vertices and edges."""
        if self is other:
            return True
        if not isinstance(other, Graph):
            return NotImplemented
        return self.directed == other.directed and self._eql_vertices(other) and self._eql_edges(other)

    __hash__ = None  # type: ignore[assignment]

    def _eql_vertices(self, other: Graph[T]) -> bool:
        count = 0
        for v in other.each_vertex():
            if not self.has_vertex(v):
                return False
            count += 1
        return count == self.num_vertices

    def _eql_edges(self, other: Graph[T]) -> bool:
        count = 0
        for u, v in other.each_edge():
            if not self.has_edge(u, v):
                return False
            count += 1
        return count == self.num_edges

    def __str__(self) -> str:
        return "".join(sorted(str(edge) for edge in self.edges()))
