"""The write side of the graph concept."""

from __future__ import annotations

import copy
import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphstream._errors import NoVertexError

from ._base import Graph

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class MutableGraph[T: Hashable](Graph[T]):
    """A graph that can be changed by adding or removing vertices and edges.

    Concrete classes supply ``add_vertex``, ``add_edge``, ``remove_vertex`` and
    ``remove_edge`` on top of the two ``Graph`` iterators.
    """

    def add_vertex(self, v: T) -> None:
        """Add ``v`` to the vertex set. Does nothing if ``v`` is already a vertex."""
        raise NotImplementedError

    def add_edge(self, u: T, v: T) -> None:
        """Insert the edge ``(u, v)``, adding both endpoints if needed.

        For undirected graphs ``(u, v)`` is the same edge as ``(v, u)``: after
        the call ``v`` is adjacent to ``u`` and ``u`` is adjacent to ``v``.
        """
        raise NotImplementedError

    def remove_vertex(self, v: T) -> None:
        """Remove ``v`` and every edge with ``v`` as source or target.

        Raises:
            NoVertexError: If ``v`` is not a vertex of the graph.

        """
        raise NotImplementedError

    def remove_edge(self, u: T, v: T) -> None:
        """Remove the edge ``(u, v)``, all occurrences of it if parallel edges are allowed."""
        raise NotImplementedError

    def add_vertices(self, *vertices: T) -> None:
        """Add all given vertices."""
        for v in vertices:
            self.add_vertex(v)

    def add_edges(self, *edges: Sequence[T]) -> None:
        """Add all given edges.

        Each edge can be a two element tuple or list, or an edge object.
        """
        for edge in edges:
            self.add_edge(edge[0], edge[1])

    def remove_vertices(self, *vertices: T) -> None:
        """Remove all given vertices.

        Raises:
            NoVertexError: If any of ``vertices`` is not a vertex. Nothing is removed then.

        """
        for v in vertices:
            if not self.has_vertex(v):
                raise NoVertexError(v)
        for v in dict.fromkeys(vertices):
            self.remove_vertex(v)

    def cycles_with_vertex(self, vertex: T) -> list[list[T]]:
        """Return all simple cycles that pass through ``vertex``.

        Each cycle is the list of vertices visited after leaving ``vertex``,
        ending with ``vertex`` itself.

        Example:
            >>> g = DirectedAdjacencyGraph.from_pairs(1, 2, 2, 1)
            >>> g.cycles_with_vertex(1)
            [[2, 1]]

        """
        return self._cycles_with_vertex(vertex, vertex, [])

    def _cycles_with_vertex(self, vertex: T, start: T, visited: list[T]) -> list[list[T]]:
        cycles: list[list[T]] = []
        for adjacent in self.adjacent_vertices(start):
            if adjacent in visited:
                continue
            local_visited = [*visited, adjacent]
            if adjacent == vertex:
                cycles.append(local_visited)
            cycles.extend(self._cycles_with_vertex(vertex, adjacent, local_visited))
        return cycles

    def cycles(self) -> list[list[T]]:
        """Return all minimal cycles of the graph.

        Every vertex is processed in enumeration order against a working copy
        of the graph and then deleted from that copy, so a cycle is reported
        only once. This brute force approach is O(num_vertices^4): do not use it
        on large or dense graphs.
        """
        working = copy.deepcopy(self)
        cycles: list[list[T]] = []
        for v in self.each_vertex():
            cycles.extend(working.cycles_with_vertex(v))
            working.remove_vertex(v)
        logger.debug("Found %d cycles in %d vertices", len(cycles), self.num_vertices)
        return cycles
