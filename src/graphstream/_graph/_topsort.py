"""Topological sort of directed graphs."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphstream._errors import CycleError, NotDirectedError

from ._iterator import GraphIterator

if TYPE_CHECKING:
    from ._base import Graph

logger = logging.getLogger(__name__)


class TopsortIterator[T: Hashable](GraphIterator[T]):
    """Iterate over the vertices of a graph in topological order (Kahn's algorithm).

    If ``(u, v)`` is an edge, ``u`` comes before ``v``. Among vertices that
    become ready at the same time the order is unspecified.

    The iterator also works on graphs with a cycle, or on undirected graphs:
    it then stops early, since vertices on a cycle (or only reachable
    through one) never reach in-degree zero. ``Graph.is_acyclic`` relies on
    this.

    The iterator only moves forward: ``at_beginning()`` is always true.
    """

    def __init__(self, graph: Graph[T]) -> None:
        super().__init__(graph)
        self._waiting: list[T] = []
        self._in_degrees: defaultdict[T, int] = defaultdict(int)
        self.set_to_begin()

    def set_to_begin(self) -> None:
        """Compute the in-degree of every vertex and collect the ready ones. O(V + E)."""
        in_degrees: defaultdict[T, int] = defaultdict(int)
        for u in self.graph.each_vertex():
            if u not in in_degrees:
                in_degrees[u] = 0
            for v in self.graph.each_adjacent(u):
                in_degrees[v] += 1

        self._in_degrees = in_degrees
        # LIFO work-list of vertices with in-degree 0
        self._waiting = [v for v, degree in in_degrees.items() if degree == 0]
        logger.debug("Topological sort of %d vertices starts with %d ready", len(in_degrees), len(self._waiting))

    def basic_forward(self) -> T:
        u = self._waiting.pop()
        for v in self.graph.each_adjacent(u):
            self._in_degrees[v] -= 1
            if self._in_degrees[v] == 0:
                self._waiting.append(v)
        return u

    def at_beginning(self) -> bool:
        return True

    def at_end(self) -> bool:
        return not self._waiting


def topological_sort[T: Hashable](graph: Graph[T]) -> list[T]:
    """Sort the vertices of a directed graph topologically.

    Args:
        graph: The directed graph to sort. An edge ``(a, b)`` puts ``a`` before ``b``.

    Returns:
        List of all vertices in topological order.

    Raises:
        NotDirectedError: If the graph is undirected.
        CycleError: If the graph contains a cycle.

    Example:
        >>> topological_sort(DirectedAdjacencyGraph.from_pairs("a", "b", "b", "c"))
        ['a', 'b', 'c']

    """
    if not graph.directed:
        msg = "Topological sort requires a directed graph"
        raise NotDirectedError(msg)

    order = list(graph.topsort_iterator())
    num_vertices = graph.num_vertices
    if len(order) != num_vertices:
        raise CycleError(order, num_vertices)  # type: ignore[arg-type]

    return order
