"""Exceptions raised by graph and stream operations."""

from collections.abc import Hashable


class GraphError(Exception):
    """Base class for errors raised by graph operations."""


class NoVertexError(GraphError, LookupError):
    """Raised when an operation refers to a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"No vertex {vertex!r}.")


class NoEdgeError(GraphError, LookupError):
    """Raised when an operation refers to an edge that is not in the graph."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No edge ({source!r}, {target!r}).")


class NotDirectedError(GraphError):
    """Raised when a directed-only operation is requested on an undirected graph."""


class NotUndirectedError(GraphError):
    """Raised when an undirected-only operation is requested on a directed graph."""


class CycleError(GraphError, ValueError):
    """Raised when a topological order is requested for a graph with a cycle.

    Attributes:
        order: The vertices that could be ordered before the cycle blocked the sort.

    """

    def __init__(self, order: list[Hashable], num_vertices: int) -> None:
        self.order = order
        super().__init__(f"Cycle detected in graph: ordered {len(order)} of {num_vertices} vertices")


class EndOfStreamError(Exception):
    """Raised when a stream is moved past its end or its beginning.

    Callers are expected to check ``at_end()``/``at_beginning()`` before moving.
    """
