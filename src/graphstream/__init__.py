"""Graphs with adjacency list implementations, bidirectional streams and topological sorting."""

__all__ = [
    "EMPTY_STREAM",
    "NOT_FOUND",
    "AdjacencyGraph",
    "CollectionStream",
    "ConcatenatedStream",
    "CycleError",
    "DirectedAdjacencyGraph",
    "DirectedEdge",
    "EmptyStream",
    "EndOfStreamError",
    "FilteredStream",
    "Graph",
    "GraphError",
    "GraphIterator",
    "GraphWrapper",
    "ImplicitStream",
    "IntervalStream",
    "MappedStream",
    "MutableGraph",
    "NoEdgeError",
    "NoVertexError",
    "NotDirectedError",
    "NotFound",
    "NotUndirectedError",
    "ReversedStream",
    "Stream",
    "TopsortIterator",
    "UndirectedEdge",
    "WrappedStream",
    "create_stream",
    "topological_sort",
]

from ._edge import DirectedEdge, UndirectedEdge
from ._errors import (
    CycleError,
    EndOfStreamError,
    GraphError,
    NoEdgeError,
    NotDirectedError,
    NotUndirectedError,
    NoVertexError,
)
from ._graph import (
    AdjacencyGraph,
    DirectedAdjacencyGraph,
    Graph,
    GraphIterator,
    GraphWrapper,
    MutableGraph,
    TopsortIterator,
    topological_sort,
)
from ._stream import (
    EMPTY_STREAM,
    NOT_FOUND,
    CollectionStream,
    ConcatenatedStream,
    EmptyStream,
    FilteredStream,
    ImplicitStream,
    IntervalStream,
    MappedStream,
    NotFound,
    ReversedStream,
    Stream,
    WrappedStream,
    create_stream,
)
