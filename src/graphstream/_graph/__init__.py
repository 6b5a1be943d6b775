"""Graph module providing the graph concept and its adjacency list implementations.

This module contains:
- Graph[T] / MutableGraph[T]: the read and write sides of the graph concept
- DirectedAdjacencyGraph[T] / AdjacencyGraph[T]: mutable adjacency list graphs
- TopsortIterator[T] / topological_sort: ordering vertices along the edges
"""

from ._adjacency import AdjacencyGraph, DirectedAdjacencyGraph
from ._base import Graph
from ._iterator import GraphIterator, GraphWrapper
from ._mutable import MutableGraph
from ._topsort import TopsortIterator, topological_sort

__all__ = [
    "AdjacencyGraph",
    "DirectedAdjacencyGraph",
    "Graph",
    "GraphIterator",
    "GraphWrapper",
    "MutableGraph",
    "TopsortIterator",
    "topological_sort",
]
