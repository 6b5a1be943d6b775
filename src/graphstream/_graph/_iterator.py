"""Streams bound to a graph."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphstream._stream import Stream

if TYPE_CHECKING:
    from ._base import Graph


class GraphWrapper[T: Hashable]:
    """Holds the graph an iterator or visitor works on."""

    def __init__(self, graph: Graph[T]) -> None:
        self.graph = graph


class GraphIterator[T: Hashable](GraphWrapper[T], Stream[T]):
    """Abstract base of all iterators over the vertices of a graph."""

    def length(self) -> int:
        """Number of vertices a full traversal from the beginning visits."""
        return sum(1 for _ in self)
