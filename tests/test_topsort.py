"""Tests for topological sorting and acyclicity."""

import pytest

from graphstream import (
    AdjacencyGraph,
    CycleError,
    DirectedAdjacencyGraph,
    EndOfStreamError,
    Graph,
    NotDirectedError,
    TopsortIterator,
    topological_sort,
)


def assert_topological_order(graph: Graph[int], order: list[int]) -> None:
    position = {v: i for i, v in enumerate(order)}
    for u, v in graph.each_edge():
        assert position[u] < position[v], f"{u} should come before {v}"


class TestTopsortIterator:
    """Tests for TopsortIterator."""

    def test_visits_every_vertex_of_acyclic_graph(self) -> None:
        """Should yield every vertex, sources before targets."""
        graph = DirectedAdjacencyGraph.from_pairs(1, 2, 2, 3, 2, 4, 4, 5)

        order = list(graph.topsort_iterator())

        assert sorted(order) == [1, 2, 3, 4, 5]
        assert_topological_order(graph, order)
        assert order[0] == 1

    def test_length(self) -> None:
        """Should count the vertices a traversal visits."""
        graph = DirectedAdjacencyGraph.from_pairs(1, 2, 2, 3, 2, 4, 4, 5)
        assert graph.topsort_iterator().length() == 5

    def test_cycle_stops_early(self) -> None:
        """Should visit nothing when every vertex is on a cycle."""
        graph = DirectedAdjacencyGraph.from_pairs(1, 2, 2, 1)
        assert graph.topsort_iterator().length() == 0

    def test_stops_before_cycle(self) -> None:
        """Should visit only the vertices not blocked by a cycle."""
        graph = DirectedAdjacencyGraph.from_pairs(1, 2, 2, 3, 3, 2)
        assert list(graph.topsort_iterator()) == [1]

    def test_isolated_vertices(self) -> None:
        graph: DirectedAdjacencyGraph[int] = DirectedAdjacencyGraph()
        graph.add_vertices(1, 2, 3)
        assert sorted(graph.topsort_iterator()) == [1, 2, 3]

    def test_restarts_on_each_iteration(self) -> None:
        """Should recompute in-degrees when iterated again."""
        iterator = TopsortIterator(DirectedAdjacencyGraph.from_pairs("a", "b", "b", "c"))
        assert list(iterator) == ["a", "b", "c"]
        assert list(iterator) == ["a", "b", "c"]

    def test_forward_only(self) -> None:
        """Should never allow moving backward."""
        iterator = DirectedAdjacencyGraph.from_pairs(1, 2).topsort_iterator()
        assert iterator.forward() == 1
        assert iterator.at_beginning()
        with pytest.raises(EndOfStreamError):
            iterator.backward()

    def test_forward_past_end_raises(self) -> None:
        iterator = DirectedAdjacencyGraph.from_pairs(1, 2).topsort_iterator()
        iterator.set_to_end()
        with pytest.raises(EndOfStreamError):
            iterator.forward()

    def test_holds_graph(self) -> None:
        graph = DirectedAdjacencyGraph.from_pairs(1, 2)
        assert graph.topsort_iterator().graph is graph


class TestIsAcyclic:
    """Tests for Graph.is_acyclic."""

    def test_acyclic(self) -> None:
        assert DirectedAdjacencyGraph.from_pairs(1, 2, 2, 3, 2, 4, 4, 5).is_acyclic()

    def test_two_cycle(self) -> None:
        assert not DirectedAdjacencyGraph.from_pairs(1, 2, 2, 1).is_acyclic()

    def test_self_loop(self) -> None:
        assert not DirectedAdjacencyGraph.from_pairs(1, 1).is_acyclic()

    def test_empty_graph(self) -> None:
        assert DirectedAdjacencyGraph().is_acyclic()

    def test_undirected_edge_is_a_cycle(self) -> None:
        assert not AdjacencyGraph.from_pairs(1, 2).is_acyclic()


class TestTopologicalSort:
    """Tests for the topological_sort function."""

    def test_simple_chain(self) -> None:
        """Should return vertices of a chain in order."""
        graph = DirectedAdjacencyGraph.from_pairs("a", "b", "b", "c")

        assert topological_sort(graph) == ["a", "b", "c"]

    def test_diamond(self) -> None:
        """Should order a diamond so that every edge points forward."""
        graph = DirectedAdjacencyGraph.from_pairs(1, 2, 1, 3, 2, 4, 3, 4)

        order = topological_sort(graph)

        assert len(order) == 4
        assert order[0] == 1
        assert order[-1] == 4
        assert_topological_order(graph, order)

    def test_empty_graph(self) -> None:
        """Should return an empty list for an empty graph."""
        assert topological_sort(DirectedAdjacencyGraph()) == []

    def test_cycle_raises(self) -> None:
        """Should raise CycleError with the partial order."""
        graph = DirectedAdjacencyGraph.from_pairs(1, 2, 2, 3, 3, 2)

        with pytest.raises(CycleError, match="Cycle detected") as exc_info:
            topological_sort(graph)

        assert exc_info.value.order == [1]
        assert isinstance(exc_info.value, ValueError)

    def test_undirected_raises(self) -> None:
        """Should refuse undirected graphs."""
        with pytest.raises(NotDirectedError):
            topological_sort(AdjacencyGraph.from_pairs(1, 2))
