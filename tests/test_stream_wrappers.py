"""Tests for the lazy stream wrappers."""

import pytest

from graphstream import (
    EMPTY_STREAM,
    CollectionStream,
    ConcatenatedStream,
    EndOfStreamError,
    FilteredStream,
    MappedStream,
    ReversedStream,
    WrappedStream,
    create_stream,
)


def one_to_six() -> CollectionStream[int]:
    return CollectionStream([1, 2, 3, 4, 5, 6])


def is_even(x: int) -> bool:
    return x % 2 == 0


class TestWrappedStream:
    def test_delegates_everything(self) -> None:
        inner = CollectionStream([1, 2])
        stream = WrappedStream(inner)
        assert list(stream) == [1, 2]
        assert stream.backward() == 2
        assert stream.unwrapped() is inner

    def test_unwrapped_goes_to_innermost(self) -> None:
        inner = one_to_six()
        assert inner.filtered(is_even).reverse().unwrapped() is inner


class TestFilteredStream:
    """Tests for FilteredStream."""

    def test_forward(self) -> None:
        stream = one_to_six().filtered(is_even)
        assert isinstance(stream, FilteredStream)
        assert list(stream) == [2, 4, 6]

    def test_backward_from_end(self) -> None:
        stream = one_to_six().filtered(is_even)
        stream.set_to_end()
        assert [stream.backward() for _ in range(3)] == [6, 4, 2]
        assert stream.at_beginning()

    def test_change_direction_after_look_ahead(self) -> None:
        """Should hand the look-ahead back when moving backward."""
        stream = one_to_six().filtered(is_even)
        assert stream.forward() == 2
        assert not stream.at_end()
        assert stream.backward() == 2
        assert stream.forward() == 2
        assert stream.forward() == 4
        assert stream.backward() == 4
        assert stream.backward() == 2

    def test_pos(self) -> None:
        stream = one_to_six().filtered(is_even)
        assert stream.pos == -1
        stream.forward()
        stream.forward()
        assert stream.pos == 1

    def test_nothing_matches(self) -> None:
        stream = one_to_six().filtered(lambda x: x > 10)
        assert stream.is_empty()
        assert list(stream) == []
        with pytest.raises(EndOfStreamError):
            stream.forward()

    def test_current_and_peek(self) -> None:
        stream = one_to_six().filtered(is_even)
        stream.forward()
        assert stream.current() == 2
        assert stream.peek() == 4

    def test_nested_filters(self) -> None:
        stream = one_to_six().filtered(is_even).filtered(lambda x: x > 2)
        assert list(stream) == [4, 6]
        assert stream.last() == 6


class TestReversedStream:
    def test_reverse(self) -> None:
        stream = one_to_six().reverse()
        assert isinstance(stream, ReversedStream)
        assert list(stream) == [6, 5, 4, 3, 2, 1]

    def test_reverse_twice(self) -> None:
        assert list(one_to_six().reverse().reverse()) == [1, 2, 3, 4, 5, 6]

    def test_backward_on_reversed(self) -> None:
        stream = one_to_six().reverse()
        assert stream.forward() == 6
        assert stream.forward() == 5
        assert stream.backward() == 5

    def test_reversed_filter(self) -> None:
        assert list(one_to_six().filtered(is_even).reverse()) == [6, 4, 2]


class TestMappedStream:
    def test_collect(self) -> None:
        stream = one_to_six().collect(lambda x: x * x)
        assert isinstance(stream, MappedStream)
        assert list(stream) == [1, 4, 9, 16, 25, 36]

    def test_collect_backward(self) -> None:
        stream = one_to_six().collect(str)
        stream.set_to_end()
        assert stream.backward() == "6"


class TestConcatenatedStream:
    """Tests for ConcatenatedStream."""

    def test_add(self) -> None:
        stream = create_stream(range(1, 4)) + create_stream([4, 5])
        assert isinstance(stream, ConcatenatedStream)
        assert list(stream) == [1, 2, 3, 4, 5]

    def test_skips_empty_streams(self) -> None:
        streams = create_stream([CollectionStream([1]), EMPTY_STREAM, CollectionStream([]), CollectionStream([2])])
        assert list(streams.concatenate()) == [1, 2]

    def test_all_empty(self) -> None:
        stream = create_stream([EMPTY_STREAM, CollectionStream([])]).concatenate()
        assert stream.is_empty()
        assert list(stream) == []

    def test_backward(self) -> None:
        stream = create_stream(range(1, 4)) + create_stream([4, 5])
        stream.set_to_end()
        assert [stream.backward() for _ in range(5)] == [5, 4, 3, 2, 1]
        assert stream.at_beginning()

    def test_reversed(self) -> None:
        stream = create_stream([CollectionStream([1, 2]), CollectionStream([3])]).concatenate()
        assert list(stream.reverse()) == [3, 2, 1]

    def test_change_direction_across_boundary(self) -> None:
        """Should not skip or repeat elements when turning around between sub-streams."""
        stream = CollectionStream([1, 2]) + CollectionStream([3, 4])
        assert [stream.forward() for _ in range(3)] == [1, 2, 3]
        assert stream.backward() == 3
        assert stream.backward() == 2
        assert stream.forward() == 2
        assert stream.forward() == 3
        assert stream.forward() == 4
        assert stream.at_end()

    def test_iterates_twice(self) -> None:
        stream = CollectionStream([1]) + CollectionStream([2])
        assert list(stream) == [1, 2]
        assert list(stream) == [1, 2]

    def test_concatenate_collected(self) -> None:
        stream = create_stream([1, 2, 3]).concatenate_collected(lambda i: create_stream(range(i)))
        assert list(stream) == [0, 0, 1, 0, 1, 2]


class TestRemoveFirstAndLast:
    def test_remove_first(self) -> None:
        assert list(create_stream([1, 2, 3]).remove_first()) == [2, 3]

    def test_remove_first_twice(self) -> None:
        stream = create_stream([1, 2, 3]).remove_first()
        assert list(stream) == [2, 3]
        assert list(stream) == [2, 3]

    def test_remove_first_of_single_element(self) -> None:
        assert create_stream([1]).remove_first().is_empty()

    def test_remove_last(self) -> None:
        assert list(create_stream([1, 2, 3]).remove_last()) == [1, 2]

    def test_remove_last_twice(self) -> None:
        stream = create_stream([1, 2, 3]).remove_last()
        assert list(stream) == [1, 2]
        assert list(stream) == [1, 2]

    def test_remove_first_and_last(self) -> None:
        assert list(create_stream([1, 2, 3, 4]).remove_first().remove_last()) == [2, 3]
