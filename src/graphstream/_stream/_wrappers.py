"""Streams wrapping other streams.

None of these wrappers materializes the wrapped sequence: every element is
computed when the wrapper is moved over it.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from ._base import EMPTY_STREAM, NOT_FOUND, IntervalStream, Stream

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._base import Searched


class WrappedStream[E](Stream[E]):
    """Base class for streams wrapping another stream.

    Every basic operation is delegated to the wrapped stream, so a
    WrappedStream on its own is equivalent to the stream it wraps.
    """

    def __init__(self, wrapped_stream: Stream[Any]) -> None:
        self.wrapped_stream = wrapped_stream

    def at_beginning(self) -> bool:
        return self.wrapped_stream.at_beginning()

    def at_end(self) -> bool:
        return self.wrapped_stream.at_end()

    def set_to_end(self) -> None:
        self.wrapped_stream.set_to_end()

    def set_to_begin(self) -> None:
        self.wrapped_stream.set_to_begin()

    def unwrapped(self) -> Stream[Any]:
        return self.wrapped_stream.unwrapped()

    def basic_forward(self) -> E:
        return self.wrapped_stream.basic_forward()

    def basic_backward(self) -> E:
        return self.wrapped_stream.basic_backward()


class FilteredStream[E](WrappedStream[E]):
    """The elements of the wrapped stream that satisfy a predicate.

    ``at_end()`` cannot be answered without looking ahead, so the next match
    found by a look-ahead is kept in a one slot buffer until the following
    ``forward()`` consumes it or a ``backward()`` hands it back to the wrapped
    stream. An IntervalStream counts the matches discovered so far and
    tracks the position inside the filtered sequence.
    """

    def __init__(self, wrapped_stream: Stream[E], predicate: Callable[[E], bool]) -> None:
        super().__init__(wrapped_stream)
        self._predicate = predicate
        self._position_holder = IntervalStream()
        self._peek: Searched[E] = NOT_FOUND
        self.set_to_begin()

    @property
    def pos(self) -> int:
        """Index of the element last crossed forward (-1 at the beginning)."""
        return self._position_holder.pos

    def at_beginning(self) -> bool:
        return self._position_holder.at_beginning()

    def at_end(self) -> bool:
        if not self._position_holder.at_end():
            return False
        if self._peek is NOT_FOUND:
            found = self.wrapped_stream.move_forward_until(self._predicate)
            if found is NOT_FOUND:
                return True
            self._peek = found
            self._position_holder.increment_stop()
        return False

    def basic_forward(self) -> E:
        if self._peek is NOT_FOUND:
            result = self.wrapped_stream.move_forward_until(self._predicate)
        else:
            # the look-ahead already moved the wrapped stream past the match
            result = self._peek
        self._peek = NOT_FOUND
        self._position_holder.forward()
        return result  # type: ignore[return-value]

    def basic_backward(self) -> E:
        if self._peek is not NOT_FOUND:
            self.wrapped_stream.backward()
        self._peek = NOT_FOUND
        self._position_holder.backward()
        return self.wrapped_stream.move_backward_until(self._predicate)  # type: ignore[return-value]

    def set_to_end(self) -> None:
        # The filtered length is unknown without scanning.
        while not self.at_end():
            self.basic_forward()

    def set_to_begin(self) -> None:
        super().set_to_begin()
        self._peek = NOT_FOUND
        self._position_holder.set_to_begin()


class ReversedStream[E](WrappedStream[E]):
    """The elements of the wrapped stream in reverse order.

    The wrapped stream must support moving backward. If it does not,
    NotImplementedError is raised on the first move.
    """

    def __init__(self, wrapped_stream: Stream[E]) -> None:
        super().__init__(wrapped_stream)
        self.set_to_begin()

    def at_beginning(self) -> bool:
        return self.wrapped_stream.at_end()

    def at_end(self) -> bool:
        return self.wrapped_stream.at_beginning()

    def basic_forward(self) -> E:
        return self.wrapped_stream.basic_backward()

    def basic_backward(self) -> E:
        return self.wrapped_stream.basic_forward()

    def set_to_end(self) -> None:
        self.wrapped_stream.set_to_begin()

    def set_to_begin(self) -> None:
        self.wrapped_stream.set_to_end()


class MappedStream[E, R](WrappedStream[R]):
    """Applies a mapping to every element the wrapped stream returns.

    Example:
        >>> list(create_stream(range(1, 6)).collect(lambda x: x**2))
        [1, 4, 9, 16, 25]

    """

    def __init__(self, wrapped_stream: Stream[E], mapping: Callable[[E], R]) -> None:
        super().__init__(wrapped_stream)
        self._mapping = mapping

    def basic_forward(self) -> R:
        return self._mapping(self.wrapped_stream.basic_forward())

    def basic_backward(self) -> R:
        return self._mapping(self.wrapped_stream.basic_backward())


class _Move(Enum):
    NONE = auto()
    FORWARD = auto()
    BACKWARD = auto()


class ConcatenatedStream[E](WrappedStream[E]):
    """The concatenation of a stream of streams.

    The stream of streams sits right behind the active sub-stream after a
    forward look-ahead and right before it after a backward one. The
    direction of the last move of the stream of streams tells which: when a
    look-ahead in the opposite direction fetches a sub-stream, that
    sub-stream is the active one and must be skipped.

    Example:
        >>> list(create_stream(range(1, 4)) + create_stream([4, 5]))
        [1, 2, 3, 4, 5]

    """

    def __init__(self, stream_of_streams: Stream[Stream[E]]) -> None:
        super().__init__(stream_of_streams)
        self._current_stream: Stream[E] = EMPTY_STREAM
        self._last_move = _Move.NONE
        self.set_to_begin()

    def at_end(self) -> bool:
        if not self._current_stream.at_end():
            return False

        streams = self.wrapped_stream
        while not streams.at_end():
            last_move = self._last_move
            self._last_move = _Move.FORWARD
            stream = streams.basic_forward()
            if last_move is _Move.BACKWARD:
                # crossed the active stream again
                continue
            stream.set_to_begin()
            if stream.at_end():
                continue
            self._current_stream = stream
            return False
        return self._reached_boundary()

    def at_beginning(self) -> bool:
        if not self._current_stream.at_beginning():
            return False

        streams = self.wrapped_stream
        while not streams.at_beginning():
            last_move = self._last_move
            self._last_move = _Move.BACKWARD
            stream = streams.basic_backward()
            if last_move is _Move.FORWARD:
                continue
            stream.set_to_end()
            if stream.at_beginning():
                continue
            self._current_stream = stream
            return False
        return self._reached_boundary()

    def set_to_begin(self) -> None:
        super().set_to_begin()
        self._reached_boundary()

    def set_to_end(self) -> None:
        super().set_to_end()
        self._reached_boundary()

    def basic_forward(self) -> E:
        return self._current_stream.basic_forward()

    def basic_backward(self) -> E:
        return self._current_stream.basic_backward()

    def _reached_boundary(self) -> bool:
        self._current_stream = EMPTY_STREAM
        self._last_move = _Move.NONE
        return True


class ImplicitStream[E](Stream[E]):
    """A stream whose basic operations are plain callables.

    With a wrapped stream, every callable delegates to it. ``configure`` is
    called with the new stream and may replace any of the callables:

        >>> counter = {"x": 0}
        >>> def configure(s):
        ...     s.at_end_fn = lambda: counter["x"] == 3
        ...     s.forward_fn = lambda: counter.update(x=counter["x"] + 1) or counter["x"]
        >>> list(ImplicitStream(configure=configure))
        [1, 2, 3]

    Without a wrapped stream the stream is empty and cannot move until
    ``forward_fn``/``backward_fn`` are supplied.
    """

    def __init__(
        self,
        wrapped_stream: Stream[E] | None = None,
        configure: Callable[[ImplicitStream[E]], None] | None = None,
    ) -> None:
        self.wrapped_stream = wrapped_stream
        self.at_beginning_fn: Callable[[], bool] = lambda: True
        self.at_end_fn: Callable[[], bool] = lambda: True
        self.forward_fn: Callable[[], E] | None = None
        self.backward_fn: Callable[[], E] | None = None
        self.set_to_begin_fn: Callable[[], None] = lambda: None
        self.set_to_end_fn: Callable[[], None] = lambda: None

        if wrapped_stream is not None:
            self.at_beginning_fn = wrapped_stream.at_beginning
            self.at_end_fn = wrapped_stream.at_end
            self.forward_fn = wrapped_stream.basic_forward
            self.backward_fn = wrapped_stream.basic_backward
            self.set_to_begin_fn = wrapped_stream.set_to_begin
            self.set_to_end_fn = wrapped_stream.set_to_end

        if configure is not None:
            configure(self)

    def at_beginning(self) -> bool:
        return self.at_beginning_fn()

    def at_end(self) -> bool:
        return self.at_end_fn()

    def basic_forward(self) -> E:
        if self.forward_fn is None:
            raise NotImplementedError
        return self.forward_fn()

    def basic_backward(self) -> E:
        if self.backward_fn is None:
            raise NotImplementedError
        return self.backward_fn()

    def set_to_begin(self) -> None:
        self.set_to_begin_fn()

    def set_to_end(self) -> None:
        self.set_to_end_fn()

    def unwrapped(self) -> Stream[Any]:
        return self if self.wrapped_stream is None else self.wrapped_stream.unwrapped()
