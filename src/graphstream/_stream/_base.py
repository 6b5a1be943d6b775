"""Bidirectional external iterators.

A ``Stream`` is an iterator driven by explicit ``forward()``/``backward()``
calls. Its cursor always sits between two elements (or before the first,
or after the last one):

- ``at_beginning()`` is true iff no element precedes the cursor,
- ``at_end()`` is true iff no element follows the cursor.

A concrete stream supplies those two predicates plus ``basic_forward()`` and
``basic_backward()``. Everything else, including the lazy wrappers built by
``filtered``, ``reverse``, ``collect`` and ``concatenate``, is derived.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Literal, Never

from graphstream._errors import EndOfStreamError

if TYPE_CHECKING:
    from ._wrappers import ConcatenatedStream, FilteredStream, ImplicitStream, MappedStream, ReversedStream


class NotFound(Enum):
    """Marker returned by ``move_forward_until``/``move_backward_until`` when nothing matched."""

    NOT_FOUND = "NOT_FOUND"

    def __repr__(self) -> str:
        return self.value


NOT_FOUND: Final = NotFound.NOT_FOUND

type Searched[E] = E | Literal[NotFound.NOT_FOUND]


class Stream[E]:
    """Abstract bidirectional external iterator over elements of type E."""

    def at_end(self) -> bool:
        """Return False if the next ``forward()`` will return an element."""
        raise NotImplementedError

    def at_beginning(self) -> bool:
        """Return False if the next ``backward()`` will return an element."""
        raise NotImplementedError

    def basic_forward(self) -> E:
        """Move forward without checking ``at_end()``."""
        raise NotImplementedError

    def basic_backward(self) -> E:
        """Move backward without checking ``at_beginning()``."""
        raise NotImplementedError

    def forward(self) -> E:
        """Move forward one position and return the element crossed.

        Raises:
            EndOfStreamError: If ``at_end()`` is true.

        """
        if self.at_end():
            raise EndOfStreamError
        return self.basic_forward()

    def backward(self) -> E:
        """Move backward one position and return the element crossed.

        Raises:
            EndOfStreamError: If ``at_beginning()`` is true.

        """
        if self.at_beginning():
            raise EndOfStreamError
        return self.basic_backward()

    def set_to_begin(self) -> None:
        """Position the stream before its first element."""
        while not self.at_beginning():
            self.basic_backward()

    def set_to_end(self) -> None:
        """Position the stream behind its last element."""
        while not self.at_end():
            self.basic_forward()

    def _basic_current(self) -> E:
        self.backward()
        return self.forward()

    def _basic_peek(self) -> E:
        self.forward()
        return self.backward()

    def move_forward_until(self, predicate: Callable[[E], bool]) -> Searched[E]:
        """Move forward until an element satisfies ``predicate`` and return it.

        Unlike a search over ``iter(stream)``, this starts from the current
        position. Returns ``NOT_FOUND`` if the end is reached first.
        """
        while not self.at_end():
            element = self.basic_forward()
            if predicate(element):
                return element
        return NOT_FOUND

    def move_backward_until(self, predicate: Callable[[E], bool]) -> Searched[E]:
        """Move backward until an element satisfies ``predicate`` and return it.

        Returns ``NOT_FOUND`` if the beginning is reached first.
        """
        while not self.at_beginning():
            element = self.basic_backward()
            if predicate(element):
                return element
        return NOT_FOUND

    def current(self) -> E | Stream[E]:
        """Return the element crossed by the last ``forward()``, or the stream itself at the beginning."""
        return self if self.at_beginning() else self._basic_current()

    def peek(self) -> E | Stream[E]:
        """Return the element the next ``forward()`` will cross, or the stream itself at the end."""
        return self if self.at_end() else self._basic_peek()

    def current_edge(self) -> tuple[E | Stream[E], E | Stream[E]]:
        """Return ``(current(), peek())``."""
        return (self.current(), self.peek())

    def first(self) -> E:
        """Move to the beginning and return the first element."""
        self.set_to_begin()
        return self.forward()

    def last(self) -> E:
        """Return the last element, leaving the stream right before it."""
        self.set_to_end()
        return self.backward()

    def is_empty(self) -> bool:
        """Check if the stream has no elements at all."""
        return self.at_end() and self.at_beginning()

    def unwrapped(self) -> Stream[Any]:
        """Return the innermost stream. A stream that wraps nothing returns itself."""
        return self

    def __iter__(self) -> Iterator[E]:
        self.set_to_begin()
        while not self.at_end():
            yield self.basic_forward()

    def filtered(self, predicate: Callable[[E], bool]) -> FilteredStream[E]:
        """Return a stream over the elements satisfying ``predicate``.

        Example:
            >>> list(create_stream(range(1, 7)).filtered(lambda x: x % 2 == 0))
            [2, 4, 6]

        """
        from ._wrappers import FilteredStream  # noqa: PLC0415

        return FilteredStream(self, predicate)

    def reverse(self) -> ReversedStream[E]:
        """Return a stream over the elements in reverse order."""
        from ._wrappers import ReversedStream  # noqa: PLC0415

        return ReversedStream(self)

    def collect[R](self, mapping: Callable[[E], R]) -> MappedStream[E, R]:
        """Return a stream yielding ``mapping(element)`` on every move."""
        from ._wrappers import MappedStream  # noqa: PLC0415

        return MappedStream(self, mapping)

    def concatenate(self) -> ConcatenatedStream[Any]:
        """Concatenate a stream of streams into one stream."""
        from ._wrappers import ConcatenatedStream  # noqa: PLC0415

        return ConcatenatedStream(self)  # type: ignore[arg-type]

    def concatenate_collected[R](self, mapping: Callable[[E], Stream[R]]) -> ConcatenatedStream[R]:
        """Concatenate the streams built by ``mapping`` for each element.

        Example:
            >>> list(create_stream([1, 2]).concatenate_collected(lambda i: create_stream([i, -i])))
            [1, -1, 2, -2]

        """
        return self.collect(mapping).concatenate()

    def modify(self, configure: Callable[[ImplicitStream[E]], None]) -> ImplicitStream[E]:
        """Wrap the stream in an ImplicitStream whose basic operations ``configure`` may replace."""
        from ._wrappers import ImplicitStream  # noqa: PLC0415

        return ImplicitStream(self, configure)

    def remove_first(self) -> ImplicitStream[E]:
        """Return a stream without the first element.

        Example:
            >>> list(create_stream([1, 2, 3]).remove_first())
            [2, 3]

        """
        skip_first = _SkipFirst()
        filtered = self.filtered(skip_first)

        def set_to_begin() -> None:
            filtered.set_to_begin()
            skip_first.reset()

        def configure(stream: ImplicitStream[E]) -> None:
            stream.set_to_begin_fn = set_to_begin

        return filtered.modify(configure)

    def remove_last(self) -> ReversedStream[E]:
        """Return a stream without the last element.

        Example:
            >>> list(create_stream([1, 2, 3]).remove_last())
            [1, 2]

        """
        return self.reverse().remove_first().reverse()

    def __add__(self, other: Stream[E]) -> ConcatenatedStream[E]:
        return create_stream([self, other]).concatenate()


class _SkipFirst:
    """Predicate that is false for the first element it sees and true afterwards."""

    __slots__ = ("_seen",)

    def __init__(self) -> None:
        self._seen = 0

    def __call__(self, _element: object) -> bool:
        self._seen += 1
        return self._seen > 1

    def reset(self) -> None:
        self._seen = 0


class EmptyStream(Stream[Never]):
    """A stream without elements. Use the shared ``EMPTY_STREAM`` instance."""

    def at_end(self) -> bool:
        return True

    def at_beginning(self) -> bool:
        return True

    def basic_forward(self) -> Never:
        raise EndOfStreamError

    def basic_backward(self) -> Never:
        raise EndOfStreamError

    def __repr__(self) -> str:
        return "EMPTY_STREAM"


EMPTY_STREAM: Final = EmptyStream()


class CollectionStream[E](Stream[E]):
    """A stream over an integer indexed sequence.

    ``pos`` is the index of the element last crossed forward (-1 at the beginning).
    """

    def __init__(self, seq: Sequence[E]) -> None:
        self._seq = seq
        self.pos = -1

    def at_end(self) -> bool:
        return self.pos + 1 >= len(self._seq)

    def at_beginning(self) -> bool:
        return self.pos < 0

    def set_to_begin(self) -> None:
        self.pos = -1

    def set_to_end(self) -> None:
        self.pos = len(self._seq) - 1

    def basic_forward(self) -> E:
        self.pos += 1
        return self._seq[self.pos]

    def basic_backward(self) -> E:
        element = self._seq[self.pos]
        self.pos -= 1
        return element

    def _basic_current(self) -> E:
        return self._seq[self.pos]

    def _basic_peek(self) -> E:
        return self._seq[self.pos + 1]


class IntervalStream(Stream[int]):
    """A stream over the integers ``0 .. stop - 1``.

    The upper bound can be raised after construction with ``increment_stop``,
    which lets FilteredStream count the matches found so far.
    """

    def __init__(self, stop: int = 0) -> None:
        self._stop = stop - 1
        self.pos = -1

    def at_beginning(self) -> bool:
        return self.pos < 0

    def at_end(self) -> bool:
        return self.pos == self._stop

    def set_to_begin(self) -> None:
        self.pos = -1

    def set_to_end(self) -> None:
        self.pos = self._stop

    def increment_stop(self, increment: int = 1) -> None:
        """Raise the upper bound by ``increment``."""
        self._stop += increment

    def basic_forward(self) -> int:
        self.pos += 1
        return self.pos

    def basic_backward(self) -> int:
        self.pos -= 1
        return self.pos + 1


def create_stream[E](items: Iterable[E]) -> Stream[E]:
    """Return a stream over ``items``.

    A stream is returned unchanged, a sequence is wrapped without copying and
    any other iterable is materialized into a tuple first.
    """
    if isinstance(items, Stream):
        return items
    if isinstance(items, Sequence):
        return CollectionStream(items)
    return CollectionStream(tuple(items))
