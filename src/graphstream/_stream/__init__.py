"""Stream module providing bidirectional external iterators and their lazy wrappers."""

from ._base import (
    EMPTY_STREAM,
    NOT_FOUND,
    CollectionStream,
    EmptyStream,
    IntervalStream,
    NotFound,
    Stream,
    create_stream,
)
from ._wrappers import (
    ConcatenatedStream,
    FilteredStream,
    ImplicitStream,
    MappedStream,
    ReversedStream,
    WrappedStream,
)

__all__ = [
    "EMPTY_STREAM",
    "NOT_FOUND",
    "CollectionStream",
    "ConcatenatedStream",
    "EmptyStream",
    "FilteredStream",
    "ImplicitStream",
    "IntervalStream",
    "MappedStream",
    "NotFound",
    "ReversedStream",
    "Stream",
    "WrappedStream",
    "create_stream",
]
