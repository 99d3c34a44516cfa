"""Lazy sliding windows over arbitrary iterables.

``each_cons(3, [1, 2, 3, 4, 5])`` yields ``[1, 2, 3]``, ``[2, 3, 4]`` and
``[3, 4, 5]``. The source is pulled one element per window (``size`` elements
for the first one) so infinite or expensive iterables are never materialized.

A ``Cons`` is a plain iterator and is not thread-safe: callers sharing one
instance across threads must serialize calls to ``next()`` themselves.
"""

from __future__ import annotations

import logging
import operator
from collections import deque
from enum import Enum
from typing import Deque, Generic, Iterable, Iterator, List, Optional, TypeVar

from .errors import InvalidWindowSize
from .logging_utils import log_event

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ConsState(str, Enum):
    UNPRIMED = "unprimed"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


def _check_size(size: int) -> int:
    if isinstance(size, bool):
        raise TypeError("window size must be an int, not bool")
    size = operator.index(size)
    if size < 1:
        raise InvalidWindowSize(size)
    return size


class Cons(Generic[T]):
    """Iterator yielding every contiguous window of ``size`` elements.

    Windows are fresh lists, so mutating one never affects another. Once the
    source runs dry the iterator is exhausted for good and the source is
    released without being pulled again.
    """

    def __init__(self, source: Iterable[T], size: int) -> None:
        self._size = _check_size(size)
        self._source: Optional[Iterator[T]] = iter(source)
        self._buffer: Deque[T] = deque(maxlen=self._size)
        self._state = ConsState.UNPRIMED

    @property
    def size(self) -> int:
        return self._size

    @property
    def state(self) -> ConsState:
        return self._state

    def __iter__(self) -> "Cons[T]":
        return self

    def __next__(self) -> List[T]:
        # only None once exhausted
        source = self._source
        if source is None:
            raise StopIteration

        if self._state is ConsState.UNPRIMED:
            for item in source:
                self._buffer.append(item)
                if len(self._buffer) == self._size:
                    break
            if len(self._buffer) < self._size:
                self._exhaust(buffered=len(self._buffer))
                raise StopIteration
            self._state = ConsState.ACTIVE
            self._log("window_primed")
        else:
            try:
                item = next(source)
            except StopIteration:
                self._exhaust(buffered=len(self._buffer))
                raise
            # maxlen evicts the oldest element
            self._buffer.append(item)

        return list(self._buffer)

    def _exhaust(self, buffered: int) -> None:
        self._state = ConsState.EXHAUSTED
        self._source = None
        self._buffer.clear()
        self._log("window_source_exhausted", buffered=buffered)

    def _log(self, event: str, **fields: object) -> None:
        log_event(logger, event, level=logging.DEBUG, size=self._size, state=self._state.value, **fields)

    def __length_hint__(self) -> int:
        if self._source is None:
            return 0
        remaining = operator.length_hint(self._source)
        if self._state is ConsState.UNPRIMED:
            return max(0, remaining + len(self._buffer) - self._size + 1)
        return remaining

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, state={self._state.value})"


def each_cons(size: int, iterable: Iterable[T]) -> Cons[T]:
    """Return an iterator over overlapping windows of ``size`` elements.

    >>> list(each_cons(2, ["foo", "bar", "baz"]))
    [['foo', 'bar'], ['bar', 'baz']]
    """
    return Cons(iterable, size)


def adapt(source: Iterable[T], size: int) -> Cons[T]:
    """Wrap ``source`` in a sliding-window iterator; ``size`` is checked eagerly."""
    return Cons(source, size)
