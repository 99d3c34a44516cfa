"""Grouping of consecutive equal elements."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class ConsGroup(Generic[T]):
    """Iterator over runs of consecutive equal elements.

    ``[1, 1, 2, 3, 3, 3]`` yields ``[1, 1]``, ``[2]`` and ``[3, 3, 3]``.
    Only neighbours are compared, so a value reappearing later starts a new run.
    The run being collected is kept on the instance, so an error raised by the
    source loses nothing and a resumable source can simply be retried.
    """

    def __init__(self, source: Iterable[T]) -> None:
        self._source: Optional[Iterator[T]] = iter(source)
        self._run: List[T] = []

    def __iter__(self) -> "ConsGroup[T]":
        return self

    def __next__(self) -> List[T]:
        source = self._source
        if source is None:
            raise StopIteration

        for item in source:
            if self._run and item != self._run[0]:
                run, self._run = self._run, [item]
                return run
            self._run.append(item)

        self._source = None
        run, self._run = self._run, []
        if not run:
            raise StopIteration
        return run


def cons_group(iterable: Iterable[T]) -> ConsGroup[T]:
    """Split ``iterable`` into lists of consecutive equal elements."""
    return ConsGroup(iterable)
