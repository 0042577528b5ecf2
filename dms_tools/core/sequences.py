"""Combine several iterators and lists into a single sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger()

E = TypeVar("E")


class SequenceCombiner(Generic[E]):
    """Accumulates elements from multiple sources in insertion order.

    Elements are stored by reference, never copied. Not thread-safe: callers
    sharing a combiner between threads must serialize access themselves.

    Example:
        >>> combiner = SequenceCombiner[int]()
        >>> combiner.add_list([1, 2, 3])
        >>> combiner.add_iterator(iter([4, 5]))
        >>> list(combiner.combined_iterator())
        [1, 2, 3, 4, 5]
    """

    def __init__(self) -> None:
        self._elements: list[E] = []

    def add_iterator(self, iterator: Iterable[E] | None) -> None:
        """Add all the elements of an iterator.

        One-shot iterators are drained; re-iterable containers are only read.

        Args:
            iterator: Source to drain, ignored if None
        """
        if iterator is None:
            return
        before = len(self._elements)
        self._elements.extend(iterator)
        logger.debug("sequence_absorbed", added=len(self._elements) - before, size=len(self._elements))

    def add_list(self, elements: Sequence[E] | None) -> None:
        """Add all the elements of a list.

        Args:
            elements: Source list, ignored if None
        """
        if elements is None:
            return
        self._elements.extend(elements)
        logger.debug("list_absorbed", added=len(elements), size=len(self._elements))

    def size(self) -> int:
        """Get the number of elements."""
        return len(self._elements)

    def clear(self) -> None:
        """Remove all of the elements."""
        self._elements.clear()

    def combined_iterator(self) -> Iterator[E]:
        """Iterate over a snapshot of the current elements.

        Each call starts a new traversal from the beginning. Elements added
        or cleared afterwards do not affect a traversal already returned.

        Returns:
            Iterator over the combined elements
        """
        return iter(tuple(self._elements))

    def __iter__(self) -> Iterator[E]:
        return self.combined_iterator()

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._elements)})"
