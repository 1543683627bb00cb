"""Demand-driven child sequences for lazily built directories.

A LazyContents wraps an iterator that performs filesystem work as it is
advanced. Elements are realized strictly left to right, and only when a
consumer asks for them: indexing element ``k`` forces elements ``0..k`` and
nothing beyond. Realized elements are cached, so each piece of I/O runs at
most once.

Because the work happens at the point of demand, any exception raised by
the underlying iterator surfaces there too, which can be long after the
call that created the tree has returned. Such an exception is remembered
and re-raised on every later attempt to force past the same position.
"""

from collections.abc import Sequence
from typing import Any, Callable, Iterable, Iterator, List, Optional


class LazyContents(Sequence):
    """Read-only sequence whose elements are produced on demand."""

    def __init__(self, source: Iterable[Any]):
        """Initialize from any iterable.

        Args:
            source: Iterable producing the elements; it is not advanced here
        """
        self._source: Optional[Iterator[Any]] = iter(source)
        self._realized: List[Any] = []
        self._error: Optional[BaseException] = None

    @property
    def realized_count(self) -> int:
        """Number of elements produced so far."""
        return len(self._realized)

    @property
    def exhausted(self) -> bool:
        """True once the underlying iterator has been fully consumed."""
        return self._source is None and self._error is None

    def _pull(self) -> bool:
        """Realize one more element. Returns False when nothing is left."""
        if self._error is not None:
            raise self._error
        if self._source is None:
            return False
        try:
            item = next(self._source)
        except StopIteration:
            self._source = None
            return False
        except Exception as e:
            self._error = e
            raise
        self._realized.append(item)
        return True

    def _force_to(self, index: int) -> None:
        while len(self._realized) <= index and self._pull():
            pass

    def force(self) -> List[Any]:
        """Realize every remaining element and return them all."""
        while self._pull():
            pass
        return list(self._realized)

    def __getitem__(self, index):
        if isinstance(index, slice) or index < 0:
            return self.force()[index]
        self._force_to(index)
        if index >= len(self._realized):
            raise IndexError("LazyContents index out of range")
        return self._realized[index]

    def __len__(self) -> int:
        return len(self.force())

    def __iter__(self) -> Iterator[Any]:
        position = 0
        while True:
            if position < len(self._realized):
                yield self._realized[position]
                position += 1
            elif not self._pull():
                return

    def __bool__(self) -> bool:
        self._force_to(0)
        return bool(self._realized)

    def __repr__(self) -> str:
        state = "exhausted" if self.exhausted else "pending"
        return f"LazyContents(realized={len(self._realized)}, {state})"

    # Transformations stay lazy: nothing is forced until the result is read.

    def map(self, fn: Callable[[Any], Any]) -> "LazyContents":
        """Return a new LazyContents applying ``fn`` to each element."""
        return LazyContents(fn(item) for item in self)

    def filter(self, predicate: Callable[[Any], bool]) -> "LazyContents":
        """Return a new LazyContents keeping elements matching ``predicate``."""
        return LazyContents(item for item in self if predicate(item))


def map_contents(contents: Sequence, fn: Callable[[Any], Any]) -> Sequence:
    """Map over a child sequence, keeping it lazy if it was lazy."""
    if isinstance(contents, LazyContents):
        return contents.map(fn)
    return tuple(fn(item) for item in contents)


def filter_contents(contents: Sequence, predicate: Callable[[Any], bool]) -> Sequence:
    """Filter a child sequence, keeping it lazy if it was lazy."""
    if isinstance(contents, LazyContents):
        return contents.filter(predicate)
    return tuple(item for item in contents if predicate(item))
