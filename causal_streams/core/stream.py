"""
Lazy Infinite Streams
=====================

Pull-based coinductive sequences: every stream has a head and a tail.

INVARIANTS:
- A stream never runs out; a finite source that does is an error
- Each cell is forced at most once and memoized, so an element that
  has been observed is never recomputed or revised
- Nothing is materialized beyond what the consumer has requested
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple
import itertools

from ..contracts.base import StreamExhaustedError
from ..contracts.prefix import Prefix


Cell = Tuple[Any, "Stream"]


class Stream:
    """
    An infinite sequence, produced one cell at a time.

    A stream is built from a thunk that, when forced, yields the head
    element and the tail stream. The result is cached so that sharing a
    stream between consumers never re-runs upstream work.
    """

    __slots__ = ('_thunk', '_cell')

    def __init__(self, thunk: Callable[[], Cell]):
        self._thunk: Optional[Callable[[], Cell]] = thunk
        self._cell: Optional[Cell] = None

    def _force(self) -> Cell:
        if self._cell is None:
            thunk = self._thunk
            self._cell = thunk()
            self._thunk = None
        return self._cell

    @property
    def head(self) -> Any:
        return self._force()[0]

    @property
    def tail(self) -> Stream:
        return self._force()[1]

    @property
    def is_forced(self) -> bool:
        return self._cell is not None

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @staticmethod
    def cons(head: Any, tail: Callable[[], Stream]) -> Stream:
        """A stream with a known head and a lazily computed tail."""
        return Stream(lambda: (head, tail()))

    @staticmethod
    def from_iterable(source: Iterable[Any]) -> Stream:
        """
        Wrap a Python iterable as a stream.

        The iterable is treated as infinite. If it ends, forcing the cell
        past its end raises StreamExhaustedError.
        """
        return _from_iterator(iter(source), 0)

    @staticmethod
    def repeat(value: Any) -> Stream:
        return Stream.iterate(lambda v: v, value)

    @staticmethod
    def iterate(f: Callable[[Any], Any], seed: Any) -> Stream:
        """seed, f(seed), f(f(seed)), ..."""
        return Stream(lambda: (seed, Stream.iterate(f, f(seed))))

    @staticmethod
    def unfold(step: Callable[[Any], Tuple[Any, Any]], state: Any) -> Stream:
        """Corecursive builder: step(state) -> (element, next_state)."""
        def thunk() -> Cell:
            value, next_state = step(state)
            return value, Stream.unfold(step, next_state)
        return Stream(thunk)

    @staticmethod
    def cycle(items: Iterable[Any]) -> Stream:
        pattern = tuple(items)
        if not pattern:
            raise ValueError("cycle() needs at least one element")
        return Stream.from_iterable(itertools.cycle(pattern))

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------

    def prepend(self, prefix: Prefix) -> Stream:
        """The stream whose first len(prefix) elements are prefix, then self."""
        result = self
        for x in reversed(prefix.items):
            result = _cons_now(x, result)
        return result

    def take(self, n: int) -> Prefix:
        """Force and collect the first n elements."""
        if n < 0:
            raise ValueError("take() needs n >= 0")
        items = []
        current = self
        for _ in range(n):
            head, current = current._force()
            items.append(head)
        return Prefix(items=tuple(items))

    def drop(self, n: int) -> Stream:
        current = self
        for _ in range(n):
            current = current.tail
        return current

    def __iter__(self) -> Iterator[Any]:
        current = self
        while True:
            head, current = current._force()
            yield head

    def __repr__(self) -> str:
        if self._cell is None:
            return "Stream(<unforced>)"
        return f"Stream({self._cell[0]!r}, ...)"


def _cons_now(head: Any, tail: Stream) -> Stream:
    return Stream(lambda: (head, tail))


def _from_iterator(source: Iterator[Any], position: int) -> Stream:
    def thunk() -> Cell:
        try:
            value = next(source)
        except StopIteration:
            raise StreamExhaustedError(
                f"input source ended after {position} elements",
                context=(("position", str(position)),),
            ) from None
        return value, _from_iterator(source, position + 1)
    return Stream(thunk)
