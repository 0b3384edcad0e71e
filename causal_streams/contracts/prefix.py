"""
Prefix Sequences
================

The first n elements of a sequence, with n tracked exactly.

INVARIANTS:
- Prefixes are immutable; extend() returns a new value
- truncate() and last() exist only for length >= 1
- Equality is structural (elementwise, same length)

ETA LAWS:
- A length-0 prefix is always Prefix.empty()
- A length-(n+1) prefix p equals p.truncate().extend(p.last())
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

from .base import EmptyPrefixError, PrefixRangeError


@dataclass(frozen=True)
class Prefix:
    """
    Immutable, length-tracked finite sequence.

    Represents "the input (or output) seen so far". Every operation
    that grows or shrinks a prefix returns a new value, so older
    prefixes stay valid and can be replayed from.
    """
    items: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, 'items', tuple(self.items))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @staticmethod
    def empty() -> Prefix:
        return _EMPTY

    @staticmethod
    def of(*items: Any) -> Prefix:
        return Prefix(items=items)

    @staticmethod
    def from_iterable(items: Iterable[Any]) -> Prefix:
        return Prefix(items=tuple(items))

    # -------------------------------------------------------------------------
    # Core operations
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        return len(self.items)

    def extend(self, x: Any) -> Prefix:
        """Append one element, producing a prefix of length n+1."""
        return Prefix(items=self.items + (x,))

    def truncate(self) -> Prefix:
        """Drop the last element. Defined only for length >= 1."""
        if not self.items:
            raise EmptyPrefixError("truncate() of an empty prefix")
        return Prefix(items=self.items[:-1])

    def last(self) -> Any:
        """The most recently appended element. Defined only for length >= 1."""
        if not self.items:
            raise EmptyPrefixError("last() of an empty prefix")
        return self.items[-1]

    def take(self, k: int) -> Prefix:
        """The first k elements, for 0 <= k <= length."""
        if not 0 <= k <= len(self.items):
            raise PrefixRangeError(
                f"take({k}) outside 0..{len(self.items)}",
                context=(("k", str(k)), ("length", str(len(self.items)))),
            )
        return Prefix(items=self.items[:k])

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def __repr__(self) -> str:
        return f"Prefix{self.items!r}"


_EMPTY = Prefix()
