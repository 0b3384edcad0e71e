"""
Stream Tests

Lazy, memoized, never runs out.
"""

import pytest

from causal_streams import Stream, Prefix, StreamExhaustedError


class CountingSource:
    """Iterator that records how many elements were pulled."""

    def __init__(self, start: int = 0):
        self.pulls = 0
        self._next = start

    def __iter__(self):
        return self

    def __next__(self):
        self.pulls += 1
        value = self._next
        self._next += 1
        return value


class TestStreamLaziness:

    def test_nothing_forced_on_construction(self):
        source = CountingSource()
        Stream.from_iterable(source)
        assert source.pulls == 0

    def test_take_forces_exactly_n(self):
        source = CountingSource()
        s = Stream.from_iterable(source)
        assert s.take(3) == Prefix.of(0, 1, 2)
        assert source.pulls == 3

    def test_cells_are_memoized(self):
        source = CountingSource()
        s = Stream.from_iterable(source)
        s.take(4)
        s.take(4)
        assert s.drop(2).head == 2
        assert source.pulls == 4

    def test_exhausted_source_raises(self):
        s = Stream.from_iterable([1, 2])
        assert s.take(2) == Prefix.of(1, 2)
        with pytest.raises(StreamExhaustedError) as info:
            s.drop(2).head
        assert info.value.error.context_value("position") == "2"


class TestStreamConstructors:

    def test_iterate(self):
        assert Stream.iterate(lambda k: k * 2, 1).take(5) == Prefix.of(1, 2, 4, 8, 16)

    def test_repeat(self):
        assert Stream.repeat("x").take(3) == Prefix.of("x", "x", "x")

    def test_unfold(self):
        fib = Stream.unfold(lambda ab: (ab[0], (ab[1], ab[0] + ab[1])), (0, 1))
        assert fib.take(7) == Prefix.of(0, 1, 1, 2, 3, 5, 8)

    def test_cycle(self):
        assert Stream.cycle([0, 1]).take(5) == Prefix.of(0, 1, 0, 1, 0)

    def test_cycle_needs_elements(self):
        with pytest.raises(ValueError):
            Stream.cycle([])

    def test_cons_and_prepend(self):
        s = Stream.cons(9, lambda: Stream.repeat(0))
        assert s.take(3) == Prefix.of(9, 0, 0)
        assert Stream.repeat(0).prepend(Prefix.of(1, 2)).take(4) == Prefix.of(1, 2, 0, 0)

    def test_iteration_is_unbounded(self):
        seen = []
        for x in Stream.iterate(lambda k: k + 1, 0):
            if x == 50:
                break
            seen.append(x)
        assert seen == list(range(50))
