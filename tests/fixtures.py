"""
Shared Test Fixtures

Explicit machines and hypothesis strategies for the property tests.

RULES:
======
1. Random transducers are finite-state and table-driven, so every
   generated machine is total over ALPHABET
2. Random causal functions are history functions, so every generated
   family satisfies the causality law by construction
3. Explicit fixtures document the behaviour they encode
"""

from __future__ import annotations
from hypothesis import strategies as st
from hypothesis.strategies import composite

from causal_streams import (
    Prefix, Stream, CausalFunction, StateTransducer, causal_from_history, table_transducer,
)


ALPHABET = (0, 1, 2)
BINARY = (0, 1)


# =============================================================================
# EXPLICIT FIXTURES
# =============================================================================

def reversing_family() -> CausalFunction:
    """Length-preserving but NOT causal: output 0 is the newest input."""
    return CausalFunction(lambda p: Prefix(items=tuple(reversed(p.items))), name="reverse")


def parity_two_states() -> StateTransducer:
    """Emits the parity of the number of 1s seen, states 'even'/'odd'."""
    table = {}
    for state, flipped in (("even", "odd"), ("odd", "even")):
        for x in ALPHABET:
            nxt = flipped if x == 1 else state
            table[(state, x)] = (0 if nxt == "even" else 1, nxt)
    return table_transducer(table, "even")


def parity_four_states() -> StateTransducer:
    """Same observable behaviour, but counts 1s modulo 4."""
    table = {}
    for count in range(4):
        for x in ALPHABET:
            nxt = (count + 1) % 4 if x == 1 else count
            table[(count, x)] = (nxt % 2, nxt)
    return table_transducer(table, 0)


def lookahead_swap(s: Stream) -> Stream:
    """
    The non-example: 00x -> 01x, 01x -> 10x, 1x -> 1x on binary input.

    The first output depends on the SECOND input, so no causal function
    or transducer can produce it without delaying output.
    """
    if s.head == 1:
        return Stream.cons(1, lambda: lookahead_swap(s.tail))
    rest = s.tail.tail
    first, second = (0, 1) if s.tail.head == 0 else (1, 0)
    return Stream.cons(first, lambda: Stream.cons(second, lambda: lookahead_swap(rest)))


def naive_interpretation(c: CausalFunction, inputs: Stream, count: int) -> Prefix:
    """The WRONG interpreter: component(1) at every position, history forgotten."""
    outputs = []
    current = inputs
    for _ in range(count):
        outputs.append(c.component(1)(Prefix.of(current.head)).last())
        current = current.tail
    return Prefix(items=tuple(outputs))


# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

@composite
def finite_transducers(draw, alphabet=ALPHABET, max_states=4):
    """Random total table-driven transducers over `alphabet`."""
    n_states = draw(st.integers(min_value=1, max_value=max_states))
    table = {}
    for state in range(n_states):
        for x in alphabet:
            y = draw(st.integers(min_value=0, max_value=3))
            nxt = draw(st.integers(min_value=0, max_value=n_states - 1))
            table[(state, x)] = (y, nxt)
    return table_transducer(table, 0)


@composite
def history_functions(draw):
    """Random causal functions: output i = weighted fold of inputs 0..i, mod m."""
    a = draw(st.integers(min_value=0, max_value=5))
    b = draw(st.integers(min_value=0, max_value=5))
    c = draw(st.integers(min_value=0, max_value=5))
    m = draw(st.integers(min_value=2, max_value=7))

    def g(history: Prefix) -> int:
        return (a * sum(history) + b * history.last() + c * history.length) % m

    return causal_from_history(g, name=f"history({a},{b},{c} mod {m})")


@composite
def prefixes(draw, alphabet=ALPHABET, max_length=6, min_length=0):
    items = draw(st.lists(st.sampled_from(alphabet), min_size=min_length, max_size=max_length))
    return Prefix.from_iterable(items)


@composite
def input_streams(draw, alphabet=ALPHABET):
    """Eventually periodic infinite inputs: a random lead-in, then a random cycle."""
    lead = draw(st.lists(st.sampled_from(alphabet), max_size=4))
    loop = draw(st.lists(st.sampled_from(alphabet), min_size=1, max_size=4))
    return Stream.cycle(loop).prepend(Prefix.from_iterable(lead))
