"""
Stream Interpreters
===================

Turn a transducer or a causal function into a producer of an infinite
output stream, one element per input element.

INVARIANTS:
- Productivity: exactly one output per input consumed
- Causality: output n is computed from inputs 0..n only
- No look-ahead: the input tail is never forced before the output
  head is committed
- Committed outputs are memoized by Stream and never revised

The causal interpreter threads the ACCUMULATED input prefix through
every step. Reusing component(1) at each position would forget the
history and is not a valid interpreter.
"""

from __future__ import annotations
from typing import Any, Iterable, Iterator, Optional, Union

from ..contracts.prefix import Prefix
from ..core.stream import Stream
from ..core.causal import CausalFunction, apply_next
from ..core.transducer import Transducer
from ..observability import StepRecord, TraceCollector


Source = Union[Stream, Iterable[Any]]


def _as_stream(inputs: Source) -> Stream:
    if isinstance(inputs, Stream):
        return inputs
    return Stream.from_iterable(inputs)


# =============================================================================
# TRANSDUCER INTERPRETATION
# =============================================================================

def interpret_transducer(
    t: Transducer,
    inputs: Source,
    trace: Optional[TraceCollector] = None,
) -> Stream:
    """
    Lazily run `t` over `inputs`.

    head: (y, t') = t.step(inputs.head), emit y
    tail: interpret_transducer(t', inputs.tail)
    """
    return _transducer_stream(t, _as_stream(inputs), 0, trace)


def _transducer_stream(t: Transducer, inputs: Stream, index: int,
                       trace: Optional[TraceCollector]) -> Stream:
    def thunk():
        x = inputs.head
        y, successor = t.step(x)
        if trace is not None:
            trace.collect(StepRecord(index=index, input=x, output=y, source="transducer"))
        return y, _transducer_stream(successor, inputs.tail, index + 1, trace)
    return Stream(thunk)


def run_transducer(t: Transducer, source: Iterable[Any]) -> Iterator[Any]:
    """Generator form for embedders; stops when `source` stops."""
    current = t
    for x in source:
        y, current = current.step(x)
        yield y


# =============================================================================
# CAUSAL INTERPRETATION
# =============================================================================

def interpret_causal(
    c: CausalFunction,
    inputs: Source,
    trace: Optional[TraceCollector] = None,
) -> Stream:
    """
    Lazily run `c` over `inputs`, accumulating the inputs seen so far.

    head: apply_next(c, history, inputs.head), history starts empty
    tail: same, with history.extend(inputs.head)
    """
    return _causal_stream(c, Prefix.empty(), _as_stream(inputs), trace)


def _causal_stream(c: CausalFunction, history: Prefix, inputs: Stream,
                   trace: Optional[TraceCollector]) -> Stream:
    def thunk():
        x = inputs.head
        y = apply_next(c, history, x)
        if trace is not None:
            trace.collect(StepRecord(index=history.length, input=x, output=y, source="causal"))
        return y, _causal_stream(c, history.extend(x), inputs.tail, trace)
    return Stream(thunk)


def run_causal(c: CausalFunction, source: Iterable[Any]) -> Iterator[Any]:
    """Generator form for embedders; stops when `source` stops."""
    history = Prefix.empty()
    for x in source:
        yield apply_next(c, history, x)
        history = history.extend(x)
