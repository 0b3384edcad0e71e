"""
Sampled and Bounded-Depth Equivalence
=====================================

CHECKS:
- Causal equivalence: components agree on every sampled prefix
- Causality law: component(n)(truncate(l)) == truncate(component(n+1)(l))
- Transducer bisimulation: outputs agree along every input word, to a depth
- Stream bisimulation: heads agree, then tails, to a depth
- Causality of arbitrary stream functions: inputs that agree on n
  elements must give outputs that agree on n elements

Every check returns an EquivalenceReport. A passing report is evidence
within the sample, never a proof.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple
import logging

from ..config import CheckConfig, resolve
from ..contracts.base import Error, ErrorCode
from ..contracts.prefix import Prefix
from ..core.causal import CausalFunction, causality_violation
from ..core.stream import Stream
from ..core.transducer import Transducer
from .reports import Counterexample, EquivalenceReport


logger = logging.getLogger(__name__)


def _mismatch(inputs: Prefix, left: Any, right: Any, message: str) -> Counterexample:
    return Counterexample(
        inputs=inputs,
        left=left,
        right=right,
        error=Error(
            code=ErrorCode.OUTPUT_MISMATCH,
            message=message,
            context=(("inputs", repr(inputs)), ("left", repr(left)), ("right", repr(right))),
        ),
    )


# =============================================================================
# CAUSAL FUNCTIONS
# =============================================================================

def causal_equivalent(c1: CausalFunction, c2: CausalFunction,
                      prefixes: Iterable[Prefix]) -> EquivalenceReport:
    """Pointwise comparison of components on the given prefixes."""
    checked = 0
    for prefix in prefixes:
        left, right = c1(prefix), c2(prefix)
        if left != right:
            logger.debug("%s and %s differ on %r", c1.name, c2.name, prefix)
            return EquivalenceReport.failed(
                checked, _mismatch(prefix, left, right, f"{c1.name} and {c2.name} differ"))
        checked += 1
    return EquivalenceReport.passed(checked)


def check_causality_law(c: CausalFunction, prefixes: Iterable[Prefix]) -> EquivalenceReport:
    """Sample the causality law on every non-empty prefix given."""
    checked = 0
    for prefix in prefixes:
        if prefix.length == 0:
            continue
        error = causality_violation(c, prefix)
        if error is not None:
            return EquivalenceReport.failed(checked, Counterexample(
                inputs=prefix,
                left=c(prefix.truncate()),
                right=c(prefix).truncate(),
                error=error,
            ))
        checked += 1
    return EquivalenceReport.passed(checked)


# =============================================================================
# TRANSDUCERS
# =============================================================================

def transducers_bisimilar(t1: Transducer, t2: Transducer,
                          words: Iterable[Iterable[Any]]) -> EquivalenceReport:
    """Step both transducers in lockstep along each word, comparing outputs."""
    checked = 0
    for word in words:
        consumed = Prefix.empty()
        left, right = t1, t2
        for x in word:
            consumed = consumed.extend(x)
            y_left, left = left.step(x)
            y_right, right = right.step(x)
            if y_left != y_right:
                return EquivalenceReport.failed(
                    checked, _mismatch(consumed, y_left, y_right, "transducer outputs differ"))
            checked += 1
    return EquivalenceReport.passed(checked)


def bisimilar_to_depth(t1: Transducer, t2: Transducer, alphabet: Sequence,
                       config: Optional[CheckConfig] = None) -> EquivalenceReport:
    """
    Unfold both transducers over EVERY word of length <= config.depth.

    Branches share their common history: successors are immutable, so
    each node of the unfolding tree is stepped once.
    """
    cfg = resolve(config)
    checked = 0
    stack: List[Tuple[Prefix, Transducer, Transducer]] = [(Prefix.empty(), t1, t2)]
    while stack:
        consumed, left, right = stack.pop()
        if consumed.length >= cfg.depth:
            continue
        for x in alphabet:
            y_left, next_left = left.step(x)
            y_right, next_right = right.step(x)
            word = consumed.extend(x)
            if y_left != y_right:
                return EquivalenceReport.failed(
                    checked, _mismatch(word, y_left, y_right, "transducer outputs differ"))
            checked += 1
            stack.append((word, next_left, next_right))
    logger.debug("bisimilar to depth %d over %d steps", cfg.depth, checked)
    return EquivalenceReport.passed(checked)


# =============================================================================
# STREAMS
# =============================================================================

def streams_bisimilar(s1: Stream, s2: Stream, depth: Optional[int] = None,
                      config: Optional[CheckConfig] = None) -> EquivalenceReport:
    """Compare heads, then tails, up to `depth` cells (default config.depth)."""
    limit = resolve(config).depth if depth is None else depth
    seen = Prefix.empty()
    left, right = s1, s2
    for index in range(limit):
        if left.head != right.head:
            return EquivalenceReport.failed(
                index, _mismatch(seen.extend(left.head), left.head, right.head,
                                 f"streams differ at index {index}"))
        seen = seen.extend(left.head)
        left, right = left.tail, right.tail
    return EquivalenceReport.passed(limit)


def find_causality_violation(stream_fn: Callable[[Stream], Stream],
                             inputs: Sequence[Stream],
                             depth: Optional[int] = None,
                             config: Optional[CheckConfig] = None) -> Optional[Counterexample]:
    """
    Search for evidence that `stream_fn` is not causal.

    For every pair of sample inputs sharing their first k elements, the
    outputs must share their first k elements. Returns the first pair
    that breaks this, or None.
    """
    limit = resolve(config).depth if depth is None else depth
    observed = [(s.take(limit), stream_fn(s).take(limit)) for s in inputs]
    for i, (in_a, out_a) in enumerate(observed):
        for in_b, out_b in observed[i + 1:]:
            shared = _common_length(in_a, in_b)
            diverged = _common_length(out_a, out_b)
            if diverged < shared:
                common = in_a.take(shared)
                return Counterexample(
                    inputs=common,
                    left=out_a.take(diverged + 1),
                    right=out_b.take(diverged + 1),
                    error=Error(
                        code=ErrorCode.CAUSALITY_VIOLATION,
                        message=(f"inputs agree on {shared} elements but outputs "
                                 f"differ at index {diverged}"),
                        context=(("shared_input", repr(common)),
                                 ("left_output", repr(out_a)),
                                 ("right_output", repr(out_b))),
                    ),
                )
    return None


def _common_length(a: Prefix, b: Prefix) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n
