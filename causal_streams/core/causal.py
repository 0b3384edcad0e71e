"""
Causal Functions
================

Length-preserving prefix transforms, one component per length.

CAUSALITY LAW:
For every n and every prefix l of length n+1:

    component(n)(l.truncate()) == component(n+1)(l).truncate()

The first n outputs depend only on the first n inputs. Once an output
is committed, extending the input never changes it.

The law cannot be stored as data or verified for an unbounded family.
CausalFunction takes it as a documented precondition; causal_function()
samples it once at construction and rejects families that break it.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Optional
import logging

from ..contracts.base import Error, ErrorCode, LengthMismatchError, CausalityViolationError
from ..contracts.prefix import Prefix


logger = logging.getLogger(__name__)

PrefixTransform = Callable[[Prefix], Prefix]


class CausalFunction:
    """
    A family of prefix transforms C_n : Prefix(n, A) -> Prefix(n, B).

    PRECONDITION (unchecked):
    =========================
    `transform` is total, length-preserving and satisfies the causality
    law. Use causal_function() to sample the law before trusting a
    hand-written family.

    Instances are immutable and may be shared between interpretations.
    """

    __slots__ = ('_transform', '_name')

    def __init__(self, transform: PrefixTransform, name: Optional[str] = None):
        self._transform = transform
        self._name = name or getattr(transform, '__name__', 'causal')

    @property
    def name(self) -> str:
        return self._name

    def component(self, n: int) -> PrefixTransform:
        """The length-n component, guarded against length misuse."""
        if n < 0:
            raise ValueError("component index must be >= 0")

        def component_n(prefix: Prefix) -> Prefix:
            if prefix.length != n:
                raise LengthMismatchError(
                    f"component({n}) applied to a prefix of length {prefix.length}",
                    context=(("expected", str(n)), ("actual", str(prefix.length))),
                )
            output = self._transform(prefix)
            if not isinstance(output, Prefix):
                output = Prefix.from_iterable(output)
            if output.length != n:
                raise LengthMismatchError(
                    f"{self._name}: component({n}) returned a prefix of length {output.length}",
                    context=(("expected", str(n)), ("actual", str(output.length))),
                )
            return output

        return component_n

    def __call__(self, prefix: Prefix) -> Prefix:
        return self.component(prefix.length)(prefix)

    def __repr__(self) -> str:
        return f"CausalFunction({self._name})"


# =============================================================================
# OBSERVING A CAUSAL FUNCTION
# =============================================================================

def apply_one(c: CausalFunction, x: Any) -> Any:
    """Observe component(1) as a plain A -> B function."""
    return c.component(1)(Prefix.of(x)).last()


def apply_next(c: CausalFunction, prefix: Prefix, x: Any) -> Any:
    """
    Output produced for x, given the inputs already seen.

    apply_next(c, p, x) == c.component(n+1)(p.extend(x)).last()

    This is the step that drives interpretation. It replays the whole
    accumulated history, never just the newest input.
    """
    return c.component(prefix.length + 1)(prefix.extend(x)).last()


def causality_violation(c: CausalFunction, prefix: Prefix) -> Optional[Error]:
    """
    Check the causality law at one prefix of length n+1 >= 1.

    Returns None when component(n)(truncate(l)) == truncate(component(n+1)(l)),
    otherwise an Error describing both sides.
    """
    n = prefix.length - 1
    shorter = c.component(n)(prefix.truncate())
    longer = c.component(n + 1)(prefix).truncate()
    if shorter == longer:
        return None
    return Error(
        code=ErrorCode.CAUSALITY_VIOLATION,
        message=f"{c.name}: output prefix changed when input was extended at length {n}",
        context=(
            ("input", repr(prefix)),
            ("component_n", repr(shorter)),
            ("truncated_component_n_plus_1", repr(longer)),
        ),
    )


# =============================================================================
# CONSTRUCTORS
# =============================================================================

def causal_function(
    transform: PrefixTransform,
    samples: Iterable[Prefix] = (),
    name: Optional[str] = None,
) -> CausalFunction:
    """
    Checked factory: build a CausalFunction and sample the causality law.

    Every non-empty prefix in `samples` is checked once. Raises
    CausalityViolationError on the first prefix that breaks the law.
    Passing no samples degrades to the unchecked constructor.
    """
    c = CausalFunction(transform, name=name)
    checked = 0
    for prefix in samples:
        if prefix.length == 0:
            continue
        error = causality_violation(c, prefix)
        if error is not None:
            logger.debug("rejecting %s: %s", c.name, error.message)
            raise CausalityViolationError(error.message, context=error.context)
        checked += 1
    logger.debug("constructed %s, causality sampled on %d prefixes", c.name, checked)
    return c


def causal_from_history(g: Callable[[Prefix], Any], name: Optional[str] = None) -> CausalFunction:
    """
    Causal function whose i-th output is g(first i+1 inputs).

    Every causal function has this shape, so the result satisfies the
    law without further checking.
    """
    def transform(prefix: Prefix) -> Prefix:
        return Prefix(items=tuple(g(prefix.take(i + 1)) for i in range(prefix.length)))

    return CausalFunction(transform, name=name or getattr(g, '__name__', 'history'))


def causal_map(f: Callable[[Any], Any], name: Optional[str] = None) -> CausalFunction:
    """Elementwise map; output i depends only on input i."""
    def transform(prefix: Prefix) -> Prefix:
        return Prefix(items=tuple(f(x) for x in prefix))

    return CausalFunction(transform, name=name or getattr(f, '__name__', 'map'))


def compose_causal(first: CausalFunction, second: CausalFunction) -> CausalFunction:
    """Run `first`, then feed its output prefix to `second`."""
    def transform(prefix: Prefix) -> Prefix:
        return second(first(prefix))

    return CausalFunction(transform, name=f"{second.name}.{first.name}")
