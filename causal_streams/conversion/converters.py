"""
Converters
==========

Move between the two representations without changing observable
behaviour.

transducer_to_causal(t):
    component(n)(p) = outputs of folding t.step over p, final state dropped

causal_to_transducer(c):
    state = input prefix accumulated so far (initially empty)
    step(x) = (apply_next(c, state, x), state.extend(x))

Both are total. The second uses the same accumulation strategy as
interpret_causal, so the two agree step for step.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Tuple
import logging

from ..contracts.prefix import Prefix
from ..core.causal import CausalFunction, apply_next
from ..core.transducer import Transducer, run_fold


logger = logging.getLogger(__name__)


def transducer_to_causal(t: Transducer) -> CausalFunction:
    """
    Causal function whose components fold `t` over the input prefix.

    Folding commutes with extension: the outputs for p.extend(x) are
    the outputs for p followed by one more step, so the causality law
    holds by construction.
    """
    def transform(prefix: Prefix) -> Prefix:
        outputs, _ = run_fold(t, prefix)
        return outputs

    logger.debug("converted transducer %r to causal function", t)
    return CausalFunction(transform, name=f"causal[{t!r}]")


@dataclass(frozen=True)
class CausalTransducer(Transducer):
    """Transducer whose hidden state is the input history of a causal function."""
    causal: CausalFunction
    history: Prefix = field(default_factory=Prefix.empty)

    def step(self, x: Any) -> Tuple[Any, Transducer]:
        y = apply_next(self.causal, self.history, x)
        return y, CausalTransducer(causal=self.causal, history=self.history.extend(x))

    def __repr__(self) -> str:
        return f"transducer[{self.causal.name}]@{self.history.length}"


def causal_to_transducer(c: CausalFunction) -> Transducer:
    logger.debug("converted causal function %s to transducer", c.name)
    return CausalTransducer(causal=c)
