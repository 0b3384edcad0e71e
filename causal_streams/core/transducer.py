"""
Transducers
===========

Explicit state machines exposing exactly one operation:

    step(x) -> (y, successor)

GUARANTEES:
===========
1. step is total and deterministic
2. step never mutates; it returns a successor transducer
3. Old transducers stay valid, so a run can be branched or replayed
   from any earlier point

Nothing outside this module looks at a transducer's state. Equivalence
is decided purely on observed outputs (see equivalence/).
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, Mapping, Tuple

from ..contracts.prefix import Prefix


StepRule = Callable[[Any, Any], Tuple[Any, Any]]


class Transducer(ABC):
    """Abstract step machine A -> B with hidden state."""

    @abstractmethod
    def step(self, x: Any) -> Tuple[Any, "Transducer"]:
        """Consume one input, return (output, successor)."""


@dataclass(frozen=True)
class StateTransducer(Transducer):
    """
    Transducer from an explicit state value and a step rule.

    rule(state, x) must return (output, next_state) and must not mutate
    `state`. Two StateTransducers compare equal when they share the rule
    object and have equal states, which lets exact checkers detect
    revisited states. Behavioural equivalence never depends on this.
    """
    state: Any
    rule: StepRule
    name: str = field(default="transducer", compare=False)

    def step(self, x: Any) -> Tuple[Any, Transducer]:
        y, next_state = self.rule(self.state, x)
        return y, StateTransducer(state=next_state, rule=self.rule, name=self.name)

    def __repr__(self) -> str:
        return f"{self.name}({self.state!r})"


def run_fold(t: Transducer, inputs: Iterable[Any]) -> Tuple[Prefix, Transducer]:
    """Fold step over the inputs left to right; return outputs and final transducer."""
    outputs = []
    current = t
    for x in inputs:
        y, current = current.step(x)
        outputs.append(y)
    return Prefix(items=tuple(outputs)), current


# =============================================================================
# LIBRARY
# =============================================================================

def _running_sum_rule(total, x):
    total = x + total
    return total, total


def running_sum(initial: Any = 0) -> StateTransducer:
    """Hidden state is the accumulated total; step(n, x) = (x+n, x+n)."""
    return StateTransducer(state=initial, rule=_running_sum_rule, name="running_sum")


def lift(f: Callable[[Any], Any]) -> StateTransducer:
    """Stateless transducer applying f to each input."""
    def rule(state, x):
        return f(x), state
    return StateTransducer(state=None, rule=rule, name=f"lift({getattr(f, '__name__', 'f')})")


def accumulate(fn: Callable[[Any, Any], Any], initial: Any) -> StateTransducer:
    """Emit fn(acc, x) and carry it forward, like itertools.accumulate with a seed."""
    def rule(acc, x):
        acc = fn(acc, x)
        return acc, acc
    return StateTransducer(state=initial, rule=rule, name=f"accumulate({getattr(fn, '__name__', 'fn')})")


def _delay_rule(previous, x):
    return previous, x


def delay(initial: Any) -> StateTransducer:
    """Emit the previous input, starting with `initial`. Output n sees inputs < n only."""
    return StateTransducer(state=initial, rule=_delay_rule, name="delay")


@dataclass(frozen=True)
class ComposedTransducer(Transducer):
    """Sequential composition: outputs of `first` feed `second`."""
    first: Transducer
    second: Transducer

    def step(self, x: Any) -> Tuple[Any, Transducer]:
        middle, first = self.first.step(x)
        y, second = self.second.step(middle)
        return y, ComposedTransducer(first=first, second=second)


@dataclass(frozen=True)
class PairedTransducer(Transducer):
    """Run two transducers on the same input, emitting output pairs."""
    left: Transducer
    right: Transducer

    def step(self, x: Any) -> Tuple[Any, Transducer]:
        y_left, left = self.left.step(x)
        y_right, right = self.right.step(x)
        return (y_left, y_right), PairedTransducer(left=left, right=right)


def compose(first: Transducer, second: Transducer) -> Transducer:
    return ComposedTransducer(first=first, second=second)


def pair(left: Transducer, right: Transducer) -> Transducer:
    return PairedTransducer(left=left, right=right)


@dataclass(frozen=True)
class TableRule:
    """Step rule backed by a finite transition table {(state, x): (y, state')}."""
    entries: Tuple[Tuple[Tuple[Hashable, Hashable], Tuple[Any, Hashable]], ...]
    _lookup: dict = field(default=None, init=False, compare=False, hash=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, '_lookup', dict(self.entries))

    def __call__(self, state, x):
        return self._lookup[(state, x)]


def table_transducer(table: Mapping[Tuple[Hashable, Hashable], Tuple[Any, Hashable]],
                     initial: Hashable) -> StateTransducer:
    """
    Finite-state transducer from a transition table.

    The table must be total over the states reachable from `initial`
    and every input symbol mentioned in it; otherwise ValueError.
    """
    alphabet = {x for (_, x) in table}
    seen = {initial}
    frontier = [initial]
    while frontier:
        state = frontier.pop()
        for x in alphabet:
            if (state, x) not in table:
                raise ValueError(f"transition table has no entry for state {state!r}, input {x!r}")
            _, next_state = table[(state, x)]
            if next_state not in seen:
                seen.add(next_state)
                frontier.append(next_state)

    entries = tuple(sorted(table.items(), key=repr))
    return StateTransducer(state=initial, rule=TableRule(entries=entries), name="table")
