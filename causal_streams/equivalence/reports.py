"""
Equivalence Reports

Checker results are data: a verdict, how much was checked, and the
first counterexample found. Nothing here raises.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..contracts.base import Error
from ..contracts.prefix import Prefix


@dataclass(frozen=True)
class Counterexample:
    """Input on which two sides were observed to differ."""
    inputs: Prefix
    left: Any
    right: Any
    error: Error


@dataclass(frozen=True)
class EquivalenceReport:
    """
    Result of a sampled or bounded-depth equivalence check.

    `equivalent` only means no difference was found within the sample;
    it never claims full extensional equivalence or bisimilarity.
    """
    equivalent: bool
    checked: int
    counterexample: Optional[Counterexample] = None

    def __bool__(self) -> bool:
        return self.equivalent

    @staticmethod
    def passed(checked: int) -> EquivalenceReport:
        return EquivalenceReport(equivalent=True, checked=checked)

    @staticmethod
    def failed(checked: int, counterexample: Counterexample) -> EquivalenceReport:
        return EquivalenceReport(equivalent=False, checked=checked, counterexample=counterexample)


class Verdict(Enum):
    """Outcome of an exact finite-state bisimulation check."""
    BISIMILAR = "bisimilar"
    DISTINGUISHED = "distinguished"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class BisimulationResult:
    verdict: Verdict
    states_explored: int
    word: Optional[Prefix] = None   # shortest distinguishing input, if DISTINGUISHED
    error: Optional[Error] = None

    def __bool__(self) -> bool:
        return self.verdict is Verdict.BISIMILAR
