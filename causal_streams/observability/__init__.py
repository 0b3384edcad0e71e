"""
Observability & Audit Layer

RESPONSIBILITY: Record what an interpretation committed, step by step
ALLOWED INPUTS: StepRecords emitted by the interpreters
OUTPUTS: Read-only record lists, the committed output prefix

WHAT THIS LAYER MUST NOT DO:
============================
- Modify interpretation behaviour
- Force stream cells that the consumer has not requested
- Rewrite or remove a record once collected
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional

from ..contracts.prefix import Prefix


@dataclass(frozen=True)
class StepRecord:
    """One committed step: input index, the input consumed, the output emitted."""
    index: int
    input: Any
    output: Any
    source: str  # "transducer" | "causal"


class TraceCollector:
    """
    Append-only collector of interpretation steps.

    Records arrive in the order outputs are committed, which for a
    correct interpreter is index order with no gaps or repeats.
    """

    def __init__(self, name: str = "trace"):
        self._name = name
        self._records: List[StepRecord] = []

    def collect(self, record: StepRecord):
        """Collect a step record (append-only)."""
        self._records.append(record)

    def get_records(self, source: Optional[str] = None) -> List[StepRecord]:
        """Get records, optionally filtered by interpreter kind."""
        records = self._records
        if source:
            records = [r for r in records if r.source == source]
        return list(records)

    def committed_outputs(self) -> Prefix:
        return Prefix(items=tuple(r.output for r in self._records))

    def consumed_inputs(self) -> Prefix:
        return Prefix(items=tuple(r.input for r in self._records))

    @property
    def name(self) -> str:
        return self._name

    @property
    def entry_count(self) -> int:
        return len(self._records)


__all__ = ['StepRecord', 'TraceCollector']
