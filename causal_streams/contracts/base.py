"""
Base Contracts and Shared Types

Foundational error types used across all layers.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- This module is READ-ONLY from all layers
- Layers may import types but MUST NOT modify this module
- Errors are frozen dataclasses; exceptions only carry them
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple
from enum import Enum, auto


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    No silent fallbacks - every error state is enumerated.
    """
    # Prefix errors
    EMPTY_PREFIX = auto()
    PREFIX_OUT_OF_RANGE = auto()

    # Causal function errors
    LENGTH_MISMATCH = auto()
    CAUSALITY_VIOLATION = auto()

    # Stream errors
    STREAM_EXHAUSTED = auto()

    # Checker verdicts
    OUTPUT_MISMATCH = auto()
    STATE_SPACE_EXCEEDED = auto()
    UNHASHABLE_STATE = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be stored and compared.
    """
    code: ErrorCode
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            timestamp=self.timestamp,
            context=self.context + ((key, value),)
        )

    def context_value(self, key: str) -> Optional[str]:
        for k, v in self.context:
            if k == key:
                return v
        return None


# =============================================================================
# EXCEPTIONS (carry an Error, raised only on invariant violation)
# =============================================================================

class CausalStreamsError(Exception):
    """Base class for every exception raised by this package."""

    code: ErrorCode = ErrorCode.CAUSALITY_VIOLATION

    def __init__(self, message: str, context: Tuple[Tuple[str, str], ...] = ()):
        super().__init__(message)
        self.error = Error(code=self.code, message=message, context=tuple(context))


class EmptyPrefixError(CausalStreamsError, IndexError):
    """truncate()/last() on a length-0 prefix."""
    code = ErrorCode.EMPTY_PREFIX


class PrefixRangeError(CausalStreamsError, IndexError):
    """take(k) with k outside 0..length."""
    code = ErrorCode.PREFIX_OUT_OF_RANGE


class LengthMismatchError(CausalStreamsError, ValueError):
    """A component was given, or returned, a prefix of the wrong length."""
    code = ErrorCode.LENGTH_MISMATCH


class CausalityViolationError(CausalStreamsError, ValueError):
    """A prefix transform family does not satisfy the causality law."""
    code = ErrorCode.CAUSALITY_VIOLATION


class StreamExhaustedError(CausalStreamsError, RuntimeError):
    """A finite upstream source ran dry while an infinite stream was expected."""
    code = ErrorCode.STREAM_EXHAUSTED
