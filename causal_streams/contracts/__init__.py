"""
Shared contracts: prefixes and error types.

ONLY pure data lives here. Every other layer imports from contracts,
never the other way around.
"""

from .base import (
    ErrorCode,
    Error,
    CausalStreamsError,
    EmptyPrefixError,
    PrefixRangeError,
    LengthMismatchError,
    CausalityViolationError,
    StreamExhaustedError,
)
from .prefix import Prefix

__all__ = [
    'ErrorCode',
    'Error',
    'CausalStreamsError',
    'EmptyPrefixError',
    'PrefixRangeError',
    'LengthMismatchError',
    'CausalityViolationError',
    'StreamExhaustedError',
    'Prefix',
]
