"""Bidirectional conversion between causal functions and transducers."""

from .converters import transducer_to_causal, causal_to_transducer, CausalTransducer

__all__ = [
    'transducer_to_causal',
    'causal_to_transducer',
    'CausalTransducer',
]
