"""
Interpretation Layer
====================

Pull-driven, side-effect-free producers of infinite output streams.
"""

from .interpreter import (
    interpret_transducer,
    interpret_causal,
    run_transducer,
    run_causal,
)

__all__ = [
    'interpret_transducer',
    'interpret_causal',
    'run_transducer',
    'run_causal',
]
