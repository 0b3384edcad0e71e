"""
Core Representations
====================

The two machine models for causal stream transformations, plus the
lazy stream type they are interpreted over.

Modules:
- stream: lazy memoized infinite streams
- causal: causal functions (prefix transform families)
- transducer: explicit step machines
"""

from .stream import Stream
from .causal import (
    CausalFunction,
    apply_one,
    apply_next,
    causality_violation,
    causal_function,
    causal_from_history,
    causal_map,
    compose_causal,
)
from .transducer import (
    Transducer,
    StateTransducer,
    ComposedTransducer,
    PairedTransducer,
    TableRule,
    run_fold,
    running_sum,
    lift,
    accumulate,
    delay,
    compose,
    pair,
    table_transducer,
)

__all__ = [
    'Stream',
    'CausalFunction',
    'apply_one',
    'apply_next',
    'causality_violation',
    'causal_function',
    'causal_from_history',
    'causal_map',
    'compose_causal',
    'Transducer',
    'StateTransducer',
    'ComposedTransducer',
    'PairedTransducer',
    'TableRule',
    'run_fold',
    'running_sum',
    'lift',
    'accumulate',
    'delay',
    'compose',
    'pair',
    'table_transducer',
]
