"""
Causal Streams
==============

Two equivalent machine models for productive transformations of
infinite sequences:

- Causal functions: families of prefix transforms obeying the
  truncation-commuting law
- Transducers: explicit step machines with immutable state

INVARIANTS:
- Exactly one output is committed per input consumed
- A committed output is never revised
- Converting between the models preserves observable behaviour

Layers:
- contracts: prefixes, errors
- core: streams, causal functions, transducers
- interpretation: lazy stream interpreters
- conversion: transducer <-> causal function
- equivalence: sampled and bounded checks, exact finite-state bisimulation
- observability: step traces
"""

__version__ = "0.1.0"

from .config import CheckConfig
from .contracts import (
    Prefix,
    ErrorCode,
    Error,
    CausalStreamsError,
    EmptyPrefixError,
    PrefixRangeError,
    LengthMismatchError,
    CausalityViolationError,
    StreamExhaustedError,
)
from .core import (
    Stream,
    CausalFunction,
    apply_one,
    apply_next,
    causal_function,
    causal_from_history,
    causal_map,
    compose_causal,
    Transducer,
    StateTransducer,
    run_fold,
    running_sum,
    lift,
    accumulate,
    delay,
    compose,
    pair,
    table_transducer,
)
from .interpretation import interpret_transducer, interpret_causal, run_transducer, run_causal
from .conversion import transducer_to_causal, causal_to_transducer
from .equivalence import (
    EquivalenceReport,
    Verdict,
    enumerate_prefixes,
    sample_prefixes,
    causal_equivalent,
    check_causality_law,
    transducers_bisimilar,
    bisimilar_to_depth,
    streams_bisimilar,
    find_causality_violation,
    bisimilar_finite,
)
from .observability import TraceCollector, StepRecord

__all__ = [
    '__version__',
    'CheckConfig',
    # Contracts
    'Prefix',
    'ErrorCode',
    'Error',
    'CausalStreamsError',
    'EmptyPrefixError',
    'PrefixRangeError',
    'LengthMismatchError',
    'CausalityViolationError',
    'StreamExhaustedError',
    # Core
    'Stream',
    'CausalFunction',
    'apply_one',
    'apply_next',
    'causal_function',
    'causal_from_history',
    'causal_map',
    'compose_causal',
    'Transducer',
    'StateTransducer',
    'run_fold',
    'running_sum',
    'lift',
    'accumulate',
    'delay',
    'compose',
    'pair',
    'table_transducer',
    # Interpretation
    'interpret_transducer',
    'interpret_causal',
    'run_transducer',
    'run_causal',
    # Conversion
    'transducer_to_causal',
    'causal_to_transducer',
    # Equivalence
    'EquivalenceReport',
    'Verdict',
    'enumerate_prefixes',
    'sample_prefixes',
    'causal_equivalent',
    'check_causality_law',
    'transducers_bisimilar',
    'bisimilar_to_depth',
    'streams_bisimilar',
    'find_causality_violation',
    'bisimilar_finite',
    # Observability
    'TraceCollector',
    'StepRecord',
]
