"""
Equivalence Layer
=================

Testing interface for the three equivalence relations, intended for
test harnesses rather than production control flow.

Modules:
- samples: finite prefix sample sets
- bounded: sampled / bounded-depth checks
- finite: exact product-graph check for finite-state transducers
- reports: result types
"""

from .reports import Counterexample, EquivalenceReport, Verdict, BisimulationResult
from .samples import enumerate_prefixes, sample_prefixes
from .bounded import (
    causal_equivalent,
    check_causality_law,
    transducers_bisimilar,
    bisimilar_to_depth,
    streams_bisimilar,
    find_causality_violation,
)
from .finite import product_graph, bisimilar_finite

__all__ = [
    'Counterexample',
    'EquivalenceReport',
    'Verdict',
    'BisimulationResult',
    'enumerate_prefixes',
    'sample_prefixes',
    'causal_equivalent',
    'check_causality_law',
    'transducers_bisimilar',
    'bisimilar_to_depth',
    'streams_bisimilar',
    'find_causality_violation',
    'product_graph',
    'bisimilar_finite',
]
