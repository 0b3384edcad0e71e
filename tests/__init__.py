"""
Causal Streams Test Package

TEST AXIOMS:
=============
1. Productivity: one output per input consumed
2. Causality: committed outputs never change
3. Equivalence: conversions preserve observable behaviour
"""
