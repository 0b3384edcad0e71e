"""
Property Tests for the Causal Stream Laws
Stand-ins for the round-trip, congruence and causality proofs.
"""

from hypothesis import given, settings, strategies as st

from causal_streams import (
    CheckConfig, compose, lift, running_sum, causal_from_history,
    interpret_causal, interpret_transducer, transducer_to_causal, causal_to_transducer,
    enumerate_prefixes, causal_equivalent, check_causality_law, bisimilar_to_depth,
    streams_bisimilar, bisimilar_finite, Verdict, apply_next,
)
from causal_streams.core.causal import causality_violation
from tests.fixtures import (
    ALPHABET, finite_transducers, history_functions, prefixes, input_streams,
    parity_two_states, parity_four_states,
)

SHALLOW = CheckConfig(depth=4)


def sample_set():
    return list(enumerate_prefixes(ALPHABET, 4))


# =============================================================================
# CAUSALITY LAW
# =============================================================================

@given(history_functions(), prefixes(min_length=1))
def test_causality_law_history_functions(c, l):
    """component(n)(truncate(l)) == truncate(component(n+1)(l))"""
    assert c(l.truncate()) == c(l).truncate()


@given(finite_transducers(), prefixes(min_length=1))
def test_causality_law_folded_transducers(t, l):
    c = transducer_to_causal(t)
    assert causality_violation(c, l) is None


@settings(max_examples=30)
@given(finite_transducers())
def test_causality_law_sampled_exhaustively(t):
    assert check_causality_law(transducer_to_causal(t), sample_set())


@given(history_functions(), prefixes(), st.sampled_from(ALPHABET))
def test_apply_next_correctness(c, p, x):
    assert apply_next(c, p, x) == c.component(p.length + 1)(p.extend(x)).last()


# =============================================================================
# ROUND TRIPS
# =============================================================================

@settings(max_examples=30)
@given(history_functions())
def test_round_trip_causal(c):
    """transducer_to_causal(causal_to_transducer(c)) is causally equivalent to c."""
    assert causal_equivalent(transducer_to_causal(causal_to_transducer(c)), c, sample_set())


@settings(max_examples=30)
@given(finite_transducers())
def test_round_trip_transducer(t):
    """causal_to_transducer(transducer_to_causal(t)) is bisimilar to t."""
    assert bisimilar_to_depth(causal_to_transducer(transducer_to_causal(t)), t, ALPHABET, SHALLOW)


@settings(max_examples=30)
@given(history_functions())
def test_conversion_idempotent(c):
    """causal -> transducer -> causal -> transducer is bisimilar to one conversion."""
    once = causal_to_transducer(c)
    twice = causal_to_transducer(transducer_to_causal(causal_to_transducer(c)))
    assert bisimilar_to_depth(once, twice, ALPHABET, SHALLOW)


# =============================================================================
# CONGRUENCE
# =============================================================================

@given(input_streams())
def test_congruence_causal(inputs):
    """Equivalent causal functions interpret to bisimilar streams."""
    by_history = causal_from_history(sum)
    by_fold = transducer_to_causal(running_sum())
    assert causal_equivalent(by_history, by_fold, sample_set())
    assert streams_bisimilar(interpret_causal(by_history, inputs), interpret_causal(by_fold, inputs), depth=10)


@given(input_streams())
def test_congruence_transducer(inputs):
    """Bisimilar transducers interpret to bisimilar streams."""
    two, four = parity_two_states(), parity_four_states()
    assert bisimilar_finite(two, four, ALPHABET).verdict is Verdict.BISIMILAR
    assert streams_bisimilar(interpret_transducer(two, inputs), interpret_transducer(four, inputs), depth=10)


@settings(max_examples=30)
@given(finite_transducers(), input_streams())
def test_congruence_after_identity_padding(t, inputs):
    padded = compose(t, lift(lambda y: y))
    assert bisimilar_finite(t, padded, ALPHABET).verdict is Verdict.BISIMILAR
    assert streams_bisimilar(interpret_transducer(t, inputs), interpret_transducer(padded, inputs), depth=10)


@given(finite_transducers(), input_streams())
def test_interpreters_agree_across_representations(t, inputs):
    assert streams_bisimilar(
        interpret_transducer(t, inputs),
        interpret_causal(transducer_to_causal(t), inputs),
        depth=10,
    )
