"""
Checker configuration.

Bounds for the sampled and bounded-depth equivalence checks. The
defaults are conservative; CheckConfig.from_env() lets a test harness
widen them without code changes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os


DEFAULT_DEPTH = 6
DEFAULT_MAX_STATES = 10_000
DEFAULT_SAMPLE_LIMIT = 4096
DEFAULT_SEED = 0

ENV_PREFIX = "CAUSAL_STREAMS_"


@dataclass(frozen=True)
class CheckConfig:
    """Configuration for causality and equivalence checkers."""
    depth: int = DEFAULT_DEPTH              # unfolding depth / max prefix length
    max_states: int = DEFAULT_MAX_STATES    # product-graph budget for exact checks
    sample_limit: int = DEFAULT_SAMPLE_LIMIT  # cap on enumerated prefixes
    seed: int = DEFAULT_SEED                # seed for random prefix sampling

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError("depth must be >= 0")
        if self.max_states < 1:
            raise ValueError("max_states must be >= 1")
        if self.sample_limit < 1:
            raise ValueError("sample_limit must be >= 1")

    @staticmethod
    def from_env(environ: Optional[dict] = None) -> CheckConfig:
        """Build a config, overriding defaults from CAUSAL_STREAMS_* variables."""
        env = os.environ if environ is None else environ
        return CheckConfig(
            depth=int(env.get(ENV_PREFIX + "DEPTH", DEFAULT_DEPTH)),
            max_states=int(env.get(ENV_PREFIX + "MAX_STATES", DEFAULT_MAX_STATES)),
            sample_limit=int(env.get(ENV_PREFIX + "SAMPLE_LIMIT", DEFAULT_SAMPLE_LIMIT)),
            seed=int(env.get(ENV_PREFIX + "SEED", DEFAULT_SEED)),
        )


def resolve(config: Optional[CheckConfig]) -> CheckConfig:
    return config or CheckConfig()
