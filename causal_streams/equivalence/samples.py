"""
Prefix sample sets for the sampled checkers.

Extensional equality over an infinite domain is not computable, so
every check runs over one of these finite sets.
"""

from __future__ import annotations
from typing import Iterator, List, Optional, Sequence
import itertools
import random

from ..config import CheckConfig, resolve
from ..contracts.prefix import Prefix


def enumerate_prefixes(alphabet: Sequence, max_length: Optional[int] = None,
                       config: Optional[CheckConfig] = None) -> Iterator[Prefix]:
    """
    Every word over `alphabet` of length 0..max_length, shortest first.

    Stops after config.sample_limit prefixes. max_length defaults to
    config.depth.
    """
    cfg = resolve(config)
    limit = cfg.depth if max_length is None else max_length
    produced = 0
    for n in range(limit + 1):
        for word in itertools.product(alphabet, repeat=n):
            if produced >= cfg.sample_limit:
                return
            yield Prefix(items=word)
            produced += 1


def sample_prefixes(alphabet: Sequence, max_length: int, count: int,
                    config: Optional[CheckConfig] = None) -> List[Prefix]:
    """`count` random words of length 0..max_length, reproducible via config.seed."""
    cfg = resolve(config)
    rng = random.Random(cfg.seed)
    symbols = list(alphabet)
    return [
        Prefix(items=tuple(rng.choice(symbols) for _ in range(rng.randint(0, max_length))))
        for _ in range(count)
    ]
