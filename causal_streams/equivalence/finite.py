"""
Exact Bisimulation for Finite-State Transducers
===============================================

When both transducers reach only finitely many distinct (hashable)
successors over a finite alphabet, bisimilarity is decidable: explore
the product graph of reachable pairs breadth-first and compare outputs
on every edge. If every edge agrees, the set of reachable pairs is a
bisimulation.

Transducer equality is used only to notice revisited pairs. The verdict
itself depends on observed outputs alone.

VERDICTS:
- BISIMILAR: every reachable pair agrees on every symbol
- DISTINGUISHED: a shortest distinguishing word is returned
- INCONCLUSIVE: state budget exceeded, or states are not hashable
"""

from __future__ import annotations
from collections import deque
from typing import Optional, Sequence
import logging

import networkx as nx

from ..config import CheckConfig, resolve
from ..contracts.base import Error, ErrorCode
from ..contracts.prefix import Prefix
from ..core.transducer import Transducer
from .reports import BisimulationResult, Verdict


logger = logging.getLogger(__name__)


class _UnhashableState(TypeError):
    """A reachable pair cannot be stored in the product graph."""

    def __init__(self, explored: int, cause: TypeError):
        super().__init__(str(cause))
        self.explored = explored


def _known(graph: nx.MultiDiGraph, pair) -> bool:
    try:
        hash(pair)
    except TypeError as exc:
        raise _UnhashableState(graph.number_of_nodes(), exc) from exc
    return pair in graph


def product_graph(t1: Transducer, t2: Transducer, alphabet: Sequence,
                  config: Optional[CheckConfig] = None) -> nx.MultiDiGraph:
    """
    Reachable pairs of the product machine, as a directed graph.

    One edge per symbol, keyed by it, carrying `symbol` and the two
    outputs (`left`, `right`).
    Exploration stops when a pair beyond config.max_states is reached;
    graph.graph['complete'] is False in that case.
    Raises TypeError if a reachable pair is not hashable.
    """
    cfg = resolve(config)
    root = (t1, t2)
    graph = nx.MultiDiGraph()
    _known(graph, root)
    graph.add_node(root)
    queue = deque([root])
    complete = True
    while queue and complete:
        node = queue.popleft()
        left, right = node
        for x in alphabet:
            y_left, next_left = left.step(x)
            y_right, next_right = right.step(x)
            target = (next_left, next_right)
            if not _known(graph, target):
                if graph.number_of_nodes() >= cfg.max_states:
                    complete = False
                    break
                queue.append(target)
            graph.add_edge(node, target, key=x, symbol=x, left=y_left, right=y_right)
    graph.graph['root'] = root
    graph.graph['complete'] = complete
    return graph


def bisimilar_finite(t1: Transducer, t2: Transducer, alphabet: Sequence,
                     config: Optional[CheckConfig] = None) -> BisimulationResult:
    """Decide bisimilarity of two finite-state transducers over `alphabet`."""
    cfg = resolve(config)
    try:
        graph = product_graph(t1, t2, alphabet, cfg)
    except _UnhashableState as exc:
        return BisimulationResult(
            verdict=Verdict.INCONCLUSIVE,
            states_explored=exc.explored,
            error=Error(code=ErrorCode.UNHASHABLE_STATE,
                        message=f"transducer states are not hashable: {exc}"),
        )

    root = graph.graph['root']
    best: Optional[Prefix] = None
    for source, _, data in graph.edges(data=True):
        if data['left'] == data['right']:
            continue
        path = nx.shortest_path(graph, root, source)
        symbols = [_any_symbol(graph, a, b) for a, b in zip(path, path[1:])]
        word = Prefix(items=tuple(symbols) + (data['symbol'],))
        if best is None or word.length < best.length:
            best = word

    explored = graph.number_of_nodes()
    if best is not None:
        logger.debug("distinguished after %d pairs by %r", explored, best)
        return BisimulationResult(verdict=Verdict.DISTINGUISHED, states_explored=explored, word=best)

    if not graph.graph['complete']:
        return BisimulationResult(
            verdict=Verdict.INCONCLUSIVE,
            states_explored=explored,
            error=Error(code=ErrorCode.STATE_SPACE_EXCEEDED,
                        message=f"more than {cfg.max_states} reachable state pairs"),
        )
    logger.debug("bisimilar over %d reachable pairs", explored)
    return BisimulationResult(verdict=Verdict.BISIMILAR, states_explored=explored)


def _any_symbol(graph: nx.MultiDiGraph, source, target):
    return next(iter(graph[source][target].values()))['symbol']
