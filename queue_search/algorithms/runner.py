# queue_search/algorithms/runner.py
# Shared glue: run a QueueSearch on a problem and package the outcome as a SearchResult.
from __future__ import annotations
from typing import Optional
from ..core.budgets import ContinuePredicate, all_of, max_expansions as expansion_budget
from ..core.frontiers import Frontier
from ..core.metrics import SearchResult, MeasuredRun, NODES_EXPANDED
from ..core.problem import Problem
from ..core.search import QueueSearch
from ..core.utils import reconstruct_path

def solve(
    name: str,
    problem: Problem,
    frontier: Frontier,
    strategy: QueueSearch,
    max_expansions: Optional[int] = None,
    is_running: Optional[ContinuePredicate] = None,
    trace_memory: bool = True,
) -> SearchResult:
    predicate = all_of(
        expansion_budget(max_expansions) if max_expansions is not None else None,
        is_running,
    )
    with MeasuredRun(trace_memory=trace_memory) as meter:
        node = strategy.find_node(problem, frontier, predicate)

    metrics = dict(strategy.metrics)
    expanded = metrics[NODES_EXPANDED]
    if node is None:
        return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                            status=strategy.status.value, metrics=metrics)
    return SearchResult(name, True, reconstruct_path(node), node.path_cost, expanded,
                        meter.elapsed, meter.peak_kb, status=strategy.status.value, metrics=metrics)
