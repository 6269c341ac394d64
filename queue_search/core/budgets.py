# queue_search/core/budgets.py
# Continue predicates for bounding a search run. Each takes the live Metrics and
# returns False once the run should stop.
from __future__ import annotations
import time
from typing import Callable, Optional
from .metrics import Metrics, NODES_EXPANDED

ContinuePredicate = Callable[[Metrics], bool]


def max_expansions(limit: int) -> ContinuePredicate:
    """Stop after `limit` node expansions."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    def is_running(m: Metrics) -> bool:
        return m.get(NODES_EXPANDED, 0) < limit
    return is_running


def time_limit(seconds: float) -> ContinuePredicate:
    """
    Stop once `seconds` of wall-clock time passed since the run began.

    The clock starts at the first check and restarts whenever the metrics show
    no expansions yet, so one predicate can be reused across runs.
    """
    start: Optional[float] = None
    def is_running(m: Metrics) -> bool:
        nonlocal start
        now = time.perf_counter()
        if start is None or m.get(NODES_EXPANDED, 0) == 0:
            start = now
        return now - start < seconds
    return is_running


def all_of(*predicates: Optional[ContinuePredicate]) -> Optional[ContinuePredicate]:
    """Combine predicates; None entries are ignored. Returns None if nothing is left."""
    active = [p for p in predicates if p is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]
    return lambda m: all(p(m) for p in active)
