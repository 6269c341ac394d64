from __future__ import annotations
from typing import Optional
from ..core.budgets import ContinuePredicate
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import Problem
from ..core.search import QueueSearch
from ..core.strategies import GraphSearch
from .runner import solve

def breadth_first_search(
    problem: Problem,
    strategy: Optional[QueueSearch] = None,
    max_expansions: Optional[int] = None,
    is_running: Optional[ContinuePredicate] = None,
) -> SearchResult:
    """BFS = FIFO frontier. Defaults to graph search (explored set)."""
    strategy = strategy if strategy is not None else GraphSearch()
    return solve(f"BFS[{strategy.name}]", problem, FIFOQueue(), strategy, max_expansions, is_running)
