# queue_search/algorithms/dfs.py
# Depth-First Search (DFS): a LIFO stack frontier driven by any duplicate-handling strategy.
from __future__ import annotations
from typing import Optional
from ..core.budgets import ContinuePredicate
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import Problem
from ..core.search import QueueSearch
from ..core.strategies import GraphSearch
from .runner import solve

def depth_first_search(
    problem: Problem,
    strategy: Optional[QueueSearch] = None,
    max_expansions: Optional[int] = None,
    is_running: Optional[ContinuePredicate] = None,
) -> SearchResult:
    # TreeSearch here is only safe on acyclic spaces; pass a budget if unsure
    strategy = strategy if strategy is not None else GraphSearch()
    return solve(f"DFS[{strategy.name}]", problem, LIFOStack(), strategy, max_expansions, is_running)
