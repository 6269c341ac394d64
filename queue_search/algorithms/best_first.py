from __future__ import annotations
from typing import Callable, Optional
from ..core.budgets import ContinuePredicate
from ..core.frontiers import PriorityQueue
from ..core.node import Node
from ..core.metrics import SearchResult
from ..core.problem import Problem
from ..core.search import QueueSearch
from ..core.strategies import ReducedFrontierGraphSearch
from .runner import solve

def best_first_search(
    problem: Problem,
    f: Callable[[Node], float],
    name: str = "BestFirst",
    h: Optional[Callable[[Node], float]] = None,
    max_expansions: Optional[int] = None,
    strategy: Optional[QueueSearch] = None,
    is_running: Optional[ContinuePredicate] = None,
) -> SearchResult:
    """
    Priority-frontier search ordered by f(n) (+ h(n) if given).
    Defaults to the reduced-frontier graph search, which adopts the frontier's
    key to decide which of two nodes for one state to keep.
    """
    def fscore(n: Node) -> float:
        base = float(f(n))
        if h is None:
            return base
        hv = h(n)
        return base + (0.0 if hv is None else float(hv))

    strategy = strategy if strategy is not None else ReducedFrontierGraphSearch()
    frontier = PriorityQueue(key=fscore)
    return solve(f"{name}[{strategy.name}]", problem, frontier, strategy, max_expansions, is_running)
