# queue_search/algorithms/weighted_astar.py
# Weighted A*: f = g + w*h. w > 1 focuses the search but gives up the optimality guarantee.
from __future__ import annotations
from typing import Callable, Optional
from ..core.node import Node
from ..core.search import QueueSearch
from .best_first import best_first_search
from .heuristics import heuristic_from_problem, zero_heuristic

def weighted_a_star_search(problem, w: float = 1.5, h: Optional[Callable[[Node], float]] = None,
                           max_expansions: Optional[int] = None,
                           strategy: Optional[QueueSearch] = None, is_running=None):
    if w < 1.0:
        raise ValueError(f"weight must be >= 1, got {w}")
    base_h = h or heuristic_from_problem(problem) or zero_heuristic
    return best_first_search(problem, f=lambda n: n.path_cost, h=lambda n: w * base_h(n),
                             name=f"WeightedA*(w={w})", max_expansions=max_expansions,
                             strategy=strategy, is_running=is_running)
