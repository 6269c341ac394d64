# queue_search/algorithms/greedy.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.node import Node
from ..core.search import QueueSearch
from .best_first import best_first_search
from .heuristics import heuristic_from_problem, zero_heuristic

def greedy_best_first_search(problem, heuristic: Optional[Callable[[Node], float]] = None,
                             max_expansions: Optional[int] = None,
                             strategy: Optional[QueueSearch] = None, is_running=None):
    h = heuristic or heuristic_from_problem(problem) or zero_heuristic
    # greedy: f = 0 + h
    return best_first_search(problem, f=lambda n: 0.0, h=h, name="Greedy",
                             max_expansions=max_expansions, strategy=strategy, is_running=is_running)
