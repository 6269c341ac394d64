# queue_search/algorithms/astar.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.node import Node
from ..core.search import QueueSearch
from .best_first import best_first_search
from .heuristics import heuristic_from_problem

def a_star_search(problem, heuristic: Optional[Callable[[Node], float]] = None,
                  max_expansions: Optional[int] = None,
                  strategy: Optional[QueueSearch] = None, is_running=None):
    h = heuristic or heuristic_from_problem(problem)
    return best_first_search(problem, f=lambda n: n.path_cost, h=h, name="A*",
                             max_expansions=max_expansions, strategy=strategy, is_running=is_running)
