# queue_search/algorithms/heuristics.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.node import Node

def heuristic_from_problem(problem) -> Optional[Callable[[Node], float]]:
    """Lift an optional problem.heuristic(state) to a node heuristic."""
    if hasattr(problem, "heuristic"):
        def h(n: Node) -> float:
            state = getattr(n, "state", n)
            val = problem.heuristic(state)
            return 0.0 if val is None else float(val)
        return h
    return None

def zero_heuristic(n: Node) -> float:
    return 0.0
