# queue_search/problems/checks.py
from __future__ import annotations
import logging
import math
from collections import deque
from ..core.errors import ProblemContractViolation

logger = logging.getLogger(__name__)

def sanity_check_problem(problem, max_states: int = 10_000):
    """Walks states breadth-first and checks step_cost is never None, NaN or negative."""
    seen = set()
    q = deque([problem.initial_state()])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise ProblemContractViolation(f"step_cost is None for (s={s}, a={a}, s'={s2})")
            if math.isnan(float(cost)) or float(cost) < 0:
                raise ProblemContractViolation(f"step_cost is {cost} for (s={s}, a={a}, s'={s2})")
            q.append(s2)
        steps += 1
    logger.debug("sanity check visited %d states", len(seen))
    return f"OK: visited {len(seen)} states; no invalid costs."
