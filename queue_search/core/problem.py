# Defines the standard interface for any search problem (states, actions, goals, costs, heuristic).
# queue_search/core/problem.py
from __future__ import annotations
from typing import Callable, Iterable, Optional, Protocol, Hashable

Action = Hashable
State = Hashable

class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view).

    ``actions`` must yield actions in a stable order: the search expands children
    in that order, which decides tie-breaks between equally ranked nodes.
    ``result`` is the transition model, ``step_cost`` must be a non-negative number.
    """
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...


def unit_step_cost(s: State, a: Action, s2: State) -> float:
    return 1.0


class GeneralProblem:
    """A Problem assembled from plain callables.

    >>> p = GeneralProblem(0, actions=lambda s: [1, 2], result=lambda s, a: s + a,
    ...                    goal_test=lambda s: s == 3)
    """
    def __init__(self, initial: State, actions: Callable[[State], Iterable[Action]],
                 result: Callable[[State, Action], State], goal_test: Callable[[State], bool],
                 step_cost: Callable[[State, Action, State], float] = unit_step_cost,
                 heuristic: Optional[Callable[[State], float]] = None) -> None:
        self.initial = initial
        self.actions_fn = actions
        self.result_fn = result
        self.goal_test = goal_test
        self.step_cost_fn = step_cost
        self.heuristic_fn = heuristic

    def initial_state(self) -> State: return self.initial
    def is_goal(self, s: State) -> bool: return bool(self.goal_test(s))
    def actions(self, s: State) -> Iterable[Action]: return self.actions_fn(s)
    def result(self, s: State, a: Action) -> State: return self.result_fn(s, a)
    def step_cost(self, s: State, a: Action, s2: State) -> float:
        return self.step_cost_fn(s, a, s2)

    def heuristic(self, s: State) -> float:
        if self.heuristic_fn is None:
            return 0.0
        return float(self.heuristic_fn(s))
