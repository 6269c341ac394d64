# queue_search/core/node.py
# Node is one partial path through the state space; NodeFactory builds nodes from a Problem.
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
from .errors import ProblemContractViolation
from .problem import Problem, State, Action


@dataclass(frozen=True, eq=False)
class Node:
    """Immutable search-tree node: state + backpointer + path cost + depth.

    Nodes compare by identity, so a frontier can hold (and remove) several
    nodes for the same state.
    """
    state: State
    parent: Optional["Node"] = field(default=None, repr=False)
    action: Optional[Action] = None
    path_cost: float = 0.0
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent is None


NodeListener = Callable[[Node], Any]


class NodeFactory:
    """Creates root and child nodes and notifies listeners about node expansions."""

    def __init__(self) -> None:
        self._listeners: List[NodeListener] = []

    def add_node_listener(self, listener: NodeListener) -> None:
        self._listeners.append(listener)

    def remove_node_listener(self, listener: NodeListener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def create_root_node(self, state: State) -> Node:
        return Node(state)

    def create_child_node(self, problem: Problem, parent: Node, action: Action) -> Node:
        s = parent.state
        s2 = problem.result(s, action)
        cost = problem.step_cost(s, action, s2)
        if cost is None:
            raise ProblemContractViolation(
                f"step_cost returned None for (s={s!r}, a={action!r}, s'={s2!r}). "
                "Check your problem’s ACTIONS/RESULT/cost mapping."
            )
        cost = float(cost)
        if math.isnan(cost) or cost < 0:
            raise ProblemContractViolation(
                f"step_cost must be non-negative, got {cost} for (s={s!r}, a={action!r}, s'={s2!r})"
            )
        return Node(
            state=s2,
            parent=parent,
            action=action,
            path_cost=parent.path_cost + cost,
            depth=parent.depth + 1,
        )

    def expand(self, node: Node, problem: Problem) -> List[Node]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        children = [self.create_child_node(problem, node, a) for a in problem.actions(node.state)]
        for listener in self._listeners:
            listener(node)
        return children
