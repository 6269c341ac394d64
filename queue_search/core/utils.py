# queue_search/core/utils.py
# Path helpers: rebuild the action sequence behind a goal node and replay it.
from __future__ import annotations
from typing import Iterable, List
from .node import Node
from .problem import Problem, State

def path_nodes(node: Node) -> List[Node]:
    """Nodes from the root down to `node` (inclusive)."""
    nodes = []
    cur = node
    while cur is not None:
        nodes.append(cur)
        cur = cur.parent
    nodes.reverse()
    return nodes

def reconstruct_path(node: Node) -> List:
    actions = []
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions

def apply_actions(problem: Problem, actions: Iterable) -> State:
    """Replay a plan from the initial state and return the state it ends in."""
    s = problem.initial_state()
    for a in actions:
        s = problem.result(s, a)
    return s
