# queue_search/problems/graph.py
# A weighted directed graph as a route-finding problem: states are node names, actions are neighbours.
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Tuple
from ..core.problem import State, Action

@dataclass
class GraphProblem:
    start: str
    goal: str
    graph: Mapping[str, Mapping[str, float]]
    coords: Optional[Mapping[str, Tuple[float, float]]] = field(default=None, repr=False)  # for straight-line heuristic

    def initial_state(self) -> State: return self.start
    def is_goal(self, s: State) -> bool: return s == self.goal
    def actions(self, s: State) -> Iterable[Action]:
        return list(self.graph.get(s, {}).keys())
    def result(self, s: State, a: Action) -> State:
        return a  # action is the neighbor node
    def step_cost(self, s: State, a: Action, s2: State) -> float:
        return float(self.graph[s][s2])
    def heuristic(self, s: State) -> float:
        if not self.coords:
            return 0.0
        (x1,y1), (x2,y2) = self.coords[s], self.coords[self.goal]
        return math.hypot(x1-x2, y1-y2)

def undirected(edges: Iterable[Tuple[str, str, float]]) -> Dict[str, Dict[str, float]]:
    """Build a symmetric adjacency mapping from (a, b, cost) triples, keeping edge order."""
    graph: Dict[str, Dict[str, float]] = {}
    for a, b, cost in edges:
        graph.setdefault(a, {})[b] = cost
        graph.setdefault(b, {})[a] = cost
    return graph
