# queue_search/core/strategies.py
# The three duplicate-state policies for QueueSearch: none, explored set, reduced frontier.
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Set
from .node import Node, NodeFactory
from .problem import State
from .search import QueueSearch

logger = logging.getLogger(__name__)


class TreeSearch(QueueSearch):
    """
    No duplicate checking: every generated node goes into the frontier.

    Cheapest bookkeeping, but on state spaces with cycles it can run forever
    (bound it with a continue predicate). Fine for trees and for formulations in
    which states cannot recur.
    """

    def add_to_frontier(self, node: Node) -> None:
        self.frontier.push(node)
        self._update_metrics()

    def remove_from_frontier(self) -> Node:
        node = self.frontier.pop()
        self._update_metrics()
        return node

    def is_frontier_empty(self) -> bool:
        return self.frontier.is_empty()


class GraphSearch(QueueSearch):
    """
    Tree search plus an explored set.

    Children are added even if the frontier already holds a node for the same
    state, so insertion stays O(1) and any frontier ordering works. Nodes of
    already explored states are dropped lazily when they reach the head of the
    frontier, so no state is ever expanded twice.
    """

    def __init__(self, node_factory: Optional[NodeFactory] = None, early_goal_test: bool = False):
        super().__init__(node_factory, early_goal_test)
        self.explored: Set[State] = set()

    def _start_run(self) -> None:
        self.explored.clear()

    def add_to_frontier(self, node: Node) -> None:
        if node.state not in self.explored:
            self.frontier.push(node)
            self._update_metrics()

    def remove_from_frontier(self) -> Node:
        self._clean_up_frontier()
        node = self.frontier.pop()
        self.explored.add(node.state)
        self._update_metrics()
        return node

    def is_frontier_empty(self) -> bool:
        self._clean_up_frontier()
        self._update_metrics()
        return self.frontier.is_empty()

    def _clean_up_frontier(self) -> None:
        # pop stale heads: their state was explored through another node
        while not self.frontier.is_empty() and self.frontier.peek().state in self.explored:
            self.frontier.pop()


class ReducedFrontierGraphSearch(QueueSearch):
    """
    Graph search that keeps at most one frontier node per state.

    When a child reaches a state that already has a frontier node, the two are
    compared with `key` (lower is better) and only the better one stays. Without
    an explicit key the frontier's own ``key`` is used if it has one (a
    PriorityQueue); with no key at all the newer node is always dropped.

    With a cost-ascending key and non-negative step costs (plus a consistent
    heuristic for A*), the first goal node removed is cost-optimal.
    """

    def __init__(self, key: Optional[Callable[[Node], Any]] = None,
                 node_factory: Optional[NodeFactory] = None, early_goal_test: bool = False):
        super().__init__(node_factory, early_goal_test)
        self.key = key
        self.node_key: Optional[Callable[[Node], Any]] = key
        self.explored: Set[State] = set()
        self.frontier_index: Dict[State, Node] = {}

    def _start_run(self) -> None:
        self.node_key = self.key if self.key is not None else getattr(self.frontier, "key", None)
        self.explored.clear()
        self.frontier_index.clear()

    def add_to_frontier(self, node: Node) -> None:
        if node.state in self.explored:
            return
        existing = self.frontier_index.get(node.state)
        if existing is None:
            self.frontier.push(node)
            self.frontier_index[node.state] = node
            self._update_metrics()
        elif self.node_key is not None and self.node_key(node) < self.node_key(existing):
            # state is in the frontier with a worse node: replace it
            if self.frontier.remove(existing):
                del self.frontier_index[existing.state]
            self.frontier.push(node)
            self.frontier_index[node.state] = node
            self._update_metrics()
            logger.debug("replaced frontier node for %r (cost %s -> %s)",
                         node.state, existing.path_cost, node.path_cost)

    def remove_from_frontier(self) -> Node:
        node = self.frontier.pop()
        self.frontier_index.pop(node.state, None)
        self.explored.add(node.state)
        self._update_metrics()
        return node

    def is_frontier_empty(self) -> bool:
        return self.frontier.is_empty()
