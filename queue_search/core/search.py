"""
Queue-based search template.

``QueueSearch.find_node`` is the generic expand/test loop. Subclasses decide how
nodes enter and leave the frontier through three hooks:

    add_to_frontier(node)
    remove_from_frontier() -> node
    is_frontier_empty() -> bool

The frontier itself (FIFO, LIFO, priority) is supplied by the caller, so the same
strategy object gives breadth-first, depth-first, uniform-cost or A* search depending
on the frontier it is run with. See ``strategies.py`` for the three duplicate-state
policies.
"""
from __future__ import annotations

import enum
import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .frontiers import Frontier
from .metrics import Metrics, NODES_EXPANDED, PATH_COST, TIME_TAKEN
from .node import Node, NodeFactory
from .problem import Problem
from .utils import reconstruct_path

logger = logging.getLogger(__name__)

ContinuePredicate = Callable[[Metrics], bool]


class SearchStatus(enum.Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"  # frontier ran dry, no goal in the explored space
    CANCELLED = "cancelled"  # the continue predicate stopped the run
    ABORTED = "aborted"      # the problem raised


class QueueSearch(ABC):
    """Template for searches that keep their open nodes in a frontier queue.

    One instance may be reused for any number of sequential runs; metrics and all
    per-run bookkeeping are reset when a run starts. Instances are not safe for
    concurrent runs.
    """

    def __init__(self, node_factory: Optional[NodeFactory] = None, early_goal_test: bool = False):
        self.node_factory = node_factory or NodeFactory()
        self.early_goal_test = early_goal_test
        self.metrics = Metrics()
        self.metrics.reset()
        self.frontier: Optional[Frontier] = None
        self.status: Optional[SearchStatus] = None

    @property
    def name(self) -> str:
        return type(self).__name__

    def find_node(self, problem: Problem, frontier: Frontier,
                  is_running: Optional[ContinuePredicate] = None) -> Optional[Node]:
        """
        Search for a goal node, using `frontier` to hold unexpanded nodes.

        Returns the goal node, or None if the frontier ran empty or `is_running`
        returned False. Exceptions raised by the problem propagate.
        """
        self.metrics.reset()
        self.frontier = frontier
        self._start_run()
        self.status = SearchStatus.RUNNING
        logger.debug("%s: run started (frontier=%s)", self.name, type(frontier).__name__)

        t0 = time.perf_counter()
        try:
            result = self._search(problem, is_running)
        except Exception:
            self.status = SearchStatus.ABORTED
            raise
        finally:
            self.metrics[TIME_TAKEN] = time.perf_counter() - t0

        logger.debug("%s: run %s after %d expansions", self.name, self.status.value,
                     self.metrics[NODES_EXPANDED])
        return result

    def find_actions(self, problem: Problem, frontier: Frontier,
                     is_running: Optional[ContinuePredicate] = None) -> Optional[List]:
        node = self.find_node(problem, frontier, is_running)
        if node is None:
            return None
        return reconstruct_path(node)

    def _search(self, problem: Problem, is_running: Optional[ContinuePredicate]) -> Optional[Node]:
        root = self.node_factory.create_root_node(problem.initial_state())
        if self.early_goal_test and problem.is_goal(root.state):
            return self._succeed(root)
        self.add_to_frontier(root)

        while True:
            # exhaustion wins over cancellation when both happen on the same turn
            if self.is_frontier_empty():
                self.status = SearchStatus.EXHAUSTED
                return None
            if is_running is not None and not is_running(self.metrics):
                self.status = SearchStatus.CANCELLED
                return None
            node = self.remove_from_frontier()
            if not self.early_goal_test and problem.is_goal(node.state):
                return self._succeed(node)
            for child in self._expand(node, problem):
                if self.early_goal_test and problem.is_goal(child.state):
                    return self._succeed(child)
                self.add_to_frontier(child)

    def _expand(self, node: Node, problem: Problem) -> List[Node]:
        children = self.node_factory.expand(node, problem)
        self.metrics.increment(NODES_EXPANDED)
        return children

    def _succeed(self, node: Node) -> Node:
        self.metrics[PATH_COST] = node.path_cost
        self.status = SearchStatus.SUCCEEDED
        return node

    def _update_metrics(self) -> None:
        self.metrics.update_queue_size(len(self.frontier))

    def _start_run(self) -> None:
        """Hook: clear per-run bookkeeping. Called after the new frontier is set."""

    @abstractmethod
    def add_to_frontier(self, node: Node) -> None: ...

    @abstractmethod
    def remove_from_frontier(self) -> Node: ...

    @abstractmethod
    def is_frontier_empty(self) -> bool: ...


def run(problem: Problem, frontier_factory: Callable[[], Frontier], strategy: QueueSearch,
        is_running: Optional[ContinuePredicate] = None) -> Optional[Node]:
    """Run `strategy` on `problem` with a fresh frontier from `frontier_factory`."""
    return strategy.find_node(problem, frontier_factory(), is_running)
