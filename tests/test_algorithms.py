"""
Tests for the algorithm wrappers (frontier ordering + strategy -> SearchResult).
"""

import math

import pytest

from queue_search.algorithms.astar import a_star_search
from queue_search.algorithms.best_first import best_first_search
from queue_search.algorithms.bfs import breadth_first_search
from queue_search.algorithms.dfs import depth_first_search
from queue_search.algorithms.greedy import greedy_best_first_search
from queue_search.algorithms.heuristics import heuristic_from_problem, zero_heuristic
from queue_search.algorithms.ucs import uniform_cost_search
from queue_search.algorithms.weighted_astar import weighted_a_star_search
from queue_search.core.budgets import max_expansions
from queue_search.core.node import Node
from queue_search.core.strategies import GraphSearch, ReducedFrontierGraphSearch, TreeSearch
from queue_search.core.utils import apply_actions
from queue_search.problems.eight_puzzle import (
    DOWN,
    GOAL_STATE,
    LEFT,
    UP,
    EightPuzzleProblem,
    misplaced_tiles,
    scramble,
)

OPTIMAL_ROMANIA = ["Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]


class TestUninformed:

    def test_breadth_first_search(self, romania):
        r = breadth_first_search(romania)
        assert r.success
        assert r.algo == "BFS[GraphSearch]"
        assert r.actions == ["Sibiu", "Fagaras", "Bucharest"]
        assert r.cost == 450
        assert r.status == "succeeded"
        assert r.nodes_expanded == r.metrics["nodes_expanded"]

    def test_depth_first_search(self, romania):
        r = depth_first_search(romania)
        assert r.success
        assert r.actions == ["Timisoara", "Lugoj", "Mehadia", "Drobeta", "Craiova", "Pitesti", "Bucharest"]
        assert r.cost == 733

    @pytest.mark.parametrize("strategy", [TreeSearch(), GraphSearch(), ReducedFrontierGraphSearch()])
    def test_uniform_cost_search_is_optimal(self, romania, strategy):
        r = uniform_cost_search(romania, strategy=strategy)
        assert r.success
        assert r.cost == 418
        assert r.actions == OPTIMAL_ROMANIA
        assert apply_actions(romania, r.actions) == "Bucharest"

    def test_uniform_cost_on_small_graph(self, abc_problem):
        r = uniform_cost_search(abc_problem)
        assert r.cost == 3
        assert r.actions == ["B", "C"]

    def test_expansion_cap_cancels(self, cycle_problem):
        r = depth_first_search(cycle_problem, strategy=TreeSearch(), max_expansions=10)
        assert not r.success
        assert r.status == "cancelled"
        assert r.nodes_expanded == 10
        assert r.actions == []
        assert math.isinf(r.cost)

    def test_exhausted_search(self, cycle_problem):
        r = uniform_cost_search(cycle_problem)
        assert not r.success
        assert r.status == "exhausted"
        assert r.nodes_expanded == 2

    def test_cap_and_predicate_combine(self, cycle_problem):
        r = breadth_first_search(cycle_problem, strategy=TreeSearch(), max_expansions=50,
                                 is_running=max_expansions(5))
        assert r.status == "cancelled"
        assert r.nodes_expanded == 5


class TestInformed:

    def test_greedy_best_first(self, romania):
        r = greedy_best_first_search(romania)
        assert r.success
        assert r.actions == ["Sibiu", "Fagaras", "Bucharest"]
        assert r.cost == 450

    def test_a_star(self, romania):
        r = a_star_search(romania)
        assert r.success
        assert r.algo == "A*[ReducedFrontierGraphSearch]"
        assert r.cost == 418
        assert r.actions == OPTIMAL_ROMANIA

    def test_a_star_expands_fewer_nodes_than_ucs(self, romania):
        assert a_star_search(romania).nodes_expanded < uniform_cost_search(romania).nodes_expanded

    def test_a_star_with_explicit_heuristic(self):
        problem = EightPuzzleProblem(scramble(GOAL_STATE, [UP, LEFT, DOWN]))
        r = a_star_search(problem, heuristic=lambda n: misplaced_tiles(n.state, problem.goal))
        assert r.success
        assert len(r.actions) == 3
        assert apply_actions(problem, r.actions) == GOAL_STATE

    def test_weighted_a_star(self, romania):
        r = weighted_a_star_search(romania, w=2.0)
        assert r.success
        assert r.algo.startswith("WeightedA*(w=2.0)")
        assert r.cost >= 418

    def test_weighted_a_star_rejects_small_weight(self, romania):
        with pytest.raises(ValueError, match="weight must be >= 1"):
            weighted_a_star_search(romania, w=0.5)

    def test_best_first_with_custom_strategy(self, abc_problem):
        r = best_first_search(abc_problem, f=lambda n: n.path_cost, name="Custom", strategy=GraphSearch())
        assert r.algo == "Custom[GraphSearch]"
        assert r.cost == 3


class TestHeuristics:

    def test_heuristic_from_problem(self, romania):
        h = heuristic_from_problem(romania)
        assert h(Node("Arad")) == 366.0

    def test_problem_without_heuristic(self):
        assert heuristic_from_problem(object()) is None

    def test_none_heuristic_value_reads_as_zero(self):
        class NoEstimate:
            def heuristic(self, s):
                return None

        assert heuristic_from_problem(NoEstimate())(Node("S")) == 0.0

    def test_zero_heuristic(self):
        assert zero_heuristic(Node("S")) == 0.0
