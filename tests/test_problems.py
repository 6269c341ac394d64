"""
Tests for the sample problems and the problem sanity checker.
"""

import pytest

from queue_search.algorithms.astar import a_star_search
from queue_search.algorithms.bfs import breadth_first_search
from queue_search.algorithms.dfs import depth_first_search
from queue_search.algorithms.ucs import uniform_cost_search
from queue_search.core.errors import ProblemContractViolation
from queue_search.core.problem import GeneralProblem
from queue_search.core.strategies import TreeSearch
from queue_search.problems.checks import sanity_check_problem
from queue_search.problems.eight_puzzle import (
    DOWN,
    GOAL_STATE,
    LEFT,
    RIGHT,
    UP,
    EightPuzzleProblem,
    manhattan_distance,
    misplaced_tiles,
    move_gap,
    scramble,
)
from queue_search.problems.graph import GraphProblem, undirected
from queue_search.problems.grid import GridProblem, make_grid_problem
from queue_search.problems.nqueens import NQueensProblem, is_valid_placement
from queue_search.problems.romania import RomaniaProblem


class TestEightPuzzle:

    def test_actions_follow_fixed_order(self):
        problem = EightPuzzleProblem(GOAL_STATE)
        assert problem.actions(GOAL_STATE) == [UP, DOWN, LEFT, RIGHT]
        corner = (0, 1, 2, 3, 4, 5, 6, 7, 8)
        assert problem.actions(corner) == [DOWN, RIGHT]

    def test_illegal_move_leaves_board_unchanged(self):
        corner = (0, 1, 2, 3, 4, 5, 6, 7, 8)
        assert move_gap(corner, UP) == corner
        assert move_gap(corner, RIGHT) == (1, 0, 2, 3, 4, 5, 6, 7, 8)

    def test_heuristics(self):
        start = scramble(GOAL_STATE, [UP, LEFT, DOWN])
        assert manhattan_distance(GOAL_STATE) == 0
        assert manhattan_distance(start) == 3
        assert misplaced_tiles(start) == 3
        assert EightPuzzleProblem(start).heuristic(start) == 3.0

    def test_rejects_malformed_board(self):
        with pytest.raises(ValueError, match="not an 8-puzzle board"):
            EightPuzzleProblem([1, 2, 3])


class TestNQueens:

    def test_actions_avoid_attacked_squares(self):
        problem = NQueensProblem(4)
        assert problem.actions(()) == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert problem.actions((0,)) == [(1, 2), (1, 3)]
        assert problem.actions((0, 1, 2, 3)) == []

    def test_goal_and_result(self):
        problem = NQueensProblem(4)
        assert problem.result((1,), (1, 3)) == (1, 3)
        assert problem.is_goal((1, 3, 0, 2))
        assert not problem.is_goal((1, 3))

    def test_rejects_empty_board(self):
        with pytest.raises(ValueError):
            NQueensProblem(0)

    def test_depth_first_tree_search_solves_eight_queens(self):
        r = depth_first_search(NQueensProblem(8), strategy=TreeSearch())
        assert r.success
        assert len(r.actions) == 8
        assert is_valid_placement(tuple(row for _, row in r.actions))


class TestGraphProblems:

    def test_undirected_is_symmetric(self):
        graph = undirected([("A", "B", 1), ("B", "C", 2)])
        assert graph == {"A": {"B": 1}, "B": {"A": 1, "C": 2}, "C": {"B": 2}}

    def test_actions_and_costs(self, abc_problem):
        assert abc_problem.actions("A") == ["B", "C"]
        assert abc_problem.actions("Z") == []
        assert abc_problem.result("A", "B") == "B"
        assert abc_problem.step_cost("A", "C", "C") == 5.0

    def test_straight_line_heuristic(self):
        problem = GraphProblem("A", "B", {"A": {"B": 5}, "B": {}}, coords={"A": (0, 0), "B": (3, 4)})
        assert problem.heuristic("A") == 5.0
        assert GraphProblem("A", "B", {"A": {"B": 5}}).heuristic("A") == 0.0

    def test_romania_heuristic(self, romania):
        assert romania.heuristic("Arad") == 366.0
        assert RomaniaProblem(start="Arad", goal="Sibiu").heuristic("Arad") == 0.0

    def test_grid_actions(self):
        grid = make_grid_problem()
        assert list(grid.actions((0, 0))) == ["Down", "Right"]
        # (1,3) is a wall
        assert "Right" not in list(grid.actions((1, 2)))
        assert grid.heuristic((0, 0)) == 10.0

    def test_terrain_costs_steer_uniform_cost_search(self):
        grid = GridProblem.from_rows(["S5G", "..."])
        assert grid.step_cost((0, 0), "Right", (0, 1)) == 5.0
        assert breadth_first_search(grid).actions == ["Right", "Right"]
        r = uniform_cost_search(grid)
        assert r.cost == 4
        assert r.actions == ["Down", "Right", "Right", "Up"]
        assert a_star_search(grid).cost == 4

    def test_map_errors(self):
        with pytest.raises(ValueError, match="exactly one S and one G"):
            GridProblem.from_rows(["S.."])
        with pytest.raises(ValueError, match="unexpected map character"):
            GridProblem.from_rows(["S.x.G"])
        with pytest.raises(ValueError, match="must be an open cell"):
            GridProblem(2, 2, start=(0, 0), goal=(5, 5))

    def test_ragged_map_rejected(self):
        with pytest.raises(ValueError, match="all the same length"):
            GridProblem.from_rows(["S..", "G"])
        with pytest.raises(ValueError, match="all the same length"):
            GridProblem.from_rows([])

    @pytest.mark.parametrize("lines", [["S.S", "..G"], ["SG.", "..G"]])
    def test_repeated_start_or_goal_rejected(self, lines):
        with pytest.raises(ValueError, match="exactly one S and one G"):
            GridProblem.from_rows(lines)


class TestGeneralProblem:

    def test_defaults(self):
        problem = GeneralProblem(0, actions=lambda s: [1], result=lambda s, a: s + a,
                                 goal_test=lambda s: s == 1)
        assert problem.initial_state() == 0
        assert problem.step_cost(0, 1, 1) == 1.0
        assert problem.heuristic(0) == 0.0
        assert problem.is_goal(1)

    def test_heuristic(self):
        problem = GeneralProblem(0, actions=lambda s: [], result=lambda s, a: s,
                                 goal_test=lambda s: False, heuristic=lambda s: 4)
        assert problem.heuristic(0) == 4.0


class TestSanityCheck:

    def test_accepts_romania(self, romania):
        assert sanity_check_problem(romania) == "OK: visited 20 states; no invalid costs."

    def test_rejects_negative_cost(self):
        problem = GeneralProblem(0, actions=lambda s: [1] if s < 2 else [], result=lambda s, a: s + a,
                                 goal_test=lambda s: False, step_cost=lambda s, a, s2: -2)
        with pytest.raises(ProblemContractViolation, match="step_cost is -2"):
            sanity_check_problem(problem)

    def test_rejects_missing_cost(self):
        problem = GeneralProblem(0, actions=lambda s: [1], result=lambda s, a: s + a,
                                 goal_test=lambda s: False, step_cost=lambda s, a, s2: None)
        with pytest.raises(ProblemContractViolation, match="step_cost is None"):
            sanity_check_problem(problem, max_states=5)
