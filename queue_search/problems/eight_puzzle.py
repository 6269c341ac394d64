# queue_search/problems/eight_puzzle.py
# The 8-puzzle: a 3x3 board stored row by row as a 9-tuple, 0 marks the gap.
# Actions name the direction the gap moves.
from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple

Board = Tuple[int, ...]

GOAL_STATE: Board = (1, 2, 3, 8, 0, 4, 7, 6, 5)

UP, DOWN, LEFT, RIGHT = "Up", "Down", "Left", "Right"
_DELTAS = {UP: (-1, 0), DOWN: (1, 0), LEFT: (0, -1), RIGHT: (0, 1)}


def _check_board(board: Sequence[int]) -> Board:
    board = tuple(board)
    if sorted(board) != list(range(9)):
        raise ValueError(f"not an 8-puzzle board: {board!r}")
    return board


def location_of(board: Board, tile: int) -> Tuple[int, int]:
    i = board.index(tile)
    return divmod(i, 3)


def can_move_gap(board: Board, action: str) -> bool:
    r, c = location_of(board, 0)
    dr, dc = _DELTAS[action]
    return 0 <= r + dr < 3 and 0 <= c + dc < 3


def move_gap(board: Board, action: str) -> Board:
    """Board after sliding the gap one step in `action` direction (unchanged if illegal)."""
    if not can_move_gap(board, action):
        return board
    r, c = location_of(board, 0)
    dr, dc = _DELTAS[action]
    i, j = r * 3 + c, (r + dr) * 3 + (c + dc)
    cells = list(board)
    cells[i], cells[j] = cells[j], cells[i]
    return tuple(cells)


class EightPuzzleProblem:
    """
    - State: 9-tuple board
    - ACTIONS(s): gap moves among Up, Down, Left, Right (in that order) that stay on the board
    - RESULT(s,a): board with the gap moved
    - c(s,a,s'): 1.0
    - heuristic(s): Manhattan distance to the goal board
    """
    def __init__(self, initial: Sequence[int], goal: Sequence[int] = GOAL_STATE):
        self.initial = _check_board(initial)
        self.goal = _check_board(goal)

    def initial_state(self) -> Board:
        return self.initial

    def is_goal(self, state: Board) -> bool:
        return state == self.goal

    def actions(self, state: Board) -> Iterable[str]:
        return [a for a in (UP, DOWN, LEFT, RIGHT) if can_move_gap(state, a)]

    def result(self, state: Board, action: str) -> Board:
        return move_gap(state, action)

    def step_cost(self, state: Board, action: str, next_state: Board) -> float:
        return 1.0

    def heuristic(self, state: Board) -> float:
        return float(manhattan_distance(state, self.goal))


def manhattan_distance(board: Board, goal: Board = GOAL_STATE) -> int:
    total = 0
    for tile in range(1, 9):
        r, c = location_of(board, tile)
        gr, gc = location_of(goal, tile)
        total += abs(r - gr) + abs(c - gc)
    return total


def misplaced_tiles(board: Board, goal: Board = GOAL_STATE) -> int:
    return sum(1 for tile in range(1, 9) if location_of(board, tile) != location_of(goal, tile))


def scramble(board: Board, moves: List[str]) -> Board:
    """Apply a fixed list of gap moves, e.g. to build a start board a known distance from the goal."""
    for a in moves:
        board = move_gap(board, a)
    return board
