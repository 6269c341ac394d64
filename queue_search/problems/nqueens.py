# queue_search/problems/nqueens.py
# Incremental n-queens: queens are placed column by column, left to right, on
# squares no earlier queen attacks. States never recur, so the space is a tree.
from __future__ import annotations
from typing import Iterable, Tuple

Placement = Tuple[int, ...]  # row of the queen in each filled column
Location = Tuple[int, int]   # (column, row)


def attacked(placement: Placement, col: int, row: int) -> bool:
    for c, r in enumerate(placement):
        if r == row or abs(r - row) == abs(c - col):
            return True
    return False


class NQueensProblem:
    def __init__(self, size: int = 8):
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size

    def initial_state(self) -> Placement:
        return ()

    def is_goal(self, state: Placement) -> bool:
        return len(state) == self.size

    def actions(self, state: Placement) -> Iterable[Location]:
        col = len(state)
        if col >= self.size:
            return []
        return [(col, row) for row in range(self.size) if not attacked(state, col, row)]

    def result(self, state: Placement, action: Location) -> Placement:
        col, row = action
        return state + (row,)

    def step_cost(self, state, action, next_state) -> float:
        return 1.0


def is_valid_placement(placement: Placement) -> bool:
    return all(not attacked(placement[:c], c, r) for c, r in enumerate(placement))
