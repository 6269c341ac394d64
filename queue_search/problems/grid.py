# queue_search/problems/grid.py
# 4-neighbour grid pathfinding, built from an ASCII map:
#   S start, G goal, # wall, . open (cost 1), 1-9 terrain costing that much to enter
from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridProblem:
    """
    - State: (row, col) tuple
    - ACTIONS(s): subset of Up, Down, Left, Right (in that order) that stay in-bounds and off walls
    - RESULT(s,a): next (row, col)
    - c(s,a,s'): cost of entering s' (1 unless the cell has terrain)
    - heuristic(s): Manhattan distance times the cheapest cell cost (admissible)
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord,
                 walls: Optional[Set[Coord]] = None, costs: Optional[Mapping[Coord, float]] = None):
        self.rows = rows
        self.cols = cols
        self.start = start
        self.goal = goal
        self.walls = walls or set()
        self.costs: Dict[Coord, float] = dict(costs or {})
        for cell in (start, goal):
            if not self._open(cell):
                raise ValueError(f"start/goal {cell} must be an open cell inside the grid")
        self._min_cost = min([1.0, *self.costs.values()])

    @classmethod
    def from_rows(cls, lines: Sequence[str]) -> "GridProblem":
        if not lines or len({len(line) for line in lines}) != 1:
            raise ValueError("map rows must be non-empty and all the same length")
        walls: Set[Coord] = set()
        costs: Dict[Coord, float] = {}
        starts: List[Coord] = []
        goals: List[Coord] = []
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch == "#":
                    walls.add((r, c))
                elif ch == "S":
                    starts.append((r, c))
                elif ch == "G":
                    goals.append((r, c))
                elif ch.isdigit() and ch != "0":
                    costs[(r, c)] = float(ch)
                elif ch != ".":
                    raise ValueError(f"unexpected map character {ch!r} at row {r}, col {c}")
        if len(starts) != 1 or len(goals) != 1:
            raise ValueError("map needs exactly one S and one G")
        return cls(len(lines), len(lines[0]), starts[0], goals[0], walls, costs)

    def _open(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def initial_state(self) -> Coord:
        return self.start

    def is_goal(self, state: Coord) -> bool:
        return state == self.goal

    def actions(self, state: Coord) -> Iterable[str]:
        r, c = state
        return [name for name, (dr, dc) in _MOVES.items() if self._open((r + dr, c + dc))]

    def result(self, state: Coord, action: str) -> Coord:
        r, c = state
        dr, dc = _MOVES[action]
        return (r + dr, c + dc)

    def step_cost(self, state: Coord, action: str, next_state: Coord) -> float:
        return self.costs.get(next_state, 1.0)

    def heuristic(self, state: Coord) -> float:
        r, c = state
        gr, gc = self.goal
        return float(abs(r - gr) + abs(c - gc)) * self._min_cost

_DEFAULT_MAP: List[str] = [
    "S......",
    "...#...",
    "...#...",
    "...##..",
    "......G",
]

def make_grid_problem(lines: Sequence[str] = _DEFAULT_MAP) -> GridProblem:
    # Example: 5x7 grid, a few walls
    return GridProblem.from_rows(lines)
