# queue_search/benchmarks/run_all.py
# Runs every algorithm against every duplicate-handling strategy on one sample problem.
#   python -m queue_search.benchmarks.run_all
from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..algorithms.astar import a_star_search
from ..algorithms.bfs import breadth_first_search
from ..algorithms.dfs import depth_first_search
from ..algorithms.greedy import greedy_best_first_search
from ..algorithms.ucs import uniform_cost_search
from ..algorithms.weighted_astar import weighted_a_star_search
from ..core.budgets import time_limit
from ..core.log import get_logger, level_from_name
from ..core.search import QueueSearch
from ..core.strategies import GraphSearch, ReducedFrontierGraphSearch, TreeSearch

# ---- Tunables (overridable via environment variables) -----------------------
MAX_EXPANSIONS = int(os.getenv("QS_MAX_EXPANSIONS", "50000"))  # caps tree search on cyclic maps
TIME_LIMIT     = float(os.getenv("QS_TIME_LIMIT", "10"))        # seconds per run
WA_W           = float(os.getenv("WASTAR_W", "1.5"))            # weighted A* weight
PROBLEM        = os.getenv("QS_PROBLEM", "romania")
LOG_LEVEL      = os.getenv("QS_LOG_LEVEL", "INFO")

log = get_logger("benchmarks", level=level_from_name(LOG_LEVEL))

Algo = Callable[..., Any]
StrategyFactory = Callable[[], QueueSearch]

STRATEGIES: List[Tuple[str, StrategyFactory]] = [
    ("tree", TreeSearch),
    ("graph", GraphSearch),
    ("reduced", ReducedFrontierGraphSearch),
]

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    if isinstance(x, (int, float)):
        return f"{float(x):.4f}"
    return "n/a"

def load_problem(name: str = PROBLEM):
    if name == "romania":
        from ..problems.romania import romania_problem
        return romania_problem()
    if name == "grid":
        from ..problems.grid import make_grid_problem
        return make_grid_problem()
    if name == "eight_puzzle":
        from ..problems.eight_puzzle import EightPuzzleProblem
        return EightPuzzleProblem((1, 3, 4, 8, 6, 2, 7, 0, 5))
    raise ValueError(f"unknown problem {name!r} (expected romania, grid or eight_puzzle)")

def load_algos(weight: float = WA_W) -> List[Tuple[str, Algo]]:
    return [
        ("BFS", breadth_first_search),
        ("DFS", depth_first_search),
        ("UCS", uniform_cost_search),
        ("Greedy", greedy_best_first_search),
        ("A*", a_star_search),
        (f"WeightedA*(w={weight})",
         lambda p, **kw: weighted_a_star_search(p, w=weight, **kw)),
    ]

def run_benchmarks(problem, algos: List[Tuple[str, Algo]],
                   strategies: List[Tuple[str, StrategyFactory]] = STRATEGIES,
                   max_expansions: int = MAX_EXPANSIONS,
                   seconds: Optional[float] = TIME_LIMIT) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for algo_name, fn in algos:
        for strategy_name, make_strategy in strategies:
            label = f"{algo_name}/{strategy_name}"
            print(f"→ Running {label} ...")
            try:
                r = fn(problem, strategy=make_strategy(), max_expansions=max_expansions,
                       is_running=time_limit(seconds) if seconds else None)
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
                rows.append({
                    "algo": label,
                    "success": r.success,
                    "status": r.status,
                    "cost": r.cost if r.success else None,
                    "nodes_expanded": r.nodes_expanded,
                    "max_queue_size": r.metrics.get("max_queue_size"),
                    "time_s": r.time_s,
                    "peak_kb": r.peak_kb,
                    "error": r.error,
                })
            except Exception as e:
                log.error("%s failed: %r", label, e)
                rows.append({
                    "algo": label,
                    "success": False,
                    "status": "aborted",
                    "error": repr(e),
                    "nodes_expanded": None,
                    "max_queue_size": None,
                    "cost": None,
                    "time_s": None,
                    "peak_kb": None,
                })
    return rows

def main(out_path: Optional[Path] = None) -> Dict[str, Any]:
    problem = load_problem()
    algos = load_algos()
    log.info("benchmarking %d algorithms x %d strategies on %s",
             len(algos), len(STRATEGIES), PROBLEM)

    rows = run_benchmarks(problem, algos)
    out = {"problem": PROBLEM, "results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    # Save JSON next to this script
    out_path = out_path or Path(__file__).with_name("results.json")
    try:
        out_path.write_text(json.dumps(out, indent=2))
    except OSError as e:
        log.warning("could not write %s: %s", out_path, e)
    else:
        log.info("wrote %s", out_path)
    return out

if __name__ == "__main__":
    main()
