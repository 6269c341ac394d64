# queue_search/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc

NODES_EXPANDED = "nodes_expanded"
QUEUE_SIZE = "queue_size"
MAX_QUEUE_SIZE = "max_queue_size"
PATH_COST = "path_cost"
TIME_TAKEN = "time_taken"


class Metrics(dict):
    """Run-scoped counters, keyed by metric name. Reset at the start of every run."""

    def reset(self) -> None:
        self.clear()
        self[NODES_EXPANDED] = 0
        self[QUEUE_SIZE] = 0
        self[MAX_QUEUE_SIZE] = 0
        self[PATH_COST] = 0.0
        self[TIME_TAKEN] = 0.0

    def increment(self, name: str, by: int = 1) -> None:
        self[name] = self.get(name, 0) + by

    def set_max(self, name: str, value: float) -> None:
        if name not in self or value > self[name]:
            self[name] = value

    def update_queue_size(self, size: int) -> None:
        self[QUEUE_SIZE] = size
        self.set_max(MAX_QUEUE_SIZE, size)


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None
    status: str = ""
    metrics: Dict[str, float] = field(default_factory=dict)


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    Pass trace_memory=False to skip tracemalloc (it slows large searches down).
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._trace_memory = trace_memory
        self._started_tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self._trace_memory:
            self._tracing = True
            # a surrounding MeasuredRun may already be tracing
            self._started_tracing = not tracemalloc.is_tracing()
            if self._started_tracing:
                tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            if self._started_tracing:
                tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
