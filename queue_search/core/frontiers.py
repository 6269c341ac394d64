# queue_search/core/frontiers.py
# Frontier containers consumed by the search template: FIFO, LIFO and priority ordered.
from __future__ import annotations
import heapq
from collections import deque
from typing import Any, Callable, Iterator, Protocol

class Frontier(Protocol):
    def push(self, x) -> None: ...
    def pop(self) -> Any: ...
    def peek(self) -> Any: ...
    def remove(self, x) -> bool: ...
    def is_empty(self) -> bool: ...
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[Any]: ...

class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)
    def is_empty(self): return not self.q
    def peek(self): return self.q[0]
    def remove(self, x) -> bool:
        """Remove the element that *is* x (identity, not equality)."""
        for i, y in enumerate(self.q):
            if y is x:
                del self.q[i]
                return True
        return False

class LIFOStack:
    def __init__(self):
        self.q = []
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)
    def __iter__(self): return reversed(self.q)
    def is_empty(self): return not self.q
    def peek(self): return self.q[-1]
    def remove(self, x) -> bool:
        for i in range(len(self.q) - 1, -1, -1):
            if self.q[i] is x:
                del self.q[i]
                return True
        return False

class PriorityQueue:
    """Min-heap by key(x)."""
    def __init__(self, key):
        self.key = key
        self.h = []
        self.counter = 0  # tie-breaker for stability
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self):
        return heapq.heappop(self.h)[2]
    def __len__(self): return len(self.h)
    def __iter__(self): return (entry[2] for entry in sorted(self.h))
    def is_empty(self): return not self.h
    def peek(self):
        if not self.h:
            raise IndexError("peek from an empty priority queue")
        return self.h[0][2]
    def remove(self, x) -> bool:
        """Remove x in O(n): swap its entry with the last one and restore the heap."""
        for i, entry in enumerate(self.h):
            if entry[2] is x:
                last = self.h.pop()
                if i < len(self.h):
                    self.h[i] = last
                    heapq.heapify(self.h)
                return True
        return False

def priority_queue(key: Callable[[Any], Any]) -> Callable[[], PriorityQueue]:
    """Frontier factory for a PriorityQueue ordered by key."""
    def factory() -> PriorityQueue:
        return PriorityQueue(key=key)
    return factory
