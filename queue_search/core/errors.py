# queue_search/core/errors.py
from __future__ import annotations


class ProblemContractViolation(ValueError):
    """Raised when a Problem breaks its documented contract (e.g. a negative step cost)."""
