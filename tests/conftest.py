"""Shared fixtures: small hand-checkable problems."""

import pytest

from queue_search.core.problem import GeneralProblem
from queue_search.problems.graph import GraphProblem, undirected
from queue_search.problems.romania import romania_problem


@pytest.fixture
def abc_problem():
    """A-B costs 1, B-C costs 2, the direct A-C road costs 5."""
    graph = undirected([("A", "B", 1), ("A", "C", 5), ("B", "C", 2)])
    return GraphProblem(start="A", goal="C", graph=graph)


@pytest.fixture
def cycle_problem():
    """A <-> B loop with an unreachable goal C."""
    graph = {"A": {"B": 1}, "B": {"A": 1}, "C": {}}
    return GraphProblem(start="A", goal="C", graph=graph)


@pytest.fixture
def romania():
    return romania_problem()


@pytest.fixture
def counter_problem():
    """Integers from 0, actions +1/+2, goal 5. States recur along different paths."""
    return GeneralProblem(
        0,
        actions=lambda s: [1, 2] if s < 5 else [],
        result=lambda s, a: s + a,
        goal_test=lambda s: s == 5,
    )
