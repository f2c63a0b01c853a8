"""Shared toy problem for scatter search tests.

The assignment problem places values ``0..n-1`` on ``n`` positions; the cost
is ``offset`` plus the total displacement from the reversed order. Variables
are ``(position, value)`` assignments.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from scatterkit.foundation.solution import Solution


class AssignmentProblem:
    def __init__(self, n_var: int = 5, offset: float = 1.0) -> None:
        self.n_var = n_var
        self.offset = offset
        self.target = tuple(reversed(range(n_var)))
        self.calls = 0

    def initial_solution(self) -> Solution:
        return Solution(tuple(range(self.n_var)))

    def cost(self, solution: Solution) -> float:
        self.calls += 1
        return self.offset + float(sum(abs(v - t) for v, t in zip(solution.values, self.target)))


class AssignmentStrategy:
    def difference(self, a: Solution, b: Solution) -> float:
        return float(sum(x != y for x, y in zip(a.values, b.values)))

    def extract_variables(self, solutions: Sequence[Solution]) -> list[tuple[int, int]]:
        seen: dict[tuple[int, int], None] = {}
        for solution in solutions:
            for pos, val in enumerate(solution.values):
                seen.setdefault((pos, val), None)
        return list(seen)

    def contains_variable(self, solution: Solution, variable: tuple[int, int]) -> bool:
        pos, val = variable
        return solution.values[pos] == val

    def assemble_solution(self, reference_set, variables, scores) -> Solution:
        n = len(reference_set[0])
        values: list[int | None] = [None] * n
        used: set[int] = set()
        for (pos, val), score in zip(variables, scores):
            if score >= 1 and values[pos] is None and val not in used:
                values[pos] = val
                used.add(val)
        remaining = iter(v for v in range(n) if v not in used)
        return Solution(tuple(v if v is not None else next(remaining) for v in values))


@pytest.fixture
def problem() -> AssignmentProblem:
    return AssignmentProblem(n_var=5)


@pytest.fixture
def strategy() -> AssignmentStrategy:
    return AssignmentStrategy()


@pytest.fixture
def make_problem():
    return AssignmentProblem
