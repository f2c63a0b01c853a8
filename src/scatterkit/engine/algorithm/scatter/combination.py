# algorithm/scatter/combination.py
"""
Solution combination for scatter search.

Each subset category (pairs, triples, quadruples, best block) yields one new
solution from its representative subset: the reference solutions involved vote
on the problem variables with
inverse-cost weights, and the problem strategy assembles a solution from the
rounded votes.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from scatterkit.foundation.exceptions import ZeroCostError
from scatterkit.foundation.solution import Solution

from .subsets import Subset, Subsets

if TYPE_CHECKING:
    from scatterkit.foundation.problem.types import CombinationStrategy, ScatterProblemProtocol, Variable


def flatten_members(subsets: Sequence[Subset]) -> list[int]:
    """Sorted distinct reference set positions used by ``subsets``."""
    return sorted({int(i) for subset in subsets for i in subset})


def member_weights(
    costs: Sequence[float],
    zero_cost_policy: str = "raise",
    cost_epsilon: float = 1e-12,
    members: Sequence[int] | None = None,
) -> np.ndarray:
    """Inverse-cost weights normalized to sum to one.

    Lower cost means a larger weight. A cost that is not strictly positive
    raises :class:`ZeroCostError` under ``"raise"``; under ``"guard"`` it is
    clamped to ``cost_epsilon`` first.
    """
    c = np.asarray(costs, dtype=float)
    bad = np.flatnonzero(c <= 0.0)
    if bad.size:
        if zero_cost_policy != "guard":
            pos = int(bad[0])
            label = members[pos] if members is not None else pos
            raise ZeroCostError(int(label), float(c[pos]))
        c = np.maximum(c, cost_epsilon)
    inv = 1.0 / c
    return inv / inv.sum()


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def variable_scores(
    solutions: Sequence[Solution],
    weights: Sequence[float],
    variables: Sequence[Variable],
    strategy: CombinationStrategy,
) -> list[int]:
    """Rounded weighted vote of ``solutions`` for each variable."""
    scores = []
    for var in variables:
        score = 0.0
        for solution, weight in zip(solutions, weights):
            if strategy.contains_variable(solution, var):
                score += float(weight)
        scores.append(round_half_up(score))
    return scores


class SolutionCombiner:
    """Produces one combined solution per subset category."""

    def __init__(
        self,
        problem: ScatterProblemProtocol,
        strategy: CombinationStrategy,
        zero_cost_policy: str = "raise",
        cost_epsilon: float = 1e-12,
    ) -> None:
        self.problem = problem
        self.strategy = strategy
        self.zero_cost_policy = zero_cost_policy
        self.cost_epsilon = cost_epsilon

    def combine_members(self, reference_set: Sequence[Solution], members: Sequence[int]) -> Solution:
        solutions = [reference_set[i] for i in members]
        costs = [self.problem.cost(s) for s in solutions]
        weights = member_weights(costs, self.zero_cost_policy, self.cost_epsilon, members)
        variables = self.strategy.extract_variables(solutions)
        scores = variable_scores(solutions, weights, variables, self.strategy)
        return self.strategy.assemble_solution(reference_set, variables, scores)

    def combine(
        self,
        reference_set: Sequence[Solution],
        subsets: Subsets,
        rng: np.random.Generator | None = None,
    ) -> list[Solution]:
        """Return exactly four new solutions (pair, triple, quadruple, best block).

        Each solution comes from the representative subset of its category
        (see :meth:`Subsets.representatives`).
        """
        return [
            self.combine_members(reference_set, flatten_members([subset]))
            for subset in subsets.representatives(rng)
        ]


__all__ = [
    "flatten_members",
    "member_weights",
    "round_half_up",
    "variable_scores",
    "SolutionCombiner",
]
