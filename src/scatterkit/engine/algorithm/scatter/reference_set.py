# algorithm/scatter/reference_set.py
"""
Reference set update for scatter search.

The reference set keeps two kinds of members:
- Intensification: the ``num_best_elements`` lowest-cost pool members
- Diversification: the remaining members ranked by mean dissimilarity to the
  intensification block, most diverse first
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from scatterkit.foundation.solution import Solution

if TYPE_CHECKING:
    from scatterkit.foundation.problem.types import CombinationStrategy, ScatterProblemProtocol


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def remove_duplicates(solutions: Sequence[Solution], policy: str = "strict") -> list[Solution]:
    """Drop structurally equal solutions, keeping first occurrences.

    Parameters
    ----------
    solutions : Sequence[Solution]
        Candidates in priority order.
    policy : str
        ``"strict"`` guarantees no two equal solutions survive.
        ``"forward_skip"`` mimics an in-place forward deletion that does not
        step back after a removal: the element shifted into the freed slot is
        neither checked nor recorded, so some duplicates can survive.

    Returns
    -------
    list[Solution]
        A new list; the input is left untouched.
    """
    if policy == "strict":
        seen: set[tuple] = set()
        out = []
        for solution in solutions:
            if solution.values in seen:
                continue
            seen.add(solution.values)
            out.append(solution)
        return out
    if policy == "forward_skip":
        out = list(solutions)
        seen = set()
        i = 0
        while i < len(out):
            key = out[i].values
            if key in seen:
                del out[i]
            seen.add(key)
            i += 1
        return out
    raise ValueError(f"Unknown duplicate policy '{policy}'.")


@dataclass(frozen=True)
class Selection:
    """Pool indices chosen by a reference set update, in rank order."""

    intensification: list[int]
    diversification: list[int]
    costs: np.ndarray

    @property
    def order(self) -> list[int]:
        return self.intensification + self.diversification


class ReferenceSetUpdater:
    """Merges candidates into a reference set by quality, then diversity.

    Parameters
    ----------
    problem : ScatterProblemProtocol
        Provides ``cost``; costs are recomputed on every update.
    strategy : CombinationStrategy
        Provides the ``difference`` measure.
    ref_set_size : int
        Target reference set size ``b``.
    num_best_elements : int
        Intensification share ``r1``.
    dedup_policy : str
        Passed to :func:`remove_duplicates`.
    """

    def __init__(
        self,
        problem: ScatterProblemProtocol,
        strategy: CombinationStrategy,
        ref_set_size: int,
        num_best_elements: int,
        dedup_policy: str = "strict",
    ) -> None:
        if not 0 <= num_best_elements <= ref_set_size:
            raise ValueError("num_best_elements must lie in [0, ref_set_size].")
        self.problem = problem
        self.strategy = strategy
        self.ref_set_size = int(ref_set_size)
        self.num_best_elements = int(num_best_elements)
        self.dedup_policy = dedup_policy

    def select(self, pool: Sequence[Solution]) -> Selection:
        """Rank ``pool`` into an intensification block and a diversity ranking."""
        costs = np.array([self.problem.cost(s) for s in pool], dtype=float)
        order = np.argsort(costs, kind="stable")
        r1 = min(self.num_best_elements, len(pool))
        intens = [int(i) for i in order[:r1]]
        rest = [int(i) for i in order[r1:]]
        if not intens or not rest:
            return Selection(intens, rest, costs)

        diff = np.empty((len(rest), len(intens)), dtype=float)
        for a, i in enumerate(rest):
            for b, j in enumerate(intens):
                diff[a, b] = -self.strategy.difference(pool[i], pool[j])
        mean_diff = diff.mean(axis=1)
        ranked = np.argsort(mean_diff, kind="stable")
        return Selection(intens, [rest[int(k)] for k in ranked], costs)

    def update(self, reference_set: Sequence[Solution], candidates: Sequence[Solution]) -> list[Solution]:
        """Return the next reference set built from the current one plus ``candidates``.

        Neither input sequence is modified.
        """
        merged = list(reference_set) + list(candidates)
        pool = remove_duplicates(merged, self.dedup_policy)
        dropped = len(merged) - len(pool)
        if dropped:
            _logger().debug("Reference set update dropped %d duplicate solution(s).", dropped)

        selection = self.select(pool)
        chosen = selection.order[: self.ref_set_size]
        return [pool[i].with_cost(selection.costs[i]) for i in chosen]


__all__ = ["remove_duplicates", "Selection", "ReferenceSetUpdater"]
