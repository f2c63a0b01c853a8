# algorithm/scatter/subsets.py
"""
Subset generation for scatter search.

Subsets are tuples of reference set positions. Pairs enumerate every
combination; triples and quadruples are greedy one-element extensions of the
previous size by the best-ranked position not yet present, so the subset count
stays proportional to the number of pairs.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from scatterkit.foundation.exceptions import PreconditionError
from scatterkit.foundation.solution import Solution

if TYPE_CHECKING:
    from scatterkit.foundation.problem.types import ScatterProblemProtocol

Subset = tuple[int, ...]


class SubsetIndex:
    """Size-keyed subset storage that never stores the same combination twice.

    Two subsets are the same combination when their sorted index tuples are
    equal, whatever their insertion order.
    """

    def __init__(self) -> None:
        self._by_size: dict[int, list[Subset]] = {}
        self._canonical: set[Subset] = set()

    def add(self, indices: Iterable[int]) -> bool:
        """Store ``indices``; return False when the combination is already known."""
        subset = tuple(int(i) for i in indices)
        if len(set(subset)) != len(subset):
            raise ValueError(f"Subset {subset} repeats an index.")
        canonical = tuple(sorted(subset))
        if canonical in self._canonical:
            return False
        self._canonical.add(canonical)
        self._by_size.setdefault(len(subset), []).append(subset)
        return True

    def get(self, size: int) -> list[Subset]:
        subsets = self._by_size.get(size)
        if not subsets:
            raise PreconditionError(
                f"No subsets of size {size} are stored.",
                "Subsets of this size need a reference set with at least that many solutions",
                {"size": size, "available": self.sizes()},
            )
        return list(subsets)

    def sizes(self) -> list[int]:
        return sorted(self._by_size)

    def __contains__(self, indices: object) -> bool:
        if not isinstance(indices, Iterable):
            return False
        return tuple(sorted(indices)) in self._canonical

    def __len__(self) -> int:
        return len(self._canonical)


@dataclass
class Subsets:
    """Output of one subset generation call."""

    index: SubsetIndex
    best_block: Subset

    def pairs(self) -> list[Subset]:
        return self.index.get(2)

    def triples(self) -> list[Subset]:
        return self.index.get(3)

    def quadruples(self) -> list[Subset]:
        return self.index.get(4)

    def representatives(self, rng: np.random.Generator | None = None) -> list[Subset]:
        """One subset per category, in combination order.

        The pair is always the first stored one, ``(0, 1)``. The triple and the
        quadruple are drawn uniformly with ``rng`` (the first stored ones when
        ``rng`` is None). The best block comes last.
        """

        def pick(subsets: list[Subset]) -> Subset:
            if rng is None:
                return subsets[0]
            return subsets[int(rng.integers(len(subsets)))]

        return [self.pairs()[0], pick(self.triples()), pick(self.quadruples()), self.best_block]


def extend_with_best(subset: Subset, ranking: Sequence[int]) -> Subset | None:
    """Append the first ranked index missing from ``subset`` (None if all present)."""
    members = set(subset)
    for idx in ranking:
        if idx not in members:
            return subset + (int(idx),)
    return None


class SubsetGenerator:
    """Builds pair, triple, quadruple and best-block subsets of a reference set."""

    def __init__(self, problem: ScatterProblemProtocol, num_best_elements: int) -> None:
        self.problem = problem
        self.num_best_elements = int(num_best_elements)

    def generate(self, reference_set: Sequence[Solution]) -> Subsets:
        b = len(reference_set)
        if b < 2:
            raise PreconditionError(
                f"Subset generation needs at least 2 reference solutions, got {b}.",
                details={"size": b},
            )
        costs = np.array([self.problem.cost(s) for s in reference_set], dtype=float)
        ranking = [int(i) for i in np.argsort(costs, kind="stable")]

        index = SubsetIndex()
        for i in range(b - 1):
            for j in range(i + 1, b):
                index.add((i, j))

        for size in (2, 3):
            if size not in index.sizes():
                break
            for subset in index.get(size):
                extended = extend_with_best(subset, ranking)
                if extended is not None:
                    index.add(extended)

        best_block = tuple(ranking[: self.num_best_elements])
        if best_block:
            index.add(best_block)
        return Subsets(index=index, best_block=best_block)


__all__ = ["Subset", "SubsetIndex", "Subsets", "SubsetGenerator", "extend_with_best"]
