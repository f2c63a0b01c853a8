"""
Immutable solution value used across scatterkit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np


@dataclass(frozen=True)
class Solution:
    """Ordered sequence of decision values with an optional cached cost.

    Equality and hashing are structural: two solutions holding the same value
    sequence compare equal whatever their cached cost.

    Examples
    --------
    >>> a = Solution((2, 0, 1))
    >>> a == Solution([2, 0, 1], cost=4.5)
    True
    >>> a.with_cost(4.5).cost
    4.5
    """

    values: tuple[Any, ...]
    cost: float | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    def __len__(self) -> int:
        return len(self.values)

    @property
    def evaluated(self) -> bool:
        return self.cost is not None

    def with_cost(self, cost: float) -> "Solution":
        """Return a copy carrying ``cost``."""
        return replace(self, cost=float(cost))

    def as_array(self) -> np.ndarray:
        return np.asarray(self.values)


def best_of(solutions: Sequence[Solution]) -> Solution:
    """Lowest-cost solution of an evaluated sequence (first one wins ties)."""
    if not solutions:
        raise ValueError("Cannot pick the best of an empty solution sequence.")
    if any(s.cost is None for s in solutions):
        raise ValueError("best_of() requires evaluated solutions.")
    return min(solutions, key=lambda s: s.cost)


__all__ = ["Solution", "best_of"]
