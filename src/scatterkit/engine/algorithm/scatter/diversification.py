# algorithm/scatter/diversification.py
"""
Diversification generator for scatter search.

Trial solutions are stride re-orderings of a seed: for a stride ``h`` the
seed is read at positions ``h, 2h, 3h, ...`` then ``h-1, 2h-1, ...`` down to
``1, h+1, 2h+1, ...`` (1-based). Each stride yields a distinct interleaving of
the seed without any random shuffling.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from scatterkit.foundation.exceptions import InvalidProblemError
from scatterkit.foundation.solution import Solution


def stride_permutation(values: Sequence[Any], stride: int) -> tuple[Any, ...]:
    """Re-read ``values`` in stride order.

    Parameters
    ----------
    values : Sequence
        Seed value sequence of length ``n``.
    stride : int
        Step size ``h`` with ``1 <= h <= n - 1``.

    Returns
    -------
    tuple
        A permutation of ``values``.

    Examples
    --------
    >>> stride_permutation((1, 2, 3, 4, 5), 2)
    (2, 4, 1, 3, 5)
    """
    n = len(values)
    if not 1 <= stride <= n - 1:
        raise ValueError(f"Stride must lie in [1, {n - 1}], got {stride}.")
    out = []
    for s in range(stride, 0, -1):
        for pos in range(s, n + 1, stride):
            out.append(values[pos - 1])
    return tuple(out)


class DiversificationGenerator:
    """Expands one seed solution into ``n_trials`` stride-permuted trials."""

    def __init__(self, n_trials: int) -> None:
        if n_trials < 1:
            raise ValueError("n_trials must be positive.")
        self.n_trials = int(n_trials)

    def generate(self, seed: Solution, rng: np.random.Generator) -> list[Solution]:
        n = len(seed)
        if n <= 1:
            raise InvalidProblemError(
                f"Cannot diversify a solution of dimension {n}; stride generation needs at least 2 values.",
                n_var=n,
            )
        strides = rng.integers(1, n, size=self.n_trials)
        return [Solution(stride_permutation(seed.values, int(h))) for h in strides]


__all__ = ["stride_permutation", "DiversificationGenerator"]
