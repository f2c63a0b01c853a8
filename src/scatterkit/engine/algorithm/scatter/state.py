"""Scatter search state container and result building."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from scatterkit.foundation.solution import Solution


class SearchPhase(str, Enum):
    """Lifecycle of a scatter search run."""

    SEED_GENERATED = "seed_generated"
    BUILDING = "building"
    READY = "ready"
    COMBINING = "combining"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


@dataclass
class ScatterSearchState:
    """Mutable run state owned by the controller.

    ``reference_set`` is replaced, never mutated, on every update.
    """

    rng: np.random.Generator
    phase: SearchPhase = SearchPhase.SEED_GENERATED
    seed_solution: Solution | None = None
    reference_set: list[Solution] = field(default_factory=list)
    initial_reference_set: list[Solution] = field(default_factory=list)
    last_batch: list[Solution] = field(default_factory=list)
    best: Solution | None = None
    build_rounds: int = 0
    iteration: int = 0
    n_eval: int = 0
    stopped_early: bool = False

    def track(self, solutions: list[Solution]) -> None:
        """Remember the lowest-cost evaluated solution seen so far."""
        for solution in solutions:
            if solution.cost is None:
                continue
            if self.best is None or solution.cost < self.best.cost:  # type: ignore[operator]
                self.best = solution


def build_scatter_result(state: ScatterSearchState, best: Solution, result_mode: str) -> dict[str, Any]:
    """Build final result dictionary from scatter search state.

    Parameters
    ----------
    state : ScatterSearchState
        The run state.
    best : Solution
        The solution selected according to ``result_mode``.
    result_mode : str
        ``"last_batch"`` or ``"best_ever"``.

    Returns
    -------
    dict
        Result dictionary with the returned solution, its values (X) and cost
        (F), the final reference set and run counters. ``evaluations`` counts
        the cost calls made by the search itself; calls an improver makes on
        its own problem reference are not included.
    """
    return {
        "solution": best,
        "X": best.as_array(),
        "F": best.cost,
        "reference_set": list(state.reference_set),
        "initial_reference_set": list(state.initial_reference_set),
        "last_batch": list(state.last_batch),
        "iterations": state.iteration,
        "build_rounds": state.build_rounds,
        "evaluations": state.n_eval,
        "result_mode": result_mode,
        "stopped_early": state.stopped_early,
    }


__all__ = ["SearchPhase", "ScatterSearchState", "build_scatter_result"]
