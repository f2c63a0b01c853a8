from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Protocol, runtime_checkable

from scatterkit.foundation.solution import Solution

Variable = Hashable


@runtime_checkable
class ScatterProblemProtocol(Protocol):
    """Problem as seen by scatter search: a dimension, a seed and a cost."""

    n_var: int

    def initial_solution(self) -> Solution: ...

    def cost(self, solution: Solution) -> float: ...


@runtime_checkable
class LocalImprover(Protocol):
    """Returns a solution whose cost is not worse than the input's."""

    def improve(self, solution: Solution, budget: int) -> Solution: ...


@runtime_checkable
class CombinationStrategy(Protocol):
    """Problem-specific pieces of the scatter search combination method."""

    def difference(self, a: Solution, b: Solution) -> float: ...

    def extract_variables(self, solutions: Sequence[Solution]) -> list[Variable]: ...

    def contains_variable(self, solution: Solution, variable: Variable) -> bool: ...

    def assemble_solution(
        self,
        reference_set: Sequence[Solution],
        variables: Sequence[Variable],
        scores: Sequence[int],
    ) -> Solution: ...


__all__ = ["Variable", "ScatterProblemProtocol", "LocalImprover", "CombinationStrategy"]
