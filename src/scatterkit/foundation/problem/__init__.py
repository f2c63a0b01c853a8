from .tsp import EdgeCombination, TSPProblem, TwoOptImprover
from .types import CombinationStrategy, LocalImprover, ScatterProblemProtocol, Variable

__all__ = [
    "ScatterProblemProtocol",
    "LocalImprover",
    "CombinationStrategy",
    "Variable",
    "TSPProblem",
    "TwoOptImprover",
    "EdgeCombination",
]
