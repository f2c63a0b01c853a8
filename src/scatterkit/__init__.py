"""scatterkit: scatter search for combinatorial optimization."""

from .engine.algorithm import ScatterSearch, ScatterSearchConfig, ScatterSearchConfigData
from .foundation.exceptions import (
    ConfigurationError,
    InvalidProblemError,
    PreconditionError,
    ScatterKitError,
    StagnationError,
    ZeroCostError,
)
from .foundation.logging import configure_scatterkit_logging
from .foundation.observer import NoOpObserver, Observer, RunContext
from .foundation.problem import (
    CombinationStrategy,
    EdgeCombination,
    LocalImprover,
    ScatterProblemProtocol,
    TSPProblem,
    TwoOptImprover,
)
from .foundation.solution import Solution

__all__ = [
    "ScatterSearch",
    "ScatterSearchConfig",
    "ScatterSearchConfigData",
    "Solution",
    "ScatterProblemProtocol",
    "LocalImprover",
    "CombinationStrategy",
    "TSPProblem",
    "TwoOptImprover",
    "EdgeCombination",
    "Observer",
    "NoOpObserver",
    "RunContext",
    "ScatterKitError",
    "ConfigurationError",
    "InvalidProblemError",
    "PreconditionError",
    "StagnationError",
    "ZeroCostError",
    "configure_scatterkit_logging",
]
