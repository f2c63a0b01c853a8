"""
scatterkit exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All scatterkit-specific exceptions inherit from ScatterKitError for easy catching.

Example:
    try:
        result = ScatterSearch(config, problem, strategy).run(seed=1)
    except ScatterKitError as e:
        print(f"Search failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class ScatterKitError(Exception):
    """
    Base exception for all scatterkit errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ScatterKitError, ValueError):
    """Raised when configuration is invalid or incomplete."""

    pass


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, fields: list[str], config_class: str | None = None) -> None:
        joined = ", ".join(fields)
        message = f"Missing required configuration: {joined}."
        suggestion = "Set the missing fields on the builder"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"fields": list(fields)})


class InvalidOptionError(ConfigurationError):
    """Raised when a configuration option takes a value outside its domain."""

    def __init__(self, option: str, value: Any, available: list[str]) -> None:
        message = f"Unknown {option} '{value}'."
        suggestion = f"Available values: {', '.join(available)}"
        super().__init__(message, suggestion, {"option": option, "value": value, "available": available})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(ScatterKitError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when a problem cannot be handled by scatter search."""

    def __init__(self, message: str, n_var: int | None = None) -> None:
        suggestion = "Scatter search diversification needs a problem dimension (n_var) greater than 1"
        super().__init__(message, suggestion, {"n_var": n_var})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(ScatterKitError):
    """Raised when optimization fails during execution."""

    pass


class StagnationError(OptimizationError):
    """Raised when the reference set cannot be filled within the round budget."""

    def __init__(self, rounds: int, size: int, target: int) -> None:
        message = f"Reference set reached {size}/{target} distinct solutions after {rounds} diversification rounds."
        suggestion = (
            "Duplicates dominate the candidate pool. Lower ref_set_size, raise max_build_rounds, "
            "or use a local improver that does not collapse trials onto the same optimum"
        )
        super().__init__(message, suggestion, {"rounds": rounds, "size": size, "target": target})


class PreconditionError(OptimizationError):
    """Raised when an operation is invoked on state that cannot support it."""

    pass


class ZeroCostError(OptimizationError, ZeroDivisionError):
    """Raised when inverse-cost weighting meets a cost that is not strictly positive."""

    def __init__(self, index: int, cost: float) -> None:
        message = f"Reference set member {index} has cost {cost!r}; combination weights need strictly positive costs."
        suggestion = "Shift the cost function to be positive or set zero_cost_policy('guard')"
        super().__init__(message, suggestion, {"index": index, "cost": cost})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "ScatterKitError",
    # Configuration
    "ConfigurationError",
    "MissingConfigError",
    "InvalidOptionError",
    # Problem
    "ProblemError",
    "InvalidProblemError",
    # Runtime
    "OptimizationError",
    "StagnationError",
    "PreconditionError",
    "ZeroCostError",
]
