"""Scatter search configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from scatterkit.foundation.exceptions import ConfigurationError

from .base import _require_choice, _require_fields, _SerializableConfig

DEDUP_POLICIES = ("strict", "forward_skip")
RESULT_MODES = ("last_batch", "best_ever")
ZERO_COST_POLICIES = ("raise", "guard")

MIN_REF_SET_SIZE = 4


@dataclass(frozen=True)
class ScatterSearchConfigData(_SerializableConfig):
    ref_set_size: int
    max_iterations: int
    improvement_budget: int = 100
    max_build_rounds: int = 20
    improve_offspring: bool = True
    dedup_policy: str = "strict"
    result_mode: str = "last_batch"
    zero_cost_policy: str = "raise"
    cost_epsilon: float = 1e-12

    @property
    def candidate_set_size(self) -> int:
        """Trial solutions produced per diversification round."""
        return 4 * self.ref_set_size

    @property
    def num_best_elements(self) -> int:
        """Reference set share selected by cost (intensification)."""
        return self.ref_set_size // 2


class ScatterSearchConfig:
    """
    Declarative configuration holder for scatter search settings.

    Examples:
        cfg = ScatterSearchConfig.default()
        cfg = ScatterSearchConfig().ref_set_size(10).max_iterations(50).fixed()
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(
        cls,
        ref_set_size: int = 10,
        max_iterations: int = 50,
    ) -> ScatterSearchConfigData:
        """Create a default scatter search configuration."""
        return cls().ref_set_size(ref_set_size).max_iterations(max_iterations).fixed()

    def ref_set_size(self, value: int) -> "ScatterSearchConfig":
        self._cfg["ref_set_size"] = int(value)
        return self

    def max_iterations(self, value: int) -> "ScatterSearchConfig":
        self._cfg["max_iterations"] = int(value)
        return self

    def improvement_budget(self, value: int) -> "ScatterSearchConfig":
        self._cfg["improvement_budget"] = int(value)
        return self

    def max_build_rounds(self, value: int) -> "ScatterSearchConfig":
        self._cfg["max_build_rounds"] = int(value)
        return self

    def improve_offspring(self, enabled: bool = True) -> "ScatterSearchConfig":
        self._cfg["improve_offspring"] = bool(enabled)
        return self

    def dedup_policy(self, value: str) -> "ScatterSearchConfig":
        self._cfg["dedup_policy"] = str(value)
        return self

    def result_mode(self, value: str) -> "ScatterSearchConfig":
        self._cfg["result_mode"] = str(value)
        return self

    def zero_cost_policy(self, value: str) -> "ScatterSearchConfig":
        self._cfg["zero_cost_policy"] = str(value)
        return self

    def cost_epsilon(self, value: float) -> "ScatterSearchConfig":
        self._cfg["cost_epsilon"] = float(value)
        return self

    def fixed(self) -> ScatterSearchConfigData:
        _require_fields(self._cfg, ("ref_set_size", "max_iterations"), "ScatterSearch")
        cfg = ScatterSearchConfigData(
            ref_set_size=self._cfg["ref_set_size"],
            max_iterations=self._cfg["max_iterations"],
            improvement_budget=self._cfg.get("improvement_budget", 100),
            max_build_rounds=self._cfg.get("max_build_rounds", 20),
            improve_offspring=self._cfg.get("improve_offspring", True),
            dedup_policy=self._cfg.get("dedup_policy", "strict"),
            result_mode=self._cfg.get("result_mode", "last_batch"),
            zero_cost_policy=self._cfg.get("zero_cost_policy", "raise"),
            cost_epsilon=self._cfg.get("cost_epsilon", 1e-12),
        )
        _validate(cfg)
        return cfg


def _validate(cfg: ScatterSearchConfigData) -> None:
    if cfg.ref_set_size < MIN_REF_SET_SIZE:
        raise ConfigurationError(
            f"ref_set_size must be at least {MIN_REF_SET_SIZE}, got {cfg.ref_set_size}.",
            "Pair, triple and quadruple subsets all need at least four reference solutions",
            {"ref_set_size": cfg.ref_set_size},
        )
    if cfg.max_iterations < 1:
        raise ConfigurationError(f"max_iterations must be positive, got {cfg.max_iterations}.")
    if cfg.improvement_budget < 0:
        raise ConfigurationError(f"improvement_budget must be non-negative, got {cfg.improvement_budget}.")
    if cfg.max_build_rounds < 1:
        raise ConfigurationError(f"max_build_rounds must be positive, got {cfg.max_build_rounds}.")
    if not cfg.cost_epsilon > 0.0:
        raise ConfigurationError(f"cost_epsilon must be strictly positive, got {cfg.cost_epsilon}.")
    _require_choice("dedup_policy", cfg.dedup_policy, DEDUP_POLICIES)
    _require_choice("result_mode", cfg.result_mode, RESULT_MODES)
    _require_choice("zero_cost_policy", cfg.zero_cost_policy, ZERO_COST_POLICIES)


__all__ = [
    "ScatterSearchConfig",
    "ScatterSearchConfigData",
    "DEDUP_POLICIES",
    "RESULT_MODES",
    "ZERO_COST_POLICIES",
]
