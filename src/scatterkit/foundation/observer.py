from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from scatterkit.foundation.solution import Solution


@dataclass
class RunContext:
    """
    Encapsulates the static context of a scatter search run.
    Passed to on_start events.
    """

    problem: Any
    strategy: Any
    config: Any
    seed: int | None = None
    algorithm_name: str = "scatter_search"


@runtime_checkable
class Observer(Protocol):
    """
    Observer interface for run lifecycle events.

    Implementations may also define ``should_stop() -> bool``; it is polled
    between main-phase iterations.
    """

    def on_start(self, ctx: RunContext) -> None:
        """Called once before the initial phase."""
        ...

    def on_iteration(
        self,
        iteration: int,
        reference_set: list[Solution],
        stats: dict[str, Any] | None = None,
    ) -> None:
        """Called after every main-phase reference set update."""
        ...

    def on_end(self, best: Solution, final_stats: dict[str, Any] | None = None) -> None:
        """Called once with the returned solution."""
        ...


class NoOpObserver:
    """Default no-op implementation."""

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_iteration(
        self,
        iteration: int,
        reference_set: list[Solution],
        stats: dict[str, Any] | None = None,
    ) -> None:
        return None

    def on_end(self, best: Solution, final_stats: dict[str, Any] | None = None) -> None:
        return None


def observer_should_stop(observer: Observer) -> bool:
    should_stop = getattr(observer, "should_stop", None)
    if not callable(should_stop):
        return False
    return bool(should_stop())


__all__ = ["RunContext", "Observer", "NoOpObserver", "observer_should_stop"]
