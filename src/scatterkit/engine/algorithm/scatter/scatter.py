# algorithm/scatter/scatter.py
"""
Scatter search controller.

This module contains the ScatterSearch class with the two-phase loop:
- Initial phase: diversify a seed, improve the trials and fill the reference set
- Main phase: subset generation, combination, improvement and reference set update

Components live in sibling modules:
- Diversification: diversification.py
- Reference set update and duplicate removal: reference_set.py
- Subset generation: subsets.py
- Combination by weighted voting: combination.py
- State and results: state.py

References:
    F. Glover, M. Laguna, and R. Marti, "Fundamentals of Scatter Search and
    Path Relinking," Control and Cybernetics 29(3), 2000.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from scatterkit.foundation.exceptions import OptimizationError, StagnationError
from scatterkit.foundation.observer import NoOpObserver, Observer, RunContext, observer_should_stop
from scatterkit.foundation.solution import Solution, best_of

from .combination import SolutionCombiner
from .diversification import DiversificationGenerator
from .reference_set import ReferenceSetUpdater
from .state import ScatterSearchState, SearchPhase, build_scatter_result
from .subsets import SubsetGenerator

if TYPE_CHECKING:
    from scatterkit.engine.algorithm.config import ScatterSearchConfigData
    from scatterkit.foundation.problem.types import CombinationStrategy, LocalImprover, ScatterProblemProtocol


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class _CountingProblem:
    """Problem proxy that counts the cost evaluations made by the search.

    Improvers hold their own problem reference, so their calls are not counted.
    """

    def __init__(self, problem: ScatterProblemProtocol) -> None:
        self._problem = problem
        self.n_eval = 0

    @property
    def n_var(self) -> int:
        return int(self._problem.n_var)

    def initial_solution(self) -> Solution:
        return self._problem.initial_solution()

    def cost(self, solution: Solution) -> float:
        self.n_eval += 1
        return float(self._problem.cost(solution))


class ScatterSearch:
    """Scatter search over a combinatorial problem.

    Parameters
    ----------
    config : ScatterSearchConfigData
        Frozen configuration (see ``ScatterSearchConfig``).
    problem : ScatterProblemProtocol
        Supplies the dimension, the seed solution and the cost.
    strategy : CombinationStrategy
        Supplies difference, variable extraction and solution assembly.
    improver : LocalImprover | None
        Local search applied to trial and (optionally) combined solutions.
        ``None`` keeps solutions unchanged.
    observer : Observer | None
        Lifecycle callbacks; ``should_stop()`` ends the main phase early.

    Examples
    --------
    >>> from scatterkit.engine.algorithm.config import ScatterSearchConfig
    >>> from scatterkit.foundation.problem.tsp import EdgeCombination, TSPProblem, TwoOptImprover
    >>> problem = TSPProblem.random(12, seed=3)
    >>> search = ScatterSearch(
    ...     ScatterSearchConfig.default(ref_set_size=6, max_iterations=10),
    ...     problem,
    ...     EdgeCombination(problem),
    ...     improver=TwoOptImprover(problem),
    ... )
    >>> result = search.run(seed=42)
    >>> result["solution"].cost == result["F"]
    True
    """

    def __init__(
        self,
        config: ScatterSearchConfigData,
        problem: ScatterProblemProtocol,
        strategy: CombinationStrategy,
        improver: LocalImprover | None = None,
        observer: Observer | None = None,
    ) -> None:
        self.cfg = config
        self.problem = problem
        self.strategy = strategy
        self.improver = improver
        self.observer: Observer = observer or NoOpObserver()
        self._st: ScatterSearchState | None = None

    @property
    def state(self) -> ScatterSearchState | None:
        return self._st

    def run(self, seed: int | None = None) -> dict[str, Any]:
        """Run both phases and return the result dictionary.

        Parameters
        ----------
        seed : int | None
            Seed for the stride draws. Equal seeds give identical runs.

        Returns
        -------
        dict[str, Any]
            See :func:`build_scatter_result`.
        """
        cfg = self.cfg
        counted = _CountingProblem(self.problem)
        st = ScatterSearchState(rng=np.random.default_rng(seed))
        self._st = st

        diversifier = DiversificationGenerator(cfg.candidate_set_size)
        updater = ReferenceSetUpdater(
            counted, self.strategy, cfg.ref_set_size, cfg.num_best_elements, cfg.dedup_policy
        )
        subset_generator = SubsetGenerator(counted, cfg.num_best_elements)
        combiner = SolutionCombiner(counted, self.strategy, cfg.zero_cost_policy, cfg.cost_epsilon)

        self.observer.on_start(RunContext(problem=self.problem, strategy=self.strategy, config=cfg, seed=seed))

        self._initial_phase(st, counted, diversifier, updater)
        st.n_eval = counted.n_eval
        self._main_phase(st, counted, updater, subset_generator, combiner)
        st.n_eval = counted.n_eval

        best = st.best if cfg.result_mode == "best_ever" else best_of(st.last_batch)
        if best is None:
            raise OptimizationError(
                "Scatter search finished without an evaluated solution.",
                "Check that problem.cost returns a finite float for every solution",
                {"result_mode": cfg.result_mode, "iterations": st.iteration},
            )
        st.phase = SearchPhase.DONE
        _logger().info(
            "Scatter search done after %d iteration(s): cost %.6g (%s).",
            st.iteration,
            best.cost,
            cfg.result_mode,
        )
        result = build_scatter_result(st, best, cfg.result_mode)
        self.observer.on_end(best, {"iterations": st.iteration, "evals": st.n_eval})
        return result

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def _initial_phase(
        self,
        st: ScatterSearchState,
        problem: _CountingProblem,
        diversifier: DiversificationGenerator,
        updater: ReferenceSetUpdater,
    ) -> None:
        target = self.cfg.ref_set_size
        seed_solution = problem.initial_solution()
        st.seed_solution = seed_solution
        st.phase = SearchPhase.BUILDING

        reference_set: list[Solution] = []
        rounds = 0
        while len(reference_set) < target:
            if rounds >= self.cfg.max_build_rounds:
                raise StagnationError(rounds, len(reference_set), target)
            # Later rounds reseed from the current members so a small problem
            # still reaches enough distinct trials.
            current = seed_solution if not reference_set else reference_set[rounds % len(reference_set)]
            trials = diversifier.generate(current, st.rng)
            trials = [self._improve(problem, t) for t in trials]
            reference_set = updater.update(reference_set, trials)
            rounds += 1
            _logger().debug("Build round %d: reference set %d/%d.", rounds, len(reference_set), target)

        st.reference_set = reference_set
        st.initial_reference_set = list(reference_set)
        st.build_rounds = rounds
        st.track(reference_set)
        st.phase = SearchPhase.READY
        _logger().info("Reference set of %d solutions built in %d round(s).", target, rounds)

    def _main_phase(
        self,
        st: ScatterSearchState,
        problem: _CountingProblem,
        updater: ReferenceSetUpdater,
        subset_generator: SubsetGenerator,
        combiner: SolutionCombiner,
    ) -> None:
        st.phase = SearchPhase.COMBINING
        for it in range(self.cfg.max_iterations):
            subsets = subset_generator.generate(st.reference_set)
            batch = combiner.combine(st.reference_set, subsets, st.rng)
            if self.cfg.improve_offspring:
                batch = [self._improve(problem, s) for s in batch]
            else:
                batch = [s.with_cost(problem.cost(s)) for s in batch]
            st.last_batch = batch
            st.reference_set = updater.update(st.reference_set, batch)
            st.iteration = it + 1
            st.track(batch)

            stats = {
                "evals": problem.n_eval,
                "batch_best": min(s.cost for s in batch),
                "reference_best": st.reference_set[0].cost,
            }
            _logger().debug("Iteration %d: %s", st.iteration, stats)
            self.observer.on_iteration(st.iteration, list(st.reference_set), stats)
            if observer_should_stop(self.observer):
                st.stopped_early = True
                _logger().info("Observer requested stop after iteration %d.", st.iteration)
                break

    def _improve(self, problem: _CountingProblem, solution: Solution) -> Solution:
        if self.improver is not None and self.cfg.improvement_budget > 0:
            solution = self.improver.improve(solution, self.cfg.improvement_budget)
        return solution.with_cost(problem.cost(solution))


__all__ = ["ScatterSearch"]
