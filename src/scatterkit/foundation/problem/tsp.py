# problem/tsp.py
"""
Closed-tour travelling salesman problem with its scatter search strategies.

- TSPProblem: permutation of cities, cost = closed tour length
- TwoOptImprover: first-improvement 2-opt local search
- EdgeCombination: edge-based difference, voting and tour assembly
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

import numpy as np

from scatterkit.foundation.solution import Solution

Edge = tuple[int, int]


def _default_coordinates() -> np.ndarray:
    # Simple layout with a few asymmetric points to avoid symmetry degeneracy.
    return np.array(
        [
            (0.0, 0.0),
            (1.0, 0.0),
            (1.3, 0.8),
            (0.5, 1.5),
            (-0.3, 1.0),
            (-0.6, 0.2),
        ],
        dtype=float,
    )


def _circle_coordinates(n_cities: int) -> np.ndarray:
    if n_cities < 3:
        raise ValueError("TSP problems require at least 3 cities.")
    angles = np.linspace(0.0, 2.0 * math.pi, num=n_cities, endpoint=False)
    return np.stack([np.cos(angles), np.sin(angles)], axis=1)


def tour_edges(tour: Sequence[int]) -> list[Edge]:
    """Undirected edges of a closed tour, in tour order."""
    n = len(tour)
    edges = []
    for k in range(n):
        a, b = int(tour[k]), int(tour[(k + 1) % n])
        edges.append((a, b) if a < b else (b, a))
    return edges


class TSPProblem:
    """
    Single-objective travelling salesman problem.
    Cost: total length of the closed tour.
    """

    def __init__(
        self,
        n_cities: int | None = None,
        coordinates: Sequence[Sequence[float]] | None = None,
    ) -> None:
        if coordinates is not None:
            coords = np.asarray(coordinates, dtype=float)
        elif n_cities is not None:
            coords = _circle_coordinates(int(n_cities))
        else:
            coords = _default_coordinates()
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("Coordinates must be an array-like of shape (n_cities, 2).")
        if coords.shape[0] < 3:
            raise ValueError("TSP problems require at least 3 cities.")
        self.coordinates = coords
        self.n_var = coords.shape[0]
        deltas = coords[:, None, :] - coords[None, :, :]
        self.distances = np.linalg.norm(deltas, axis=2)

    @classmethod
    def random(cls, n_cities: int, seed: int = 0) -> "TSPProblem":
        rng = np.random.default_rng(seed)
        return cls(coordinates=rng.random((int(n_cities), 2)))

    def tour_lengths(self, X: np.ndarray) -> np.ndarray:
        """Closed tour lengths for a batch of routes of shape (N, n_var)."""
        routes = np.asarray(X, dtype=int)
        if routes.ndim != 2 or routes.shape[1] != self.n_var:
            raise ValueError(f"Expected routes of shape (N, {self.n_var}).")
        nxt = np.roll(routes, -1, axis=1)
        return self.distances[routes, nxt].sum(axis=1)

    def initial_solution(self) -> Solution:
        return Solution(tuple(range(self.n_var)))

    def cost(self, solution: Solution) -> float:
        return float(self.tour_lengths(np.asarray(solution.values, dtype=int)[None, :])[0])


class TwoOptImprover:
    """First-improvement 2-opt; ``budget`` caps the number of applied moves.

    The first city of the tour never moves, so the tour keeps its anchor.
    """

    def __init__(self, problem: TSPProblem, tol: float = 1e-12) -> None:
        self.problem = problem
        self.tol = tol

    def improve(self, solution: Solution, budget: int) -> Solution:
        d = self.problem.distances
        tour = [int(v) for v in solution.values]
        n = len(tour)
        moves = 0
        improved = True
        while improved and moves < budget:
            improved = False
            for i in range(n - 1):
                a, b = tour[i], tour[i + 1]
                for j in range(i + 2, n):
                    if i == 0 and j == n - 1:
                        continue
                    c, e = tour[j], tour[(j + 1) % n]
                    delta = d[a, c] + d[b, e] - d[a, b] - d[c, e]
                    if delta < -self.tol:
                        tour[i + 1 : j + 1] = reversed(tour[i + 1 : j + 1])
                        moves += 1
                        improved = True
                        break
                if improved:
                    break
        result = Solution(tuple(tour))
        return result.with_cost(self.problem.cost(result))


class EdgeCombination:
    """Scatter search combination over undirected tour edges.

    Variables are edges ``(i, j)`` with ``i < j``. Assembly takes voted edges
    (score >= 1) by descending score, then the remaining variables by how many
    reference solutions contain them, keeping each edge that still fits in a
    tour (degree at most two, no early cycle). Leftover fragments are linked by
    nearest neighbour.
    """

    def __init__(self, problem: TSPProblem) -> None:
        self.problem = problem

    def difference(self, a: Solution, b: Solution) -> float:
        return float(len(set(tour_edges(a.values)) - set(tour_edges(b.values))))

    def extract_variables(self, solutions: Sequence[Solution]) -> list[Edge]:
        seen: dict[Edge, None] = {}
        for solution in solutions:
            for edge in tour_edges(solution.values):
                seen.setdefault(edge, None)
        return list(seen)

    def contains_variable(self, solution: Solution, variable: Edge) -> bool:
        return variable in set(tour_edges(solution.values))

    def assemble_solution(
        self,
        reference_set: Sequence[Solution],
        variables: Sequence[Edge],
        scores: Sequence[int],
    ) -> Solution:
        n = self.problem.n_var
        adjacency: list[list[int]] = [[] for _ in range(n)]
        parent = list(range(n))

        def find(x: int) -> int:
            while parent[x] != x:
                parent[x] = parent[parent[x]]
                x = parent[x]
            return x

        # Voted edges by descending score, then the rest by reference set frequency.
        ranked = sorted(range(len(variables)), key=lambda k: -scores[k])
        voted = [variables[k] for k in ranked if scores[k] >= 1]
        frequency = Counter(edge for solution in reference_set for edge in set(tour_edges(solution.values)))
        rest = sorted((variables[k] for k in ranked if scores[k] < 1), key=lambda e: -frequency[e])

        for a, b in voted + rest:
            if len(adjacency[a]) >= 2 or len(adjacency[b]) >= 2:
                continue
            ra, rb = find(a), find(b)
            if ra == rb:
                continue
            parent[ra] = rb
            adjacency[a].append(b)
            adjacency[b].append(a)

        return Solution(tuple(self._walk(adjacency)))

    def _walk(self, adjacency: list[list[int]]) -> list[int]:
        d = self.problem.distances
        n = self.problem.n_var
        visited = [False] * n
        tour = [0]
        visited[0] = True
        current = 0
        while len(tour) < n:
            nxt = next((c for c in adjacency[current] if not visited[c]), None)
            if nxt is None:
                open_ends = [c for c in range(n) if not visited[c] and len(adjacency[c]) <= 1]
                pool = open_ends or [c for c in range(n) if not visited[c]]
                nxt = min(pool, key=lambda c: d[current, c])
            tour.append(nxt)
            visited[nxt] = True
            current = nxt
        return tour


__all__ = ["TSPProblem", "TwoOptImprover", "EdgeCombination", "tour_edges"]
