from itertools import combinations

import numpy as np
import pytest

from scatterkit.engine.algorithm.scatter import SubsetGenerator, SubsetIndex, extend_with_best
from scatterkit.foundation.exceptions import PreconditionError
from scatterkit.foundation.solution import Solution


def _ranked_reference_set(problem, b):
    """Reference set sorted by non-decreasing cost, so the stable cost ranking is 0..b-1."""
    from itertools import permutations

    pool = sorted((Solution(p) for p in permutations(range(problem.n_var))), key=problem.cost)
    return pool[:b]


class TestSubsetIndex:
    def test_add_and_get_by_size(self):
        index = SubsetIndex()
        assert index.add((0, 1))
        assert index.add((0, 1, 2))
        assert index.get(2) == [(0, 1)]
        assert index.get(3) == [(0, 1, 2)]
        assert index.sizes() == [2, 3]

    def test_same_combination_stored_once(self):
        index = SubsetIndex()
        assert index.add((2, 0, 1))
        assert not index.add((1, 2, 0))
        assert index.get(3) == [(2, 0, 1)]
        assert len(index) == 1
        assert (0, 1, 2) in index

    def test_repeated_index_rejected(self):
        with pytest.raises(ValueError):
            SubsetIndex().add((1, 1))

    def test_missing_size_raises(self):
        index = SubsetIndex()
        with pytest.raises(PreconditionError):
            index.get(2)
        index.add((0, 1))
        with pytest.raises(PreconditionError):
            index.get(4)

    def test_get_returns_copy(self):
        index = SubsetIndex()
        index.add((0, 1))
        index.get(2).append((5, 6))
        assert index.get(2) == [(0, 1)]


def test_extend_with_best():
    assert extend_with_best((0, 1), [1, 3, 0, 2]) == (0, 1, 3)
    assert extend_with_best((0, 1), [0, 1]) is None


class TestSubsetGenerator:
    @pytest.mark.parametrize("b", [4, 5, 10])
    def test_pair_count(self, problem, b):
        ref = _ranked_reference_set(problem, b)
        subsets = SubsetGenerator(problem, b // 2).generate(ref)
        assert len(subsets.pairs()) == b * (b - 1) // 2
        assert subsets.pairs() == list(combinations(range(b), 2))

    def test_triples_and_quadruples_are_well_formed(self, problem):
        ref = _ranked_reference_set(problem, 10)
        subsets = SubsetGenerator(problem, 5).generate(ref)
        for size, group in ((3, subsets.triples()), (4, subsets.quadruples())):
            assert group
            for subset in group:
                assert len(subset) == size
                assert len(set(subset)) == size
                assert all(0 <= i < 10 for i in subset)

    def test_triples_extend_pairs_with_cheapest_missing(self, problem):
        ref = _ranked_reference_set(problem, 6)
        subsets = SubsetGenerator(problem, 3).generate(ref)
        # Member 0 is cheapest, then 1, then 2.
        assert (0, 1, 2) in subsets.triples()
        assert (2, 3, 0) in subsets.triples()
        assert (0, 2, 1) not in subsets.triples()
        canonical = [tuple(sorted(t)) for t in subsets.triples()]
        assert len(canonical) == len(set(canonical))

    def test_quadruples_extend_triples(self, problem):
        ref = _ranked_reference_set(problem, 6)
        subsets = SubsetGenerator(problem, 3).generate(ref)
        triples = subsets.triples()
        for quad in subsets.quadruples():
            assert quad[:3] in triples

    def test_best_block(self, problem):
        ref = _ranked_reference_set(problem, 10)
        subsets = SubsetGenerator(problem, 5).generate(ref)
        assert subsets.best_block == (0, 1, 2, 3, 4)
        assert subsets.index.get(5) == [(0, 1, 2, 3, 4)]
        assert subsets.representatives() == [(0, 1), (0, 1, 2), (0, 1, 2, 3), (0, 1, 2, 3, 4)]

    def test_best_block_kept_when_size_collides(self, problem):
        ref = _ranked_reference_set(problem, 4)
        subsets = SubsetGenerator(problem, 2).generate(ref)
        assert subsets.best_block == (0, 1)
        assert subsets.representatives()[3] == (0, 1)

    def test_ranking_uses_costs_not_positions(self, problem):
        ref = list(reversed(_ranked_reference_set(problem, 5)))
        subsets = SubsetGenerator(problem, 2).generate(ref)
        # The unique cheapest solution now sits at the last position.
        assert subsets.best_block[0] == 4
        assert all(4 in t for t in subsets.triples())

    def test_too_small_reference_set(self, problem):
        with pytest.raises(PreconditionError):
            SubsetGenerator(problem, 1).generate([Solution((0, 1, 2, 3, 4))])

    def test_three_members_have_no_quadruples(self, problem):
        ref = _ranked_reference_set(problem, 3)
        subsets = SubsetGenerator(problem, 1).generate(ref)
        with pytest.raises(PreconditionError):
            subsets.quadruples()


class TestRepresentatives:
    def test_drawn_from_stored_subsets(self, problem):
        ref = _ranked_reference_set(problem, 10)
        subsets = SubsetGenerator(problem, 5).generate(ref)
        rng = np.random.default_rng(0)
        for _ in range(20):
            pair, triple, quad, best = subsets.representatives(rng)
            assert pair == (0, 1)
            assert triple in subsets.triples()
            assert quad in subsets.quadruples()
            assert best == subsets.best_block

    def test_same_seed_same_draws(self, problem):
        subsets = SubsetGenerator(problem, 5).generate(_ranked_reference_set(problem, 10))
        a = [subsets.representatives(np.random.default_rng(7)) for _ in range(3)]
        b = [subsets.representatives(np.random.default_rng(7)) for _ in range(3)]
        assert a == b
