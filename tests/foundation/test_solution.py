import numpy as np
import pytest

from scatterkit.foundation.solution import Solution, best_of


def test_structural_equality_ignores_cost():
    a = Solution((3, 1, 2), cost=5.0)
    b = Solution([3, 1, 2])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_values_are_frozen_as_tuple():
    s = Solution([0, 1, 2])
    assert isinstance(s.values, tuple)
    with pytest.raises(AttributeError):
        s.values = (2, 1, 0)  # type: ignore[misc]


def test_with_cost_returns_new_value():
    s = Solution((0, 1))
    t = s.with_cost(2)
    assert s.cost is None
    assert t.cost == 2.0
    assert t is not s
    assert t.evaluated and not s.evaluated


def test_as_array():
    assert np.array_equal(Solution((4, 5)).as_array(), np.array([4, 5]))


def test_best_of_picks_first_lowest():
    a = Solution((0, 1), 3.0)
    b = Solution((1, 0), 1.0)
    c = Solution((1, 1), 1.0)
    assert best_of([a, b, c]) is b


def test_best_of_rejects_empty_and_unevaluated():
    with pytest.raises(ValueError):
        best_of([])
    with pytest.raises(ValueError):
        best_of([Solution((0,), 1.0), Solution((1,))])
