import operator

import pytest

from slice_object import Slice
from slice_object._src.ordering import compare_field, identical_or_equal, lexicographic


class Unequal:
    def __eq__(self, other):
        raise AssertionError("compared past the first differing field")

    __hash__ = None


class Broken:
    def __eq__(self, other):
        raise RuntimeError("broken")

    __hash__ = None


def test_equal():
    assert Slice(1, 2, 3) == Slice(1, 2, 3)
    assert not (Slice(1, 2, 3) != Slice(1, 2, 3))


def test_not_equal():
    assert Slice(1, 2, 3) != Slice(1, 2, None)
    assert not (Slice(1, 2, 3) == Slice(1, 2, None))


def test_equal_uses_uniform_view():
    assert Slice(5) == Slice(None, 5)
    assert Slice(1, 5) == Slice(1, 5, None)


def test_equal_short_circuits():
    assert Slice(1, Unequal()) != Slice(2, Unequal())
    assert not (Slice(1, Unequal()) == Slice(2, Unequal()))


def test_equal_identity_skips_eq():
    field = Broken()
    assert Slice(field) == Slice(field)


def test_equal_errors_propagate():
    with pytest.raises(RuntimeError, match="broken"):
        Slice(Broken()) == Slice(Broken())


def test_less_than():
    assert Slice(1, 2, 3) < Slice(1, 2, 4)
    assert not (Slice(1, 2, 3) < Slice(1, 2, 3))
    assert Slice(1, 2, 3) <= Slice(1, 2, 3)
    assert Slice(0, 100) < Slice(1, 2)


def test_greater_than():
    assert Slice(1, 2, 4) > Slice(1, 2, 3)
    assert not (Slice(1, 2, 3) > Slice(1, 2, 3))
    assert Slice(1, 2, 3) >= Slice(1, 2, 3)
    assert Slice(1, 2) > Slice(0, 100)


def test_ordering_ties_on_none():
    assert Slice(5) < Slice(6)
    assert Slice(5) <= Slice(5)
    assert Slice(5) >= Slice(5)
    assert not (Slice(5) > Slice(5))


def test_ordering_decides_on_first_difference():
    assert Slice(0, Unequal()) < Slice(1, Unequal())


def test_ordering_uses_the_operator_on_the_deciding_field():
    # Sets are only partially ordered.
    assert not (Slice({1}, 0) < Slice({2}, 0))
    assert not (Slice({1}, 0) > Slice({2}, 0))
    assert Slice({1}, 0) <= Slice({1, 2}, 0)


def test_ordering_unorderable_fields():
    with pytest.raises(TypeError):
        Slice(None, 1) < Slice(1, 1)


def test_compare_with_other_types():
    assert Slice(1) != slice(1)
    assert not (Slice(1) == (None, 1, None))
    with pytest.raises(TypeError):
        Slice(1) < 1


def test_identical_or_equal():
    nan = float("nan")
    assert identical_or_equal(nan, nan)
    assert not identical_or_equal(nan, float("nan"))


def test_compare_field():
    assert compare_field(operator.lt, 1, 1) is None
    assert compare_field(operator.lt, 1, 2) is True
    assert compare_field(operator.lt, 2, 1) is False


@pytest.mark.parametrize(
    "op, expected",
    [(operator.lt, False), (operator.le, True), (operator.gt, False), (operator.ge, True)],
)
def test_lexicographic_all_ties(op, expected):
    assert lexicographic(op, [(1, 1), (None, None), ("a", "a")]) is expected
