"""Tests for meet/join and the partial-order helpers."""

import itertools
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from xyzplane.lattice import (
    Lattice,
    half,
    join,
    lerp,
    meet,
    meet_join,
    partial_clamp,
    partial_cmp,
    partial_max,
    partial_min,
    partial_ordered_pair,
)

NAN = float("nan")
SCALARS = [-3.5, -1, 0, 0.25, 2, 7.0, np.float64(1.5), np.int32(-2)]


def test_meet_join_match_min_max():
    """meet/join agree with min/max for comparable finite scalars."""
    for a, b in itertools.product(SCALARS, repeat=2):
        assert meet(a, b) == min(a, b)
        assert join(a, b) == max(a, b)
        assert meet_join(a, b) == (min(a, b), max(a, b))


def test_ties_favour_left_operand():
    a, b = 1, 1.0
    assert meet(a, b) is a
    assert join(a, b) is a
    assert partial_min(a, b) is a
    assert partial_max(a, b) is a


def test_nan_meet_join_still_return_a_value():
    assert meet(NAN, 1.0) == 1.0
    assert join(NAN, 1.0) == 1.0
    assert meet(1.0, NAN) != meet(1.0, NAN)  # the NaN operand


def test_partial_family_rejects_nan():
    assert partial_cmp(NAN, 1.0) is None
    assert partial_min(NAN, 1.0) is None
    assert partial_max(1.0, NAN) is None
    assert partial_ordered_pair(NAN, NAN) is None


def test_partial_cmp():
    assert partial_cmp(1, 2) == -1
    assert partial_cmp(2, 1) == 1
    assert partial_cmp(Decimal("2.0"), 2) == 0


def test_partial_min_max():
    assert partial_min(3, 5) == 3
    assert partial_min(5, 3) == 3
    assert partial_max(3, 5) == 5
    assert partial_max(5, 3) == 5


def test_partial_ordered_pair():
    assert partial_ordered_pair(1, 2) == (1, 2)
    assert partial_ordered_pair(2, 1) == (1, 2)
    assert partial_ordered_pair(4, 4) == (4, 4)


def test_partial_clamp():
    assert partial_clamp(0.5, 0.0, 1.0) == 0.5
    assert partial_clamp(-1.0, 0.0, 1.0) == 0.0
    assert partial_clamp(2.0, 0.0, 1.0) == 1.0
    assert partial_clamp(NAN, 0.0, 1.0) is None
    assert partial_clamp(0.5, NAN, 1.0) is None
    assert partial_clamp(0.5, 0.0, NAN) is None


def test_partial_clamp_inverted_bounds():
    assert partial_clamp(0.5, 1.0, 0.0) == 0.0


def test_unregistered_type_rejected():
    """Ordering is opt-in: strings and tuples are not lattice values."""
    with pytest.raises(TypeError):
        meet("a", "b")
    with pytest.raises(TypeError):
        partial_min((1, 2), (2, 1))


def test_register_custom_type():
    class Height(float):
        pass

    class Label(str):
        pass

    Lattice.register(Label)
    assert meet(Label("b"), Label("a")) == "a"
    assert join(Height(2.0), Height(3.0)) == 3.0


def test_half():
    assert half(3.0) == 1.5
    assert half(Fraction(1, 2)) == Fraction(1, 4)


def test_lerp():
    assert lerp(0.0, 10.0, 0.25) == pytest.approx(2.5)
    assert lerp(0.0, 10.0, 2.0) == pytest.approx(10.0)
    assert lerp(0.0, 10.0, -1.0) == pytest.approx(0.0)
    assert lerp(0, 10, 0.55) == 5
    assert isinstance(lerp(0, 10, 0.55), int)
    with pytest.raises(ValueError):
        lerp(0.0, 1.0, NAN)


def test_decimal_nan_is_unordered():
    """Decimal NaN behaves like float NaN instead of raising."""
    dnan = Decimal("NaN")
    one = Decimal(1)
    assert partial_cmp(dnan, one) is None
    assert partial_min(one, dnan) is None
    assert partial_max(dnan, one) is None
    assert partial_ordered_pair(one, dnan) is None
    assert partial_clamp(dnan, Decimal(0), Decimal(2)) is None
    assert meet(one, dnan).is_nan()
    assert join(dnan, one) == one


def test_half_integers():
    assert half(3) == 1
    assert isinstance(half(3), int)
    assert half(np.int64(7)) == 3
