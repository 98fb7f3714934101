"""Meet/join over partially ordered scalars.

Types take part explicitly: ``Lattice.register(MyScalar)``. Builtin numbers,
``Fraction``, ``Decimal`` and numpy scalars are registered on import.

Two families of operations disagree on unordered operands (e.g. NaN):

* ``meet`` / ``join`` always return one of the operands;
* the ``partial_*`` functions return None.
"""

from __future__ import annotations

import operator
from abc import ABC
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Optional, Tuple

import numpy as np


class Lattice(ABC):
    """Marker for scalar types that expose meet/join under ``<=``."""


for _scalar in (int, float, Fraction, Decimal, np.integer, np.floating):
    Lattice.register(_scalar)


def _check(*values: Any) -> None:
    for value in values:
        if not isinstance(value, Lattice):
            raise TypeError(f"{type(value).__name__} is not registered as a Lattice type")


def _compare(op, a, b) -> bool:
    """``op(a, b)``; False where the comparison itself signals unordered operands."""
    try:
        return bool(op(a, b))
    except InvalidOperation:
        # Decimal NaN raises on ordering comparisons instead of returning False
        return False


def meet(a, b):
    """Lesser operand; ``a`` on ties."""
    _check(a, b)
    return a if _compare(operator.le, a, b) else b


def join(a, b):
    """Greater operand; ``a`` on ties."""
    _check(a, b)
    return a if _compare(operator.ge, a, b) else b


def meet_join(a, b) -> Tuple[Any, Any]:
    return meet(a, b), join(a, b)


def partial_cmp(a, b) -> Optional[int]:
    """-1, 0 or 1 like a three-way comparison; None if unordered."""
    _check(a, b)
    if _compare(operator.lt, a, b):
        return -1
    if _compare(operator.gt, a, b):
        return 1
    if _compare(operator.eq, a, b):
        return 0
    return None


def partial_min(a, b):
    ordering = partial_cmp(a, b)
    if ordering is None:
        return None
    return b if ordering > 0 else a


def partial_max(a, b):
    ordering = partial_cmp(a, b)
    if ordering is None:
        return None
    return b if ordering < 0 else a


def partial_ordered_pair(a, b) -> Optional[Tuple[Any, Any]]:
    """(lesser, greater), or None if the operands are unordered."""
    ordering = partial_cmp(a, b)
    if ordering is None:
        return None
    return (a, b) if ordering < 0 else (b, a)


def partial_clamp(x, lo, hi):
    """Restrict ``x`` to ``[lo, hi]``.

    Computed as ``partial_min(partial_max(x, lo), hi)``. None if any
    comparison involved is unordered. When ``lo > hi`` the result is ``hi``.
    """
    lower = partial_max(x, lo)
    if lower is None:
        return None
    return partial_min(lower, hi)


def half(x):
    """``x / 2`` in the value's own arithmetic; integers stay integers (floored)."""
    _check(x)
    one = type(x)(1)
    if isinstance(x, (int, np.integer)):
        return x // (one + one)
    return x / (one + one)


def lerp(a, b, f: float):
    """Linear interpolation from ``a`` to ``b`` with ``f`` clamped to [0, 1].

    Integer endpoints give an integer result (truncated like a numeric cast).
    """
    _check(a, b)
    f = partial_clamp(float(f), 0.0, 1.0)
    if f is None:
        raise ValueError("Interpolation factor must be comparable")
    value = float(a) * (1.0 - f) + float(b) * f
    if isinstance(a, (int, np.integer)):
        return type(a)(int(value))
    return type(a)(value)
