"""Vectors with validated unit length."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .config import DEFAULT_PARAMS
from .space import Vector

logger = logging.getLogger(__name__)


class Unit:
    """Wraps a :class:`~xyzplane.space.Vector` of length ~1.

    Only :meth:`try_from_inner` (and the axis shortcuts) construct instances;
    there is no way to change the wrapped vector afterwards.
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: Vector, _validated: bool = False) -> None:
        if not _validated:
            raise TypeError("Use Unit.try_from_inner() to construct a Unit")
        object.__setattr__(self, "_inner", inner)

    def __setattr__(self, name, value):
        raise AttributeError("Unit is immutable")

    @classmethod
    def try_from_inner(
        cls,
        vector: Vector,
        epsilon: float = DEFAULT_PARAMS["unit_epsilon"],
        zero_norm: float = DEFAULT_PARAMS["zero_norm"],
    ) -> Optional["Unit"]:
        """Normalise ``vector``; None on zero, non-finite or out-of-tolerance norm."""
        norm = vector.norm()
        if not np.isfinite(norm) or norm <= zero_norm:
            logger.debug("Rejecting unit candidate %r: norm=%g", vector, norm)
            return None
        normalized = vector / norm
        if abs(normalized.norm() - 1.0) > epsilon:
            logger.debug("Normalised norm of %r off by more than %g", vector, epsilon)
            return None
        return cls(normalized, _validated=True)

    @classmethod
    def x(cls) -> "Unit":
        return cls(Vector.x(), _validated=True)

    @classmethod
    def y(cls) -> "Unit":
        return cls(Vector.y(), _validated=True)

    @classmethod
    def z(cls) -> "Unit":
        return cls(Vector.z(), _validated=True)

    def get(self) -> Vector:
        return self._inner

    def into_inner(self) -> Vector:
        return self._inner

    @property
    def dimension(self) -> int:
        return self._inner.dimension

    def __neg__(self) -> "Unit":
        return Unit(-self._inner, _validated=True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self) -> int:
        return hash(self._inner)

    def __repr__(self) -> str:
        return f"Unit({self._inner!r})"
