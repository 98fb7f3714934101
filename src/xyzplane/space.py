"""Euclidean space capability and numpy-backed points and vectors.

Any point type can be fitted as long as it implements
:class:`EuclideanSpace` (centroid, point difference) and its vectors
round-trip through ``into_items`` / ``from_items``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import islice
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .composite import recompose


class FiniteDimensional(ABC):
    """Values living in a space of fixed ambient dimension."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        ...


class EuclideanSpace(FiniteDimensional):
    """Point type of a Euclidean space.

    Implementations must provide ``centroid`` and ``point - point -> vector``.
    """

    @classmethod
    @abstractmethod
    def centroid(cls, points: Iterable["EuclideanSpace"]) -> Optional["EuclideanSpace"]:
        ...

    @abstractmethod
    def __sub__(self, other):
        ...


def _coords(values: Iterable[float], dimension: Optional[int]) -> np.ndarray:
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Expected a flat coordinate sequence, got shape {arr.shape}")
    if dimension is not None and arr.shape[0] != dimension:
        raise ValueError(f"Expected {dimension} coordinates, got {arr.shape[0]}")
    if arr.shape[0] < 1:
        raise ValueError("Coordinates must not be empty")
    return arr


class Vector(FiniteDimensional):
    """Displacement between two points. Immutable."""

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[float], dimension: Optional[int] = None) -> None:
        arr = _coords(coords, dimension)
        arr.setflags(write=False)
        object.__setattr__(self, "_coords", arr)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- construction ------------------------------------------------------

    @classmethod
    def from_items(cls, items: Iterable[float], dimension: int = 3) -> Optional["Vector"]:
        """Vector from the first ``dimension`` items; None if too few.

        2 and 3 dimensions go through :func:`~xyzplane.composite.recompose`.
        """
        if dimension in (2, 3):
            taken = recompose(items, dimension)
        else:
            taken = tuple(islice(iter(items), dimension))
            if len(taken) < dimension:
                taken = None
        if taken is None:
            return None
        return cls(taken)

    @classmethod
    def zero(cls, dimension: int = 3) -> "Vector":
        return cls(np.zeros(dimension))

    @classmethod
    def x(cls) -> "Vector":
        return cls((1.0, 0.0, 0.0))

    @classmethod
    def y(cls) -> "Vector":
        return cls((0.0, 1.0, 0.0))

    @classmethod
    def z(cls) -> "Vector":
        return cls((0.0, 0.0, 1.0))

    # -- accessors ---------------------------------------------------------

    @property
    def dimension(self) -> int:
        return int(self._coords.shape[0])

    def into_items(self) -> Tuple[float, ...]:
        return tuple(float(c) for c in self._coords)

    def to_array(self) -> np.ndarray:
        return self._coords.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._coords, dtype=dtype)

    def __iter__(self):
        return iter(self.into_items())

    def __len__(self) -> int:
        return self.dimension

    # -- arithmetic --------------------------------------------------------

    def _other(self, other: "Vector") -> np.ndarray:
        if not isinstance(other, Vector):
            raise TypeError(f"Expected Vector, got {type(other).__name__}")
        if other.dimension != self.dimension:
            raise ValueError(f"Dimension mismatch: {self.dimension} vs {other.dimension}")
        return other._coords

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self._coords + self._other(other))

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self._coords - self._other(other))

    def __neg__(self) -> "Vector":
        return Vector(-self._coords)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self._coords * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector":
        return Vector(self._coords / float(scalar))

    def dot(self, other: "Vector") -> float:
        return float(np.dot(self._coords, self._other(other)))

    def cross(self, other: "Vector") -> "Vector":
        if self.dimension != 3:
            raise ValueError("Cross product is only defined in 3 dimensions")
        return Vector(np.cross(self._coords, self._other(other)))

    def norm(self) -> float:
        return float(np.linalg.norm(self._coords))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and bool(np.array_equal(self._coords, other._coords))

    def __hash__(self) -> int:
        return hash(self.into_items())

    def __repr__(self) -> str:
        return f"Vector({', '.join(f'{c:g}' for c in self._coords)})"


class Point(EuclideanSpace):
    """Position in an N-dimensional Euclidean space. Immutable."""

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[float], dimension: Optional[int] = None) -> None:
        arr = _coords(coords, dimension)
        arr.setflags(write=False)
        object.__setattr__(self, "_coords", arr)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> "Point":
        return cls((x, y, z))

    @classmethod
    def origin(cls, dimension: int = 3) -> "Point":
        return cls(np.zeros(dimension))

    @classmethod
    def centroid(cls, points: Iterable["Point"]) -> Optional["Point"]:
        """Arithmetic mean of ``points``; None for an empty collection.

        Raises
        ------
        ValueError
            If the points do not all share one dimension.
        """
        coords = [p._coords for p in points]
        if not coords:
            return None
        dims = {c.shape[0] for c in coords}
        if len(dims) != 1:
            raise ValueError(f"Points of mixed dimension: {sorted(dims)}")
        return cls(np.mean(np.vstack(coords), axis=0))

    @property
    def dimension(self) -> int:
        return int(self._coords.shape[0])

    def into_items(self) -> Tuple[float, ...]:
        return tuple(float(c) for c in self._coords)

    def to_array(self) -> np.ndarray:
        return self._coords.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._coords, dtype=dtype)

    def __iter__(self):
        return iter(self.into_items())

    def __len__(self) -> int:
        return self.dimension

    def _check_dim(self, other) -> None:
        if other.dimension != self.dimension:
            raise ValueError(f"Dimension mismatch: {self.dimension} vs {other.dimension}")

    def __sub__(self, other):
        """``point - point`` gives a Vector, ``point - vector`` a Point."""
        if isinstance(other, Point):
            self._check_dim(other)
            return Vector(self._coords - other._coords)
        if isinstance(other, Vector):
            self._check_dim(other)
            return Point(self._coords - np.asarray(other))
        return NotImplemented

    def __add__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dim(other)
        return Point(self._coords + np.asarray(other))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.dimension == other.dimension and bool(np.array_equal(self._coords, other._coords))

    def __hash__(self) -> int:
        return hash(self.into_items())

    def __repr__(self) -> str:
        return f"Point({', '.join(f'{c:g}' for c in self._coords)})"


def as_points(coords: Sequence[Sequence[float]], dimension: int = 3) -> list:
    """Wrap raw coordinate rows (lists, tuples, an ``(n, d)`` array) as Points."""
    return [Point(row, dimension) for row in coords]
