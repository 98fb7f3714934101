"""Best-fit plane through a 3-D point cloud.

The normal is the left singular vector belonging to the smallest singular
value of the centred coordinate matrix, i.e. the direction of least variance
(the smallest-eigenvalue eigenvector of the covariance matrix).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from . import lattice
from .backends import FactorizationError, NumpySvdBackend, SvdBackend
from .config_classes import FitTolerances
from .space import Point, Vector
from .unit import Unit

logger = logging.getLogger(__name__)

PLANE_DIMENSION = 3


class FitFailure(str, Enum):
    """Why a plane could not be fitted."""

    EMPTY_INPUT = "empty_input"
    FACTORIZATION_FAILED = "factorization_failed"
    INCOMPARABLE_SINGULAR_VALUES = "incomparable_singular_values"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    DEGENERATE_NORMAL = "degenerate_normal"


class PlaneFitError(ValueError):
    """Plane fitting failed; ``reason`` is a :class:`FitFailure`."""

    def __init__(self, reason: FitFailure, message: str = "") -> None:
        self.reason = reason
        super().__init__(f"{reason.value}: {message}" if message else reason.value)


@dataclass(frozen=True)
class Plane:
    """Plane through ``origin`` with unit ``normal``."""

    origin: Point
    normal: Unit

    def __post_init__(self) -> None:
        if self.origin.dimension != self.normal.dimension:
            raise ValueError(
                f"Origin and normal dimension differ: {self.origin.dimension} vs {self.normal.dimension}"
            )

    @classmethod
    def from_points(
        cls,
        points: Iterable[Point],
        backend: Optional[SvdBackend] = None,
        tolerances: Optional[FitTolerances] = None,
    ) -> Optional["Plane"]:
        """Fit a plane, or None on any failure. See :func:`fit_plane`."""
        return svd_ev_plane(points, backend=backend, tolerances=tolerances)

    def signed_distance(self, point: Point) -> float:
        """Distance along the normal; positive on the side the normal points to."""
        return (point - self.origin).dot(self.normal.get())

    def distance(self, point: Point) -> float:
        return abs(self.signed_distance(point))

    def project(self, point: Point) -> Point:
        """Orthogonal projection of ``point`` onto the plane."""
        return point - self.normal.get() * self.signed_distance(point)

    def max_deviation(self, points: Iterable[Point]) -> float:
        """Largest unsigned distance of ``points`` from the plane (0.0 if empty)."""
        return max((self.distance(p) for p in points), default=0.0)

    def flipped(self) -> "Plane":
        """Same plane with the normal reversed."""
        return Plane(origin=self.origin, normal=-self.normal)


def _centered_matrix(points: list, centroid: Point) -> np.ndarray:
    """3 x n matrix whose columns are ``p - centroid``.

    The flattened coordinates (x0, y0, z0, x1, ...) are read in column-major
    order, so each centred vector lands in its own column.
    """
    flat = [c for p in points for c in (p - centroid).into_items()]
    return np.reshape(np.asarray(flat, dtype=float), (PLANE_DIMENSION, len(points)), order="F")


def _argmin_partial(values) -> Optional[int]:
    """Index of the minimum value; None if any pair is unordered.

    Ties go to the later index, not the first minimum as ``min()`` would pick:
    backends return sigma in descending order, so a rank-deficient cloud
    resolves to the trailing column of U.
    """
    best = None
    for i, value in enumerate(values):
        value = float(value)
        if best is None:
            if lattice.partial_cmp(value, value) is None:
                return None
            best = i
            continue
        ordering = lattice.partial_cmp(value, float(values[best]))
        if ordering is None:
            return None
        if ordering <= 0:
            best = i
    return best


def fit_plane(
    points: Iterable[Point],
    backend: Optional[SvdBackend] = None,
    tolerances: Optional[FitTolerances] = None,
) -> Plane:
    """Fit a plane to 3-D points by SVD.

    Parameters
    ----------
    points : Iterable[Point]
        3-D points. At least three non-collinear points give a well-defined
        plane; degenerate input still runs and yields an arbitrary normal
        within the null space.
    backend : SvdBackend, optional
        SVD provider. Defaults to :class:`NumpySvdBackend`.
    tolerances : FitTolerances, optional
        ``unit_epsilon`` and ``zero_norm`` decide whether the candidate
        normal is accepted. Defaults to :meth:`FitTolerances.strict`.

    Returns
    -------
    Plane
        ``origin`` is the centroid; ``normal`` is unit length.

    Raises
    ------
    PlaneFitError
        With ``reason`` set to the failing step.
    ValueError
        If any point is not 3-dimensional.
    """
    points = list(points)
    backend = backend or NumpySvdBackend()
    tolerances = tolerances or FitTolerances()

    for p in points:
        if p.dimension != PLANE_DIMENSION:
            raise ValueError(f"Plane fitting requires {PLANE_DIMENSION}-D points, got {p.dimension}-D")

    centroid = type(points[0]).centroid(points) if points else None
    if centroid is None:
        raise PlaneFitError(FitFailure.EMPTY_INPUT, "no points given")

    matrix = _centered_matrix(points, centroid)

    # Vt is discarded; requested anyway so backends that only factor with both sides work.
    try:
        u, sigma, _ = backend.svd(matrix, compute_u=True, compute_vt=True)
    except FactorizationError as e:
        raise PlaneFitError(FitFailure.FACTORIZATION_FAILED, str(e)) from e
    if u is None:
        raise PlaneFitError(FitFailure.FACTORIZATION_FAILED, f"{backend!r} returned no left singular vectors")

    logger.debug("Singular values (%s, n=%d): %s", backend.name, len(points), np.array2string(np.asarray(sigma)))

    i = _argmin_partial(list(sigma))
    if i is None:
        raise PlaneFitError(FitFailure.INCOMPARABLE_SINGULAR_VALUES, f"sigma={list(sigma)}")
    if i >= u.shape[1]:
        raise PlaneFitError(FitFailure.INDEX_OUT_OF_RANGE, f"column {i} of {u.shape[1]}")

    candidate = Vector.from_items(u[:, i], PLANE_DIMENSION)
    normal = None
    if candidate is not None:
        normal = Unit.try_from_inner(candidate, epsilon=tolerances.unit_epsilon, zero_norm=tolerances.zero_norm)
    if normal is None:
        raise PlaneFitError(FitFailure.DEGENERATE_NORMAL, f"column {i}: {candidate!r}")

    logger.debug("Fitted plane: origin=%r normal=%r", centroid, normal.get())
    return Plane(origin=centroid, normal=normal)


def svd_ev_plane(
    points: Iterable[Point],
    backend: Optional[SvdBackend] = None,
    tolerances: Optional[FitTolerances] = None,
) -> Optional[Plane]:
    """:func:`fit_plane` with every fit failure collapsed to None."""
    try:
        return fit_plane(points, backend=backend, tolerances=tolerances)
    except PlaneFitError as e:
        logger.debug("Plane fit failed: %s", e)
        return None
