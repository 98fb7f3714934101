"""SVD providers.

The plane fitter only talks to :class:`SvdBackend`; swapping numpy for scipy
(or anything else) does not touch the fitting algorithm.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from .config_classes import BackendConfig

logger = logging.getLogger(__name__)

SvdResult = Tuple[Optional[np.ndarray], np.ndarray, Optional[np.ndarray]]


class FactorizationError(RuntimeError):
    """The backend could not factorise the matrix."""


class SvdBackend(ABC):
    """Thin SVD interface.

    ``svd`` returns ``(u, sigma, vt)``. ``sigma[i]`` belongs to column ``i`` of
    ``u``; the order of ``sigma`` is not guaranteed. ``u`` / ``vt`` may be None
    when not requested.
    """

    name = "abstract"

    @abstractmethod
    def svd(self, matrix: np.ndarray, compute_u: bool = True, compute_vt: bool = True) -> SvdResult:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NumpySvdBackend(SvdBackend):
    """``numpy.linalg.svd`` (LAPACK gesdd). U and Vt are computed together."""

    name = "numpy"

    def svd(self, matrix: np.ndarray, compute_u: bool = True, compute_vt: bool = True) -> SvdResult:
        matrix = np.asarray(matrix, dtype=float)
        if not (compute_u or compute_vt):
            try:
                sigma = np.linalg.svd(matrix, compute_uv=False)
            except np.linalg.LinAlgError as e:
                raise FactorizationError(str(e)) from e
            return None, sigma, None

        try:
            u, sigma, vt = np.linalg.svd(matrix, full_matrices=False)
        except np.linalg.LinAlgError as e:
            raise FactorizationError(str(e)) from e
        return (u if compute_u else None), sigma, (vt if compute_vt else None)


class ScipySvdBackend(SvdBackend):
    """``scipy.linalg.svd`` with a selectable LAPACK driver."""

    name = "scipy"

    def __init__(self, lapack_driver: str = "gesdd") -> None:
        if lapack_driver not in ("gesdd", "gesvd"):
            raise ValueError(f"Unknown LAPACK driver: {lapack_driver}")
        self.lapack_driver = lapack_driver

    def svd(self, matrix: np.ndarray, compute_u: bool = True, compute_vt: bool = True) -> SvdResult:
        from scipy import linalg

        matrix = np.asarray(matrix, dtype=float)
        try:
            if not (compute_u or compute_vt):
                sigma = linalg.svd(matrix, compute_uv=False, lapack_driver=self.lapack_driver)
                return None, sigma, None
            u, sigma, vt = linalg.svd(matrix, full_matrices=False, lapack_driver=self.lapack_driver)
        except (linalg.LinAlgError, ValueError) as e:
            # scipy raises ValueError for non-finite input when check_finite=True
            raise FactorizationError(str(e)) from e
        return (u if compute_u else None), sigma, (vt if compute_vt else None)

    def __repr__(self) -> str:
        return f"ScipySvdBackend(lapack_driver={self.lapack_driver!r})"


BACKENDS = {
    NumpySvdBackend.name: NumpySvdBackend,
    ScipySvdBackend.name: ScipySvdBackend,
}


def get_backend(name: str = "numpy", lapack_driver: str = "gesdd") -> SvdBackend:
    """Instantiate a backend by name (``numpy`` or ``scipy``)."""
    if name not in BACKENDS:
        raise ValueError(f"Unknown SVD backend {name!r}; choose from {sorted(BACKENDS)}")
    if name == ScipySvdBackend.name:
        return ScipySvdBackend(lapack_driver=lapack_driver)
    return NumpySvdBackend()


def backend_from_config(config: BackendConfig) -> SvdBackend:
    return get_backend(config.name, lapack_driver=config.lapack_driver)
