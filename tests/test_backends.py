"""Tests for SVD backends."""

import numpy as np
import pytest

from xyzplane.backends import (
    FactorizationError,
    NumpySvdBackend,
    ScipySvdBackend,
    backend_from_config,
    get_backend,
)
from xyzplane.config_classes import BackendConfig


@pytest.fixture
def matrix():
    rng = np.random.default_rng(0)
    return rng.normal(size=(3, 8))


@pytest.mark.parametrize("backend", [NumpySvdBackend(), ScipySvdBackend(), ScipySvdBackend("gesvd")])
def test_reconstruction(backend, matrix):
    """U diag(sigma) Vt reproduces the input; sigma pairs with U's columns."""
    u, sigma, vt = backend.svd(matrix)
    assert u.shape == (3, 3)
    assert vt.shape == (3, 8)
    assert u @ np.diag(sigma) @ vt == pytest.approx(matrix)


def test_optional_factors(matrix):
    u, sigma, vt = NumpySvdBackend().svd(matrix, compute_u=True, compute_vt=False)
    assert u is not None and vt is None
    u, sigma, vt = ScipySvdBackend().svd(matrix, compute_u=False, compute_vt=False)
    assert u is None and vt is None
    assert sigma == pytest.approx(np.linalg.svd(matrix, compute_uv=False))


def test_scipy_non_finite_raises():
    bad = np.array([[1.0, np.inf], [0.0, 1.0]])
    with pytest.raises(FactorizationError):
        ScipySvdBackend().svd(bad)


def test_get_backend():
    assert isinstance(get_backend("numpy"), NumpySvdBackend)
    backend = get_backend("scipy", lapack_driver="gesvd")
    assert isinstance(backend, ScipySvdBackend)
    assert backend.lapack_driver == "gesvd"
    with pytest.raises(ValueError):
        get_backend("eigen")
    with pytest.raises(ValueError):
        ScipySvdBackend("gesvj")


def test_backend_from_config():
    assert isinstance(backend_from_config(BackendConfig()), NumpySvdBackend)
    assert isinstance(backend_from_config(BackendConfig(name="scipy")), ScipySvdBackend)
