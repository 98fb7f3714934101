from importlib.metadata import version
__version__ = version("xyzplane")

# Import default parameters from config
from .config import DEFAULT_PARAMS
from .config_classes import BackendConfig, FitTolerances

# Core types
from .space import EuclideanSpace, FiniteDimensional, Point, Vector, as_points
from .unit import Unit
from .lattice import (
    Lattice,
    join,
    meet,
    meet_join,
    partial_clamp,
    partial_max,
    partial_min,
    partial_ordered_pair,
)
from .composite import compose, converge, decompose, recompose

# Main interfaces
from .backends import FactorizationError, NumpySvdBackend, ScipySvdBackend, SvdBackend, get_backend
from .plane import FitFailure, Plane, PlaneFitError, fit_plane, svd_ev_plane
from .planarity import check_planarity, ring_planarity

# Utilities
from .io import read_xyz_frames, read_xyz_points

__all__ = [
    # Main interfaces
    'Plane',
    'fit_plane',
    'svd_ev_plane',
    'FitFailure',
    'PlaneFitError',
    'check_planarity',
    'ring_planarity',

    # Space
    'EuclideanSpace',
    'FiniteDimensional',
    'Point',
    'Vector',
    'Unit',
    'as_points',

    # Ordering
    'Lattice',
    'meet',
    'join',
    'meet_join',
    'partial_min',
    'partial_max',
    'partial_ordered_pair',
    'partial_clamp',

    # Composite adapters
    'decompose',
    'recompose',
    'compose',
    'converge',

    # Backends
    'SvdBackend',
    'NumpySvdBackend',
    'ScipySvdBackend',
    'FactorizationError',
    'get_backend',

    # Utilities
    'read_xyz_points',
    'read_xyz_frames',

    # Configuration
    'DEFAULT_PARAMS',
    'BackendConfig',
    'FitTolerances',
]
