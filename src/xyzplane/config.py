"""Default parameters shared by the library entry points and the CLI."""

from .config_classes import BackendConfig, FitTolerances

_TOL = FitTolerances()
_BACKEND = BackendConfig()

DEFAULT_PARAMS = {
    "backend": _BACKEND.name,
    "lapack_driver": _BACKEND.lapack_driver,
    "unit_epsilon": _TOL.unit_epsilon,
    "zero_norm": _TOL.zero_norm,
    "planarity_tolerance": _TOL.planarity_tolerance,
    "bohr": False,
}
