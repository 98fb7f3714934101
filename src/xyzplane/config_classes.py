"""Type-safe configuration dataclasses for plane fitting.

Inline docs explain what each tolerance controls and typical ranges.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FitTolerances:
    """Numerical tolerances used by :mod:`xyzplane.unit` and :mod:`xyzplane.planarity`.

    Default values are strict mode. Use relaxed() for noisy scans.
    """

    unit_epsilon: float = 1e-9
    """Max |norm - 1| accepted for a normalised vector."""

    zero_norm: float = 1e-12
    """Norms at or below this are treated as zero-length."""

    planarity_tolerance: float = 0.15
    """Max deviation (coordinate units) from the fitted plane to call a set planar."""

    @classmethod
    def relaxed(cls) -> "FitTolerances":
        """Permissive tolerances for noisy point clouds."""
        return cls(
            unit_epsilon=1e-6,
            zero_norm=1e-9,
            planarity_tolerance=0.5,
        )

    @classmethod
    def strict(cls) -> "FitTolerances":
        """Strict tolerances (same as default). For explicit intent."""
        return cls()


@dataclass(frozen=True)
class BackendConfig:
    """Selection of the SVD provider."""

    name: str = "numpy"
    """``numpy`` or ``scipy``."""

    lapack_driver: str = "gesdd"
    """scipy only: ``gesdd`` (divide and conquer) or ``gesvd`` (slower, more robust)."""
