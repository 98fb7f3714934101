import argparse
import logging
import sys

from . import __version__, read_xyz_frames, read_xyz_points
from .backends import get_backend
from .config import DEFAULT_PARAMS
from .config_classes import FitTolerances
from .plane import PlaneFitError, fit_plane


def setup_logging(level=logging.DEBUG):
    """Attach a stderr handler to the ``xyzplane`` logger (once per process)."""
    logger = logging.getLogger("xyzplane")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
    return logger


def print_header(input_file, backend):
    """Print formatted header with version and run information."""
    import os

    print("=" * 80)
    print(" " * 35 + "XYZPLANE")
    print(" " * 22 + "SVD Plane Fitting for 3-D Point Clouds")
    print("=" * 80)
    print()
    print(f"Version:        xyzplane v{__version__}")
    print(f"Input:          {os.path.basename(input_file)}")
    print(f"Backend:        {backend!r}")
    print()
    print("=" * 80)
    print()


def format_fit(points, plane, tolerance):
    """Multi-line report for one fitted frame."""
    deviation = plane.max_deviation(points)
    origin = ", ".join(f"{c:.6f}" for c in plane.origin)
    normal = ", ".join(f"{c:.6f}" for c in plane.normal.get())
    verdict = "planar" if deviation < tolerance else "NOT planar"
    return "\n".join([
        f"Points:         {len(points)}",
        f"Origin:         ({origin})",
        f"Normal:         ({normal})",
        f"Max deviation:  {deviation:.6f}  ({verdict}, tolerance {tolerance})",
    ])


def main(argv=None):
    p = argparse.ArgumentParser(description="Fit a best-approximating plane to points in an XYZ file.")
    p.add_argument("xyz", nargs='?', help="Input XYZ file")
    p.add_argument("--version", action="store_true",
                   help="Print version information and exit")
    p.add_argument("--backend", choices=["numpy", "scipy"], default=DEFAULT_PARAMS['backend'],
                   help=f"SVD backend (default: {DEFAULT_PARAMS['backend']})")
    p.add_argument("--lapack-driver", choices=["gesdd", "gesvd"], default=DEFAULT_PARAMS['lapack_driver'],
                   help=f"LAPACK driver, scipy backend only (default: {DEFAULT_PARAMS['lapack_driver']})")
    p.add_argument("-t", "--tolerance", type=float, default=None,
                   help=f"Max deviation for the planarity verdict (default: {DEFAULT_PARAMS['planarity_tolerance']}, relaxed: {FitTolerances.relaxed().planarity_tolerance})")
    p.add_argument("--relaxed", action="store_true",
                   help="Relaxed mode: permissive tolerances for noisy point clouds")
    p.add_argument("--all-frames", action="store_true",
                   help="Fit every frame of a multi-frame XYZ file")
    p.add_argument("-b", "--bohr", action="store_true", default=DEFAULT_PARAMS['bohr'],
                   help="XYZ file provided in units bohr (default is Angstrom)")
    p.add_argument("-d", "--debug", action="store_true",
                   help="Enable debug logging")

    args = p.parse_args(argv)

    if args.version:
        print(f"xyzplane v{__version__}")
        return 0

    if not args.xyz:
        p.error("the following arguments are required: xyz")

    if args.debug:
        setup_logging(logging.DEBUG)

    backend = get_backend(args.backend, lapack_driver=args.lapack_driver)
    tolerances = FitTolerances.relaxed() if args.relaxed else FitTolerances.strict()
    tolerance = args.tolerance if args.tolerance is not None else tolerances.planarity_tolerance

    if args.all_frames:
        frames = list(read_xyz_frames(args.xyz, bohr_units=args.bohr))
    else:
        frames = [read_xyz_points(args.xyz, bohr_units=args.bohr)]

    print_header(args.xyz, backend)

    status = 0
    for idx, points in enumerate(frames, start=1):
        if len(frames) > 1:
            print(f"# Frame {idx}")
        try:
            plane = fit_plane(points, backend=backend, tolerances=tolerances)
        except PlaneFitError as e:
            print(f"Error: no plane could be fitted ({e.reason.value})")
            status = 1
            continue
        print(format_fit(points, plane, tolerance))
        print()
    return status


if __name__ == "__main__":
    sys.exit(main())
