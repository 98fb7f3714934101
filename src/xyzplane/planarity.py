"""Planarity checks built on the SVD plane fit."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import networkx as nx

from .backends import SvdBackend
from .config_classes import FitTolerances
from .plane import Plane, svd_ev_plane
from .space import Point

logger = logging.getLogger(__name__)


def check_planarity(
    points: Iterable[Point],
    tolerance: Optional[float] = None,
    backend: Optional[SvdBackend] = None,
    tolerances: Optional[FitTolerances] = None,
) -> bool:
    """Check if points lie approximately in a plane.

    Parameters
    ----------
    points : Iterable[Point]
        3-D points.
    tolerance : float, optional
        Maximum allowed deviation from the best-fit plane. Overrides
        ``tolerances.planarity_tolerance`` when given.
    backend : SvdBackend, optional
        SVD provider passed through to the fitter.
    tolerances : FitTolerances, optional
        Tolerance set for the fit and the verdict. Defaults to strict.

    Returns
    -------
    bool
        True if every point is within tolerance of the best-fit plane.
        Fewer than 3 points are always planar; a failed fit is not.
    """
    tolerances = tolerances or FitTolerances()
    if tolerance is None:
        tolerance = tolerances.planarity_tolerance

    points = list(points)
    if len(points) < 3:
        return True

    plane = svd_ev_plane(points, backend=backend, tolerances=tolerances)
    if plane is None:
        logger.debug("Planarity: no plane could be fitted to %d points", len(points))
        return False

    deviation = plane.max_deviation(points)
    logger.debug("Planarity: max deviation %.4f (tolerance %.4f)", deviation, tolerance)
    return deviation < tolerance


def ring_points(ring: List[int], graph: nx.Graph) -> List[Point]:
    """Node ``"position"`` attributes of ``ring`` as Points, in ring order."""
    return [Point(graph.nodes[i]["position"], 3) for i in ring]


def ring_planarity(
    ring: List[int],
    graph: nx.Graph,
    tolerance: Optional[float] = None,
    backend: Optional[SvdBackend] = None,
    tolerances: Optional[FitTolerances] = None,
) -> bool:
    """:func:`check_planarity` over the positions of graph nodes forming a ring."""
    return check_planarity(ring_points(ring, graph), tolerance=tolerance, backend=backend, tolerances=tolerances)


def ring_plane(
    ring: List[int],
    graph: nx.Graph,
    backend: Optional[SvdBackend] = None,
    tolerances: Optional[FitTolerances] = None,
) -> Optional[Plane]:
    """Best-fit plane through a ring of graph nodes, or None."""
    if len(ring) < 3:
        return None
    return svd_ev_plane(ring_points(ring, graph), backend=backend, tolerances=tolerances)


def planar_cycles(
    graph: nx.Graph,
    min_size: int = 3,
    max_size: Optional[int] = None,
    tolerance: Optional[float] = None,
    backend: Optional[SvdBackend] = None,
    tolerances: Optional[FitTolerances] = None,
) -> List[tuple]:
    """Cycles of the graph's cycle basis whose node positions are planar."""
    rings = []
    for cyc in nx.cycle_basis(graph):
        if len(cyc) < min_size or (max_size is not None and len(cyc) > max_size):
            continue
        if ring_planarity(cyc, graph, tolerance=tolerance, backend=backend, tolerances=tolerances):
            rings.append(tuple(cyc))
    logger.debug("Planar cycles: %d found", len(rings))
    return rings
