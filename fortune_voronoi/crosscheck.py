"""Cross-check of sweep vertices against an independent Qhull construction.

The sweep discovers every Voronoi vertex as the center of a processed circle
event.  :func:`crosscheck_vertices` rebuilds the diagram with
:class:`scipy.spatial.Voronoi` and pairs the two vertex sets by nearest
neighbour, reporting vertices that have no counterpart within tolerance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Sequence

import numpy as np
from scipy.spatial import QhullError, Voronoi, cKDTree

from .engine import VoronoiDiagram
from .types import Point
from .utils import points_to_array

logger = logging.getLogger(__name__)

_MIN_SITES = 3


@dataclass
class CrossCheckResult:
    """Outcome of :func:`crosscheck_vertices`."""

    status: Literal["ok", "mismatch", "skipped"]
    message: str
    sweep_vertices: int
    reference_vertices: int
    max_deviation: float = 0.0
    unmatched: List[Point] = field(default_factory=list)
    missing: List[Point] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.status != "mismatch"


def reference_vertices(sites: Sequence[Point]) -> np.ndarray:
    """Voronoi vertices of ``sites`` computed by Qhull."""

    array = points_to_array(sites)
    if len(array) < _MIN_SITES:
        return np.empty((0, 2), dtype=float)
    return np.asarray(Voronoi(array).vertices, dtype=float)


def _scene_scale(sites: Sequence[Point]) -> float:
    array = points_to_array(sites)
    if array.size == 0:
        return 1.0
    span = float(np.max(array.max(axis=0) - array.min(axis=0)))
    return max(span, 1.0)


def _nearest_distances(source: np.ndarray, target: np.ndarray) -> np.ndarray:
    if len(source) == 0:
        return np.zeros(0, dtype=float)
    if len(target) == 0:
        return np.full(len(source), np.inf)
    distances, _ = cKDTree(target).query(source)
    return np.asarray(distances, dtype=float)


def crosscheck_vertices(diagram: VoronoiDiagram, rel_tol: float = 1e-6) -> CrossCheckResult:
    """Compare the vertices found by the sweep with those found by Qhull."""

    sweep = points_to_array(diagram.vertices)
    try:
        reference = reference_vertices(diagram.sites)
    except QhullError as exc:
        logger.warning("Qhull could not build a reference diagram: %s", exc)
        return CrossCheckResult(
            status="skipped",
            message=f"reference construction failed: {exc}",
            sweep_vertices=len(sweep),
            reference_vertices=0,
        )

    tol = rel_tol * _scene_scale(diagram.sites)
    forward = _nearest_distances(sweep, reference)
    backward = _nearest_distances(reference, sweep)
    unmatched = [Point(x, y) for (x, y), d in zip(sweep.tolist(), forward) if d > tol]
    missing = [Point(x, y) for (x, y), d in zip(reference.tolist(), backward) if d > tol]
    max_dev = float(forward.max()) if len(forward) else 0.0

    if unmatched or missing:
        status: Literal["ok", "mismatch", "skipped"] = "mismatch"
        message = (
            f"{len(unmatched)} sweep vertex(es) without reference, "
            f"{len(missing)} reference vertex(es) not found by the sweep"
        )
        logger.warning("Vertex cross-check mismatch: %s", message)
    else:
        status = "ok"
        message = f"{len(sweep)} vertex(es) agree within {tol:.3g}"
        logger.info("Vertex cross-check passed: %s", message)

    return CrossCheckResult(
        status=status,
        message=message,
        sweep_vertices=len(sweep),
        reference_vertices=len(reference),
        max_deviation=max_dev,
        unmatched=unmatched,
        missing=missing,
    )


__all__ = ["CrossCheckResult", "crosscheck_vertices", "reference_vertices"]
