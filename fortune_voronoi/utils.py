"""Utility helpers for feeding sites to the engine and reading edges back."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Set, Tuple, Union

import numpy as np

from .types import Coords, Edge, InvalidInputError, Point

logger = logging.getLogger(__name__)

SiteLike = Union[Point, Sequence[float]]


def _as_array(points: Union[np.ndarray, Iterable[SiteLike]]) -> np.ndarray:
    if isinstance(points, np.ndarray):
        raw = points
    else:
        raw = [p.as_tuple() if isinstance(p, Point) else tuple(p) for p in points]
        if not raw:
            return np.empty((0, 2), dtype=float)
    try:
        array = np.asarray(raw, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"sites must be (x, y) pairs: {exc}") from exc
    if array.size == 0:
        return np.empty((0, 2), dtype=float)
    if array.ndim != 2 or array.shape[1] != 2:
        raise InvalidInputError(f"sites must have shape (n, 2), got {array.shape}")
    return array


def coerce_points(
    points: Union[np.ndarray, Iterable[SiteLike]], *, dedupe: bool = True
) -> List[Point]:
    """Return ``points`` as a list of :class:`Point`.

    Accepts :class:`Point` objects, ``(x, y)`` pairs or an ``(n, 2)`` array.
    Non-finite coordinates are rejected; exact duplicates are dropped (first
    occurrence kept) when ``dedupe`` is set.
    """

    array = _as_array(points)
    if not np.all(np.isfinite(array)):
        bad = int(np.count_nonzero(~np.isfinite(array).all(axis=1)))
        raise InvalidInputError(f"{bad} site(s) have non-finite coordinates")

    sites: List[Point] = []
    seen: Set[Coords] = set()
    duplicates = 0
    for x, y in array.tolist():
        key = (x, y)
        if dedupe and key in seen:
            duplicates += 1
            continue
        seen.add(key)
        sites.append(Point(x, y))

    if duplicates:
        logger.warning("Dropped %d duplicate site(s)", duplicates)
    return sites


def random_sites(
    count: int, width: float, height: float, seed: Union[int, None] = None
) -> List[Point]:
    """Draw ``count`` uniformly distributed sites inside the box."""

    if count < 0:
        raise ValueError("count must be non-negative")
    rng = np.random.default_rng(seed)
    xy = rng.random((count, 2)) * np.array([width, height], dtype=float)
    logger.info("Generated %d random site(s) in %gx%g box (seed=%s)", count, width, height, seed)
    return [Point(x, y) for x, y in xy.tolist()]


def edges_to_array(edges: Sequence[Edge]) -> np.ndarray:
    """Stack finished edges into an ``(m, 4)`` array of ``x1, y1, x2, y2``."""

    if not edges:
        return np.empty((0, 4), dtype=float)
    return np.array([edge.as_tuple() for edge in edges], dtype=float)


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array([p.as_tuple() for p in points], dtype=float)


def bounding_box(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    """``(min_x, min_y, max_x, max_y)`` of ``points``."""

    array = points_to_array(points)
    if array.size == 0:
        raise InvalidInputError("bounding box of an empty point set")
    lo = array.min(axis=0)
    hi = array.max(axis=0)
    return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])


__all__ = [
    "SiteLike",
    "bounding_box",
    "coerce_points",
    "edges_to_array",
    "points_to_array",
    "random_sites",
]
