from __future__ import annotations

import math
from typing import Optional, Tuple

from .types import Coords, Edge, InvalidInputError, Point


def _vec2(a: Coords, b: Coords) -> Coords:
    return b[0] - a[0], b[1] - a[1]


def _dot2(a: Coords, b: Coords) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _cross2(a: Coords, b: Coords) -> float:
    return a[0] * b[1] - a[1] * b[0]


def _norm_sq2(v: Coords) -> float:
    return _dot2(v, v)


def _norm2(v: Coords) -> float:
    return math.sqrt(max(_norm_sq2(v), 0.0))


def _midpoint2(a: Coords, b: Coords) -> Coords:
    return (a[0] + b[0]) * 0.5, (a[1] + b[1]) * 0.5


def parabola_coefficients(site: Point, sweep_y: float) -> Tuple[float, float, float]:
    """Return ``(a, b, c)`` of the arc ``y = a*x**2 + b*x + c`` of ``site``.

    The arc is the locus of points equidistant from ``site`` and the
    horizontal sweep line at ``sweep_y``.
    """

    dp = 2.0 * (site.y - sweep_y)
    if dp == 0.0:
        raise InvalidInputError(
            f"site ({site.x}, {site.y}) lies on the sweep line; its arc is degenerate"
        )
    a = 1.0 / dp
    b = -2.0 * site.x / dp
    c = sweep_y + dp / 4.0 + site.x * site.x / dp
    return a, b, c


def parabola_y(site: Point, x: float, sweep_y: float) -> float:
    a, b, c = parabola_coefficients(site, sweep_y)
    return a * x * x + b * x + c


def _quadratic_roots(a: float, b: float, c: float) -> Tuple[float, float]:
    disc = max(b * b - 4.0 * a * c, 0.0)
    root = math.sqrt(disc)
    q = -0.5 * (b + math.copysign(root, b))
    if q == 0.0:
        x = -b / (2.0 * a)
        return x, x
    return q / a, c / q


def breakpoint_x(left: Point, right: Point, sweep_y: float, epsilon: float = 0.0) -> float:
    """X of the breakpoint where the arc of ``left`` meets the arc of ``right``.

    Of the two intersections of the parabolas, the one to the right is taken
    when ``left`` is the closer site to the sweep line.  Sites lying on the
    sweep line have collapsed into a vertical ray at their X.
    """

    left_flat = abs(left.y - sweep_y) <= epsilon
    right_flat = abs(right.y - sweep_y) <= epsilon
    if left_flat and right_flat:
        return (left.x + right.x) * 0.5
    if left_flat:
        return left.x
    if right_flat:
        return right.x

    a1, b1, c1 = parabola_coefficients(left, sweep_y)
    a2, b2, c2 = parabola_coefficients(right, sweep_y)
    a = a1 - a2
    b = b1 - b2
    c = c1 - c2
    if a == 0.0:
        # equal focal distances: the parabolas are translates and meet once
        if b == 0.0:
            return (left.x + right.x) * 0.5
        return -c / b

    x1, x2 = _quadratic_roots(a, b, c)
    if abs(left.y - sweep_y) < abs(right.y - sweep_y):
        return max(x1, x2)
    return min(x1, x2)


def intersect_rays(a: Edge, b: Edge, tolerance: float = 1e-12) -> Optional[Point]:
    """Meeting point of two bisector rays, or ``None``.

    Parallel rays and intersections lying behind the start of either ray do
    not meet.
    """

    da = a.direction.as_tuple()
    db = b.direction.as_tuple()
    denom = _cross2(da, db)
    if abs(denom) <= tolerance * _norm2(da) * _norm2(db):
        return None
    diff = _vec2(a.start.as_tuple(), b.start.as_tuple())
    t_a = _cross2(diff, db) / denom
    t_b = _cross2(diff, da) / denom
    if t_a < 0.0 or t_b < 0.0:
        return None
    return Point(a.start.x + t_a * da[0], a.start.y + t_a * da[1])


def circle_top(center: Point, through: Point) -> float:
    """Highest Y of the circle centred at ``center`` passing through ``through``."""

    radius = _norm2(_vec2(center.as_tuple(), through.as_tuple()))
    return center.y + radius


def clip_ray(edge: Edge, width: float, height: float, margin: float) -> Point:
    """Point where ``edge`` leaves the box ``[0, width] x [0, height]``.

    A bound is pushed out to ``start +/- margin`` on every axis along which
    the start already lies outside the box.  The exit coordinate is placed on
    the edge's own line.
    """

    sx, sy = edge.start.as_tuple()
    dx, dy = edge.direction.as_tuple()

    x_lo = sx - margin if sx < 0.0 else 0.0
    x_hi = sx + margin if sx > width else width
    y_lo = sy - margin if sy < 0.0 else 0.0
    y_hi = sy + margin if sy > height else height

    t_x = math.inf
    if dx > 0.0:
        t_x = (x_hi - sx) / dx
    elif dx < 0.0:
        t_x = (x_lo - sx) / dx
    t_y = math.inf
    if dy > 0.0:
        t_y = (y_hi - sy) / dy
    elif dy < 0.0:
        t_y = (y_lo - sy) / dy

    if t_x <= t_y:
        x = x_hi if dx > 0.0 else x_lo
        y = sy if edge.f is None else sy + edge.f * (x - sx)
        return Point(x, y)

    y = y_hi if dy > 0.0 else y_lo
    if edge.f is None:
        return Point(sx, y)
    return Point(sx + (y - sy) / edge.f, y)


__all__ = [
    "_cross2",
    "_dot2",
    "_midpoint2",
    "_norm2",
    "_norm_sq2",
    "_vec2",
    "breakpoint_x",
    "circle_top",
    "clip_ray",
    "intersect_rays",
    "parabola_coefficients",
    "parabola_y",
]
