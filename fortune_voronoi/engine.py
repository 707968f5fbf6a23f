"""Fortune's sweep-line construction of Voronoi edges.

The sweep line ascends in Y.  Site events insert arcs into the beachline,
circle events remove the arc squeezed between two converging breakpoints.
Circle events that go stale before the sweep reaches them are tombstoned
and skipped when popped.  Once the queue is drained the breakpoints still on
the beachline are clipped to the box and the half-edges born together are
joined into single segments.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

import numpy as np

from .beachline import Beachline
from .config import SweepOptions, get_sweep_options
from .events import EventQueue, TombstoneList
from .logging_utils import apply_debug_logging
from .math_utils import _midpoint2, circle_top, clip_ray, intersect_rays, parabola_y
from .types import BeachlineError, Edge, Event, InvalidInputError, Point
from .utils import SiteLike, coerce_points

logger = logging.getLogger(__name__)

PointsLike = Union[np.ndarray, Iterable[SiteLike]]


@dataclass
class SweepStats:
    site_events: int = 0
    circle_events: int = 0
    stale_events: int = 0
    finalized_edges: int = 0
    final_breakpoints: int = 0


@dataclass
class VoronoiDiagram:
    """Result of one sweep."""

    sites: List[Point]
    edges: List[Edge]
    vertices: List[Point]
    width: float
    height: float
    stats: SweepStats = field(default_factory=SweepStats)


class VoronoiEngine:
    """Sweep engine; reusable across calls, not shareable between threads."""

    def __init__(self, options: Optional[SweepOptions] = None) -> None:
        self.options = options if options is not None else get_sweep_options()
        self.beachline = Beachline(self.options.coincidence_epsilon)
        self.queue = EventQueue()
        self.tombstones = TombstoneList()
        self._reset(0.0, 0.0)

    def _reset(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.sweep_y = -math.inf
        self.edges: List[Edge] = []
        self.vertices: List[Point] = []
        self.beachline.clear()
        self.queue.clear()
        self.tombstones.clear()
        self.stats = SweepStats()

    # public API -------------------------------------------------------------

    def get_edges(self, points: PointsLike, width: float, height: float) -> List[Edge]:
        return self.compute(points, width, height).edges

    def compute(self, points: PointsLike, width: float, height: float) -> VoronoiDiagram:
        width = float(width)
        height = float(height)
        if not (math.isfinite(width) and math.isfinite(height)) or width <= 0.0 or height <= 0.0:
            raise InvalidInputError(f"box must have positive finite size, got {width}x{height}")

        self._reset(width, height)
        sites = coerce_points(points, dedupe=self.options.dedupe)
        logger.info("Sweeping %d site(s) in a %gx%g box", len(sites), width, height)

        for site in sites:
            self.queue.push(Event.site(site))

        while self.queue:
            event = self.queue.pop()
            self.sweep_y = event.y
            if self.tombstones.remove(event):
                self.stats.stale_events += 1
                continue
            if event.is_place:
                self.stats.site_events += 1
                self.insert_arc(event.point)
            else:
                self.stats.circle_events += 1
                self.remove_arc(event)

        if self.tombstones:
            raise BeachlineError(f"{len(self.tombstones)} tombstone(s) left after the sweep")

        self.stats.final_breakpoints = self.beachline.count_breakpoints()
        self._finish_edges()
        self._join_neighbors()

        logger.info(
            "Swept %d site(s): %d edge(s), %d vertex(es), %d circle event(s), %d stale",
            len(sites),
            len(self.edges),
            len(self.vertices),
            self.stats.circle_events,
            self.stats.stale_events,
        )
        return VoronoiDiagram(
            sites=sites,
            edges=list(self.edges),
            vertices=list(self.vertices),
            width=width,
            height=height,
            stats=self.stats,
        )

    # site events ------------------------------------------------------------

    def insert_arc(self, site: Point) -> None:
        beachline = self.beachline
        eps = self.options.coincidence_epsilon

        if beachline.is_empty:
            beachline.root = beachline.new_leaf(site)
            return

        root = beachline.node(beachline.root)
        if root.is_leaf and abs(site.y - root.site.y) <= eps:
            self._split_flat_arc(beachline.root, site)
            return

        handle = beachline.find_arc_at_x(site.x, self.sweep_y)
        arc = beachline.node(handle)
        self._tombstone(handle)

        if abs(arc.site.y - self.sweep_y) <= eps:
            self._split_flat_arc(handle, site)
            return

        start = Point(site.x, parabola_y(arc.site, site.x, self.sweep_y))
        el = Edge.between(start, arc.site, site)
        er = Edge.between(start, site, arc.site)
        el.neighbor = er
        self.edges.append(el)

        p0 = beachline.new_leaf(arc.site)
        p1 = beachline.new_leaf(site)
        p2 = beachline.new_leaf(arc.site)
        inner = beachline.new_breakpoint(el)

        arc.is_leaf = False
        arc.site = None
        arc.edge = er
        beachline.set_left(inner, p0)
        beachline.set_right(inner, p1)
        beachline.set_left(handle, inner)
        beachline.set_right(handle, p2)

        self.check_circle(p0)
        self.check_circle(p2)

    def _split_flat_arc(self, handle: int, site: Point) -> None:
        """Split the arc ``handle`` in two for a site at (almost) its own height.

        The bisector of two sites on the sweep line has no birth vertex on the
        beachline; it is started on the lower border of the box instead.
        """

        beachline = self.beachline
        arc = beachline.node(handle)
        old = arc.site
        left, right = (old, site) if old.x <= site.x else (site, old)

        edge = Edge.between(self._flat_start(left, right), left, right)
        self.edges.append(edge)

        left_leaf = beachline.new_leaf(left)
        right_leaf = beachline.new_leaf(right)
        arc.is_leaf = False
        arc.site = None
        arc.edge = edge
        beachline.set_left(handle, left_leaf)
        beachline.set_right(handle, right_leaf)
        logger.debug("Split flat arc at y=%g into %s | %s", self.sweep_y, left, right)

        self.check_circle(left_leaf)
        self.check_circle(right_leaf)

    def _flat_start(self, left: Point, right: Point) -> Point:
        mx, my = _midpoint2(left.as_tuple(), right.as_tuple())
        y0 = 0.0 if my >= 0.0 else my - self.options.margin
        dy = right.y - left.y
        if dy == 0.0:
            return Point(mx, y0)
        if right.x == left.x:
            return Point(mx, my)
        slope = -(right.x - left.x) / dy
        return Point(mx + (y0 - my) / slope, y0)

    # circle events ----------------------------------------------------------

    def remove_arc(self, event: Event) -> None:
        beachline = self.beachline
        p1 = event.arc
        if p1 is None or event.center is None:
            raise BeachlineError("circle event without an arc")

        xl = beachline.left_parent(p1)
        xr = beachline.right_parent(p1)
        if xl is None or xr is None:
            raise BeachlineError(f"vanishing arc {p1} is missing a neighbouring breakpoint")
        p0 = beachline.left_arc(p1)
        p2 = beachline.right_arc(p1)

        self._tombstone(p0)
        self._tombstone(p2)
        beachline.node(p1).event = None

        vertex = event.center
        self.vertices.append(vertex)
        left_node = beachline.node(xl)
        right_node = beachline.node(xr)
        left_node.edge.close(vertex)
        right_node.edge.close(vertex)

        higher = None
        current = p1
        while current != beachline.root:
            current = beachline.node(current).parent
            if current is None:
                raise BeachlineError(f"arc {p1} is not connected to the root")
            if current == xl:
                higher = xl
            elif current == xr:
                higher = xr
        if higher is None:
            raise BeachlineError(f"breakpoints of arc {p1} are not among its ancestors")

        edge = Edge.between(vertex, beachline.node(p0).site, beachline.node(p2).site)
        beachline.node(higher).edge = edge
        self.edges.append(edge)

        parent = beachline.node(p1).parent
        grandparent = beachline.node(parent).parent
        if grandparent is None:
            raise BeachlineError(f"arc {p1} has no grandparent to rewire")
        parent_node = beachline.node(parent)
        sibling = parent_node.right if parent_node.left == p1 else parent_node.left
        beachline.replace_child(grandparent, parent, sibling)
        beachline.detach(p1)
        beachline.detach(parent)

        self.check_circle(p0)
        self.check_circle(p2)

    def check_circle(self, handle: int) -> None:
        beachline = self.beachline
        self._tombstone(handle)

        lp = beachline.left_parent(handle)
        rp = beachline.right_parent(handle)
        a = beachline.left_child(lp)
        c = beachline.right_child(rp)
        if a is None or c is None:
            return
        left_site = beachline.node(a).site
        if left_site == beachline.node(c).site:
            return

        center = intersect_rays(
            beachline.node(lp).edge, beachline.node(rp).edge, self.options.parallel_tolerance
        )
        if center is None:
            return
        top = circle_top(center, left_site)
        if top <= self.sweep_y:
            return

        event = Event.circle(Point(center.x, top), center, handle)
        beachline.node(handle).event = event
        self.queue.push(event)

    def _tombstone(self, handle: int) -> None:
        node = self.beachline.node(handle)
        if node.event is not None:
            self.tombstones.append(node.event)
            node.event = None

    # finalisation -----------------------------------------------------------

    def _finish_edges(self) -> None:
        margin = self.options.margin
        for handle in self.beachline.breakpoints():
            edge = self.beachline.node(handle).edge
            edge.close(clip_ray(edge, self.width, self.height, margin))
            self.stats.finalized_edges += 1

    def _join_neighbors(self) -> None:
        for edge in self.edges:
            if edge.neighbor is None:
                continue
            if edge.neighbor.end is None:
                raise BeachlineError("half-edge twin was never closed")
            edge.start = edge.neighbor.end
            edge.neighbor = None


def compute_diagram(
    points: PointsLike, width: float, height: float, options: Optional[SweepOptions] = None
) -> VoronoiDiagram:
    return VoronoiEngine(options).compute(points, width, height)


def compute_edges(
    points: PointsLike, width: float, height: float, options: Optional[SweepOptions] = None
) -> List[Edge]:
    """Voronoi edges of ``points`` with open edges clipped to ``width x height``."""

    return VoronoiEngine(options).get_edges(points, width, height)


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"_tombstone", "_flat_start"},
)


__all__ = [
    "PointsLike",
    "SweepStats",
    "VoronoiDiagram",
    "VoronoiEngine",
    "compute_diagram",
    "compute_edges",
]
