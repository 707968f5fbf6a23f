from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

Coords = Tuple[float, float]


class VoronoiError(Exception):
    """Base class for every error raised by :mod:`fortune_voronoi`."""


class InvalidInputError(VoronoiError, ValueError):
    """Raised when the sites or the clipping box cannot be swept."""


class BeachlineError(VoronoiError, RuntimeError):
    """Raised when an internal invariant of the sweep is violated."""


class EmptyQueueError(BeachlineError):
    """Raised when an event is popped from an empty queue."""


@dataclass(frozen=True)
class Point:
    """Plain 2D coordinate."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Coords:
        return (self.x, self.y)


@dataclass(eq=False)
class Edge:
    """Bisector of the sites ``left`` and ``right`` traced by a breakpoint.

    ``start`` is the vertex the breakpoint was born at and ``end`` is filled
    once when it converges with a neighbour or is clipped to the box.  The
    supporting line is ``y = f * x + g``; vertical bisectors (``left`` and
    ``right`` share their Y) carry ``f = g = None``.  ``direction`` points the
    way the breakpoint moves while the sweep line ascends.
    """

    start: Point
    left: Point
    right: Point
    direction: Point
    f: Optional[float]
    g: Optional[float]
    end: Optional[Point] = None
    neighbor: Optional["Edge"] = field(default=None, repr=False)

    @classmethod
    def between(cls, start: Point, left: Point, right: Point) -> "Edge":
        if left == right:
            raise InvalidInputError(
                f"cannot build a bisector of coincident sites at ({left.x}, {left.y})"
            )
        dy = right.y - left.y
        if dy == 0.0:
            f: Optional[float] = None
            g: Optional[float] = None
        else:
            f = -(right.x - left.x) / dy
            g = start.y - f * start.x
        direction = Point(left.y - right.y, right.x - left.x)
        return cls(start=start, left=left, right=right, direction=direction, f=f, g=g)

    @property
    def is_vertical(self) -> bool:
        return self.f is None

    @property
    def is_closed(self) -> bool:
        return self.end is not None

    def close(self, point: Point) -> None:
        """Record ``point`` as the end of the edge; an edge is closed once."""

        if self.end is not None:
            raise BeachlineError(
                f"edge between {self.left.as_tuple()} and {self.right.as_tuple()} is already closed"
            )
        self.end = point

    def as_tuple(self) -> Tuple[float, float, float, float]:
        if self.end is None:
            raise BeachlineError("open edge has no segment representation")
        return (self.start.x, self.start.y, self.end.x, self.end.y)


@dataclass(eq=False)
class Event:
    """Queue entry: a site event or a circle event.

    For circle events ``point`` is where the circle touches the sweep line,
    ``center`` the vertex the three arcs converge to and ``arc`` the handle of
    the vanishing arc in the beachline.
    """

    point: Point
    is_place: bool
    y: float
    arc: Optional[int] = None
    center: Optional[Point] = None

    @classmethod
    def site(cls, point: Point) -> "Event":
        return cls(point=point, is_place=True, y=point.y)

    @classmethod
    def circle(cls, point: Point, center: Point, arc: int) -> "Event":
        return cls(point=point, is_place=False, y=point.y, arc=arc, center=center)


__all__ = [
    "Coords",
    "VoronoiError",
    "InvalidInputError",
    "BeachlineError",
    "EmptyQueueError",
    "Point",
    "Edge",
    "Event",
]
