"""Beachline of Fortune's sweep stored as an arena of tree nodes.

Leaves are parabolic arcs, internal nodes are the breakpoints between the
rightmost leaf of their left subtree and the leftmost leaf of their right
subtree.  Nodes refer to each other through integer handles into the arena,
which stay valid for the whole sweep; detached nodes are simply no longer
reachable from the root.  The tree is never rebalanced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .math_utils import breakpoint_x
from .types import BeachlineError, Edge, Event, Point


@dataclass
class Arc:
    """Beachline node: an arc when ``is_leaf`` is set, a breakpoint otherwise."""

    is_leaf: bool
    site: Optional[Point] = None
    edge: Optional[Edge] = None
    event: Optional[Event] = None
    parent: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None


class Beachline:
    def __init__(self, epsilon: float = 0.0) -> None:
        self.epsilon = epsilon
        self.root: Optional[int] = None
        self._nodes: List[Arc] = []

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def node(self, handle: int) -> Arc:
        if handle is None or handle < 0:
            raise BeachlineError(f"unknown beachline handle {handle!r}")
        try:
            return self._nodes[handle]
        except (IndexError, TypeError) as exc:
            raise BeachlineError(f"unknown beachline handle {handle!r}") from exc

    def clear(self) -> None:
        self.root = None
        self._nodes = []

    # construction -----------------------------------------------------------

    def new_leaf(self, site: Point) -> int:
        self._nodes.append(Arc(is_leaf=True, site=site))
        return len(self._nodes) - 1

    def new_breakpoint(self, edge: Optional[Edge] = None) -> int:
        self._nodes.append(Arc(is_leaf=False, edge=edge))
        return len(self._nodes) - 1

    def set_left(self, parent: int, child: int) -> None:
        self.node(parent).left = child
        self.node(child).parent = parent

    def set_right(self, parent: int, child: int) -> None:
        self.node(parent).right = child
        self.node(child).parent = parent

    def replace_child(self, parent: int, old: int, new: int) -> None:
        node = self.node(parent)
        if node.left == old:
            self.set_left(parent, new)
        elif node.right == old:
            self.set_right(parent, new)
        else:
            raise BeachlineError(f"node {old} is not a child of {parent}")

    def detach(self, handle: int) -> None:
        node = self.node(handle)
        node.parent = None
        node.left = None
        node.right = None

    # traversal --------------------------------------------------------------

    def left_parent(self, handle: int) -> Optional[int]:
        """Nearest ancestor breakpoint whose right subtree holds ``handle``."""

        last = handle
        parent = self.node(handle).parent
        while parent is not None:
            node = self.node(parent)
            if node.left != last:
                return parent
            last = parent
            parent = node.parent
        return None

    def right_parent(self, handle: int) -> Optional[int]:
        """Nearest ancestor breakpoint whose left subtree holds ``handle``."""

        last = handle
        parent = self.node(handle).parent
        while parent is not None:
            node = self.node(parent)
            if node.right != last:
                return parent
            last = parent
            parent = node.parent
        return None

    def left_child(self, handle: Optional[int]) -> Optional[int]:
        """Rightmost leaf of the left subtree of breakpoint ``handle``."""

        if handle is None:
            return None
        current = self._child(handle, "left")
        while not self.node(current).is_leaf:
            current = self._child(current, "right")
        return current

    def right_child(self, handle: Optional[int]) -> Optional[int]:
        """Leftmost leaf of the right subtree of breakpoint ``handle``."""

        if handle is None:
            return None
        current = self._child(handle, "right")
        while not self.node(current).is_leaf:
            current = self._child(current, "left")
        return current

    def left_arc(self, handle: int) -> Optional[int]:
        return self.left_child(self.left_parent(handle))

    def right_arc(self, handle: int) -> Optional[int]:
        return self.right_child(self.right_parent(handle))

    def _child(self, handle: int, side: str) -> int:
        child = getattr(self.node(handle), side)
        if child is None:
            raise BeachlineError(f"breakpoint {handle} has no {side} child")
        return child

    # geometry ---------------------------------------------------------------

    def breakpoint_x(self, handle: int, sweep_y: float) -> float:
        left = self.left_child(handle)
        right = self.right_child(handle)
        return breakpoint_x(
            self.node(left).site, self.node(right).site, sweep_y, self.epsilon
        )

    def find_arc_at_x(self, x: float, sweep_y: float) -> int:
        """Leaf whose arc lies above ``x`` when the sweep line is at ``sweep_y``."""

        if self.is_empty:
            raise BeachlineError("cannot search an empty beachline")
        current = self.root
        while not self.node(current).is_leaf:
            if self.breakpoint_x(current, sweep_y) > x:
                current = self._child(current, "left")
            else:
                current = self._child(current, "right")
        return current

    # iteration --------------------------------------------------------------

    def _in_order(self) -> Iterator[int]:
        stack: List[int] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = self.node(current).left
            current = stack.pop()
            yield current
            current = self.node(current).right

    def breakpoints(self) -> Iterator[int]:
        return (h for h in self._in_order() if not self.node(h).is_leaf)

    def count_breakpoints(self) -> int:
        return sum(1 for _ in self.breakpoints())


__all__ = ["Arc", "Beachline"]
