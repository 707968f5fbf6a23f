import math

import pytest

from fortune_voronoi import Beachline, BeachlineError, Point

A = Point(5, 1)
B = Point(1, 2)


def _three_arcs():
    """Beachline after site B split the arc of site A: A | B | A."""

    bl = Beachline()
    a = bl.new_leaf(A)
    b = bl.new_leaf(B)
    a2 = bl.new_leaf(A)
    inner = bl.new_breakpoint()
    root = bl.new_breakpoint()
    bl.set_left(inner, a)
    bl.set_right(inner, b)
    bl.set_left(root, inner)
    bl.set_right(root, a2)
    bl.root = root
    return bl, a, b, a2, inner, root


def test_parent_links_follow_set_left_and_set_right():
    bl, a, b, a2, inner, root = _three_arcs()

    assert bl.node(a).parent == inner
    assert bl.node(inner).parent == root
    assert bl.node(a2).parent == root
    assert bl.node(root).parent is None


def test_nearest_ancestor_breakpoints():
    bl, a, b, a2, inner, root = _three_arcs()

    assert bl.left_parent(a) is None
    assert bl.right_parent(a) == inner
    assert bl.left_parent(b) == inner
    assert bl.right_parent(b) == root
    assert bl.left_parent(a2) == root
    assert bl.right_parent(a2) is None


def test_adjacent_leaves_of_breakpoints_and_arcs():
    bl, a, b, a2, inner, root = _three_arcs()

    assert bl.left_child(root) == b
    assert bl.right_child(root) == a2
    assert bl.left_child(inner) == a
    assert bl.right_child(inner) == b
    assert bl.left_child(None) is None

    assert bl.left_arc(b) == a
    assert bl.right_arc(b) == a2
    assert bl.left_arc(a) is None
    assert bl.right_arc(a2) is None


def test_in_order_iteration():
    bl, a, b, a2, inner, root = _three_arcs()

    assert list(bl.breakpoints()) == [inner, root]
    assert bl.count_breakpoints() == 2


def test_breakpoint_x_picks_root_by_distance_to_sweep_line():
    bl, a, b, a2, inner, root = _three_arcs()

    # at sweep y=3 the arcs of A and B cross at x = -3 +/- sqrt(34)
    assert bl.breakpoint_x(root, 3.0) == pytest.approx(-3.0 + math.sqrt(34.0))
    assert bl.breakpoint_x(inner, 3.0) == pytest.approx(-3.0 - math.sqrt(34.0))


def test_find_arc_at_x_descends_to_covering_leaf():
    bl, a, b, a2, inner, root = _three_arcs()

    assert bl.find_arc_at_x(2.0, 3.0) == b
    assert bl.find_arc_at_x(4.0, 3.0) == a2
    assert bl.find_arc_at_x(-10.0, 3.0) == a


def test_find_arc_on_empty_beachline_raises():
    with pytest.raises(BeachlineError):
        Beachline().find_arc_at_x(0.0, 0.0)


def test_replace_child_and_detach():
    bl, a, b, a2, inner, root = _three_arcs()

    bl.replace_child(root, inner, b)
    assert bl.node(root).left == b
    assert bl.node(b).parent == root
    assert list(bl.breakpoints()) == [root]

    bl.detach(inner)
    assert bl.node(inner).left is None
    assert bl.node(inner).parent is None

    with pytest.raises(BeachlineError):
        bl.replace_child(root, a, b)


def test_unknown_handle_is_an_internal_error():
    bl, *_ = _three_arcs()
    with pytest.raises(BeachlineError):
        bl.node(99)
    with pytest.raises(BeachlineError):
        bl.node(-1)


def test_clear_empties_the_arena():
    bl, a, *_ = _three_arcs()
    assert not bl.is_empty

    bl.clear()

    assert bl.is_empty
    assert list(bl.breakpoints()) == []
    with pytest.raises(BeachlineError):
        bl.node(a)
