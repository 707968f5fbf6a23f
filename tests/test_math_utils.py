import math

import pytest

from fortune_voronoi import BeachlineError, Edge, InvalidInputError, Point
from fortune_voronoi.math_utils import (
    breakpoint_x,
    circle_top,
    clip_ray,
    intersect_rays,
    parabola_coefficients,
    parabola_y,
)

A = Point(5, 1)
B = Point(1, 2)
C = Point(2, 3)


def test_parabola_point_is_equidistant_from_site_and_sweep_line():
    y = parabola_y(A, 1.0, 2.0)

    assert y == pytest.approx(-6.5)
    assert math.hypot(1.0 - A.x, y - A.y) == pytest.approx(2.0 - y)


def test_parabola_coefficients_match_closed_form():
    a, b, c = parabola_coefficients(B, 3.0)

    assert (a, b, c) == pytest.approx((-0.5, 1.0, 2.0))


def test_parabola_of_site_on_sweep_line_is_rejected():
    with pytest.raises(InvalidInputError):
        parabola_y(Point(1, 3), 0.0, 3.0)


def test_breakpoint_of_sites_on_sweep_line_falls_back_to_x():
    assert breakpoint_x(Point(0, 5), Point(4, 5), 5.0) == 2.0
    assert breakpoint_x(Point(0, 5), Point(4, 1), 5.0) == 0.0
    assert breakpoint_x(Point(0, 1), Point(4, 5), 5.0) == 4.0


def test_breakpoint_of_equal_height_sites_is_their_midline():
    assert breakpoint_x(Point(1, 1), Point(5, 1), 3.0) == pytest.approx(3.0)


def test_breakpoint_uses_epsilon_for_near_flat_sites():
    assert breakpoint_x(Point(0, 5 - 1e-12), Point(4, 5), 5.0, epsilon=1e-9) == 2.0


def test_converging_rays_meet_at_circumcenter():
    er2 = Edge.between(Point(2, 2), C, B)
    er = Edge.between(Point(1, -6.5), B, A)

    meet = intersect_rays(er2, er)

    assert meet is not None
    assert (meet.x, meet.y) == pytest.approx((2.9, 1.1))


def test_rays_meeting_behind_a_start_do_not_intersect():
    el2 = Edge.between(Point(2, 2), B, C)
    el = Edge.between(Point(1, -6.5), A, B)

    assert intersect_rays(el2, el) is None


def test_parallel_rays_do_not_intersect():
    low = Edge.between(Point(5, 1.5), Point(5, 1), Point(5, 2))
    high = Edge.between(Point(5, 2.5), Point(5, 2), Point(5, 3))

    assert intersect_rays(low, high) is None


def test_circle_top_is_center_plus_radius():
    assert circle_top(Point(2.9, 1.1), C) == pytest.approx(1.1 + math.sqrt(4.42))


def test_vertical_edge_is_clipped_at_top_of_box():
    edge = Edge.between(Point(3, 0), Point(1, 1), Point(5, 1))

    assert edge.is_vertical
    end = clip_ray(edge, 10.0, 10.0, 10.0)
    assert (end.x, end.y) == pytest.approx((3.0, 10.0))


def test_clipping_extends_box_around_outside_start():
    edge = Edge.between(Point(1, -6.5), A, B)

    end = clip_ray(edge, 10.0, 10.0, 10.0)

    assert (end.x, end.y) == pytest.approx((0.0, -10.5))
    assert edge.f * end.x + edge.g == pytest.approx(end.y)


def test_clipping_exit_through_horizontal_border_stays_on_line():
    edge = Edge.between(Point(2.9, 1.1), C, A)

    end = clip_ray(edge, 10.0, 10.0, 10.0)

    assert end.y == pytest.approx(10.0)
    assert end.x == pytest.approx(2.9 + 8.9 / 1.5)


def test_edge_direction_and_line_coefficients():
    edge = Edge.between(Point(2, 2), B, C)

    assert edge.direction == Point(-1, 1)
    assert edge.f == pytest.approx(-1.0)
    assert edge.g == pytest.approx(4.0)
    assert not edge.is_vertical
    assert not edge.is_closed


def test_bisector_of_coincident_sites_is_rejected():
    with pytest.raises(InvalidInputError, match="coincident"):
        Edge.between(Point(0, 0), Point(1, 1), Point(1, 1))


def test_edge_closes_exactly_once():
    edge = Edge.between(Point(2, 2), B, C)
    edge.close(Point(0, 4))

    assert edge.as_tuple() == (2.0, 2.0, 0.0, 4.0)
    with pytest.raises(BeachlineError):
        edge.close(Point(1, 3))


def test_open_edge_has_no_segment():
    with pytest.raises(BeachlineError):
        Edge.between(Point(2, 2), B, C).as_tuple()
