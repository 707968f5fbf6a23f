import pytest

from fortune_voronoi import Point, compute_diagram, crosscheck_vertices, random_sites
from fortune_voronoi.crosscheck import reference_vertices


def test_random_sites_agree_with_qhull():
    sites = random_sites(80, 200, 200, seed=7584)
    diagram = compute_diagram(sites, 200, 200)

    result = crosscheck_vertices(diagram)

    assert result.status == "ok", result.message
    assert result.passed
    assert result.sweep_vertices == result.reference_vertices == len(diagram.vertices)
    assert result.max_deviation < 1e-6
    assert result.unmatched == []
    assert result.missing == []


def test_triangle_vertex_matches_reference():
    diagram = compute_diagram([(1, 2), (2, 3), (5, 1)], 10, 10)

    result = crosscheck_vertices(diagram)

    assert result.status == "ok"
    reference = reference_vertices(diagram.sites)
    assert reference.shape == (1, 2)
    assert reference[0].tolist() == pytest.approx([2.9, 1.1])


def test_missing_vertex_is_reported():
    diagram = compute_diagram([(1, 2), (2, 3), (5, 1)], 10, 10)
    diagram.vertices = [Point(4.0, 4.0)]

    result = crosscheck_vertices(diagram)

    assert result.status == "mismatch"
    assert not result.passed
    assert result.unmatched == [Point(4.0, 4.0)]
    assert len(result.missing) == 1


def test_collinear_sites_are_skipped_by_qhull():
    diagram = compute_diagram([(0, 5), (5, 5), (10, 5)], 10, 10)

    result = crosscheck_vertices(diagram)

    assert result.status == "skipped"
    assert result.passed


def test_two_sites_have_no_reference_vertices():
    assert reference_vertices([Point(0, 0), Point(1, 1)]).shape == (0, 2)
