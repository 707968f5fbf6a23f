import pytest

from fortune_voronoi import Edge, Point, compute_diagram, render_svg


def test_svg_contains_one_path_per_edge_and_one_circle_per_site():
    diagram = compute_diagram([(1, 2), (2, 3), (5, 1)], 10, 10)

    document = render_svg(diagram.edges, diagram.sites, 10, 10)

    assert document.startswith('<?xml version="1.0" ?>')
    assert 'viewBox="0 0 10 10"' in document
    assert document.count("<path ") == 3
    assert document.count("<circle ") == 3
    assert '<circle cx="5" cy="1" r="1" />' in document


def test_svg_coordinates_are_trimmed():
    edge = Edge.between(Point(0.5, 0), Point(0, 1), Point(1, 1))
    edge.close(Point(0.5, 2.25))

    document = render_svg([edge], [], 4, 4, stroke_width=0.5)

    assert '<path d="M0.5,0 L0.5,2.25" />' in document
    assert 'stroke-width="0.5"' in document


def test_svg_title_is_escaped():
    document = render_svg([], [], 1, 1, title="a <b> & c")

    assert "<title>a &lt;b&gt; &amp; c</title>" in document


def test_svg_rejects_non_finite_coordinates():
    with pytest.raises(ValueError):
        render_svg([], [Point(float("inf"), 0)], 1, 1)
