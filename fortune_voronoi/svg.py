"""SVG rendering of sites and Voronoi edges."""

from __future__ import annotations

import math
from html import escape
from typing import List, Sequence

from .types import Edge, Point

svg_tpl = """<?xml version="1.0" ?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"
  "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<svg width="%(width)spx" height="%(height)spx" viewBox="0 0 %(width)s %(height)s"
     xmlns="http://www.w3.org/2000/svg" version="1.1">
  <title>%(title)s</title>
  <desc>%(description)s</desc>
  <!-- Edges -->
  <g stroke="red" stroke-width="%(stroke_width)s" fill="none">
%(edges)s
  </g>
  <!-- Sites -->
  <g fill="black">
%(sites)s
  </g>
</svg>
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for SVG output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def render_svg(
    edges: Sequence[Edge],
    sites: Sequence[Point],
    width: float,
    height: float,
    *,
    title: str = "Voronoi diagram",
    description: str = "Edges and points",
    stroke_width: float = 1.0,
    point_radius: float = 1.0,
) -> str:
    """Render ``edges`` and ``sites`` as a standalone SVG document."""

    edge_lines: List[str] = []
    for edge in edges:
        x1, y1, x2, y2 = edge.as_tuple()
        edge_lines.append(
            f'    <path d="M{_format_float(x1)},{_format_float(y1)} '
            f'L{_format_float(x2)},{_format_float(y2)}" />'
        )
    site_lines = [
        f'    <circle cx="{_format_float(p.x)}" cy="{_format_float(p.y)}" '
        f'r="{_format_float(point_radius)}" />'
        for p in sites
    ]
    return svg_tpl % {
        "width": _format_float(width),
        "height": _format_float(height),
        "title": escape(title),
        "description": escape(description),
        "stroke_width": _format_float(stroke_width),
        "edges": "\n".join(edge_lines),
        "sites": "\n".join(site_lines),
    }


__all__ = ["render_svg"]
