"""Example pipeline: sweep random sites and write the diagram as SVG.

Run with::

    python examples/random_svg.py > diagram.svg
"""

import sys

from fortune_voronoi import compute_diagram, random_sites, render_svg

WIDTH = 500.0
HEIGHT = 500.0
SITES = 600
SEED = 7584


def main() -> None:
    points = random_sites(SITES, WIDTH, HEIGHT, seed=SEED)
    for p in points:
        sys.stderr.write(f"Point at {p.x},{p.y}\n")
    diagram = compute_diagram(points, WIDTH, HEIGHT)
    sys.stdout.write(render_svg(diagram.edges, diagram.sites, WIDTH, HEIGHT))


if __name__ == "__main__":
    main()
