import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np

from fortune_voronoi import (
    InvalidInputError,
    Point,
    compute_diagram,
    crosscheck_vertices,
    random_sites,
    render_svg,
)
from fortune_voronoi.utils import bounding_box

logger = logging.getLogger(__name__)

_DEFAULT_RANDOM_BOX = 500.0


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_points(path: str) -> List[Point]:
    with open(path) as fin:
        lines = [line.replace(",", " ") for line in fin]
    try:
        array = np.loadtxt(lines, comments="#", ndmin=2, dtype=float)
    except ValueError as exc:
        raise InvalidInputError(f"{path}: expected one 'x y' pair per line ({exc})") from exc
    if array.size == 0:
        return []
    if array.shape[1] != 2:
        raise InvalidInputError(f"{path}: expected 2 columns, got {array.shape[1]}")
    return [Point(x, y) for x, y in array.tolist()]


def _resolve_box(
    points: Sequence[Point], width: Optional[float], height: Optional[float]
) -> Tuple[float, float]:
    if width is not None and height is not None:
        return width, height
    if not points:
        return width or 1.0, height or 1.0
    _, _, max_x, max_y = bounding_box(points)
    auto_w = max(float(math.ceil(max_x)), 1.0)
    auto_h = max(float(math.ceil(max_y)), 1.0)
    return (width if width is not None else auto_w), (height if height is not None else auto_h)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute Voronoi edges with Fortune's sweep")
    parser.add_argument("path", nargs="?", help="File with one 'x y' (or 'x,y') site per line")
    parser.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="Sweep N random sites instead of reading a file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=7584,
        help="Seed for --random (default: 7584)",
    )
    parser.add_argument("--width", type=float, help="Clipping box width")
    parser.add_argument("--height", type=float, help="Clipping box height")
    parser.add_argument(
        "--svg-output-path",
        help="Write an SVG rendering of the sites and edges to the given path",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Cross-check the vertices against scipy.spatial.Voronoi",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.random is None and args.path is None:
        parser.error("either a points file or --random N is required")

    try:
        if args.random is not None:
            width = args.width if args.width is not None else _DEFAULT_RANDOM_BOX
            height = args.height if args.height is not None else _DEFAULT_RANDOM_BOX
            points = random_sites(args.random, width, height, seed=args.seed)
        else:
            logger.info("Loading sites from %s", args.path)
            points = _load_points(args.path)
            width, height = _resolve_box(points, args.width, args.height)
        diagram = compute_diagram(points, width, height)
    except InvalidInputError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    print(f"Sites: {len(diagram.sites)}")
    print(f"Vertices: {len(diagram.vertices)}")
    print(f"Edges ({len(diagram.edges)}):")
    for edge in diagram.edges:
        x1, y1, x2, y2 = edge.as_tuple()
        print(f"{x1:.6f} {y1:.6f} {x2:.6f} {y2:.6f}")

    if args.check:
        result = crosscheck_vertices(diagram)
        print("Cross-check:")
        print(f"  status: {result.status}")
        print(f"  message: {result.message}")
        print(f"  max deviation: {result.max_deviation:.3e}")
        if not result.passed:
            raise SystemExit(2)

    if args.svg_output_path:
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        document = render_svg(diagram.edges, diagram.sites, width, height)
        output_path.write_text(document, encoding="utf-8")
        print(f"SVG document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
