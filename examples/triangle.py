"""Example pipeline: three sites, three edges meeting at the circumcenter."""

from fortune_voronoi import Point, VoronoiEngine

POINTS = [Point(1, 2), Point(2, 3), Point(5, 1)]


def main() -> None:
    engine = VoronoiEngine()
    diagram = engine.compute(POINTS, 10, 10)

    print(f"Circle events: {diagram.stats.circle_events}")
    for vertex in diagram.vertices:
        print(f"Vertex: ({vertex.x:.6f}, {vertex.y:.6f})")
    for edge in diagram.edges:
        x1, y1, x2, y2 = edge.as_tuple()
        print(
            f"Edge {edge.left.as_tuple()} | {edge.right.as_tuple()}: "
            f"({x1:.6f}, {y1:.6f}) -> ({x2:.6f}, {y2:.6f})"
        )


if __name__ == "__main__":
    main()
