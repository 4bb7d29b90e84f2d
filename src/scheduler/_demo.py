"""Sample graph used by the demonstration command."""

from ._graph import DirectedGraph, Edge, Vertex

DEMO_VERTICES: tuple[Vertex, ...] = tuple(range(1, 10))
DEMO_EDGES: tuple[Edge, ...] = (
    (1, 2),
    (1, 8),
    (2, 3),
    (2, 8),
    (3, 6),
    (4, 3),
    (4, 5),
    (5, 6),
    (7, 8),
)


def build_demo_graph(
    vertices: tuple[Vertex, ...] = DEMO_VERTICES,
    edges: tuple[Edge, ...] = DEMO_EDGES,
) -> DirectedGraph:
    """Build the demonstration graph, by default vertices 1 to 9 and a fixed edge list."""
    return DirectedGraph.from_edges(vertices, edges)
