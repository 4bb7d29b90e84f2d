"""Directed graphs with depth-first topological scheduling."""

__all__ = [
    "Color",
    "CycleDetectedError",
    "DirectedGraph",
    "Edge",
    "GraphError",
    "MissingVertexError",
    "Vertex",
    "build_demo_graph",
    "topological_sort",
]

from ._demo import build_demo_graph
from ._graph import (
    Color,
    CycleDetectedError,
    DirectedGraph,
    Edge,
    GraphError,
    MissingVertexError,
    Vertex,
    topological_sort,
)
