"""Graph module providing the directed graph store and its sort.

This module contains:
- DirectedGraph: A mutable directed graph keyed by integer vertex ids
- topological_sort: Depth-first ordering of vertices by their edges
"""

from ._algorithms import Color, topological_sort
from ._directed_graph import DirectedGraph, Edge, Vertex
from ._errors import CycleDetectedError, GraphError, MissingVertexError

__all__ = [
    "Color",
    "CycleDetectedError",
    "DirectedGraph",
    "Edge",
    "GraphError",
    "MissingVertexError",
    "Vertex",
    "topological_sort",
]
