"""Exceptions raised by graph operations."""

from collections.abc import Iterable


class GraphError(Exception):
    """Base class for errors raised by the graph library."""


class MissingVertexError(GraphError):
    """Raised when an operation references a vertex that is not in the graph."""

    def __init__(self, vertices: Iterable[int]) -> None:
        self.vertices = tuple(sorted(set(vertices)))
        names = ", ".join(str(v) for v in self.vertices)
        super().__init__(f"Vertex not in graph: {names}")


class CycleDetectedError(GraphError):
    """Raised when a topological order is requested for a cyclic graph."""

    def __init__(self, cycle: list[int]) -> None:
        self.cycle = cycle
        path = " -> ".join(str(v) for v in cycle)
        super().__init__(f"Cycle detected in graph: {path}")
