"""Directed graph stored as an adjacency mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ._algorithms import topological_sort
from ._errors import CycleDetectedError, MissingVertexError

logger = logging.getLogger(__name__)

type Vertex = int
type Edge = tuple[Vertex, Vertex]


def _check_vertex(vertex: object) -> None:
    if not isinstance(vertex, int) or isinstance(vertex, bool):
        msg = f"Vertex must be an integer, got {type(vertex).__name__}"
        raise TypeError(msg)
    if vertex < 0:
        msg = f"Vertex must be non-negative, got {vertex}"
        raise ValueError(msg)


class DirectedGraph:
    """A directed graph whose vertices are non-negative integers.

    Each vertex maps to the set of vertices its outgoing edges point to.
    A vertex exists if and only if it is a key of that mapping, so a vertex
    with no outgoing edges is distinct from an absent one.

    Edges are unweighted and parallel edges collapse into one. Vertices and
    edges can be added but never removed.

    Example:
        >>> graph = DirectedGraph()
        >>> graph.add_vertices([1, 2])
        2
        >>> graph.add_edge(1, 2)
        >>> graph.edges_from(1)
        frozenset({2})

    """

    __slots__ = ("_adjacency",)

    def __init__(self) -> None:
        self._adjacency: dict[Vertex, set[Vertex]] = {}

    @classmethod
    def from_edges(cls, vertices: Iterable[Vertex], edges: Iterable[Edge]) -> DirectedGraph:
        """Build a graph from a collection of vertices and a list of edges.

        Args:
            vertices: Vertices to insert.
            edges: (source, destination) pairs between those vertices.

        Returns:
            A new DirectedGraph instance.

        Raises:
            MissingVertexError: If an edge references a vertex not in ``vertices``.

        """
        graph = cls()
        graph.add_vertices(vertices)
        graph.add_edges(edges)
        return graph

    def num_vertices(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._adjacency)

    def num_edges(self) -> int:
        """Return the number of distinct edges in the graph."""
        return sum(len(targets) for targets in self._adjacency.values())

    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a vertex with no outgoing edges.

        Args:
            vertex: Identifier of the vertex.

        Returns:
            True if the vertex was inserted, False if it already existed.

        Raises:
            TypeError: If ``vertex`` is not an integer.
            ValueError: If ``vertex`` is negative.

        """
        _check_vertex(vertex)
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = set()
        return True

    def add_vertices(self, vertices: Iterable[Vertex]) -> int:
        """Add several vertices in order.

        Returns:
            Number of vertices that were not already present.

        """
        added = sum(self.add_vertex(v) for v in vertices)
        logger.debug(f"Added {added} vertices ({self.num_vertices()} total)")
        return added

    def contains_vertex(self, vertex: Vertex) -> bool:
        """Return True if and only if the graph contains the vertex."""
        return vertex in self._adjacency

    def add_edge(self, src: Vertex, dest: Vertex) -> None:
        """Create a directed edge from ``src`` to ``dest``.

        Adding an edge that already exists has no effect.

        Raises:
            MissingVertexError: If either vertex is not in the graph.

        """
        self._require(src, dest)
        self._adjacency[src].add(dest)

    def add_edges(self, edges: Iterable[Edge]) -> None:
        """Create several directed edges at once.

        Every edge is checked before any is inserted: if one of them
        references a missing vertex, the graph is left unchanged.

        Raises:
            MissingVertexError: If any edge references a vertex not in the graph.

        """
        edges = list(edges)
        self._require(*(v for edge in edges for v in edge))
        for src, dest in edges:
            self._adjacency[src].add(dest)
        logger.debug(f"Added {len(edges)} edges ({self.num_edges()} total)")

    def has_edge(self, src: Vertex, dest: Vertex) -> bool:
        """Return True if and only if an edge exists from ``src`` to ``dest``.

        Raises:
            MissingVertexError: If either vertex is not in the graph.

        """
        self._require(src, dest)
        return dest in self._adjacency[src]

    def vertices(self) -> frozenset[Vertex]:
        """Return the vertices currently in the graph.

        The result is a snapshot; later insertions do not change it.
        """
        return frozenset(self._adjacency)

    def edges_from(self, vertex: Vertex) -> frozenset[Vertex]:
        """Get the vertices that ``vertex`` has an outgoing edge to.

        Args:
            vertex: The vertex to query.

        Returns:
            Snapshot of the out-adjacency set of the vertex.

        Raises:
            MissingVertexError: If the vertex is not in the graph.

        """
        self._require(vertex)
        return frozenset(self._adjacency[vertex])

    def edges(self) -> list[Edge]:
        """Return every edge in the graph, sorted by source then destination."""
        return sorted((src, dest) for src, targets in self._adjacency.items() for dest in targets)

    def topological_order(self) -> list[Vertex]:
        """Return the vertices in topological order.

        Raises:
            CycleDetectedError: If the graph contains a cycle.

        """
        return topological_sort(self)

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        try:
            self.topological_order()
        except CycleDetectedError:
            return True
        return False

    def _require(self, *vertices: Vertex) -> None:
        missing = [v for v in vertices if v not in self._adjacency]
        if missing:
            raise MissingVertexError(missing)

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._adjacency

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.num_vertices()}, edges={self.num_edges()})"
