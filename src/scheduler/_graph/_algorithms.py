"""Graph algorithms for directed graph operations."""

from __future__ import annotations

import logging
from collections import deque
from enum import StrEnum
from typing import TYPE_CHECKING

from ._errors import CycleDetectedError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._directed_graph import DirectedGraph, Vertex

logger = logging.getLogger(__name__)


class Color(StrEnum):
    """Traversal state of a vertex during a depth-first search."""

    WHITE = "white"
    """Not yet visited."""
    GRAY = "gray"
    """On the current traversal path, not yet finished."""
    BLACK = "black"
    """Fully processed."""


def topological_sort(graph: DirectedGraph) -> list[Vertex]:
    """Sort the vertices of a graph topologically.

    Every edge (u, v) in the graph places u before v in the returned list.
    Vertices without a path between them keep no particular relative order.

    The search is depth-first with three colors and uses an explicit stack
    of (vertex, neighbor iterator) frames, so the depth of the graph is not
    bounded by the interpreter's recursion limit. A vertex turns gray when
    its frame is pushed and black when the frame is popped, at which point
    it is prepended to the schedule.

    Args:
        graph: The graph to sort. It is only read.

    Returns:
        List of vertices in topological order.

    Raises:
        CycleDetectedError: If the graph contains a cycle.

    Example:
        >>> g = DirectedGraph.from_edges([1, 2, 3], [(1, 2), (2, 3)])
        >>> topological_sort(g)
        [1, 2, 3]

    """
    vertices = graph.vertices()
    color: dict[Vertex, Color] = dict.fromkeys(vertices, Color.WHITE)
    schedule: deque[Vertex] = deque()
    logger.debug(f"Sorting graph with {len(color)} vertices")

    for start in vertices:
        if color[start] is not Color.WHITE:
            continue

        stack: list[tuple[Vertex, Iterator[Vertex]]] = [(start, iter(graph.edges_from(start)))]
        color[start] = Color.GRAY

        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if color[neighbor] is Color.WHITE:
                    color[neighbor] = Color.GRAY
                    stack.append((neighbor, iter(graph.edges_from(neighbor))))
                    break
                if color[neighbor] is Color.GRAY:
                    cycle = _cycle_through(stack, neighbor)
                    logger.debug(f"Back edge {vertex} -> {neighbor} closes a cycle")
                    raise CycleDetectedError(cycle)
            else:
                # Neighbors exhausted: the vertex is finished
                stack.pop()
                color[vertex] = Color.BLACK
                schedule.appendleft(vertex)

    logger.debug(f"Sorted {len(schedule)} vertices")
    return list(schedule)


def _cycle_through(stack: list[tuple[Vertex, Iterator[Vertex]]], vertex: Vertex) -> list[Vertex]:
    """Extract the cycle closed by a back edge to ``vertex``.

    Gray vertices are exactly the vertices on the stack, so the cycle is the
    stack suffix starting at ``vertex``, closed by repeating it.
    """
    path = [v for v, _ in stack]
    start = path.index(vertex)
    return [*path[start:], vertex]
