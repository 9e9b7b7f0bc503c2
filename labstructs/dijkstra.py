"""Single-source shortest paths on an adjacency matrix."""

from __future__ import annotations

from typing import List, Optional, Sequence

UNREACHABLE_TEXT = "inf"


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> List[Optional[int]]:
    """Shortest distances from ``source``; None marks an unreachable vertex.

    ``graph[u][v]`` is the weight of the edge from ``u`` to ``v``; 0 means
    there is no edge.
    """
    matrix = [list(row) for row in graph]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if any(weight < 0 for row in matrix for weight in row):
        raise ValueError("edge weights must not be negative")
    if not 0 <= source < n:
        raise IndexError(f"invalid source vertex {source}")

    dist: List[Optional[int]] = [None] * n
    dist[source] = 0
    done = [False] * n
    for _ in range(n):
        candidates = [v for v in range(n) if not done[v] and dist[v] is not None]
        if not candidates:
            break
        u = min(candidates, key=lambda v: dist[v])
        done[u] = True
        base = dist[u]
        assert base is not None
        for v, weight in enumerate(matrix[u]):
            if weight and not done[v]:
                candidate = base + weight
                current = dist[v]
                if current is None or candidate < current:
                    dist[v] = candidate
    return dist


def render_distances(distances: Sequence[Optional[int]]) -> str:
    """A table of vertices and their distances from the source."""
    lines = ["Vertex \t Distance from Source"]
    for vertex, distance in enumerate(distances):
        shown = UNREACHABLE_TEXT if distance is None else str(distance)
        lines.append(f"{vertex} \t\t {shown}")
    return "\n".join(lines)