"""Undirected graph stored as adjacency lists, with traversals and friend suggestions."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Dict, List, Optional, Sequence, TextIO, Tuple


class AdjacencyListGraph:
    """Undirected graph over vertices ``0..num_vertices-1``.

    Each new edge is put at the front of both vertices' lists, so neighbours
    are listed from the most recently added to the oldest.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adjacent: List[List[int]] = [[] for _ in range(num_vertices)]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self.num_vertices:
                raise IndexError(f"invalid vertex index {vertex}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u, v)
        self._adjacent[u].append(v)
        self._adjacent[v].append(u)

    def neighbors(self, vertex: int) -> List[int]:
        """Neighbours of ``vertex``, newest edge first."""
        self._check(vertex)
        return self._adjacent[vertex][::-1]

    def _levels(self, start: int) -> Tuple[List[int], Dict[int, int]]:
        self._check(start)
        level = {start: 0}
        order: List[int] = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self.neighbors(current):
                if neighbor not in level:
                    level[neighbor] = level[current] + 1
                    queue.append(neighbor)
        return order, level

    def bfs(self, start: int) -> List[int]:
        """Vertices in breadth-first order from ``start``."""
        order, _ = self._levels(start)
        return order

    def dfs(self, start: int) -> List[int]:
        """Vertices in depth-first order from ``start``."""
        self._check(start)
        visited = set()
        order: List[int] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            stack.extend(
                n for n in reversed(self.neighbors(vertex)) if n not in visited
            )
        return order

    def friend_suggestions(self, user: int) -> Tuple[List[int], List[int]]:
        """Direct friends (distance 1) and suggestions (distance 2), each ascending."""
        _, level = self._levels(user)
        friends = sorted(v for v, d in level.items() if d == 1)
        suggestions = sorted(v for v, d in level.items() if d == 2)
        return friends, suggestions

    def render(self) -> str:
        """One line per vertex: ``v: n1 n2 ...``."""
        return "\n".join(
            f"{vertex}:" + "".join(f" {n}" for n in self.neighbors(vertex))
            for vertex in range(self.num_vertices)
        )


def _read_ints(stream: TextIO) -> List[int]:
    try:
        return [int(token) for token in stream.read().split()]
    except ValueError as exc:
        raise ValueError(f"expected integers: {exc}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a friendship graph and a user id, then print friends and suggestions.

    Input holds the number of users, the number of friendships, that many
    pairs of user ids and finally the user to report on.
    """
    parser = argparse.ArgumentParser(
        prog="labstructs-friends",
        description="Suggest friends of friends in an undirected graph.",
    )
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            numbers = _read_ints(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as handle:
                numbers = _read_ints(handle)
        if len(numbers) < 2:
            raise ValueError("missing number of users or friendships")
        num_users, num_edges = numbers[0], numbers[1]
        needed = 2 + 2 * num_edges + 1
        if num_edges < 0 or len(numbers) < needed:
            raise ValueError("missing friendships or user id")
        graph = AdjacencyListGraph(num_users)
        pairs = numbers[2 : 2 + 2 * num_edges]
        for u, v in zip(pairs[::2], pairs[1::2]):
            graph.add_edge(u, v)
        user = numbers[needed - 1]
        friends, suggestions = graph.friend_suggestions(user)
    except (OSError, ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Graph (Adjacency List):")
    print(graph.render())
    print(f"Direct friends of user {user}:" + "".join(f" {f}" for f in friends))
    print(
        f"Friend suggestions for user {user}:" + "".join(f" {s}" for s in suggestions)
    )
    return 0