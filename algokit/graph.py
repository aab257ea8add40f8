"""Undirected graphs stored as adjacency lists, with breadth- and depth-first traversal."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph over the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} is outside 0..{self.vertices - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in the order they were added."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in self._adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in stack-driven depth-first order.

        Neighbours are pushed in adjacency order and marked when pushed, so the
        most recently added neighbour is explored first.
        """
        self._check(start)
        visited = {start}
        stack = [start]
        order: list[int] = []
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbor in self._adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        return order