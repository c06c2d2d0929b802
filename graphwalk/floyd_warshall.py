"""All-pairs shortest paths with path reconstruction and negative-cycle detection."""

from __future__ import annotations

import math
from collections.abc import Iterable


class AllPairs:
    """Distances and next-hop table produced by :func:`floyd_warshall`.

    Vertices are numbered 1..n. Unreachable pairs have distance ``math.inf``.
    """

    def __init__(
        self,
        n: int,
        dist: list[list[float]],
        next_hop: list[list[int | None]],
    ) -> None:
        self.n = n
        self._dist = dist
        self._next = next_hop

    @property
    def vertices(self) -> range:
        """The vertex numbers, in ascending order."""
        return range(1, self.n + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise ValueError(f"vertex {x} is outside 1..{self.n}")

    def _step(self, u: int, v: int) -> int:
        hop = self._next[u][v]
        if hop is None:
            raise ValueError(f"no next hop from {u} towards {v}")
        return hop

    def distance(self, u: int, v: int) -> float:
        """Length of a shortest path from ``u`` to ``v``; ``math.inf`` if none."""
        self._check(u)
        self._check(v)
        return self._dist[u][v]

    def path(self, u: int, v: int) -> list[int]:
        """Vertices of a shortest path from ``u`` to ``v``; empty if there is none.

        Raises ValueError when the next-hop chain loops, which only happens
        when a negative cycle lies on the way.
        """
        self._check(u)
        self._check(v)
        if math.isinf(self._dist[u][v]):
            return []
        path = [u]
        while u != v:
            u = self._step(u, v)
            path.append(u)
            if len(path) > self.n + 1:
                raise ValueError(f"path to {v} runs into a negative cycle")
        return path

    def has_negative_cycle(self) -> bool:
        """Whether some vertex lies on a cycle of negative total weight."""
        return any(self._dist[u][u] < 0 for u in self.vertices)

    def negative_cycle(self) -> list[int] | None:
        """A negative cycle in arc order with its first vertex repeated at the end.

        Returns None when the graph has no negative cycle.
        """
        start = next((u for u in self.vertices if self._dist[u][u] < 0), None)
        if start is None:
            return None
        x = start
        for _ in range(self.n):
            x = self._step(x, start)
        cycle = []
        y = x
        while True:
            cycle.append(y)
            y = self._step(y, x)
            if y == x:
                break
            if len(cycle) > self.n:
                raise ValueError("next-hop chain does not close into a cycle")
        cycle.append(x)
        return cycle

    def __repr__(self) -> str:
        return f"AllPairs(n={self.n})"


def floyd_warshall(n: int, edges: Iterable[tuple[int, int, int]]) -> AllPairs:
    """Shortest paths between every pair of vertices of a directed weighted graph.

    ``edges`` holds arcs ``(u, v, w)``; a later arc between the same pair
    replaces an earlier one.
    """
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")
    dist: list[list[float]] = [[math.inf] * (n + 1) for _ in range(n + 1)]
    next_hop: list[list[int | None]] = [[None] * (n + 1) for _ in range(n + 1)]
    vertices = range(1, n + 1)
    for u in vertices:
        dist[u][u] = 0
    for u, v, w in edges:
        for x in (u, v):
            if not 1 <= x <= n:
                raise ValueError(f"vertex {x} is outside 1..{n}")
        dist[u][v] = w
        next_hop[u][v] = v
    for k in vertices:
        row_k = dist[k]
        for u in vertices:
            row_u = dist[u]
            for v in vertices:
                if math.isinf(row_u[k]) or math.isinf(row_k[v]):
                    continue
                through = row_u[k] + row_k[v]
                if through < row_u[v]:
                    row_u[v] = through
                    next_hop[u][v] = next_hop[u][k]
    return AllPairs(n, dist, next_hop)