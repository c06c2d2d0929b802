"""Adjacency-matrix graph on the vertices 1..n."""

from __future__ import annotations

from collections.abc import Iterable


class Graph:
    """A simple graph whose vertices are numbered 1..n.

    Undirected graphs store every edge in both directions. Directed graphs
    store only the arc ``u -> v``.
    """

    def __init__(self, n: int, directed: bool = False) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self.n = n
        self.directed = directed
        self._matrix = [[False] * (n + 1) for _ in range(n + 1)]

    @classmethod
    def from_edges(
        cls, n: int, edges: Iterable[tuple[int, int]], directed: bool = False
    ) -> Graph:
        """Build a graph on ``n`` vertices holding the given edges."""
        graph = cls(n, directed)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @property
    def vertices(self) -> range:
        """The vertex numbers, in ascending order."""
        return range(1, self.n + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise ValueError(f"vertex {x} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u - v`` (or the arc ``u -> v`` when directed)."""
        self._check(u)
        self._check(v)
        self._matrix[u][v] = True
        if not self.directed:
            self._matrix[v][u] = True

    def adjacent(self, u: int, v: int) -> bool:
        """Whether there is an edge from ``u`` to ``v``."""
        self._check(u)
        self._check(v)
        return self._matrix[u][v]

    def degree(self, x: int) -> int:
        """Number of vertices with an edge into ``x`` (in-degree when directed)."""
        self._check(x)
        return sum(1 for i in self.vertices if self._matrix[i][x])

    def neighbors(self, x: int) -> list[int]:
        """Vertices reachable from ``x`` by one edge, in ascending order."""
        self._check(x)
        row = self._matrix[x]
        return [i for i in self.vertices if row[i]]

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.n}, {kind})"


def parse_graph(text: str, directed: bool = False) -> Graph:
    """Read ``n m`` followed by ``m`` pairs ``u v`` from whitespace-separated text."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected vertex and edge counts")
    numbers = [int(token) for token in tokens]
    n, m = numbers[0], numbers[1]
    if m < 0:
        raise ValueError(f"edge count must be non-negative, got {m}")
    body = numbers[2 : 2 + 2 * m]
    if len(body) < 2 * m:
        raise ValueError(f"expected {m} edges, found {len(body) // 2}")
    pairs = zip(body[0::2], body[1::2])
    return Graph.from_edges(n, pairs, directed)