"""Edge-list graphs and single-source shortest paths with negative weights."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple


class Edge(NamedTuple):
    """A weighted arc ``u -> v``."""

    u: int
    v: int
    w: int


class EdgeListGraph:
    """A weighted graph on the vertices 1..n stored as a list of edges."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self.n = n
        self._edges: list[Edge] = []

    @property
    def vertices(self) -> range:
        """The vertex numbers, in ascending order."""
        return range(1, self.n + 1)

    @property
    def edges(self) -> list[Edge]:
        """The stored edges, in insertion order."""
        return list(self._edges)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise ValueError(f"vertex {x} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add the arc ``u -> v``; an arc already present between them is kept."""
        self._check(u)
        self._check(v)
        if any(e.u == u and e.v == v for e in self._edges):
            return
        self._edges.append(Edge(u, v, w))

    def add_undirected_edge(self, u: int, v: int, w: int) -> None:
        """Add the edge ``u - v``, ignoring self-loops and edges already present."""
        self._check(u)
        self._check(v)
        if u == v:
            return
        if any({e.u, e.v} == {u, v} for e in self._edges):
            return
        self._edges.append(Edge(u, v, w))

    def adjacent(self, x: int, y: int) -> bool:
        """Whether an edge joins ``x`` and ``y`` in either direction."""
        self._check(x)
        self._check(y)
        return any(
            (e.u == x and e.v == y) or (e.u == y and e.v == x) for e in self._edges
        )

    def degree(self, x: int) -> int:
        """Number of edge endpoints at ``x``; a self-loop counts twice."""
        self._check(x)
        return sum((e.u == x) + (e.v == x) for e in self._edges)

    def neighbors(self, x: int) -> list[int]:
        """Vertices joined to ``x`` by an edge in either direction, ascending."""
        self._check(x)
        return [i for i in self.vertices if self.adjacent(x, i)]

    def __repr__(self) -> str:
        return f"EdgeListGraph(n={self.n}, m={len(self._edges)})"


@dataclass(frozen=True)
class ShortestPaths:
    """Result of a Bellman-Ford run from ``source``.

    Unreachable vertices have distance ``math.inf`` and parent ``None``.
    """

    source: int
    distances: dict[int, float] = field(default_factory=dict)
    parents: dict[int, int | None] = field(default_factory=dict)
    negative_cycle: bool = False

    def path_to(self, target: int) -> list[int]:
        """Vertices from the source to ``target``; empty when unreachable.

        Raises ValueError if the parent chain runs into a cycle, which only
        happens when a negative cycle is reachable.
        """
        if target not in self.distances:
            raise ValueError(f"vertex {target} is not in the graph")
        if math.isinf(self.distances[target]):
            return []
        path = [target]
        seen = {target}
        v = target
        while v != self.source:
            p = self.parents[v]
            if p is None:
                return []
            if p in seen:
                raise ValueError(f"path to {target} runs into a negative cycle")
            seen.add(p)
            path.append(p)
            v = p
        path.reverse()
        return path


def _relax(
    graph: EdgeListGraph, source: int
) -> tuple[dict[int, float], dict[int, int | None]]:
    if source not in graph.vertices:
        raise ValueError(f"vertex {source} is outside 1..{graph.n}")
    dist: dict[int, float] = {u: math.inf for u in graph.vertices}
    parent: dict[int, int | None] = {u: None for u in graph.vertices}
    dist[source] = 0
    edges = graph.edges
    for _ in range(graph.n - 1):
        for u, v, w in edges:
            if math.isinf(dist[u]):
                continue
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
    return dist, parent


def _violating_edge(
    graph: EdgeListGraph, dist: dict[int, float]
) -> Edge | None:
    for edge in graph.edges:
        if not math.isinf(dist[edge.u]) and dist[edge.u] + edge.w < dist[edge.v]:
            return edge
    return None


def bellman_ford(graph: EdgeListGraph, source: int) -> ShortestPaths:
    """Shortest distances from ``source``, flagging a reachable negative cycle."""
    dist, parent = _relax(graph, source)
    has_cycle = _violating_edge(graph, dist) is not None
    return ShortestPaths(source, dist, parent, has_cycle)


def find_negative_cycle(graph: EdgeListGraph, source: int) -> list[int] | None:
    """A negative cycle reachable from ``source``, or None if there is none.

    The cycle is given in arc order with its first vertex repeated at the end.
    """
    dist, parent = _relax(graph, source)
    edge = _violating_edge(graph, dist)
    if edge is None:
        return None
    parent[edge.v] = edge.u
    start = edge.v
    for _ in range(graph.n):
        step = parent[start]
        if step is None:
            raise ValueError("parent chain broken while tracing negative cycle")
        start = step
    backwards = [start]
    cur = parent[start]
    while cur != start:
        if cur is None:
            raise ValueError("parent chain broken while tracing negative cycle")
        backwards.append(cur)
        cur = parent[cur]
    backwards.append(start)
    backwards.reverse()
    return backwards


def height_graph(
    heights: Sequence[int], pairs: Iterable[tuple[int, int]]
) -> EdgeListGraph:
    """Directed graph whose arc ``u -> v`` weighs ``(h[v] - h[u]) ** 3``.

    ``heights[0]`` is the height of vertex 1.
    """
    graph = EdgeListGraph(len(heights))
    for u, v in pairs:
        graph.add_edge(u, v, (heights[v - 1] - heights[u - 1]) ** 3)
    return graph