"""Minimum spanning trees by Kruskal's and Prim's methods."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .bellman_ford import Edge


@dataclass(frozen=True)
class SpanningTree:
    """Total weight and edges of a spanning tree or forest.

    Every edge is stored with its smaller endpoint first.
    """

    weight: int
    edges: tuple[Edge, ...]


def _check(n: int, *xs: int) -> None:
    for x in xs:
        if not 1 <= x <= n:
            raise ValueError(f"vertex {x} is outside 1..{n}")


def kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> SpanningTree:
    """Minimum spanning forest of an undirected weighted graph.

    Self-loops are ignored and the first of repeated edges is kept. Edges of
    equal weight are taken in input order; the result lists edges by weight.
    """
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")
    unique: list[Edge] = []
    pairs: set[tuple[int, int]] = set()
    for u, v, w in edges:
        _check(n, u, v)
        if u == v:
            continue
        a, b = min(u, v), max(u, v)
        if (a, b) in pairs:
            continue
        pairs.add((a, b))
        unique.append(Edge(a, b, w))
    unique.sort(key=lambda e: e.w)

    parent = {u: u for u in range(1, n + 1)}

    def find_root(u: int) -> int:
        while parent[u] != u:
            u = parent[u]
        return u

    chosen: list[Edge] = []
    for edge in unique:
        root_u = find_root(edge.u)
        root_v = find_root(edge.v)
        if root_u != root_v:
            parent[root_v] = root_u
            chosen.append(edge)
    chosen.sort(key=lambda e: e.w)
    return SpanningTree(sum(e.w for e in chosen), tuple(chosen))


def prim(n: int, edges: Iterable[tuple[int, int, int]], start: int) -> SpanningTree:
    """Minimum spanning tree of the component holding ``start``.

    A repeated edge replaces the earlier weight. The result lists edges in
    ascending order of their endpoints.
    """
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")
    _check(n, start)
    adjacency: dict[int, dict[int, int]] = {u: {} for u in range(1, n + 1)}
    for u, v, w in edges:
        _check(n, u, v)
        adjacency[u][v] = w
        adjacency[v][u] = w

    cost: dict[int, float] = {u: math.inf for u in adjacency}
    parent: dict[int, int] = {}
    done: set[int] = set()
    cost[start] = 0
    for _ in range(n):
        candidates = [x for x in adjacency if x not in done and not math.isinf(cost[x])]
        if not candidates:
            break
        u = min(candidates, key=lambda x: (cost[x], x))
        done.add(u)
        for v, w in adjacency[u].items():
            if v not in done and cost[v] > w:
                cost[v] = w
                parent[v] = u

    chosen = sorted(
        Edge(min(p, u), max(p, u), adjacency[p][u]) for u, p in parent.items()
    )
    return SpanningTree(sum(e.w for e in chosen), tuple(chosen))