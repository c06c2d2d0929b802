"""Breadth-first traversal, spanning forests and BFS trees."""

from __future__ import annotations

from collections import deque

from .graph import Graph


def _walk(
    graph: Graph,
    start: int,
    seen: set[int],
    parent: dict[int, int | None] | None = None,
) -> list[int]:
    """Visit from ``start`` skipping ``seen``; record first-discovery parents."""
    order: list[int] = []
    queue = deque([start])
    while queue:
        u = queue.popleft()
        if u in seen:
            continue
        seen.add(u)
        order.append(u)
        for v in graph.neighbors(u):
            if v not in seen:
                queue.append(v)
                if parent is not None and v not in parent:
                    parent[v] = u
    return order


def _require_vertex(graph: Graph, x: int) -> None:
    if x not in graph.vertices:
        raise ValueError(f"vertex {x} is outside 1..{graph.n}")


def bfs(graph: Graph, start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first visiting order."""
    _require_vertex(graph, start)
    return _walk(graph, start, set())


def bfs_forest(graph: Graph) -> list[list[int]]:
    """Breadth-first orders of successive trees, each rooted at the lowest unvisited vertex."""
    seen: set[int] = set()
    return [_walk(graph, u, seen) for u in graph.vertices if u not in seen]


def bfs_tree(graph: Graph) -> dict[int, int | None]:
    """Parent of every vertex in the breadth-first spanning forest; roots map to None."""
    seen: set[int] = set()
    parent: dict[int, int | None] = {}
    for u in graph.vertices:
        if u not in seen:
            parent[u] = None
            _walk(graph, u, seen, parent)
    return parent