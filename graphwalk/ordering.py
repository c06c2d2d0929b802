"""Topological orderings and ranks of directed graphs."""

from __future__ import annotations

from collections import deque

from .graph import Graph


def _in_degrees(graph: Graph) -> dict[int, int]:
    return {u: graph.degree(u) for u in graph.vertices}


def topological_sort(graph: Graph) -> list[int]:
    """Vertices in topological order, found by repeatedly removing sources.

    Sources are taken in ascending order and in the order they become free.
    Vertices on or behind a cycle never become free and are left out.
    """
    indegree = _in_degrees(graph)
    queue = deque(u for u in graph.vertices if indegree[u] == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph.neighbors(u):
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order


def topological_sort_dfs(graph: Graph) -> list[int]:
    """Vertices in reverse depth-first finishing order.

    Searches start from each unvisited vertex in ascending order and follow
    neighbours in ascending order. For an acyclic graph this is a
    topological order; every vertex appears exactly once.
    """
    seen: set[int] = set()
    finished: list[int] = []
    for root in graph.vertices:
        if root in seen:
            continue
        seen.add(root)
        frames = [(root, iter(graph.neighbors(root)))]
        while frames:
            u, pending = frames[-1]
            for v in pending:
                if v not in seen:
                    seen.add(v)
                    frames.append((v, iter(graph.neighbors(v))))
                    break
            else:
                frames.pop()
                finished.append(u)
    finished.reverse()
    return finished


def rank(graph: Graph, base: int = 0) -> dict[int, int | None]:
    """Rank of every vertex: ``base`` for sources, one more per level below.

    A vertex's rank is ``base`` plus the length of the longest path reaching
    it from a source. Vertices on or behind a cycle get None.
    """
    indegree = _in_degrees(graph)
    ranks: dict[int, int | None] = {u: None for u in graph.vertices}
    level = [u for u in graph.vertices if indegree[u] == 0]
    k = base
    while level:
        following: list[int] = []
        for u in level:
            ranks[u] = k
            for v in graph.neighbors(u):
                indegree[v] -= 1
                if indegree[v] == 0:
                    following.append(v)
        level = following
        k += 1
    return ranks