"""Depth-first traversal with an explicit stack or in recursive order."""

from __future__ import annotations

from .graph import Graph


def _require_vertex(graph: Graph, x: int) -> None:
    if x not in graph.vertices:
        raise ValueError(f"vertex {x} is outside 1..{graph.n}")


def _stack_walk(
    graph: Graph,
    start: int,
    seen: set[int],
    parent: dict[int, int | None] | None = None,
) -> list[int]:
    """Stack-driven visit from ``start``, skipping ``seen``.

    Neighbours are pushed in ascending order, so the largest is explored
    first. A vertex's parent is the last visited vertex that pushed it.
    """
    order: list[int] = []
    stack = [start]
    while stack:
        u = stack.pop()
        if u in seen:
            continue
        seen.add(u)
        order.append(u)
        for v in graph.neighbors(u):
            if v not in seen:
                stack.append(v)
                if parent is not None:
                    parent[v] = u
    return order


def _recursive_walk(
    graph: Graph,
    start: int,
    seen: set[int],
    parent: dict[int, int | None] | None = None,
    root_parent: int | None = None,
) -> list[int]:
    """Visit in the order a recursive depth-first search would, without recursion."""
    order: list[int] = []
    if start in seen:
        return order
    seen.add(start)
    order.append(start)
    if parent is not None:
        parent[start] = root_parent
    frames = [(start, iter(graph.neighbors(start)))]
    while frames:
        u, pending = frames[-1]
        for v in pending:
            if v not in seen:
                seen.add(v)
                order.append(v)
                if parent is not None:
                    parent[v] = u
                frames.append((v, iter(graph.neighbors(v))))
                break
        else:
            frames.pop()
    return order


def dfs(graph: Graph, start: int) -> list[int]:
    """Vertices reachable from ``start`` in stack-based depth-first order."""
    _require_vertex(graph, start)
    return _stack_walk(graph, start, set())


def dfs_forest(graph: Graph) -> list[list[int]]:
    """Stack-based depth-first orders of successive trees, each rooted at the lowest unvisited vertex."""
    seen: set[int] = set()
    return [_stack_walk(graph, u, seen) for u in graph.vertices if u not in seen]


def dfs_tree(graph: Graph) -> dict[int, int | None]:
    """Parent of every vertex in the stack-based depth-first forest; roots map to None."""
    seen: set[int] = set()
    parent: dict[int, int | None] = {}
    for u in graph.vertices:
        if u not in seen:
            parent[u] = None
            _stack_walk(graph, u, seen, parent)
    return parent


def dfs_recursive(graph: Graph, start: int) -> list[int]:
    """Vertices reachable from ``start`` in recursive depth-first order."""
    _require_vertex(graph, start)
    return _recursive_walk(graph, start, set())


def dfs_recursive_tree(graph: Graph) -> dict[int, int | None]:
    """Parent of every vertex in the recursive depth-first forest; roots map to None."""
    seen: set[int] = set()
    parent: dict[int, int | None] = {}
    for u in graph.vertices:
        if u not in seen:
            _recursive_walk(graph, u, seen, parent, None)
    return parent