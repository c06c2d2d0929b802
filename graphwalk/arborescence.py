"""Minimum spanning arborescence by contraction of cycles (Chu-Liu/Edmonds)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple


class _Arc(NamedTuple):
    u: int
    v: int
    w: int
    link: int


@dataclass(frozen=True)
class Arborescence:
    """Parent and incoming-edge weight of every vertex except the root."""

    root: int
    parent: dict[int, int]
    weight: dict[int, int]

    @property
    def total(self) -> int:
        """Sum of the weights of the chosen edges."""
        return sum(self.weight.values())

    def edges(self) -> list[tuple[int, int, int]]:
        """Chosen edges ``(parent, child, weight)`` ordered by child."""
        return [(self.parent[v], v, self.weight[v]) for v in sorted(self.parent)]


def _find_cycles(n: int, parent: dict[int, int], root: int) -> tuple[dict[int, int], int]:
    """Number the vertices of each cycle of the parent map from 1."""
    ids: dict[int, int] = {}
    color: dict[int, int] = {}
    count = 0
    for i in range(1, n + 1):
        u = i
        while u != root and u not in ids and color.get(u) != i:
            color[u] = i
            u = parent[u]
        if u != root and u not in ids and color.get(u) == i:
            count += 1
            v = parent[u]
            while v != u:
                ids[v] = count
                v = parent[v]
            ids[u] = count
    return ids, count


def _solve(n: int, arcs: list[_Arc], root: int) -> dict[int, int]:
    """Index into ``arcs`` of the chosen incoming arc of every non-root vertex."""
    best: dict[int, int] = {}
    for index, arc in enumerate(arcs):
        if arc.u == arc.v or arc.v == root:
            continue
        if arc.v not in best or arc.w < arcs[best[arc.v]].w:
            best[arc.v] = index
    missing = [v for v in range(1, n + 1) if v != root and v not in best]
    if missing:
        raise ValueError(f"no arborescence: nothing reaches vertex {missing[0]}")

    parent = {v: arcs[i].u for v, i in best.items()}
    ids, count = _find_cycles(n, parent, root)
    if count == 0:
        return best

    for v in range(1, n + 1):
        if v not in ids:
            count += 1
            ids[v] = count
    contracted = [
        _Arc(ids[arc.u], ids[arc.v], arc.w - arcs[best[arc.v]].w, index)
        for index, arc in enumerate(arcs)
        if ids[arc.u] != ids[arc.v]
    ]
    inner = _solve(count, contracted, ids[root])

    choice = dict(best)
    for index in inner.values():
        original = contracted[index].link
        choice[arcs[original].v] = original
    return choice


def min_arborescence(
    n: int, edges: Iterable[tuple[int, int, int]], root: int
) -> Arborescence:
    """Minimum-weight set of arcs ``(u, v, w)`` reaching every vertex from ``root``.

    Raises ValueError when some vertex cannot be reached from the root.
    """
    if n < 1:
        raise ValueError(f"vertex count must be positive, got {n}")
    if not 1 <= root <= n:
        raise ValueError(f"vertex {root} is outside 1..{n}")
    arcs: list[_Arc] = []
    for u, v, w in edges:
        for x in (u, v):
            if not 1 <= x <= n:
                raise ValueError(f"vertex {x} is outside 1..{n}")
        arcs.append(_Arc(u, v, w, -1))
    choice = _solve(n, arcs, root)
    parent = {v: arcs[i].u for v, i in choice.items()}
    weight = {v: arcs[i].w for v, i in choice.items()}
    return Arborescence(root, parent, weight)