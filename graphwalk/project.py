"""Project scheduling: earliest and latest start times of dependent tasks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .graph import Graph
from .ordering import topological_sort


@dataclass(frozen=True)
class Schedule:
    """Start times of tasks numbered 1..n and the length of the whole project."""

    earliest: dict[int, int]
    latest: dict[int, int]
    duration: int

    @property
    def critical_tasks(self) -> list[int]:
        """Tasks whose earliest and latest start coincide, in ascending order."""
        return sorted(u for u in self.earliest if self.earliest[u] == self.latest[u])


def schedule(
    durations: Sequence[int], dependencies: Iterable[tuple[int, int]]
) -> Schedule:
    """Earliest and latest start of every task.

    ``durations[0]`` is the duration of task 1. Each dependency ``(u, v)``
    means task ``u`` must finish before task ``v`` starts. Raises ValueError
    when the dependencies contain a cycle.
    """
    n = len(durations)
    if n == 0:
        raise ValueError("a project needs at least one task")
    alpha, beta = n + 1, n + 2
    succ: dict[int, set[int]] = {u: set() for u in range(1, n + 3)}
    pred: dict[int, set[int]] = {u: set() for u in range(1, n + 3)}

    for u, v in dependencies:
        for x in (u, v):
            if not 1 <= x <= n:
                raise ValueError(f"task {x} is outside 1..{n}")
        succ[u].add(v)
        pred[v].add(u)

    tasks = range(1, n + 1)
    starts = [u for u in tasks if not pred[u]]
    ends = [u for u in tasks if not succ[u]]
    for u in starts:
        succ[alpha].add(u)
        pred[u].add(alpha)
    for u in ends:
        succ[u].add(beta)
        pred[beta].add(u)

    graph = Graph(n + 2, directed=True)
    for u, targets in succ.items():
        for v in targets:
            graph.add_edge(u, v)
    order = topological_sort(graph)
    if len(order) != n + 2:
        raise ValueError("dependencies contain a cycle")

    length = {u: durations[u - 1] for u in tasks}
    length[alpha] = 0
    length[beta] = 0

    earliest: dict[int, int] = {alpha: 0}
    for u in order[1:]:
        earliest[u] = max(earliest[x] + length[x] for x in pred[u])

    latest: dict[int, int] = {beta: earliest[beta]}
    for u in reversed(order[:-1]):
        latest[u] = min(latest[v] - length[u] for v in succ[u])

    return Schedule(
        earliest={u: earliest[u] for u in tasks},
        latest={u: latest[u] for u in tasks},
        duration=earliest[beta],
    )


def _numbers(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def _take(numbers: Iterator[int], what: str) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError(f"input ended while reading {what}") from None


def parse_prerequisite_lists(text: str) -> tuple[list[int], list[tuple[int, int]]]:
    """Read ``n`` then, per task, its duration and prerequisites ended by 0.

    Returns the durations and the dependencies as ``(before, after)`` pairs.
    """
    numbers = _numbers(text)
    n = _take(numbers, "the task count")
    if n < 0:
        raise ValueError(f"task count must be non-negative, got {n}")
    durations: list[int] = []
    dependencies: list[tuple[int, int]] = []
    for task in range(1, n + 1):
        durations.append(_take(numbers, f"the duration of task {task}"))
        while (x := _take(numbers, f"the prerequisites of task {task}")) > 0:
            dependencies.append((x, task))
    return durations, dependencies


def parse_dependency_edges(text: str) -> tuple[list[int], list[tuple[int, int]]]:
    """Read ``n``, ``n`` durations, ``m`` and ``m`` pairs ``u v`` (u before v)."""
    numbers = _numbers(text)
    n = _take(numbers, "the task count")
    if n < 0:
        raise ValueError(f"task count must be non-negative, got {n}")
    durations = [_take(numbers, f"the duration of task {u}") for u in range(1, n + 1)]
    m = _take(numbers, "the dependency count")
    if m < 0:
        raise ValueError(f"dependency count must be non-negative, got {m}")
    dependencies = [
        (_take(numbers, "a dependency"), _take(numbers, "a dependency"))
        for _ in range(m)
    ]
    return durations, dependencies