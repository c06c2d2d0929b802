# graphwalk

A small library of classic graph algorithms on graphs whose vertices are
numbered from 1 to `n`. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `graphwalk.graph` | `Graph`, an adjacency-matrix graph (directed or undirected), and `parse_graph` for reading `n m` followed by `m` edge pairs |
| `graphwalk.bfs` | `bfs`, `bfs_forest`, `bfs_tree` |
| `graphwalk.dfs` | `dfs`, `dfs_forest`, `dfs_tree` (explicit stack), `dfs_recursive`, `dfs_recursive_tree` (recursive visiting order) |
| `graphwalk.bellman_ford` | `EdgeListGraph`, `Edge`, `bellman_ford` and its `ShortestPaths` result, `find_negative_cycle`, `height_graph` |
| `graphwalk.floyd_warshall` | `floyd_warshall` and its `AllPairs` result |
| `graphwalk.spanning` | `kruskal`, `prim` and their `SpanningTree` result |
| `graphwalk.ordering` | `topological_sort`, `topological_sort_dfs`, `rank` |
| `graphwalk.project` | `schedule` and its `Schedule` result, `parse_prerequisite_lists`, `parse_dependency_edges` |
| `graphwalk.arborescence` | `min_arborescence` and its `Arborescence` result |

Vertices outside `1..n` raise `ValueError` throughout.

## Traversals

```python
from graphwalk.graph import parse_graph
from graphwalk.bfs import bfs, bfs_tree
from graphwalk.dfs import dfs_recursive

g = parse_graph("4 3\n1 2\n1 3\n2 4\n", directed=False)

print(bfs(g, 1))            # [1, 2, 3, 4]
print(dfs_recursive(g, 1))  # [1, 2, 4, 3]
print(bfs_tree(g))          # {1: None, 2: 1, 3: 1, 4: 2}
```

Neighbours are always examined in ascending order. The forest and tree
functions start a new tree at the lowest vertex not yet visited; roots have
parent `None`.

## Shortest paths

Single source, with negative weights allowed:

```python
from graphwalk.bellman_ford import EdgeListGraph, bellman_ford, find_negative_cycle

g = EdgeListGraph(3)
g.add_edge(1, 2, 4)
g.add_edge(2, 3, -2)
paths = bellman_ford(g, 1)
print(paths.distances[3])   # 2
print(paths.path_to(3))     # [1, 2, 3]
print(paths.negative_cycle) # False
print(find_negative_cycle(g, 1))  # None
```

Unreachable vertices have distance `math.inf`, parent `None` and an empty
path. `find_negative_cycle` returns a cycle in arc order with its first
vertex repeated at the end. `height_graph(heights, pairs)` builds a graph
whose arc `u -> v` weighs `(h[v] - h[u]) ** 3`.

All pairs:

```python
from graphwalk.floyd_warshall import floyd_warshall

result = floyd_warshall(3, [(1, 2, 5), (2, 3, 1)])
print(result.distance(1, 3), result.path(1, 3))  # 6 [1, 2, 3]
print(result.distance(3, 1))                     # inf
print(result.has_negative_cycle())               # False
```

## Spanning trees

```python
from graphwalk.spanning import kruskal, prim

edges = [(1, 2, 3), (2, 3, 1), (1, 3, 2)]
print(kruskal(3, edges).weight)   # 3
print(prim(3, edges, 1).edges)    # edges with the smaller endpoint first
```

`kruskal` gives a minimum spanning forest; `prim` covers the component
holding the start vertex.

## Orderings and ranks

`topological_sort` removes sources in queue order and leaves out vertices on
or behind a cycle. `topological_sort_dfs` returns the reverse depth-first
finishing order. `rank(graph, base=0)` gives each vertex `base` plus the
length of the longest path reaching it from a source, or `None` for vertices
on or behind a cycle.

## Project scheduling

```python
from graphwalk.project import schedule

plan = schedule([3, 2, 4], [(1, 3), (2, 3)])
print(plan.earliest, plan.latest, plan.duration, plan.critical_tasks)
```

Each dependency `(u, v)` means task `u` finishes before `v` starts; a cycle
raises `ValueError`. `parse_prerequisite_lists` and `parse_dependency_edges`
read the two plain-text task formats into durations and dependencies.

## Minimum arborescence

```python
from graphwalk.arborescence import min_arborescence

tree = min_arborescence(3, [(1, 2, 5), (1, 3, 4), (3, 2, 1)], root=1)
print(tree.edges(), tree.total)  # [(3, 2, 1), (1, 3, 4)] 5
```

A vertex that cannot be reached from the root raises `ValueError`.

## What it does not do

There is no command-line program: the package reads no files and prints
nothing. Text input is handled only by the parsing functions named above,
which take a string; reading it from a file and showing the results is left
to the caller.