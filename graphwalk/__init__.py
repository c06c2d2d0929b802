"""Graph algorithms on vertices numbered from 1: traversals, shortest paths,
spanning trees, orderings, project scheduling and minimum arborescences."""

__version__ = "0.1.0"
__all__ = [
    "arborescence",
    "bellman_ford",
    "bfs",
    "dfs",
    "floyd_warshall",
    "graph",
    "ordering",
    "project",
    "spanning",
]