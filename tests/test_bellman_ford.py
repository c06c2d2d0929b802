import math

import pytest

from graphwalk.bellman_ford import (
    EdgeListGraph,
    ShortestPaths,
    bellman_ford,
    find_negative_cycle,
    height_graph,
)


def _graph(n, edges):
    g = EdgeListGraph(n)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def _weight(graph, u, v):
    return next(e.w for e in graph.edges if e.u == u and e.v == v)


def test_add_edge_keeps_first_duplicate():
    g = EdgeListGraph(3)
    g.add_edge(1, 2, 5)
    g.add_edge(1, 2, 9)
    g.add_edge(2, 1, 4)
    assert [(e.u, e.v, e.w) for e in g.edges] == [(1, 2, 5), (2, 1, 4)]


def test_add_undirected_edge_ignores_reverse_and_self_loop():
    g = EdgeListGraph(3)
    g.add_undirected_edge(1, 2, 5)
    g.add_undirected_edge(2, 1, 6)
    g.add_undirected_edge(3, 3, 1)
    assert [(e.u, e.v, e.w) for e in g.edges] == [(1, 2, 5)]


def test_adjacent_is_symmetric_and_degree_counts_endpoints():
    g = _graph(4, [(1, 2, 1), (3, 1, 2)])
    assert g.adjacent(1, 2) and g.adjacent(2, 1)
    assert g.adjacent(1, 3) and g.adjacent(3, 1)
    assert not g.adjacent(2, 3)
    assert g.degree(1) == len(g.edges)
    assert g.degree(4) == 0


def test_neighbors_are_ascending():
    g = _graph(4, [(1, 4, 1), (2, 1, 1), (1, 3, 1)])
    assert g.neighbors(1) == [2, 3, 4]
    assert g.neighbors(4) == [1]


def test_vertex_out_of_range_raises():
    g = EdgeListGraph(2)
    with pytest.raises(ValueError):
        g.add_edge(1, 3, 1)
    with pytest.raises(ValueError):
        bellman_ford(g, 0)


def test_chain_distance():
    g = _graph(3, [(1, 2, 3), (2, 3, 4)])
    result = bellman_ford(g, 1)
    assert result.distances[3] == 7
    assert result.path_to(3) == [1, 2, 3]
    assert not result.negative_cycle


def test_negative_edge_gives_cheaper_route():
    g = _graph(3, [(1, 2, 5), (1, 3, 1), (3, 2, -3)])
    result = bellman_ford(g, 1)
    assert result.distances[2] == -2
    path = result.path_to(2)
    assert path[0] == 1 and path[-1] == 2
    assert sum(_weight(g, a, b) for a, b in zip(path, path[1:])) == result.distances[2]


def test_distances_satisfy_every_edge():
    edges = [(1, 2, 4), (1, 3, 2), (3, 2, 1), (2, 4, 5), (3, 4, 8), (4, 5, -2)]
    g = _graph(5, edges)
    result = bellman_ford(g, 1)
    for u, v, w in edges:
        assert result.distances[v] <= result.distances[u] + w
    for v in g.vertices:
        path = result.path_to(v)
        total = sum(_weight(g, a, b) for a, b in zip(path, path[1:]))
        assert total == result.distances[v]


def test_unreachable_vertex():
    g = _graph(3, [(1, 2, 1)])
    result = bellman_ford(g, 1)
    assert math.isinf(result.distances[3])
    assert result.parents[3] is None
    assert result.path_to(3) == []


def test_path_to_unknown_vertex_raises():
    result = bellman_ford(_graph(2, [(1, 2, 1)]), 1)
    with pytest.raises(ValueError):
        result.path_to(5)


def test_negative_cycle_detected_and_traced():
    g = _graph(3, [(1, 2, 1), (2, 3, -2), (3, 2, 1)])
    result = bellman_ford(g, 1)
    assert result.negative_cycle
    cycle = find_negative_cycle(g, 1)
    assert cycle[0] == cycle[-1]
    arcs = list(zip(cycle, cycle[1:]))
    assert all(any(e.u == a and e.v == b for e in g.edges) for a, b in arcs)
    assert sum(_weight(g, a, b) for a, b in arcs) < 0


def test_path_into_negative_cycle_raises():
    g = _graph(3, [(1, 2, 1), (2, 3, -2), (3, 2, 1)])
    result = bellman_ford(g, 1)
    with pytest.raises(ValueError):
        result.path_to(2)


def test_unreachable_negative_cycle_is_ignored():
    g = _graph(4, [(1, 2, 1), (3, 4, -5), (4, 3, 1)])
    assert not bellman_ford(g, 1).negative_cycle
    assert find_negative_cycle(g, 1) is None


def test_no_cycle_returns_none():
    g = _graph(3, [(1, 2, -1), (2, 3, -1)])
    assert find_negative_cycle(g, 1) is None


def test_height_graph_weights_are_cubes():
    g = height_graph([1, 3, 2], [(1, 2), (2, 3)])
    assert [e.w for e in g.edges] == [8, -1]
    assert g.n == 3


def test_height_graph_shortest_path_consistent():
    g = height_graph([5, 2, 4, 1], [(1, 2), (2, 3), (1, 3), (3, 4)])
    result = bellman_ford(g, 1)
    assert isinstance(result, ShortestPaths)
    path = result.path_to(4)
    assert path[0] == 1 and path[-1] == 4
    assert sum(_weight(g, a, b) for a, b in zip(path, path[1:])) == result.distances[4]