import pytest

from graphwalk.project import (
    parse_dependency_edges,
    parse_prerequisite_lists,
    schedule,
)

DURATIONS = [7, 3, 1, 8, 2, 1, 1, 3, 2, 1]
DEPENDENCIES = [
    (1, 2), (1, 3), (2, 4), (3, 5), (4, 6), (5, 6),
    (6, 7), (6, 8), (7, 9), (8, 9), (9, 10),
]


def _check_invariants(durations, dependencies, result):
    for u in result.earliest:
        assert 0 <= result.earliest[u] <= result.latest[u]
        assert result.latest[u] + durations[u - 1] <= result.duration
    for u, v in dependencies:
        assert result.earliest[v] >= result.earliest[u] + durations[u - 1]
        assert result.latest[u] + durations[u - 1] <= result.latest[v]
    assert result.duration == max(
        result.earliest[u] + durations[u - 1] for u in result.earliest
    )


def test_single_task():
    result = schedule([4], [])
    assert result.earliest == {1: 0}
    assert result.latest == {1: 0}
    assert result.duration == 4


def test_invariants_on_project():
    result = schedule(DURATIONS, DEPENDENCIES)
    _check_invariants(DURATIONS, DEPENDENCIES, result)
    assert set(result.earliest) == set(range(1, 11))


def test_critical_tasks_have_no_slack_and_include_ends():
    result = schedule(DURATIONS, DEPENDENCIES)
    critical = result.critical_tasks
    assert 1 in critical
    assert 10 in critical
    for u in critical:
        assert result.earliest[u] == result.latest[u]


def test_independent_tasks_start_at_zero():
    durations = [2, 5, 3]
    result = schedule(durations, [])
    assert result.earliest == {1: 0, 2: 0, 3: 0}
    assert result.duration == max(durations)
    assert result.critical_tasks == [2]


def test_chain_is_fully_critical():
    durations = [2, 3, 4]
    result = schedule(durations, [(1, 2), (2, 3)])
    assert result.earliest == result.latest
    assert result.duration == sum(durations)
    assert result.critical_tasks == [1, 2, 3]


def test_cycle_is_rejected():
    with pytest.raises(ValueError):
        schedule([1, 1], [(1, 2), (2, 1)])


def test_task_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        schedule([1, 1], [(1, 3)])


def test_empty_project_is_rejected():
    with pytest.raises(ValueError):
        schedule([], [])


def test_parse_prerequisite_lists():
    durations, deps = parse_prerequisite_lists("3\n5 0\n2 1 0\n4 1 2 0\n")
    assert durations == [5, 2, 4]
    assert deps == [(1, 2), (1, 3), (2, 3)]


def test_parse_prerequisite_lists_truncated():
    with pytest.raises(ValueError):
        parse_prerequisite_lists("2\n5 0\n2 1")


def test_parse_dependency_edges():
    durations, deps = parse_dependency_edges("3\n5 2 4\n2\n1 2\n2 3\n")
    assert durations == [5, 2, 4]
    assert deps == [(1, 2), (2, 3)]


def test_parse_dependency_edges_truncated():
    with pytest.raises(ValueError):
        parse_dependency_edges("2\n5 2\n3\n1 2\n")


def test_both_formats_give_the_same_schedule():
    a = schedule(*parse_prerequisite_lists("3\n5 0\n2 1 0\n4 1 2 0\n"))
    b = schedule(*parse_dependency_edges("3\n5 2 4\n3\n1 2\n1 3\n2 3\n"))
    assert a == b