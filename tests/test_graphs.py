import pytest

from dsakit.graphs import bfs, dfs

GRAPH = [
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 0, 0, 0],
    [0, 1, 0, 0, 1, 0, 0],
    [0, 1, 0, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]


def test_bfs_source_example():
    assert bfs(GRAPH, 4) == [4, 2, 3, 5, 6, 1]


def test_dfs_from_one():
    assert dfs(GRAPH, 1) == [1, 2, 4, 3, 5, 6]


@pytest.mark.parametrize("traverse", [bfs, dfs])
@pytest.mark.parametrize("start", range(1, 7))
def test_visits_every_vertex_once(traverse, start):
    order = traverse(GRAPH, start)
    assert order[0] == start
    assert sorted(order) == list(range(1, 7))


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_disconnected_vertex(traverse):
    graph = [
        [0, 0, 0, 0],
        [0, 0, 1, 0],
        [0, 1, 0, 0],
        [0, 0, 0, 0],
    ]
    assert traverse(graph, 1) == [1, 2]
    assert traverse(graph, 3) == [3]


@pytest.mark.parametrize(
    "traverse, expected",
    [
        (bfs, [2, 1, 4, 3, 5, 6]),
        (dfs, [2, 1, 3, 4, 5, 6]),
    ],
)
def test_dfs_repeated_calls_independent(traverse, expected):
    assert traverse(GRAPH, 2) == expected
    assert traverse(GRAPH, 2) == expected


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_bad_start(traverse):
    with pytest.raises(IndexError):
        traverse(GRAPH, 7)