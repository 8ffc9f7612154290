import random

import pytest

from algonotes.graphs import (
    INF,
    DisjointSet,
    count_components,
    count_islands,
    floyd_warshall,
    format_distances,
    minimum_spanning_weight,
)


def test_components_without_edges():
    assert count_components(6, []) == 6


def test_components_path_is_one():
    n = 8
    edges = [(i, i + 1) for i in range(n - 1)]
    assert count_components(n, edges) == 1


def test_components_never_increase_when_adding_edges():
    rng = random.Random(2)
    n = 20
    edges = []
    previous = count_components(n, edges)
    for _ in range(30):
        edges.append((rng.randrange(n), rng.randrange(n)))
        current = count_components(n, edges)
        assert current <= previous
        previous = current


def test_components_bad_vertex():
    with pytest.raises(ValueError):
        count_components(3, [(0, 3)])


def test_disjoint_set_union_and_find():
    sets = DisjointSet(range(1, 6))
    assert sets.union(1, 2) is True
    assert sets.union(3, 4) is True
    assert sets.union(2, 1) is False
    assert sets.find(1) == sets.find(2)
    assert sets.find(1) != sets.find(3)
    assert sets.union(2, 4) is True
    assert sets.find(1) == sets.find(3)


def test_disjoint_set_unknown_element():
    with pytest.raises(KeyError):
        DisjointSet([1, 2]).find(7)


def test_mst_of_a_tree_is_its_total_weight():
    edges = [(1, 2, 4), (2, 3, 7), (2, 4, 1), (4, 5, 9)]
    assert minimum_spanning_weight(5, edges) == sum(w for _, _, w in edges)


def test_mst_ignores_heavier_extra_edges():
    tree = [(1, 2, 4), (2, 3, 7), (2, 4, 1), (4, 5, 9)]
    extra = [(1, 3, 50), (3, 5, 60), (1, 5, 70)]
    assert minimum_spanning_weight(5, tree + extra) == minimum_spanning_weight(5, tree)


def test_mst_bad_vertex():
    with pytest.raises(ValueError):
        minimum_spanning_weight(2, [(1, 3, 5)])


def test_floyd_warshall_source_example():
    graph = [
        [0, 5, INF, 10],
        [INF, 0, 3, INF],
        [INF, INF, 0, 1],
        [INF, INF, INF, 0],
    ]
    assert floyd_warshall(graph) == [
        [0, 5, 8, 9],
        [INF, 0, 3, 4],
        [INF, INF, 0, 1],
        [INF, INF, INF, 0],
    ]
    assert graph[0][2] == INF


def test_floyd_warshall_triangle_inequality():
    rng = random.Random(11)
    n = 6
    graph = [[0 if i == j else rng.choice([INF, rng.randint(1, 20)]) for j in range(n)] for i in range(n)]
    dist = floyd_warshall(graph)
    for i in range(n):
        for j in range(n):
            assert dist[i][j] <= graph[i][j]
            for k in range(n):
                if dist[i][k] != INF and dist[k][j] != INF:
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_format_distances():
    text = format_distances([[0, INF], [3, 0]])
    assert text == (
        "The following matrix shows the shortest distances between every pair of vertices \n"
        "0\t INF\t \n"
        "3\t 0\t \n"
    )


def test_count_islands_source_grid():
    grid = [
        [1, 1, 0, 0, 0],
        [0, 1, 0, 0, 1],
        [1, 0, 0, 1, 1],
        [0, 0, 0, 0, 0],
        [1, 0, 1, 0, 1],
    ]
    assert count_islands(grid) == 5


def test_count_islands_diagonal_joins():
    grid = [
        [1, 0, 1],
        [0, 1, 0],
        [1, 0, 1],
    ]
    assert count_islands(grid) == 1


def test_count_islands_empty_and_full():
    assert count_islands([[0, 0], [0, 0]]) == 0
    assert count_islands([[1] * 4 for _ in range(4)]) == 1
    assert count_islands([]) == 0