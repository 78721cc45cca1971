import math
import random

import pytest

from cpalgos.shortest_paths import (
    INF,
    dijkstra,
    dijkstra_dense,
    floyd_warshall,
    format_distance_matrix,
    has_negative_cycle,
)

SAMPLE_WEIGHTS = {(1, 2): 1, (1, 3): 5, (2, 4): 2, (2, 3): 4, (3, 5): 6, (4, 5): 3}

SAMPLE_MATRIX = [
    [INF, 5, INF, 10],
    [INF, INF, 3, INF],
    [INF, INF, INF, 1],
    [INF, INF, INF, INF],
]


def _random_graph(seed, n=6, density=0.4):
    rng = random.Random(seed)
    edges = {}
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < density:
                edges[(u, v)] = rng.randint(0, 9)
    return edges


def test_negative_cycle_detected():
    assert has_negative_cycle(3, [(0, 1, 1), (1, 2, 1), (2, 0, -3)])


def test_positive_cycle_not_reported():
    assert not has_negative_cycle(3, [(0, 1, 1), (1, 2, 1), (2, 0, -1)])


def test_negative_cycle_rejects_bad_vertex():
    with pytest.raises(ValueError):
        has_negative_cycle(3, [(0, 5, 1)])


def test_negative_cycle_needs_vertices():
    with pytest.raises(ValueError):
        has_negative_cycle(0, [])


def test_dijkstra_dense_sample():
    assert dijkstra_dense(5, SAMPLE_WEIGHTS, 1, 5) == 6


def test_dijkstra_dense_unreachable():
    assert dijkstra_dense(5, SAMPLE_WEIGHTS, 5, 1) is None


def test_dijkstra_dense_same_vertex():
    assert dijkstra_dense(1, {}, 1, 1) == 0


def test_dijkstra_dense_rejects_bad_vertex():
    with pytest.raises(ValueError):
        dijkstra_dense(3, {}, 1, 4)


def test_heap_dijkstra_agrees_with_dense_on_sample():
    adjacency = {}
    for (u, v), w in SAMPLE_WEIGHTS.items():
        adjacency.setdefault(u, []).append((v, w))
    for end in range(1, 6):
        assert dijkstra(adjacency, 1, end) == dijkstra_dense(5, SAMPLE_WEIGHTS, 1, end)


def test_heap_dijkstra_unknown_vertex_is_unreachable():
    assert dijkstra({"a": [("b", 2)]}, "a", "z") is None


@pytest.mark.parametrize("seed", range(8))
def test_all_methods_agree(seed):
    n = 6
    edges = _random_graph(seed, n)
    matrix = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    adjacency = {}
    for (u, v), w in edges.items():
        matrix[u][v] = w
        adjacency.setdefault(u, []).append((v, w))
    dense = {(u + 1, v + 1): w for (u, v), w in edges.items()}
    closure = floyd_warshall(matrix)
    for s in range(n):
        for t in range(n):
            expected = None if closure[s][t] == math.inf else closure[s][t]
            assert dijkstra(adjacency, s, t) == expected
            assert dijkstra_dense(n, dense, s + 1, t + 1) == expected


def test_floyd_sample_value_and_input_untouched():
    original = [row[:] for row in SAMPLE_MATRIX]
    dist = floyd_warshall(SAMPLE_MATRIX)
    assert dist[0][3] == 9
    assert SAMPLE_MATRIX == original


def test_floyd_triangle_inequality():
    dist = floyd_warshall(SAMPLE_MATRIX)
    for i, row in enumerate(dist):
        for j, cell in enumerate(row):
            assert cell <= SAMPLE_MATRIX[i][j]
            for k in range(len(dist)):
                assert cell <= dist[i][k] + dist[k][j]


def test_floyd_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_format_layout():
    text = format_distance_matrix([[0, INF], [math.inf, 3]])
    lines = text.split("\n")
    assert lines[0] == (
        "The following matrix shows the shortest distances"
        " between every pair of vertices "
    )
    assert lines[1] == "      0    INF"
    assert lines[2] == "    INF      3"
    assert text.endswith("\n")