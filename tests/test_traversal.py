import random

import pytest

from cpalgos.traversal import (
    has_cycle,
    is_reachable,
    reachable,
    region_sizes,
    smallest_region,
)


def test_region_sizes_small_grid():
    assert region_sizes([[1, 1, 2], [1, 3, 2]]) == [3, 2, 1]


@pytest.mark.parametrize("seed", range(5))
def test_region_sizes_cover_every_cell(seed):
    rng = random.Random(seed)
    grid = [[rng.randint(0, 2) for _ in range(7)] for _ in range(5)]
    sizes = region_sizes(grid)
    assert sum(sizes) == 35
    assert smallest_region(grid) == min(sizes)


def test_uniform_grid_is_one_region():
    grid = [[4] * 6 for _ in range(3)]
    assert region_sizes(grid) == [len(grid) * len(grid[0])]


def test_wall_cells_stay_apart():
    assert region_sizes([[-1, -1]]) == [1, 1]


def test_smallest_region_empty_grid():
    with pytest.raises(ValueError):
        smallest_region([])


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        region_sizes([[1, 2], [1]])


def test_cycle_of_three():
    assert has_cycle({0: [1], 1: [2], 2: [0]})


def test_chain_has_no_cycle():
    assert not has_cycle({0: [1], 1: [2], 2: []})


def test_self_loop_is_cycle():
    assert has_cycle({"a": ["a"]})


def test_diamond_has_no_cycle():
    assert not has_cycle({"a": ["b", "c"], "b": ["d"], "c": ["d"]})


def test_reachable_chain():
    graph = {1: [2], 2: [3], 3: [4], 4: [5]}
    assert is_reachable(graph, 1, 5)
    assert not is_reachable(graph, 5, 1)
    assert reachable(graph, 3) == {3, 4, 5}


def test_reachable_is_closed_under_edges():
    rng = random.Random(3)
    graph = {v: [rng.randrange(10) for _ in range(2)] for v in range(10)}
    found = reachable(graph, 0)
    assert 0 in found
    for vertex in found:
        assert set(graph[vertex]) <= found