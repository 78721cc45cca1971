import pytest

from cpalgos.union_find import UnionFind, process_operations


def test_initially_disjoint():
    uf = UnionFind(5)
    assert not uf.connected(1, 2)
    assert uf.find(3) == 3


def test_union_and_transitivity():
    uf = UnionFind(6)
    uf.union(1, 2)
    uf.union(2, 3)
    uf.union(5, 6)
    assert uf.connected(1, 3)
    assert uf.connected(5, 6)
    assert not uf.connected(3, 5)
    assert uf.find(1) == uf.find(2) == uf.find(3)


def test_union_same_set_is_noop():
    uf = UnionFind(3)
    uf.union(1, 2)
    root = uf.find(1)
    uf.union(2, 1)
    assert uf.find(2) == root


def test_long_chain():
    uf = UnionFind(1000)
    for i in range(1, 1000):
        uf.union(i, i + 1)
    assert uf.connected(1, 1000)


def test_out_of_range():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(0)
    with pytest.raises(IndexError):
        uf.union(1, 4)


def test_process_operations():
    ops = [("C", 1, 2), ("F", 1, 2), ("C", 1, 2), ("F", 2, 3), ("C", 3, 1), ("C", 4, 1)]
    assert process_operations(4, ops) == ["N", "S", "S", "N"]


def test_process_ignores_unknown():
    assert process_operations(2, [("X", 1, 2), ("C", 1, 2)]) == ["N"]