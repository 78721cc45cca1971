import pytest

from cpalgos.bst import BinarySearchTree, BSTNode, remove_root

KEYS = [50, 30, 70, 20, 40, 60, 80, 15, 25, 35, 45, 36]


@pytest.fixture
def tree():
    t = BinarySearchTree()
    for k in KEYS:
        t.insert(k, k * 10)
    return t


def test_iteration_is_sorted(tree):
    assert list(tree) == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_search_finds_value(tree):
    node = tree.search(35)
    assert node.key == 35
    assert node.value == 350
    assert tree.search(99) is None


def test_contains(tree):
    assert 45 in tree
    assert 46 not in tree


def test_remove_inner_node(tree):
    tree.remove(30)
    expected = sorted(k for k in KEYS if k != 30)
    assert list(tree) == expected
    assert 30 not in tree
    assert tree.root.left.key == 25


def test_remove_root_of_tree(tree):
    tree.remove(50)
    assert list(tree) == sorted(k for k in KEYS if k != 50)
    assert tree.root.key == 45


def test_remove_all(tree):
    for k in KEYS:
        tree.remove(k)
    assert list(tree) == []
    assert tree.root is None
    assert len(tree) == 0


def test_remove_missing_raises(tree):
    with pytest.raises(KeyError):
        tree.remove(1000)


def test_duplicates_kept(tree):
    tree.insert(40, "dup")
    assert list(tree) == sorted(KEYS + [40])


def test_remove_root_without_left_returns_right():
    right = BSTNode(7)
    node = BSTNode(5, right=right)
    assert remove_root(node) is right


def test_remove_root_direct_predecessor():
    left = BSTNode(3)
    right = BSTNode(8)
    node = BSTNode(5, left=left, right=right)
    new_root = remove_root(node)
    assert new_root is left
    assert new_root.right is right