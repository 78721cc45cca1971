"""Binary search tree keyed by integers, with root removal by in-order predecessor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class BSTNode:
    """A node holding a key, an associated value and two children."""

    key: Any
    value: Any = None
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None


def remove_root(node: BSTNode) -> Optional[BSTNode]:
    """Remove ``node`` from its subtree and return the new subtree root.

    The replacement is the in-order predecessor of ``node`` when it has a
    left subtree, otherwise its right child.
    """
    if node.left is None:
        return node.right
    parent = node
    pred = node.left
    while pred.right is not None:
        parent = pred
        pred = pred.right
    if parent is not node:
        parent.right = pred.left
        pred.left = node.left
    pred.right = node.right
    return pred


class BinarySearchTree:
    """Unbalanced binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None
        self._size = 0

    def insert(self, key, value=None) -> BSTNode:
        """Insert a new node with ``key`` and ``value`` and return it."""
        new = BSTNode(key, value)
        self._size += 1
        if self.root is None:
            self.root = new
            return new
        current = self.root
        while True:
            if current.key > key:
                if current.left is None:
                    current.left = new
                    return new
                current = current.left
            else:
                if current.right is None:
                    current.right = new
                    return new
                current = current.right

    def search(self, key) -> Optional[BSTNode]:
        """Return the first node found with ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if node.key > key else node.right
        return node

    def remove(self, key) -> None:
        """Remove a node with ``key``; raise KeyError if there is none."""
        parent: Optional[BSTNode] = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if node.key > key else node.right
        if node is None:
            raise KeyError(key)
        replacement = remove_root(node)
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1

    def __contains__(self, key) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        """Yield keys in order (left, root, right)."""
        stack: list[BSTNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.key
                node = node.right