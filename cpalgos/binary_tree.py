"""Plain binary tree with recursive and iterative traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class TreeNode:
    """A binary tree node holding a value."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def insert_left(self, value) -> "TreeNode":
        """Attach a new leaf with ``value`` as the left child and return it."""
        self.left = TreeNode(value)
        return self.left

    def insert_right(self, value) -> "TreeNode":
        """Attach a new leaf with ``value`` as the right child and return it."""
        self.right = TreeNode(value)
        return self.right


def height(root: Optional[TreeNode]) -> int:
    """Height of the tree; an empty tree has height -1."""
    if root is None:
        return -1
    return max(height(root.left), height(root.right)) + 1


def in_order(root: Optional[TreeNode]) -> Iterator:
    """Yield values left, root, right."""
    if root is not None:
        yield from in_order(root.left)
        yield root.value
        yield from in_order(root.right)


def pre_order(root: Optional[TreeNode]) -> Iterator:
    """Yield values root, left, right."""
    if root is not None:
        yield root.value
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def post_order(root: Optional[TreeNode]) -> Iterator:
    """Yield values left, right, root."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.value


def in_order_iterative(root: Optional[TreeNode]) -> Iterator:
    """Yield values left, root, right using an explicit stack."""
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node.value
            node = node.right