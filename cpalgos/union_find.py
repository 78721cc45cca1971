"""Disjoint-set forest with path compression and union by weight."""

from __future__ import annotations

from typing import Iterable


class UnionFind:
    """Disjoint sets over the elements 1..n."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._weight = [0] * (n + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} outside 1..{self._n}")

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        x = self.find(x)
        y = self.find(y)
        if x == y:
            return
        if self._weight[x] < self._weight[y]:
            self._parent[x] = y
            self._weight[y] += 1
        else:
            self._parent[y] = x
            self._weight[x] += 1

    def connected(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)


def process_operations(n: int, operations: Iterable[tuple[str, int, int]]) -> list[str]:
    """Run fusion ('F') and query ('C') operations over elements 1..n.

    Each query yields "S" if the two elements are joined, else "N".
    Other operation letters are ignored.
    """
    sets = UnionFind(n)
    answers = []
    for op, x, y in operations:
        if op == "F":
            sets.union(x, y)
        elif op == "C":
            answers.append("S" if sets.connected(x, y) else "N")
    return answers