"""Grid flood fill and directed-graph reachability and cycle checks."""

from __future__ import annotations

from collections import deque
from typing import Hashable, Iterable, Mapping, Sequence

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_WALL = -1


def region_sizes(grid: Sequence[Sequence[int]]) -> list[int]:
    """Sizes of the 4-connected same-colour regions, in row-major discovery order.

    Cells holding -1 never join a neighbour's region.
    """
    rows = [list(row) for row in grid]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    seen: set[tuple[int, int]] = set()
    sizes = []
    for i, row in enumerate(rows):
        for j, colour in enumerate(row):
            if (i, j) in seen:
                continue
            seen.add((i, j))
            queue = deque([(i, j)])
            count = 1
            while queue:
                x, y = queue.popleft()
                for dx, dy in _STEPS:
                    nx, ny = x + dx, y + dy
                    if not (0 <= nx < height and 0 <= ny < width):
                        continue
                    cell = rows[nx][ny]
                    if cell == _WALL or cell != colour or (nx, ny) in seen:
                        continue
                    seen.add((nx, ny))
                    queue.append((nx, ny))
                    count += 1
            sizes.append(count)
    return sizes


def smallest_region(grid: Sequence[Sequence[int]]) -> int:
    """Size of the smallest same-colour region of a non-empty grid."""
    sizes = region_sizes(grid)
    if not sizes:
        raise ValueError("grid is empty")
    return min(sizes)


def has_cycle(graph: Mapping[Hashable, Iterable[Hashable]]) -> bool:
    """Tell whether a directed graph, given as successor lists, has a cycle."""
    done: set = set()
    for root in graph:
        if root in done:
            continue
        on_path = {root}
        stack = [(root, iter(graph.get(root, ())))]
        while stack:
            vertex, successors = stack[-1]
            for nxt in successors:
                if nxt in on_path:
                    return True
                if nxt not in done:
                    on_path.add(nxt)
                    stack.append((nxt, iter(graph.get(nxt, ()))))
                    break
            else:
                stack.pop()
                on_path.discard(vertex)
                done.add(vertex)
    return False


def reachable(graph: Mapping[Hashable, Iterable[Hashable]], start: Hashable) -> set:
    """All vertices reachable from ``start`` by depth-first search, ``start`` included."""
    visited = {start}
    stack = [start]
    while stack:
        vertex = stack.pop()
        for nxt in graph.get(vertex, ()):
            if nxt not in visited:
                visited.add(nxt)
                stack.append(nxt)
    return visited


def is_reachable(
    graph: Mapping[Hashable, Iterable[Hashable]], start: Hashable, target: Hashable
) -> bool:
    """Tell whether ``target`` can be reached from ``start``."""
    return target in reachable(graph, start)