"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Hashable, Iterable, Mapping, Optional, Sequence

NEGATIVE_CYCLE_INF = 0x3F3F3F3F
"""Starting distance of every vertex but the source in the negative-cycle check."""

INF = 99999
"""Conventional "no edge" weight in distance matrices."""

_HEADER = (
    "The following matrix shows the shortest distances"
    " between every pair of vertices \n"
)


def has_negative_cycle(n: int, edges: Iterable[tuple[int, int, int]]) -> bool:
    """Tell whether a directed graph on vertices 0..n-1 holds a negative cycle.

    Distances start at vertex 0; ``edges`` are ``(a, b, weight)`` triples.
    The check reports a cycle when a relaxation still happens in round ``n``.
    """
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    edge_list = list(edges)
    for a, b, _ in edge_list:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) outside vertices 0..{n - 1}")
    best = [NEGATIVE_CYCLE_INF] * n
    best[0] = 0
    for round_ in range(n):
        for a, b, d in edge_list:
            if best[b] > best[a] + d:
                best[b] = best[a] + d
                if round_ == n - 1:
                    return True
    return False


def dijkstra_dense(
    n: int,
    weights: Mapping[tuple[int, int], int],
    start: int,
    end: int,
) -> Optional[int]:
    """Shortest distance from ``start`` to ``end`` on vertices 1..n.

    ``weights`` maps directed edges ``(u, v)`` to their weight. The next
    vertex is chosen by a linear scan, so this runs in O(n^2). Returns None
    when ``end`` cannot be reached.
    """
    for vertex in (start, end):
        if not 1 <= vertex <= n:
            raise ValueError(f"vertex {vertex} outside 1..{n}")
    outgoing: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for (u, v), w in weights.items():
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) outside vertices 1..{n}")
        outgoing[u].append((v, w))

    dist = [math.inf] * (n + 1)
    visited = [False] * (n + 1)
    dist[start] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(1, n + 1) if not visited[v] and dist[v] < math.inf]
        if not candidates:
            break
        nearest = min(candidates, key=dist.__getitem__)
        visited[nearest] = True
        if visited[end]:
            break
        for v, w in outgoing[nearest]:
            path = dist[nearest] + w
            if path < dist[v]:
                dist[v] = path
    return None if dist[end] == math.inf else dist[end]


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, int]]],
    start: Hashable,
    end: Hashable,
) -> Optional[int]:
    """Shortest distance from ``start`` to ``end`` using a binary heap.

    ``adjacency`` maps each vertex to ``(neighbour, weight)`` pairs. Returns
    None when ``end`` cannot be reached.
    """
    dist: dict = {start: 0}
    visited: set = set()
    order = itertools.count()
    heap = [(0, next(order), start)]
    while heap:
        if end in visited:
            break
        distance, _, vertex = heapq.heappop(heap)
        if vertex in visited:
            continue
        visited.add(vertex)
        for neighbour, weight in adjacency.get(vertex, ()):
            path = distance + weight
            if neighbour not in visited and path < dist.get(neighbour, math.inf):
                dist[neighbour] = path
                heapq.heappush(heap, (path, next(order), neighbour))
    return dist.get(end)


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances of a square weight matrix."""
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("the matrix must be square")
    for k in range(size):
        via = dist[k]
        for row in dist:
            through = row[k]
            for j, cost in enumerate(via):
                if through + cost < row[j]:
                    row[j] = through + cost
    return dist


def format_distance_matrix(dist: Sequence[Sequence[float]], inf: float = INF) -> str:
    """Render a distance matrix as text, seven columns per entry, "INF" for ``inf``."""
    lines = [_HEADER]
    for row in dist:
        cells = (
            f"{'INF':>7}" if cell == inf or cell == math.inf else f"{int(cell):7d}"
            for cell in row
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)