"""Degree-sequence realisability, minimum spanning tree cost and brute-force TSP."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_right
from itertools import accumulate, permutations
from typing import Iterable, Sequence


def is_graphic(degrees: Iterable[int]) -> bool:
    """Tell whether a degree sequence belongs to some simple graph (Erdős–Gallai)."""
    ordered = sorted(degrees, reverse=True)
    if any(d < 0 for d in ordered):
        raise ValueError("degrees must be non-negative")
    totals = [0, *accumulate(ordered)]
    if totals[-1] % 2:
        return False
    negated = [-d for d in ordered]
    n = len(ordered)
    for k in range(1, n + 1):
        # Among the remaining degrees, those above k count as k.
        first_small = bisect_right(negated, -k, lo=k)
        tail = (first_small - k) * k + totals[n] - totals[first_small]
        if totals[k] > k * (k - 1) + tail:
            return False
    return True


def prim_mst_cost(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Cost of a minimum spanning tree of an undirected graph on vertices 1..n.

    ``edges`` are ``(a, b, weight)`` triples. Raises ValueError when the
    graph is not connected.
    """
    if n < 0:
        raise ValueError("vertex count must be non-negative")
    if n == 0:
        return 0
    neighbours: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, weight in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) outside vertices 1..{n}")
        neighbours[a].append((weight, b))
        neighbours[b].append((weight, a))

    best = [math.inf] * (n + 1)
    done = [False] * (n + 1)
    best[1] = 0
    heap = [(0, 1)]
    while heap:
        _, vertex = heapq.heappop(heap)
        if done[vertex]:
            continue
        done[vertex] = True
        for weight, other in neighbours[vertex]:
            if not done[other] and weight < best[other]:
                best[other] = weight
                heapq.heappush(heap, (weight, other))
    if not all(done[1:]):
        raise ValueError("graph is not connected")
    return sum(best[1:])


def _tour_cost(matrix: Sequence[Sequence[int]], start: int, order: Sequence[int]) -> int:
    cost = 0
    here = start
    for vertex in order:
        cost += matrix[here][vertex]
        here = vertex
    return cost + matrix[here][start]


def tsp_min_tour(matrix: Sequence[Sequence[int]], start: int) -> int:
    """Cheapest closed tour from ``start`` through every vertex, by trying all orders."""
    n = len(matrix)
    if n == 0 or any(len(row) != n for row in matrix):
        raise ValueError("the matrix must be square and non-empty")
    if not 0 <= start < n:
        raise ValueError(f"start {start} outside 0..{n - 1}")
    others = [v for v in range(n) if v != start]
    return min(_tour_cost(matrix, start, order) for order in permutations(others))