"""Classic dynamic-programming problems: knapsacks, coin change and LIS."""

from __future__ import annotations

from bisect import bisect_left
from typing import Optional, Sequence


def _check_items(capacity: int, values: Sequence[int], weights: Sequence[int]) -> None:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Best total value of a 0/1 selection of items within ``capacity``."""
    _check_items(capacity, values, weights)
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for cap in range(capacity, weight - 1, -1):
            best[cap] = max(best[cap], best[cap - weight] + value)
    return best[capacity]


def unbounded_knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Best total value within ``capacity`` when each item may be taken repeatedly."""
    _check_items(capacity, values, weights)
    best = [0] * (capacity + 1)
    for cap in range(capacity + 1):
        for value, weight in zip(values, weights):
            if weight <= cap:
                best[cap] = max(best[cap], best[cap - weight] + value)
    return best[capacity]


def min_coins(amount: int, coins: Sequence[int]) -> Optional[int]:
    """Fewest coins summing to ``amount``, or None when it cannot be made."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    fewest: list[Optional[int]] = [0] + [None] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if coin <= total:
                previous = fewest[total - coin]
                if previous is not None and (fewest[total] is None or previous + 1 < fewest[total]):
                    fewest[total] = previous + 1
    return fewest[amount]


def longest_increasing_subsequence(values: Sequence) -> list:
    """Return one longest strictly increasing subsequence of ``values``."""
    tails: list = []
    tail_index: list[int] = []
    parent: list[int] = []
    for i, x in enumerate(values):
        p = bisect_left(tails, x)
        if p == len(tails):
            tails.append(x)
            tail_index.append(i)
        else:
            tails[p] = x
            tail_index[p] = i
        parent.append(tail_index[p - 1] if p else -1)

    if not tails:
        return []
    result = []
    p = tail_index[-1]
    while p >= 0:
        result.append(values[p])
        p = parent[p]
    result.reverse()
    return result