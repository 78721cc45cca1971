"""Maximum subarray sum, binary search and inversion counting."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run of ``values``; the empty run counts as 0."""
    best = running = 0
    for x in values:
        running = max(0, running + x)
        best = max(best, running)
    return best


def binary_search(sequence: Sequence, target) -> Optional[int]:
    """Index of ``target`` in the sorted ``sequence``, or None when absent."""
    low, high = 0, len(sequence) - 1
    while low <= high:
        middle = (low + high) // 2
        item = sequence[middle]
        if item == target:
            return middle
        if item > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def merge_sort_inversions(values: Iterable) -> tuple[list, int]:
    """Sort ``values`` by merge sort and count the pairs that were out of order.

    Returns the sorted list and the number of pairs i < j with
    values[i] > values[j].
    """
    items = list(values)
    if len(items) <= 1:
        return items, 0
    middle = len(items) // 2
    left, left_inv = merge_sort_inversions(items[:middle])
    right, right_inv = merge_sort_inversions(items[middle:])
    inversions = left_inv + right_inv
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions