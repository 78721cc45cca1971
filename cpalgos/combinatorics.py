"""Bit-set helpers and small counting problems."""

from __future__ import annotations


def is_set(mask: int, i: int) -> bool:
    """Tell whether bit ``i`` of ``mask`` is set."""
    return (mask >> i) & 1 != 0


def union_bits(a: int, b: int) -> int:
    """Union of two bit sets."""
    return a | b


def intersect_bits(a: int, b: int) -> int:
    """Intersection of two bit sets."""
    return a & b


def complement(mask: int) -> int:
    """Bitwise complement of a bit set, in two's complement."""
    return ~mask


def catalan(n: int) -> int:
    """Term ``n`` (from 1) of the sequence 1, 2, 2, 3, ... where each later
    term is the sum of the terms two and three places before it."""
    if n < 1:
        raise ValueError("n must be at least 1")
    terms = [0, 1, 2, 2, 3]
    while len(terms) <= n:
        terms.append(terms[-2] + terms[-3])
    return terms[n]


def divisibility(number: str) -> tuple[bool, bool, bool]:
    """Divisibility of a decimal numeral by 2, 3 and 5, from its digits."""
    if not number or not number.isdigit() or not number.isascii():
        raise ValueError(f"not a decimal numeral: {number!r}")
    last = int(number[-1])
    digit_sum = sum(int(d) for d in number)
    return last % 2 == 0, digit_sum % 3 == 0, last % 5 == 0


def hanoi_moves(disks: int) -> int:
    """Number of moves needed to solve the Tower of Hanoi with ``disks`` disks."""
    if disks < 1:
        raise ValueError("at least one disk is needed")
    moves = 1
    for _ in range(disks - 1):
        moves = 1 + 2 * moves
    return moves


def josephus(n: int, k: int) -> int:
    """Position (from 1) of the survivor when every ``k``-th of ``n`` people is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor