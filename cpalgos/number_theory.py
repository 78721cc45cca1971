"""Greatest common divisor, primality tests and a prime sieve."""

from __future__ import annotations

import random
from math import isqrt
from typing import Optional, Protocol


class _RandRange(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(0, 0) is 0."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 when either argument is 0."""
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return abs(a * b) // divisor


def is_prime(n: int) -> bool:
    """Primality by trial division up to the square root."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def primes_up_to(n: int) -> list[int]:
    """All primes p with 2 <= p <= n, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i, flag in enumerate(sieve) if flag]


def mulmod(a: int, b: int, c: int) -> int:
    """Return a * b reduced modulo ``c``."""
    if c <= 0:
        raise ValueError("modulus must be positive")
    return (a % c) * (b % c) % c


def powmod(a: int, b: int, c: int) -> int:
    """Return a ** b modulo ``c`` by square and multiply; a ** 0 is 1."""
    if c <= 0:
        raise ValueError("modulus must be positive")
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base = a % c
    while b:
        if b & 1:
            result = mulmod(result, base, c)
        base = mulmod(base, base, c)
        b >>= 1
    return result


def miller_rabin(p: int, rng: Optional[_RandRange] = None) -> bool:
    """One round of the Miller-Rabin test with a random base.

    Primes always pass; a composite passes only when the chosen base is a
    strong liar. ``rng`` supplies ``randrange``; the ``random`` module is
    used when it is omitted.
    """
    if p < 2:
        return False
    if p == 2:
        return True
    if p % 2 == 0:
        return False
    if rng is None:
        rng = random
    s = p - 1
    while s % 2 == 0:
        s //= 2
    base = rng.randrange(1, p)
    exponent = s
    mod = powmod(base, exponent, p)
    while exponent != p - 1 and mod != 1 and mod != p - 1:
        mod = mulmod(mod, mod, p)
        exponent <<= 1
    return mod == p - 1 or exponent % 2 == 1