"""Euler's totient function and the gcd-sum built on it."""

from collections.abc import Iterator
from math import isqrt


def phi(n: int) -> int:
    """Return Euler's totient of ``n``: how many of 1..n are coprime to n."""
    if n < 1:
        raise ValueError("phi is defined for positive integers only")
    result = n
    remaining = n
    i = 2
    while i * i <= remaining:
        if remaining % i == 0:
            result = result // i * (i - 1)
            while remaining % i == 0:
                remaining //= i
        i += 1
    if remaining > 1:
        result = result // remaining * (remaining - 1)
    return result


def _divisors(n: int) -> Iterator[int]:
    for i in range(1, isqrt(n) + 1):
        if n % i == 0:
            yield i
            if i != n // i:
                yield n // i


def gcd_sum(n: int) -> int:
    """Return the sum of gcd(i, n) for i in 1..n."""
    if n < 1:
        raise ValueError("gcd_sum is defined for positive integers only")
    return sum(d * phi(n // d) for d in _divisors(n))