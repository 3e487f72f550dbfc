"""Prime factorisation through a smallest-prime-factor sieve."""

from itertools import groupby


def smallest_prime_factors(n: int) -> list[int]:
    """Return a list whose entry i is the smallest prime factor of i (0 for 0 and 1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    spf = [0] * (n + 1)
    spf[2::2] = [2] * len(spf[2::2])
    for i in range(3, n + 1, 2):
        if spf[i] == 0:
            spf[i] = i
            for j in range(i * i, n + 1, 2 * i):
                if spf[j] == 0:
                    spf[j] = i
    return spf


def _factor_stream(n: int, spf: list[int]):
    while n > 1:
        p = spf[n]
        yield p
        n //= p


def prime_factorization(n: int) -> list[tuple[int, int]]:
    """Return the prime factorisation of ``n`` as ascending (prime, exponent) pairs."""
    if n < 1:
        raise ValueError("n must be positive")
    spf = smallest_prime_factors(n)
    return [(p, len(list(group))) for p, group in groupby(_factor_stream(n, spf))]