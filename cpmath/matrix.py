"""Modular arithmetic, a prime sieve and matrix exponentiation."""

MOD = 1_000_000_007

Matrix = list[list[int]]


def sieve(n: int) -> list[int]:
    """Return all primes up to and including ``n``."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            composite[2 * i :: i] = bytes(len(range(2 * i, n + 1, i)))
            for j in range(2 * i, n + 1, i):
                composite[j] = 1
    return primes


def mod_add(a: int, b: int, m: int) -> int:
    """Return ``(a + b) mod m`` in [0, m)."""
    return (a % m + b % m) % m


def mod_sub(a: int, b: int, m: int) -> int:
    """Return ``(a - b) mod m`` in [0, m)."""
    return (a % m - b % m) % m


def mod_mul(a: int, b: int, m: int) -> int:
    """Return ``(a * b) mod m`` in [0, m)."""
    return (a % m) * (b % m) % m


def mat_mul(a: Matrix, b: Matrix, mod: int = MOD) -> Matrix:
    """Return the product ``a × b`` with entries reduced modulo ``mod``."""
    if not b or any(len(row) != len(b) for row in a):
        raise ValueError("matrix dimensions do not match")
    width = len(b[0])
    if any(len(row) != width for row in b):
        raise ValueError("matrix rows have different lengths")
    columns = list(zip(*b))
    return [
        [sum(x * y % mod for x, y in zip(row, col)) % mod for col in columns]
        for row in a
    ]


def _identity(size: int) -> Matrix:
    return [[int(i == j) for j in range(size)] for i in range(size)]


def mat_pow(matrix: Matrix, power: int, mod: int = MOD) -> Matrix:
    """Return ``matrix`` raised to ``power`` modulo ``mod`` by repeated squaring."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    if power < 0:
        raise ValueError("power must be non-negative")
    result = _identity(size)
    base = [list(row) for row in matrix]
    while power > 0:
        if power & 1:
            result = mat_mul(result, base, mod)
        power >>= 1
        base = mat_mul(base, base, mod)
    return result


def kbonacci(n: int, k: int) -> int:
    """Return the n-th term of the k-step Fibonacci sequence modulo 1e9+7.

    The sequence starts with 1 and each later term is the sum of the
    previous ``k`` terms; for k = 2 it is 1, 1, 2, 3, 5, ...
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if n < 0:
        raise ValueError("n must be non-negative")
    step = [[0] * k for _ in range(k)]
    for i in range(k - 1):
        step[i][i + 1] = 1
        step[k - 1][i] = 1
    step[k - 1][k - 1] = 1
    return mat_pow(step, n)[k - 1][k - 1]