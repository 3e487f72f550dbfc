"""Binomial coefficients from precomputed factorial tables."""

import math

MOD = 1_000_000_007


def power_mod(a: int, b: int, m: int) -> int:
    """Return ``a**b mod m`` by binary exponentiation."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    a %= m
    while b:
        if b & 1:
            result = result * a % m
        a = a * a % m
        b >>= 1
    return result


class BinomialTable:
    """Factorials and inverse factorials modulo a prime, up to ``limit``."""

    def __init__(self, limit: int, mod: int = MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.mod = mod
        fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fact[i] = fact[i - 1] * i % mod
        inv = [1] * (limit + 1)
        inv[limit] = power_mod(fact[limit], mod - 2, mod)
        for i in range(limit - 1, 0, -1):
            inv[i] = inv[i + 1] * (i + 1) % mod
        self.factorials = fact
        self.inverse_factorials = inv

    def comb(self, n: int, k: int) -> int:
        """Return C(n, k) modulo the table's modulus; 0 when k is out of range."""
        if k < 0 or k > n:
            return 0
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the table limit {self.limit}")
        fact, inv = self.factorials, self.inverse_factorials
        return fact[n] * inv[k] % self.mod * inv[n - k] % self.mod


class LogFactorialTable:
    """Natural logarithms of factorials up to ``limit``, for approximate C(n, k)."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        logs = [0.0] * (limit + 1)
        for i in range(1, limit + 1):
            logs[i] = logs[i - 1] + math.log(i)
        self.log_factorials = logs

    def comb(self, n: int, k: int) -> int:
        """Return C(n, k) rounded to the nearest integer; 0 when k is out of range."""
        if k < 0 or k > n:
            return 0
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the table limit {self.limit}")
        logs = self.log_factorials
        return round(math.exp(logs[n] - logs[n - k] - logs[k]))