"""Euclid's algorithm and what it solves: Diophantine and modular equations."""


class NoSolutionError(ValueError):
    """Raised when an equation has no integer solution."""


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (non-negative)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``a*x + b*y == d`` and ``d`` the gcd of a and b."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def solve_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Return one integer solution ``(x, y)`` of ``a*x + b*y == c``.

    Raises NoSolutionError when none exists.
    """
    d, x, y = extended_gcd(abs(a), abs(b))
    if d == 0:
        if c == 0:
            return 0, 0
        raise NoSolutionError(f"0*x + 0*y = {c} has no solution")
    if c % d:
        raise NoSolutionError(f"{a}*x + {b}*y = {c} has no solution")
    factor = c // d
    x *= factor
    y *= factor
    if a < 0:
        x = -x
    if b < 0:
        y = -y
    return x, y


def shift_solution(a: int, b: int, x: int, y: int, count: int) -> tuple[int, int]:
    """Move a solution of ``a*x + b*y == c`` ``count`` steps along the solution line."""
    return x + count * b, y - count * a


def inverse_mod(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m`` in the range [0, m)."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    d, x, _ = extended_gcd(a % m, m)
    if d != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def solve_congruence(a: int, b: int, m: int) -> int:
    """Return a solution ``x`` in [0, m/d) of ``a*x ≡ b (mod m)``, d = gcd(a, m).

    Raises NoSolutionError when the congruence is unsolvable.
    """
    if m <= 0:
        raise ValueError("modulus must be positive")
    d = gcd(a, m)
    if d != 1:
        if b % d:
            raise NoSolutionError(f"{a}*x = {b} (mod {m}) has no solution")
        a //= d
        b //= d
        m //= d
    return b * inverse_mod(a, m) % m