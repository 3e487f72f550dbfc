import math

import pytest

from cpmath.euclid import (
    NoSolutionError,
    extended_gcd,
    gcd,
    inverse_mod,
    shift_solution,
    solve_congruence,
    solve_diophantine,
)

PAIRS = [(0, 0), (0, 7), (7, 0), (12, 18), (35, 64), (240, 46), (1, 1), (99991, 17), (-12, 18), (12, -18)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [p for p in PAIRS if p[0] >= 0 and p[1] >= 0])
def test_extended_gcd_identity(a, b):
    d, x, y = extended_gcd(a, b)
    assert d == math.gcd(a, b)
    assert a * x + b * y == d


@pytest.mark.parametrize(
    "a,b,c",
    [(3, 5, 7), (6, 9, 15), (-4, 6, 10), (4, -6, 10), (-7, -11, 3), (12, 18, 0), (0, 5, 10)],
)
def test_diophantine_solution_satisfies_equation(a, b, c):
    x, y = solve_diophantine(a, b, c)
    assert a * x + b * y == c


@pytest.mark.parametrize("a,b,c", [(6, 9, 7), (4, 10, 3), (0, 0, 1)])
def test_diophantine_without_solution(a, b, c):
    with pytest.raises(NoSolutionError):
        solve_diophantine(a, b, c)


def test_diophantine_trivial_zero_equation():
    assert solve_diophantine(0, 0, 0) == (0, 0)


def test_no_solution_error_is_value_error():
    with pytest.raises(ValueError):
        solve_diophantine(2, 4, 5)


@pytest.mark.parametrize("count", [-3, 0, 1, 5])
def test_shift_keeps_solution(count):
    a, b, c = 6, 9, 15
    x, y = solve_diophantine(a, b, c)
    nx, ny = shift_solution(a, b, x, y, count)
    assert a * nx + b * ny == c
    assert nx - x == count * b


@pytest.mark.parametrize("a,m", [(3, 7), (10, 17), (123, 1000000007), (-3, 7), (5, 1)])
def test_inverse_mod(a, m):
    inv = inverse_mod(a, m)
    assert 0 <= inv < m
    assert (a * inv) % m == 1 % m


def test_inverse_mod_not_coprime():
    with pytest.raises(ValueError):
        inverse_mod(4, 8)


def test_inverse_mod_bad_modulus():
    with pytest.raises(ValueError):
        inverse_mod(3, 0)


@pytest.mark.parametrize("a,b,m", [(3, 4, 7), (6, 4, 10), (14, 30, 100), (5, 0, 9), (8, 12, 20)])
def test_congruence_solution(a, b, m):
    x = solve_congruence(a, b, m)
    assert (a * x - b) % m == 0
    assert 0 <= x < m // math.gcd(a, m)


def test_congruence_without_solution():
    with pytest.raises(NoSolutionError):
        solve_congruence(6, 5, 10)