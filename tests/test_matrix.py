import pytest

from cpmath.matrix import (
    MOD,
    kbonacci,
    mat_mul,
    mat_pow,
    mod_add,
    mod_mul,
    mod_sub,
    sieve,
)


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, int(n**0.5) + 1))


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 100, 541])
def test_sieve_lists_exactly_the_primes(n):
    assert sieve(n) == [p for p in range(n + 1) if _is_prime(p)]


VALUES = [(5, 3, 7), (-5, 3, 7), (10**18, -(10**17), MOD), (0, 0, 13), (-1, -1, 2)]


@pytest.mark.parametrize("a,b,m", VALUES)
def test_mod_operations_are_congruent_and_in_range(a, b, m):
    for result, exact in (
        (mod_add(a, b, m), a + b),
        (mod_sub(a, b, m), a - b),
        (mod_mul(a, b, m), a * b),
    ):
        assert 0 <= result < m
        assert (result - exact) % m == 0


A = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
B = [[2, 0, 1], [1, 3, 5], [4, 4, 0]]
C = [[0, 1, 1], [1, 0, 2], [3, 1, 0]]
I3 = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_identity_is_neutral():
    assert mat_mul(A, I3) == A
    assert mat_mul(I3, A) == A


def test_mat_mul_associative():
    assert mat_mul(mat_mul(A, B), C) == mat_mul(A, mat_mul(B, C))


def test_mat_mul_rectangular_shape():
    product = mat_mul([[1, 2, 3]], [[1], [2], [3]])
    assert len(product) == 1 and len(product[0]) == 1


def test_mat_mul_dimension_mismatch():
    with pytest.raises(ValueError):
        mat_mul([[1, 2]], [[1, 2]])


def test_mat_pow_zero_is_identity():
    assert mat_pow(A, 0) == I3


@pytest.mark.parametrize("p,q", [(1, 1), (2, 3), (5, 8), (17, 30)])
def test_mat_pow_adds_exponents(p, q):
    assert mat_pow(A, p + q) == mat_mul(mat_pow(A, p), mat_pow(A, q))


def test_mat_pow_small_modulus_in_range():
    result = mat_pow(A, 25, 11)
    assert all(0 <= x < 11 for row in result for x in row)
    assert result == mat_mul(mat_pow(A, 12, 11), mat_pow(A, 13, 11), 11)


def test_mat_pow_rejects_non_square():
    with pytest.raises(ValueError):
        mat_pow([[1, 2, 3]], 2)


def test_mat_pow_rejects_negative_power():
    with pytest.raises(ValueError):
        mat_pow(A, -1)


@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_kbonacci_starts_with_one(k):
    assert kbonacci(0, k) == 1


@pytest.mark.parametrize("k", [2, 3, 4, 6])
def test_kbonacci_recurrence(k):
    terms = [kbonacci(n, k) for n in range(40)]
    for n in range(k, 40):
        assert terms[n] == sum(terms[n - k : n]) % MOD


def test_kbonacci_large_n_in_range():
    value = kbonacci(10**12, 3)
    assert 0 <= value < MOD


def test_kbonacci_rejects_bad_k():
    with pytest.raises(ValueError):
        kbonacci(5, 0)