# cpmath

A small collection of classic algorithms that come up again and again in
competitive programming, written as plain Python functions with no
third-party dependencies.

## What is inside

| Module            | What it gives you                                                        |
|-------------------|--------------------------------------------------------------------------|
| `cpmath.geometry` | `polygon_area(xs, ys)` – area of a simple polygon by the shoelace formula |
| `cpmath.totient`  | `phi(n)` – Euler's totient; `gcd_sum(n)` – sum of `gcd(i, n)` for `i = 1..n` |
| `cpmath.euclid`   | `gcd`, `extended_gcd`, `solve_diophantine`, `shift_solution`, `inverse_mod`, `solve_congruence`, and `NoSolutionError` |
| `cpmath.matrix`   | `sieve`, `mod_add`, `mod_sub`, `mod_mul`, `mat_mul`, `mat_pow`, `kbonacci` |
| `cpmath.primes`   | `smallest_prime_factors`, `prime_factorization`                          |
| `cpmath.binomial` | `power_mod`, `BinomialTable`, `LogFactorialTable`                        |
| `cpmath.cli`      | `main` – the `cpmath` command                                            |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from cpmath.euclid import gcd, extended_gcd, solve_diophantine
from cpmath.totient import phi, gcd_sum
from cpmath.geometry import polygon_area
from cpmath.primes import prime_factorization
from cpmath.binomial import BinomialTable

gcd(12, 18)                 # 6
phi(9)                      # 6
gcd_sum(6)                  # 1 + 2 + 3 + 2 + 1 + 6 = 15
extended_gcd(30, 12)        # (d, x, y) with 30*x + 12*y == d == 6
prime_factorization(360)    # [(2, 3), (3, 2), (5, 1)]

# unit square, vertices given as separate x and y coordinate lists
polygon_area([0, 1, 1, 0], [0, 0, 1, 1])   # 1.0

table = BinomialTable(100)
table.comb(5, 2)            # 10
```

### Equations

`solve_diophantine(a, b, c)` returns one integer pair `(x, y)` with
`a*x + b*y == c`; `shift_solution(a, b, x, y, count)` moves such a pair
`count` steps along the line of all solutions. `solve_congruence(a, b, m)`
solves `a*x ≡ b (mod m)`. When an equation has no solution these raise
`NoSolutionError`, a subclass of `ValueError`, rather than returning a
sentinel value. `inverse_mod(a, m)` returns the inverse in `[0, m)` and
raises `ValueError` when `a` and `m` are not coprime or `m` is not positive.

### Matrices and sequences

`mat_mul` and `mat_pow` work on lists of lists of integers, reducing every
entry modulo `10**9 + 7` unless another modulus is given. `kbonacci(n, k)`
uses them to return the n-th term of the k-step Fibonacci sequence modulo
`10**9 + 7`. `sieve(n)` lists the primes up to and including `n`.

### Binomial coefficients

`BinomialTable(limit, mod=10**9 + 7)` precomputes factorials and inverse
factorials modulo a prime so that each `comb(n, k)` afterwards is constant
time; the modulus must be prime for the inverses to be correct.
`LogFactorialTable(limit)` keeps running sums of logarithms instead and
gives binomial coefficients rounded to the nearest integer, which are
approximate once they outgrow double precision. Both return 0 when `k` is
outside `0..n` and raise `ValueError` when `n` exceeds the table's limit.

## Command line

Installing the package also installs a `cpmath` command. Each subcommand
reads whitespace-separated integers from standard input and writes one
answer per line to standard output:

```
cpmath --help
```

| Subcommand    | Input                                                  | Output                          |
|---------------|--------------------------------------------------------|---------------------------------|
| `area`        | `t`, then per case `n`, `n` x values, `n` y values     | polygon area                    |
| `gcd-sum`     | `t`, then `n` per case                                 | sum of `gcd(i, n)`              |
| `gcd`         | a single pair `a b` (no case count)                    | `gcd(a, b)`                     |
| `egcd`        | `t`, then `a b x y` per case (`x`, `y` are ignored)    | `gcd(a, b)`                     |
| `diophantine` | `t`, then `a b c` per case                             | `x y`, or `NO SOLUTION`         |
| `kbonacci`    | `t`, then `n k` per case                               | n-th k-step Fibonacci term      |
| `factor`      | `t`, then `n` per case                                 | one `prime exponent` line each  |
| `ncr`         | `t`, then `n k` per case                               | `C(n, k)` modulo `10**9 + 7`    |

For example:

```
$ echo "2  6 3  4 2" | cpmath ncr
20
6
```

Malformed or truncated input, or a value outside what a routine accepts,
makes the command print `cpmath: <reason>` to standard error and exit
with status 1.

## What it does not do

The command only reads the fixed input shapes above; it has no interactive
mode and does not take numbers as command-line arguments. Modular
binomials are only available through a precomputed table, so `n` is bounded
by the memory the table needs.