"""Command-line front end: each subcommand reads test cases from stdin."""

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from cpmath.binomial import BinomialTable
from cpmath.euclid import NoSolutionError, extended_gcd, gcd, solve_diophantine
from cpmath.geometry import polygon_area
from cpmath.matrix import kbonacci
from cpmath.primes import prime_factorization
from cpmath.totient import gcd_sum


class InputError(ValueError):
    """Raised when the input does not have the expected shape."""


class _Reader:
    """Whitespace-separated integer tokens taken one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        value = self.int()
        if value < 0:
            raise InputError(f"count must be non-negative, got {value}")
        return value


def _area(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        n = reader.count()
        xs = [reader.int() for _ in range(n)]
        ys = [reader.int() for _ in range(n)]
        yield f"{polygon_area(xs, ys):g}"


def _gcd_sum(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        yield str(gcd_sum(reader.int()))


def _gcd(reader: _Reader) -> Iterator[str]:
    a, b = reader.int(), reader.int()
    yield str(gcd(a, b))


def _egcd(reader: _Reader) -> Iterator[str]:
    # Each case carries a, b and two placeholder coefficients that are ignored.
    for _ in range(reader.count()):
        a, b = reader.int(), reader.int()
        reader.int()
        reader.int()
        d, _, _ = extended_gcd(a, b)
        yield str(d)


def _diophantine(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        a, b, c = reader.int(), reader.int(), reader.int()
        try:
            x, y = solve_diophantine(a, b, c)
        except NoSolutionError:
            yield "NO SOLUTION"
        else:
            yield f"{x} {y}"


def _kbonacci(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        n, k = reader.int(), reader.int()
        yield str(kbonacci(n, k))


def _factor(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.count()):
        for prime, exponent in prime_factorization(reader.int()):
            yield f"{prime} {exponent}"


def _ncr(reader: _Reader) -> Iterator[str]:
    queries = [(reader.int(), reader.int()) for _ in range(reader.count())]
    limit = max((n for n, _ in queries), default=0)
    table = BinomialTable(max(limit, 0))
    for n, k in queries:
        yield str(table.comb(n, k))


_COMMANDS: dict[str, tuple[Callable[[_Reader], Iterable[str]], str]] = {
    "area": (_area, "area of polygons: t, then n, n x values, n y values per case"),
    "gcd-sum": (_gcd_sum, "sum of gcd(i, n) for i in 1..n: t, then n per case"),
    "gcd": (_gcd, "greatest common divisor of a single pair a b"),
    "egcd": (_egcd, "gcd via the extended algorithm: t, then a b x y per case"),
    "diophantine": (_diophantine, "one solution of a*x + b*y = c: t, then a b c"),
    "kbonacci": (_kbonacci, "n-th k-step Fibonacci term mod 1e9+7: t, then n k"),
    "factor": (_factor, "prime factorisation: t, then n per case"),
    "ncr": (_ncr, "binomial coefficient mod 1e9+7: t, then n k per case"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpmath", description="Number theory and geometry routines on stdin."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a subcommand on standard input and write its answers to standard output."""
    args = _parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    reader = _Reader(sys.stdin.read())
    try:
        for line in handler(reader):
            sys.stdout.write(line + "\n")
    except ValueError as error:
        sys.stderr.write(f"cpmath: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())