"""Number-theory, combinatorics and geometry routines, with a small command line."""

__version__ = "0.1.0"
__all__ = ["binomial", "cli", "euclid", "geometry", "matrix", "primes", "totient"]