"""Number theory: unit fractions, T-primes and central binomial coefficients."""

from __future__ import annotations

import math
from functools import lru_cache

MOD = 955049953

_SIEVE_LIMIT = 10**6 + 10
_MAX_GRID = 100001


@lru_cache(maxsize=None)
def _prime_flags(limit: int) -> bytes:
    flags = bytearray([1]) * (limit + 1)
    flags[0] = 0
    if limit >= 1:
        flags[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return bytes(flags)


def count_unit_fraction_solutions(n: int) -> int:
    """Count pairs x <= y of positive integers with 1/x + 1/y = 1/n."""
    if n < 1:
        raise ValueError("n must be positive")
    return sum(1 for x in range(n + 1, 2 * n + 1) if (x * n) % (x - n) == 0)


def t_prime_set(limit: int) -> frozenset[int]:
    """Squares of all primes not greater than limit."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    flags = _prime_flags(limit)
    return frozenset(p * p for p, is_prime in enumerate(flags) if is_prime)


def is_t_prime(x: int) -> bool:
    """Whether x has exactly three divisors, i.e. is the square of a prime."""
    if x < 1:
        return False
    root = math.isqrt(x)
    if root * root != x or root > _SIEVE_LIMIT:
        return False
    return bool(_prime_flags(_SIEVE_LIMIT)[root])


def central_binomial_mod(n: int) -> int:
    """Monotone lattice paths across an n x n grid of cells, modulo MOD.

    This is C(2(n-1), n-1) reduced modulo 955049953.
    """
    if not 1 <= n <= _MAX_GRID:
        raise ValueError(f"n must be between 1 and {_MAX_GRID}")
    half = n - 1
    return math.comb(2 * half, half) % MOD