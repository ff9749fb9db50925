"""Modular arithmetic helpers: fast exponentiation, Fibonacci, sieve, binomials."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "MOD",
    "ALT_MOD",
    "power_mod",
    "matrix_multiply",
    "fibonacci",
    "prime_sieve",
    "BinomialTable",
]

MOD = 1_000_000_007
ALT_MOD = 998_244_353


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Return base ** exponent modulo modulus by square-and-multiply."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def matrix_multiply(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], modulus: int = MOD
) -> list[list[int]]:
    """Multiply two integer matrices, reducing every entry modulo modulus."""
    if not a or not b or len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) % modulus for column in columns]
        for row in a
    ]


def _matrix_power(matrix: list[list[int]], exponent: int, modulus: int) -> list[list[int]]:
    size = len(matrix)
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    while exponent:
        if exponent & 1:
            result = matrix_multiply(result, matrix, modulus)
        matrix = matrix_multiply(matrix, matrix, modulus)
        exponent >>= 1
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number (F0 = 0, F1 = 1) modulo MOD."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    step = [[1, 1], [1, 0]]
    return _matrix_power(step, n - 1, MOD)[0][0] % MOD


def prime_sieve(limit: int) -> list[bool]:
    """Return flags for 0..limit where flags[i] tells whether i is prime."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    flags = [True] * (limit + 1)
    flags[0] = False
    if limit >= 1:
        flags[1] = False
    i = 2
    while i * i <= limit:
        if flags[i]:
            flags[i * i:: i] = [False] * len(range(i * i, limit + 1, i))
        i += 1
    return flags


class BinomialTable:
    """Factorials and inverse factorials modulo a prime, for n up to limit."""

    def __init__(self, limit: int, modulus: int = MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if modulus < 2:
            raise ValueError("modulus must be at least 2")
        self.limit = limit
        self.modulus = modulus
        fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fact[i] = fact[i - 1] * i % modulus
        inv = [1] * (limit + 1)
        inv[limit] = pow(fact[limit], modulus - 2, modulus)
        for i in range(limit, 0, -1):
            inv[i - 1] = inv[i] * i % modulus
        self._fact = fact
        self._inv_fact = inv

    def _check(self, n: int) -> None:
        if n > self.limit:
            raise ValueError(f"n={n} exceeds table limit {self.limit}")

    def ncr(self, n: int, r: int) -> int:
        """Return C(n, r) mod modulus, or 0 when r is outside [0, n]."""
        if n < 0 or r < 0 or n < r:
            return 0
        self._check(n)
        m = self.modulus
        return self._fact[n] * self._inv_fact[n - r] % m * self._inv_fact[r] % m

    def choose(self, n: int, r: int) -> int:
        """Return C(n, r) mod modulus using a Fermat inverse of the denominator."""
        if not 0 <= r <= n:
            raise ValueError("r must satisfy 0 <= r <= n")
        self._check(n)
        m = self.modulus
        denominator = self._fact[n - r] * self._fact[r] % m
        return self._fact[n] * pow(denominator, m - 2, m) % m