"""Modular arithmetic helpers and the counting problems built on them."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from string import ascii_lowercase

MOD = 1_000_000_007

Matrix = list[list[int]]


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by binary exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result % modulus


def mod_inverse(value: int, modulus: int) -> int:
    """Return the inverse of ``value`` modulo the prime ``modulus`` (Fermat)."""
    if value % modulus == 0:
        raise ValueError(f"{value} has no inverse modulo {modulus}")
    return mod_pow(value, modulus - 2, modulus)


class FactorialTable:
    """Factorials modulo a prime, filled lazily up to ``limit`` inclusive."""

    def __init__(self, limit: int, modulus: int) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.modulus = modulus
        self._values = [1 % modulus]

    def factorial(self, n: int) -> int:
        """Return ``n! % modulus``."""
        if n < 0 or n > self.limit:
            raise ValueError(f"n must lie in [0, {self.limit}], got {n}")
        values = self._values
        for i in range(len(values), n + 1):
            values.append(values[-1] * i % self.modulus)
        return values[n]

    def binomial(self, n: int, r: int) -> int:
        """Return ``C(n, r) % modulus``; zero when ``r`` is outside ``[0, n]``."""
        if n < 0:
            raise ValueError("n must be non-negative")
        if r < 0 or r > n:
            return 0
        top = self.factorial(n)
        return (
            top
            * mod_inverse(self.factorial(r), self.modulus)
            % self.modulus
            * mod_inverse(self.factorial(n - r), self.modulus)
            % self.modulus
        )


@lru_cache(maxsize=None)
def _table(limit: int) -> FactorialTable:
    return FactorialTable(limit, MOD)


def binomial(n: int, r: int) -> int:
    """Binomial coefficient modulo 10**9+7 for ``n`` up to one million."""
    return _table(1_000_000).binomial(n, r)


def exponentiation(a: int, b: int) -> int:
    """Return ``a ** b`` modulo 10**9+7."""
    return mod_pow(a, b, MOD)


def tower_exponentiation(a: int, b: int, c: int) -> int:
    """Return ``a ** (b ** c)`` modulo 10**9+7, reducing the exponent by Fermat."""
    return mod_pow(a, mod_pow(b, c, MOD - 1), MOD)


def distributing_apples(children: int, apples: int) -> int:
    """Ways to share ``apples`` among ``children``, modulo 10**9+7."""
    if children < 1:
        raise ValueError("there must be at least one child")
    if apples < 0:
        raise ValueError("apples must be non-negative")
    return _table(2_000_000).binomial(apples + children - 1, children - 1)


def derangements(n: int) -> int:
    """Number of permutations of ``n`` items with no fixed point, modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return 0
    before, current = 0, 1
    for i in range(3, n + 1):
        before, current = current, (i - 1) * ((current + before) % MOD) % MOD
    return current


def distinct_arrangements(text: str) -> int:
    """Number of distinct strings formed from the lowercase letters of ``text``."""
    stray = set(text) - set(ascii_lowercase)
    if stray:
        raise ValueError(f"only lowercase letters are allowed, got {sorted(stray)}")
    table = FactorialTable(len(text), MOD)
    answer = table.factorial(len(text))
    for count in Counter(text).values():
        answer = answer * mod_inverse(table.factorial(count), MOD) % MOD
    return answer


def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Multiply two matrices, reducing each product modulo 10**9+7."""
    if not a or not b or len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [
        [sum(x * y % MOD for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def matrix_power(matrix: Matrix, exponent: int) -> Matrix:
    """Raise a square matrix to a non-negative power."""
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    while exponent:
        if exponent & 1:
            result = matrix_multiply(result, matrix)
        exponent >>= 1
        matrix = matrix_multiply(matrix, matrix)
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo 10**9+7 (F(0) = 0)."""
    powered = matrix_power([[0, 1], [1, 1]], n)
    return matrix_multiply(powered, [[0], [1]])[0][0]