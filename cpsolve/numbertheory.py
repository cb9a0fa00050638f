"""Divisor counting, divisor sums, primality and inclusion-exclusion counts."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt
from typing import Iterable, Sequence

from .modmath import MOD, mod_inverse, mod_pow


def _divisors(x: int) -> set[int]:
    """Every divisor of ``x`` that is at least two, plus ``x`` itself."""
    small = [j for j in range(2, isqrt(x) + 1) if x % j == 0]
    return {x, *small, *(x // j for j in small)}


def max_common_divisor(values: Iterable[int]) -> int:
    """Largest divisor shared by two of the values, or 1 if none exceeds 1."""
    seen: set[int] = set()
    best = 1
    for x in values:
        if x < 1:
            raise ValueError(f"values must be positive, got {x}")
        divisors = _divisors(x)
        best = max(best, *(divisors & seen), 1)
        seen |= divisors
    return best


def count_divisors(x: int) -> int:
    """Number of positive divisors of ``x``."""
    if x < 1:
        raise ValueError(f"x must be positive, got {x}")
    root = isqrt(x)
    answer = 2 + 2 * sum(1 for j in range(2, root + 1) if x % j == 0)
    if root * root == x:
        answer -= 1
    return answer


@dataclass(frozen=True)
class DivisorStats:
    """Count, sum and product of the divisors of a number, modulo 10**9+7."""

    count: int
    total: int
    product: int


def _geometric_sum(prime: int, exponent: int) -> int:
    """Return ``1 + p + ... + p**e`` modulo 10**9+7."""
    if prime % MOD == 1:
        return (exponent + 1) % MOD
    numerator = (mod_pow(prime, exponent + 1, MOD) - 1) % MOD
    return numerator * mod_inverse(prime - 1, MOD) % MOD


def divisor_analysis(factors: Iterable[tuple[int, int]]) -> DivisorStats:
    """Analyse the number given as ``(prime, exponent)`` pairs."""
    count = 1
    count_exponent = 1  # number of divisors so far, reduced modulo MOD - 1
    total = 1
    product = 1
    for prime, exponent in factors:
        if prime < 2:
            raise ValueError(f"prime must be at least 2, got {prime}")
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        count = count * (exponent + 1) % MOD
        total = total * _geometric_sum(prime, exponent) % MOD
        power_sum = mod_pow(prime, exponent * (exponent + 1) // 2, MOD)
        product = (
            mod_pow(product, exponent + 1, MOD)
            * mod_pow(power_sum, count_exponent, MOD)
            % MOD
        )
        count_exponent = count_exponent * (exponent + 1) % (MOD - 1)
    return DivisorStats(count=count, total=total, product=product)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than ``n``."""
    if n < 2:
        return 2
    candidate = n + 1 if n % 2 == 0 else n + 2
    while not is_prime(candidate):
        candidate += 2
    return candidate


def prime_multiples(n: int, primes: Sequence[int]) -> int:
    """Count integers in ``1..n`` divisible by at least one of ``primes``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if any(p < 2 for p in primes):
        raise ValueError("primes must all be at least 2")

    def count(start: int, product: int, sign: int) -> int:
        total = 0
        for index, prime in enumerate(primes[start:], start):
            if prime > n // product:
                continue
            combined = product * prime
            total += sign * (n // combined) + count(index + 1, combined, -sign)
        return total

    return count(0, 1, 1)


def sum_of_divisors(n: int) -> int:
    """Return ``sigma(1) + ... + sigma(n)`` modulo 10**9+7."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    total = 0
    i = 1
    while i <= n:
        quotient = n // i
        last = n // quotient
        total += quotient * (last * (last + 1) // 2 - (i - 1) * i // 2)
        i = last + 1
    return total % MOD