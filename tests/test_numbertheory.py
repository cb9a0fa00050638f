from itertools import combinations
from math import gcd, prod

import pytest

from cpsolve.modmath import MOD
from cpsolve.numbertheory import (
    DivisorStats,
    count_divisors,
    divisor_analysis,
    is_prime,
    max_common_divisor,
    next_prime,
    prime_multiples,
    sum_of_divisors,
)


def _all_divisors(n):
    return [d for d in range(1, n + 1) if n % d == 0]


@pytest.mark.parametrize(
    "values",
    [
        [2, 3, 5, 7],
        [12, 18, 30],
        [100, 75, 40, 9],
        [16, 16],
        [97, 194],
        [6, 10, 15, 35, 49],
    ],
)
def test_max_common_divisor_matches_best_pair(values):
    expected = max(gcd(a, b) for a, b in combinations(values, 2))
    assert max_common_divisor(values) == expected


def test_max_common_divisor_single_value():
    assert max_common_divisor([7]) == 1


def test_max_common_divisor_rejects_non_positive():
    with pytest.raises(ValueError):
        max_common_divisor([4, 0])


def test_count_divisors_matches_enumeration():
    for x in range(1, 300):
        assert count_divisors(x) == len(_all_divisors(x))


def test_count_divisors_rejects_zero():
    with pytest.raises(ValueError):
        count_divisors(0)


@pytest.mark.parametrize(
    "factors",
    [
        [],
        [(2, 2), (3, 1)],
        [(2, 3)],
        [(3, 2), (5, 2)],
        [(2, 1), (3, 1), (5, 1), (7, 1)],
        [(11, 4)],
    ],
)
def test_divisor_analysis_matches_enumeration(factors):
    n = prod(p**e for p, e in factors)
    divisors = _all_divisors(n)
    stats = divisor_analysis(factors)
    assert stats == DivisorStats(
        count=len(divisors) % MOD,
        total=sum(divisors) % MOD,
        product=prod(divisors) % MOD,
    )


def test_divisor_analysis_rejects_bad_prime():
    with pytest.raises(ValueError):
        divisor_analysis([(1, 3)])


def test_is_prime_agrees_with_divisor_count():
    for n in range(2, 500):
        assert is_prime(n) == (len(_all_divisors(n)) == 2)


def test_is_prime_on_modulus():
    assert is_prime(MOD)
    assert not is_prime(MOD - 1)


def test_next_prime_is_the_following_prime():
    for n in range(1, 300):
        p = next_prime(n)
        assert p > n
        assert is_prime(p)
        assert not any(is_prime(k) for k in range(n + 1, p))


def test_next_prime_reaches_modulus():
    assert next_prime(MOD - 1) == MOD


@pytest.mark.parametrize(
    "n, primes",
    [(20, [2, 5]), (100, [2, 3, 5, 7]), (50, [3, 7, 11]), (0, [2]), (10, [13])],
)
def test_prime_multiples_matches_brute_force(n, primes):
    expected = sum(1 for k in range(1, n + 1) if any(k % p == 0 for p in primes))
    assert prime_multiples(n, primes) == expected


def test_prime_multiples_single_large_prime():
    n = 10**18
    assert prime_multiples(n, [MOD]) == n // MOD


def test_prime_multiples_rejects_non_prime_one():
    with pytest.raises(ValueError):
        prime_multiples(10, [1])


def test_sum_of_divisors_matches_sigma_sums():
    running = 0
    for n in range(0, 200):
        if n:
            running += sum(_all_divisors(n))
        assert sum_of_divisors(n) == running % MOD


def test_sum_of_divisors_large_step_is_sigma():
    n = 10**12
    sigma = divisor_analysis([(2, 12), (5, 12)]).total
    step = (sum_of_divisors(n) - sum_of_divisors(n - 1)) % MOD
    assert step == sigma


def test_sum_of_divisors_rejects_negative():
    with pytest.raises(ValueError):
        sum_of_divisors(-1)