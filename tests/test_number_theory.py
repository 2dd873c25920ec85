import math
from functools import reduce

import pytest

from dsakit.number_theory import (
    catalan,
    factors,
    gcd,
    is_prime,
    ncr,
    power,
    prime_factors,
    primes_up_to,
)


@pytest.mark.parametrize("n", range(0, 20))
def test_catalan_closed_form(n):
    assert catalan(n) == math.comb(2 * n, n) // (n + 1)


def test_catalan_rejects_negative():
    with pytest.raises(ValueError):
        catalan(-1)


@pytest.mark.parametrize("n", [1, 2, 12, 36, 97, 100, 360])
def test_factors_are_all_divisors(n):
    result = factors(n)
    assert len(result) == len(set(result))
    assert sorted(result) == [d for d in range(1, n + 1) if n % d == 0]


def test_factors_pairs_follow_each_other():
    result = factors(36)
    for i in range(0, len(result) - 1, 2):
        assert result[i] * result[i + 1] == 36


@pytest.mark.parametrize("base", [-3, 0, 1, 2, 7])
@pytest.mark.parametrize("exponent", [0, 1, 2, 5, 13])
def test_power_matches_builtin(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize(
    "a, b", [(0, 0), (0, 9), (12, 18), (17, 5), (48, 180), (-12, 18), (1071, 462)]
)
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert gcd(a, b) == gcd(b, a)


def test_is_prime_matches_divisor_count():
    for n in range(-5, 400):
        divisors = [d for d in range(1, n + 1) if n % d == 0] if n > 0 else []
        assert is_prime(n) == (len(divisors) == 2)


@pytest.mark.parametrize("n", range(0, 16))
def test_ncr_matches_math(n):
    for r in range(n + 1):
        assert ncr(n, r) == math.comb(n, r)


@pytest.mark.parametrize("n, r", [(5, 7), (-1, 0), (4, -1)])
def test_ncr_rejects_bad_arguments(n, r):
    with pytest.raises(ValueError):
        ncr(n, r)


@pytest.mark.parametrize("n", [2, 8, 12, 97, 360, 1001, 65536, 999983])
def test_prime_factors_multiply_back(n):
    result = prime_factors(n)
    assert result == sorted(result)
    assert all(is_prime(p) for p in result)
    assert reduce(lambda x, y: x * y, result, 1) == n


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == []


@pytest.mark.parametrize("n", [0, 1, 2, 10, 97, 500])
def test_primes_up_to_matches_is_prime(n):
    assert primes_up_to(n) == [k for k in range(n + 1) if is_prime(k)]