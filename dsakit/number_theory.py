"""Elementary number theory: divisors, primes, powers and counting."""

from __future__ import annotations

from functools import lru_cache
from typing import List


def catalan(n: int) -> int:
    """The ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("catalan needs a non-negative index")
    table = [1, 1]
    for size in range(2, n + 1):
        table.append(sum(table[j] * table[size - j - 1] for j in range(size)))
    return table[n]


def factors(n: int) -> List[int]:
    """Divisors of ``n``, each small divisor followed by its partner."""
    result: List[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            result.append(i)
            if n // i != i:
                result.append(n // i)
        i += 1
    return result


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("power needs a non-negative exponent")
    result = 1
    while exponent:
        if exponent % 2:
            result *= base
        base *= base
        exponent //= 2
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm, on absolute values."""
    a, b = abs(a), abs(b)
    while a:
        a, b = b % a, a
    return b


def is_prime(n: int) -> bool:
    """True if ``n`` is prime, by trial division."""
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


@lru_cache(maxsize=None)
def _choose(n: int, r: int) -> int:
    if r == 0 or r == n:
        return 1
    if r == 1:
        return n
    return _choose(n - 1, r) + _choose(n - 1, r - 1)


def ncr(n: int, r: int) -> int:
    """Binomial coefficient from Pascal's rule, memoised."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("ncr needs 0 <= r <= n")
    return _choose(n, r)


def prime_factors(n: int) -> List[int]:
    """Prime factors of ``n`` in non-decreasing order, with repetition."""
    result: List[int] = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            n //= i
            result.append(i)
        i += 1
    if n > 1:
        result.append(n)
    return result


def primes_up_to(n: int) -> List[int]:
    """All primes not above ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    composite = [False] * (n + 1)
    i = 2
    while i * i <= n:
        if not composite[i]:
            for j in range(i * i, n + 1, i):
                composite[j] = True
        i += 1
    return [i for i in range(2, n + 1) if not composite[i]]