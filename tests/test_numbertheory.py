import math

import pytest

from algokit.numbertheory import (
    diophantine,
    divisors,
    extgcd,
    gcd,
    is_prime,
    lcm,
    phi,
    prime_factors,
    quotient_blocks,
    sieve,
)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (0, 5), (5, 0), (100, 75)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_lcm():
    assert lcm(4, 6) == 12
    assert lcm(7, 3) == 21


def test_lcm_of_zeros_raises():
    with pytest.raises(ValueError):
        lcm(0, 0)


@pytest.mark.parametrize("a,b", [(30, 12), (17, 5), (0, 9), (240, 46), (1, 1)])
def test_extgcd_identity(a, b):
    g, x, y = extgcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_diophantine_solution():
    x, y, g = diophantine(6, 15, 21)
    assert g == 3
    assert 6 * x + 15 * y == 21


def test_diophantine_no_solution():
    assert diophantine(6, 15, 7) is None


def test_diophantine_zero_coefficients():
    assert diophantine(0, 0, 0) == (0, 0, 0)
    assert diophantine(0, 0, 4) is None


def test_divisors_order():
    assert divisors(12) == [1, 12, 2, 6, 3, 4]


def test_divisors_square_counted_once():
    result = divisors(36)
    assert sorted(result) == [d for d in range(1, 37) if 36 % d == 0]
    assert result.count(6) == 1


@pytest.mark.parametrize("n", [1, 2, 9, 10, 36, 97, 100])
def test_phi_counts_coprimes(n):
    assert phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_is_prime_small_values():
    assert not is_prime(0)
    assert not is_prime(1)
    assert is_prime(2)
    assert is_prime(3)
    assert not is_prime(4)
    assert not is_prime(25)
    assert is_prime(29)
    assert not is_prime(49)


def test_is_prime_agrees_with_sieve():
    primes = set(sieve(3000))
    assert all(is_prime(n) == (n in primes) for n in range(3001))


def test_is_prime_large():
    assert is_prime(10**9 + 7)
    assert is_prime(10**9 + 9)
    assert is_prime(2**61 - 1)
    assert not is_prime(561)
    assert not is_prime((10**9 + 7) * (10**9 + 9))


def test_prime_factors_of_100():
    assert prime_factors(100) == {2: 2, 5: 2}


def test_prime_factors_product():
    n = 2 * 2 * 3 * 7 * 7 * 101
    factors = prime_factors(n)
    assert math.prod(p**e for p, e in factors.items()) == n
    assert all(is_prime(p) for p in factors)


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == {}


def test_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        prime_factors(0)


def test_sieve_small():
    assert sieve(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert sieve(1) == []


def test_quotient_blocks_of_100():
    blocks = list(quotient_blocks(100))
    assert len(blocks) == 19
    assert blocks[0] == (1, 1, 100)
    assert (13, 14, 7) in blocks
    assert (17, 20, 5) in blocks
    assert blocks[-1] == (51, 100, 1)


def test_quotient_blocks_cover_range():
    n = 1000
    covered = []
    for left, right, q in quotient_blocks(n):
        assert all(n // d == q for d in range(left, right + 1))
        covered.extend(range(left, right + 1))
    assert covered == list(range(1, n + 1))