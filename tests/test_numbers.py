import math
from functools import reduce
from operator import xor

import pytest

from algocollection.numbers import (
    count_set_bits,
    digit_sum,
    factorial,
    is_prime,
    primes_up_to,
    reverse_digits,
    xor_subset,
)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_zero_is_one():
    assert factorial(0) == 1


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_is_prime_agrees_with_sieve():
    primes = set(primes_up_to(200))
    for n in range(2, 201):
        assert is_prime(n) == (n in primes)


def test_is_prime_small_edge_cases():
    assert is_prime(1) is True
    assert is_prime(0) is False
    assert is_prime(-7) is False


def test_primes_up_to_thirty():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_primes_up_to_small_bounds():
    assert primes_up_to(1) == []
    assert primes_up_to(2) == [2]


@pytest.mark.parametrize("n", [7, 123, 4567, 98761])
def test_reverse_digits_round_trip(n):
    assert reverse_digits(reverse_digits(n)) == n


@pytest.mark.parametrize("n", [7, 123, 4567, 98761])
def test_digit_sum_invariant_under_reversal(n):
    assert digit_sum(reverse_digits(n)) == digit_sum(n)


@pytest.mark.parametrize("n", [5, 123, 9081])
def test_negative_numbers_keep_sign(n):
    assert digit_sum(-n) == -digit_sum(n)
    assert reverse_digits(-n) == -reverse_digits(n)


def test_digit_sum_of_single_digit():
    assert digit_sum(8) == 8
    assert reverse_digits(0) == 0


@pytest.mark.parametrize("k", range(0, 20))
def test_count_set_bits_powers_of_two(k):
    assert count_set_bits(2**k) == 1
    assert count_set_bits(2**k - 1) == k


def test_count_set_bits_non_positive_is_zero():
    assert count_set_bits(0) == 0
    assert count_set_bits(-5) == 0


@pytest.mark.parametrize("n", range(1, 40))
def test_xor_subset_matches_range_xor(n):
    subset = xor_subset(n)
    assert all(1 <= value <= n for value in subset)
    assert len(set(subset)) == len(subset)
    assert reduce(xor, subset, 0) == reduce(xor, range(1, n + 1), 0)


def test_xor_subset_rejects_non_positive():
    with pytest.raises(ValueError):
        xor_subset(0)