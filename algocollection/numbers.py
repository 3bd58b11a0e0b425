"""Small number utilities: factorial, primality, digits, bits, sieve and XOR subsets."""

from __future__ import annotations

from functools import reduce
from math import isqrt
from operator import xor


def factorial(n: int) -> int:
    """Return ``n!``; negative arguments raise ValueError."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    return reduce(lambda acc, k: acc * k, range(2, n + 1), 1)


def is_prime(n: int) -> bool:
    """Tell whether ``n`` has no divisor between 2 and itself.

    Numbers below 1 are not prime; 1 is reported as prime.
    """
    if n < 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def _split_sign(n: int) -> tuple[int, int]:
    return (-1 if n < 0 else 1), abs(n)


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, carrying its sign."""
    sign, magnitude = _split_sign(n)
    return sign * sum(int(digit) for digit in str(magnitude))


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping its sign."""
    sign, magnitude = _split_sign(n)
    return sign * int(str(magnitude)[::-1])


def count_set_bits(n: int) -> int:
    """Return the number of 1 bits in ``n``; zero and negatives give 0."""
    return n.bit_count() if n > 0 else 0


def primes_up_to(n: int) -> list[int]:
    """Return every prime not above ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return [value for value, flag in enumerate(sieve) if flag]


def xor_subset(n: int) -> list[int]:
    """Return a subset of ``1..n`` whose removal leaves the rest XOR-ing to zero.

    The subset's XOR equals the XOR of all of ``1..n``.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return [1]
    return {0: [n], 1: [1], 2: [n, 1], 3: []}[n % 4]


def xor_of_range(n: int) -> int:
    """Return the XOR of all integers from 1 to ``n``."""
    return reduce(xor, range(1, n + 1), 0)