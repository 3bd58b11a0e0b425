"""Sum of sliding-window maxima and a primality check on that sum."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from math import isqrt


def window_max_sum(scores: Iterable[int], k: int) -> int:
    """Return the sum of the maxima of every window of ``k`` consecutive scores.

    If there are fewer than ``k`` scores the sum is 0.
    """
    if k < 1:
        raise ValueError(f"window size must be at least 1, got {k}")
    values = list(scores)
    window: deque[int] = deque()
    total = 0
    for index, score in enumerate(values):
        while window and values[window[-1]] <= score:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            total += values[window[0]]
    return total


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def will_cheer(scores: Iterable[int], k: int) -> bool:
    """Tell whether the sum of the window maxima is a prime number."""
    return _is_prime(window_max_sum(scores, k))