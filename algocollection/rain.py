"""Trapping rain water between bars of given heights."""

from __future__ import annotations

from collections.abc import Sequence


def trapped_water(heights: Sequence[int]) -> int:
    """Return how many units of water the bars hold, using two pointers."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    total = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                total += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                total += right_max - heights[right]
            right -= 1
    return total