"""Array problems: maximum subarray, chocolate distribution, three-sum and more."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def min_chocolate_difference(packets: Iterable[int], students: int) -> int:
    """Return the smallest max-min spread when giving one packet to each student."""
    ordered = sorted(packets)
    if not 1 <= students <= len(ordered):
        raise ValueError(
            f"students must be between 1 and {len(ordered)}, got {students}"
        )
    return min(
        high - low for low, high in zip(ordered, ordered[students - 1 :])
    )


def three_sum(values: Iterable[int], target: int) -> list[tuple[int, int, int]]:
    """Return the distinct ascending triplets of values that add up to ``target``."""
    nums = sorted(values)
    result: list[tuple[int, int, int]] = []
    for i, first in enumerate(nums[:-2]):
        if i > 0 and first == nums[i - 1]:
            continue
        low, high = i + 1, len(nums) - 1
        wanted = target - first
        while low < high:
            pair = nums[low] + nums[high]
            if pair == wanted:
                result.append((first, nums[low], nums[high]))
                while low < high and nums[low] == nums[low + 1]:
                    low += 1
                while low < high and nums[high] == nums[high - 1]:
                    high -= 1
                low += 1
                high -= 1
            elif pair < wanted:
                low += 1
            else:
                high -= 1
    return result


def next_permutation(values: Iterable[T]) -> list[T]:
    """Return the next lexicographic permutation; the last one wraps to the first."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot = len(items) - 2
    while pivot >= 0 and items[pivot] >= items[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        swap = len(items) - 1
        while items[swap] <= items[pivot]:
            swap -= 1
        items[pivot], items[swap] = items[swap], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return items


def common_elements(
    first: Sequence[int], second: Sequence[int], third: Sequence[int]
) -> list[int]:
    """Return the distinct values present in all three ascending sequences, ascending."""
    result: list[int] = []
    i = j = k = 0
    while i < len(first) and j < len(second) and k < len(third):
        a, b, c = first[i], second[j], third[k]
        if a == b == c:
            if not result or result[-1] != a:
                result.append(a)
            i += 1
            j += 1
            k += 1
            continue
        smallest = min(a, b, c)
        if a == smallest:
            i += 1
        if b == smallest:
            j += 1
        if c == smallest:
            k += 1
    return result


def rotate_left(values: Iterable[T], shift: int) -> list[T]:
    """Return the values rotated ``shift`` places to the left."""
    items = list(values)
    if not items:
        return items
    shift %= len(items)
    return items[shift:] + items[:shift]


def rotate_clockwise(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the matrix turned 90 degrees clockwise; an N x M input gives M x N."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all matrix rows must have the same length")
    return [list(column) for column in zip(*reversed(matrix))]