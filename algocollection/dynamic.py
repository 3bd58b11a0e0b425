"""Dynamic programming: 0/1 knapsack and matrix chain multiplication."""

from __future__ import annotations

from collections.abc import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (each used once)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        if weight < 0:
            raise ValueError("weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dimensions[i-1] x dimensions[i]``.
    """
    n = len(dimensions)
    if n < 2:
        raise ValueError("at least two dimensions are needed to describe a matrix")
    cost = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dimensions[i - 1] * dimensions[k] * dimensions[j]
                for k in range(i, j)
            )
    return cost[1][n - 1]