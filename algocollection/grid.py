"""Grid walking distance around a single blocked cell."""

from __future__ import annotations


def _strictly_between(value: int, low_end: int, high_end: int) -> bool:
    return low_end < value < high_end or high_end < value < low_end


def detour_distance(
    start: tuple[int, int], end: tuple[int, int], obstacle: tuple[int, int]
) -> int:
    """Return the steps from ``start`` to ``end`` on a grid with one blocked cell.

    The distance is the Manhattan distance, plus two when the obstacle sits
    strictly between both points on a shared row or column. If the start
    coincides with the obstacle the result is 0.
    """
    (xa, ya), (xb, yb), (xf, yf) = start, end, obstacle
    distance = abs(xa - xb) + abs(ya - yb)
    if (xa, ya) == (xf, yf):
        return 0
    if xa == xf == xb and _strictly_between(yf, ya, yb):
        return distance + 2
    if ya == yf == yb and _strictly_between(xf, xa, xb):
        return distance + 2
    return distance