"""Tower of Hanoi solutions, recursive and iterative."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple


class Move(NamedTuple):
    """Moving one disk from one pole to another."""

    disk: int
    source: str
    target: str


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"number of disks must not be negative, got {n}")


def _recursive(n: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    if n == 0:
        return
    yield from _recursive(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from _recursive(n - 1, auxiliary, target, source)


def hanoi_moves(
    n: int, source: str = "S", target: str = "D", auxiliary: str = "A"
) -> list[Move]:
    """Return the moves taking ``n`` disks from ``source`` to ``target``.

    Disk 1 is the smallest, disk ``n`` the largest.
    """
    _check_count(n)
    return list(_recursive(n, source, target, auxiliary))


def _legal_move(poles: dict[str, list[int]], first: str, second: str) -> Move:
    one, two = poles[first], poles[second]
    if not one or (two and one[-1] > two[-1]):
        disk = two.pop()
        one.append(disk)
        return Move(disk, second, first)
    disk = one.pop()
    two.append(disk)
    return Move(disk, first, second)


def hanoi_moves_iterative(n: int) -> list[Move]:
    """Return the moves taking ``n`` disks from pole S to pole D, computed iteratively."""
    _check_count(n)
    source, target, auxiliary = "S", "D", "A"
    if n % 2 == 0:
        target, auxiliary = auxiliary, target
    poles: dict[str, list[int]] = {
        source: list(range(n, 0, -1)),
        auxiliary: [],
        target: [],
    }
    pairs = [(source, target), (source, auxiliary), (auxiliary, target)]
    return [
        _legal_move(poles, *pairs[step % 3]) for step in range(2**n - 1)
    ]


def format_move(move: Move) -> str:
    """Describe a move as a sentence."""
    return f"Move the disk {move.disk} from {move.source} to {move.target}"