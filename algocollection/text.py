"""Text utilities: word counting, digit checks, diamond patterns and permutations."""

from __future__ import annotations

import re
from collections.abc import Iterator

_SEPARATORS = re.compile(r"[ \n\t]+")


def count_words(text: str) -> int:
    """Count the words in ``text``; only spaces, newlines and tabs separate them."""
    return sum(1 for word in _SEPARATORS.split(text) if word)


def is_all_digits(text: str) -> bool:
    """Tell whether every character is an ASCII digit (an empty string qualifies)."""
    return all("0" <= char <= "9" for char in text)


def diamond(n: int) -> list[str]:
    """Return the ``2n`` lines of a diamond of ``* `` cells, widest in the middle."""
    if n < 0:
        raise ValueError(f"diamond size must not be negative, got {n}")
    upper = [" " * (n - 1 - row) + "* " * (row + 1) for row in range(n)]
    lower = [" " * (n - stars) + "* " * stars for stars in range(n, 0, -1)]
    return upper + lower


def _swap_permutations(chars: list[str], start: int) -> Iterator[str]:
    if start == len(chars) - 1:
        yield "".join(chars)
        return
    for index in range(start, len(chars)):
        chars[start], chars[index] = chars[index], chars[start]
        yield from _swap_permutations(chars, start + 1)
        chars[start], chars[index] = chars[index], chars[start]


def permutations(text: str) -> list[str]:
    """Return every arrangement of the characters of ``text``, in swap order.

    The first arrangement is ``text`` itself. An empty string gives none.
    """
    return list(_swap_permutations(list(text), 0))