"""Singly linked list and loop detection/removal on raw node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """One link in a singly linked chain."""

    data: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """A singly linked list with 1-based positional insertion and removal."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, position: int) -> Node:
        node = self.head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_first(self, value: Any) -> None:
        """Put ``value`` at the front."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def append(self, value: Any) -> None:
        """Put ``value`` at the end."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so it becomes the item at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self.insert_first(value)
        elif position == self._size + 1:
            self.append(value)
        else:
            before = self._node_at(position - 1)
            before.next = Node(value, before.next)
            self._size += 1

    def pop_first(self) -> Any:
        """Remove and return the first item."""
        if self.head is None:
            raise IndexError("pop from empty linked list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def pop_last(self) -> Any:
        """Remove and return the last item."""
        if self.head is None:
            raise IndexError("pop from empty linked list")
        return self.pop_at(self._size)

    def pop_at(self, position: int) -> Any:
        """Remove and return the item at 1-based ``position``."""
        if self.head is None:
            raise IndexError("pop from empty linked list")
        if not 1 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            return self.pop_first()
        before = self._node_at(position - 1)
        node = before.next
        assert node is not None
        before.next = node.next
        if node is self._tail:
            self._tail = before
        self._size -= 1
        return node.data


def make_loop(head: Node | None, position: int) -> None:
    """Link the last node back to the node at 1-based ``position``; 0 does nothing."""
    if position == 0:
        return
    if head is None or position < 0:
        raise IndexError(f"invalid position {position}")
    target = None
    node = head
    index = 1
    while True:
        if index == position:
            target = node
        if node.next is None:
            break
        node = node.next
        index += 1
    if target is None:
        raise IndexError(f"invalid position {position}")
    node.next = target


def has_loop(head: Node | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_loop(head: Node | None) -> bool:
    """Break a loop in the chain, keeping every node; return whether one was found."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False

    slow = head
    while slow is not fast:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    start = slow
    node = start
    while node.next is not start:  # type: ignore[union-attr]
        node = node.next  # type: ignore[union-attr]
    node.next = None  # type: ignore[union-attr]
    return True