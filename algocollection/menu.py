"""Interactive menu for building and editing a singly linked list."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algocollection.linked_list import LinkedList

_MENU = """\
--------------------------------------------------
  1. Create a single linked list
  2. Find length of single linked list
  3. Insert at beginning of list
  4. Insert at end of list
  5. Insert at any specific position
  6. Delete at beginning of list
  7. Delete at end of list
  8. Delete at any specific position
  9. Display linked list elements
  10. Quit
--------------------------------------------------"""


def _read_int(prompt: str) -> int:
    while True:
        answer = input(prompt)
        try:
            return int(answer.strip())
        except ValueError:
            print("Please enter an integer.")


def _create(items: LinkedList) -> None:
    count = _read_int("Enter Number of Nodes : ")
    for _ in range(count):
        items.append(_read_int("Enter data : "))
    print("Elements are Inserted Successfully.")


def _insert_at(items: LinkedList) -> None:
    position = _read_int("Enter Position to insert : ")
    if not 1 <= position <= len(items) + 1:
        print("Invalid Position.")
        return
    items.insert_at(position, _read_int("Enter data : "))
    print("Inserted Successfully.")


def _delete_first(items: LinkedList) -> None:
    if not len(items):
        print("Linked List is Empty.")
        return
    print(f"First node is {items.pop_first()} Deleted")


def _delete_last(items: LinkedList) -> None:
    if not len(items):
        print("Linked List is Empty.")
        return
    print(f"last node is {items.pop_last()} Deleted")


def _delete_at(items: LinkedList) -> None:
    if not len(items):
        print("Linked List is already Empty.")
        return
    position = _read_int("Enter a Position : ")
    if not 1 <= position <= len(items):
        print("Invalid Position")
        return
    print(f"Position {position} node is {items.pop_at(position)} Deleted")


def _display(items: LinkedList) -> None:
    if not len(items):
        print("Linked list is Empty")
        return
    print("Linked List Elements Are : ")
    print("".join(f"{value} -> " for value in items))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the linked-list menu on standard input and output until Quit or end of input."""
    parser = argparse.ArgumentParser(
        description="Build and edit a singly linked list interactively."
    )
    parser.parse_args(argv)

    items = LinkedList()
    try:
        while True:
            print(_MENU)
            choice = _read_int("Enter Your Choice (1 to 10 integers) : ")
            if choice == 1:
                _create(items)
            elif choice == 2:
                print(f"Length of linked list is : {len(items)}")
            elif choice == 3:
                items.insert_first(_read_int("Enter data : "))
                print("Inserted Successfully.")
            elif choice == 4:
                items.append(_read_int("Enter data : "))
                print("Inserted Successfully.")
            elif choice == 5:
                _insert_at(items)
            elif choice == 6:
                _delete_first(items)
            elif choice == 7:
                _delete_last(items)
            elif choice == 8:
                _delete_at(items)
            elif choice == 9:
                _display(items)
            elif choice == 10:
                return 0
            else:
                print("Invalid Choice, Please Enter correct Choice.")
    except EOFError:
        return 0