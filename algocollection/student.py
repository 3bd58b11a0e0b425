"""A student record with five subject marks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

SUBJECTS = 5


@dataclass
class Student:
    """A student's roll number, name and marks in five subjects."""

    roll: int = 0
    name: str = ""
    marks: Sequence[int] = field(default_factory=lambda: (0,) * SUBJECTS)

    def __post_init__(self) -> None:
        self.marks = tuple(self.marks)
        if len(self.marks) != SUBJECTS:
            raise ValueError(
                f"expected {SUBJECTS} marks, got {len(self.marks)}"
            )

    def percentage(self) -> float:
        """Return the average mark across the five subjects."""
        return sum(self.marks) / SUBJECTS

    def __str__(self) -> str:
        return (
            f"ROLL NO: {self.roll}\n"
            f"NAME: {self.name}\n"
            f"PERCENTAGE: {self.percentage():g}"
        )