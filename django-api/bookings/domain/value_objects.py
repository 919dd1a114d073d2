"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self

STUDENT_ID_PATTERN = re.compile(r"[0-9]{6}")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RegistrationId:
    """Unique identifier for a Registration, derived from its creation time."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StudentId:
    """Six-digit student number."""

    value: str

    def __post_init__(self) -> None:
        if not STUDENT_ID_PATTERN.fullmatch(self.value):
            raise ValueError("Student ID must be exactly 6 digits")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing remaining capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def decrement(self) -> Self:
        """Return the capacity left after taking one slot."""
        return type(self)(value=self.value - 1)
