"""Quiz exercises: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

G = TypeVar("G")


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


@dataclass(frozen=True)
class Uppercase:
    """Turn the text into upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends of the text."""


@dataclass(frozen=True)
class Append:
    """Append 'bar' to the text a number of times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("the number of appends cannot be negative")


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its text and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(count):
                output.append(text + "bar" * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass(frozen=True)
class ReportCard(Generic[G]):
    """A student's report card; the grade may be a number or a letter."""

    grade: G
    student_name: str
    student_age: int

    def report(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )