"""Small exercises on conditionals, functions, options and generics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return b if a < b else a


def foo_if_fizz(fizzish: str) -> str:
    """Map 'fizz' to 'foo', 'fuzz' to 'bar' and anything else to 'baz'."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour; None for hours past 24."""
    if time_of_day < 22:
        return 5
    if time_of_day < 25:
        return 0
    return None


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T