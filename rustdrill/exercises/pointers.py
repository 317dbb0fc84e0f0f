"""Pointer-style exercises: a cons list, clone-on-write data and shared numbers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    head: int
    tail: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(5, Nil())


class Cow:
    """Read access to borrowed data that is copied only when first mutated."""

    def __init__(self, data: Sequence[int], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        """Wrap data without copying it; it is never modified through the Cow."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: list[int]) -> Cow:
        """Take ownership of a list; mutations apply to it directly."""
        return cls(data, owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def is_borrowed(self) -> bool:
        return not self._owned

    def to_mut(self) -> list[int]:
        """Return the owned list, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind.lower()}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if something changes."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum the numbers congruent to each offset modulo workers, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))