"""Error handling exercises: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def generate_nametag_text(name: str) -> str:
    """Return name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


class ParseIntError(ValueError):
    """Text is not a valid integer of the expected width."""


def _parse_signed(text: str, bounds: tuple[int, int]) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ParseIntError("number too large to fit in target type")
    if value < low:
        raise ParseIntError("number too small to fit in target type")
    return value


def parse_int(text: str) -> int:
    """Parse a signed 64-bit integer strictly; raise ParseIntError on bad input."""
    return _parse_signed(text, _I64)


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    qty = _parse_signed(item_quantity, _I32)
    low, high = _I32
    product = qty * COST_PER_ITEM
    if not low <= product <= high:
        raise OverflowError("attempt to multiply with overflow")
    total = product + PROCESSING_FEE
    if not low <= total <= high:
        raise OverflowError("attempt to add with overflow")
    return total


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying; raise ValueError when the purchase is unaffordable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A value is not a positive, non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"
    _MESSAGES = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not become a PositiveNonzeroInteger; wraps the cause."""

    def __init__(self, error: CreationError | ParseIntError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = parse_int(s)
    except ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err