"""Solved lessons on reporting and converting errors."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed decimal integer that fits in `bits` bits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is rejected."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed-in quantity: 5 tokens per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    return quantity * cost_per_item + processing_fee


class CreationError(ValueError):
    """A value cannot become a PositiveNonzeroInteger."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a PositiveNonzeroInteger.

    `cause` is either a CreationError or the ValueError raised while parsing.
    """

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive, non-zero integer."""
    try:
        number = _parse_int(text, 64)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error