"""Solved lessons on converting text and sequences into typed values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

_USIZE_MAX = (1 << 64) - 1
_DIGITS = frozenset("0123456789")


def _parse_usize(text: str) -> int:
    """Parse an unsigned decimal integer that fits in 64 bits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonError(ValueError):
    """Text could not be parsed into a Person."""

    class Kind(Enum):
        EMPTY = auto()
        BAD_LEN = auto()
        NO_NAME = auto()
        PARSE_INT = auto()

    def __init__(self, kind: ParsePersonError.Kind, cause: ValueError | None = None):
        super().__init__(str(cause) if cause is not None else kind.name.lower())
        self.kind = kind
        self.cause = cause


@dataclass
class Person:
    """A person with a name and an age; defaults to 30-year-old John."""

    name: str = "John"
    age: int = 30

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Read "name,age"; fall back to the default person on any problem."""
        if not text:
            return cls()
        fields = text.split(",")
        name = fields[0]
        if not name or len(fields) < 2:
            return cls()
        try:
            age = _parse_usize(fields[1])
        except ValueError:
            return cls()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Read exactly "name,age"; raise ParsePersonError otherwise."""
        if not text:
            raise ParsePersonError(ParsePersonError.Kind.EMPTY)
        fields = text.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonError.Kind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonError.Kind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as error:
            raise ParsePersonError(ParsePersonError.Kind.PARSE_INT, error) from error
        return cls(name=name, age=age)


class IntoColorError(ValueError):
    """A sequence could not be converted into a Color."""

    class Kind(Enum):
        BAD_LEN = auto()
        INT_CONVERSION = auto()

    def __init__(self, kind: IntoColorError.Kind):
        super().__init__(kind.name.lower())
        self.kind = kind


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, value: Sequence[int]) -> Color:
        """Build a colour from three integers in 0..=255."""
        components = tuple(value)
        if len(components) != 3:
            raise IntoColorError(IntoColorError.Kind.BAD_LEN)
        for component in components:
            if isinstance(component, bool) or not isinstance(component, int):
                raise TypeError(f"colour components must be integers, not {component!r}")
            if not 0 <= component <= 255:
                raise IntoColorError(IntoColorError.Kind.INT_CONVERSION)
        return cls(*components)