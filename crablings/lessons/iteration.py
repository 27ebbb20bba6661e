"""Solved lessons on iterating over strings, results and progress maps."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum, auto


def capitalize_first(text: str) -> str:
    """Upper-case the first character and leave the rest unchanged."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word and return them as a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them into a single string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not produce a whole number."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b when a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """All quotients of the numbers by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as error:
        return error


def list_of_results() -> list[int | DivisionError]:
    """Each quotient of the numbers by 27, or the error for that number."""
    return [_attempt(n, 27) for n in _NUMBERS]


class Progress(Enum):
    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps, using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)