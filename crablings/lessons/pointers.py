"""Solved lessons on recursive lists and copy-on-write data."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell; None marks the end of the list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2))


class Cow:
    """Borrowed data that is copied only when it must be changed."""

    def __init__(self, data: Sequence[int], owned: bool = False):
        self._data = data
        self._owned = owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> list[int]:
        """Return a list that may be changed, copying borrowed data first."""
        if not self._owned or not isinstance(self._data, list):
            self._data = list(self._data)
            self._owned = True
        return self._data


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying only if something changes."""
    for index, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow