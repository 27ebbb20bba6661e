"""Solved lessons on generic containers and shared behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@singledispatch
def append_bar(value):
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()