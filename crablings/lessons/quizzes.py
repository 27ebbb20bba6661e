"""Solved quizzes: a string-transforming machine and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_ACTIONS = frozenset({"uppercase", "trim", "append"})


@dataclass(frozen=True)
class Command:
    """What to do to a string: "uppercase", "trim", or "append" "bar" `times` times."""

    action: str
    times: int = 0

    def __post_init__(self) -> None:
        if self.action not in _ACTIONS:
            raise ValueError(f"unknown command: {self.action!r}")
        if self.times < 0:
            raise ValueError("times must not be negative")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output: list[str] = []
    for text, command in items:
        match command.action:
            case "uppercase":
                output.append(text.upper())
            case "trim":
                output.append(text.strip())
            case "append":
                output.append(text + "bar" * command.times)
    return output


@dataclass
class ReportCard:
    """A student's report card; the grade may be numeric or alphabetic."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )