"""Solved lessons on dictionaries and optional values."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum, auto


class Fruit(Enum):
    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def make_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 2
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    goals_scored: int = 0
    goals_conceded: int = 0


def build_scores_table(results: str) -> dict[str, Team]:
    """Tally goals per team from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = int(fields[2]), int(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour, or None for an invalid hour."""
    if not 0 <= time_of_day <= 23:
        return None
    return 5 if time_of_day < 22 else 0