"""Solved lessons on structured records and messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    red: int
    green: int
    blue: int


@dataclass(frozen=True, repr=False)
class UnitLikeStruct:
    """A record with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A parcel; it must weigh at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < 10:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    x: int
    y: int


class Message:
    """The messages a State can process."""

    @dataclass(frozen=True)
    class ChangeColor:
        red: int
        green: int
        blue: int

    @dataclass(frozen=True)
    class Echo:
        text: str

    @dataclass(frozen=True)
    class Move:
        point: Point

    @dataclass(frozen=True)
    class Quit:
        pass


@dataclass
class State:
    """Mutable state driven by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False
    message: str = ""

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, text: str) -> None:
        self.message = text

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message) -> None:
        """Apply one message to the state."""
        match message:
            case Message.ChangeColor(red, green, blue):
                self.change_color((red, green, blue))
            case Message.Echo(text):
                self.echo(text)
            case Message.Move(point):
                self.move_position(point)
            case Message.Quit():
                self.quit()
            case _:
                raise TypeError(f"not a message: {message!r}")