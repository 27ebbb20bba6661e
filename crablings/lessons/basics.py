"""Solved lessons on functions and conditionals."""


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")