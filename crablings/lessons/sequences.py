"""Solved lessons on lists and strings."""


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")