"""
Checkers that look at a single colour: compared to a constant, or parity.

    1   blue compared to 1        (== 1 | > 1)
    2   blue compared to 3        (< | == | >)
    3   yellow compared to 3
    4   yellow compared to 4
    5   blue even or odd
    6   yellow even or odd
    7   purple even or odd
"""

from operator import attrgetter

from ..core.checker import Branch, Checker


SHAPES = {
    "blue":   "blue triangle",
    "yellow": "yellow square",
    "purple": "purple circle",
}


def compare_to_value(checker_id: int, colour: str, value: int) -> Checker:
    get = attrgetter(colour)
    return Checker(
        id=checker_id,
        name=f"The {SHAPES[colour]} compared to {value}",
        branches=(
            Branch(f"{colour} < {value}",  lambda c: get(c) < value),
            Branch(f"{colour} == {value}", lambda c: get(c) == value),
            Branch(f"{colour} > {value}",  lambda c: get(c) > value),
        ),
    )


def parity(checker_id: int, colour: str) -> Checker:
    get = attrgetter(colour)
    return Checker(
        id=checker_id,
        name=f"The {SHAPES[colour]} is even or odd",
        branches=(
            Branch(f"{colour} is even", lambda c: get(c) % 2 == 0),
            Branch(f"{colour} is odd",  lambda c: get(c) % 2 == 1),
        ),
    )


# Nothing is below 1, so this card only has two outcomes.
BLUE_VS_ONE = Checker(
    id=1,
    name="The blue triangle compared to 1",
    branches=(
        Branch("blue == 1", lambda c: c.blue == 1),
        Branch("blue > 1",  lambda c: c.blue > 1),
    ),
)


DIGIT_CHECKERS = [
    BLUE_VS_ONE,
    compare_to_value(2, "blue", 3),
    compare_to_value(3, "yellow", 3),
    compare_to_value(4, "yellow", 4),
    parity(5, "blue"),
    parity(6, "yellow"),
    parity(7, "purple"),
]
