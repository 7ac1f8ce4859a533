"""
Checkers that compare colours with each other.

    11  blue compared to yellow     (< | == | >)
    12  blue compared to purple
    13  yellow compared to purple
    14  which colour is strictly the smallest
    15  which colour is strictly the largest

Checker 14 is kept exactly as the game catalog has it: its third branch
is labelled "purple is the smallest" but tests that purple is the
largest. With it, some codes fire two branches and some fire none; the
engine reports those codes as anomalies.
"""

from operator import attrgetter

from ..core.checker import Branch, Checker
from .digits import SHAPES


def compare_colours(checker_id: int, left: str, right: str) -> Checker:
    a, b = attrgetter(left), attrgetter(right)
    return Checker(
        id=checker_id,
        name=f"The {SHAPES[left]} compared to the {SHAPES[right]}",
        branches=(
            Branch(f"{left} < {right}",  lambda c: a(c) < b(c)),
            Branch(f"{left} == {right}", lambda c: a(c) == b(c)),
            Branch(f"{left} > {right}",  lambda c: a(c) > b(c)),
        ),
    )


SMALLEST = Checker(
    id=14,
    name="Which colour has the digit smaller than the others",
    branches=(
        Branch("blue < (yellow and purple)",
               lambda c: c.blue < c.yellow and c.blue < c.purple),
        Branch("yellow < (blue and purple)",
               lambda c: c.yellow < c.purple and c.yellow < c.blue),
        Branch("purple < (yellow and blue)",
               lambda c: c.purple > c.yellow and c.purple > c.blue),
    ),
)

LARGEST = Checker(
    id=15,
    name="Which colour has the digit larger than the others",
    branches=(
        Branch("blue > (yellow and purple)",
               lambda c: c.blue > c.yellow and c.blue > c.purple),
        Branch("yellow > (blue and purple)",
               lambda c: c.yellow > c.blue and c.yellow > c.purple),
        Branch("purple > (yellow and blue)",
               lambda c: c.purple > c.yellow and c.purple > c.blue),
    ),
)


RELATION_CHECKERS = [
    compare_colours(11, "blue", "yellow"),
    compare_colours(12, "blue", "purple"),
    compare_colours(13, "yellow", "purple"),
    SMALLEST,
    LARGEST,
]
