"""
Checker catalog.

Every concrete checker of the game, keyed by the ID printed on its card.
Each one is a Checker record:
    id:        stable card number
    name:      what the card asks
    branches:  one Branch(description, test) per possible answer

build_default_catalog() returns a fresh, frozen Catalog holding all of
them. Engines take the catalog as an argument.
"""

from ..core.checker import Catalog
from .digits import DIGIT_CHECKERS
from .counting import COUNTING_CHECKERS
from .relations import RELATION_CHECKERS


CHECKERS = sorted(
    DIGIT_CHECKERS + COUNTING_CHECKERS + RELATION_CHECKERS,
    key=lambda checker: checker.id,
)


def build_default_catalog() -> Catalog:
    catalog = Catalog()
    for checker in CHECKERS:
        catalog.register(checker)
    return catalog.freeze()


__all__ = ["CHECKERS", "build_default_catalog"]
