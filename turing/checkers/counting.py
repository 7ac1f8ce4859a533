"""
Checkers that count across all three digits.

    8   how many 1s           (0 | 1 | 2 | 3)
    9   how many 3s
    10  how many 4s
    17  how many even digits  (0 | 1 | 2 | 3)
    18  the sum is even or odd
    20  a digit repeats three times, twice, or not at all
"""

from collections import Counter

from ..core.checker import Branch, Checker


NUMBER_WORDS = ("no", "one", "two", "three")


def count_of(checker_id: int, digit: int) -> Checker:
    def has(n):
        return lambda c: c.values.count(digit) == n

    return Checker(
        id=checker_id,
        name=f"How many {digit}s are in the code",
        branches=tuple(
            Branch(f"{NUMBER_WORDS[n]} {digit}", has(n)) for n in range(4)
        ),
    )


def _evens(candidate) -> int:
    return sum(1 for v in candidate.values if v % 2 == 0)


def _has_evens(n):
    return lambda c: _evens(c) == n


EVEN_COUNT = Checker(
    id=17,
    name="How many even digits are in the code",
    branches=tuple(
        Branch(f"{NUMBER_WORDS[n]} even", _has_evens(n)) for n in range(4)
    ),
)

SUM_PARITY = Checker(
    id=18,
    name="The sum of all digits is even or odd",
    branches=(
        Branch("sum is even", lambda c: sum(c.values) % 2 == 0),
        Branch("sum is odd",  lambda c: sum(c.values) % 2 == 1),
    ),
)


def _repetition(candidate) -> int:
    return max(Counter(candidate.values).values())


REPETITION = Checker(
    id=20,
    name="Does a digit repeat in the code",
    branches=(
        Branch("a triple",      lambda c: _repetition(c) == 3),
        Branch("a double",      lambda c: _repetition(c) == 2),
        Branch("no repetition", lambda c: _repetition(c) == 1),
    ),
)


COUNTING_CHECKERS = [
    count_of(8, 1),
    count_of(9, 3),
    count_of(10, 4),
    EVEN_COUNT,
    SUM_PARITY,
    REPETITION,
]
