"""
Candidate: one hypothesis for the hidden code.

A code is three digits, one per colour:
    blue triangle, yellow square, purple circle
each in [1, MAX_VALUE]. Candidates are plain immutable values; the
universe of all of them is built once by the engine and never mutated.

Packed form: 153 -> blue 1, yellow 5, purple 3.
"""

from dataclasses import dataclass
from itertools import product


MIN_VALUE = 1
MAX_VALUE = 5


def check_number(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} should be an integer : {value!r}")
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValueError(f"{name} should be in [{MIN_VALUE}-{MAX_VALUE}] : {value}")


@dataclass(frozen=True, order=True)
class Candidate:
    """Three bounded digits. Ordered lexicographically (blue, yellow, purple)."""
    blue: int
    yellow: int
    purple: int

    def __post_init__(self):
        check_number(self.blue, "Blue triangle")
        check_number(self.yellow, "Yellow square")
        check_number(self.purple, "Purple circle")

    @classmethod
    def from_number(cls, number: int) -> "Candidate":
        """Split a packed 3-digit number into hundreds, tens and units."""
        return cls(number // 100, (number % 100) // 10, number % 10)

    @property
    def number(self) -> int:
        return 100 * self.blue + 10 * self.yellow + self.purple

    @property
    def values(self) -> tuple:
        return (self.blue, self.yellow, self.purple)

    def __str__(self):
        return f"({self.blue} {self.yellow} {self.purple})"


def make_universe(size: int = MAX_VALUE) -> tuple:
    """
    Every code whose digits are drawn from {1..size}, sorted.

    The base game uses size = MAX_VALUE, giving 125 candidates.
    """
    if not MIN_VALUE <= size <= MAX_VALUE:
        raise ValueError(f"universe size should be in [{MIN_VALUE}-{MAX_VALUE}] : {size}")
    digits = range(MIN_VALUE, size + 1)
    return tuple(Candidate(b, y, p) for b, y, p in product(digits, repeat=3))
