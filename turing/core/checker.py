"""
Checkers (verifiers) and the catalog that holds them.

A Checker is a record, not a class hierarchy: an ID, a name, and one
Branch per mutually exclusive outcome. Each Branch carries its own
predicate over a Candidate. The number of branches is the checker's
grade (2 for odd/even, 3 for less/equal/greater, ...).

A well-formed checker fires exactly one branch per candidate. Nothing in
here enforces that -- satisfied_branches reports whatever fires, and the
engine decides what to do with zero or several.
"""

from dataclasses import dataclass, field
from typing import Callable

from .candidate import Candidate
from .errors import LogicError


@dataclass(frozen=True)
class Branch:
    """One outcome of a checker."""
    description: str
    test: Callable[[Candidate], bool]

    def __repr__(self):
        return f"Branch({self.description!r})"


@dataclass(frozen=True)
class Checker:
    id: int
    name: str
    branches: tuple = ()

    @property
    def grade(self) -> int:
        return len(self.branches)

    def evaluate(self, branch_index: int, candidate: Candidate) -> bool:
        if not 0 <= branch_index < self.grade:
            raise IndexError(
                f"checker {self.id}: branch {branch_index} not in [0, {self.grade})"
            )
        return bool(self.branches[branch_index].test(candidate))

    def satisfied_branches(self, candidate: Candidate) -> frozenset:
        """Indices of every branch that fires for this candidate."""
        return frozenset(
            index for index in range(self.grade)
            if self.evaluate(index, candidate)
        )

    def describe(self, branch_index: int) -> str:
        return self.branches[branch_index].description

    def __repr__(self):
        return f"Checker({self.id}, {self.name!r}, grade={self.grade})"


@dataclass
class Catalog:
    """
    Registry of checkers keyed by their stable numeric ID.

    Built once, then frozen. Engines are handed a catalog explicitly
    rather than reaching for a module-level registry.
    """
    checkers: dict = field(default_factory=dict)
    frozen: bool = False

    def register(self, checker: Checker) -> Checker:
        if self.frozen:
            raise LogicError(f"catalog is frozen, cannot register checker {checker.id}")
        if checker.id in self.checkers:
            raise ValueError(f"checker ID {checker.id} is already registered")
        self.checkers[checker.id] = checker
        return checker

    def resolve(self, checker_id: int) -> Checker:
        try:
            return self.checkers[checker_id]
        except KeyError:
            raise KeyError(f"No checker with ID {checker_id}") from None

    def freeze(self) -> "Catalog":
        self.frozen = True
        return self

    def __len__(self):
        return len(self.checkers)

    def __contains__(self, checker_id):
        return checker_id in self.checkers

    def __iter__(self):
        return iter(self.checkers[k] for k in sorted(self.checkers))
