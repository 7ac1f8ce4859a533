"""
Error kinds shared by the core.

Out-of-domain numbers raise ValueError or IndexError, unknown references
raise KeyError. Everything that is a broken structural precondition
(empty catalog, comparing signatures of different lengths, registering
into a frozen catalog) raises LogicError.

A checker that fires zero or several branches for a candidate is not an
error: it is recorded as an Anomaly and the candidate is set aside.
"""

from dataclasses import dataclass


class LogicError(RuntimeError):
    """A structural precondition was violated."""


@dataclass(frozen=True)
class Anomaly:
    """A checker that did not fire exactly one branch for a candidate."""
    candidate: object
    checker_id: int
    branches: frozenset

    @property
    def kind(self):
        return "no branch" if not self.branches else "several branches"

    def __str__(self):
        fired = "".join(str(b) for b in sorted(self.branches)) or "-"
        return f"{self.candidate}: checker {self.checker_id} -> {self.kind} [{fired}]"
