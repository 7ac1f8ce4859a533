"""
OutcomeSignature: what each chosen checker says (or may say) about a code.

One slot per chosen checker, in the engine's checker order. Each slot is
a frozenset of branch indices:

    {1}       the checker fires branch 1
    {0, 2}    the checker fires branch 0 or branch 2 (partial knowledge)
    {}        no branch fires (ill-formed checker for this code)

A signature computed from a real candidate and a well-formed set of
checkers has only singleton slots. Those exact signatures key the
candidate <-> signature bijection in the engine.

Rendering: singleton -> digit, empty -> "-", several -> "(25)".
"""

from dataclasses import dataclass
from functools import total_ordering

from .errors import LogicError


@total_ordering
@dataclass(frozen=True, eq=True)
class OutcomeSignature:
    slots: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "slots", tuple(frozenset(s) for s in self.slots))

    def append(self, branches) -> "OutcomeSignature":
        """A new signature with one more slot at the end."""
        return OutcomeSignature(self.slots + (frozenset(branches),))

    def is_valid(self) -> bool:
        return all(self.slots)

    def is_exact(self) -> bool:
        return all(len(s) == 1 for s in self.slots)

    def compliant_with(self, slot_index: int, other: "OutcomeSignature",
                       observed: bool) -> bool:
        """
        Can a code with this signature coexist with `observed` being what
        the player saw for checker `slot_index` on a probe whose signature
        is `other`?

            same slot          -> observed
            disjoint slots     -> not observed
            overlapping slots  -> True (this observation cannot decide)
        """
        if len(self) != len(other):
            raise LogicError(
                f"cannot compare signatures of {len(self)} and {len(other)} slots"
            )
        if not 0 <= slot_index < len(self):
            raise IndexError(f"Bad index {slot_index} for {len(self)} slots")

        mine = self.slots[slot_index]
        theirs = other.slots[slot_index]
        if mine == theirs:
            return observed
        if not mine & theirs:
            return not observed
        return True

    def sort_key(self) -> tuple:
        return tuple(tuple(sorted(s)) for s in self.slots)

    def __lt__(self, other):
        if not isinstance(other, OutcomeSignature):
            return NotImplemented
        if len(self) != len(other):
            raise LogicError(
                f"cannot order signatures of {len(self)} and {len(other)} slots"
            )
        return self.sort_key() < other.sort_key()

    def __len__(self):
        return len(self.slots)

    def __str__(self):
        parts = []
        for slot in self.slots:
            if len(slot) == 1:
                parts.append(str(next(iter(slot))))
            elif slot:
                parts.append("(" + "".join(str(b) for b in sorted(slot)) + ")")
            else:
                parts.append("-")
        return "".join(parts)

    def __repr__(self):
        return f"OutcomeSignature({self})"
