"""
The consistency engine.

Owns the candidate universe, the chosen checkers, and a mutually pruned
candidate <-> signature bijection. The player proposes a probe code,
runs one checker on it, and reports what the checker said; every live
candidate whose own signature cannot coexist with that report is dropped.

Lifecycle:
    READY      more than one candidate still live
    SOLVED     exactly one candidate left -- that is the code
    EXHAUSTED  none left -- the observations contradict each other

The bijection is built once and only ever shrinks. A signature produced
by two or more candidates can never tell them apart, so the signature
and every candidate that produced it are evicted for good. Eviction runs
after the whole universe has been scanned: the final state depends only
on how many candidates share a signature, never on the scan order.
"""

from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Iterable, Optional

from .candidate import Candidate, MAX_VALUE, make_universe
from .checker import Catalog
from .errors import Anomaly, LogicError
from .signature import OutcomeSignature


class Phase(Enum):
    READY = "ready"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Diagnostics:
    reachable: int      # structurally reachable branch combinations
    unclassified: int   # candidates set aside because of checker anomalies
    evicted: int        # candidates evicted because their signature collided
    remaining: int      # candidates still live


def reachable_signatures(checkers) -> frozenset:
    """
    Every branch-index combination the checkers could produce, judged
    from their grades alone: the product of range(grade) per checker.

    Reporting only -- nothing here says a candidate actually produces it.
    """
    return frozenset(product(*(range(c.grade) for c in checkers)))


def relate(candidate, signature, candidate_to_signature, signature_to_candidates,
           bad_signatures: set, casualties: set) -> None:
    """
    Pair a candidate with its signature, tracking collisions.

    First candidate for a signature: mapped both ways. Second one: the
    signature goes bad, its mapping is dropped, and both candidates
    become casualties. Any later candidate with a bad signature is a
    casualty too. Casualties stay in candidate_to_signature until the
    caller removes them after the full scan.
    """
    candidate_to_signature[candidate] = signature
    if signature in bad_signatures:
        casualties.add(candidate)
        return
    existing = signature_to_candidates.get(signature)
    if existing is None:
        signature_to_candidates[signature] = {candidate}
        return
    bad_signatures.add(signature)
    casualties.add(candidate)
    casualties.update(existing)
    del signature_to_candidates[signature]


class Engine:
    """
    Candidate elimination for one set of chosen checkers.

    Args:
        checker_ids:      ordered checker IDs; slot i of every signature
                          belongs to checker_ids[i]
        catalog:          where the IDs are resolved
        evict_ambiguous:  evict candidates that share a signature (default).
                          When False, shared signatures are kept and one
                          signature may index several live candidates.
        universe_size:    digits are drawn from {1..universe_size}
        verbose:          print progress
    """

    def __init__(
        self,
        checker_ids: Iterable[int],
        catalog: Catalog,
        evict_ambiguous: bool = True,
        universe_size: int = MAX_VALUE,
        verbose: bool = False,
    ):
        if not catalog:
            raise LogicError("checker catalog has not been populated")
        self.checkers = tuple(catalog.resolve(i) for i in checker_ids)
        self.evict_ambiguous = evict_ambiguous
        self.verbose = verbose

        self.universe = make_universe(universe_size)
        self.reachable_signatures = reachable_signatures(self.checkers)
        if verbose:
            print(f"{len(self.reachable_signatures)} checker combinations possible")

        self.anomalies = []
        self.unclassified = frozenset()
        self.bad_signatures = frozenset()
        self.evicted = frozenset()
        self.history = []
        self.step = 0

        self._candidate_to_signature = {}
        self._signature_to_candidates = {}
        self._classify()

    @property
    def checker_ids(self) -> tuple:
        return tuple(c.id for c in self.checkers)

    # --- Construction ---

    def signature_of(self, candidate: Candidate) -> OutcomeSignature:
        """Evaluate every chosen checker on a candidate, live or not."""
        signature = OutcomeSignature()
        for checker in self.checkers:
            signature = signature.append(checker.satisfied_branches(candidate))
        return signature

    def _classify(self):
        bad_signatures = set()
        casualties = set()
        unclassified = set()

        for candidate in self.universe:
            signature = self.signature_of(candidate)
            if not signature.is_exact():
                unclassified.add(candidate)
                for checker, slot in zip(self.checkers, signature.slots):
                    if len(slot) != 1:
                        self.anomalies.append(Anomaly(candidate, checker.id, slot))
                continue
            if self.evict_ambiguous:
                relate(candidate, signature,
                       self._candidate_to_signature, self._signature_to_candidates,
                       bad_signatures, casualties)
            else:
                self._candidate_to_signature[candidate] = signature
                self._signature_to_candidates.setdefault(signature, set()).add(candidate)

        # Second pass: only now is every collision known.
        for candidate in casualties:
            del self._candidate_to_signature[candidate]

        self.unclassified = frozenset(unclassified)
        self.bad_signatures = frozenset(bad_signatures)
        self.evicted = frozenset(casualties)

        if self.verbose:
            if unclassified:
                print(f"  [anomaly] {len(unclassified)} candidates set aside "
                      f"({len(self.anomalies)} checker anomalies)")
            if casualties:
                print(f"  [ambiguous] {len(casualties)} candidates evicted "
                      f"over {len(bad_signatures)} shared signatures")
            print(f"  Remaining candidates: {self.remaining_count()}")

    # --- Queries ---

    def remaining_count(self) -> int:
        return len(self._candidate_to_signature)

    def remaining(self) -> list:
        return sorted(self._candidate_to_signature)

    def related_signature(self, candidate: Candidate) -> OutcomeSignature:
        try:
            return self._candidate_to_signature[candidate]
        except KeyError:
            raise KeyError(f"{candidate} is not a live candidate") from None

    def related_candidates(self, signature: OutcomeSignature) -> frozenset:
        try:
            return frozenset(self._signature_to_candidates[signature])
        except KeyError:
            raise KeyError(f"signature {signature} is not live") from None

    @property
    def phase(self) -> Phase:
        count = self.remaining_count()
        if count == 0:
            return Phase.EXHAUSTED
        if count == 1:
            return Phase.SOLVED
        return Phase.READY

    @property
    def solution(self) -> Optional[Candidate]:
        if self.phase is Phase.SOLVED:
            return next(iter(self._candidate_to_signature))
        return None

    def diagnostics(self) -> Diagnostics:
        return Diagnostics(
            reachable=len(self.reachable_signatures),
            unclassified=len(self.unclassified),
            evicted=len(self.evicted),
            remaining=self.remaining_count(),
        )

    # --- Elimination ---

    def analyze_result(self, probe: OutcomeSignature, checker_index: int,
                       observed: bool) -> int:
        """
        Apply one observation: checker `checker_index` said `observed`
        about the probe whose signature is `probe`.

        Returns how many candidates were eliminated. Eliminating all of
        them is allowed; the engine is then EXHAUSTED.
        """
        if not 0 <= checker_index < len(self.checkers):
            raise IndexError(
                f"checker index {checker_index} not in [0, {len(self.checkers)})"
            )
        if len(probe) != len(self.checkers):
            raise LogicError(
                f"probe has {len(probe)} slots, engine has {len(self.checkers)} checkers"
            )
        observed = bool(observed)

        doomed = [
            candidate
            for candidate, signature in self._candidate_to_signature.items()
            if not signature.compliant_with(checker_index, probe, observed)
        ]
        for candidate in doomed:
            self._forget(candidate)

        self.step += 1
        self.history.append({
            "step": self.step,
            "probe": str(probe),
            "checker_index": checker_index,
            "checker_id": self.checkers[checker_index].id,
            "observed": observed,
            "eliminated": len(doomed),
            "remaining": self.remaining_count(),
        })

        if self.verbose:
            checker = self.checkers[checker_index]
            verdict = "true" if observed else "false"
            print(f"\n--- Step {self.step}: checker {checker.id} said {verdict} on {probe} ---")
            for candidate in sorted(doomed):
                print(f"  [eliminated] {candidate}")
            print(f"  Remaining candidates: {self.remaining_count()}")

        return len(doomed)

    def analyze_probe(self, probe: Candidate, checker_index: int,
                      observed: bool) -> int:
        """analyze_result with the probe's signature evaluated for you."""
        return self.analyze_result(self.signature_of(probe), checker_index, observed)

    def _forget(self, candidate):
        signature = self._candidate_to_signature.pop(candidate)
        group = self._signature_to_candidates[signature]
        group.discard(candidate)
        if not group:
            del self._signature_to_candidates[signature]
