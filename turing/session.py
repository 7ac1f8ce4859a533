"""
The runtime driver: who asks the questions and keeps the record.

Prompter hands out integers. It first consumes a comma-separated script
("3,2,7,14,123,0,1"), then falls back to asking the human. Every value it
hands out is written to a log file in the same comma-separated form, so
any session can be replayed by passing its log back in as a script.

SessionRecord is the serializable side of a session: which checkers were
chosen and which observations were made. Replaying it rebuilds the
engine exactly, since the engine is a pure function of those inputs.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Optional
import json

from .core.candidate import Candidate
from .core.checker import Catalog
from .core.engine import Engine, Phase
from .visualization import print_catalog, print_engine, print_outcome


class Prompter:
    def __init__(
        self,
        script: str = "",
        log_path: Optional[str] = None,
        input_fn: Optional[Callable] = None,
    ):
        self.pending = deque(t.strip() for t in script.split(",") if t.strip())
        self.log_path = log_path
        self.input_fn = input_fn or input
        self.entered = []

    @property
    def script(self) -> str:
        return ",".join(str(v) for v in self.entered)

    def next_int(self, prompt: str) -> int:
        """
        The next value: scripted if any are left, typed otherwise.

        A bad scripted token is an error (the script is wrong). Bad typed
        input just asks again; 'q' aborts the session.
        """
        print(prompt)
        if self.pending:
            token = self.pending.popleft()
            try:
                value = int(token)
            except ValueError:
                raise ValueError(f"Invalid scripted value {token!r}") from None
            print(value)
        else:
            while True:
                choice = self.input_fn("> ").strip()
                if choice.lower() in ('q', 'quit', 'exit'):
                    raise KeyboardInterrupt
                try:
                    value = int(choice)
                    break
                except ValueError:
                    print("Enter a number, or 'q' to quit.")

        self.entered.append(value)
        if self.log_path:
            with open(self.log_path, "w") as f:
                f.write(self.script + "\n")
        return value


@dataclass
class SessionRecord:
    """
    Everything needed to rebuild an engine.

    checker_ids:      chosen checkers, in slot order
    observations:     [probe number, checker index, observed] per round
    evict_ambiguous:  engine mode
    """
    checker_ids: list = field(default_factory=list)
    observations: list = field(default_factory=list)
    evict_ambiguous: bool = True

    def record(self, probe: Candidate, checker_index: int, observed: bool):
        self.observations.append([probe.number, checker_index, bool(observed)])

    def replay(self, catalog: Catalog, verbose: bool = False) -> Engine:
        engine = Engine(self.checker_ids, catalog,
                        evict_ambiguous=self.evict_ambiguous, verbose=verbose)
        for number, checker_index, observed in self.observations:
            engine.analyze_probe(Candidate.from_number(number), checker_index, observed)
        return engine

    def to_dict(self):
        return {
            "checker_ids": list(self.checker_ids),
            "observations": [list(o) for o in self.observations],
            "evict_ambiguous": self.evict_ambiguous,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(
            checker_ids=[int(i) for i in d["checker_ids"]],
            observations=[[int(p), int(i), bool(o)] for p, i, o in d.get("observations", [])],
            evict_ambiguous=d.get("evict_ambiguous", True),
        )

    def save(self, path="turing_session.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="turing_session.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))


def choose_checkers(prompter: Prompter, catalog: Catalog) -> list:
    """Ask how many checkers are in play, then which ones."""
    count = prompter.next_int("How many verifiers ?")
    while count < 1:
        print("At least one verifier is needed.")
        count = prompter.next_int("How many verifiers ?")
    print(f"You define {count} verifiers")
    print_catalog(catalog)

    checker_ids = []
    while len(checker_ids) < count:
        checker_id = prompter.next_int(f"Verifier {len(checker_ids) + 1}/{count} ID:")
        if checker_id not in catalog:
            print(f"  No checker with ID {checker_id}")
            continue
        checker_ids.append(checker_id)
    return checker_ids


def run_session(
    prompter: Prompter,
    catalog: Catalog,
    checker_ids: Optional[list] = None,
    record: Optional[SessionRecord] = None,
    evict_ambiguous: bool = True,
    save_path: Optional[str] = None,
    verbose: bool = True,
):
    """
    Play one game: pick checkers, then probe and report until the code
    is found, the observations contradict each other, or the player
    stops (probe 0).

    Args:
        prompter:         value source
        catalog:          checker catalog
        checker_ids:      skip the checker questions and use these
        record:           resume a saved session instead of starting fresh
        evict_ambiguous:  engine mode for a fresh session
        save_path:        if set, save the record after each observation
        verbose:          print engine progress

    Returns (engine, record).
    """
    if record is not None:
        engine = record.replay(catalog, verbose=verbose)
    else:
        if checker_ids is None:
            checker_ids = choose_checkers(prompter, catalog)
        record = SessionRecord(list(checker_ids), [], evict_ambiguous)
        engine = Engine(checker_ids, catalog,
                        evict_ambiguous=evict_ambiguous, verbose=verbose)

    print_engine(engine, show_candidates=verbose)
    last_index = len(engine.checkers) - 1

    while engine.phase is Phase.READY:
        number = prompter.next_int("Probe code (e.g. 153), 0 to stop:")
        if number == 0:
            break
        try:
            probe = Candidate.from_number(number)
        except ValueError as e:
            print(f"  {e}")
            continue
        signature = engine.signature_of(probe)
        print(f"Probe {probe} -> {signature}")

        while engine.phase is Phase.READY:
            index = prompter.next_int(
                f"Verifier index [0-{last_index}], -1 for a new probe:"
            )
            if index < 0:
                break
            if index > last_index:
                print(f"  Verifier index should be in [0-{last_index}] : {index}")
                continue
            result = prompter.next_int("Result (1 = true, 0 = false):")
            while result not in (0, 1):
                print(f"  Result should be 0 or 1 : {result}")
                result = prompter.next_int("Result (1 = true, 0 = false):")
            observed = result == 1
            engine.analyze_result(signature, index, observed)
            record.record(probe, index, observed)
            if save_path:
                record.save(save_path)
            print(f"{engine.remaining_count()} candidates remaining")

    print_outcome(engine)
    return engine, record
