"""
Visualization and reporting utilities.
"""

from .core.checker import Catalog
from .core.engine import Engine, Phase


def print_catalog(catalog: Catalog):
    """List every registered checker and its branches."""
    for checker in catalog:
        branches = " | ".join(
            f"{i}: {checker.describe(i)}" for i in range(checker.grade)
        )
        print(f"  {checker.id:>3} {checker.name}  [{branches}]")


def print_engine(engine: Engine, show_candidates: bool = True):
    """Print a summary of the engine state."""
    d = engine.diagnostics()
    print(f"\n{'='*60}")
    print(f"Checkers: {', '.join(str(i) for i in engine.checker_ids)}")
    print(f"Step: {engine.step} | Phase: {engine.phase.value}")
    print(f"Reachable combinations: {d.reachable}")
    print(f"Set aside (anomalies):  {d.unclassified}")
    print(f"Evicted (ambiguous):    {d.evicted}")
    print(f"Remaining ({d.remaining}):")
    if show_candidates:
        for candidate in engine.remaining():
            print(f"  {candidate} -> {engine.related_signature(candidate)}")
    print(f"{'='*60}")


def print_anomalies(engine: Engine):
    """Print every checker anomaly found while classifying the universe."""
    if not engine.anomalies:
        print("No checker anomalies.")
        return
    print(f"\n{len(engine.anomalies)} checker anomalies:")
    for anomaly in engine.anomalies:
        print(f"  {anomaly}")


def print_history(engine: Engine):
    """Print the observation history."""
    print(f"\n{'='*60}")
    print("Observation history:")
    print(f"{'='*60}")
    for entry in engine.history:
        verdict = "true" if entry["observed"] else "false"
        print(f"  Step {entry['step']}: checker {entry['checker_id']} said {verdict} "
              f"on {entry['probe']} -> eliminated {entry['eliminated']}, "
              f"{entry['remaining']} left")


def print_outcome(engine: Engine):
    phase = engine.phase
    if phase is Phase.SOLVED:
        print(f"\nSolved: the code is {engine.solution} ({engine.solution.number})")
    elif phase is Phase.EXHAUSTED:
        print("\nNo candidate left: the observations contradict each other.")
    else:
        print(f"\nStopped with {engine.remaining_count()} candidates left.")
