"""
Turing: candidate elimination solver for the Turing Machine code puzzle.

A hidden code of three digits (blue triangle, yellow square, purple
circle, each 1-5) is found by proposing probe codes to a handful of
verifier cards and pruning every candidate that cannot agree with what
the verifiers said.

Usage:
    python -m turing                         (asks for everything)
    python -m turing --checkers 2,7,13       (skip the verifier questions)
    python -m turing --script 3,2,7,13,123   (replay answers, then ask)
    python -m turing --list                  (show the verifier catalog)
"""

from .core.candidate import Candidate, MIN_VALUE, MAX_VALUE, make_universe
from .core.checker import Branch, Checker, Catalog
from .core.signature import OutcomeSignature
from .core.engine import Engine, Phase, Diagnostics, reachable_signatures
from .core.errors import LogicError, Anomaly
from .checkers import CHECKERS, build_default_catalog
from .session import Prompter, SessionRecord, choose_checkers, run_session

__all__ = [
    "Candidate", "MIN_VALUE", "MAX_VALUE", "make_universe",
    "Branch", "Checker", "Catalog",
    "OutcomeSignature",
    "Engine", "Phase", "Diagnostics", "reachable_signatures",
    "LogicError", "Anomaly",
    "CHECKERS", "build_default_catalog",
    "Prompter", "SessionRecord", "choose_checkers", "run_session",
]
