from .candidate import Candidate, MIN_VALUE, MAX_VALUE, make_universe
from .checker import Branch, Checker, Catalog
from .signature import OutcomeSignature
from .engine import Engine, Phase, Diagnostics, reachable_signatures, relate
from .errors import LogicError, Anomaly

__all__ = [
    "Candidate", "MIN_VALUE", "MAX_VALUE", "make_universe",
    "Branch", "Checker", "Catalog",
    "OutcomeSignature",
    "Engine", "Phase", "Diagnostics", "reachable_signatures", "relate",
    "LogicError", "Anomaly",
]
