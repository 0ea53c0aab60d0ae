from __future__ import annotations
import random
from typing import Dict, List, Type

from packages.engine import filter_candidates

# Solver classes by id, filled by @register at import time.
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    sid = getattr(cls, "id", None)
    if not sid or sid == BaseSolver.id:
        raise ValueError(f"{cls.__name__} must define its own non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseSolver:
    """
    An automated player.  It sees what a human would see: the allowed guesses,
    the public candidate-secret list, and the (guess, pattern) history the
    adversary has revealed.  It never sees the adversary's own candidate set.

    Harness state passed to next_guess():
        turn       : 1-based turn number
        history    : list of (guess, FeedbackPattern)
        allowed    : all legal guesses
        candidates : optional; words consistent with the history so far
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.allowed: List[str] = []
        self.answers: List[str] = []
        self.rng = random.Random()

    def reset(self, *, allowed: List[str], answers: List[str],
              seed: int | None = None) -> None:
        self.allowed = list(allowed)
        self.answers = list(answers)
        if seed is not None:
            self.rng.seed(seed)

    def candidates(self, state: dict) -> List[str]:
        """Words still possible, replaying the history when the harness omits them."""
        if "candidates" in state:
            return list(state["candidates"])
        return filter_candidates(self.answers, state.get("history", []))

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
