"""
Random Consistent guesser.

Strategy:
  - Guess uniformly at random among the words still consistent with every
    pattern the adversary has shown (the harness passes them in as
    state["candidates"]).
  - If that set is somehow empty, fall back to the allowed list.

Against the adversary this is the baseline: it always guesses a possible
secret, so it can only win once a single candidate is left.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates = self.candidates(state)
        pool: List[str] = candidates if candidates else state["allowed"]
        if not pool:
            raise ValueError("no candidates and no allowed guesses to choose from")
        return pool[self.rng.randrange(len(pool))]
