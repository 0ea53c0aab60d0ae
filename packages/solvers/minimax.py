"""
Minimax guesser.

The adversary always answers with the largest bucket, so the only thing that
matters about a guess is the size of its WORST bucket against the current
candidates.  Pick the guess that minimizes it.

Tie-break, in order:
  - more distinct patterns (more ways for the adversary to be cornered later)
  - a guess that is itself a candidate (it can still be the secret)
  - seeded RNG

When the candidate set is large, only a pre-ranked slice of the allowed list
is scored (distinct-letter coverage of the current candidates).
"""

from __future__ import annotations
from typing import Dict, List, Set, Tuple
from .base import BaseSolver, register
from packages.engine import bucket_sizes


def _worst_and_distinct(guess: str, candidates: List[str]) -> Tuple[int, int]:
    sizes = bucket_sizes(guess, candidates)
    if not sizes:
        return 0, 0
    return max(sizes.values()), len(sizes)


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (smallest worst bucket)"
    version = "1.0.0"

    # If candidates <= this, search only among candidates
    CANDIDATE_ONLY_LIMIT = 3
    POOL_CAP = 300

    def _coverage(self, w: str, letter_counts: Dict[str, int]) -> int:
        return sum(letter_counts.get(ch, 0) for ch in set(w))

    def _select_pool(self, candidates: List[str], allowed: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return list(candidates)
        letter_counts: Dict[str, int] = {}
        for w in candidates:
            for ch in set(w):
                letter_counts[ch] = letter_counts.get(ch, 0) + 1
        ranked = sorted(allowed, key=lambda w: self._coverage(w, letter_counts), reverse=True)
        pool = ranked[: self.POOL_CAP]
        # keep every candidate in play when that is cheap
        if len(candidates) <= self.POOL_CAP:
            seen = set(pool)
            pool += [w for w in candidates if w not in seen]
        return pool

    def next_guess(self, state: dict) -> str:
        candidates = self.candidates(state)
        allowed: List[str] = state["allowed"]

        pool = self._select_pool(candidates, allowed) if candidates else list(allowed)
        if not pool:
            raise ValueError("no candidates and no allowed guesses to choose from")

        cand_set: Set[str] = set(candidates)
        best_key = None
        best: List[str] = []
        for g in pool:
            worst, distinct = _worst_and_distinct(g, candidates)
            key = (worst, -distinct, 0 if g in cand_set else 1)
            if best_key is None or key < best_key:
                best_key, best = key, [g]
            elif key == best_key:
                best.append(g)

        return best[self.rng.randrange(len(best))]
