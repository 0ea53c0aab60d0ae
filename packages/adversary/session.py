"""
One adversarial game: the candidate set owned by a single puzzle attempt.

The session starts from a private copy of the candidate-secret list and, on
every guess, replaces that copy with the bucket the selector picked.  The
set therefore only ever shrinks, and every word in it is consistent with all
feedback given so far.

Turn limits and the win/lose screens belong to the caller: `is_over` and
`reveal()` are there to help it decide, but apply_guess() only refuses to
continue once the game has been won.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Tuple

from packages.engine import EmptyCandidateSetError, FeedbackPattern, normalize_word
from .selector import select

log = logging.getLogger(__name__)

# Classic six-row board.
MAX_TURNS = 6


class AdversarialSession:
    def __init__(self, rng: random.Random | None = None, max_turns: int = MAX_TURNS):
        if max_turns < 1:
            raise ValueError(f"max_turns must be >= 1; got {max_turns}")
        self.rng = rng if rng is not None else random.Random()
        self.max_turns = int(max_turns)
        self.history: List[Tuple[str, FeedbackPattern]] = []
        self._candidates: Tuple[str, ...] = ()

    def start(self, initial_candidates: Iterable[str]) -> None:
        """Begin a new attempt with a copy of `initial_candidates`."""
        # dict keeps first-seen order while dropping duplicates
        words = tuple(dict.fromkeys(normalize_word(w) for w in initial_candidates))
        if not words:
            raise EmptyCandidateSetError("a session needs at least one candidate secret")
        self._candidates = words
        self.history = []
        log.info("session started with %d candidate secrets", len(words))

    def current(self) -> Tuple[str, ...]:
        """The candidate secrets still in play."""
        return self._candidates

    @property
    def turn(self) -> int:
        """Number of guesses answered so far."""
        return len(self.history)

    @property
    def is_won(self) -> bool:
        return bool(self.history) and self.history[-1][1].is_win

    @property
    def is_over(self) -> bool:
        return self.is_won or self.turn >= self.max_turns

    def apply_guess(self, guess: str) -> FeedbackPattern:
        """
        Answer `guess` adversarially and narrow the candidate set.

        Raises:
          EmptyCandidateSetError if the session was never started, is empty,
          or has already been won
          MalformedWordError if `guess` is malformed
        """
        if self.is_won:
            raise EmptyCandidateSetError("the game is already won; no further guesses")
        if not self._candidates:
            raise EmptyCandidateSetError("no candidate secrets left; call start() first")

        guess = normalize_word(guess)
        before = len(self._candidates)
        pattern, remaining = select(guess, self._candidates, rng=self.rng)
        self._candidates = remaining
        self.history.append((guess, pattern))

        log.info("turn %d: %s -> %s (%d -> %d candidates)",
                 self.turn, guess, pattern, before, len(remaining))
        return pattern

    def reveal(self) -> str:
        """
        The word shown when the game ends.

        After a win that is the winning guess; otherwise a random survivor,
        any of which is a secret consistent with everything the player saw.
        """
        if self.is_won:
            return self.history[-1][0]
        if not self._candidates:
            raise EmptyCandidateSetError("nothing to reveal; call start() first")
        return self.rng.choice(self._candidates)
