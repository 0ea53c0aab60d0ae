"""
Adversarial feedback selection.

Instead of scoring the guess against one fixed secret, the adversary looks at
every feedback pattern it could give, counts how many candidate secrets would
survive each one, and answers with a pattern that keeps the most alive.  The
surviving bucket becomes the next turn's candidate set, so one ply of lookahead
is enough.

Tie-break:
  - among patterns tied for the largest bucket, the all-correct pattern is
    dropped whenever some other pattern ties with it (the player must not be
    handed the win while an equally hard reply exists)
  - the remaining ties are broken uniformly at random with the injected rng
  - if all-correct is the unique largest bucket it is chosen: the guess is
    the only candidate left (forced win)
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, NamedTuple, Tuple

from packages.engine import (
    ALL_CORRECT,
    EmptyCandidateSetError,
    FeedbackPattern,
    normalize_word,
    partition,
)

log = logging.getLogger(__name__)


class Selection(NamedTuple):
    """The adversary's answer: the pattern shown and the secrets it leaves."""
    pattern: FeedbackPattern
    candidates: Tuple[str, ...]


def select(guess: str, candidates: Iterable[str], rng=None) -> Selection:
    """
    Choose the hardest feedback pattern for `guess` that some candidate allows.

    Args:
      guess      : the player's 5-letter guess
      candidates : current candidate secrets (must be non-empty)
      rng        : anything with `randrange(n)`, e.g. random.Random(seed);
                   a fresh unseeded random.Random() when omitted

    Raises:
      EmptyCandidateSetError if `candidates` is empty
      MalformedWordError if the guess or a candidate is malformed
    """
    guess = normalize_word(guess)
    words = list(candidates)
    if not words:
        raise EmptyCandidateSetError("cannot select feedback against an empty candidate set")

    buckets = partition(guess, words)
    best = max(len(ws) for ws in buckets.values())
    # every candidate lands in exactly one bucket
    assert best > 0, "no feedback pattern is consistent with any candidate"

    ties = [p for p, ws in buckets.items() if len(ws) == best]
    if len(ties) > 1 and ALL_CORRECT in ties:
        ties.remove(ALL_CORRECT)

    if rng is None:
        rng = random.Random()
    chosen = ties[rng.randrange(len(ties))]

    log.debug("guess=%s candidates=%d max_bucket=%d ties=%d chosen=%s",
              guess, len(words), best, len(ties), chosen)
    return Selection(chosen, tuple(buckets[chosen]))
