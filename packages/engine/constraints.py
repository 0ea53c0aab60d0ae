"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the candidate-secret list)
  - a history of (guess, pattern) pairs revealed by the adversary

Return:
  - words that are consistent with ALL feedback seen so far.

A guesser playing against the adversary only ever sees the history, never the
adversary's own candidate set; replaying the history through the checker
recovers exactly that set.
"""

from collections import Counter
from typing import Iterable, List, Tuple

from .consistency import _consistent
from .errors import MalformedWordError
from .feedback import FeedbackPattern
from .validation import normalize_word

# History is a sequence of (guess, pattern) tuples produced by the adversary.
History = Iterable[Tuple[str, FeedbackPattern]]


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded pattern for every
    (guess, pattern) in `history`.

    Malformed entries in `words` are skipped (word lists are external input);
    a malformed guess in `history` raises MalformedWordError.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    steps = [(normalize_word(g), patt.labels) for g, patt in history]

    out: List[str] = []
    for raw in words:
        try:
            w = normalize_word(raw)
        except MalformedWordError:
            continue

        counts = Counter(w)
        if all(_consistent(g, w, counts, labels) for g, labels in steps):
            out.append(w)

    return out
