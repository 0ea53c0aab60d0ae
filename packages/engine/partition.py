"""
Partition engine: group candidate secrets by the feedback they allow.

For a fixed guess, every candidate is consistent with exactly one of the 243
patterns, so the buckets returned by partition() are disjoint and together
cover the whole candidate set.  Cost is 243 × |candidates| checks, each over
five letters; no caching is needed at Wordle scale.
"""

from collections import Counter, defaultdict
from typing import Dict, Iterable, List

from .consistency import _consistent
from .feedback import FeedbackPattern, enumerate_patterns
from .scoring import score
from .validation import normalize_word


def partition(guess: str, candidates: Iterable[str]) -> Dict[FeedbackPattern, List[str]]:
    """
    Map every feedback pattern to the candidates consistent with it.

    Returns:
      dict with all 243 patterns as keys (in enumeration order); values are
      lists keeping the input order of `candidates` and may be empty.
    """
    guess = normalize_word(guess)
    words = [normalize_word(w) for w in candidates]
    counts = [Counter(w) for w in words]

    out: Dict[FeedbackPattern, List[str]] = {}
    for pattern in enumerate_patterns():
        labels = pattern.labels
        out[pattern] = [
            w for w, c in zip(words, counts) if _consistent(guess, w, c, labels)
        ]
    return out


def bucket_sizes(guess: str, candidates: Iterable[str]) -> Dict[FeedbackPattern, int]:
    """
    Sizes of the non-empty buckets of partition(guess, candidates).

    Scores each candidate once instead of testing all 243 patterns, which is
    what the automated guessers need when they rank hundreds of guesses.
    """
    sizes: Dict[FeedbackPattern, int] = defaultdict(int)
    for w in candidates:
        sizes[score(guess, w)] += 1
    return dict(sizes)
