"""
Constraint validity checker.

Question answered: "could `word` be the secret, given that the player guessed
`guess` and was told `pattern`?"  The adversary asks this for every
(pattern, candidate) pair to find out which secrets survive each possible
answer it could give.

Duplicate letters are the whole difficulty.  The checker keeps a table of how
many occurrences of each letter in `word` are still unclaimed:

  1) Correct pass: every CORRECT position must match exactly and claims one
     occurrence.  This runs first because exact matches take priority.
  2) Present/Absent pass, left to right over the other positions:
       - a position whose letters match exactly cannot be anything but CORRECT
       - PRESENT needs the letter to occur in `word` with an unclaimed
         occurrence left, and claims it
       - ABSENT is fine for a letter `word` lacks, or whose occurrences are
         all claimed; with an occurrence still unclaimed it should have been
         PRESENT

Walking Present and Absent positions together in guess order means that for
a repeated letter the earlier position gets the yellow, so exactly one
pattern is consistent for every (guess, word) pair, the same one score()
produces.

Splitting this walk back into a Present pass and a separate Absent pass would
let "speed" vs "hello" match both "--Y--" and "---Y-"; keep it single.
"""

from collections import Counter
from typing import Mapping, Sequence

from .feedback import FeedbackLabel, FeedbackPattern
from .validation import normalize_word


def is_consistent(guess: str, word: str, pattern: FeedbackPattern) -> bool:
    """
    Return True iff guessing `guess` against secret `word` yields `pattern`.

    Raises MalformedWordError if either word is not 5 letters a–z.
    """
    guess = normalize_word(guess)
    word = normalize_word(word)
    return _consistent(guess, word, Counter(word), pattern.labels)


def _consistent(guess: str, word: str, letter_counts: Mapping[str, int],
                labels: Sequence[FeedbackLabel]) -> bool:
    """
    Core check on already-normalized words.

    `letter_counts` is the multiplicity table of `word`; it is copied, never
    mutated, so callers can share one table across all 243 patterns.
    """
    available = dict(letter_counts)

    # Correct pass
    for i, label in enumerate(labels):
        if label is FeedbackLabel.CORRECT:
            if guess[i] != word[i]:
                return False
            available[guess[i]] -= 1

    # Present / Absent pass
    for i, label in enumerate(labels):
        if label is FeedbackLabel.CORRECT:
            continue

        g = guess[i]
        if g == word[i]:
            # a true match must be reported CORRECT
            return False

        left = available.get(g, 0)
        if label is FeedbackLabel.PRESENT:
            if g not in letter_counts or left <= 0:
                return False
            available[g] = left - 1
        elif left > 0:
            # ABSENT while an unclaimed occurrence remains
            return False

    return True
