"""
Reference scorer: feedback for a single (guess, secret) pair.

This is the ordinary referee a normal word game would use.  The adversary
never calls it (it reasons through consistency.is_consistent instead), but
the automated guessers use it to simulate outcomes cheaply and the tests use
it as an oracle for the checker.

Algorithm (two-pass, canonical):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     of the secret.
  2) Second pass, left to right, marks yellows only while the letter still
     has remaining count.
"""

from collections import Counter

from .feedback import FeedbackLabel, FeedbackPattern
from .validation import normalize_word


def score(guess: str, answer: str) -> FeedbackPattern:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Examples:
      str(score("belle", "level")) -> "-GYYY"
      str(score("lemon", "level")) -> "GG---"
    """
    guess = normalize_word(guess)
    answer = normalize_word(answer)

    labels = [FeedbackLabel.ABSENT] * len(guess)

    # Pass 1: greens, and leftover counts for the yellows in pass 2
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            labels[i] = FeedbackLabel.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: yellows capped by the true multiplicity in the answer
    for i, g in enumerate(guess):
        if labels[i] is FeedbackLabel.CORRECT:
            continue
        if remaining[g] > 0:
            labels[i] = FeedbackLabel.PRESENT
            remaining[g] -= 1

    return FeedbackPattern(tuple(labels))
