"""
Word well-formedness and guess validation.

Two separate questions live here:
  - normalize_word: "is this a 5-letter word at all?"  The engine only ever
    sees words that passed this check; anything else is MalformedWordError.
  - validate_guess: "may the player submit this right now?"  That is a plain
    dictionary lookup done by the presentation layer before it calls the
    adversary; the engine itself never consults the allowed list.
"""

from typing import Iterable, Set

from .errors import MalformedWordError

WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_ALPHABET_SET = frozenset(ALPHABET)


def normalize_word(word) -> str:
    """
    Return `word` stripped and lowercased, or raise MalformedWordError.

    Words are never truncated or padded: "cranes" and "cran" are both errors.
    """
    if not isinstance(word, str):
        raise MalformedWordError(word, "not a string")

    w = word.strip().lower()
    if len(w) != WORD_LENGTH:
        raise MalformedWordError(word, f"expected {WORD_LENGTH} letters, got {len(w)}")
    if not _ALPHABET_SET.issuperset(w):
        raise MalformedWordError(word, "only ASCII letters a-z are allowed")
    return w


def is_well_formed(word) -> bool:
    try:
        normalize_word(word)
    except MalformedWordError:
        return False
    return True


def validate_guess(word, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is well formed and appears in `allowed`.

    Notes:
      - `allowed` may be a large list; pass a set/frozenset when calling this
        in a loop so the lookup stays O(1).
    """
    if not is_well_formed(word):
        return False

    w = normalize_word(word)
    if isinstance(allowed, (set, frozenset)):
        return w in allowed
    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set
