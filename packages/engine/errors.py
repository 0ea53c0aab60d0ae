"""
Exceptions raised at the engine/adversary boundary.

The taxonomy is deliberately small: inputs are either malformed words or the
caller asked the adversary to play on after the game was decided.
"""

from __future__ import annotations


class AdversaryError(Exception):
    """Base class for every error raised by the engine and the adversary."""


class MalformedWordError(AdversaryError, ValueError):
    """A guess or candidate is not exactly 5 letters a–z."""

    def __init__(self, word, reason: str = "expected exactly 5 letters a-z"):
        self.word = word
        self.reason = reason
        super().__init__(f"malformed word {word!r}: {reason}")


class EmptyCandidateSetError(AdversaryError, RuntimeError):
    """The adversary was asked to answer with nothing left to hide."""
