"""
The two word corpora a game is played with.

  - candidates : the secrets the adversary may be hiding (ordered, unique)
  - allowed    : every word a player may submit

Both are loaded once and never mutated; any number of sessions can share one
Corpora instance because AdversarialSession.start() copies the candidates.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Tuple

from packages.engine import normalize_word, validate_guess
from .io import read_words


@dataclass(frozen=True)
class Corpora:
    candidates: Tuple[str, ...]
    allowed: FrozenSet[str]

    @classmethod
    def from_words(cls, candidates: Iterable[str], allowed: Iterable[str]) -> "Corpora":
        cands = tuple(dict.fromkeys(normalize_word(w) for w in candidates))
        # a secret is always a legal guess, even if the allowed list omits it
        allowed_set = frozenset(normalize_word(w) for w in allowed) | frozenset(cands)
        return cls(candidates=cands, allowed=allowed_set)

    def is_allowed(self, word: str) -> bool:
        return validate_guess(word, self.allowed)


def load_corpora(answers_path: Path | str, allowed_path: Path | str | None = None) -> Corpora:
    """
    Load the candidate-secret list and (optionally) the allowed-guess list.

    Without an allowed list, only the candidates themselves may be guessed.
    """
    answers = read_words(answers_path)
    allowed = read_words(allowed_path) if allowed_path is not None else []
    return Corpora.from_words(answers, allowed)
