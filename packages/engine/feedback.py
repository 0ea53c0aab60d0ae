"""
Feedback alphabet and the full feedback state space.

Each guessed letter gets one of three labels:
  - 'G' CORRECT : letter matches the secret at this position
  - 'Y' PRESENT : letter occurs elsewhere in the secret (duplicate-aware)
  - '-' ABSENT  : no unclaimed occurrence left to justify anything better

A FeedbackPattern is five labels, one per guess position.  There are exactly
3^5 = 243 of them; enumerate_patterns() lists them all in a fixed order
(ABSENT < PRESENT < CORRECT, last position varying fastest).
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterator, Tuple

from .validation import WORD_LENGTH


class FeedbackLabel(str, Enum):
    ABSENT = "-"
    PRESENT = "Y"
    CORRECT = "G"

    def __str__(self) -> str:
        return self.value


# Enumeration order of labels within one position.
LABEL_ORDER: Tuple[FeedbackLabel, ...] = (
    FeedbackLabel.ABSENT,
    FeedbackLabel.PRESENT,
    FeedbackLabel.CORRECT,
)


@dataclass(frozen=True)
class FeedbackPattern:
    labels: Tuple[FeedbackLabel, ...]

    def __post_init__(self):
        labels = tuple(FeedbackLabel(x) for x in self.labels)
        if len(labels) != WORD_LENGTH:
            raise ValueError(f"pattern must have {WORD_LENGTH} labels, got {len(labels)}")
        object.__setattr__(self, "labels", labels)

    @classmethod
    def from_string(cls, text: str) -> "FeedbackPattern":
        """Parse the textual form, e.g. "GY--G"."""
        try:
            return cls(tuple(FeedbackLabel(ch) for ch in text))
        except ValueError as e:
            raise ValueError(f"invalid feedback pattern {text!r}") from e

    @property
    def is_win(self) -> bool:
        return all(label is FeedbackLabel.CORRECT for label in self.labels)

    def __iter__(self) -> Iterator[FeedbackLabel]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, i: int) -> FeedbackLabel:
        return self.labels[i]

    def __str__(self) -> str:
        return "".join(label.value for label in self.labels)


ALL_CORRECT = FeedbackPattern((FeedbackLabel.CORRECT,) * WORD_LENGTH)


@lru_cache(maxsize=None)
def enumerate_patterns() -> Tuple[FeedbackPattern, ...]:
    """All 243 feedback patterns, position 5 varying fastest."""
    return tuple(
        FeedbackPattern(labels)
        for labels in itertools.product(LABEL_ORDER, repeat=WORD_LENGTH)
    )
