# apps/cli/play.py
"""
Play against the adversary in the terminal.

The adversary never commits to a secret: every guess is answered with the
feedback that keeps the most words alive.  This app is only the presentation
layer: it reads guesses, checks them against the word lists, renders the
rows and the keyboard, and decides when the game is over.

Usage:
    python -m apps.cli.play --answers data/answers.txt --allowed data/allowed.txt
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Callable, Dict

from packages.adversary import AdversarialSession, MAX_TURNS
from packages.datasets import Corpora, load_corpora
from packages.engine import (
    WORD_LENGTH,
    FeedbackLabel,
    FeedbackPattern,
    MalformedWordError,
    normalize_word,
)

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

# Higher wins when a letter has been seen with several labels.
_RANK = {FeedbackLabel.ABSENT: 0, FeedbackLabel.PRESENT: 1, FeedbackLabel.CORRECT: 2}


class Keyboard:
    """Best label seen so far for each letter."""

    def __init__(self):
        self.states: Dict[str, FeedbackLabel] = {}

    def update(self, guess: str, pattern: FeedbackPattern) -> None:
        for ch, label in zip(guess, pattern):
            prev = self.states.get(ch)
            if prev is None or _RANK[label] > _RANK[prev]:
                self.states[ch] = label

    def render(self) -> str:
        lines = []
        for row in KEYBOARD_ROWS:
            keys = []
            for ch in row:
                state = self.states.get(ch)
                if state is FeedbackLabel.CORRECT:
                    keys.append(f"[{ch.upper()}]")
                elif state is FeedbackLabel.PRESENT:
                    keys.append(f"({ch.upper()})")
                elif state is FeedbackLabel.ABSENT:
                    keys.append(" . ")
                else:
                    keys.append(f" {ch} ")
            lines.append("".join(keys))
        return "\n".join(lines)


def render_row(guess: str, pattern: FeedbackPattern) -> str:
    """e.g. 'S L A T E   - - G - G'"""
    return f"{' '.join(guess.upper())}   {' '.join(str(pattern))}"


def play(
        session: AdversarialSession,
        corpora: Corpora,
        *,
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[..., None] = print,
) -> bool:
    """
    Run the turn loop on an already started session.  Returns True on a win.
    """
    keyboard = Keyboard()

    while not session.is_over:
        try:
            raw = input_fn(f"Guess {session.turn + 1}/{session.max_turns}: ")
        except EOFError:
            print_fn()
            return False

        raw = raw.strip()
        if len(raw) != WORD_LENGTH:
            print_fn("Guess has to have five letters.")
            continue
        try:
            guess = normalize_word(raw)
        except MalformedWordError:
            print_fn("Guess may only use the letters a-z.")
            continue
        if not corpora.is_allowed(guess):
            print_fn("Not in word list")
            continue

        pattern = session.apply_guess(guess)
        keyboard.update(guess, pattern)
        print_fn(render_row(guess, pattern))
        print_fn(keyboard.render())

    if session.is_won:
        print_fn("Well done!")
        return True

    print_fn(session.reveal().upper())
    return False


def main():
    ap = argparse.ArgumentParser(description="absurdleAI — play against the adversary")
    ap.add_argument("--answers", default="packages/datasets/data/answers.txt",
                    help="candidate secrets, one word per line")
    ap.add_argument("--allowed", default=None,
                    help="allowed guesses (default: only the candidate secrets)")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="rows on the board")
    ap.add_argument("--seed", type=int, help="seed the adversary's tie-breaks")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    corpora = load_corpora(args.answers, args.allowed)
    session = AdversarialSession(rng=random.Random(args.seed), max_turns=args.max_turns)
    session.start(corpora.candidates)
    print(f"{len(corpora.candidates)} possible secrets. Good luck.")

    won = play(session, corpora)
    raise SystemExit(0 if won else 1)


if __name__ == "__main__":
    main()
