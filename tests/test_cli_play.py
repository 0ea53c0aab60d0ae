import random

from apps.cli.play import Keyboard, play, render_row
from packages.adversary import AdversarialSession
from packages.datasets import Corpora
from packages.engine import FeedbackPattern


def _scripted(lines):
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def _session(words, max_turns=6):
    s = AdversarialSession(rng=random.Random(0), max_turns=max_turns)
    s.start(words)
    return s


def test_play_rejects_bad_guesses_then_wins():
    corpora = Corpora.from_words(["crane"], ["slate"])
    out = []
    won = play(_session(corpora.candidates), corpora,
               input_fn=_scripted(["abc", "cr4ne", "zzzzz", "crane"]),
               print_fn=lambda *a: out.append(" ".join(map(str, a))))
    assert won is True
    assert "Guess has to have five letters." in out
    assert "Guess may only use the letters a-z." in out
    assert "Not in word list" in out
    assert out[-1] == "Well done!"


def test_play_reveals_a_survivor_after_the_last_row():
    corpora = Corpora.from_words(["crane", "bloom"], [])
    out = []
    won = play(_session(corpora.candidates, max_turns=1), corpora,
               input_fn=_scripted(["crane"]),
               print_fn=lambda *a: out.append(" ".join(map(str, a))))
    assert won is False
    assert "C R A N E   - - - - -" in out
    assert out[-1] == "BLOOM"


def test_play_stops_on_end_of_input():
    corpora = Corpora.from_words(["crane", "bloom"], [])
    assert play(_session(corpora.candidates), corpora,
                input_fn=_scripted([]), print_fn=lambda *a: None) is False


def test_keyboard_keeps_the_best_label():
    kb = Keyboard()
    kb.update("slate", FeedbackPattern.from_string("Y-G--"))
    kb.update("sassy", FeedbackPattern.from_string("G----"))
    assert str(kb.states["s"]) == "G"
    assert str(kb.states["l"]) == "-"
    rendered = kb.render()
    assert "[S]" in rendered and "[A]" in rendered and " q " in rendered


def test_render_row():
    assert render_row("slate", FeedbackPattern.from_string("--G-G")) == "S L A T E   - - G - G"
