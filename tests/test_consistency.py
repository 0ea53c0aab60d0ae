import itertools

import pytest
from packages.engine import (
    ALL_CORRECT, FeedbackPattern, MalformedWordError, enumerate_patterns, is_consistent, score,
)

P = FeedbackPattern.from_string

WORDS = ["speed", "erase", "eerie", "there", "hello", "level", "belle", "crane", "sassy", "geese"]


def _consistent_patterns(guess, word):
    return [p for p in enumerate_patterns() if is_consistent(guess, word, p)]


@pytest.mark.parametrize("word", WORDS)
def test_guess_is_consistent_with_itself_as_all_correct(word):
    assert is_consistent(word, word, ALL_CORRECT)


def test_speed_against_erase():
    # s: erase has an s elsewhere; p: absent; both e's: erase has two e's,
    # neither in place; d: absent
    assert is_consistent("speed", "erase", P("Y-YY-"))
    assert _consistent_patterns("speed", "erase") == [P("Y-YY-")]


def test_surplus_duplicate_is_absent_and_the_first_one_gets_the_yellow():
    # hello has one e; speed guesses two
    assert is_consistent("speed", "hello", P("--Y--"))
    assert not is_consistent("speed", "hello", P("---Y-"))
    assert not is_consistent("speed", "hello", P("--YY-"))
    assert not is_consistent("speed", "hello", P("-----"))


def test_correct_claims_an_occurrence_before_present():
    # there: the final e is green, leaving one e for the first guessed e
    assert is_consistent("eerie", "there", P("Y-Y-G"))
    assert not is_consistent("eerie", "there", P("YYY-G"))
    assert _consistent_patterns("eerie", "there") == [P("Y-Y-G")]


def test_exact_match_must_be_reported_correct():
    assert not is_consistent("crane", "crane", P("YGGGG"))
    assert not is_consistent("crane", "crane", P("-GGGG"))


def test_present_requires_the_letter_in_the_word():
    assert not is_consistent("crane", "bloom", P("Y----"))
    assert is_consistent("crane", "bloom", P("-----"))


def test_correct_requires_a_positional_match():
    assert not is_consistent("crane", "slate", P("G----"))


@pytest.mark.parametrize("guess,word", list(itertools.product(WORDS, repeat=2)))
def test_exactly_one_pattern_matches_and_it_is_the_score(guess, word):
    assert _consistent_patterns(guess, word) == [score(guess, word)]


def test_case_is_ignored():
    assert is_consistent("CRANE", "Crane", ALL_CORRECT)


@pytest.mark.parametrize("guess,word", [("cranes", "crane"), ("crane", "cr4ne"), ("", "crane")])
def test_malformed_words_are_rejected(guess, word):
    with pytest.raises(MalformedWordError):
        is_consistent(guess, word, ALL_CORRECT)
