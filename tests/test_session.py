import random

import pytest
from packages.adversary import AdversarialSession
from packages.engine import (
    ALL_CORRECT, EmptyCandidateSetError, MalformedWordError, filter_candidates,
)

WORDS = ["crane", "slate", "plane", "shale", "trace", "cared", "racer", "scoop",
         "level", "belle", "erase", "geese", "sassy", "there", "bloom", "stump",
         "fight", "eerie", "speed", "hello"]


def _started(words=WORDS, seed=11, **kw):
    s = AdversarialSession(rng=random.Random(seed), **kw)
    s.start(words)
    return s


def test_start_copies_normalizes_and_dedupes():
    words = ["Crane", "slate", "crane", "plane"]
    s = _started(words)
    words.append("shale")
    assert s.current() == ("crane", "slate", "plane")
    assert s.turn == 0 and not s.is_won and not s.is_over


def test_start_rejects_empty_and_malformed_lists():
    s = AdversarialSession()
    with pytest.raises(EmptyCandidateSetError):
        s.start([])
    with pytest.raises(MalformedWordError):
        s.start(["crane", "nope"])


def test_apply_before_start_is_rejected():
    with pytest.raises(EmptyCandidateSetError):
        AdversarialSession().apply_guess("crane")


@pytest.mark.parametrize("seed", range(5))
def test_candidates_only_shrink_and_stay_consistent(seed):
    s = _started(seed=seed, max_turns=10)
    rng = random.Random(seed)
    while not s.is_over:
        before = set(s.current())
        s.apply_guess(rng.choice(WORDS))
        after = set(s.current())
        assert after <= before
        assert len(after) <= len(before)
        # the owned set is exactly what the revealed feedback still allows
        assert list(s.current()) == filter_candidates(WORDS, s.history)


def test_forced_win_then_no_more_guesses():
    s = _started(["crane"])
    assert s.apply_guess("CRANE") == ALL_CORRECT
    assert s.is_won and s.is_over
    assert s.reveal() == "crane"
    with pytest.raises(EmptyCandidateSetError):
        s.apply_guess("crane")


def test_scenario_excludes_the_guess_when_a_tie_exists():
    for seed in range(50):
        s = _started(["crane", "slate", "plane", "shale"], seed=seed)
        pattern = s.apply_guess("slate")
        assert pattern != ALL_CORRECT
        assert "slate" not in s.current()
        assert len(s.current()) == 1


def test_turn_budget_ends_the_game_without_a_win():
    s = _started(max_turns=1)
    s.apply_guess("crane")
    assert s.turn == 1
    assert s.is_over and not s.is_won
    assert s.reveal() in s.current()


def test_sessions_do_not_share_state():
    a = _started(seed=1)
    b = _started(seed=2)
    a.apply_guess("slate")
    assert b.current() == tuple(WORDS)
    assert b.history == []


def test_malformed_guess_leaves_session_untouched():
    s = _started()
    with pytest.raises(MalformedWordError):
        s.apply_guess("sl@te")
    assert s.current() == tuple(WORDS) and s.turn == 0


def test_invalid_max_turns():
    with pytest.raises(ValueError):
        AdversarialSession(max_turns=0)
