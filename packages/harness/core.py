"""
Experiment harness core primitives.

- run_case:  one automated guesser against one fresh adversarial session.
- run_batch: many cases in sequence with derived seeds.

There is no fixed secret: the adversary decides what the secret "was" only as
the feedback forces it to.  A case is a success if the guesser gets the
all-correct pattern within the turn budget.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations
import logging
import random
import time
from typing import Dict, Iterable, List, Tuple

from packages.adversary import AdversarialSession, MAX_TURNS
from packages.engine import FeedbackPattern, filter_candidates

log = logging.getLogger(__name__)


def _check_turns(max_turns: int) -> None:
    """Guardrail: a game needs at least one row."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        solver,
        *,
        answers: Iterable[str],
        allowed: Iterable[str],
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play `solver` against the adversary until it wins or runs out of turns.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        answers:   candidate-secret list the adversary starts from
        allowed:   all words permitted as guesses
        max_turns: turn budget (6 on the classic board)
        seed:      seeds both the solver and the adversary's tie-breaks

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (int),
            revealed (str)
    """
    _check_turns(max_turns)

    answers = list(answers)
    allowed = list(allowed)
    solver.reset(allowed=allowed, answers=answers, seed=seed)

    session = AdversarialSession(rng=random.Random(seed), max_turns=max_turns)
    session.start(answers)

    history: List[Tuple[str, FeedbackPattern]] = []
    # The solver's view, rebuilt from public feedback only
    candidates = list(session.current())

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "allowed": allowed,
        }
        guess = solver.next_guess(state)

        patt = session.apply_guess(guess)
        history.append((session.history[-1][0], patt))

        if patt.is_win:
            break

        candidates = filter_candidates(candidates, [history[-1]])

    dt = (time.perf_counter() - t0) * 1000.0
    result = {
        "success": session.is_won,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "remaining": len(session.current()),
        "revealed": session.reveal(),
    }
    log.debug("case seed=%s success=%s guesses=%d", seed, result["success"], result["guesses"])
    return result


def run_batch(
        solver,
        *,
        answers: List[str],
        allowed: List[str],
        games: int,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run `games` cases back-to-back.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    _check_turns(max_turns)

    out: List[Dict] = []
    for idx in range(1, games + 1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, answers=answers, allowed=allowed,
                            max_turns=max_turns, seed=case_seed))
    return out
