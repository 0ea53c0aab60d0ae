# apps/cli/run.py
"""
CLI entry point for benchmarking automated guessers against the adversary.

This script:
  1) Validates the word lists (prints counts + SHA, checks answers ⊆ allowed).
  2) Loads the lists and instantiates each requested solver.
  3) Plays N games per solver with a live progress indicator and writes,
     per solver:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word list hashes, git commit, win rate
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from packages.adversary import MAX_TURNS
from packages.datasets import load_corpora, pretty_summary, validate_wordlists
from packages.harness import run_case
from packages.harness.io import (
    git_commit_or_unknown, summarize, timestamp_id, write_csv, write_manifest,
)
from packages.solvers import create_solver, describe_solvers, get_solver_ids

log = logging.getLogger("apps.cli.run")


def _run_solver(solver_id: str, *, answers: List[str], allowed: List[str], games: int,
                max_turns: int, seed: int, mode: str) -> List[Dict]:
    solver = create_solver(solver_id)
    seeds = [seed + idx * 1013904223 for idx in range(1, games + 1)]  # LCG-ish stride
    iterator = tqdm(seeds, ncols=80, desc=solver_id, unit="game") if mode == "bar" else seeds

    results: List[Dict] = []
    start = time.time()
    last_print = 0.0
    for idx, case_seed in enumerate(iterator, 1):
        r = run_case(solver, answers=answers, allowed=allowed,
                     max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        r["seed"] = case_seed
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == games):
                elapsed = now - start
                pct = 100.0 * idx / max(1, games)
                sys.stderr.write(f"\r[{solver_id}] [{idx}/{games}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def main():
    solver_choices = ", ".join(f"{sid} ({desc})" for sid, desc in describe_solvers().items())

    ap = argparse.ArgumentParser(description="absurdleAI — benchmark guessers against the adversary")
    ap.add_argument("--solvers", default="random_consistent",
                    help=f"comma-separated solver ids (from: {solver_choices})")
    ap.add_argument("--answers", default="packages/datasets/data/answers.txt",
                    help="candidate-secret list the adversary starts from")
    ap.add_argument("--allowed", default="packages/datasets/data/allowed.txt",
                    help="allowed guesses (should be a superset of answers)")
    ap.add_argument("--games", type=int, default=50, help="games per solver")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="turn budget per game")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    solver_ids = [s.strip() for s in args.solvers.split(",") if s.strip()]
    unknown = sorted(set(solver_ids) - set(get_solver_ids()))
    if unknown:
        ap.error(f"unknown solver id(s): {unknown}; choose from {solver_choices}")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.answers, args.allowed)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("word lists: %s", issue)

    # 2) Load lists into memory
    corpora = load_corpora(args.answers, args.allowed)
    answers = list(corpora.candidates)
    allowed = sorted(corpora.allowed)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    run_id = timestamp_id()
    commit = git_commit_or_unknown()

    # 3) One batch per solver
    for sid in solver_ids:
        results = _run_solver(sid, answers=answers, allowed=allowed, games=args.games,
                              max_turns=args.max_turns, seed=args.seed, mode=mode)
        totals = summarize(results)

        outdir = Path(args.outdir) / sid
        csv_path = outdir / f"run_{run_id}.csv"
        manifest_path = outdir / f"run_{run_id}_manifest.json"

        write_csv(results, str(csv_path), max_turns=args.max_turns)
        write_manifest({
            "run_id": run_id,
            "git_commit": commit,
            "config": vars(args),
            "wordlists": rep,
            "solver_id": sid,
            "solver": describe_solvers()[sid],
            **totals,
        }, str(manifest_path))

        print(f"{sid}: {totals['wins']}/{totals['num_cases']} wins")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
