"""
Result files for benchmark runs against the adversary.

One CSV row per game: who played, which seed drove both the guesser and the
adversary's tie-breaks, how the game ended (win, or how many secrets were
still alive and which one got revealed), then the guess/pattern pairs.

Pattern cells carry a leading apostrophe: spreadsheets otherwise read
"-GYY-" as a formula and show #NAME?.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from statistics import mean
from typing import Dict, Iterable, List

RESULT_FIELDS = ["solver", "seed", "success", "guesses", "remaining", "revealed", "time_ms"]


def csv_fields(max_turns: int) -> List[str]:
    turns = [f"{kind}_{i}" for i in range(1, max_turns + 1) for kind in ("guess", "patt")]
    return RESULT_FIELDS + turns


def _cell(patt) -> str:
    text = "" if patt is None else str(patt)
    return f"'{text}" if text else ""


def result_row(result: Dict, max_turns: int) -> Dict:
    """Flatten one run_case() result into a CSV row; unused turns stay blank."""
    row = {
        "solver": result.get("solver_id", "?"),
        "seed": result.get("seed", ""),
        "success": result["success"],
        "guesses": result["guesses"],
        "remaining": result["remaining"],
        "revealed": result["revealed"],
        "time_ms": round(float(result["time_ms"]), 3),
    }
    history = result.get("history", [])
    for i in range(1, max_turns + 1):
        guess, patt = history[i - 1] if i <= len(history) else ("", None)
        row[f"guess_{i}"] = guess
        row[f"patt_{i}"] = _cell(patt)
    return row


def write_csv(results: Iterable[Dict], path: str, max_turns: int) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=csv_fields(max_turns))
        writer.writeheader()
        writer.writerows(result_row(r, max_turns) for r in results)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Batch totals for the manifest.

    `mean_guesses_to_win` is None when the adversary won every game.
    """
    wins = [r for r in results if r["success"]]
    return {
        "num_cases": len(results),
        "wins": len(wins),
        "win_rate": len(wins) / len(results) if results else 0.0,
        "mean_guesses_to_win": mean(r["guesses"] for r in wins) if wins else None,
        "max_remaining_on_loss": max((r["remaining"] for r in results if not r["success"]),
                                     default=0),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """JSON dump of run config, word list report and summarize() totals."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, default=str), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
