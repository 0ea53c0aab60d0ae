"""
Word list validator.

What this module does:
- Validate a pair of word lists: answers.txt (candidate secrets) and
  allowed.txt (guess universe).
- Enforce formatting rules (lowercase, a–z only, exactly 5 letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that answers ⊆ allowed.
- Return a machine-readable dict (for run manifests) and a one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/answers.txt", "data/allowed.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from packages.engine import WORD_LENGTH, is_well_formed


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid words after cleaning
    sha256: str          # of the raw bytes; empty if missing
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    """Validation result for the (answers, allowed) pair."""
    word_length: int
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Return (valid_words, invalid_count).

    Stricter than read_words(): a line must already be lowercase, and blank
    lines count as invalid, so the files on disk stay canonical.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and is_well_formed(w):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _missing_report(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


def _file_report(path: Path) -> Tuple[FileReport, set]:
    words, invalid = _load_and_check(path)
    unique = set(words)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(unique),
        invalid_lines=invalid,
    )
    return rep, unique


def validate_wordlists(answers_path: str, allowed_path: str) -> Dict:
    """
    Validate the answers/allowed word lists.

    Returns a JSON-serializable dict (see ValidationReport) whose `passed`
    flag is strict: both files non-empty, no invalid lines, answers ⊆ allowed.
    Duplicates are reported as issues but do not fail validation.
    """
    issues: List[str] = []
    ans_p, all_p = Path(answers_path), Path(allowed_path)

    if not ans_p.exists() or not all_p.exists():
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        if not all_p.exists():
            issues.append(f"allowed file not found: {allowed_path}")
        rep = ValidationReport(
            word_length=WORD_LENGTH,
            answers=_file_report(ans_p)[0] if ans_p.exists() else _missing_report(answers_path),
            allowed=_file_report(all_p)[0] if all_p.exists() else _missing_report(allowed_path),
            answers_subset_allowed=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    ans_report, answers = _file_report(ans_p)
    all_report, allowed = _file_report(all_p)

    subset_ok = answers.issubset(allowed)
    if not subset_ok:
        missing = sorted(answers - allowed)[:5]
        issues.append(f"answers not subset of allowed (e.g., {missing})")

    for label, rep in (("answers", ans_report), ("allowed", all_report)):
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    passed = (
        subset_ok
        and ans_report.invalid_lines == 0
        and all_report.invalid_lines == 0
        and ans_report.count > 0
        and all_report.count > 0
    )

    rep = ValidationReport(
        word_length=WORD_LENGTH,
        answers=ans_report,
        allowed=all_report,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.

        answers=2315 (uniq=2315, sha=abc123...) | allowed=12972 (uniq=12972, sha=def456...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
