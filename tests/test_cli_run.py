import csv
import json
import sys
from pathlib import Path

from apps.cli import run as run_cli

ANSWERS = ["crane", "slate", "plane", "shale", "trace"]


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_run_main_writes_csv_and_manifest_per_solver(tmp_path: Path, monkeypatch, capsys):
    ans = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    _write(ans, ANSWERS)
    _write(allw, ANSWERS + ["adieu"])
    outdir = tmp_path / "reports"

    monkeypatch.setattr(sys, "argv", [
        "run", "--solvers", "minimax,random_consistent",
        "--answers", str(ans), "--allowed", str(allw),
        "--games", "3", "--seed", "1", "--outdir", str(outdir), "--progress", "off",
    ])
    run_cli.main()

    printed = capsys.readouterr().out
    assert "answers⊆allowed=True | OK" in printed

    for sid in ("minimax", "random_consistent"):
        csvs = list((outdir / sid).glob("run_*.csv"))
        manifests = list((outdir / sid).glob("run_*_manifest.json"))
        assert len(csvs) == 1 and len(manifests) == 1
        assert f"{sid}: 3/3 wins" in printed

        with csvs[0].open(newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 3
        assert [r["seed"] for r in rows] == [str(1 + i * 1013904223) for i in (1, 2, 3)]
        for r in rows:
            assert r["solver"] == sid and r["success"] == "True"
            assert r["remaining"] == "1" and r["revealed"] in ANSWERS
            assert r["patt_1"].startswith("'")

        manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
        assert manifest["solver_id"] == sid
        assert manifest["num_cases"] == 3 and manifest["win_rate"] == 1.0
        assert manifest["wordlists"]["passed"] is True
        assert manifest["config"]["games"] == 3
