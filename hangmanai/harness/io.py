"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      answer, status, success, wrong_guesses, turns, time_ms, error,
      letters, results

    `letters` is the guess sequence ("eaoirts...") and `results` the matching
    one-char outcome codes: c = correct, w = wrong, a = already tried.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "status", "success", "wrong_guesses", "turns", "time_ms",
              "error", "letters", "results"]
    codes = {"correct": "c", "wrong": "w", "already_tried": "a"}

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            hist = r.get("history", [])
            w.writerow({
                "answer": r["answer"],
                "status": r["status"],
                "success": r["success"],
                "wrong_guesses": r["wrong_guesses"],
                "turns": r["turns"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error") or "",
                "letters": "".join(letter for letter, _ in hist),
                "results": "".join(codes.get(res, "?") for _, res in hist),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and corpus validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, sample, seed, outdir)
      - corpus: output of datasets.validate_corpus(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
