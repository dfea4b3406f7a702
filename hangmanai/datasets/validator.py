"""
Corpus validator for hangmanAI.

What this module does:
- Check a word list file (one word per line) before a run.
- Count valid words, duplicates and invalid lines; compute SHA-256 of the raw
  file; tabulate word lengths.
- Return a machine-readable dict (for manifests) and provide a pretty one-line
  summary.

A line is valid iff, after stripping, it is non-empty lowercase a-z. Unlike
the game, the validator is strict: it flags what `load_corpus` would silently
lowercase or keep.

Typical use:
    from hangmanai.datasets import validate_corpus, pretty_summary
    rep = validate_corpus("data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class CorpusReport:
    path: str             # file path (as given)
    exists: bool          # did the file exist on disk?
    count: int            # number of VALID words
    unique_count: int     # unique valid words
    invalid_lines: int    # blank, non-alphabetic or non-lowercase lines
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> count
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """Return (valid_words, invalid_count)."""
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isalpha() and w == w.lower():
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def validate_corpus(path: str) -> Dict:
    """
    Validate a newline-separated word list.

    Returns a JSON-serializable dict (see CorpusReport). `passed` requires an
    existing, non-empty file with no invalid lines; duplicates are reported
    but do not fail the check (they only weight letter counts).
    """
    p = Path(path)
    if not p.exists():
        rep = CorpusReport(path=path, exists=False, count=0, unique_count=0,
                           invalid_lines=0, sha256="",
                           issues=[f"corpus file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    rep = CorpusReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        lengths=dict(sorted(Counter(len(w) for w in words).items())),
    )

    if rep.count == 0:
        rep.issues.append("corpus contains 0 valid words")
    if invalid:
        rep.issues.append(f"corpus has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append(f"corpus contains {rep.count - rep.unique_count} duplicate line(s)")

    rep.passed = rep.count > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        words=852 (uniq=852, sha=abc123def456) | lengths 3..14 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = report.get("lengths") or {}
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "-"
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths {span} | {status}"
    )
