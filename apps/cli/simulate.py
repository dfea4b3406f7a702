# apps/cli/simulate.py
"""
CLI entry point for offline hangmanAI experiments.

This script:
  1) Validates the corpus (prints counts + SHA, flags invalid lines).
  2) Plays one offline game per secret word, using the corpus as both the
     guesser's dictionary and the pool of secrets (or --answers).
  3) Writes:
       - CSV:  per-game results + letter/result sequences
       - JSON: manifest with config, corpus report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from hangmanai import settings
from hangmanai.datasets import validate_corpus, pretty_summary, load_corpus
from hangmanai.harness import run_case, summarize
from hangmanai.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def main(argv=None):
    ap = argparse.ArgumentParser(description="hangmanAI - run offline games")
    ap.add_argument("--words", required=True, help="path to the corpus (one word per line)")
    ap.add_argument("--answers", help="path to secret words (default: the corpus itself)")
    ap.add_argument("--sample", type=int, help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--max-wrong", type=int, default=settings.MAX_WRONG_GUESSES)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the corpus and print a one-liner summary
    rep = validate_corpus(args.words)
    print(pretty_summary(rep))

    # 2) Load lists into memory (lowercased, no blanks)
    corpus = load_corpus(args.words)
    answers = load_corpus(args.answers) if args.answers else list(corpus)

    # 3) Choose cases (deterministic sample by seed)
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    # 4) Run with live progress
    mode = _progress_mode(args.progress)
    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases
    results = []
    start = time.time()
    last_print = 0.0
    for idx, secret in enumerate(iterator, 1):
        results.append(run_case(secret, corpus, max_wrong_guesses=args.max_wrong))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Summarize and write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "corpus": rep,
        "summary": summary,
        "num_cases": len(results),
    }, str(manifest_path))

    print(
        f"games={summary['games']} won={summary['wins']} lost={summary['losses']} "
        f"errors={summary['errors']} | win rate {summary['win_rate']:.1%} "
        f"| wrong mean {summary['mean_wrong']:.2f} median {summary['median_wrong']:.1f}"
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
