"""
Experiment harness core primitives.

- run_case:  play a single game (one known secret word) offline.
- run_batch: play many games in sequence (optionally a seeded sample).
- summarize: aggregate a batch into win rate and guess statistics.

Games run against LocalGameService with the exact GameSession used online,
so offline numbers describe the real player.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, Iterable, List, Sequence

import numpy as np

from hangmanai.engine import HangmanError
from hangmanai.game import GameSession, Status
from hangmanai.service import LocalGameService
from hangmanai.settings import MAX_WRONG_GUESSES

log = logging.getLogger(__name__)


def run_case(
        secret: str,
        corpus: Sequence[str],
        *,
        max_wrong_guesses: int = MAX_WRONG_GUESSES,
) -> Dict:
    """
    Play one game until it is won, lost, or fails.

    Returns:
        dict with keys:
            answer (str), status ("won" | "lost" | "error"), success (bool),
            wrong_guesses (int), turns (int), time_ms (float),
            history (list[(letter, result)]), error (str | None)
    """
    session = GameSession(LocalGameService(secret), corpus,
                          max_wrong_guesses=max_wrong_guesses)
    error = None
    t0 = time.perf_counter()
    try:
        session.play()
        status = session.state.status.value
    except HangmanError as e:
        # reported apart from a loss: the constraints lost track of the word
        log.warning("Game for %r failed: %s", secret, e)
        status = "error"
        error = f"{type(e).__name__}: {e}"
    dt = (time.perf_counter() - t0) * 1000.0

    state = session.state
    return {
        "answer": secret,
        "status": status,
        "success": status == Status.WON.value,
        "wrong_guesses": state.wrong_guess_count if state else 0,
        "turns": len(session.history),
        "time_ms": dt,
        "history": [(t.letter, t.result) for t in session.history],
        "error": error,
    }


def run_batch(
        corpus: Sequence[str],
        answers: Iterable[str],
        *,
        sample: int | None = None,
        seed: int | None = None,
        max_wrong_guesses: int = MAX_WRONG_GUESSES,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is smaller than the answer pool,
    a deterministic (by `seed`) sample without replacement is used.
    """
    pool = list(answers)
    if sample is not None and sample < len(pool):
        rng = random.Random(seed)
        rng.shuffle(pool)
        pool = pool[:sample]

    return [run_case(ans, corpus, max_wrong_guesses=max_wrong_guesses) for ans in pool]


def summarize(results: List[Dict]) -> Dict:
    """Win/loss/error counts and guess statistics over a batch."""
    n = len(results)
    if n == 0:
        return {"games": 0, "wins": 0, "losses": 0, "errors": 0, "win_rate": 0.0,
                "mean_wrong": 0.0, "median_wrong": 0.0, "mean_turns": 0.0}

    status = np.array([r["status"] for r in results])
    wrong = np.array([r["wrong_guesses"] for r in results], dtype=float)
    turns = np.array([r["turns"] for r in results], dtype=float)
    wins = int(np.sum(status == Status.WON.value))
    return {
        "games": n,
        "wins": wins,
        "losses": int(np.sum(status == Status.LOST.value)),
        "errors": int(np.sum(status == "error")),
        "win_rate": wins / n,
        "mean_wrong": float(np.mean(wrong)),
        "median_wrong": float(np.median(wrong)),
        "mean_turns": float(np.mean(turns)),
    }
