# apps/cli/play.py
"""
CLI entry point: play one hangman game against the online service.

This script:
  1) Loads the word corpus (URL or local file).
  2) Starts a game on the hangman service.
  3) Guesses letters until the word is revealed or 7 wrong guesses were made.

Exit codes: 0 won, 1 lost, 2 internal failure (constraints lost track of the
word), 3 service or network failure.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --words data/words.txt --api http://localhost:3000/hangman -v
"""

from __future__ import annotations

import argparse
import logging
import sys

import requests

from hangmanai import settings
from hangmanai.datasets import load_corpus
from hangmanai.engine import HangmanError
from hangmanai.game import GameSession, Status
from hangmanai.service import GameServiceError, HangmanClient


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="hangmanAI - play one game against the service")
    ap.add_argument("--words", default=settings.WORDS_URI,
                    help="corpus: http(s) URL or path to a newline-separated word list")
    ap.add_argument("--api", default=settings.HANGMAN_API_URI, help="hangman service endpoint")
    ap.add_argument("--timeout", type=float, default=settings.REQUEST_TIMEOUT,
                    help="seconds per HTTP request")
    ap.add_argument("--max-wrong", type=int, default=settings.MAX_WRONG_GUESSES,
                    help="wrong guesses allowed before the game is lost")
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="warnings only")
    args = ap.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("Starting Hangman Game...")
    try:
        corpus = load_corpus(args.words, timeout=args.timeout)
        with HangmanClient(args.api, timeout=args.timeout) as client:
            session = GameSession(client, corpus, max_wrong_guesses=args.max_wrong)
            state = session.play()
    except HangmanError as e:
        print(f"Game aborted, internal error: {type(e).__name__}: {e}", file=sys.stderr)
        return 2
    except (requests.RequestException, GameServiceError, OSError) as e:
        print(f"Game aborted, service failure: {e}", file=sys.stderr)
        return 3

    letters = "".join(t.letter for t in session.history)
    print(f"Word: {state.masked} | guesses: {letters} | wrong: {state.wrong_guess_count}")
    if state.status is Status.WON:
        print("You Won!")
        return 0
    print("You Lost!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
