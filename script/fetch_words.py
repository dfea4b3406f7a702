"""
Download the hangman word corpus and write a clean local copy.

What it does:
- Fetches the newline-separated word list (default: settings.WORDS_URI).
- Strips, lowercases, drops blanks, de-duplicates preserving order.
- Optionally sorts alphabetically, then writes one word per line.

Usage:
    python -m script.fetch_words --out data/words.txt
    python -m script.fetch_words --sort --out data/words.txt
"""

import argparse

from hangmanai import settings
from hangmanai.datasets import fetch_words, normalize_words, write_lines


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Download the hangman word corpus")
    ap.add_argument("--url", default=settings.WORDS_URI)
    ap.add_argument("--out", default="data/words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = unique_preserve_order(normalize_words(fetch_words(args.url)))
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
