from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import requests

from hangmanai import settings

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(lines: Iterable[str]) -> List[str]:
    """Strip, lowercase, drop blanks. Order (and duplicates) are kept."""
    return [w.strip().lower() for w in lines if w.strip()]


def fetch_words(url: str = settings.WORDS_URI, *,
                timeout: float = settings.REQUEST_TIMEOUT) -> List[str]:
    """Download a newline-separated word list. HTTP errors propagate."""
    log.info("Fetching words from %s", url)
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text.splitlines()


def load_corpus(source: str = settings.WORDS_URI, *,
                timeout: float = settings.REQUEST_TIMEOUT) -> List[str]:
    """
    Load the candidate corpus from an http(s) URL or a local file path.
    """
    if source.startswith(("http://", "https://")):
        lines = fetch_words(source, timeout=timeout)
    else:
        lines = read_lines(source)
    words = normalize_words(lines)
    log.info("Loaded %d words from %s", len(words), source)
    return words
