"""
Game and service configuration.

Every knob lives here so the session, client and CLIs agree on one value.
The service endpoints and request timeout can be overridden from the
environment; CLI flags override both.
"""

from __future__ import annotations

import os
from typing import Final

# Newline-separated corpus of candidate words.
WORDS_URI: Final[str] = os.environ.get(
    "HANGMANAI_WORDS_URI",
    "https://raw.githubusercontent.com/despo/hangman/master/words",
)

# Hangman game service (POST starts a game, PUT submits a letter).
HANGMAN_API_URI: Final[str] = os.environ.get(
    "HANGMANAI_API_URI",
    "http://hangman-api.herokuapp.com/hangman",
)

# Seconds before a single HTTP call is abandoned.
REQUEST_TIMEOUT: Final[float] = float(os.environ.get("HANGMANAI_REQUEST_TIMEOUT", "30"))

# Game is lost once this many wrong letters were submitted.
MAX_WRONG_GUESSES: Final[int] = 7

# Placeholder the service uses for an unrevealed letter.
BLANK: Final[str] = "_"
