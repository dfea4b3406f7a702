"""
One hangman game, turn by turn.

Each turn:
  1) rebuild the candidate set from the full corpus and current constraints
  2) pick the most frequent letter not yet submitted
  3) submit it and wait for the service's answer
  4) fold the answer into a NEW Constraints value, then check for a win/loss

Feedback for guess n is always applied before guess n+1 is chosen. The
session is the only writer of its GameState.

Positional heuristic:
  The service says whether a letter is present; the session pins the letter
  to its index in the FIRST remaining candidate that contains it. That is only
  as good as the candidate set is narrow. If the pin is wrong, the set later
  collapses to empty and NoCandidateWordsError ends the game.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from hangmanai.engine import (
    GameOverError,
    choose_letter,
    filter_candidates,
)
from hangmanai.service.outcomes import AlreadyTried
from hangmanai.settings import MAX_WRONG_GUESSES
from .state import GameState, Status, Turn, is_win

log = logging.getLogger(__name__)


class GameSession:
    """
    Drives one game against `client` (anything with start_game/check_guess,
    e.g. HangmanClient or LocalGameService), guessing from `corpus`.
    """

    def __init__(self, client, corpus: Sequence[str], *,
                 max_wrong_guesses: int = MAX_WRONG_GUESSES):
        self.client = client
        self.corpus = corpus
        self.max_wrong_guesses = max_wrong_guesses
        self.token: Optional[str] = None
        self.state: Optional[GameState] = None
        self.history: List[Turn] = []

    def start(self) -> GameState:
        game = self.client.start_game()
        self.token = game.token
        self.state = GameState(word_length=len(game.masked), masked=game.masked)
        self.history = []
        log.info("Started game, word length %d", self.state.word_length)
        if game.masked and is_win(game.masked):
            self.state.status = Status.WON
        return self.state

    def candidates(self) -> List[str]:
        s = self.state
        return filter_candidates(self.corpus, s.word_length,
                                 s.constraints.excluded, s.constraints.fixed)

    def play_turn(self) -> Turn:
        if self.state is None:
            self.start()
        s = self.state
        if s.terminal:
            raise GameOverError(f"game already {s.status.value}")

        candidates = self.candidates()
        log.debug("%d candidate word(s)", len(candidates))
        letter = choose_letter(candidates, s.tried)
        log.info("Letter is %s, checking...", letter)

        outcome = self.client.check_guess(letter, self.token)
        s.tried = s.tried | {letter}

        if isinstance(outcome, AlreadyTried):
            log.info("Letter %s was already tried", letter)
            result = "already_tried"
        else:
            if outcome.token:
                self.token = outcome.token
            s.masked = outcome.masked
            if outcome.correct:
                result = "correct"
                self._record_correct(letter, candidates)
            else:
                result = "wrong"
                self._record_wrong(letter)

        turn = Turn(number=len(self.history) + 1, letter=letter, result=result,
                    candidates=len(candidates), masked=s.masked)
        self.history.append(turn)
        return turn

    def _record_correct(self, letter: str, candidates: Sequence[str]) -> None:
        s = self.state
        log.info("Guess was correct: %s", s.masked)
        representative = next(w for w in candidates if letter in w)
        s.constraints = s.constraints.with_correct(letter, representative.index(letter))
        if is_win(s.masked):
            s.status = Status.WON
            log.info("You won! Wrong guesses: %d", s.wrong_guess_count)

    def _record_wrong(self, letter: str) -> None:
        s = self.state
        s.constraints = s.constraints.with_wrong(letter)
        s.wrong_guess_count += 1
        log.info("Guess was wrong (%d/%d)", s.wrong_guess_count, self.max_wrong_guesses)
        if s.wrong_guess_count >= self.max_wrong_guesses:
            s.status = Status.LOST
            log.info("Max allowed wrong guesses reached. You lost!")

    def play(self) -> GameState:
        """Play until the game is won or lost; returns a copy of the final state."""
        if self.state is None:
            self.start()
        while not self.state.terminal:
            self.play_turn()
        return replace(self.state)
