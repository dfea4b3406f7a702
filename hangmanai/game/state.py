from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet

from hangmanai.engine import Constraints
from hangmanai.settings import BLANK


class Status(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


def is_win(masked: str) -> bool:
    """The word is solved once no blank remains in the service's mask."""
    return BLANK not in masked


@dataclass
class GameState:
    word_length: int
    masked: str
    wrong_guess_count: int = 0
    constraints: Constraints = field(default_factory=Constraints)
    status: Status = Status.IN_PROGRESS
    # every letter submitted this game, including ones the service bounced
    tried: FrozenSet[str] = frozenset()

    @property
    def terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS


@dataclass(frozen=True)
class Turn:
    number: int
    letter: str
    result: str      # "correct" | "wrong" | "already_tried"
    candidates: int  # size of the candidate set the letter was chosen from
    masked: str      # mask after this turn
