from .state import GameState, Status, Turn, is_win
from .session import GameSession

__all__ = ["GameState", "Status", "Turn", "is_win", "GameSession"]
