"""Game session state and phases."""

__all__ = [
    "Direction",
    "GameFSM",
    "GamePhase",
    "GameSnapshot",
    "GameState",
    "MoveResult",
    "Player",
]

from .fsm import GameFSM, GamePhase
from .state import Direction, GameSnapshot, GameState, MoveResult, Player
