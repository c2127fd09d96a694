"""Maze generation, navigation and progressive reveal."""

__all__ = [
    "AbstractMazeGenerator",
    "InvalidDimensions",
    "GameConfig",
    "Cell",
    "Maze",
    "MazeGenerator",
    "Direction",
    "GamePhase",
    "GameSnapshot",
    "GameState",
    "MoveResult",
    "Player",
    "RevealAnimator",
    "RevealEvent",
    "RevealSequence",
]

from .base import AbstractMazeGenerator, InvalidDimensions
from .config import GameConfig
from .maze import Cell, Maze, MazeGenerator
from .game import Direction, GamePhase, GameSnapshot, GameState, MoveResult, Player
from .reveal import RevealAnimator, RevealEvent, RevealSequence
