"""Game session state: the current maze, the player and movement rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from ..base import AbstractMazeGenerator, Position
from ..config import GameConfig
from ..maze.generator import MazeGenerator
from ..maze.model import Maze
from .fsm import GameFSM, GamePhase

logger = logging.getLogger(__name__)

REGENERATED_MESSAGE = "Maze regenerated"


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown direction: {value!r}") from exc


class MoveResult(str, Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    REACHED_EXIT = "reached_exit"


@dataclass
class Player:
    x: int
    y: int

    @property
    def position(self) -> Position:
        return self.x, self.y


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a session published after each command."""

    maze: Maze
    player: Position
    phase: GamePhase
    message: str
    generation: int

    def to_dict(self) -> dict:
        return {
            "maze": self.maze.to_dict(),
            "player": list(self.player),
            "phase": self.phase.value,
            "message": self.message,
            "generation": self.generation,
        }


Listener = Callable[[GameSnapshot], None]


class GameState:
    """Owns the current maze and the player position.

    The maze is replaced wholesale by ``new_game``; ``move`` always validates
    against the maze that is current at call time. Listeners receive a fresh
    snapshot after every state change.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        generator: Optional[AbstractMazeGenerator[Maze]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self._generator = generator or MazeGenerator(
            self.config.width,
            self.config.height,
            seed=self.config.seed,
        )
        self._fsm = GameFSM()
        self._listeners: List[Listener] = []
        self._generation = 0
        self._message = ""
        self._maze: Maze
        self._player: Player
        self.new_game(self.config.width, self.config.height)

    # ------------------------------------------------------------------
    # Accessors

    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def width(self) -> int:
        return self._maze.width

    @property
    def height(self) -> int:
        return self._maze.height

    @property
    def player(self) -> Player:
        return Player(self._player.x, self._player.y)

    @property
    def player_position(self) -> Position:
        return self._player.position

    @property
    def phase(self) -> GamePhase:
        return self._fsm.phase

    @property
    def message(self) -> str:
        return self._message

    @property
    def generation(self) -> int:
        """Incremented each time a new maze is published."""

        return self._generation

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            maze=self._maze,
            player=self._player.position,
            phase=self.phase,
            message=self._message,
            generation=self._generation,
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Commands

    def new_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        message: str = "",
    ) -> Maze:
        # Generate before touching any state so a failure leaves the session intact.
        maze = self._generator.generate(width, height)
        self._maze = maze
        self._player = Player(*maze.entrance)
        self._message = message
        self._generation += 1
        self._fsm.restart()
        logger.debug("New game %d: %dx%d maze", self._generation, maze.width, maze.height)
        self._publish()
        return maze

    def regenerate(self) -> Maze:
        return self.new_game(self._maze.width, self._maze.height, message=REGENERATED_MESSAGE)

    def move(self, direction: Union[Direction, str]) -> MoveResult:
        direction = Direction.parse(direction)
        dx, dy = direction.offset
        x, y = self._player.x + dx, self._player.y + dy
        maze = self._maze
        if not maze.in_bounds(x, y) or maze.is_wall(x, y):
            logger.debug("Move %s blocked at %s", direction.label, self._player.position)
            return MoveResult.BLOCKED

        self._player = Player(x, y)
        self._message = f"Moved {direction.label}"
        if (x, y) == maze.exit:
            self._fsm.reach_exit()
            result = MoveResult.REACHED_EXIT
        else:
            result = MoveResult.MOVED
        logger.debug("Move %s -> %s (%s)", direction.label, (x, y), result.value)
        self._publish()
        return result

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = [
    "Direction",
    "GameSnapshot",
    "GameState",
    "MoveResult",
    "Player",
    "REGENERATED_MESSAGE",
]
