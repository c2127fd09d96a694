"""Progressive reveal of a maze by replaying its carve order."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, FrozenSet, Iterator, Optional, Set

from .base import Position

if TYPE_CHECKING:  # pragma: no cover
    from .game.state import GameSnapshot
    from .maze.model import Maze

logger = logging.getLogger(__name__)

DEFAULT_REVEAL_DELAY = 0.05


@dataclass(frozen=True)
class RevealEvent:
    generation: int
    index: int
    position: Position


class RevealSequence:
    """Reveal index over a maze's carve order.

    Every carved position starts hidden; each ``step`` uncovers the next one in
    the order it was carved.
    """

    def __init__(self, maze: "Maze", generation: int = 0) -> None:
        self.maze = maze
        self.generation = generation
        self._order = maze.carve_order
        self._index = 0
        self._hidden: Set[Position] = set(self._order)

    @property
    def index(self) -> int:
        return self._index

    @property
    def remaining(self) -> int:
        return len(self._order) - self._index

    @property
    def done(self) -> bool:
        return self._index >= len(self._order)

    @property
    def hidden(self) -> FrozenSet[Position]:
        return frozenset(self._hidden)

    def is_hidden(self, position: Position) -> bool:
        return position in self._hidden

    def step(self) -> Optional[Position]:
        if self.done:
            return None
        position = self._order[self._index]
        self._hidden.discard(position)
        self._index += 1
        return position

    def replay(self) -> Iterator[Position]:
        while not self.done:
            position = self.step()
            assert position is not None
            yield position

    def reset(self) -> None:
        self._index = 0
        self._hidden = set(self._order)

    def visible_cells(self) -> Set[Position]:
        return self.maze.open_cells() - self._hidden


class RevealAnimator:
    """Replays a reveal sequence on the running event loop, one step per ``delay``.

    Starting a new maze cancels the task animating the previous one, so events
    always carry the generation of the maze currently being revealed.
    """

    def __init__(
        self,
        delay: float = DEFAULT_REVEAL_DELAY,
        on_step: Optional[Callable[[RevealEvent], None]] = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self.on_step = on_step
        self._sequence: Optional[RevealSequence] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def sequence(self) -> Optional[RevealSequence]:
        return self._sequence

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, maze: "Maze", generation: int) -> RevealSequence:
        self.cancel()
        sequence = RevealSequence(maze, generation)
        self._sequence = sequence
        self._task = asyncio.get_running_loop().create_task(self._run(sequence))
        logger.debug("Reveal started for generation %d (%d steps)", generation, sequence.remaining)
        return sequence

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.debug("Reveal cancelled for generation %d", self._sequence.generation if self._sequence else -1)
        self._task = None

    def on_snapshot(self, snapshot: "GameSnapshot") -> None:
        """Subscriber hook: restart whenever a snapshot belongs to a new maze."""

        if self._sequence is None or self._sequence.generation != snapshot.generation:
            self.start(snapshot.maze, snapshot.generation)

    async def wait(self) -> None:
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self, sequence: RevealSequence) -> None:
        while not sequence.done:
            await asyncio.sleep(self.delay)
            if sequence is not self._sequence:
                return
            index = sequence.index
            position = sequence.step()
            if position is not None and self.on_step is not None:
                self.on_step(RevealEvent(sequence.generation, index, position))


__all__ = [
    "DEFAULT_REVEAL_DELAY",
    "RevealAnimator",
    "RevealEvent",
    "RevealSequence",
]
