from collections import deque
from typing import Iterable, Optional, Sequence, Set

from mazegame.base import AbstractMazeGenerator, Position
from mazegame.maze import Maze

# Exit at (3, 3); (1, 0) and (0, 1) are walls around the entrance.
FIXED_ROWS = (
    "#####",
    "#....",
    "###..",
    "#..E.",
    ".....",
)


class FixedMazeGenerator(AbstractMazeGenerator[Maze]):
    """Always hands out the same hand-drawn maze."""

    def __init__(self, rows: Sequence[str] = FIXED_ROWS) -> None:
        self.maze = Maze.from_strings(rows)
        self.calls = 0
        super().__init__(self.maze.width, self.maze.height)

    def generate(self, width: Optional[int] = None, height: Optional[int] = None) -> Maze:
        self.calls += 1
        return self.maze


def reachable(maze: Maze, start: Position, allowed: Iterable[Position]) -> Set[Position]:
    allowed_set = set(allowed)
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = (x + dx, y + dy)
            if nxt in allowed_set and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen
