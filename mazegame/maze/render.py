"""Image and text rendering for mazes and their reveal animation."""

from __future__ import annotations

from pathlib import Path
from typing import Collection, Iterator, List, Optional

import numpy as np
from PIL import Image

from ..base import PathLike, Position
from ..reveal import DEFAULT_REVEAL_DELAY, RevealSequence
from .model import EXIT_CHAR, OPEN_CHAR, PLAYER_CHAR, WALL_CHAR, Maze

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
PLAYER_COLOR = (220, 30, 30)
EXIT_COLOR = (40, 180, 80)

DEFAULT_CELL_SIZE = 24


def maze_to_array(
    maze: Maze,
    *,
    player: Optional[Position] = None,
    hidden: Collection[Position] = (),
) -> np.ndarray:
    """RGB array of shape ``(height, width, 3)``, one pixel per cell.

    Hidden cells are drawn as walls. The player is drawn over the exit, which is
    drawn over walls.
    """

    walls = maze.wall_mask()
    for x, y in hidden:
        walls[y, x] = True
    pixels = np.empty((maze.height, maze.width, 3), dtype=np.uint8)
    pixels[walls] = WALL_COLOR
    pixels[~walls] = PATH_COLOR
    ex, ey = maze.exit
    pixels[ey, ex] = EXIT_COLOR
    if player is not None:
        px, py = player
        pixels[py, px] = PLAYER_COLOR
    return pixels


def render_maze(
    maze: Maze,
    *,
    player: Optional[Position] = None,
    hidden: Collection[Position] = (),
    cell_size: int = DEFAULT_CELL_SIZE,
) -> Image.Image:
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    pixels = maze_to_array(maze, player=player, hidden=hidden)
    scaled = np.repeat(np.repeat(pixels, cell_size, axis=0), cell_size, axis=1)
    return Image.fromarray(scaled, "RGB")


def render_reveal_frames(
    maze: Maze,
    *,
    cell_size: int = DEFAULT_CELL_SIZE,
    steps_per_frame: int = 1,
) -> Iterator[Image.Image]:
    """Yield the fully hidden maze, then one frame per ``steps_per_frame`` reveals."""

    if steps_per_frame <= 0:
        raise ValueError("steps_per_frame must be positive")
    sequence = RevealSequence(maze)
    yield render_maze(maze, hidden=sequence.hidden, cell_size=cell_size)
    while not sequence.done:
        for _ in range(steps_per_frame):
            if sequence.step() is None:
                break
        yield render_maze(maze, hidden=sequence.hidden, cell_size=cell_size)


def save_reveal_animation(
    path: PathLike,
    maze: Maze,
    *,
    delay: float = DEFAULT_REVEAL_DELAY,
    cell_size: int = DEFAULT_CELL_SIZE,
    steps_per_frame: int = 1,
) -> Path:
    frames: List[Image.Image] = list(
        render_reveal_frames(maze, cell_size=cell_size, steps_per_frame=steps_per_frame)
    )
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        destination,
        save_all=True,
        append_images=frames[1:],
        duration=max(1, int(round(delay * 1000))),
        loop=0,
    )
    return destination


def render_text(
    maze: Maze,
    *,
    player: Optional[Position] = None,
    hidden: Collection[Position] = (),
) -> str:
    hidden_set = set(hidden)
    lines: List[str] = []
    for y in range(maze.height):
        chars: List[str] = []
        for x in range(maze.width):
            if (x, y) == player:
                chars.append(PLAYER_CHAR)
            elif maze.is_exit(x, y):
                chars.append(EXIT_CHAR)
            elif maze.is_wall(x, y) or (x, y) in hidden_set:
                chars.append(WALL_CHAR)
            else:
                chars.append(OPEN_CHAR)
        lines.append("".join(chars))
    return "\n".join(lines)


__all__ = [
    "DEFAULT_CELL_SIZE",
    "EXIT_COLOR",
    "PATH_COLOR",
    "PLAYER_COLOR",
    "WALL_COLOR",
    "maze_to_array",
    "render_maze",
    "render_reveal_frames",
    "render_text",
    "save_reveal_animation",
]
