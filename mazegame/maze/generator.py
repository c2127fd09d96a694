"""Recursive-backtracker maze generator with a recorded carve order."""

from __future__ import annotations

import argparse
import logging
import random
import uuid
from pathlib import Path
from typing import List, Optional

from ..base import AbstractMazeGenerator, Position
from .model import Maze, cells_from_walls
from .render import DEFAULT_CELL_SIZE, render_maze, save_reveal_animation

logger = logging.getLogger(__name__)

ENTRANCE: Position = (1, 1)
CARVE_STEPS = ((-2, 0), (2, 0), (0, -2), (0, 2))

LEFT, RIGHT, TOP, BOTTOM = range(4)


class MazeGenerator(AbstractMazeGenerator[Maze]):
    """Carve perfect mazes with a randomized depth-first search.

    Carving runs over the positions reachable from the entrance in steps of two,
    opening the wall midway between a node and each newly visited neighbour.
    After carving, the entrance and exit are forced open and so are the whole
    rightmost column and bottom row.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(width, height, seed=seed, rng=rng)

    def generate(self, width: Optional[int] = None, height: Optional[int] = None) -> Maze:
        width = self.width if width is None else width
        height = self.height if height is None else height
        self.validate_dimensions(width, height)

        exit_position = self._choose_exit(width, height)
        walls = [[True for _ in range(height)] for _ in range(width)]
        carve_order = self._carve(walls, width, height)

        for x, y in (ENTRANCE, exit_position):
            walls[x][y] = False
        # Boundary clearing: last column and last row are always open.
        for y in range(height):
            walls[width - 1][y] = False
        for x in range(width):
            walls[x][height - 1] = False

        maze = Maze(
            width=width,
            height=height,
            cells=cells_from_walls(walls, exit_position),
            entrance=ENTRANCE,
            exit=exit_position,
            carve_order=tuple(carve_order),
        )
        logger.debug(
            "Generated %dx%d maze, exit at %s, %d carved positions",
            width,
            height,
            exit_position,
            len(carve_order),
        )
        return maze

    # ------------------------------------------------------------------

    def _choose_exit(self, width: int, height: int) -> Position:
        edge = self._rng.randrange(4)
        if edge == LEFT:
            return 0, self._rng.randint(1, height - 2)
        if edge == RIGHT:
            return width - 2, self._rng.randint(1, height - 2)
        if edge == TOP:
            return self._rng.randint(1, width - 2), 0
        return self._rng.randint(1, width - 2), height - 2

    def _carve(self, walls: List[List[bool]], width: int, height: int) -> List[Position]:
        visited = [[False for _ in range(height)] for _ in range(width)]
        start_x, start_y = ENTRANCE
        walls[start_x][start_y] = False
        visited[start_x][start_y] = True
        carve_order: List[Position] = [ENTRANCE]
        stack: List[Position] = [ENTRANCE]

        while stack:
            x, y = stack[-1]
            neighbours = [
                (x + dx, y + dy)
                for dx, dy in CARVE_STEPS
                if 1 <= x + dx <= width - 2
                and 1 <= y + dy <= height - 2
                and not visited[x + dx][y + dy]
            ]
            if not neighbours:
                stack.pop()
                continue
            nx, ny = self._rng.choice(neighbours)
            wall = ((x + nx) // 2, (y + ny) // 2)
            walls[wall[0]][wall[1]] = False
            walls[nx][ny] = False
            visited[nx][ny] = True
            carve_order.append(wall)
            carve_order.append((nx, ny))
            stack.append((nx, ny))
        return carve_order


__all__ = ["MazeGenerator", "ENTRANCE"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate mazes and export them as images")
    parser.add_argument("count", type=int, help="Number of mazes to generate")
    parser.add_argument("--output-dir", type=Path, default=Path("data/maze"), help="Where to save images")
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--height", type=int, default=20)
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Also save a GIF replaying the carve order",
    )
    parser.add_argument("--reveal-delay", type=float, default=0.05, help="Seconds per GIF frame")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    generator = MazeGenerator(args.width, args.height, seed=args.seed)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    for maze in generator.generate_batch(args.count):
        maze_id = str(uuid.uuid4())
        image_path = args.output_dir / f"{maze_id}_maze.png"
        render_maze(maze, cell_size=args.cell_size).save(image_path)
        logger.info("Saved %s", image_path)
        if args.animate:
            gif_path = save_reveal_animation(
                args.output_dir / f"{maze_id}_reveal.gif",
                maze,
                delay=args.reveal_delay,
                cell_size=args.cell_size,
            )
            logger.info("Saved %s", gif_path)


if __name__ == "__main__":
    main()
