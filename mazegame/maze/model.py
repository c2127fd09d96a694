"""Immutable maze values produced by the generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple

import numpy as np

from ..base import Position

WALL_CHAR = "#"
OPEN_CHAR = "."
EXIT_CHAR = "E"
PLAYER_CHAR = "@"


@dataclass(frozen=True)
class Cell:
    is_wall: bool = True
    is_exit: bool = False


@dataclass(frozen=True)
class Maze:
    """A carved grid. ``cells`` is indexed ``cells[x][y]``."""

    width: int
    height: int
    cells: Tuple[Tuple[Cell, ...], ...]
    entrance: Position
    exit: Position
    carve_order: Tuple[Position, ...] = ()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[x][y]

    def is_wall(self, x: int, y: int) -> bool:
        return self.cells[x][y].is_wall

    def is_exit(self, x: int, y: int) -> bool:
        return self.cells[x][y].is_exit

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def open_cells(self) -> Set[Position]:
        return {(x, y) for x, y in self.positions() if not self.cells[x][y].is_wall}

    def wall_mask(self) -> np.ndarray:
        """Boolean array of walls in image orientation, shape ``(height, width)``."""

        mask = np.ones((self.height, self.width), dtype=bool)
        for x, y in self.positions():
            mask[y, x] = self.cells[x][y].is_wall
        return mask

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "walls": self.wall_mask().astype(int).tolist(),
            "entrance": list(self.entrance),
            "exit": list(self.exit),
            "carve_order": [list(position) for position in self.carve_order],
        }

    @classmethod
    def from_strings(
        cls,
        rows: Sequence[str],
        *,
        entrance: Position = (1, 1),
        carve_order: Sequence[Position] = (),
    ) -> "Maze":
        """Build a maze from text rows, one string per ``y``.

        ``#`` marks a wall and ``E`` the exit; any other character is open.
        """

        if not rows:
            raise ValueError("maze text must contain at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("maze rows must all have the same length")
        height = len(rows)

        exits = [(x, y) for y, row in enumerate(rows) for x, char in enumerate(row) if char == EXIT_CHAR]
        if len(exits) != 1:
            raise ValueError(f"maze text must contain exactly one exit, found {len(exits)}")

        columns: List[Tuple[Cell, ...]] = []
        for x in range(width):
            columns.append(
                tuple(
                    Cell(is_wall=rows[y][x] == WALL_CHAR, is_exit=rows[y][x] == EXIT_CHAR)
                    for y in range(height)
                )
            )
        return cls(
            width=width,
            height=height,
            cells=tuple(columns),
            entrance=entrance,
            exit=exits[0],
            carve_order=tuple(carve_order),
        )


def cells_from_walls(
    walls: Sequence[Sequence[bool]],
    exit_position: Optional[Position],
) -> Tuple[Tuple[Cell, ...], ...]:
    """Freeze a ``walls[x][y]`` working grid into cell tuples."""

    return tuple(
        tuple(Cell(is_wall=bool(is_wall), is_exit=(x, y) == exit_position) for y, is_wall in enumerate(column))
        for x, column in enumerate(walls)
    )


__all__ = [
    "Cell",
    "Maze",
    "cells_from_walls",
    "WALL_CHAR",
    "OPEN_CHAR",
    "EXIT_CHAR",
    "PLAYER_CHAR",
]
