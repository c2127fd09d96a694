"""Game configuration and its command-line flags."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from .base import AbstractMazeGenerator
from .maze.render import DEFAULT_CELL_SIZE
from .reveal import DEFAULT_REVEAL_DELAY

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20


@dataclass(frozen=True)
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    reveal_delay: float = DEFAULT_REVEAL_DELAY
    seed: Optional[int] = None
    cell_size: int = DEFAULT_CELL_SIZE

    def __post_init__(self) -> None:
        AbstractMazeGenerator.validate_dimensions(self.width, self.height)
        if self.reveal_delay < 0:
            raise ValueError("reveal_delay must be non-negative")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "GameConfig":
        return cls(
            width=args.width,
            height=args.height,
            reveal_delay=args.reveal_delay,
            seed=args.seed,
            cell_size=args.cell_size,
        )


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument(
        "--reveal-delay",
        type=float,
        default=DEFAULT_REVEAL_DELAY,
        help="Seconds between reveal steps",
    )
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")


__all__ = ["DEFAULT_HEIGHT", "DEFAULT_WIDTH", "GameConfig", "add_config_arguments"]
