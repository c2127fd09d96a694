"""Shared types and the abstract interface for maze generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, List, Optional, Tuple, TypeVar, Union

PathLike = Union[str, Path]
Position = Tuple[int, int]
MazeT = TypeVar("MazeT")

MIN_DIMENSION = 3


class InvalidDimensions(ValueError):
    """Raised when a grid is too small for carving to proceed."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"maze dimensions must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {width}x{height}"
        )
        self.width = width
        self.height = height


class AbstractMazeGenerator(ABC, Generic[MazeT]):
    """Base class for generators that emit maze values from a seedable PRNG."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.validate_dimensions(width, height)
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def reseed(self, seed: Optional[int]) -> None:
        """Reset the random source so the next mazes are reproducible."""

        self._rng.seed(seed)

    @staticmethod
    def validate_dimensions(width: int, height: int) -> None:
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise InvalidDimensions(width, height)

    @abstractmethod
    def generate(self, width: Optional[int] = None, height: Optional[int] = None) -> MazeT:
        """Create a maze, falling back to the generator's default size."""

    def create_random_maze(self) -> MazeT:
        return self.generate()

    def generate_batch(self, count: int) -> List[MazeT]:
        """Generate several mazes at the default size."""

        return [self.create_random_maze() for _ in range(count)]


__all__ = [
    "AbstractMazeGenerator",
    "InvalidDimensions",
    "MIN_DIMENSION",
    "PathLike",
    "Position",
]
