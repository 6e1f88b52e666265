"""Base class for maze generation algorithms."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mazeatlas.maze.maze import Maze
    from mazeatlas.types import RandomSeed


class MazeGenerator(abc.ABC):
    """Abstract base class for maze generators.

    Generators hold their configuration plus a seed. Each call to generate()
    builds a fresh random source from the seed, so the same seed always
    yields the same maze.
    """

    def __init__(self, seed: RandomSeed = None) -> None:
        self.seed = seed

    @abc.abstractmethod
    def generate(self) -> Maze:
        """Generate the maze layout."""
        raise NotImplementedError
