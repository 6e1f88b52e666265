"""Remapping a maze under the symmetries of the square.

The eight rigid motions of a square (the dihedral group D4) are characterized
here as a number of clockwise quarter turns followed by an optional flip along
the main diagonal. Applying one to a maze remaps every cell, link endpoint and
tag, producing a new maze with the same topology: adjacency and openings are
carried along with the coordinates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntFlag

from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.link import Link
from mazeatlas.maze.maze import CellTag, Maze
from mazeatlas.types import RandomSeed
from mazeatlas.util.rng import RNGProvider

from .base import MazeGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RigidMotion:
    """`rotations` clockwise quarter turns, then an optional diagonal flip.

    Each quarter turn maps ``(x, y)`` to ``(y, x_max - x)`` where `x_max` is the
    maze's largest x, and the tracked x/y bounds swap afterwards. The flip maps
    ``(x, y)`` to ``(y, x)``.
    """

    rotations: int = 0
    flip: bool = False

    def __post_init__(self) -> None:
        if self.rotations < 0:
            raise InvalidArgumentError("rotations must be non-negative.")

    def apply(self, maze: Maze) -> Maze:
        cells = maze.get_cells()
        links = maze.get_links()
        tags = maze.get_tags()

        _, max_corner = maze.bounds()
        x_max, y_max = max_corner.x, max_corner.y
        for _ in range(self.rotations):
            cells = [_rotate_cw(cell, x_max) for cell in cells]
            links = [Link(_rotate_cw(link.a, x_max), _rotate_cw(link.b, x_max)) for link in links]
            tags = [CellTag(_rotate_cw(tag.cell, x_max), tag.metadata) for tag in tags]
            x_max, y_max = y_max, x_max

        if self.flip:
            cells = [_flip(cell) for cell in cells]
            links = [Link(_flip(link.a), _flip(link.b)) for link in links]
            tags = [CellTag(_flip(tag.cell), tag.metadata) for tag in tags]

        return Maze(cells, links, tags)


def _rotate_cw(coord: Coord, x_max: int) -> Coord:
    return Coord(coord.y, x_max - coord.x)


def _flip(coord: Coord) -> Coord:
    return Coord(coord.y, coord.x)


class Symmetry(IntFlag):
    """Selectable symmetries of the square."""

    NONE = 0
    CLOCKWISE_NINETY = 1
    CLOCKWISE_ONE_EIGHTY = 2
    CLOCKWISE_TWO_SEVENTY = 4
    FLIP_ACROSS_HORIZONTAL = 8
    FLIP_ACROSS_VERTICAL = 16
    FLIP_ACROSS_BOTTOM_LEFT_TO_TOP_RIGHT = 32
    FLIP_ACROSS_TOP_LEFT_TO_BOTTOM_RIGHT = 64
    # Identity needs its own bit so it can be included or excluded.
    IDENTITY = 128
    ALL = 255

    @property
    def motions(self) -> list[RigidMotion]:
        """The rigid motions enabled in this flag set, in a fixed order."""
        return [motion for flag, motion in _SYMMETRY_MOTIONS if flag in self]


_SYMMETRY_MOTIONS: tuple[tuple[Symmetry, RigidMotion], ...] = (
    (Symmetry.IDENTITY, RigidMotion(0, False)),
    (Symmetry.CLOCKWISE_NINETY, RigidMotion(1, False)),
    (Symmetry.CLOCKWISE_ONE_EIGHTY, RigidMotion(2, False)),
    (Symmetry.CLOCKWISE_TWO_SEVENTY, RigidMotion(3, False)),
    (Symmetry.FLIP_ACROSS_BOTTOM_LEFT_TO_TOP_RIGHT, RigidMotion(0, True)),
    (Symmetry.FLIP_ACROSS_TOP_LEFT_TO_BOTTOM_RIGHT, RigidMotion(2, True)),
    (Symmetry.FLIP_ACROSS_HORIZONTAL, RigidMotion(3, True)),
    (Symmetry.FLIP_ACROSS_VERTICAL, RigidMotion(1, True)),
)


class SymmetryTransformGenerator(MazeGenerator):
    """Wraps another generator and applies a randomly chosen symmetry to its maze.

    When seeded, the inner generator is reseeded from a stream derived from
    this generator's seed, so a reroll varies both the layout and the motion.
    An unseeded transform leaves the inner generator's seed alone.
    """

    def __init__(
        self,
        maze_generator: MazeGenerator,
        symmetries: Symmetry = Symmetry.ALL,
        seed: RandomSeed = None,
    ) -> None:
        super().__init__(seed)
        if maze_generator is None:
            raise InvalidArgumentError("No maze generator assigned.")
        if symmetries == Symmetry.NONE:
            raise InvalidArgumentError("Must enable at least one symmetry.")
        self.maze_generator = maze_generator
        self.symmetries = symmetries

    def generate(self) -> Maze:
        motions = self.symmetries.motions
        if not motions:
            raise InvalidArgumentError("Must enable at least one symmetry.")

        provider = RNGProvider(self.seed)
        if self.seed is not None:
            self.maze_generator.seed = provider.get("maze.inner").getrandbits(32)
        motion = provider.get("maze.symmetry").choice(motions)
        logger.debug(
            "Applying %d clockwise rotations, flip=%s", motion.rotations, motion.flip
        )
        return motion.apply(self.maze_generator.generate())
