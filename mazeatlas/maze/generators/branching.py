"""Branching weighted path maze generation.

The layout style found in many action RPG dungeons: first a grid of random
weights is generated and a cheap path is found between two points on it. That
path becomes the spine of the maze, with a link between each consecutive pair
of steps. Cells are then grown off randomly chosen interior points of the path
until the requested number of cells is reached, occasionally linking a new
cell to existing neighbors to create loops.

The first and last cells of the initial path are tagged "start" and "end".
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

import numpy as np

from mazeatlas import config
from mazeatlas.errors import GenerationStalledError, InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.link import Link
from mazeatlas.maze.maze import CellTag, Maze
from mazeatlas.maze.shortest_path import find_weighted_path
from mazeatlas.types import RandomSeed
from mazeatlas.util.rng import RNG

from .base import MazeGenerator

logger = logging.getLogger(__name__)


class BranchingPathGenerator(MazeGenerator):
    """Grows a maze outward from a random weighted path.

    Attributes:
        grid_length: Scales the search grid horizontally. Increase to get a
            more horizontal path. At least 1.
        grid_width: Scales the search grid vertically. Increase to get a more
            vertical path. At least 1.
        cell_count: Branching continues until the maze has this many cells.
        grid_weights: Pool of weights assigned at random to the search grid.
        extra_link_proportion: Beyond the links needed for connectivity, the
            approximate proportion of adjacent cells to connect. In [0, 1].
        seed: Seed for the generator's random source.
    """

    def __init__(
        self,
        grid_length: int,
        grid_width: int,
        cell_count: int,
        *,
        grid_weights: Sequence[int] = config.DEFAULT_GRID_WEIGHTS,
        extra_link_proportion: float = config.DEFAULT_EXTRA_LINK_PROPORTION,
        seed: RandomSeed = None,
    ) -> None:
        super().__init__(seed)
        self.grid_length = grid_length
        self.grid_width = grid_width
        self.cell_count = cell_count
        self.grid_weights = tuple(grid_weights)
        self.extra_link_proportion = extra_link_proportion
        self._validate()

    def _validate(self) -> None:
        if self.grid_length < 1:
            raise InvalidArgumentError("grid_length must be at least 1.")
        if self.grid_width < 1:
            raise InvalidArgumentError("grid_width must be at least 1.")
        if self.cell_count < 1:
            raise InvalidArgumentError("cell_count must be at least 1.")
        if not self.grid_weights:
            raise InvalidArgumentError("grid_weights must not be empty.")
        if not 0.0 <= self.extra_link_proportion <= 1.0:
            raise InvalidArgumentError("extra_link_proportion must be in [0, 1].")

    def generate(self) -> Maze:
        self._validate()
        rng = random.Random(self.seed)

        weights = self._build_random_weights(rng)
        path = self._build_initial_path(rng, weights)
        start = path[0]
        end = path[-1]
        links = [Link(path[i], path[i + 1]) for i in range(len(path) - 1)]
        logger.debug(
            "Initial path from %s to %s with %d cells", start, end, len(path)
        )

        self._expand_path(rng, path, links, start, end)

        if start == end:
            tags = [CellTag.from_keys(start, config.START_TAG, config.END_TAG)]
        else:
            tags = [
                CellTag.from_keys(start, config.START_TAG),
                CellTag.from_keys(end, config.END_TAG),
            ]
        return Maze(path, links, tags)

    def _build_random_weights(self, rng: RNG) -> np.ndarray:
        """A (3 * length, 3 * width) grid of weights drawn from the pool."""
        length = 3 * self.grid_length
        width = 3 * self.grid_width
        pool = self.grid_weights
        return np.array(
            [[pool[rng.randrange(len(pool))] for _ in range(width)] for _ in range(length)],
            dtype=np.int64,
        )

    def _build_initial_path(self, rng: RNG, weights: np.ndarray) -> list[Coord]:
        # Start and end sit on the boundaries of the middle third of the grid,
        # which leaves the path room to wander around.
        left = weights.shape[0] // 3
        right = 2 * left
        bottom = weights.shape[1] // 3
        top = 2 * bottom
        start = Coord(left, rng.randrange(bottom, top))
        end = Coord(right, rng.randrange(bottom, top))
        if rng.random() < 0.5:
            start, end = end, start

        if start == end:
            return [start]
        return find_weighted_path(weights, start, end)[: self.cell_count]

    def _expand_path(
        self,
        rng: RNG,
        path: list[Coord],
        links: list[Link],
        start: Coord,
        end: Coord,
    ) -> None:
        """Branch new cells off the path until it holds cell_count cells.

        New cells are inserted in the second-to-last spot so the end cell
        stays last. Modifies `path` and `links` in place.
        """
        occupied = set(path)
        cells_left = self.cell_count - len(path)
        directions = list(Coord.DIRECTIONS)
        attempt_limit = config.BRANCH_ATTEMPT_FACTOR * self.cell_count
        fruitless_attempts = 0
        branch_count = 0
        extra_link_count = 0

        while cells_left > 0:
            rng.shuffle(directions)
            branch_cell = path[self._pick_branch_index(rng, len(path))]
            new_cell = next(
                (
                    branch_cell + direction
                    for direction in directions
                    if branch_cell + direction not in occupied
                ),
                None,
            )
            if new_cell is None:
                fruitless_attempts += 1
                if fruitless_attempts >= attempt_limit:
                    raise GenerationStalledError(
                        f"Branch expansion stalled with {len(path)} of "
                        f"{self.cell_count} cells placed."
                    )
                continue

            fruitless_attempts = 0
            cells_left -= 1
            branch_count += 1
            path.insert(len(path) - 1, new_cell)
            occupied.add(new_cell)
            links.append(Link(branch_cell, new_cell))

            # The new cell may touch other cells of the maze. Each such
            # neighbor gets an extra link with probability extra_link_proportion.
            for direction in directions:
                adjacent = new_cell + direction
                if adjacent in (branch_cell, start, end) or adjacent not in occupied:
                    continue
                if rng.random() < self.extra_link_proportion:
                    links.append(Link(new_cell, adjacent))
                    extra_link_count += 1

        logger.debug(
            "Branched %d cells, added %d extra links", branch_count, extra_link_count
        )

    @staticmethod
    def _pick_branch_index(rng: RNG, path_length: int) -> int:
        # Only interior cells branch; paths too short to have an interior
        # branch from any cell.
        if path_length > 2:
            return rng.randrange(1, path_length - 1)
        return rng.randrange(path_length)
