"""Maze-driven atlas generation.

This is the plumbing for maze-style level generation as found in many action
RPGs. Charts are blocks of the final map. The cells of a maze determine the
number and placement of the blocks relative to each other, and the links
between cells determine which blocks open onto their neighbors. A chart
provider maps cells to charts (carving the required openings), and a content
strategy later turns markers into content.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import numpy as np

from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.util.rng import RNGProvider

from .atlas import Atlas
from .chart import Chart
from .compositor import compose_maps

if TYPE_CHECKING:
    from mazeatlas.charts.provider import ChartProvider
    from mazeatlas.charts.raw import RawChart
    from mazeatlas.maze.generators.base import MazeGenerator
    from mazeatlas.maze.maze import Maze
    from mazeatlas.types import RandomSeed

logger = logging.getLogger(__name__)

# (maps, offsets) -> global map
type MapCompositor = Callable[[Sequence[np.ndarray], Sequence[Coord]], np.ndarray]


class MazeAtlasGenerator:
    """Runs maze generation, chart selection and stitching to build an Atlas.

    Example:
        generator = MazeAtlasGenerator(
            maze_generator=BranchingPathGenerator(3, 2, cell_count=12),
            chart_provider=AutoConnectChartProvider(
                entrances, exits, fillers, chart_length=16, chart_width=16
            ),
            seed=12345,
        )
        atlas = generator.generate()

    Attributes:
        maze_generator: Produces the maze layout. Reseeded on every generate().
        chart_provider: Assigns a chart to every maze cell. Reseeded on every
            generate().
        seed: Master seed; the same seed reproduces the same atlas.
        compositor: Stitches local chart maps into the global map.
    """

    def __init__(
        self,
        maze_generator: MazeGenerator,
        chart_provider: ChartProvider,
        seed: RandomSeed = 0,
        compositor: MapCompositor = compose_maps,
    ) -> None:
        if maze_generator is None:
            raise InvalidArgumentError("maze_generator must not be None.")
        if chart_provider is None:
            raise InvalidArgumentError("chart_provider must not be None.")
        self.maze_generator = maze_generator
        self.chart_provider = chart_provider
        self.seed = seed
        self.compositor = compositor

    def generate(self, seed: RandomSeed = None) -> Atlas:
        """Generate an atlas, optionally replacing the stored seed first."""
        if seed is not None:
            self.seed = seed

        provider = RNGProvider(self.seed)
        self.maze_generator.seed = provider.get("atlas.maze").getrandbits(32)
        self.chart_provider.seed = provider.get("atlas.charts").getrandbits(32)

        maze = self.maze_generator.generate()
        logger.debug("Generated %r", maze)
        cells = maze.get_cells()
        offsets = compute_offsets(
            cells, self.chart_provider.chart_length, self.chart_provider.chart_width
        )
        raw_charts = self._extract_charts(maze, cells)
        global_map = self.compositor([chart.tiles for chart in raw_charts], offsets)
        charts = [
            Chart(raw_chart, offset)
            for raw_chart, offset in zip(raw_charts, offsets, strict=True)
        ]
        atlas = Atlas(charts, global_map)
        logger.info(
            "Assembled atlas with %d charts, global map %s", len(atlas), global_map.shape
        )
        return atlas

    def _extract_charts(self, maze: Maze, cells: Sequence[Coord]) -> list[RawChart]:
        chart_table = self.chart_provider.get_charts(maze)
        missing = [cell for cell in cells if cell not in chart_table]
        if missing:
            raise InvalidArgumentError(
                f"Chart provider returned no chart for cells: {missing}"
            )
        expected = (self.chart_provider.chart_length, self.chart_provider.chart_width)
        charts = [chart_table[cell] for cell in cells]
        for cell, chart in zip(cells, charts, strict=True):
            if chart.tiles.shape != expected:
                raise InvalidArgumentError(
                    f"Chart for cell {cell} is {chart.tiles.shape}, expected {expected}."
                )
        return charts


def compute_offsets(cells: Sequence[Coord], length: int, width: int) -> list[Coord]:
    """Pixel offsets for maze cells, in the same order as `cells`.

    Cell coordinates are shifted so the minimum x and y are zero, then scaled
    by the chart dimensions. Distinct cells therefore get disjoint tiles.
    """
    if not cells:
        raise InvalidArgumentError("cells must not be empty.")
    if length < 1 or width < 1:
        raise InvalidArgumentError("Chart dimensions must be at least 1.")
    x_min = min(cell.x for cell in cells)
    y_min = min(cell.y for cell in cells)
    return [Coord((cell.x - x_min) * length, (cell.y - y_min) * width) for cell in cells]
