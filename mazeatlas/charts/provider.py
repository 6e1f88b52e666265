"""Chart providers assign a raw chart to every cell of a maze."""

from __future__ import annotations

import abc
import logging
import random
from collections.abc import Iterable, Sequence

from mazeatlas import config
from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.maze import Maze
from mazeatlas.types import RandomSeed

from .carving import Side, carve_entrances, entrance_span
from .raw import RawChart

logger = logging.getLogger(__name__)


class ChartProvider(abc.ABC):
    """Abstract base class for chart selection.

    Every chart handed out by a provider has the same dimensions,
    (chart_length, chart_width), so that atlas assembly can tile them.
    """

    def __init__(self, chart_length: int, chart_width: int, seed: RandomSeed = None) -> None:
        if chart_length < 1 or chart_width < 1:
            raise InvalidArgumentError("Chart dimensions must be at least 1.")
        self.chart_length = chart_length
        self.chart_width = chart_width
        self.seed = seed

    @abc.abstractmethod
    def get_charts(self, maze: Maze) -> dict[Coord, RawChart]:
        """Assign a chart to each cell in the maze."""
        raise NotImplementedError


class AutoConnectChartProvider(ChartProvider):
    """Picks charts by cell tag and carves entrances matching the maze's links.

    Cells tagged "start" draw from the entrance pool, cells tagged "end" from
    the exit pool, and every other cell from the filler pool. An empty
    entrance or exit pool falls back to the filler pool. Each chosen chart
    gets an opening of `opening_length` tiles centered on every side the maze
    reports open.
    """

    def __init__(
        self,
        entrance_charts: Iterable[RawChart],
        exit_charts: Iterable[RawChart],
        filler_charts: Iterable[RawChart],
        chart_length: int,
        chart_width: int,
        *,
        opening_length: int = config.DEFAULT_OPENING_LENGTH,
        seed: RandomSeed = None,
    ) -> None:
        super().__init__(chart_length, chart_width, seed)
        if opening_length < 1:
            raise InvalidArgumentError("opening_length must be at least 1.")
        self.entrance_charts = _as_pool(entrance_charts, "entrance_charts")
        self.exit_charts = _as_pool(exit_charts, "exit_charts")
        self.filler_charts = _as_pool(filler_charts, "filler_charts")
        self.opening_length = opening_length

    def validate(self) -> None:
        """Raise InvalidArgumentError if the pools can't tile a maze."""
        if not self.filler_charts:
            raise InvalidArgumentError("No filler charts.")
        # Opening must fit on both the horizontal and vertical edges.
        entrance_span(min(self.chart_length, self.chart_width), self.opening_length)
        expected = (self.chart_length, self.chart_width)
        for pool_name, pool in (
            ("filler", self.filler_charts),
            ("entrance", self.entrance_charts),
            ("exit", self.exit_charts),
        ):
            for chart in pool:
                if chart is None:
                    raise InvalidArgumentError(f"None chart in {pool_name} pool.")
                if chart.tiles is None:
                    raise InvalidArgumentError(f"Chart with None map in {pool_name} pool.")
                if chart.tiles.shape != expected:
                    raise InvalidArgumentError(
                        f"Charts with maps of inconsistent size: {pool_name} chart "
                        f"{chart.name!r} is {chart.tiles.shape}, expected {expected}."
                    )

    def get_charts(self, maze: Maze) -> dict[Coord, RawChart]:
        self.validate()
        rng = random.Random(self.seed)
        charts_by_cell: dict[Coord, RawChart] = {}
        for cell in maze.get_cells():
            candidates = self._candidates_for(maze, cell)
            chart = candidates[rng.randrange(len(candidates))]
            charts_by_cell[cell] = self._carve(chart, maze, cell)
        return charts_by_cell

    def _candidates_for(self, maze: Maze, cell: Coord) -> Sequence[RawChart]:
        if maze.has_tag(cell):
            tag = maze.get_tag(cell)
            if config.START_TAG in tag:
                return self._pool_or_filler(self.entrance_charts, "entrance")
            if config.END_TAG in tag:
                return self._pool_or_filler(self.exit_charts, "exit")
        return self.filler_charts

    def _pool_or_filler(self, pool: Sequence[RawChart], pool_name: str) -> Sequence[RawChart]:
        if pool:
            return pool
        logger.warning("Empty %s chart pool, using filler charts instead", pool_name)
        return self.filler_charts

    def _carve(self, chart: RawChart, maze: Maze, cell: Coord) -> RawChart:
        sides = open_sides(maze, cell)
        return chart.with_tiles(carve_entrances(chart.tiles, sides, self.opening_length))


def open_sides(maze: Maze, cell: Coord) -> list[Side]:
    """The chart sides that must be opened for a maze cell."""
    sides = []
    if maze.is_bottom_open(cell):
        sides.append(Side.BOTTOM)
    if maze.is_top_open(cell):
        sides.append(Side.TOP)
    if maze.is_left_open(cell):
        sides.append(Side.LEFT)
    if maze.is_right_open(cell):
        sides.append(Side.RIGHT)
    return sides


def _as_pool(charts: Iterable[RawChart], name: str) -> list[RawChart]:
    if charts is None:
        raise InvalidArgumentError(f"{name} must not be None.")
    return list(charts)
