from __future__ import annotations

import numpy as np
import pytest

from mazeatlas.atlas.assembly import MazeAtlasGenerator, compute_offsets
from mazeatlas.charts.provider import AutoConnectChartProvider, ChartProvider
from mazeatlas.charts.raw import RawChart
from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.generators import (
    BranchingPathGenerator,
    StaticMazeGenerator,
    SymmetryTransformGenerator,
)
from mazeatlas.maze.link import Link
from mazeatlas.maze.maze import Maze
from mazeatlas.tile_types import TileTypeID

CHART_LENGTH = 8
CHART_WIDTH = 6


@pytest.fixture
def provider(make_chart) -> AutoConnectChartProvider:
    return AutoConnectChartProvider(
        [make_chart(CHART_LENGTH, CHART_WIDTH, name="entrance", preset="player")],
        [make_chart(CHART_LENGTH, CHART_WIDTH, name="exit", preset="stairs")],
        [
            make_chart(CHART_LENGTH, CHART_WIDTH, name="room", preset="rat"),
            make_chart(CHART_LENGTH, CHART_WIDTH, name="hall"),
        ],
        CHART_LENGTH,
        CHART_WIDTH,
        opening_length=2,
    )


def _branching() -> SymmetryTransformGenerator:
    return SymmetryTransformGenerator(BranchingPathGenerator(3, 2, cell_count=10))


class TestComputeOffsets:
    def test_normalized_and_scaled(self) -> None:
        cells = [Coord(-2, 5), Coord(-1, 5), Coord(-1, 6)]
        assert compute_offsets(cells, 10, 4) == [Coord(0, 0), Coord(10, 0), Coord(10, 4)]

    def test_invalid(self) -> None:
        with pytest.raises(InvalidArgumentError):
            compute_offsets([], 4, 4)
        with pytest.raises(InvalidArgumentError):
            compute_offsets([Coord.ZERO], 0, 4)


def test_atlas_has_one_chart_per_cell(provider: AutoConnectChartProvider) -> None:
    atlas = MazeAtlasGenerator(_branching(), provider, seed=3).generate()
    assert len(atlas) == 10
    for chart in atlas:
        assert (chart.length, chart.width) == (CHART_LENGTH, CHART_WIDTH)
        assert chart.offset.x % CHART_LENGTH == 0
        assert chart.offset.y % CHART_WIDTH == 0


def test_charts_do_not_overlap(provider: AutoConnectChartProvider) -> None:
    atlas = MazeAtlasGenerator(_branching(), provider, seed=9).generate()
    offsets = [chart.offset for chart in atlas]
    assert len(set(offsets)) == len(offsets)
    assert min(o.x for o in offsets) == 0
    assert min(o.y for o in offsets) == 0


def test_global_map_matches_chart_tiles(provider: AutoConnectChartProvider) -> None:
    atlas = MazeAtlasGenerator(_branching(), provider, seed=21).generate()
    for chart in atlas:
        x, y, length, width = chart.rect
        assert np.array_equal(atlas.global_map[x : x + length, y : y + width], chart.tiles)


def test_marker_positions_are_offset(provider: AutoConnectChartProvider) -> None:
    atlas = MazeAtlasGenerator(_branching(), provider, seed=4).generate()
    for chart in atlas:
        for marker in chart.markers:
            lx, ly = marker.local_position
            gx, gy = marker.global_position
            assert (gx, gy) == (lx + chart.offset.x, ly + chart.offset.y)
            assert atlas.get_chart_at(Coord(int(gx), int(gy))) is chart


def test_neighboring_charts_connect_through_openings(
    provider: AutoConnectChartProvider,
) -> None:
    """Floor crosses the seam between two charts exactly where the maze has a link."""
    a, b, c = Coord(0, 0), Coord(1, 0), Coord(1, 1)
    maze = Maze([a, b, c], [Link(a, b), Link(b, c)])
    atlas = MazeAtlasGenerator(StaticMazeGenerator.from_maze(maze), provider).generate()
    floor = TileTypeID.FLOOR
    global_map = atlas.global_map

    # a|b seam is vertical at x = 8; the horizontal opening spans y in [2, 4).
    seam = CHART_LENGTH
    assert (global_map[seam - 1, 2:4] == floor).all()
    assert (global_map[seam, 2:4] == floor).all()
    # b/c seam is horizontal at y = 6; opening spans x in [8 + 3, 8 + 5).
    seam = CHART_WIDTH
    assert (global_map[11:13, seam - 1] == floor).all()
    assert (global_map[11:13, seam] == floor).all()
    # No link between a and the empty tile above it.
    assert (global_map[0:CHART_LENGTH, CHART_WIDTH:] == TileTypeID.WALL).all()


def test_same_seed_same_atlas(provider: AutoConnectChartProvider) -> None:
    first = MazeAtlasGenerator(_branching(), provider, seed=77).generate()
    second = MazeAtlasGenerator(_branching(), provider, seed=77).generate()
    assert np.array_equal(first.global_map, second.global_map)
    assert [c.offset for c in first] == [c.offset for c in second]
    assert [c.name for c in first] == [c.name for c in second]


def test_generate_seed_argument_replaces_stored_seed(
    provider: AutoConnectChartProvider,
) -> None:
    generator = MazeAtlasGenerator(_branching(), provider, seed=1)
    via_argument = generator.generate(seed=55)
    assert generator.seed == 55
    stored = MazeAtlasGenerator(_branching(), provider, seed=55).generate()
    assert np.array_equal(via_argument.global_map, stored.global_map)


def test_custom_compositor(provider: AutoConnectChartProvider) -> None:
    calls = []

    def compositor(maps, offsets) -> np.ndarray:
        calls.append(len(maps))
        return np.zeros((1, 1), dtype=np.uint8)

    atlas = MazeAtlasGenerator(
        StaticMazeGenerator(), provider, compositor=compositor
    ).generate()
    assert calls == [1]
    assert atlas.global_map.shape == (1, 1)


class _IncompleteProvider(ChartProvider):
    def get_charts(self, maze: Maze) -> dict[Coord, RawChart]:
        return {}


def test_missing_chart_rejected() -> None:
    generator = MazeAtlasGenerator(StaticMazeGenerator(), _IncompleteProvider(4, 4))
    with pytest.raises(InvalidArgumentError):
        generator.generate()


def test_none_arguments_rejected(provider: AutoConnectChartProvider) -> None:
    with pytest.raises(InvalidArgumentError):
        MazeAtlasGenerator(None, provider)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        MazeAtlasGenerator(StaticMazeGenerator(), None)  # type: ignore[arg-type]
