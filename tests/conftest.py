from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from mazeatlas.charts.raw import RawChart, RawMarker
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.link import Link
from mazeatlas.maze.maze import Maze
from mazeatlas.tile_types import TileTypeID

type ChartFactory = Callable[..., RawChart]


def solid_tiles(length: int, width: int) -> np.ndarray:
    """An all-wall map of the given size."""
    return np.full((length, width), TileTypeID.WALL, dtype=np.uint8, order="F")


@pytest.fixture
def make_chart() -> ChartFactory:
    """Factory for solid raw charts, optionally with one marker."""

    def _make(
        length: int = 8,
        width: int = 8,
        *,
        name: str = "",
        preset: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> RawChart:
        markers = []
        if preset is not None:
            markers.append(RawMarker((1.5, 2.5), (1, 1), category="test", preset=preset))
        return RawChart(solid_tiles(length, width), markers, metadata or {}, name=name)

    return _make


@pytest.fixture
def l_shaped_maze() -> Maze:
    """Three cells in an L: (0,0)-(1,0) and (1,0)-(1,1)."""
    a, b, c = Coord(0, 0), Coord(1, 0), Coord(1, 1)
    return Maze([a, b, c], [Link(a, b), Link(b, c)])
