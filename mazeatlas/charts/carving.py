"""Carving entrances into chart maps so neighboring charts connect.

An entrance is a run of floor tiles centered on one edge of the chart. Each
tile of the run is tunnelled inward from the edge until it meets floor that
was already there, or until it reaches the middle of the chart. Because every
chart in an atlas has the same dimensions, the entrances on two facing edges
line up exactly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum, auto

import numpy as np

from mazeatlas.errors import InvalidArgumentError
from mazeatlas.tile_types import TileTypeID, get_walkable_map


class Side(Enum):
    """An edge of a chart. TOP is the edge at the largest y."""

    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()


def entrance_span(edge_length: int, opening_length: int) -> range:
    """Indices along an edge covered by an opening centered on it."""
    if opening_length < 1:
        raise InvalidArgumentError("opening_length must be at least 1.")
    if opening_length > edge_length:
        raise InvalidArgumentError(
            f"opening_length {opening_length} does not fit an edge of {edge_length}."
        )
    start = (edge_length - opening_length) // 2
    return range(start, start + opening_length)


def carve_entrances(
    tiles: np.ndarray, sides: Iterable[Side], opening_length: int
) -> np.ndarray:
    """Return a copy of `tiles` with an entrance carved into each given side."""
    carved = np.array(tiles, copy=True, order="F")
    length, width = carved.shape
    for side in sides:
        edge_length = width if side in (Side.LEFT, Side.RIGHT) else length
        for offset in entrance_span(edge_length, opening_length):
            _carve_lane(carved, _lane(side, offset, length, width))
    return carved


def _lane(side: Side, offset: int, length: int, width: int) -> Iterator[tuple[int, int]]:
    """Tiles from the edge to the middle of the chart, perpendicular to `side`."""
    match side:
        case Side.LEFT:
            return ((x, offset) for x in range(0, length // 2 + 1))
        case Side.RIGHT:
            return ((x, offset) for x in range(length - 1, (length - 1) // 2 - 1, -1))
        case Side.BOTTOM:
            return ((offset, y) for y in range(0, width // 2 + 1))
        case Side.TOP:
            return ((offset, y) for y in range(width - 1, (width - 1) // 2 - 1, -1))
        case _:
            raise InvalidArgumentError(f"Unknown side: {side}")


def _carve_lane(tiles: np.ndarray, lane: Iterable[tuple[int, int]]) -> None:
    for i, (x, y) in enumerate(lane):
        # Stop once the lane reaches walkable space that was already open.
        if i > 0 and get_walkable_map(tiles[x, y]):
            break
        tiles[x, y] = TileTypeID.FLOOR
