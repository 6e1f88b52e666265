"""Stitching chart maps into one global map."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from mazeatlas import config
from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.tile_types import TileTypeID


def compose_maps(
    maps: Sequence[np.ndarray],
    offsets: Sequence[Coord],
    fill: TileTypeID = config.ATLAS_FILL_TILE,
) -> np.ndarray:
    """Copy each local map into a shared global map at its offset.

    The global map spans the bounding box of every placed map, anchored at the
    origin. Tiles no map covers hold `fill`.

    Raises:
        InvalidArgumentError: If the inputs are empty or of different lengths,
            an offset is negative, or two maps overlap.
    """
    if len(maps) != len(offsets):
        raise InvalidArgumentError(
            f"Got {len(maps)} maps but {len(offsets)} offsets."
        )
    if not maps:
        raise InvalidArgumentError("Need at least one map to compose.")

    arrays = [np.asarray(tiles) for tiles in maps]
    for offset in offsets:
        if offset.x < 0 or offset.y < 0:
            raise InvalidArgumentError(f"Offset {offset} is negative.")

    length = max(offset.x + tiles.shape[0] for tiles, offset in zip(arrays, offsets, strict=True))
    width = max(offset.y + tiles.shape[1] for tiles, offset in zip(arrays, offsets, strict=True))
    global_map = np.full((length, width), fill_value=fill, dtype=np.uint8, order="F")
    covered = np.zeros((length, width), dtype=bool, order="F")

    for tiles, offset in zip(arrays, offsets, strict=True):
        x_slice = slice(offset.x, offset.x + tiles.shape[0])
        y_slice = slice(offset.y, offset.y + tiles.shape[1])
        if covered[x_slice, y_slice].any():
            raise InvalidArgumentError(f"Map at offset {offset} overlaps another map.")
        covered[x_slice, y_slice] = True
        global_map[x_slice, y_slice] = tiles

    return global_map
