"""
Tile types for chart and atlas maps using the flyweight pattern.

Chart maps are numpy arrays of `TileTypeID` values. The intrinsic properties of
each tile type live once in a structured `TileTypeData` table, and the helper
functions below turn a whole ID map into a property map with one vectorized
lookup.
"""

from enum import IntEnum

import numpy as np


class TileTypeID(IntEnum):
    """Integer IDs stored in map arrays. WALL is 0 so zeroed arrays are solid."""

    WALL = 0
    FLOOR = 1


# Intrinsic data for a *type* of tile (flyweight).
TileTypeData = np.dtype(
    [
        ("walkable", bool),
        ("glyph", "U1"),  # Character used by text previews
        ("gray", np.uint8),  # Luminance used when writing maps as images
    ]
)


def make_tile_type_data(
    *,
    walkable: bool,
    glyph: str,
    gray: int,
) -> np.ndarray:
    """Create a TileTypeData instance."""
    return np.array((walkable, glyph, gray), dtype=TileTypeData)


# Indexed by TileTypeID.
_tile_type_data = np.array(
    [
        make_tile_type_data(walkable=False, glyph="#", gray=0),
        make_tile_type_data(walkable=True, glyph=".", gray=255),
    ],
    dtype=TileTypeData,
)


def get_walkable_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """Convert a map of TileTypeIDs into a boolean map of walkability."""
    return _tile_type_data["walkable"][tile_type_ids_map]


def get_glyph_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """Convert a map of TileTypeIDs into a map of single-character glyphs."""
    return _tile_type_data["glyph"][tile_type_ids_map]


def get_gray_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """Convert a map of TileTypeIDs into a uint8 luminance map."""
    return _tile_type_data["gray"][tile_type_ids_map]
