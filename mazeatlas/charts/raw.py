"""Authoring-time charts and markers, before they are placed in an atlas.

A raw chart is a content tile: a small local map plus markers describing where
content can go. Markers specify at a minimum a position, a size and a
user-chosen category, and can carry arbitrary string metadata. Both are
mutable while being authored; atlas assembly projects them into the immutable
`Chart` and `Marker` types.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.maze import MetaData
from mazeatlas.types import MarkerPos, MarkerSize


@dataclass(eq=False)
class RawMarker:
    """A transient, pre-placement marker in chart-local coordinates.

    Attributes:
        position: Local position within the chart.
        size: Extent of the marker along x and y.
        category: User-specified grouping, e.g. "enemy" or "loot".
        preset: Named preset that content strategies key on.
        metadata: Arbitrary string key/value pairs.
    """

    position: MarkerPos
    size: MarkerSize
    category: str = ""
    preset: str = ""
    metadata: MetaData = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.category is None:
            raise InvalidArgumentError("category must not be None.")
        if self.preset is None:
            raise InvalidArgumentError("preset must not be None.")
        self.position = (float(self.position[0]), float(self.position[1]))
        self.size = (float(self.size[0]), float(self.size[1]))
        self.metadata = dict(self.metadata) if self.metadata is not None else {}

    def deep_copy(self) -> RawMarker:
        return RawMarker(
            self.position, self.size, self.category, self.preset, self.metadata
        )


@dataclass(eq=False)
class RawChart:
    """A content-authoring unit: a local map, its markers and chart metadata.

    Attributes:
        tiles: 2D array of TileTypeID values, shape (length, width), indexed [x, y].
        markers: Content markers in chart-local coordinates.
        metadata: Chart-level string key/value pairs.
        name: Optional human-readable name.
    """

    tiles: np.ndarray
    markers: list[RawMarker] = field(default_factory=list)
    metadata: MetaData = field(default_factory=dict)
    name: str = ""

    def __post_init__(self) -> None:
        if self.tiles is None:
            raise InvalidArgumentError("Chart has invalid (None) map.")
        self.tiles = np.asarray(self.tiles)
        if self.tiles.ndim != 2:
            raise InvalidArgumentError(
                f"Chart map must be 2D, got shape {self.tiles.shape}."
            )
        self.markers = list(self.markers)
        self.metadata = dict(self.metadata) if self.metadata is not None else {}

    @property
    def length(self) -> int:
        return self.tiles.shape[0]

    @property
    def width(self) -> int:
        return self.tiles.shape[1]

    def add_marker(self, marker: RawMarker) -> None:
        if marker is None:
            raise InvalidArgumentError("marker must not be None.")
        self.markers.append(marker)

    def remove_marker(self, marker: RawMarker) -> None:
        if marker is None:
            raise InvalidArgumentError("marker must not be None.")
        for i, existing in enumerate(self.markers):
            if existing is marker:
                del self.markers[i]
                return
        raise InvalidArgumentError("This chart does not contain the marker.")

    def remove_all_markers(self) -> None:
        self.markers.clear()

    def with_tiles(self, tiles: np.ndarray) -> RawChart:
        """A new chart with the same markers, metadata and name but a new map.

        The markers themselves are shared with this chart, not copied.
        """
        return RawChart(tiles, self.markers, self.metadata, self.name)
