"""Charts placed in atlas space."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from mazeatlas.errors import InvalidArgumentError

from .marker import Marker

if TYPE_CHECKING:
    from mazeatlas.charts.raw import RawChart
    from mazeatlas.maze.coords import Coord
    from mazeatlas.types import PixelRect


class Chart:
    """An immutable view of a RawChart placed at an offset in the atlas.

    Holds a read-only copy of the chart's local map, its markers projected
    into global coordinates, and its flattened metadata.
    """

    __slots__ = ("_markers", "_metadata", "_name", "_offset", "_tiles")

    def __init__(self, chart: RawChart, offset: Coord) -> None:
        if chart is None:
            raise InvalidArgumentError("chart must not be None.")
        if chart.tiles is None:
            raise InvalidArgumentError("Chart has invalid (None) map.")
        tiles = np.array(chart.tiles, copy=True, order="F")
        tiles.flags.writeable = False
        self._tiles = tiles
        self._name = chart.name
        self._offset = offset
        self._markers = tuple(Marker(marker, offset) for marker in chart.markers)
        self._metadata: Mapping[str, str] = MappingProxyType(dict(chart.metadata))

    @property
    def tiles(self) -> np.ndarray:
        """The chart's local map (read-only), indexed [x, y]."""
        return self._tiles

    @property
    def name(self) -> str:
        return self._name

    @property
    def offset(self) -> Coord:
        """Position of the chart's local origin on the global map."""
        return self._offset

    @property
    def length(self) -> int:
        return self._tiles.shape[0]

    @property
    def width(self) -> int:
        return self._tiles.shape[1]

    @property
    def rect(self) -> PixelRect:
        """(x, y, length, width) of the chart on the global map."""
        return (self._offset.x, self._offset.y, self.length, self.width)

    @property
    def markers(self) -> tuple[Marker, ...]:
        return self._markers

    @property
    def used_markers(self) -> list[Marker]:
        return [marker for marker in self._markers if marker.used]

    @property
    def unused_markers(self) -> list[Marker]:
        return [marker for marker in self._markers if not marker.used]

    @property
    def metadata(self) -> Mapping[str, str]:
        """Read-only view of the chart's metadata."""
        return self._metadata

    def contains(self, x: int, y: int) -> bool:
        """True if global position (x, y) lies in this chart's [offset, offset + size) rect."""
        return (
            self._offset.x <= x < self._offset.x + self.length
            and self._offset.y <= y < self._offset.y + self.width
        )

    def has_metadata(self, key: str, value: str | None = None) -> bool:
        """True if the metadata has `key` (and, if given, maps it to `value`)."""
        if key not in self._metadata:
            return False
        return value is None or self._metadata[key] == value

    def __repr__(self) -> str:
        return (
            f"Chart(name={self._name!r}, offset={self._offset}, "
            f"size=({self.length}, {self.width}), markers={len(self._markers)})"
        )
