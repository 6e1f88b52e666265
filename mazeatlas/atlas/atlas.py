"""The assembled atlas: non-overlapping charts plus one composed global map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import numpy as np

from mazeatlas.errors import InvalidArgumentError

from .chart import Chart
from .marker import Marker

if TYPE_CHECKING:
    from mazeatlas.maze.coords import Coord


class Atlas:
    """An ordered collection of charts and the global map they tile.

    Charts are disjoint, axis-aligned tiles on a shared integer grid. The
    atlas is immutable apart from the `used` flags of its markers.
    """

    __slots__ = ("_charts", "_global_map")

    def __init__(self, charts: Iterable[Chart], global_map: np.ndarray) -> None:
        if global_map is None:
            raise InvalidArgumentError("global_map must not be None.")
        if charts is None:
            raise InvalidArgumentError("charts must not be None.")
        self._charts = tuple(charts)
        if any(chart is None for chart in self._charts):
            raise InvalidArgumentError("None chart passed to atlas constructor.")
        global_map = np.array(global_map, copy=True, order="F")
        global_map.flags.writeable = False
        self._global_map = global_map

    @property
    def charts(self) -> tuple[Chart, ...]:
        """Each chart is a piece of the global map with its content markers."""
        return self._charts

    @property
    def global_map(self) -> np.ndarray:
        """The entire map this atlas corresponds to (read-only), indexed [x, y]."""
        return self._global_map

    def __len__(self) -> int:
        return len(self._charts)

    def __iter__(self) -> Iterator[Chart]:
        return iter(self._charts)

    def is_contained_in_atlas(self, coord: Coord) -> bool:
        """Does this coordinate belong to some chart?

        This is stronger than being a valid index into the global map: the
        global map's bounding box can include tiles no chart covers.
        """
        return any(chart.contains(coord.x, coord.y) for chart in self._charts)

    def get_chart_at(self, coord: Coord) -> Chart | None:
        """The chart covering this coordinate, or None."""
        for chart in self._charts:
            if chart.contains(coord.x, coord.y):
                return chart
        return None

    def get_adjacent_charts(self, chart: Chart) -> list[Chart]:
        """Charts sharing an edge with `chart` (horizontally or vertically, not diagonally)."""
        if chart is None:
            raise InvalidArgumentError("chart must not be None.")
        return [
            other
            for other in self._charts
            if _are_adjacent(chart.offset, other.offset, chart.length, chart.width)
        ]

    # -------------------------------------------------------------------------
    # Enumeration and filtering helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def enumerate_markers(charts: Iterable[Chart]) -> list[Marker]:
        """All the markers of these charts as one flat list."""
        _require(charts, "charts")
        return [marker for chart in charts for marker in chart.markers]

    @staticmethod
    def enumerate_unused_markers(charts: Iterable[Chart]) -> list[Marker]:
        """All the unused markers of these charts as one flat list."""
        _require(charts, "charts")
        return [marker for chart in charts for marker in chart.unused_markers]

    @staticmethod
    def filter_charts_by_metadata(
        charts: Iterable[Chart], key: str, value: str | None = None
    ) -> list[Chart]:
        """Charts whose metadata has `key` (mapped to `value`, if given)."""
        _require(charts, "charts")
        _check_key_value(key, value)
        return [chart for chart in charts if chart.has_metadata(key, value)]

    @staticmethod
    def exclude_charts_by_metadata(
        charts: Iterable[Chart], key: str, value: str | None = None
    ) -> list[Chart]:
        """Charts whose metadata does not have `key` (mapped to `value`, if given)."""
        _require(charts, "charts")
        _check_key_value(key, value)
        return [chart for chart in charts if not chart.has_metadata(key, value)]

    @staticmethod
    def filter_markers_by_metadata(
        markers: Iterable[Marker], key: str, value: str | None = None
    ) -> list[Marker]:
        _require(markers, "markers")
        _check_key_value(key, value)
        return [marker for marker in markers if marker.has_metadata(key, value)]

    @staticmethod
    def exclude_markers_by_metadata(
        markers: Iterable[Marker], key: str, value: str | None = None
    ) -> list[Marker]:
        _require(markers, "markers")
        _check_key_value(key, value)
        return [marker for marker in markers if not marker.has_metadata(key, value)]

    def __repr__(self) -> str:
        return f"Atlas(charts={len(self._charts)}, map_shape={self._global_map.shape})"


def _are_adjacent(offset_a: Coord, offset_b: Coord, length: int, width: int) -> bool:
    delta = (offset_b - offset_a).abs()
    return (delta.x == length and delta.y == 0) or (delta.y == width and delta.x == 0)


def _require(items: object, name: str) -> None:
    if items is None:
        raise InvalidArgumentError(f"{name} must not be None.")


def _check_key_value(key: str, value: str | None) -> None:
    if not key:
        raise InvalidArgumentError("Key must be a non-empty string.")
    if value is not None and not value:
        raise InvalidArgumentError("Value must be a non-empty string.")
