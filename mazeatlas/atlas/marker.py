"""Markers placed in atlas space."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from mazeatlas.errors import InvalidArgumentError, MarkerAlreadyUsedError

if TYPE_CHECKING:
    from mazeatlas.charts.raw import RawMarker
    from mazeatlas.maze.coords import Coord
    from mazeatlas.types import MarkerPos, MarkerRect, MarkerSize


class Marker:
    """An immutable projection of a RawMarker into atlas coordinates.

    The only mutable state is `used`, which a content strategy flips exactly
    once by calling use() after it has placed content at the marker. Concurrent
    consumers must serialize their calls to use().
    """

    __slots__ = (
        "_category",
        "_global_position",
        "_local_position",
        "_metadata",
        "_preset",
        "_size",
        "_used",
    )

    def __init__(self, marker: RawMarker, offset: Coord) -> None:
        if marker is None:
            raise InvalidArgumentError("marker must not be None.")
        self._category = marker.category
        self._preset = marker.preset
        self._size: MarkerSize = (float(marker.size[0]), float(marker.size[1]))
        self._local_position: MarkerPos = (
            float(marker.position[0]),
            float(marker.position[1]),
        )
        self._global_position: MarkerPos = (
            self._local_position[0] + offset.x,
            self._local_position[1] + offset.y,
        )
        self._metadata: Mapping[str, str] = MappingProxyType(dict(marker.metadata))
        self._used = False

    @property
    def category(self) -> str:
        return self._category

    @property
    def preset(self) -> str:
        return self._preset

    @property
    def local_position(self) -> MarkerPos:
        """Position relative to the chart's own origin."""
        return self._local_position

    @property
    def global_position(self) -> MarkerPos:
        """Position on the atlas's global map: local position plus chart offset."""
        return self._global_position

    @property
    def size(self) -> MarkerSize:
        return self._size

    @property
    def rect(self) -> MarkerRect:
        """(x, y, length, width) of the marker in global coordinates."""
        return (*self._global_position, *self._size)

    @property
    def metadata(self) -> Mapping[str, str]:
        """Read-only view of the marker's metadata."""
        return self._metadata

    @property
    def used(self) -> bool:
        return self._used

    def use(self) -> None:
        """Mark this marker as consumed.

        Raises:
            MarkerAlreadyUsedError: If the marker was already used.
        """
        if self._used:
            raise MarkerAlreadyUsedError("Marker already used.")
        self._used = True

    def has_metadata(self, key: str, value: str | None = None) -> bool:
        """True if the metadata has `key` (and, if given, maps it to `value`)."""
        if key not in self._metadata:
            return False
        return value is None or self._metadata[key] == value

    def __repr__(self) -> str:
        return (
            f"Marker(preset={self._preset!r}, category={self._category!r}, "
            f"global_position={self._global_position}, used={self._used})"
        )
