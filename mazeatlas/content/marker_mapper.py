"""A simple content strategy keyed on marker presets."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from mazeatlas.errors import InvalidArgumentError

from .strategy import ContentStrategy

if TYPE_CHECKING:
    from mazeatlas.atlas.atlas import Atlas
    from mazeatlas.atlas.chart import Chart
    from mazeatlas.atlas.marker import Marker
    from mazeatlas.types import MarkerPos

logger = logging.getLogger(__name__)


class MarkerMapper[T](ContentStrategy):
    """Places one kind of content per marker preset.

    For every unused marker whose preset appears in `presets`, the matching
    value is handed to `place` together with the marker and its placement
    position, and the marker is then marked used.

    Args:
        presets: Maps marker preset names to the content to place for them.
        place: Callback ``place(value, marker, position)`` that creates the content.
        charts_to_skip: Charts whose metadata matches any entry here are
            skipped. The key is required; an empty value acts as a wildcard,
            so ``{"density": ""}`` skips every chart with a density key while
            ``{"density": "high"}`` only skips the exact pair.
        clamp_to_grid: Truncate positions onto the integer grid, e.g.
            (3.4, 5.9) -> (3, 5).
    """

    def __init__(
        self,
        presets: Mapping[str, T],
        place: Callable[[T, Marker, MarkerPos], None],
        *,
        charts_to_skip: Mapping[str, str] | None = None,
        clamp_to_grid: bool = False,
    ) -> None:
        if presets is None:
            raise InvalidArgumentError("presets must not be None.")
        if place is None:
            raise InvalidArgumentError("place must not be None.")
        self.presets = dict(presets)
        self.place = place
        self.charts_to_skip = dict(charts_to_skip) if charts_to_skip else {}
        self.clamp_to_grid = clamp_to_grid

    def generate_content(self, atlas: Atlas) -> None:
        markers = [
            marker
            for chart in atlas.charts
            if not self._should_skip(chart)
            for marker in chart.unused_markers
            if marker.preset in self.presets
        ]
        for marker in markers:
            self.place(self.presets[marker.preset], marker, self.compute_position(marker))
            marker.use()
        logger.debug("Placed content for %d markers", len(markers))

    def compute_position(self, marker: Marker) -> MarkerPos:
        x, y = marker.global_position
        if self.clamp_to_grid:
            return (float(math.trunc(x)), float(math.trunc(y)))
        return (x, y)

    def _should_skip(self, chart: Chart) -> bool:
        return any(
            key in self.charts_to_skip
            and self.charts_to_skip[key] in ("", value)
            for key, value in chart.metadata.items()
        )
