from __future__ import annotations

import numpy as np
import pytest

from mazeatlas.atlas.chart import Chart
from mazeatlas.charts.raw import RawChart, RawMarker
from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord


def _raw_chart() -> RawChart:
    return RawChart(
        np.zeros((6, 4), dtype=np.uint8),
        [RawMarker((1, 1), (1, 1), preset="a"), RawMarker((2, 3), (1, 1), preset="b")],
        {"biome": "cave"},
        name="cave-1",
    )


def test_chart_geometry() -> None:
    chart = Chart(_raw_chart(), Coord(12, 8))
    assert chart.length == 6
    assert chart.width == 4
    assert chart.rect == (12, 8, 6, 4)
    assert chart.name == "cave-1"


def test_contains_is_half_open() -> None:
    chart = Chart(_raw_chart(), Coord(12, 8))
    assert chart.contains(12, 8)
    assert chart.contains(17, 11)
    assert not chart.contains(18, 8)
    assert not chart.contains(12, 12)
    assert not chart.contains(11, 8)


def test_markers_are_projected() -> None:
    chart = Chart(_raw_chart(), Coord(12, 8))
    assert [m.global_position for m in chart.markers] == [(13.0, 9.0), (14.0, 11.0)]
    chart.markers[0].use()
    assert [m.preset for m in chart.used_markers] == ["a"]
    assert [m.preset for m in chart.unused_markers] == ["b"]


def test_chart_is_isolated_from_raw_chart() -> None:
    raw = _raw_chart()
    chart = Chart(raw, Coord.ZERO)
    raw.tiles[0, 0] = 1
    raw.metadata["biome"] = "ice"
    raw.add_marker(RawMarker((0, 0), (1, 1)))
    assert chart.tiles[0, 0] == 0
    assert chart.metadata["biome"] == "cave"
    assert len(chart.markers) == 2
    with pytest.raises(ValueError):
        chart.tiles[0, 0] = 1


def test_none_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        Chart(None, Coord.ZERO)  # type: ignore[arg-type]
