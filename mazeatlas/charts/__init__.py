"""Raw charts, chart providers and entrance carving.

- RawChart / RawMarker: authoring-time content tiles and markers
- ChartProvider: assigns a raw chart to every maze cell
- AutoConnectChartProvider: picks charts by cell tag and carves openings
  that match the maze's links
"""

from .carving import Side, carve_entrances, entrance_span
from .image import map_from_image, map_to_image
from .provider import AutoConnectChartProvider, ChartProvider, open_sides
from .raw import RawChart, RawMarker

__all__ = [
    "AutoConnectChartProvider",
    "ChartProvider",
    "RawChart",
    "RawMarker",
    "Side",
    "carve_entrances",
    "entrance_span",
    "map_from_image",
    "map_to_image",
    "open_sides",
]
