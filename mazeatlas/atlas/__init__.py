"""Atlas assembly: placed charts, placed markers and the global map."""

from .assembly import MapCompositor, MazeAtlasGenerator, compute_offsets
from .atlas import Atlas
from .chart import Chart
from .compositor import compose_maps
from .marker import Marker

__all__ = [
    "Atlas",
    "Chart",
    "MapCompositor",
    "Marker",
    "MazeAtlasGenerator",
    "compose_maps",
    "compute_offsets",
]
