"""Content strategies that consume atlas markers."""

from .marker_mapper import MarkerMapper
from .strategy import ContentStrategy
from .weighted import WeightedTable

__all__ = ["ContentStrategy", "MarkerMapper", "WeightedTable"]
